import logging

from geoshorthand import translate, translate_statement
from geoshorthand.logging_utils import apply_debug_logging, debug_log_call


def test_debug_log_call_records_entry_and_result(caplog):
    logger = logging.getLogger("geoshorthand.tests")

    @debug_log_call(logger)
    def double(value):
        return value * 2

    with caplog.at_level(logging.DEBUG, logger="geoshorthand.tests"):
        assert double(3) == 6

    assert "double(3)" in caplog.text
    assert "double -> 6" in caplog.text


def test_debug_log_call_is_silent_above_debug(caplog):
    with caplog.at_level(logging.INFO, logger="geoshorthand.translator"):
        assert translate_statement("P:A") == "Construct point A."
    assert caplog.records == []


def test_translate_logs_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="geoshorthand"):
        translate("P:A/S:AB")

    assert "Translated 2 statement(s)" in caplog.text
    assert "matched rule segment" in caplog.text


def test_apply_debug_logging_skips_private_and_foreign_functions():
    def public():
        return 1

    def _private():
        return 2

    public.__module__ = "fake.module"
    _private.__module__ = "fake.module"
    namespace = {"__name__": "fake.module", "public": public, "_private": _private, "log": logging.log}

    apply_debug_logging(namespace)

    assert getattr(namespace["public"], "_debug_logging_wrapped", False)
    assert namespace["_private"] is _private
    assert namespace["log"] is logging.log
    assert namespace["public"]() == 1
