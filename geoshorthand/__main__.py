import argparse
import logging
import sys
from typing import Optional, Sequence

from geoshorthand import (
    REFERENCE,
    TranslatorOptions,
    copy_all_text,
    print_results,
    translate,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _read_input(path: Optional[str]) -> str:
    if not path or path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as fin:
        return fin.read()


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Translate geometry shorthand into English")
    parser.add_argument(
        "path",
        nargs="?",
        help="Path to a file with shorthand statements (default: stdin)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print only the translations, one per line",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=TranslatorOptions().max_depth,
        help="Maximum nesting depth for nested statements (default: %(default)s)",
    )
    parser.add_argument(
        "--reference",
        action="store_true",
        help="Print the notation reference and exit",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if args.reference:
        print(REFERENCE)
        return

    try:
        text = _read_input(args.path)
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.path, exc)
        raise SystemExit(1)

    logger.info("Translating %d character(s) of shorthand", len(text))
    results = translate(text, TranslatorOptions(max_depth=args.max_depth))
    logger.info("Produced %d translation(s)", len(results))

    if args.plain:
        print(copy_all_text(results))
    else:
        print(print_results(results), end="")


if __name__ == "__main__":
    main(sys.argv[1:])
