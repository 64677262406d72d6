"""Whole-string rewrite passes applied before shape dispatch.

The passes run in a fixed order: logical connectives, inequalities, theorem
citations, named constants. Casework extraction and proof markers are
structural and are peeled off by the translator before :func:`normalize`
is called.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from .logging_utils import apply_debug_logging
from .tables import DEFAULT_TABLES, CodeTables

logger = logging.getLogger(__name__)

CONSTRUCTION_COLON = ':'


def _pad_replace(text: str, token: str, phrase: str) -> str:
    if token not in text:
        return text
    pattern = re.compile(r'\s*' + re.escape(token) + r'\s*')
    return pattern.sub(lambda _m: phrase, text)


def expand_logic(text: str, tables: Optional[CodeTables] = None) -> str:
    tables = tables or DEFAULT_TABLES
    out = text
    for ascii_code, symbol, phrase in tables.logic:
        out = _pad_replace(out, ascii_code, phrase)
        out = _pad_replace(out, symbol, phrase)
    return out.strip() if out != text else text


def expand_inequalities(text: str, tables: Optional[CodeTables] = None) -> str:
    tables = tables or DEFAULT_TABLES
    out = text
    for alias, symbol in tables.inequality_aliases.items():
        out = out.replace(alias, symbol)
    for symbol, phrase in tables.inequality_phrases.items():
        out = _pad_replace(out, symbol, phrase)
    return out.strip() if out != text else text


def expand_theorems(text: str, tables: Optional[CodeTables] = None) -> str:
    """Replace theorem codes with bracketed citations.

    Only the first occurrence of each code is replaced; a code repeated in
    the same statement keeps its later occurrences verbatim.
    """

    tables = tables or DEFAULT_TABLES
    out = text
    for code, name in tables.theorems.items():
        if code in out:
            out = out.replace(code, f'[by {name}]', 1)
    return out


def expand_constants(text: str, tables: Optional[CodeTables] = None) -> str:
    """Replace named-constant codes unless the code is directly followed by ':'."""

    tables = tables or DEFAULT_TABLES
    out = text
    for code, number in tables.constants.items():
        if code not in out:
            continue
        pattern = re.compile(re.escape(code) + '(?!' + re.escape(CONSTRUCTION_COLON) + ')')
        out = pattern.sub(lambda _m: str(number), out)
    return out


def normalize(text: str, tables: Optional[CodeTables] = None) -> str:
    tables = tables or DEFAULT_TABLES
    out = expand_logic(text, tables)
    out = expand_inequalities(out, tables)
    out = expand_theorems(out, tables)
    return expand_constants(out, tables)


apply_debug_logging(globals(), logger=logger)
