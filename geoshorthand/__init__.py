from .ast import Statement, TranslationResult
from .casework import Case, Casework, parse_casework
from .normalize import normalize
from .printer import copy_all_text, format_result, print_results
from .reference import NOTATION, REFERENCE, get_reference
from .splitter import split_statements
from .tables import DEFAULT_TABLES, CodeTables
from .translator import (
    TranslationDepthError,
    TranslatorOptions,
    classify,
    get_translator_options,
    set_translator_options,
    translate,
    translate_statement,
    translate_with_shape,
)

__all__ = [
    'Statement',
    'TranslationResult',
    'Case',
    'Casework',
    'parse_casework',
    'normalize',
    'copy_all_text',
    'format_result',
    'print_results',
    'NOTATION',
    'REFERENCE',
    'get_reference',
    'split_statements',
    'DEFAULT_TABLES',
    'CodeTables',
    'TranslationDepthError',
    'TranslatorOptions',
    'classify',
    'get_translator_options',
    'set_translator_options',
    'translate',
    'translate_statement',
    'translate_with_shape',
]
