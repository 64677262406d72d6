from typing import Iterable

from .ast import TranslationResult

INDENT = "   "


def format_result(result: TranslationResult) -> str:
    """Return ``result`` as an index line followed by its indented translation."""

    lines = [f"{result.index}. {result.original}"]
    lines.extend(f"{INDENT}{line}" for line in result.lines)
    return "\n".join(lines)


def print_results(results: Iterable[TranslationResult]) -> str:
    rendered = [format_result(result) for result in results]
    if not rendered:
        return ""
    return "\n".join(rendered) + "\n"


def copy_all_text(results: Iterable[TranslationResult]) -> str:
    ordered = sorted(results, key=lambda result: result.index)
    return "\n".join(result.translation for result in ordered)
