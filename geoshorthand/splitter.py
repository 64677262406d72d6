from typing import List

from .ast import Statement

BLOCK_MARKER = '\\\\'
DELIMITER = '/'


def strip_block_markers(text: str) -> str:
    if text.startswith(BLOCK_MARKER) and text.endswith(BLOCK_MARKER) and len(text) >= 2 * len(BLOCK_MARKER):
        return text[len(BLOCK_MARKER):-len(BLOCK_MARKER)]
    return text


def split_statements(text: str) -> List[Statement]:
    body = strip_block_markers(text.strip())
    pieces = [piece.strip() for piece in body.split(DELIMITER)]
    return [Statement(idx, piece) for idx, piece in enumerate((p for p in pieces if p), start=1)]
