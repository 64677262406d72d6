"""Recognition of casework blocks: ``main<<1(A:explanation,result)...>>``."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional

CASEWORK_OPEN = '<<'
CASEWORK_CLOSE = '>>'

_BLOCK_RE = re.compile(r'^(?P<main>.*?)<<(?P<body>.*)>>$', re.S)
_CASE_RE = re.compile(r'(?P<num>\d+)\(A:(?P<explanation>[^,()]*(?:\([^()]*\)[^,()]*)*),(?P<result>[^()]*(?:\([^()]*\)[^()]*)*)\)')


@dataclass
class Case:
    number: int
    explanation: str
    result: str


@dataclass
class Casework:
    main: str
    cases: List[Case] = field(default_factory=list)
    # 'block' when parsed, otherwise 'open' / 'close' for a bare delimiter
    marker: str = 'block'


def has_casework(stmt: str) -> bool:
    return CASEWORK_OPEN in stmt or CASEWORK_CLOSE in stmt


def parse_cases(body: str) -> List[Case]:
    return [
        Case(int(m.group('num')), m.group('explanation').strip(), m.group('result').strip())
        for m in _CASE_RE.finditer(body)
    ]


def parse_casework(stmt: str) -> Optional[Casework]:
    """Split ``stmt`` into its main clause and cases.

    Returns ``None`` when no casework delimiter is present. When a delimiter
    is present but no case entries can be read, the result carries no cases
    and ``marker`` tells which delimiter half was seen.
    """

    if not has_casework(stmt):
        return None
    m = _BLOCK_RE.match(stmt)
    if m:
        cases = parse_cases(m.group('body'))
        if cases:
            return Casework(main=m.group('main').strip(), cases=cases)
    marker = 'open' if CASEWORK_OPEN in stmt else 'close'
    return Casework(main=stmt, marker=marker)
