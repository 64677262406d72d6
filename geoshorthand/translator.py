"""Translate shorthand statements into English sentences.

A statement is matched against a ranked list of rules; the first rule whose
predicate accepts the statement produces the sentence. Structural rules
(casework, proof wrappers, proof tokens) see the raw statement, every other
rule sees the statement after :func:`geoshorthand.normalize.normalize`.
Nested clauses are translated by recursing into the same dispatcher, bounded
by :attr:`TranslatorOptions.max_depth`.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, replace
from typing import Callable, List, Optional, Sequence, Tuple

from .ast import TranslationResult
from .casework import has_casework, parse_casework
from .logging_utils import debug_log_call
from .normalize import normalize
from .splitter import split_statements
from .tables import CONSTRUCTION_MARKERS, DEFAULT_TABLES, PROOF_TOKENS, PROOF_WRAPPERS, CodeTables

logger = logging.getLogger(__name__)

PROOF_QUERY = '\\?'
QUERY = '?'

_INTERSECTION_RE = re.compile(r'^(?P<name>[^=.|]+)=(?P<a>.+?)x(?P<b>.+)$')
_ON_OBJECT_COND_RE = re.compile(r'^(?P<name>[^.|]+)\.(?P<base>[^|]+)\|(?P<conds>.+)$')
_ON_OBJECT_RE = re.compile(r'^(?P<name>[^.|]+)\.(?P<base>.+)$')
_COORDS_RE = re.compile(r'^(?P<name>[^|]+)\|(?P<coords>\{.*\})$')
_POINT_COND_RE = re.compile(r'^(?P<name>[^|]+)\|(?P<conds>.+)$')
_SEGMENT_TOKEN_RE = re.compile(r'^\w{2,3}$')
_SEGMENT_CONCAT_RE = re.compile(
    r'^(?P<seg>[A-Z]{2,3}?)(?P<rest>[' + ''.join(CONSTRUCTION_MARKERS) + r']:.*)$'
)
_NUMBER_RE = re.compile(r'^\d+(?:\.\d+)?$')
_REGULAR_RE = re.compile(r'^(?:R:)?(?P<n>\d+);(?P<side>[^=]+)=(?P<poly>.+)$')
_AREA_RE = re.compile(r'^\[(?P<obj>[^\]]+)\](?P<rest>=.+|\?)$')
_PERIMETER_RE = re.compile(r'^\((?P<obj>[^)]+)\)(?P<rest>=.+|\?)$')
_ANGLE_PREFIXES = ('<', '∠')
_PROPERTY_RE = re.compile(r'^(?P<obj>[^*;]+)\*(?P<code>[^*;=?]+)(?P<query>\?)?$')
_RELATIONSHIP_RE = re.compile(r'^(?P<objs>[^*;]+(?:;[^*;]+)+)\*(?P<code>[^*;=?]+)(?P<query>\?)?$')
_COORD_LITERAL_RE = re.compile(r'^\{(?P<coords>.*)\}$')
_SEGMENT_NAME_RE = re.compile(r'^[A-Z]{2}$')
_WORD_RE = re.compile(r'\w')

_BRACKETS = {'(': ')', '{': '}', '[': ']'}


class TranslationDepthError(Exception):
    """Raised when nested clauses exceed :attr:`TranslatorOptions.max_depth`."""

    def __init__(self, statement: str, depth: int):
        super().__init__(f'nesting depth {depth} exceeded while translating {statement!r}')
        self.statement = statement
        self.depth = depth


@dataclass(frozen=True)
class TranslatorOptions:
    tables: CodeTables = field(default_factory=lambda: DEFAULT_TABLES)
    max_depth: int = 16


_TRANSLATOR_OPTIONS = TranslatorOptions()


def get_translator_options() -> TranslatorOptions:
    return replace(_TRANSLATOR_OPTIONS)


def set_translator_options(options: TranslatorOptions) -> None:
    global _TRANSLATOR_OPTIONS
    _TRANSLATOR_OPTIONS = replace(options)


@dataclass(frozen=True)
class _Context:
    options: TranslatorOptions
    depth: int = 0

    @property
    def tables(self) -> CodeTables:
        return self.options.tables

    def deeper(self) -> "_Context":
        return replace(self, depth=self.depth + 1)


@dataclass(frozen=True)
class Rule:
    shape: str
    predicate: Callable[[str], bool]
    handler: Callable[[str, _Context], str]


# ---------------------------------------------------------------- helpers

def _strip_braces(text: str) -> str:
    text = text.strip()
    if text.startswith('{') and text.endswith('}'):
        return text[1:-1].strip()
    return text


def _body(stmt: str) -> str:
    return stmt.split(':', 1)[1].strip()


def _has_marker(stmt: str, marker: str) -> bool:
    return stmt.startswith(marker + ':')


def _is_construction(stmt: str) -> bool:
    return len(stmt) >= 2 and stmt[1] == ':' and stmt[0] in CONSTRUCTION_MARKERS


def split_top_level(text: str, sep: str = ',') -> List[str]:
    """Split ``text`` on ``sep`` outside of (), {} and [] groups."""

    parts: List[str] = []
    stack: List[str] = []
    current: List[str] = []
    for ch in text:
        if ch in _BRACKETS:
            stack.append(_BRACKETS[ch])
        elif stack and ch == stack[-1]:
            stack.pop()
        elif ch == sep and not stack:
            parts.append(''.join(current).strip())
            current = []
            continue
        current.append(ch)
    parts.append(''.join(current).strip())
    return [part for part in parts if part]


def _join_and(items: Sequence[str]) -> str:
    return ' and '.join(items)


def _article(noun: str) -> str:
    return ('an ' if noun[:1].lower() in 'aeiou' else 'a ') + noun


def _desentence(sentence: str) -> str:
    sentence = sentence.strip()
    if sentence.endswith('.'):
        sentence = sentence[:-1]
    return sentence[:1].lower() + sentence[1:]


def _recurse(stmt: str, ctx: _Context) -> str:
    return _dispatch(stmt, ctx.deeper())[1]


def _is_proof_query(stmt: str) -> bool:
    return PROOF_QUERY in stmt


def _is_property_check(stmt: str) -> bool:
    return bool(_PROPERTY_RE.match(stmt) or _RELATIONSHIP_RE.match(stmt))


# ---------------------------------------------------------------- structural rules

def _translate_casework(stmt: str, ctx: _Context) -> str:
    block = parse_casework(stmt)
    if not block.cases:
        return 'End casework.' if block.marker == 'close' else 'Begin casework analysis.'
    lines = []
    if block.main:
        lines.append(_recurse(block.main, ctx))
    lines.append('Casework:')
    for case in block.cases:
        explanation = normalize(case.explanation, ctx.tables)
        result = normalize(case.result, ctx.tables)
        lines.append(f'Case {case.number}: When {explanation}, then {result}.')
    return '\n'.join(lines)


def _wrapper_content(stmt: str, code: str) -> Optional[str]:
    if stmt.startswith(code + ':'):
        return stmt[len(code) + 1:]
    if stmt.startswith(code + '{'):
        inner = stmt[len(code) + 1:]
        return inner[:-1] if inner.endswith('}') else inner
    return None


def _proof_wrapper_rule(code: str, shape: str, lead_in: str) -> Rule:
    def handler(stmt: str, ctx: _Context) -> str:
        inner = _recurse(_wrapper_content(stmt, code) or '', ctx)
        return f'{lead_in} {inner}'.rstrip()

    return Rule(shape, lambda stmt: _wrapper_content(stmt, code) is not None, handler)


def _proof_token_rule(token: str, shape: str, phrase: str) -> Rule:
    return Rule(shape, lambda stmt: stmt == token, lambda stmt, ctx: phrase)


STRUCTURAL_RULES: Tuple[Rule, ...] = (
    Rule('casework', has_casework, _translate_casework),
    *(_proof_wrapper_rule(code, shape, lead_in) for code, shape, lead_in in PROOF_WRAPPERS),
    *(_proof_token_rule(token, shape, phrase) for token, (shape, phrase) in PROOF_TOKENS.items()),
)


# ---------------------------------------------------------------- constructions

def _translate_graph(stmt: str, ctx: _Context) -> str:
    return f'Graph the function {_strip_braces(_body(stmt))}.'


def _is_multi_point(stmt: str) -> bool:
    if not _has_marker(stmt, 'P'):
        return False
    body = _body(stmt)
    return ',' in body and '.' not in body and '|' not in body


def _translate_multi_point(stmt: str, ctx: _Context) -> str:
    names = [name.strip() for name in _body(stmt).split(',') if name.strip()]
    return f'Construct points {", ".join(names)}.'


def _translate_conditions(conds: str, ctx: _Context) -> str:
    return ', '.join(_translate_clause(cond, ctx) for cond in split_top_level(conds))


def _translate_point(stmt: str, ctx: _Context) -> str:
    body = _body(stmt)

    m = _INTERSECTION_RE.match(body)
    if m:
        return (
            f"Let point {m.group('name').strip()} be the intersection of "
            f"{m.group('a').strip()} and {m.group('b').strip()}."
        )

    m = _ON_OBJECT_COND_RE.match(body)
    if m:
        return (
            f"Construct point {m.group('name').strip()} on {m.group('base').strip()} "
            f"such that {_translate_conditions(m.group('conds'), ctx)}."
        )

    m = _ON_OBJECT_RE.match(body)
    if m:
        return f"Construct point {m.group('name').strip()} on {m.group('base').strip()}."

    m = _COORDS_RE.match(body)
    if m:
        return f"Let point {m.group('name').strip()} be at {_strip_braces(m.group('coords'))}."

    m = _POINT_COND_RE.match(body)
    if m:
        return (
            f"Construct point {m.group('name').strip()} "
            f"such that {_translate_conditions(m.group('conds'), ctx)}."
        )

    return f'Construct point {body}.'


def _translate_segment(stmt: str, ctx: _Context) -> str:
    body = _body(stmt)
    if ',' in body:
        tokens = [tok.strip() for tok in body.split(',')]
        if all(_SEGMENT_TOKEN_RE.match(tok) for tok in tokens):
            return f'Connect segments {", ".join(tokens)}.'
    m = _SEGMENT_CONCAT_RE.match(body)
    if m:
        logger.debug("Segment %r looks concatenated with %r", m.group('seg'), m.group('rest'))
        return f"Connect segment {m.group('seg')}. [Possibly missing '/' before \"{m.group('rest')}\".]"
    return f'Connect segment {body}.'


def _circle_parts(stmt: str) -> List[str]:
    return [part.strip() for part in _body(stmt).split(';')]


def _is_circle(stmt: str) -> bool:
    return _has_marker(stmt, 'C') and len(_circle_parts(stmt)) in (2, 3)


def _translate_circle(stmt: str, ctx: _Context) -> str:
    parts = _circle_parts(stmt)
    if len(parts) == 3:
        return f'Construct a circle through points {parts[0]}, {parts[1]}, and {parts[2]}.'
    center, other = parts
    if _NUMBER_RE.match(other):
        return f'Construct a circle with center {center} and radius {other}.'
    return f'Construct a circle with center {center} passing through point {other}.'


def _split_polygon(body: str, tables: CodeTables) -> Tuple[str, Optional[str]]:
    if '*' not in body:
        return body, None
    name, _, code = body.partition('*')
    return name.strip(), tables.property_term(code.strip())


def _is_polygon(stmt: str) -> bool:
    if not _has_marker(stmt, 'J'):
        return False
    name, star, code = _body(stmt).partition('*')
    return bool(name.strip()) and (not star or bool(code.strip()))


def _translate_polygon(stmt: str, ctx: _Context) -> str:
    name, term = _split_polygon(_body(stmt), ctx.tables)
    if term is None:
        return f'Construct polygon {name}.'
    if term.startswith('a '):
        return f'Construct {term[2:]} {name}.'
    return f'Construct {term} polygon {name}.'


def _is_regular_polygon(stmt: str) -> bool:
    return _has_marker(stmt, 'R') and bool(_REGULAR_RE.match(stmt))


def _translate_regular_polygon(stmt: str, ctx: _Context) -> str:
    m = _REGULAR_RE.match(stmt)
    shape = ctx.tables.polygon_name(m.group('n'))
    return f"Construct {shape} {m.group('poly').strip()} with side {m.group('side').strip()}."


# ---------------------------------------------------------------- measurements and checks

def _measure_rule(shape: str, pattern: "re.Pattern[str]", noun: str) -> Rule:
    def handler(stmt: str, ctx: _Context) -> str:
        m = pattern.match(stmt)
        obj, rest = m.group('obj').strip(), m.group('rest')
        if rest in (QUERY, '=' + QUERY):
            return f'What is the {noun} of {obj}?'
        return f'Let the {noun} of {obj} be {rest[1:].strip()}.'

    return Rule(shape, lambda stmt: not _is_proof_query(stmt) and bool(pattern.match(stmt)), handler)


def _is_angle(stmt: str) -> bool:
    if _is_proof_query(stmt) or not stmt.startswith(_ANGLE_PREFIXES):
        return False
    rest = stmt[1:]
    if '=' in rest:
        name, _, value = rest.partition('=')
        return bool(name.strip() and value.strip())
    return stmt.endswith(QUERY) and bool(rest[:-1].strip())


def _translate_angle(stmt: str, ctx: _Context) -> str:
    rest = stmt[1:].strip()
    if '=' in rest:
        name, _, value = rest.partition('=')
        if value.strip() != QUERY:
            return f'Angle {name.strip()} measures {value.strip()} degrees.'
        return f'What is the measure of angle {name.strip()}?'
    return f'What is the measure of angle {rest[:-1].strip()}?'


def _has_operands(stmt: str) -> bool:
    left, _, right = stmt.partition('=')
    return bool(left.strip() and right.strip())


def _is_equality(stmt: str) -> bool:
    return (
        '=' in stmt
        and _has_operands(stmt)
        and not _is_proof_query(stmt)
        and not _is_property_check(stmt)
        and not _REGULAR_RE.match(stmt)
    )


def _translate_equality(stmt: str, ctx: _Context) -> str:
    left, _, right = stmt.partition('=')
    left, right = left.strip(), right.strip()
    if right == QUERY:
        return f'What is the value of {left}?'
    if len(left) <= 3 and len(right) <= 3:
        return f'Let {left} equal {right}.'
    return f'{left} equals {right}.'


def _is_property(stmt: str) -> bool:
    return not _is_proof_query(stmt) and bool(_PROPERTY_RE.match(stmt))


def _translate_property(stmt: str, ctx: _Context) -> str:
    m = _PROPERTY_RE.match(stmt)
    obj = m.group('obj').strip()
    term = ctx.tables.property_term(m.group('code').strip())
    if m.group('query'):
        return f'Is {obj} {term}?'
    return f'{obj} is {term}.'


def _is_relationship(stmt: str) -> bool:
    return not _is_proof_query(stmt) and bool(_RELATIONSHIP_RE.match(stmt))


def _translate_relationship(stmt: str, ctx: _Context) -> str:
    m = _RELATIONSHIP_RE.match(stmt)
    objs = _join_and([obj.strip() for obj in m.group('objs').split(';')])
    term = ctx.tables.relationship_term(m.group('code').strip())
    if m.group('query'):
        return f'Are {objs} {term}?'
    return f'{objs} are {term}.'


def _translate_proof_query(stmt: str, ctx: _Context) -> str:
    content = stmt.replace(PROOF_QUERY, '').strip()
    return f'Prove that {_translate_clause(content, ctx)}.'


def _is_question(stmt: str) -> bool:
    return stmt.endswith(QUERY) and bool(_WORD_RE.search(stmt[:-1]))


def _translate_question(stmt: str, ctx: _Context) -> str:
    return f'What is {stmt[:-1].strip()}?'


RULES: Tuple[Rule, ...] = (
    Rule('graph', lambda stmt: _has_marker(stmt, 'G'), _translate_graph),
    Rule('multi-point', _is_multi_point, _translate_multi_point),
    Rule('point', lambda stmt: _has_marker(stmt, 'P'), _translate_point),
    Rule('segment', lambda stmt: _has_marker(stmt, 'S'), _translate_segment),
    Rule('line', lambda stmt: _has_marker(stmt, 'L'), lambda stmt, ctx: f'Connect line {_body(stmt)}.'),
    Rule('ray', lambda stmt: _has_marker(stmt, 'W'), lambda stmt, ctx: f'Construct ray {_body(stmt)}.'),
    Rule('circle', _is_circle, _translate_circle),
    Rule('polygon', _is_polygon, _translate_polygon),
    Rule('regular-polygon', _is_regular_polygon, _translate_regular_polygon),
    _measure_rule('area', _AREA_RE, 'area'),
    _measure_rule('perimeter', _PERIMETER_RE, 'perimeter'),
    Rule('angle', _is_angle, _translate_angle),
    Rule('equality', _is_equality, _translate_equality),
    Rule('property', _is_property, _translate_property),
    Rule('relationship', _is_relationship, _translate_relationship),
    Rule('proof-query', _is_proof_query, _translate_proof_query),
    Rule('question', _is_question, _translate_question),
)


# ---------------------------------------------------------------- clauses

def _translate_clause(clause: str, ctx: _Context) -> str:
    """Render ``clause`` as a fragment that can follow "such that" or "Prove that".

    ``clause`` comes out of a statement that was already normalized, so it is
    not normalized again; a repeated theorem code keeps its later occurrences.
    """

    text = clause.strip()
    tables = ctx.tables

    m = _REGULAR_RE.match(text)
    if m:
        shape = _article(tables.polygon_name(m.group('n')))
        return f"{m.group('poly').strip()} is {shape} with side {m.group('side').strip()}"

    if _is_polygon(text) and '*' in text:
        name, term = _split_polygon(_body(text), tables)
        return f'{name} is {term}'

    if _is_construction(text):
        shape, sentence = _dispatch(text, ctx.deeper(), normalized=True)
        return sentence if shape == 'passthrough' else _desentence(sentence)

    m = _PROPERTY_RE.match(text)
    if m:
        return f"{m.group('obj').strip()} is {tables.property_term(m.group('code').strip())}"

    m = _RELATIONSHIP_RE.match(text)
    if m:
        objs = _join_and([obj.strip() for obj in m.group('objs').split(';')])
        return f"{objs} are {tables.relationship_term(m.group('code').strip())}"

    for pattern, noun in ((_AREA_RE, 'area'), (_PERIMETER_RE, 'perimeter')):
        m = pattern.match(text)
        if m and m.group('rest').startswith('='):
            return f"the {noun} of {m.group('obj').strip()} is {m.group('rest')[1:].strip()}"

    if _is_angle(text) and '=' in text:
        name, _, value = text[1:].partition('=')
        return f'angle {name.strip()} measures {value.strip()} degrees'

    m = _COORD_LITERAL_RE.match(text)
    if m:
        return f"it lies at {m.group('coords').strip()}"

    if _has_operands(text):
        left, _, right = text.partition('=')
        left, right = left.strip(), right.strip()
        if _SEGMENT_NAME_RE.match(left) and _NUMBER_RE.match(right):
            return f'{left} has length {right}'
        return f'{left} equals {right}'

    return text


# ---------------------------------------------------------------- dispatch

def _dispatch(stmt: str, ctx: _Context, *, normalized: bool = False) -> Tuple[str, str]:
    if ctx.depth > ctx.options.max_depth:
        raise TranslationDepthError(stmt, ctx.depth)
    stmt = stmt.strip()
    if not stmt:
        return 'passthrough', ''

    for rule in STRUCTURAL_RULES:
        if rule.predicate(stmt):
            return rule.shape, rule.handler(stmt, ctx)

    if not normalized:
        stmt = normalize(stmt, ctx.tables)
    for rule in RULES:
        if rule.predicate(stmt):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Statement %r matched rule %s at depth %d", stmt, rule.shape, ctx.depth)
            return rule.shape, rule.handler(stmt, ctx)
    return 'passthrough', stmt


def translate_with_shape(stmt: str, options: Optional[TranslatorOptions] = None) -> Tuple[str, str]:
    """Return ``(shape, sentence)`` for a single statement."""

    ctx = _Context(options or get_translator_options())
    try:
        return _dispatch(stmt, ctx)
    except TranslationDepthError as exc:
        logger.warning("Returning statement unchanged: %s", exc)
        return 'passthrough', stmt


def classify(stmt: str, options: Optional[TranslatorOptions] = None) -> str:
    return translate_with_shape(stmt, options)[0]


@debug_log_call(logger)
def translate_statement(stmt: str, options: Optional[TranslatorOptions] = None) -> str:
    return translate_with_shape(stmt, options)[1]


@debug_log_call(logger, log_result=False)
def translate(text: str, options: Optional[TranslatorOptions] = None) -> List[TranslationResult]:
    """Split ``text`` into statements and translate each one in order."""

    options = options or get_translator_options()
    results: List[TranslationResult] = []
    for stmt in split_statements(text):
        shape, sentence = translate_with_shape(stmt.text, options)
        results.append(TranslationResult(stmt.index, stmt.text, sentence, shape))
    logger.debug("Translated %d statement(s)", len(results))
    return results
