"""Code tables mapping shorthand codes to English terms."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

from .numbers import PHI, PI, TAU, SymbolicNumber

# Property codes describe a single object. Entries starting with "a " are
# nouns; the rest are adjectives.
PROPERTIES: Mapping[str, str] = MappingProxyType({
    'R': 'regular',
    'CV': 'convex',
    'CC': 'concave',
    'T': 'a triangle',
    'RT': 'a right triangle',
    'OB': 'obtuse',
    'AC': 'acute',
    'SC': 'scalene',
    'IS': 'isosceles',
    'Q': 'a quadrilateral',
    'TR': 'a trapezoid',
    'PL': 'a parallelogram',
    'EQ': 'equilateral',
    'EA': 'equiangular',
    'C': 'cyclic',
    'TP': 'tangential',
})

RELATIONSHIPS: Mapping[str, str] = MappingProxyType({
    'S': 'collinear',
    '⋯': 'collinear',
    'P': 'parallel',
    '∥': 'parallel',
    'PR': 'perpendicular',
    '⊥': 'perpendicular',
    'CG': 'congruent',
    '≅': 'congruent',
    'SM': 'similar',
    '∼': 'similar',
    '~': 'similar',
})

# Order matters: '_ML' must be tried before its prefix '_M'.
THEOREMS: Mapping[str, str] = MappingProxyType({
    '_TI': 'Triangle Inequality',
    '_ST': "Stewart's Theorem",
    '_AT': 'Apollonius Theorem',
    '_VT': "Viviani's Theorem",
    '_NP': "Napoleon's Theorem",
    '_EL': 'Euler Line',
    '_9C': 'Nine-Point Circle',
    '_SL': 'Simson Line',
    '_CV': "Ceva's Theorem",
    '_ML': "Menelaus' Theorem",
    '_AB': 'Angle Bisector Theorem',
    '_IE': 'Incenter-Excenter Lemma',
    '_CT': "Carnot's Theorem",
    '_M': "Miquel's Theorem",
    '_ET': "Euler's Theorem",
    '_DT': "Desargue's Theorem",
    '_HF': "Heron's Formula",
    '_QF': "Bretschinder's Formula",
    '_BF': "Brahmagupta's Formula",
    '_JT': 'Japanese Theorem',
    '_NT': "Newton's Theorem",
    '_PT': "Ptolemy's Theorem",
    '_PP': 'Power of a Point Theorem',
    '_BT': 'Butterfly Theorem',
    '_PC': "Pascal's Theorem",
    '_LC': 'Law of Cosines',
    '_LS': 'Law of Sines',
    '_LT': 'Law of Tangents',
    '_PK': "Pick's Theorem",
    '_SH': 'Shoelace Theorem',
})

CONSTANTS: Mapping[str, SymbolicNumber] = MappingProxyType({
    '\\pi': PI,
    '\\tau': TAU,
    '\\phi': PHI,
})

# (ascii, symbol, phrase)
LOGIC: Tuple[Tuple[str, str, str], ...] = (
    ('\\or', '∨', ' or '),
    ('\\and', '∧', ' and '),
    ('=>', '⇒', ' implies '),
    ('\\fa', '∀', ' for all '),
    ('\\ex', '∃', ' there exists '),
)

INEQUALITY_ALIASES: Mapping[str, str] = MappingProxyType({
    '!=': '≠',
    '>=': '≥',
    '<=': '≤',
})

INEQUALITY_PHRASES: Mapping[str, str] = MappingProxyType({
    '≠': ' is not equal to ',
    '≥': ' is greater than or equal to ',
    '≤': ' is less than or equal to ',
})

REGULAR_POLYGON_NAMES: Mapping[str, str] = MappingProxyType({
    '3': 'equilateral triangle',
    '4': 'square',
    '5': 'regular pentagon',
    '6': 'regular hexagon',
    '8': 'regular octagon',
})

# Proof scaffolding
PROOF_WRAPPERS: Tuple[Tuple[str, str, str], ...] = (
    ('\\pC', 'proof-contradiction', 'We will prove by contradiction:'),
    ('\\p', 'proof', 'We will prove:'),
)

PROOF_TOKENS: Mapping[str, Tuple[str, str]] = MappingProxyType({
    '\\q': ('proof-close', 'And that is what was to be shown.'),
    '\\qC': ('contradiction-close', 'Achieving a contradiction.'),
    '\\bc': ('because', 'Because'),
    '\\th': ('therefore', 'Therefore'),
})

# Construction markers, keyed by the letter before ':'
CONSTRUCTION_MARKERS: Mapping[str, str] = MappingProxyType({
    'P': 'point',
    'S': 'segment',
    'L': 'line',
    'W': 'ray',
    'C': 'circle',
    'J': 'polygon',
    'R': 'regular-polygon',
    'G': 'graph',
})


@dataclass(frozen=True)
class CodeTables:
    properties: Mapping[str, str] = field(default_factory=lambda: PROPERTIES)
    relationships: Mapping[str, str] = field(default_factory=lambda: RELATIONSHIPS)
    theorems: Mapping[str, str] = field(default_factory=lambda: THEOREMS)
    constants: Mapping[str, SymbolicNumber] = field(default_factory=lambda: CONSTANTS)
    logic: Tuple[Tuple[str, str, str], ...] = LOGIC
    inequality_aliases: Mapping[str, str] = field(default_factory=lambda: INEQUALITY_ALIASES)
    inequality_phrases: Mapping[str, str] = field(default_factory=lambda: INEQUALITY_PHRASES)
    regular_polygon_names: Mapping[str, str] = field(default_factory=lambda: REGULAR_POLYGON_NAMES)

    def property_term(self, code: str) -> str:
        """Return the English term for a property or relationship code."""

        return self.properties.get(code) or self.relationships.get(code) or code

    def relationship_term(self, code: str) -> str:
        return self.relationships.get(code) or self.properties.get(code) or code

    def polygon_name(self, sides: str) -> str:
        return self.regular_polygon_names.get(sides) or f'regular {sides}-gon'


DEFAULT_TABLES = CodeTables()
