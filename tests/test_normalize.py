import pytest

from geoshorthand.normalize import (
    expand_constants,
    expand_inequalities,
    expand_logic,
    expand_theorems,
    normalize,
)
from geoshorthand.tables import THEOREMS


@pytest.mark.parametrize(
    'text, expected',
    [
        ('AB=3\\orAB=4', 'AB=3 or AB=4'),
        ('AB=3 ∨ AB=4', 'AB=3 or AB=4'),
        ('P\\andQ', 'P and Q'),
        ('P∧Q', 'P and Q'),
        ('A=>B', 'A implies B'),
        ('A ⇒ B', 'A implies B'),
        ('∀x∃y', 'for all x there exists y'),
        ('\\fa x \\ex y', 'for all x there exists y'),
    ],
)
def test_expand_logic(text, expected):
    assert expand_logic(text) == expected


@pytest.mark.parametrize(
    'text, expected',
    [
        ('AB!=CD', 'AB is not equal to CD'),
        ('AB≠CD', 'AB is not equal to CD'),
        ('x>=3', 'x is greater than or equal to 3'),
        ('x ≤ 3', 'x is less than or equal to 3'),
        ('x<=3', 'x is less than or equal to 3'),
    ],
)
def test_expand_inequalities(text, expected):
    assert expand_inequalities(text) == expected


_UNAMBIGUOUS_CODES = [
    code for code in THEOREMS
    if not any(other != code and code.startswith(other) for other in THEOREMS)
]


@pytest.mark.parametrize('code', _UNAMBIGUOUS_CODES)
def test_repeated_theorem_code_only_expands_first_occurrence(code):
    text = f'{code} and again {code}'
    assert expand_theorems(text) == f'[by {THEOREMS[code]}] and again {code}'


def test_distinct_theorem_codes_all_expand():
    out = expand_theorems('AB+BC>AC_TI, see _LC')
    assert out == 'AB+BC>AC[by Triangle Inequality], see [by Law of Cosines]'


def test_longer_theorem_code_wins_over_its_prefix():
    assert expand_theorems('_ML') == "[by Menelaus' Theorem]"
    assert expand_theorems('_M') == "[by Miquel's Theorem]"


@pytest.mark.parametrize(
    'text, expected',
    [
        ('C=2\\pi r', 'C=2π r'),
        ('\\tau/2', 'τ/2'),
        ('AB/BC=\\phi', 'AB/BC=φ'),
        ('\\pi:AB', '\\pi:AB'),
        ('\\pi:A and \\pi', '\\pi:A and π'),
    ],
)
def test_expand_constants_skips_codes_followed_by_colon(text, expected):
    assert expand_constants(text) == expected


def test_normalize_runs_passes_in_order():
    text = 'x>=\\pi \\and AB!=CD _TI'
    assert normalize(text) == (
        'x is greater than or equal to π and AB is not equal to CD [by Triangle Inequality]'
    )


def test_normalize_leaves_plain_text_alone():
    text = 'Draw the figure  carefully.'
    assert normalize(text) == text
