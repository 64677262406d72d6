"""Reference text for the geometry shorthand notation."""

from textwrap import dedent
from typing import Mapping, Optional

from .tables import DEFAULT_TABLES, PROOF_TOKENS, CodeTables

NOTATION = dedent(
"""
```
Input      := [ '\\\\' ] Stmt { '/' Stmt } [ '\\\\' ]
Stmt       := Proof | Casework | Construct | Measure | Check | Query | Text

Proof      := '\\p:' Stmt | '\\p{' Stmt '}'
            | '\\pC:' Stmt | '\\pC{' Stmt '}'
            | '\\q' | '\\qC' | '\\bc' | '\\th'
Casework   := Stmt '<<' { N '(A:' Explanation ',' Result ')' } '>>'

Construct  := 'P:' Name                           point
            | 'P:' Name { ',' Name }               several points
            | 'P:' Name '=' Obj 'x' Obj            intersection
            | 'P:' Name '.' Obj [ '|' Cond { ',' Cond } ]
            | 'P:' Name '|' '{' Coords '}'
            | 'S:' Seg { ',' Seg }                 segment(s)
            | 'L:' Name                            line
            | 'W:' Name                            ray
            | 'C:' P ';' P ';' P                   circle through three points
            | 'C:' Center ';' ( NUMBER | P )       circle by radius or through a point
            | 'J:' Name [ '*' Property ]           polygon
            | 'R:' N ';' Side '=' Name             regular polygon
            | 'G:' '{' Equation '}'                graph

Measure    := '[' Obj ']' ( '=' Value | '?' )      area
            | '(' Obj ')' ( '=' Value | '?' )      perimeter
            | ( '<' | '∠' ) Name ( '=' Value | '?' )
            | Expr '=' ( Expr | '?' )

Check      := Obj '*' Property [ '?' ]
            | Obj ';' Obj { ';' Obj } '*' Relationship [ '?' ]
Query      := Stmt '\\?'                          prove
            | Expr '?'

Logic      := '\\or' | '∨' | '\\and' | '∧' | '=>' | '⇒' | '\\fa' | '∀' | '\\ex' | '∃'
Compare    := '!=' | '≠' | '>=' | '≥' | '<=' | '≤'
Citation   := '_' CODE
Constant   := '\\pi' | '\\tau' | '\\phi'
```
"""
).strip()


def _format_table(title: str, table: Mapping[str, object]) -> str:
    width = max((len(code) for code in table), default=0)
    rows = [f"  {code.ljust(width)}  {value}" for code, value in table.items()]
    return "\n".join([title] + rows)


def get_reference(include_codes: bool = True, tables: Optional[CodeTables] = None) -> str:
    """Return the notation reference, optionally followed by every code table."""

    parts = ["SHORTHAND NOTATION", NOTATION]
    if include_codes:
        tables = tables or DEFAULT_TABLES
        parts.append("CODE TABLES")
        parts.append(_format_table("Properties:", tables.properties))
        parts.append(_format_table("Relationships:", tables.relationships))
        parts.append(_format_table("Theorems:", tables.theorems))
        parts.append(_format_table("Constants:", {code: number.describe() for code, number in tables.constants.items()}))
        parts.append(_format_table("Proof markers:", {code: phrase for code, (_, phrase) in PROOF_TOKENS.items()}))
    return "\n\n".join(parts)


REFERENCE = get_reference()
