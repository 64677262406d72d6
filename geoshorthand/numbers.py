from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class SymbolicNumber:
    """A named constant: ``text`` goes into sentences, ``value`` is numeric."""

    text: str
    value: float
    name: str = ""

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return self.text

    def describe(self) -> str:
        if not self.name:
            return self.text
        return f"{self.text} ({self.name}, ~{self.value:.6g})"


PI = SymbolicNumber("π", math.pi, "pi")
TAU = SymbolicNumber("τ", math.tau, "tau")
PHI = SymbolicNumber("φ", (1 + math.sqrt(5)) / 2, "the golden ratio")
