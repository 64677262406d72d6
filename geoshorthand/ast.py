from dataclasses import dataclass


@dataclass
class Statement:
    index: int
    text: str


@dataclass
class TranslationResult:
    index: int
    original: str
    translation: str
    shape: str = 'passthrough'

    @property
    def lines(self):
        """Translation split into display lines (casework spans several)."""
        return self.translation.splitlines() or ['']
