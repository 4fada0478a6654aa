"""Abstract base class for language modules."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping

from core.errors import AppError, Result


@dataclass(frozen=True, slots=True)
class CaseConfig:
    """Configuration for a grammatical case."""
    id: str
    label: str
    hint: str  # Question words that elicit the case
    color_bg: str
    color_text: str
    color_border: str


@dataclass(frozen=True, slots=True)
class GenderConfig:
    """Configuration for a grammatical gender."""
    id: str
    label: str
    short: str  # Single letter abbreviation


@dataclass(frozen=True, slots=True)
class NumberConfig:
    """Configuration for grammatical number."""
    id: str
    label: str


@dataclass(frozen=True, slots=True)
class DeterminerConfig:
    """Configuration for a determiner tab."""
    id: str
    label: str
    example: str  # Citation stem shown on the tab, e.g. "ein"
    plural: bool = True  # False when the determiner has no plural forms


@dataclass(frozen=True, slots=True)
class PersonConfig:
    """Configuration for a grammatical person."""
    id: str
    label: str
    slot: str  # Conjugation grid cell the person is shown in


@dataclass(frozen=True, slots=True)
class TenseConfig:
    """Configuration for a tense tab."""
    id: str
    label: str


@dataclass(slots=True)
class GrammarConfig:
    """Language grammar configuration for the word card."""
    cases: list[CaseConfig] = field(default_factory=list)
    genders: list[GenderConfig] = field(default_factory=list)
    numbers: list[NumberConfig] = field(default_factory=list)
    determiners: list[DeterminerConfig] = field(default_factory=list)
    persons: list[PersonConfig] = field(default_factory=list)
    tenses: list[TenseConfig] = field(default_factory=list)
    has_declension: bool = False
    has_conjugation: bool = False

    def to_dict(self) -> dict:
        """Convert to a JSON-serialisable dict."""
        return {
            "cases": [
                {"id": c.id, "label": c.label, "hint": c.hint,
                 "color": {"bg": c.color_bg, "text": c.color_text, "border": c.color_border}}
                for c in self.cases
            ],
            "genders": [{"id": g.id, "label": g.label, "short": g.short} for g in self.genders],
            "numbers": [{"id": n.id, "label": n.label} for n in self.numbers],
            "determiners": [
                {"id": d.id, "label": d.label, "example": d.example, "plural": d.plural}
                for d in self.determiners
            ],
            "persons": [{"id": p.id, "label": p.label, "slot": p.slot} for p in self.persons],
            "tenses": [{"id": t.id, "label": t.label} for t in self.tenses],
            "hasDeclension": self.has_declension,
            "hasConjugation": self.has_conjugation,
        }


class LanguageModule(ABC):
    """Abstract base for language-specific functionality."""

    @property
    @abstractmethod
    def code(self) -> str:
        """ISO 639-1 language code (e.g., 'de')."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable language name."""
        ...

    @property
    @abstractmethod
    def native_name(self) -> str:
        """Language name in the language itself."""
        ...

    @abstractmethod
    def get_grammar_config(self) -> GrammarConfig:
        """Get grammar configuration for the word card."""
        ...

    @abstractmethod
    def parse_entry(self, record: Mapping[str, Any]) -> Result[Any, AppError]:
        """Turn a raw dictionary record into a typed entry."""
        ...

    @abstractmethod
    def decline(self, entry: Any, case: str, number: str, determiner_type: str, person: str | None = None) -> Result[Any, AppError]:
        """Resolve one noun form."""
        ...

    @abstractmethod
    def conjugate(self, entry: Any, tense: str, person: str) -> Result[Any, AppError]:
        """Resolve one verb form."""
        ...
