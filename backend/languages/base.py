"""Abstract base class for language modules."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class CaseConfig:
    """Configuration for a grammatical case."""
    id: str
    label: str
    native_label: str
    hint: str


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
class DeclensionConfig:
    """A noun declension class and whether it can be inflected."""
    id: str
    description: str
    supported: bool


@dataclass(slots=True)
class GrammarConfig:
    """Language grammar configuration for API clients."""
    cases: list[CaseConfig] = field(default_factory=list)
    genders: list[GenderConfig] = field(default_factory=list)
    numbers: list[NumberConfig] = field(default_factory=list)
    animacies: list[str] = field(default_factory=list)
    declensions: list[DeclensionConfig] = field(default_factory=list)
    has_declension: bool = False

    def to_dict(self) -> dict:
        """Convert to dict for API response."""
        return {
            "cases": [
                {"id": c.id, "label": c.label, "nativeLabel": c.native_label, "hint": c.hint}
                for c in self.cases
            ],
            "genders": [{"id": g.id, "label": g.label, "short": g.short} for g in self.genders],
            "numbers": [{"id": n.id, "label": n.label} for n in self.numbers],
            "animacies": list(self.animacies),
            "declensions": [
                {"id": d.id, "description": d.description, "supported": d.supported}
                for d in self.declensions
            ],
            "hasDeclension": self.has_declension,
        }


class LanguageModule(ABC):
    """Abstract base for language-specific functionality."""

    @property
    @abstractmethod
    def code(self) -> str:
        """ISO 639-1 language code (e.g., 'ru')."""
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
        """Get grammar configuration for API clients."""
        ...

    @abstractmethod
    def get_morphology_engine(self) -> Any:
        """Get the inflection engine for this language."""
        ...

    def get_declension_patterns(self) -> dict:
        """Get noun ending tables. Override if language has declension."""
        return {}
