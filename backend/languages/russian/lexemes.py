"""Russian lexical entries and their declension tags.

Entries are immutable values built once from lexicon data. The adjective
subtype is always derived from the dictionary form; the noun declension
class and its exception are assigned by the lexicon.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from languages.types import Animacy, Gender


class AdjectiveGroup(Enum):
    HARD = "hard"
    MIXED = "mixed"
    SOFT = "soft"


class AdjectiveDeclension(Enum):
    """Adjective subtype, named by group and the vowel that starts the ending."""
    HARD_Y = "hard_y"      # красный
    HARD_O = "hard_o"      # молодой
    MIXED_I = "mixed_i"    # русский, хороший
    MIXED_O = "mixed_o"    # большой, плохой
    SOFT = "soft"          # синий

    @property
    def group(self) -> AdjectiveGroup:
        if self in (AdjectiveDeclension.HARD_Y, AdjectiveDeclension.HARD_O):
            return AdjectiveGroup.HARD
        if self in (AdjectiveDeclension.MIXED_I, AdjectiveDeclension.MIXED_O):
            return AdjectiveGroup.MIXED
        return AdjectiveGroup.SOFT

    @property
    def is_soft(self) -> bool:
        return self is AdjectiveDeclension.SOFT


class DeclensionClass(Enum):
    """Noun declension class by stem-final phoneme."""
    T0 = "T0"  # invariable
    T1 = "T1"  # hard consonant
    T2 = "T2"  # soft consonant
    T3 = "T3"  # velar г, к, х
    T4 = "T4"  # sibilant ж, ш, ч, щ
    T5 = "T5"  # ц
    T6 = "T6"  # vowel or й-glide
    T7 = "T7"  # и-stem
    T8 = "T8"  # third declension -ь, -мя, -ть

    @property
    def description(self) -> str:
        return _CLASS_DESCRIPTIONS[self]


_CLASS_DESCRIPTIONS = {
    DeclensionClass.T0: "invariable",
    DeclensionClass.T1: "hard consonant stem",
    DeclensionClass.T2: "soft consonant stem",
    DeclensionClass.T3: "velar stem (г, к, х)",
    DeclensionClass.T4: "sibilant stem (ж, ш, ч, щ)",
    DeclensionClass.T5: "ц stem",
    DeclensionClass.T6: "vowel or й-glide stem",
    DeclensionClass.T7: "и-stem",
    DeclensionClass.T8: "third declension (-ь, -мя, -ть)",
}


@dataclass(frozen=True, slots=True)
class NounDeclension:
    """Declension class plus the glide letter that T6 nouns carry."""
    kind: DeclensionClass
    glide: str | None = None

    def __post_init__(self):
        if (self.kind is DeclensionClass.T6) != (self.glide is not None):
            raise ValueError(f"glide letter is required for T6 and only for T6, got {self.kind.value}/{self.glide!r}")

    @classmethod
    def parse(cls, value: str, glide: str | None = None) -> NounDeclension:
        return cls(DeclensionClass(value.strip().upper()), glide)

    def __str__(self) -> str:
        return f"{self.kind.value}({self.glide})" if self.glide else self.kind.value


@dataclass(frozen=True, slots=True)
class Regular:
    """No stem mutation and no irregular plural."""


@dataclass(frozen=True, slots=True)
class FluentVowel:
    """Vowel before the final stem consonant that drops out before non-null endings."""
    vowel: str


@dataclass(frozen=True, slots=True)
class PluralOverride:
    """Fixed nominative-plural ending replacing the table cell."""
    ending: str


NounException = Regular | FluentVowel | PluralOverride

REGULAR = Regular()


@dataclass(frozen=True, slots=True)
class Noun:
    """Dictionary noun; `base` is the nominative singular."""
    base: str
    gender: Gender
    animacy: Animacy
    declension: NounDeclension
    exception: NounException = REGULAR


@dataclass(frozen=True, slots=True)
class Adjective:
    """Dictionary adjective in the nominative masculine singular."""
    text: str
