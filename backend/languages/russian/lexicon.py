"""Oddity lexicon: nouns and adjectives grouped by semantic role.

The lexicon is read from YAML, validated with pydantic and turned into
immutable Noun/Adjective entries. Records are rejected at load time when
they could only fail later at generation time: adjectives too short to
classify and, by default, nouns whose declension class has no rules.
"""
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from core.config import settings
from core.errors import (
    AppError,
    LexiconError,
    Ok,
    Result,
    invalid_format,
    not_found,
    validation_error,
)
from core.logging import lexicon_logger
from languages.types import Animacy, Gender

from .adjective import MIN_ADJECTIVE_LENGTH
from .declension import SUPPORTED_CLASSES
from .lexemes import (
    REGULAR,
    Adjective,
    DeclensionClass,
    FluentVowel,
    Noun,
    NounDeclension,
    PluralOverride,
)
from .noun import MIN_NOUN_LENGTH

log = lexicon_logger()

DEFAULT_LEXICON_PATH = Path(__file__).with_name("lexicon.yaml")

# Modifier groups in the order they precede the head noun
ADJECTIVE_GROUPS = ("oddity", "size", "shape", "feel", "color", "material")


class NounRecord(BaseModel):
    """One noun as written in the lexicon file."""
    base: str = Field(min_length=MIN_NOUN_LENGTH)
    gender: Gender
    animacy: Animacy
    declension: DeclensionClass
    glide: str | None = Field(None, min_length=1, max_length=1)
    fluent_vowel: str | None = Field(None, min_length=1, max_length=1)
    plural: str | None = None

    @model_validator(mode="after")
    def check_tags(self) -> "NounRecord":
        if self.fluent_vowel and self.plural is not None:
            raise ValueError("a noun takes either fluent_vowel or plural, not both")
        if (self.declension is DeclensionClass.T6) != (self.glide is not None):
            raise ValueError("glide is required for T6 and only for T6")
        return self

    def to_noun(self) -> Noun:
        if self.fluent_vowel:
            exception = FluentVowel(self.fluent_vowel)
        elif self.plural is not None:
            exception = PluralOverride(self.plural)
        else:
            exception = REGULAR
        return Noun(
            base=self.base,
            gender=self.gender,
            animacy=self.animacy,
            declension=NounDeclension(self.declension, self.glide),
            exception=exception,
        )


class AdjectiveGroupsRecord(BaseModel):
    oddity: list[str] = Field(default_factory=list)
    size: list[str] = Field(default_factory=list)
    shape: list[str] = Field(default_factory=list)
    feel: list[str] = Field(default_factory=list)
    color: list[str] = Field(default_factory=list)
    material: list[str] = Field(default_factory=list)

    @field_validator("*")
    @classmethod
    def check_classifiable(cls, words: list[str]) -> list[str]:
        for word in words:
            if len(word) < MIN_ADJECTIVE_LENGTH:
                raise ValueError(f"adjective '{word}' is too short to classify")
        return words


class LexiconFile(BaseModel):
    objects: list[NounRecord] = Field(min_length=1)
    adjectives: AdjectiveGroupsRecord = Field(default_factory=AdjectiveGroupsRecord)


@dataclass(frozen=True, slots=True)
class Lexicon:
    """Immutable lexicon grouped by semantic role."""
    objects: tuple[Noun, ...]
    adjectives: dict[str, tuple[Adjective, ...]]

    def group(self, name: str) -> tuple[Adjective, ...]:
        return self.adjectives.get(name, ())

    def find_noun(self, base: str) -> Result[Noun, AppError]:
        for noun in self.objects:
            if noun.base == base:
                return Ok(noun)
        return not_found("Noun", base, origin="lexicon")

    def find_adjective(self, text: str) -> Result[Adjective, AppError]:
        for words in self.adjectives.values():
            for adjective in words:
                if adjective.text == text:
                    return Ok(adjective)
        return not_found("Adjective", text, origin="lexicon")

    def summary(self) -> dict:
        return {
            "objects": len(self.objects),
            "adjectives": {name: len(words) for name, words in self.adjectives.items()},
        }


def parse_lexicon(data: dict, require_supported: bool = True) -> Lexicon:
    """Validate raw lexicon data and build entries.

    Raises:
        LexiconError: malformed records, or unsupported declension classes
            when `require_supported` is set.
    """
    try:
        record = LexiconFile.model_validate(data)
    except ValidationError as e:
        raise LexiconError.from_err(validation_error(
            f"Invalid lexicon: {e.error_count()} error(s)",
            origin="lexicon",
            errors=[{"loc": ".".join(map(str, err["loc"])), "msg": err["msg"]} for err in e.errors()],
        )) from e

    nouns = tuple(r.to_noun() for r in record.objects)
    if require_supported:
        unsupported = [n.base for n in nouns if n.declension.kind not in SUPPORTED_CLASSES]
        if unsupported:
            raise LexiconError.from_err(validation_error(
                "Lexicon contains nouns with unsupported declension classes",
                field="objects",
                origin="lexicon",
                words=unsupported,
            ))

    adjectives = {
        name: tuple(Adjective(text) for text in getattr(record.adjectives, name))
        for name in ADJECTIVE_GROUPS
    }
    return Lexicon(objects=nouns, adjectives=adjectives)


def load_lexicon(path: Path = DEFAULT_LEXICON_PATH, require_supported: bool = True) -> Lexicon:
    """Read and validate a lexicon YAML file."""
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise LexiconError.from_err(invalid_format("lexicon", "readable YAML file", str(path), origin="lexicon")) from e

    if not isinstance(raw, dict):
        raise LexiconError.from_err(invalid_format("lexicon", "mapping at top level", type(raw).__name__, origin="lexicon"))

    lexicon = parse_lexicon(raw, require_supported=require_supported)
    log.info("lexicon_loaded", path=str(path), **lexicon.summary())
    return lexicon


@lru_cache(maxsize=1)
def get_lexicon() -> Lexicon:
    """Configured lexicon, loaded once."""
    return load_lexicon(settings.LEXICON_PATH or DEFAULT_LEXICON_PATH)
