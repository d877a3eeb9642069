"""Russian noun declension.

decline_noun works in four steps: strip the nominative-singular marker to
get the stem, resolve the ending for the requested cell, apply the
fluent-vowel mutation to the stem, then concatenate. Nothing is cached on
the Noun; every call recomputes from the dictionary entry.
"""
from core.errors import ClassificationError, UnsupportedDeclension, classification_failed, unsupported_declension
from languages.types import Animacy, Case, Gender, Number

from .declension import (
    FEMININE_ACCUSATIVE,
    OBLIQUE_ENDINGS,
    RULE_GROUPS,
    genitive_plural,
    genitive_singular,
    nominative_plural,
    nominative_singular,
)
from .lexemes import DeclensionClass, FluentVowel, Noun, PluralOverride

# Letters that mark the nominative singular and are not part of the stem
STEM_MARKERS = frozenset("ьаяое")

# Shortest base the stem and fluent-vowel rules are defined for
MIN_NOUN_LENGTH = 3

# Endings after which a fluent vowel surfaces
NULL_ENDINGS = ("", "ь")


def noun_stem(base: str) -> str:
    """Dictionary form minus its nominative-singular marker, if any."""
    if base and base[-1] in STEM_MARKERS:
        return base[:-1]
    return base


def _nominative_plural(noun: Noun) -> str:
    if isinstance(noun.exception, PluralOverride):
        return noun.exception.ending
    return nominative_plural(noun.gender, noun.declension.kind)


def noun_ending(noun: Noun, case: Case, number: Number) -> str:
    """Ending for one paradigm cell of a declinable noun.

    Raises:
        UnsupportedDeclension: the noun's class has no rule group.
    """
    kind = noun.declension.kind
    group = RULE_GROUPS.get(kind)
    if group is None:
        raise UnsupportedDeclension.from_err(
            unsupported_declension(noun.base, str(noun.declension), origin="noun_engine")
        )

    gender = noun.gender
    animate = noun.animacy is Animacy.ANIMATE

    if number is Number.SINGULAR:
        match case:
            case Case.NOMINATIVE:
                return nominative_singular(gender, kind)
            case Case.GENITIVE:
                return genitive_singular(gender, kind)
            case Case.ACCUSATIVE:
                if gender is Gender.FEMININE:
                    return FEMININE_ACCUSATIVE[group]
                if animate:
                    return genitive_singular(gender, kind)
                return nominative_singular(gender, kind)
            case _:
                return OBLIQUE_ENDINGS[group][gender][case][0]

    match case:
        case Case.NOMINATIVE:
            return _nominative_plural(noun)
        case Case.GENITIVE:
            return genitive_plural(gender, kind)
        case Case.ACCUSATIVE:
            return genitive_plural(gender, kind) if animate else _nominative_plural(noun)
        case _:
            return OBLIQUE_ENDINGS[group][gender][case][1]


def apply_fluent_vowel(stem: str, ending: str, vowel: str) -> str:
    """Insert or elide a fluent vowel before the last stem letter.

    The vowel shows up before a null ending (сон, окон) and drops out
    before any other ending (сна, окна).
    """
    if not stem:
        return stem

    null_ending = ending in NULL_ENDINGS
    second_last = stem[-2] if len(stem) >= 2 else None

    if null_ending and second_last != vowel:
        return stem[:-1] + vowel + stem[-1]
    if not null_ending and second_last == vowel:
        return stem[:-2] + stem[-1]
    return stem


def decline_noun(noun: Noun, case: Case, number: Number) -> str:
    """Inflect a noun into the requested case and number.

    Raises:
        ClassificationError: base shorter than three letters.
        UnsupportedDeclension: declension class without implemented rules.
    """
    if noun.declension.kind is DeclensionClass.T0:
        return noun.base
    if len(noun.base) < MIN_NOUN_LENGTH:
        raise ClassificationError.from_err(classification_failed(
            noun.base,
            f"noun needs at least {MIN_NOUN_LENGTH} letters",
            origin="noun_engine",
        ))

    ending = noun_ending(noun, case, number)
    stem = noun_stem(noun.base)
    if isinstance(noun.exception, FluentVowel):
        stem = apply_fluent_vowel(stem, ending, noun.exception.vowel)
    return stem + ending
