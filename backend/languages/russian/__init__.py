"""Russian: rule-based noun and adjective inflection."""
from .adjective import adjective_ending, classify_adjective, decline_adjective
from .lexemes import (
    REGULAR,
    Adjective,
    AdjectiveDeclension,
    AdjectiveGroup,
    DeclensionClass,
    FluentVowel,
    Noun,
    NounDeclension,
    NounException,
    PluralOverride,
    Regular,
)
from .lexicon import ADJECTIVE_GROUPS, Lexicon, get_lexicon, load_lexicon, parse_lexicon
from .module import RussianModule
from .morph import ParadigmCell, RussianInflectionEngine
from .noun import apply_fluent_vowel, decline_noun, noun_ending, noun_stem

__all__ = [
    "adjective_ending",
    "classify_adjective",
    "decline_adjective",
    "REGULAR",
    "Adjective",
    "AdjectiveDeclension",
    "AdjectiveGroup",
    "DeclensionClass",
    "FluentVowel",
    "Noun",
    "NounDeclension",
    "NounException",
    "PluralOverride",
    "Regular",
    "ADJECTIVE_GROUPS",
    "Lexicon",
    "get_lexicon",
    "load_lexicon",
    "parse_lexicon",
    "RussianModule",
    "ParadigmCell",
    "RussianInflectionEngine",
    "apply_fluent_vowel",
    "decline_noun",
    "noun_ending",
    "noun_stem",
]
