"""Russian noun ending tables.

Nominative and genitive endings come from four helpers keyed on
(gender, declension class); the accusative reuses them. Dative,
instrumental and locative are plain per-(rule group, gender) constants.
An empty string is the null ending.
"""
from enum import Enum

from languages.types import Case, Gender

from .lexemes import DeclensionClass


class RuleGroup(Enum):
    HARD = "hard"
    SOFT = "soft"


# Declension classes with implemented rules. Velar stems decline like hard
# stems apart from the masculine and feminine nominative plural.
RULE_GROUPS = {
    DeclensionClass.T1: RuleGroup.HARD,
    DeclensionClass.T3: RuleGroup.HARD,
    DeclensionClass.T2: RuleGroup.SOFT,
}

SUPPORTED_CLASSES = frozenset({DeclensionClass.T0, *RULE_GROUPS})

# (singular, plural) endings by rule group, gender and case
OBLIQUE_ENDINGS = {
    RuleGroup.HARD: {
        Gender.MASCULINE: {
            Case.DATIVE: ("у", "ам"),
            Case.INSTRUMENTAL: ("ом", "ами"),
            Case.LOCATIVE: ("е", "ах"),
        },
        Gender.FEMININE: {
            Case.DATIVE: ("е", "ам"),
            Case.INSTRUMENTAL: ("ой", "ами"),
            Case.LOCATIVE: ("е", "ах"),
        },
        Gender.NEUTER: {
            Case.DATIVE: ("у", "ам"),
            Case.INSTRUMENTAL: ("ом", "ами"),
            Case.LOCATIVE: ("е", "ах"),
        },
    },
    RuleGroup.SOFT: {
        Gender.MASCULINE: {
            Case.DATIVE: ("ю", "ям"),
            Case.INSTRUMENTAL: ("ем", "ями"),
            Case.LOCATIVE: ("е", "ях"),
        },
        Gender.FEMININE: {
            Case.DATIVE: ("е", "ям"),
            Case.INSTRUMENTAL: ("ей", "ями"),
            Case.LOCATIVE: ("е", "ях"),
        },
        Gender.NEUTER: {
            Case.DATIVE: ("ю", "ям"),
            Case.INSTRUMENTAL: ("ем", "ями"),
            Case.LOCATIVE: ("е", "ях"),
        },
    },
}

# Classes taking ы in the masculine and feminine nominative plural
_Y_PLURAL_CLASSES = frozenset({DeclensionClass.T1, DeclensionClass.T4})

# Classes taking а in the non-feminine genitive singular
_A_GENITIVE_CLASSES = frozenset({DeclensionClass.T1, DeclensionClass.T3, DeclensionClass.T5})

# Feminine accusative singular
FEMININE_ACCUSATIVE = {
    RuleGroup.HARD: "у",
    RuleGroup.SOFT: "ю",
}


def nominative_singular(gender: Gender, kind: DeclensionClass) -> str:
    soft = RULE_GROUPS[kind] is RuleGroup.SOFT
    match gender:
        case Gender.MASCULINE:
            return "ь" if soft else ""
        case Gender.FEMININE:
            return "я" if soft else "а"
        case Gender.NEUTER:
            return "е" if soft else "о"


def nominative_plural(gender: Gender, kind: DeclensionClass) -> str:
    if gender is not Gender.NEUTER and kind in _Y_PLURAL_CLASSES:
        return "ы"
    return "и"


def genitive_singular(gender: Gender, kind: DeclensionClass) -> str:
    if gender is Gender.FEMININE:
        return "е"
    return "а" if kind in _A_GENITIVE_CLASSES else "я"


def genitive_plural(gender: Gender, kind: DeclensionClass) -> str:
    soft = RULE_GROUPS[kind] is RuleGroup.SOFT
    match gender:
        case Gender.MASCULINE:
            return "ей" if soft else "ов"
        case Gender.FEMININE:
            return "ь" if soft else ""
        case Gender.NEUTER:
            return "ей" if soft else ""


# Example nouns per implemented class, used when describing patterns
PATTERN_EXAMPLES = {
    DeclensionClass.T1: {Gender.MASCULINE: "стол", Gender.FEMININE: "ваза", Gender.NEUTER: "блюдо"},
    DeclensionClass.T2: {Gender.MASCULINE: "рояль", Gender.FEMININE: "дыня", Gender.NEUTER: "поле"},
    DeclensionClass.T3: {Gender.MASCULINE: "утюг", Gender.FEMININE: "книга", Gender.NEUTER: "облако"},
}
