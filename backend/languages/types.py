"""Shared grammatical category types for language modules.

Every category is a closed enumeration whose value is the lowercase wire
name used by lexicon files and the HTTP API.
"""
from enum import Enum

# Alternate spellings accepted when parsing wire values
_CASE_ALIASES = {
    "nom": "nominative",
    "gen": "genitive",
    "dat": "dative",
    "acc": "accusative",
    "inst": "instrumental",
    "ins": "instrumental",
    "loc": "locative",
    "prep": "locative",
    "prepositional": "locative",
}


class Case(str, Enum):
    NOMINATIVE = "nominative"
    GENITIVE = "genitive"
    DATIVE = "dative"
    ACCUSATIVE = "accusative"
    INSTRUMENTAL = "instrumental"
    LOCATIVE = "locative"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            key = value.strip().lower()
            key = _CASE_ALIASES.get(key, key)
            for member in cls:
                if member.value == key:
                    return member
        return None


class Number(str, Enum):
    SINGULAR = "singular"
    PLURAL = "plural"

    @classmethod
    def _missing_(cls, value):
        aliases = {"sg": cls.SINGULAR, "pl": cls.PLURAL}
        if isinstance(value, str):
            key = value.strip().lower()
            return aliases.get(key) or next((m for m in cls if m.value == key), None)
        return None


class Gender(str, Enum):
    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"

    @classmethod
    def _missing_(cls, value):
        aliases = {"m": cls.MASCULINE, "f": cls.FEMININE, "n": cls.NEUTER}
        if isinstance(value, str):
            key = value.strip().lower()
            return aliases.get(key) or next((m for m in cls if m.value == key), None)
        return None


class Animacy(str, Enum):
    ANIMATE = "animate"
    INANIMATE = "inanimate"


# Canonical paradigm ordering
CASES: tuple[Case, ...] = tuple(Case)
NUMBERS: tuple[Number, ...] = tuple(Number)
GENDERS: tuple[Gender, ...] = tuple(Gender)
