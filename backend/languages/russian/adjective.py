"""Russian adjective declension.

An adjective is classified from the last three letters of its nominative
masculine singular form, then every (gender, animacy, case, number) cell is
a lookup in the ending table below. The table is total: any classifiable
adjective declines into every cell.
"""
from core.errors import ClassificationError, classification_failed
from languages.types import Animacy, Case, Gender, Number

from .lexemes import Adjective, AdjectiveDeclension, AdjectiveGroup

# Stem-final consonants after which ы is spelled и (mixed declension)
MIXED_STEM_ENDS = frozenset("гкхшчщц")

# Length of the dictionary ending (-ый, -ой, -ий)
DICTIONARY_ENDING_LENGTH = 2

MIN_ADJECTIVE_LENGTH = DICTIONARY_ENDING_LENGTH + 1

# Plural endings by case: (hard, mixed/soft). Accusative is resolved by animacy.
_PLURAL = {
    Case.NOMINATIVE: ("ые", "ие"),
    Case.GENITIVE: ("ых", "их"),
    Case.DATIVE: ("ым", "им"),
    Case.INSTRUMENTAL: ("ыми", "ими"),
    Case.LOCATIVE: ("ых", "их"),
}

# Singular (nominative, instrumental) pair decided by subtype alone
_NOMINATIVE_INSTRUMENTAL = {
    AdjectiveDeclension.HARD_Y: ("ый", "ым"),
    AdjectiveDeclension.HARD_O: ("ой", "ым"),
    AdjectiveDeclension.MIXED_O: ("ой", "им"),
    AdjectiveDeclension.MIXED_I: ("ий", "им"),
    AdjectiveDeclension.SOFT: ("ий", "им"),
}

# Oblique singular endings shared by masculine and neuter: (hard/mixed, soft)
_OBLIQUE = {
    Case.GENITIVE: ("ого", "его"),
    Case.DATIVE: ("ому", "ему"),
}


def classify_adjective(adjective: Adjective) -> AdjectiveDeclension:
    """Derive the declension subtype from the dictionary form.

    Raises:
        ClassificationError: text shorter than three letters.
    """
    text = adjective.text
    if len(text) < MIN_ADJECTIVE_LENGTH:
        raise ClassificationError.from_err(classification_failed(
            text,
            f"adjective needs at least {MIN_ADJECTIVE_LENGTH} letters",
            origin="adjective_classifier",
        ))

    ending_start, stem_end = text[-2], text[-3]
    if ending_start == "ы":
        return AdjectiveDeclension.HARD_Y

    is_mixed = stem_end in MIXED_STEM_ENDS
    if ending_start == "о":
        return AdjectiveDeclension.MIXED_O if is_mixed else AdjectiveDeclension.HARD_O
    return AdjectiveDeclension.MIXED_I if is_mixed else AdjectiveDeclension.SOFT


def adjective_ending(
    declension: AdjectiveDeclension,
    gender: Gender,
    animacy: Animacy,
    case: Case,
    number: Number,
) -> str:
    """Ending for one paradigm cell."""
    soft = declension.is_soft

    if number is Number.PLURAL:
        column = 0 if declension.group is AdjectiveGroup.HARD else 1
        if case is Case.ACCUSATIVE:
            case = Case.GENITIVE if animacy is Animacy.ANIMATE else Case.NOMINATIVE
        return _PLURAL[case][column]

    nominative, instrumental = _NOMINATIVE_INSTRUMENTAL[declension]
    oblique = 1 if soft else 0

    match gender:
        case Gender.MASCULINE:
            match case:
                case Case.NOMINATIVE:
                    return nominative
                case Case.GENITIVE | Case.DATIVE:
                    return _OBLIQUE[case][oblique]
                case Case.ACCUSATIVE:
                    if animacy is Animacy.ANIMATE:
                        return _OBLIQUE[Case.GENITIVE][oblique]
                    return nominative
                case Case.INSTRUMENTAL:
                    return instrumental
                case Case.LOCATIVE:
                    return "им" if soft else "ом"
        case Gender.FEMININE:
            match case:
                case Case.NOMINATIVE:
                    return "яя" if soft else "ая"
                case Case.ACCUSATIVE:
                    return "юю" if soft else "ую"
                case _:
                    return "ей" if soft else "ой"
        case Gender.NEUTER:
            match case:
                case Case.NOMINATIVE | Case.ACCUSATIVE:
                    return "ее" if soft else "ое"
                case Case.GENITIVE | Case.DATIVE:
                    return _OBLIQUE[case][oblique]
                case Case.INSTRUMENTAL:
                    return instrumental
                case Case.LOCATIVE:
                    return "ем" if soft else "ом"

    raise ValueError(f"no adjective ending for {gender}/{case}")


def decline_adjective(
    adjective: Adjective,
    gender: Gender,
    animacy: Animacy,
    case: Case,
    number: Number,
) -> str:
    """Inflect an adjective to agree with a noun of the given gender and animacy.

    Raises:
        ClassificationError: text too short to classify.
    """
    declension = classify_adjective(adjective)
    stem = adjective.text[:-DICTIONARY_ENDING_LENGTH]
    return stem + adjective_ending(declension, gender, animacy, case, number)
