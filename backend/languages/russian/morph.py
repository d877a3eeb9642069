"""Russian Inflection Engine

Rule-based generation of noun and adjective forms from dictionary entries.
Exposes exception-raising operations for direct callers and Result-returning
variants for code that composes errors monadically. Also builds full
paradigms and pattern descriptions for the grammar API.
"""
from dataclasses import dataclass

from core.logging import engine_logger
from core.errors import AppError, AppErrorException, Err, Ok, Result
from languages.types import CASES, GENDERS, NUMBERS, Animacy, Case, Gender, Number

from .adjective import classify_adjective, decline_adjective
from .declension import PATTERN_EXAMPLES, RULE_GROUPS
from .lexemes import Adjective, AdjectiveDeclension, DeclensionClass, Noun, NounDeclension
from .noun import decline_noun, noun_ending, noun_stem

log = engine_logger()


@dataclass(frozen=True, slots=True)
class ParadigmCell:
    """One inflected form and the category that produced it."""
    case: Case
    number: Number
    form: str
    gender: Gender | None = None

    def to_dict(self) -> dict:
        cell = {"case": self.case.value, "number": self.number.value, "form": self.form}
        if self.gender is not None:
            cell["gender"] = self.gender.value
        return cell


def _capture(f, *args) -> Result:
    try:
        return Ok(f(*args))
    except AppErrorException as e:
        return Err(e.error)


class RussianInflectionEngine:
    """Engine for Russian noun and adjective generation."""

    __slots__ = ()

    def classify_adjective(self, adjective: Adjective) -> AdjectiveDeclension:
        return classify_adjective(adjective)

    def decline_noun(self, noun: Noun, case: Case, number: Number) -> str:
        form = decline_noun(noun, case, number)
        log.debug("noun_declined", base=noun.base, case=case.value, number=number.value, form=form)
        return form

    def decline_adjective(
        self,
        adjective: Adjective,
        gender: Gender,
        animacy: Animacy,
        case: Case,
        number: Number,
    ) -> str:
        form = decline_adjective(adjective, gender, animacy, case, number)
        log.debug(
            "adjective_declined",
            text=adjective.text,
            gender=gender.value,
            animacy=animacy.value,
            case=case.value,
            number=number.value,
            form=form,
        )
        return form

    def classify_adjective_result(self, adjective: Adjective) -> Result[AdjectiveDeclension, AppError]:
        return _capture(classify_adjective, adjective)

    def decline_noun_result(self, noun: Noun, case: Case, number: Number) -> Result[str, AppError]:
        """Decline with Result type for typed error handling."""
        return _capture(self.decline_noun, noun, case, number)

    def decline_adjective_result(
        self,
        adjective: Adjective,
        gender: Gender,
        animacy: Animacy,
        case: Case,
        number: Number,
    ) -> Result[str, AppError]:
        """Decline with Result type for typed error handling."""
        return _capture(self.decline_adjective, adjective, gender, animacy, case, number)

    # === Paradigms ===

    def noun_paradigm(self, noun: Noun) -> list[ParadigmCell]:
        """All twelve forms, singular before plural within each case."""
        return [
            ParadigmCell(case=case, number=number, form=decline_noun(noun, case, number))
            for case in CASES
            for number in NUMBERS
        ]

    def adjective_paradigm(self, adjective: Adjective, animacy: Animacy = Animacy.INANIMATE) -> list[ParadigmCell]:
        """Singular forms for every gender followed by the plural forms."""
        cells = [
            ParadigmCell(
                case=case,
                number=Number.SINGULAR,
                gender=gender,
                form=decline_adjective(adjective, gender, animacy, case, Number.SINGULAR),
            )
            for gender in GENDERS
            for case in CASES
        ]
        cells.extend(
            ParadigmCell(
                case=case,
                number=Number.PLURAL,
                form=decline_adjective(adjective, Gender.MASCULINE, animacy, case, Number.PLURAL),
            )
            for case in CASES
        )
        return cells

    def noun_paradigm_result(self, noun: Noun) -> Result[list[ParadigmCell], AppError]:
        return _capture(self.noun_paradigm, noun)

    def adjective_paradigm_result(
        self, adjective: Adjective, animacy: Animacy = Animacy.INANIMATE
    ) -> Result[list[ParadigmCell], AppError]:
        return _capture(self.adjective_paradigm, adjective, animacy)

    # === Pattern descriptions for teaching ===

    def describe_patterns(self) -> dict:
        """Ending tables of every implemented class, keyed by class and gender.

        Endings are computed through the engine on inanimate example nouns,
        so the description always matches what decline_noun produces.
        """
        patterns = {}
        for kind, examples in PATTERN_EXAMPLES.items():
            for gender, example in examples.items():
                noun = Noun(example, gender, Animacy.INANIMATE, NounDeclension(kind))
                patterns[f"{kind.value}_{gender.value}"] = {
                    "id": f"{kind.value.lower()}_{gender.value}",
                    "declension": kind.value,
                    "rule_group": RULE_GROUPS[kind].value,
                    "description": kind.description,
                    "gender": gender.value,
                    "example": example,
                    "stem": noun_stem(example),
                    "endings": {
                        case.value: {
                            number.value: noun_ending(noun, case, number)
                            for number in NUMBERS
                        }
                        for case in CASES
                    },
                }
        return patterns

    def supported_declensions(self) -> list[str]:
        return [DeclensionClass.T0.value, *(kind.value for kind in RULE_GROUPS)]
