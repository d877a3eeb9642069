"""Russian grammar configuration for API clients."""
from languages.base import CaseConfig, DeclensionConfig, GenderConfig, NumberConfig, GrammarConfig
from languages.types import Animacy, Case, Gender, Number

from .declension import SUPPORTED_CLASSES
from .lexemes import DeclensionClass

CASE_CONFIGS = [
    CaseConfig(
        id=Case.NOMINATIVE.value,
        label="Nominative",
        native_label="именительный",
        hint="кто? что? (who? what?)",
    ),
    CaseConfig(
        id=Case.GENITIVE.value,
        label="Genitive",
        native_label="родительный",
        hint="кого? чего? (of whom? of what?)",
    ),
    CaseConfig(
        id=Case.DATIVE.value,
        label="Dative",
        native_label="дательный",
        hint="кому? чему? (to whom? to what?)",
    ),
    CaseConfig(
        id=Case.ACCUSATIVE.value,
        label="Accusative",
        native_label="винительный",
        hint="кого? что? (whom? what?)",
    ),
    CaseConfig(
        id=Case.INSTRUMENTAL.value,
        label="Instrumental",
        native_label="творительный",
        hint="кем? чем? (with whom? with what?)",
    ),
    CaseConfig(
        id=Case.LOCATIVE.value,
        label="Locative",
        native_label="предложный",
        hint="о ком? о чём? (about whom? about what?)",
    ),
]

GENDER_CONFIGS = [
    GenderConfig(id=Gender.MASCULINE.value, label="Masculine", short="m"),
    GenderConfig(id=Gender.FEMININE.value, label="Feminine", short="f"),
    GenderConfig(id=Gender.NEUTER.value, label="Neuter", short="n"),
]

NUMBER_CONFIGS = [
    NumberConfig(id=Number.SINGULAR.value, label="Singular"),
    NumberConfig(id=Number.PLURAL.value, label="Plural"),
]

DECLENSION_CONFIGS = [
    DeclensionConfig(id=kind.value, description=kind.description, supported=kind in SUPPORTED_CLASSES)
    for kind in DeclensionClass
]

RUSSIAN_GRAMMAR_CONFIG = GrammarConfig(
    cases=CASE_CONFIGS,
    genders=GENDER_CONFIGS,
    numbers=NUMBER_CONFIGS,
    animacies=[a.value for a in Animacy],
    declensions=DECLENSION_CONFIGS,
    has_declension=True,
)
