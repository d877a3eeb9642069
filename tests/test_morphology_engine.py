import pytest

from conftest import make_noun
from core.errors import AppErrorException, Err, ErrorCode, Ok, sequence_results
from engines import get_inflection_engine
from languages import get_module
from languages.russian import Adjective, AdjectiveDeclension, DeclensionClass, RussianInflectionEngine
from languages.types import CASES, Animacy, Case, Gender, Number


def test_engine_resolved_through_registry():
    assert isinstance(get_inflection_engine("ru"), RussianInflectionEngine)


def test_unknown_language():
    with pytest.raises(AppErrorException) as exc_info:
        get_inflection_engine("xx")
    assert exc_info.value.code is ErrorCode.E4010_NOT_FOUND


def test_noun_result_ok(engine, topor):
    result = engine.decline_noun_result(topor, Case.GENITIVE, Number.PLURAL)
    assert result == Ok("топоров")


def test_noun_result_err(engine):
    knife = make_noun("нож", Gender.MASCULINE, kind=DeclensionClass.T4)
    match engine.decline_noun_result(knife, Case.DATIVE, Number.SINGULAR):
        case Err(error):
            assert error.code is ErrorCode.E5030_UNSUPPORTED_DECLENSION
            assert error.code.http_status == 422
        case Ok(form):
            pytest.fail(f"unexpected form {form}")


def test_adjective_result(engine):
    ok = engine.decline_adjective_result(
        Adjective("красивый"), Gender.FEMININE, Animacy.INANIMATE, Case.NOMINATIVE, Number.SINGULAR
    )
    err = engine.decline_adjective_result(
        Adjective("ый"), Gender.FEMININE, Animacy.INANIMATE, Case.NOMINATIVE, Number.SINGULAR
    )
    assert ok.unwrap() == "красивая"
    assert err.unwrap_err().code is ErrorCode.E2030_CLASSIFICATION_FAILED
    assert err.unwrap_err().code.http_status == 400
    assert err.unwrap_or("?") == "?"


def test_classify_result(engine, big):
    assert engine.classify_adjective_result(big) == Ok(AdjectiveDeclension.MIXED_O)


def test_results_compose(engine, topor, kot):
    results = [engine.decline_noun_result(noun, Case.INSTRUMENTAL, Number.SINGULAR) for noun in (topor, kot)]
    assert sequence_results(results) == Ok(["топором", "котом"])

    shout = engine.decline_noun_result(topor, Case.DATIVE, Number.SINGULAR).map(str.upper)
    assert shout.unwrap() == "ТОПОРУ"


def test_noun_paradigm(engine, kot):
    cells = engine.noun_paradigm(kot)
    assert len(cells) == 12
    assert [c.number for c in cells[:2]] == [Number.SINGULAR, Number.PLURAL]
    assert cells[0].to_dict() == {"case": "nominative", "number": "singular", "form": "кот"}
    assert cells[-1].form == "котах"


def test_adjective_paradigm(engine, big):
    cells = engine.adjective_paradigm(big, Animacy.ANIMATE)
    assert len(cells) == 24
    singular = [c for c in cells if c.number is Number.SINGULAR]
    plural = [c for c in cells if c.number is Number.PLURAL]
    assert len(singular) == 18 and len(plural) == len(CASES)
    assert all(c.gender is None for c in plural)
    accusative = next(c for c in cells if c.gender is Gender.MASCULINE and c.case is Case.ACCUSATIVE)
    assert accusative.form == "большого"
    assert cells[6].to_dict()["gender"] == "feminine"


def test_paradigm_result_err(engine):
    assert engine.adjective_paradigm_result(Adjective("ой")).is_err()


def test_describe_patterns(engine):
    patterns = engine.describe_patterns()
    assert set(patterns) == {f"{k}_{g.value}" for k in ("T1", "T2", "T3") for g in Gender}
    table = patterns["T1_feminine"]
    assert table["rule_group"] == "hard"
    assert table["example"] == "ваза"
    assert table["endings"]["genitive"] == {"singular": "е", "plural": ""}
    assert patterns["T2_masculine"]["endings"]["nominative"]["singular"] == "ь"


def test_supported_declensions(engine):
    assert engine.supported_declensions() == ["T0", "T1", "T3", "T2"]


def test_russian_module(lexicon):
    module = get_module("ru")
    assert module.get_lexicon() is lexicon
    assert module.get_morphology_engine() is module.get_morphology_engine()
    assert module.get_grammar_config().has_declension


def test_short_noun_result_err(engine):
    hedgehog = make_noun("ёж", Gender.MASCULINE, Animacy.ANIMATE)
    result = engine.decline_noun_result(hedgehog, Case.GENITIVE, Number.SINGULAR)
    assert result.unwrap_err().code is ErrorCode.E2030_CLASSIFICATION_FAILED
