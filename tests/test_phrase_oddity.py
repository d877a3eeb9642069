import random

import pytest
from pydantic import ValidationError

from conftest import make_noun
from core.config import Settings
from engines import (
    NounGroup,
    NounPhrase,
    OddityGenerator,
    OddityProbabilities,
    OddityService,
    WithPhrase,
    join_parts,
    present,
)
from languages.russian import ADJECTIVE_GROUPS, Adjective, parse_lexicon
from languages.types import Animacy, Case, Gender, Number

ALWAYS = OddityProbabilities(oddity=1, size=1, shape=1, feel=1, color=1, material=1, with_=0)
NEVER = OddityProbabilities(oddity=0, size=0, shape=0, feel=0, color=0, material=0, with_=0)


@pytest.fixture
def tiny_lexicon():
    return parse_lexicon({
        "objects": [{"base": "кот", "gender": "masculine", "animacy": "animate", "declension": "T1"}],
        "adjectives": {
            "oddity": ["странный"],
            "size": ["большой"],
            "shape": ["круглый"],
            "feel": ["мягкий"],
            "color": ["синий"],
            "material": ["деревянный"],
        },
    })


@pytest.mark.parametrize(
    "parts,expected",
    [
        (["красный", "шар"], "красный шар"),
        (["шар", ",", "кот"], "шар, кот"),
        (["шар", ", и кот"], "шар, и кот"),
        (["", "шар", ""], "шар"),
        ([], ""),
    ],
)
def test_join_parts(parts, expected):
    assert join_parts(parts) == expected


def test_present():
    assert present("синий шар") == "Синий шар."
    assert present("ёж") == "Ёж."


def test_noun_group_agreement(kot, big):
    group = NounGroup(kot, modifiers=(big, Adjective("красный")))
    assert group.render() == "большой красный кот"
    assert group.inflect(Case.ACCUSATIVE).render() == "большого красного кота"
    assert group.inflect(Case.DATIVE, Number.PLURAL).render() == "большим красным котам"


def test_feminine_group(vaza):
    group = NounGroup(vaza, modifiers=(Adjective("синий"),))
    assert group.render() == "синяя ваза"
    assert group.inflect(Case.INSTRUMENTAL).render() == "синей вазой"


def test_with_phrase_puts_companion_in_instrumental(vaza, kot, big):
    phrase = WithPhrase(head=NounGroup(vaza), companion=NounGroup(kot, modifiers=(big,)))
    assert phrase.render() == "ваза с большим котом"
    assert present(phrase.render()) == "Ваза с большим котом."


def test_noun_phrase(topor):
    assert NounPhrase(NounGroup(topor)).render() == "топор"


def test_generator_orders_modifiers_by_category(tiny_lexicon):
    group = OddityGenerator(tiny_lexicon, ALWAYS, random.Random(1)).generate_group()
    assert [a.text for a in group.modifiers] == [tiny_lexicon.group(n)[0].text for n in ADJECTIVE_GROUPS]
    assert group.case is Case.NOMINATIVE and group.number is Number.SINGULAR
    assert group.render() == "странный большой круглый мягкий синий деревянный кот"


def test_generator_without_modifiers(tiny_lexicon):
    phrase = OddityGenerator(tiny_lexicon, NEVER, random.Random(1)).generate_phrase()
    assert isinstance(phrase, NounPhrase)
    assert phrase.group.modifiers == ()
    assert phrase.render() == "кот"


def test_generator_with_phrase(tiny_lexicon):
    probabilities = OddityProbabilities(oddity=0, size=1, shape=0, feel=0, color=0, material=0, with_=1)
    phrase = OddityGenerator(tiny_lexicon, probabilities, random.Random(1)).generate_phrase()
    assert isinstance(phrase, WithPhrase)
    assert phrase.render() == "большой кот с большим котом"


def test_generator_skips_empty_groups():
    lexicon = parse_lexicon({"objects": [{"base": "шар", "gender": "masculine", "animacy": "inanimate", "declension": "T1"}]})
    group = OddityGenerator(lexicon, ALWAYS, random.Random(3)).generate_group()
    assert group.modifiers == ()


def test_seeded_service_is_reproducible(lexicon, engine):
    service = OddityService(lexicon, OddityProbabilities(), engine)
    texts = [service.generate(seed=42).text for _ in range(3)]
    assert len(set(texts)) == 1
    assert texts[0][0].isupper() and texts[0].endswith(".")


def test_service_varies_across_seeds(lexicon, engine):
    service = OddityService(lexicon, OddityProbabilities(), engine)
    assert len({service.generate(seed=seed).text for seed in range(50)}) > 1


def test_every_generated_oddity_renders(lexicon, engine):
    generous = OddityProbabilities(oddity=.5, size=.5, shape=.5, feel=.5, color=.5, material=.5, with_=.5)
    service = OddityService(lexicon, generous, engine)
    for seed in range(200):
        oddity = service.generate(seed=seed)
        assert oddity.text == present(oddity.phrase.render(engine))
        assert "  " not in oddity.text


def test_probabilities_from_settings():
    probabilities = OddityProbabilities.from_settings(Settings(PROBABILITY_SIZE=0.5, PROBABILITY_WITH=1.0))
    assert probabilities.size == 0.5
    assert probabilities.with_ == 1.0
    assert probabilities.for_group("material") == 0.7


@pytest.mark.parametrize("value", [-0.1, 1.5])
def test_probability_settings_are_bounded(value):
    with pytest.raises(ValidationError):
        Settings(PROBABILITY_COLOR=value)


def test_default_probabilities():
    defaults = OddityProbabilities()
    assert (defaults.oddity, defaults.size, defaults.shape, defaults.feel, defaults.color, defaults.material) == (
        0.2, 0.3, 0.3, 0.1, 0.2, 0.7,
    )
    assert defaults.with_ == 0.1


def test_category_aliases():
    assert Gender("f") is Gender.FEMININE
    assert Case("prepositional") is Case.LOCATIVE
    assert Number("pl") is Number.PLURAL
    with pytest.raises(ValueError):
        Animacy("a")
