import pytest
from fastapi.testclient import TestClient

from languages.russian import (
    REGULAR,
    Adjective,
    DeclensionClass,
    FluentVowel,
    Noun,
    NounDeclension,
    RussianInflectionEngine,
    get_lexicon,
)
from languages.types import Animacy, Gender


def make_noun(base, gender, animacy=Animacy.INANIMATE, kind=DeclensionClass.T1, exception=REGULAR, glide=None):
    """Build a Noun without going through the lexicon."""
    return Noun(base, gender, animacy, NounDeclension(kind, glide), exception)


@pytest.fixture(scope="session")
def engine():
    return RussianInflectionEngine()


@pytest.fixture(scope="session")
def lexicon():
    return get_lexicon()


@pytest.fixture
def topor():
    return make_noun("топор", Gender.MASCULINE)


@pytest.fixture
def kot():
    return make_noun("кот", Gender.MASCULINE, Animacy.ANIMATE)


@pytest.fixture
def vaza():
    return make_noun("ваза", Gender.FEMININE)


@pytest.fixture
def son():
    return make_noun("сон", Gender.MASCULINE, exception=FluentVowel("о"))


@pytest.fixture
def big():
    return Adjective("большой")


@pytest.fixture(scope="session")
def client():
    from main import app

    with TestClient(app) as test_client:
        yield test_client
