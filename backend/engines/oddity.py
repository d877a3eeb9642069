"""Oddity Generation Engine

Samples a head noun and, category by category, optional modifying
adjectives from the lexicon, then composes and presents the phrase.
All randomness in the application lives here, behind an injectable
random.Random, so the inflection engines stay deterministic.
"""
import random
from dataclasses import dataclass

from core.config import Settings, settings
from core.logging import generator_logger
from languages.russian import ADJECTIVE_GROUPS, Lexicon, RussianInflectionEngine, get_lexicon

from .phrase import NounGroup, NounPhrase, Phrase, WithPhrase

log = generator_logger()


@dataclass(frozen=True, slots=True)
class OddityProbabilities:
    """Chance that each modifier category contributes a word, plus the with-phrase chance."""
    oddity: float = 0.2
    size: float = 0.3
    shape: float = 0.3
    feel: float = 0.1
    color: float = 0.2
    material: float = 0.7
    with_: float = 0.1

    @classmethod
    def from_settings(cls, config: Settings = settings) -> "OddityProbabilities":
        return cls(
            oddity=config.PROBABILITY_ODDITY,
            size=config.PROBABILITY_SIZE,
            shape=config.PROBABILITY_SHAPE,
            feel=config.PROBABILITY_FEEL,
            color=config.PROBABILITY_COLOR,
            material=config.PROBABILITY_MATERIAL,
            with_=config.PROBABILITY_WITH,
        )

    def for_group(self, name: str) -> float:
        return getattr(self, name)


@dataclass(frozen=True, slots=True)
class Oddity:
    """A finished oddity sentence and the phrase it was rendered from."""
    text: str
    phrase: Phrase


def present(text: str) -> str:
    """Capitalize the first letter and end the sentence with a period."""
    return text[:1].upper() + text[1:] + "."


class OddityGenerator:
    """Random noun groups and phrases drawn from a lexicon."""

    __slots__ = ("_lexicon", "_probabilities", "_rng")

    def __init__(
        self,
        lexicon: Lexicon,
        probabilities: OddityProbabilities | None = None,
        rng: random.Random | None = None,
    ):
        self._lexicon = lexicon
        self._probabilities = probabilities or OddityProbabilities()
        self._rng = rng or random.Random()

    def _chance(self, probability: float) -> bool:
        return self._rng.random() < probability

    def generate_group(self) -> NounGroup:
        """Head noun in the nominative singular with modifiers in fixed category order."""
        noun = self._rng.choice(self._lexicon.objects)
        modifiers = []
        for name in ADJECTIVE_GROUPS:
            words = self._lexicon.group(name)
            if words and self._chance(self._probabilities.for_group(name)):
                modifiers.append(self._rng.choice(words))
        return NounGroup(noun=noun, modifiers=tuple(modifiers))

    def generate_phrase(self) -> Phrase:
        group = self.generate_group()
        if self._chance(self._probabilities.with_):
            return WithPhrase(head=group, companion=self.generate_group())
        return NounPhrase(group)


class OddityService:
    """Generates presented oddity sentences."""

    __slots__ = ("_lexicon", "_probabilities", "_engine")

    def __init__(
        self,
        lexicon: Lexicon | None = None,
        probabilities: OddityProbabilities | None = None,
        engine: RussianInflectionEngine | None = None,
    ):
        self._lexicon = lexicon or get_lexicon()
        self._probabilities = probabilities or OddityProbabilities.from_settings()
        self._engine = engine or RussianInflectionEngine()

    def generate(self, seed: int | None = None) -> Oddity:
        """Produce one sentence; the same seed always gives the same sentence."""
        rng = random.Random(seed)
        phrase = OddityGenerator(self._lexicon, self._probabilities, rng).generate_phrase()
        text = present(phrase.render(self._engine))
        log.info("oddity_generated", text=text, seed=seed, kind=type(phrase).__name__)
        return Oddity(text=text, phrase=phrase)
