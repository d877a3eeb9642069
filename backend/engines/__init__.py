from engines.morphology import get_inflection_engine
from engines.oddity import Oddity, OddityGenerator, OddityProbabilities, OddityService, present
from engines.phrase import NounGroup, NounPhrase, Phrase, WithPhrase, join_parts

__all__ = [
    "get_inflection_engine",
    "Oddity",
    "OddityGenerator",
    "OddityProbabilities",
    "OddityService",
    "present",
    "NounGroup",
    "NounPhrase",
    "Phrase",
    "WithPhrase",
    "join_parts",
]
