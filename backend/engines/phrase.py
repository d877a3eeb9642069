"""Phrase composition.

A noun group is a head noun with its modifying adjectives, all agreeing in
case and number; adjectives take the head's gender and animacy. A with-phrase
coordinates two groups as "X с Y", the second one in the instrumental.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from languages.russian import Adjective, Noun, RussianInflectionEngine
from languages.types import Case, Number

WITH_PREPOSITION = "с"

_default_engine = RussianInflectionEngine()


def join_parts(parts: Iterable[str]) -> str:
    """Join words with single spaces; a part starting with a comma attaches to the previous one."""
    text = ""
    for part in parts:
        if not part:
            continue
        if text and not part.startswith(","):
            text += " "
        text += part
    return text


@dataclass(frozen=True, slots=True)
class NounGroup:
    noun: Noun
    case: Case = Case.NOMINATIVE
    number: Number = Number.SINGULAR
    modifiers: tuple[Adjective, ...] = ()

    def inflect(self, case: Case | None = None, number: Number | None = None) -> NounGroup:
        return replace(self, case=case or self.case, number=number or self.number)

    def words(self, engine: RussianInflectionEngine = _default_engine) -> list[str]:
        """Declined modifiers followed by the declined head noun."""
        noun = self.noun
        words = [
            engine.decline_adjective(adjective, noun.gender, noun.animacy, self.case, self.number)
            for adjective in self.modifiers
        ]
        words.append(engine.decline_noun(noun, self.case, self.number))
        return words

    def render(self, engine: RussianInflectionEngine = _default_engine) -> str:
        return join_parts(self.words(engine))


@dataclass(frozen=True, slots=True)
class NounPhrase:
    group: NounGroup

    def render(self, engine: RussianInflectionEngine = _default_engine) -> str:
        return self.group.render(engine)


@dataclass(frozen=True, slots=True)
class WithPhrase:
    head: NounGroup
    companion: NounGroup

    def render(self, engine: RussianInflectionEngine = _default_engine) -> str:
        companion = self.companion.inflect(case=Case.INSTRUMENTAL)
        return join_parts([self.head.render(engine), WITH_PREPOSITION, companion.render(engine)])


Phrase = NounPhrase | WithPhrase
