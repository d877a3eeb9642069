"""Lexicon API Routes

Read-only view of the oddity lexicon.
"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from languages.russian import Lexicon, get_lexicon
from languages.russian.lexemes import FluentVowel, PluralOverride

router = APIRouter()


class NounResponse(BaseModel):
    base: str
    gender: str
    animacy: str
    declension: str
    fluent_vowel: str | None = None
    plural: str | None = None


class LexiconResponse(BaseModel):
    objects: list[NounResponse]
    adjectives: dict[str, list[str]]


@router.get("/", response_model=LexiconResponse)
async def get_lexicon_entries(lexicon: Lexicon = Depends(get_lexicon)):
    """All nouns and adjective groups, in generation order."""
    objects = []
    for noun in lexicon.objects:
        exception = noun.exception
        objects.append(NounResponse(
            base=noun.base,
            gender=noun.gender.value,
            animacy=noun.animacy.value,
            declension=str(noun.declension),
            fluent_vowel=exception.vowel if isinstance(exception, FluentVowel) else None,
            plural=exception.ending if isinstance(exception, PluralOverride) else None,
        ))
    return LexiconResponse(
        objects=objects,
        adjectives={name: [a.text for a in words] for name, words in lexicon.adjectives.items()},
    )


@router.get("/summary")
async def get_lexicon_summary(lexicon: Lexicon = Depends(get_lexicon)):
    """Entry counts per group."""
    return lexicon.summary()
