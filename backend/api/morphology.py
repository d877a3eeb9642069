"""Morphology API with Monadic Error Handling

Declines nouns and adjectives and builds paradigms using Result types;
engine errors surface as structured JSON through the error handlers.
"""
from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from core.errors import raise_result
from core.logging import api_logger
from engines.morphology import RussianInflectionEngine, get_inflection_engine
from languages.russian import Adjective, Lexicon, get_lexicon
from languages.russian.lexicon import NounRecord
from languages.types import Animacy, Case, Gender, Number

log = api_logger()

router = APIRouter()


def get_engine() -> RussianInflectionEngine:
    return get_inflection_engine("ru")


class AdjectiveRequest(BaseModel):
    text: str = Field(min_length=1)
    gender: Gender
    animacy: Animacy = Animacy.INANIMATE
    case: Case
    number: Number = Number.SINGULAR


class NounRequest(NounRecord):
    case: Case
    number: Number = Number.SINGULAR


class AdjectiveFormResponse(BaseModel):
    form: str
    declension: str


class NounFormResponse(BaseModel):
    form: str
    declension: str


class ParadigmCellResponse(BaseModel):
    case: Case
    number: Number
    form: str
    gender: Gender | None = None


class ParadigmResponse(BaseModel):
    lemma: str
    cells: list[ParadigmCellResponse]


@router.post("/adjective", response_model=AdjectiveFormResponse)
async def decline_adjective(request: AdjectiveRequest, engine: RussianInflectionEngine = Depends(get_engine)):
    """Decline an adjective to agree with a noun of the given gender and animacy."""
    adjective = Adjective(request.text)
    declension = engine.classify_adjective_result(adjective)
    raise_result(declension)

    result = engine.decline_adjective_result(
        adjective, request.gender, request.animacy, request.case, request.number
    )
    raise_result(result)
    return AdjectiveFormResponse(form=result.unwrap(), declension=declension.unwrap().value)


@router.post("/noun", response_model=NounFormResponse)
async def decline_noun(request: NounRequest, engine: RussianInflectionEngine = Depends(get_engine)):
    """Decline an ad-hoc noun entry."""
    noun = request.to_noun()
    result = engine.decline_noun_result(noun, request.case, request.number)
    raise_result(result)
    return NounFormResponse(form=result.unwrap(), declension=str(noun.declension))


@router.get("/nouns/{base}/paradigm", response_model=ParadigmResponse)
async def get_noun_paradigm(
    base: str,
    engine: RussianInflectionEngine = Depends(get_engine),
    lexicon: Lexicon = Depends(get_lexicon),
):
    """Full paradigm of a lexicon noun."""
    noun = lexicon.find_noun(base)
    raise_result(noun)

    cells = engine.noun_paradigm_result(noun.unwrap())
    raise_result(cells)
    log.debug("noun_paradigm_built", base=base, cells=len(cells.unwrap()))
    return ParadigmResponse(lemma=base, cells=[c.to_dict() for c in cells.unwrap()])


@router.get("/adjectives/{text}/paradigm", response_model=ParadigmResponse)
async def get_adjective_paradigm(
    text: str,
    animacy: Animacy = Query(Animacy.INANIMATE),
    engine: RussianInflectionEngine = Depends(get_engine),
):
    """Full paradigm of any adjective: singular per gender, then plural."""
    cells = engine.adjective_paradigm_result(Adjective(text), animacy)
    raise_result(cells)
    return ParadigmResponse(lemma=text, cells=[c.to_dict() for c in cells.unwrap()])
