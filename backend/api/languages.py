"""Languages API Routes

Provides language configuration and grammar data for clients.
"""
from fastapi import APIRouter
from pydantic import BaseModel

from core.logging import api_logger
from languages import get_module, list_languages

log = api_logger()

router = APIRouter()


# === Response Models ===

class CaseResponse(BaseModel):
    id: str
    label: str
    nativeLabel: str
    hint: str


class GenderResponse(BaseModel):
    id: str
    label: str
    short: str


class NumberResponse(BaseModel):
    id: str
    label: str


class DeclensionResponse(BaseModel):
    id: str
    description: str
    supported: bool


class GrammarConfigResponse(BaseModel):
    cases: list[CaseResponse]
    genders: list[GenderResponse]
    numbers: list[NumberResponse]
    animacies: list[str]
    declensions: list[DeclensionResponse]
    hasDeclension: bool


class LanguageInfoResponse(BaseModel):
    code: str
    name: str
    nativeName: str


# === Endpoints ===

@router.get("/", response_model=list[LanguageInfoResponse])
async def get_available_languages():
    """Get list of available languages."""
    return list_languages()


@router.get("/{lang_code}", response_model=LanguageInfoResponse)
async def get_language_info(lang_code: str):
    """Get language info by code."""
    module = get_module(lang_code)
    return LanguageInfoResponse(code=module.code, name=module.name, nativeName=module.native_name)


@router.get("/{lang_code}/grammar", response_model=GrammarConfigResponse)
async def get_grammar_config(lang_code: str):
    """Get grammar configuration (cases, genders, numbers, declension classes)."""
    module = get_module(lang_code)
    log.debug("grammar_config_fetched", language=lang_code)
    return module.get_grammar_config().to_dict()


@router.get("/{lang_code}/declension-patterns")
async def get_declension_patterns(lang_code: str):
    """Get noun ending tables for every implemented declension class."""
    module = get_module(lang_code)
    return {"patterns": module.get_declension_patterns()}
