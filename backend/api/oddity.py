"""Oddity API Routes

Generates one oddity sentence per request. Supplying a seed makes the
sentence reproducible.
"""
from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from engines.oddity import OddityService
from engines.phrase import WithPhrase

router = APIRouter()


def get_oddity_service() -> OddityService:
    return OddityService()


class OddityResponse(BaseModel):
    text: str
    kind: str
    seed: int | None = None


@router.get("/", response_model=OddityResponse)
async def generate_oddity(
    seed: int | None = Query(None),
    service: OddityService = Depends(get_oddity_service),
):
    """Generate a new oddity."""
    oddity = service.generate(seed)
    kind = "with" if isinstance(oddity.phrase, WithPhrase) else "noun"
    return OddityResponse(text=oddity.text, kind=kind, seed=seed)
