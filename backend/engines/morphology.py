"""Inflection Engine - language-agnostic entry point.

Re-exports the Russian rule engine and resolves engines through the
language registry. New code may import directly from languages.russian.
"""
from core.errors import AppErrorException, invalid_format
from languages import get_module
from languages.russian import ParadigmCell, RussianInflectionEngine


def get_inflection_engine(language: str = "ru") -> RussianInflectionEngine:
    """Inflection engine for a registered language.

    Raises:
        AppErrorException: unknown language, or a language without inflection rules.
    """
    engine = get_module(language).get_morphology_engine()
    if not isinstance(engine, RussianInflectionEngine):
        raise AppErrorException.from_err(
            invalid_format("language", "language with rule-based inflection", language, origin="morphology")
        )
    return engine


__all__ = [
    "get_inflection_engine",
    "RussianInflectionEngine",
    "ParadigmCell",
]
