"""Language modules.

Provides factory/registry pattern for language-specific functionality.
"""
from .registry import get_module, register, list_languages
from .base import LanguageModule, GrammarConfig
from .types import Animacy, Case, Gender, Number

__all__ = [
    "get_module",
    "register",
    "list_languages",
    "LanguageModule",
    "GrammarConfig",
    "Animacy",
    "Case",
    "Gender",
    "Number",
]
