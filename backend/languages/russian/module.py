"""Russian language module implementation."""
from languages.base import LanguageModule, GrammarConfig
from .morph import RussianInflectionEngine
from .grammar import RUSSIAN_GRAMMAR_CONFIG
from .lexicon import Lexicon, get_lexicon


class RussianModule(LanguageModule):
    """Russian language module with rule-based noun and adjective inflection."""

    __slots__ = ("_engine",)

    def __init__(self):
        self._engine: RussianInflectionEngine | None = None

    @property
    def code(self) -> str:
        return "ru"

    @property
    def name(self) -> str:
        return "Russian"

    @property
    def native_name(self) -> str:
        return "Русский"

    def get_grammar_config(self) -> GrammarConfig:
        return RUSSIAN_GRAMMAR_CONFIG

    def get_morphology_engine(self) -> RussianInflectionEngine:
        """Get the inflection engine (lazy-loaded)."""
        if self._engine is None:
            self._engine = RussianInflectionEngine()
        return self._engine

    def get_declension_patterns(self) -> dict:
        return self.get_morphology_engine().describe_patterns()

    def get_lexicon(self) -> Lexicon:
        return get_lexicon()
