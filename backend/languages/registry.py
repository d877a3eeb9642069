"""Language module registry - factory pattern for language support."""
from core.errors import AppErrorException, not_found
from .base import LanguageModule

_MODULES: dict[str, LanguageModule] = {}


def register(module: LanguageModule) -> None:
    """Register a language module."""
    _MODULES[module.code] = module


def get_module(code: str) -> LanguageModule:
    """Get a language module by code.

    Raises:
        AppErrorException: no module registered under `code` (E4010).
    """
    if code not in _MODULES:
        available = ", ".join(_MODULES.keys()) or "none"
        raise AppErrorException.from_err(
            not_found("Language", f"{code} (available: {available})", origin="language_registry")
        )
    return _MODULES[code]


def list_languages() -> list[dict]:
    """List all registered languages."""
    return [{"code": m.code, "name": m.name, "nativeName": m.native_name} for m in _MODULES.values()]


def _auto_register() -> None:
    """Auto-register language modules on import."""
    from .russian import RussianModule
    register(RussianModule())


_auto_register()
