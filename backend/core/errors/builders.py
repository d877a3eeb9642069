"""Domain-Specific Error Builders

Ergonomic constructors for typed errors. Each builder creates an AppError
with the appropriate code and context, wrapped in Err.
"""
from .types import AppError, ErrorCode, ErrorContext, Err


# =============================================================================
# Validation Errors (E2xxx)
# =============================================================================

def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    value: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"field": field, "value": value, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


def invalid_format(
    field: str, expected: str, got: str | None = None, origin: str = ""
) -> Err[AppError]:
    msg = f"Invalid format for '{field}': expected {expected}"
    if got is not None:
        msg += f", got '{got}'"
    return validation_error(
        msg,
        code=ErrorCode.E2002_INVALID_FORMAT,
        field=field,
        expected=expected,
        origin=origin,
    )


def classification_failed(
    word: str, reason: str, origin: str = ""
) -> Err[AppError]:
    """A dictionary form that the orthographic heuristics cannot classify."""
    return validation_error(
        f"Cannot classify '{word}': {reason}",
        code=ErrorCode.E2030_CLASSIFICATION_FAILED,
        field="word",
        value=word,
        origin=origin,
    )


# =============================================================================
# Lookup Errors (E4xxx)
# =============================================================================

def not_found(entity: str, key: str | None = None, origin: str = "") -> Err[AppError]:
    msg = f"{entity} not found"
    if key:
        msg += f": {key}"
    meta = {"entity": entity, "key": key}
    return Err(AppError(
        code=ErrorCode.E4010_NOT_FOUND,
        message=msg,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


# =============================================================================
# Grammar Errors (E5xxx)
# =============================================================================

def unsupported_declension(
    word: str, declension: str, origin: str = ""
) -> Err[AppError]:
    """A recognized declension class whose inflection rules are not implemented."""
    return Err(AppError(
        code=ErrorCode.E5030_UNSUPPORTED_DECLENSION,
        message=f"Declension class {declension} of '{word}' is not supported",
        context=ErrorContext(origin=origin),
        metadata={"word": word, "declension": declension},
    ))
