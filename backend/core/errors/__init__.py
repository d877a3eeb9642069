"""Monadic Error Handling System

Result/Either types plus typed application errors for the inflection
engines and the HTTP layer.

Key components:
- Result[T, E]: Monadic container for success/failure
- AppError: Base error type with context
- ErrorCode: Hierarchical error code taxonomy
- Builder functions: Ergonomic error construction
- AppErrorException and its engine subclasses for exception-based callers

Usage:
    from core.errors import Ok, Err, Result, AppError

    match engine.decline_noun_result(noun, Case.GENITIVE, Number.SINGULAR):
        case Ok(form):
            print(form)
        case Err(error):
            log.error(error.message, code=error.code.name)

FastAPI handlers live in core.errors.handlers so that the engines do not
import the web stack.
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    sequence_results,
)

from .builders import (
    validation_error,
    invalid_format,
    classification_failed,
    not_found,
    unsupported_declension,
)

from .exceptions import (
    AppErrorException,
    ClassificationError,
    UnsupportedDeclension,
    LexiconError,
    raise_error,
    raise_result,
)

__all__ = [
    # Core types
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "sequence_results",
    # Builders
    "validation_error",
    "invalid_format",
    "classification_failed",
    "not_found",
    "unsupported_declension",
    # Exceptions
    "AppErrorException",
    "ClassificationError",
    "UnsupportedDeclension",
    "LexiconError",
    "raise_error",
    "raise_result",
]
