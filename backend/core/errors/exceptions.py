"""Exception wrappers around AppError.

The inflection engines raise these so that callers which do not use the
Result monad still get the full typed error. The HTTP layer renders any
AppErrorException through its `error` attribute.
"""
from __future__ import annotations

from typing import NoReturn

from .types import AppError, ErrorCode, Err


class AppErrorException(Exception):
    """Exception wrapper for AppError."""

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(str(error))

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    @classmethod
    def from_err(cls, result: Err[AppError]) -> AppErrorException:
        return cls(result.unwrap_err())


class ClassificationError(AppErrorException):
    """Dictionary form too short or malformed to classify."""


class UnsupportedDeclension(AppErrorException):
    """Noun declension class recognized but without inflection rules."""


class LexiconError(AppErrorException):
    """Lexicon data failed to load or validate."""


_BY_CODE: dict[ErrorCode, type[AppErrorException]] = {
    ErrorCode.E2030_CLASSIFICATION_FAILED: ClassificationError,
    ErrorCode.E5030_UNSUPPORTED_DECLENSION: UnsupportedDeclension,
}


def raise_error(error: AppError) -> NoReturn:
    """Raise an AppError as the most specific exception type for its code."""
    raise _BY_CODE.get(error.code, AppErrorException)(error)


def raise_result(result) -> None:
    """Raise error if Result is Err, otherwise return.

    Usage:
        result = engine.decline_noun_result(noun, case, number)
        raise_result(result)  # Raises if Err
    """
    if result.is_err():
        raise_error(result.unwrap_err())
