"""Monadic Error Handling Types

Result/Either types for deterministic, composable error propagation through
the inflection engines. Uses Python's type system to enforce exhaustive
matching at type-check time.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Generic, NoReturn, TypeVar, Union, final
from uuid import uuid4

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound="AppError")


class ErrorCode(Enum):
    """Hierarchical error code taxonomy.

    E2xxx: Validation / malformed input
    E4xxx: Lookup errors
    E5xxx: Grammar rules that are recognized but not implemented
    E9xxx: Internal/Unknown errors
    """
    # Validation (E2xxx)
    E2000_VALIDATION_GENERIC = 2000
    E2002_INVALID_FORMAT = 2002
    E2030_CLASSIFICATION_FAILED = 2030

    # Lookup (E4xxx)
    E4010_NOT_FOUND = 4010

    # Grammar (E5xxx)
    E5030_UNSUPPORTED_DECLENSION = 5030

    # Internal (E9xxx)
    E9000_INTERNAL_GENERIC = 9000
    E9001_UNEXPECTED_ERROR = 9001

    @property
    def http_status(self) -> int:
        """Map error code to appropriate HTTP status."""
        code = self.value
        if 2000 <= code < 3000:
            return 400
        if code == 4010:
            return 404
        if code == 5030:
            return 422
        if 5000 <= code < 6000:
            return 409
        return 500

    @property
    def category(self) -> str:
        code = self.value
        if 2000 <= code < 3000:
            return "validation"
        if 4000 <= code < 5000:
            return "lookup"
        if 5000 <= code < 6000:
            return "grammar"
        return "internal"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Where and when an error was raised, for log correlation."""
    correlation_id: str = field(default_factory=lambda: str(uuid4())[:8])
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    origin: str = ""
    request_id: str | None = None


@dataclass(frozen=True, slots=True)
class AppError:
    """Base application error.

    Metadata carries the offending word and the requested grammatical
    category so that clients can show what failed without parsing the
    message.
    """
    code: ErrorCode
    message: str
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict = field(default_factory=dict)
    cause: Exception | None = None

    def with_context(self, **kwargs) -> AppError:
        """Copy with request tracing fields filled in."""
        new_ctx = ErrorContext(
            correlation_id=kwargs.get("correlation_id") or self.context.correlation_id,
            timestamp=self.context.timestamp,
            origin=kwargs.get("origin", self.context.origin),
            request_id=kwargs.get("request_id", self.context.request_id),
        )
        return AppError(
            code=self.code,
            message=self.message,
            context=new_ctx,
            metadata=self.metadata,
            cause=self.cause,
        )

    def to_dict(self) -> dict:
        """Serialize error for API responses."""
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "message": self.message,
                "category": self.code.category,
                "correlation_id": self.context.correlation_id,
                "timestamp": self.context.timestamp.isoformat(),
                "metadata": self.metadata,
            }
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U, AppError]:
        return Ok(f(self.value))


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        return self  # type: ignore


Result = Union[Ok[T], Err[E]]


def sequence_results(results: list[Result[T, AppError]]) -> Result[list[T], AppError]:
    """Collect the values of all results, or return the first error."""
    values: list[T] = []
    for r in results:
        match r:
            case Ok(v):
                values.append(v)
            case Err(e):
                return Err(e)
    return Ok(values)
