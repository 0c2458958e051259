from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class QuestionWordsError(RuntimeError):
    """Base class for every failure raised by question_words."""


class InvalidCharacter(QuestionWordsError, ValueError):
    """Raised when a Letter is built from a character outside the alphabet."""

    def __init__(self, message: str, character: str | None = None) -> None:
        super().__init__(message)
        self.character = character

    @classmethod
    def for_character(cls, character: str) -> "InvalidCharacter":
        return cls(f"Only a letter can be created, got {character!r}", character)


class InputFormatError(QuestionWordsError, ValueError):
    """Raised when the requested word length is not an integer."""

    def __init__(self, message: str, raw: str | None = None) -> None:
        super().__init__(message)
        self.raw = raw

    @classmethod
    def for_input(cls, raw: str | None) -> "InputFormatError":
        shown = "end of input" if raw is None else repr(raw.strip())
        return cls(f"Word length must be an integer, got {shown}", raw)


class UnexpectedError(QuestionWordsError):
    """Wraps any other failure that happened while processing text."""


class ErrorKind(str, Enum):
    INVALID_CHARACTER = "invalid_character"
    INPUT_FORMAT = "input_format"
    UNEXPECTED = "unexpected"


_KIND_EXCEPTIONS: dict[ErrorKind, type[QuestionWordsError]] = {
    ErrorKind.INVALID_CHARACTER: InvalidCharacter,
    ErrorKind.INPUT_FORMAT: InputFormatError,
    ErrorKind.UNEXPECTED: UnexpectedError,
}


@dataclass(frozen=True, slots=True)
class Failure:
    """A reported failure: its kind and the message shown to the user."""

    kind: ErrorKind
    message: str

    @classmethod
    def from_exception(cls, exc: BaseException) -> "Failure":
        message = str(exc) or type(exc).__name__
        for kind, exc_type in _KIND_EXCEPTIONS.items():
            if isinstance(exc, exc_type):
                return cls(kind=kind, message=message)
        return cls(kind=ErrorKind.UNEXPECTED, message=message)

    def to_exception(self) -> QuestionWordsError:
        return _KIND_EXCEPTIONS[self.kind](self.message)


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):
    """Either a computed value or a Failure, returned instead of raising."""

    value: T | None = None
    failure: Failure | None = None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> "Outcome[T]":
        return cls(failure=Failure(kind=kind, message=message))

    @classmethod
    def from_exception(cls, exc: BaseException) -> "Outcome[T]":
        return cls(failure=Failure.from_exception(exc))

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self) -> T:
        """Return the value or raise the exception matching the failure kind."""
        if self.failure is not None:
            raise self.failure.to_exception()
        return self.value  # type: ignore[return-value]
