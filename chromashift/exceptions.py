from __future__ import annotations
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "invalid-argument"


class InvalidColorError(ValueError):
    """
    Raised when a color field or a color string falls outside its model's domain.

    Attributes:
        kind: Always ``ErrorKind.INVALID_ARGUMENT``; lets callers branch without
            parsing the message.
        value: The offending raw input (the original string for parse errors,
            the field value for construction errors).
    """

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: str, value: Any) -> None:
        super().__init__(message)
        self.message = message
        self.value = value

    def __repr__(self) -> str:
        return f"InvalidColorError({self.message!r}, value={self.value!r})"
