"""
Result type

Tagged success/failure value returned by every use case.
Use cases never raise for expected business failures; they return
Return.err(...) and let the API layer decide how to render it.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Error:
    """Business error with a stable machine-readable code"""

    code: str
    message: str


class Result(Generic[T]):
    """Either a value (ok) or an Error (err)"""

    __slots__ = ("_value", "_error")

    def __init__(self, value: Optional[T] = None, error: Optional[Error] = None):
        self._value = value
        self._error = error

    def is_ok(self) -> bool:
        return self._error is None

    def is_err(self) -> bool:
        return self._error is not None

    @property
    def value(self) -> T:
        if self._error is not None:
            raise ValueError(f"Result is an error: {self._error.code}")
        return self._value

    @property
    def error(self) -> Error:
        if self._error is None:
            raise ValueError("Result is ok, it has no error")
        return self._error

    def __repr__(self) -> str:
        if self.is_err():
            return f"Result(error={self._error!r})"
        return f"Result(value={self._value!r})"


class Return:
    """Constructors for Result"""

    @staticmethod
    def ok(value: Optional[T] = None) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result[T]:
        return Result(error=error)
