"""
Result values for fallible resolution.

A fallible resolver returns Ok(new_state) or Err(error). The fallible
engine returns the same shape: Ok(final_state), or the first Err unchanged.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from .errors import UnwrapError

T = TypeVar("T")
X = TypeVar("X")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """
    Successful outcome.

    Fields:
        value: The state produced by the step (or by the whole resolution)
    """
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Any:
        raise UnwrapError(f"Called unwrap_err() on Ok: {self.value!r}")


@dataclass(frozen=True)
class Err(Generic[X]):
    """
    Failed outcome.

    Fields:
        error: Caller-defined error value, carried verbatim
    """
    error: X

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        raise UnwrapError(f"Called unwrap() on Err: {self.error!r}")

    def unwrap_err(self) -> X:
        return self.error


Result = Union[Ok[T], Err[X]]
