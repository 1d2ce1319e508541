"""
Defines `Outcome`, a payload-free success/failure value used in place of raw booleans.

A function that would otherwise return `True`/`False` returns `Success` or `Failure`
instead, which makes the meaning of the value explicit at every call site. The type
provides boolean-logic combinators (`and_`, `or_`, `and_then`, `or_then`) and
conversions into the `returns` containers (`Maybe`, `Result`) for when a value has
to be attached to the outcome.

Example:

    def do_something() -> Outcome:
        return Success

    match do_something():
        case Outcome.Success:
            print("Well done!")
        case Outcome.Failure:
            print("Oh well :(")
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from typing import TypeVar

from returns.maybe import Maybe, Nothing, Some
from returns.result import Failure as Err
from returns.result import Result
from returns.result import Success as Ok

from .exceptions import OutcomePanicError

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E")


class Outcome(enum.Enum):
    """Represents a success or a failure. Every `Outcome` is either `Success` or `Failure`."""

    Success = enum.auto()
    Failure = enum.auto()

    @classmethod
    def from_bool(cls, good: bool) -> Outcome:
        """Returns `Success` if `good` is true, otherwise `Failure`."""
        return cls.Success if good else cls.Failure

    @classmethod
    def from_result(cls, result: Result[object, object]) -> Outcome:
        """Collapses a `returns` result to its tag, discarding the payload."""
        return cls.from_bool(isinstance(result, Ok))

    @classmethod
    def from_maybe(cls, maybe: Maybe[object]) -> Outcome:
        """Collapses a `returns` maybe to its tag: `Some` is a success, `Nothing` a failure."""
        return cls.from_bool(isinstance(maybe, Some))

    def is_success(self) -> bool:
        return self is Outcome.Success

    def is_failure(self) -> bool:
        return not self.is_success()

    def or_none(self, good: T) -> Maybe[T]:
        """
        Transforms the outcome into a `Maybe`.

        `Success` maps to `Some(good)` and `Failure` maps to `Nothing`.
        """
        if self.is_success():
            return Some(good)
        return Nothing

    def or_err(self, good: T, err: E) -> Result[T, E]:
        """
        Transforms the outcome into a `Result`.

        `Success` maps to `Success(good)` and `Failure` maps to `Failure(err)`.
        """
        if self.is_success():
            return Ok(good)
        return Err(err)

    def or_panic(self, good: T) -> T:
        """
        Returns `good` if the outcome is `Success`.

        Raises:
            OutcomePanicError: If the outcome is `Failure`. Callers use this only once
                they have established that the outcome cannot be a failure.
        """
        if self.is_failure():
            logger.debug("or_panic called on %s", self)
            raise OutcomePanicError()
        return good

    def and_(self, other: Outcome) -> Outcome:
        """Returns `Failure` if this outcome is `Failure`, otherwise `other`."""
        if self.is_failure():
            return Outcome.Failure
        return other

    def or_(self, other: Outcome) -> Outcome:
        """Returns `Success` if this outcome is `Success`, otherwise `other`."""
        if self.is_success():
            return Outcome.Success
        return other

    def and_then(self, f: Callable[[], Outcome]) -> Outcome:
        """Returns `Failure` if this outcome is `Failure`, otherwise calls `f` and returns its result."""
        if self.is_failure():
            return Outcome.Failure
        return f()

    def or_then(self, f: Callable[[], Outcome]) -> Outcome:
        """Returns `Success` if this outcome is `Success`, otherwise calls `f` and returns its result."""
        if self.is_success():
            return Outcome.Success
        return f()

    def __bool__(self) -> bool:
        return self.is_success()

    def __and__(self, other: object) -> Outcome:
        if not isinstance(other, Outcome):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other: object) -> Outcome:
        if not isinstance(other, Outcome):
            return NotImplemented
        return self.or_(other)

    def __str__(self) -> str:
        return self.name


Success = Outcome.Success
Failure = Outcome.Failure

__all__ = ["Failure", "Outcome", "Success"]
