from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from .either import Either

E = TypeVar("E")
A = TypeVar("A")


class Result(Generic[E, A]):
    """Success/failure outcome; ``Either.to_result`` maps Left to ``Err`` and Right to ``Ok``."""

    def is_ok(self) -> bool: raise NotImplementedError
    def is_err(self) -> bool: return not self.is_ok()

    def to_either(self) -> "Either[E, A]":
        return to_either(self)


@dataclass(frozen=True)
class Ok(Result[E, A]):
    value: A
    def is_ok(self) -> bool: return True


@dataclass(frozen=True)
class Err(Result[E, A]):
    error: E
    def is_ok(self) -> bool: return False


def from_either(e: "Either[E, A]") -> Result[E, A]:
    return e.to_result()


def to_either(r: Result[E, A]) -> "Either[E, A]":
    from .either import Left, Right
    if isinstance(r, Err):
        return Left(r.error)
    return Right(r.value)  # type: ignore[attr-defined]
