from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Optional, TypeVar

if TYPE_CHECKING:
    from .either import Either

T = TypeVar("T")
L = TypeVar("L")


class Option(Generic[T]):
    """Present (``Some``) or absent (``NONE``) value; what ``Either.left_value`` and friends return."""

    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    def to_nullable(self) -> Optional[T]:
        return self.value if self.is_some() else None  # type: ignore[attr-defined]

    def to_either(self, on_none: Callable[[], L]) -> "Either[L, T]":
        from .either import Left, Right
        if self.is_some():
            return Right(self.value)  # type: ignore[attr-defined]
        return Left(on_none())


@dataclass(frozen=True)
class Some(Option[T]):
    value: T
    def is_some(self) -> bool: return True


class _None(Option[Any]):
    __slots__ = ()
    def __repr__(self) -> str: return "NONE"
    def is_some(self) -> bool: return False


NONE: Option[Any] = _None()


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NONE
