from __future__ import annotations
from dataclasses import dataclass
import operator
from operator import attrgetter
from typing import Any, Callable, Generic, List, Optional, TypeVar, Union

from .errors import Failure
from .logger import ConsoleLogger, get_logger
from .option import NONE, Option, Some
from .result import Err, Ok, Result

L = TypeVar("L")
R = TypeVar("R")
L2 = TypeVar("L2")
R2 = TypeVar("R2")
V = TypeVar("V")
X = TypeVar("X", bound=BaseException)

# A callable, or the name of an attribute to read off the payload.
Projection = Union[Callable[[Any], V], str]


def _fn(f: Projection[V]) -> Callable[[Any], V]:
    if isinstance(f, str):
        return attrgetter(f)
    if callable(f):
        return f
    raise TypeError(f"expected a callable or an attribute name, got {type(f).__name__}")


def _type_name(t: type) -> str:
    if t.__module__ == "builtins":
        return t.__qualname__
    return f"{t.__module__}.{t.__qualname__}"


class Either(Generic[L, R]):
    """A value that is exactly one of ``Left(L)`` or ``Right(R)``.

    By convention ``Left`` carries the failure or the reason a value is missing
    and ``Right`` carries the success, but nothing enforces it. Instances are
    immutable: every operation returns a new ``Either`` (or the receiver when
    nothing changes).

    Equality, ordering and hashing follow the payloads. Any ``Left`` sorts
    before any ``Right``.
    """

    value: Any

    def is_left(self) -> bool: raise NotImplementedError
    def is_right(self) -> bool: return not self.is_left()

    def fold(self, on_left: Projection[V], on_right: Projection[V]) -> V:
        """Collapse both sides into one value.

        Each side takes a function or an attribute name. Only the function of
        the active side is called and whatever it raises propagates.
        """
        raise NotImplementedError

    # construction

    @staticmethod
    def if_cond(condition: bool, then: Callable[[], R], otherwise: Callable[[], L]) -> "Either[L, R]":
        """``Right(then())`` if ``condition`` else ``Left(otherwise())``; the other thunk is never called."""
        if condition:
            return Right(then())
        return Left(otherwise())

    @staticmethod
    def error(exc: X) -> "Either[X, R]":
        return Left(exc)

    # inspection

    def left_value(self) -> Option[L]:
        return self.fold(Some, lambda _: NONE)

    def right_value(self) -> Option[R]:
        return self.fold(lambda _: NONE, Some)

    def contains(self, value: R) -> bool:
        return self.fold(lambda _: False, lambda v: v == value)

    # functor / bifunctor / monad

    def map(self, f: Projection[R2]) -> "Either[L, R2]":
        return self.fold(lambda _: self, lambda v: Right(_fn(f)(v)))

    def map_error(self, f: Callable[[L], L2]) -> "Either[L2, R]":
        return self.fold(lambda v: Left(_fn(f)(v)), lambda _: self)

    map_left = map_error

    def bimap(self, on_left: Projection[L2], on_right: Projection[R2]) -> "Either[L2, R2]":
        return self.fold(lambda v: Left(_fn(on_left)(v)), lambda v: Right(_fn(on_right)(v)))

    def flat_map(self, f: Callable[[R], "Either[L, R2]"]) -> "Either[L, R2]":
        return self.fold(lambda _: self, f)

    def flat_map_error(self, f: Callable[[L], "Either[L2, R]"]) -> "Either[L2, R]":
        return self.fold(f, lambda _: self)

    def swap(self) -> "Either[R, L]":
        return self.fold(Right, Left)

    def merge(self) -> Any:
        return self.value

    def join_right(self) -> "Either[Any, Any]":
        # Right(Right(x)) -> Right(x), Right(Left(y)) -> Left(y)
        return self.fold(lambda _: self, lambda inner: inner)

    flatten = join_right

    def join_left(self) -> "Either[Any, Any]":
        return self.fold(lambda inner: inner, lambda _: self)

    # extraction

    def get_or_else(self, fallback: Callable[[], R]) -> R:
        """Right payload, or ``fallback()`` on a Left. ``fallback`` is only called on a Left."""
        return self.fold(lambda _: fallback(), lambda v: v)

    def or_else(self, alternative: "Either[L, R]") -> "Either[L, R]":
        return self.fold(lambda _: alternative, lambda _: self)

    def get_or_raise(self, error: Optional[Callable[[], BaseException]] = None) -> R:
        """Right payload, or raise.

        With ``error`` the exception it builds is raised and the Left payload is
        dropped. Without it an exception payload is raised as is and any other
        payload is wrapped in :class:`~eitherpy.errors.Failure`.
        """
        def fail(v: Any) -> R:
            if error is not None:
                raise error()
            if isinstance(v, BaseException):
                raise v
            raise Failure(v)
        return self.fold(fail, lambda v: v)

    def then(self, effect: Callable[[R], Any]) -> "Either[L, R]":
        self.fold(lambda _: None, effect)
        return self

    def filter(self, predicate: Projection[bool], or_else: Callable[[], L]) -> "Either[L, R]":
        """Turn a Right whose payload fails ``predicate`` into ``Left(or_else())``."""
        return self.fold(lambda _: self, lambda v: self if _fn(predicate)(v) else Left(or_else()))

    # traversal, for an iterable Right payload

    def for_each(self, effect: Callable[[Any], Any]) -> None:
        def each(xs: Any) -> None:
            for x in xs:
                effect(x)
        self.fold(lambda _: None, each)

    def for_all(self, predicate: Callable[[Any], bool]) -> bool:
        # a Left has nothing to check and counts as a failure, not a vacuous truth
        return self.fold(lambda _: False, lambda xs: all(predicate(x) for x in xs))

    # conversion

    def to_optional(self) -> Option[R]:
        return self.right_value()

    def to_result(self) -> Result[L, R]:
        return self.fold(Err, Ok)

    def to_list(self) -> List[R]:
        return self.fold(lambda _: [], lambda v: [v])

    # ordering

    def _compare(self, other: object, op: Callable[[Any, Any], bool]) -> bool:
        if not isinstance(other, Either):
            return NotImplemented
        if self.is_left() != other.is_left():
            # any Left sorts before any Right, payloads untouched
            return op(int(self.is_right()), int(other.is_right()))
        return op(self.value, other.value)

    def __lt__(self, other: object) -> bool: return self._compare(other, operator.lt)
    def __le__(self, other: object) -> bool: return self._compare(other, operator.le)
    def __gt__(self, other: object) -> bool: return self._compare(other, operator.gt)
    def __ge__(self, other: object) -> bool: return self._compare(other, operator.ge)

    # representation

    @property
    def description(self) -> str:
        return self.fold(lambda v: f".left({v!r})", lambda v: f".right({v!r})")

    @property
    def debug_description(self) -> str:
        # generic arguments are erased at runtime, so name what the payload is
        name = _type_name(type(self.value))
        params = f"{name}, Any" if self.is_left() else f"Any, {name}"
        return f"Either[{params}]{self.description}"

    def __str__(self) -> str:
        return self.description

    def debug(self, *items: Any, separator: str = " ", terminator: str = "\n",
              logger: Optional[ConsoleLogger] = None) -> "Either[L, R]":
        """Write ``items`` and the debug description to the diagnostic logger; returns self."""
        log = logger if logger is not None else get_logger()
        parts = [str(i) for i in items]
        parts.append(self.debug_description)
        log.debug(separator.join(parts), end=terminator)
        return self


@dataclass(frozen=True)
class Left(Either[L, R]):
    value: L

    def is_left(self) -> bool: return True

    def fold(self, on_left: Projection[V], on_right: Projection[V]) -> V:
        return _fn(on_left)(self.value)


@dataclass(frozen=True)
class Right(Either[L, R]):
    value: R

    def is_left(self) -> bool: return False

    def fold(self, on_left: Projection[V], on_right: Projection[V]) -> V:
        return _fn(on_right)(self.value)


def left(value: L) -> Either[L, Any]:
    return Left(value)


def right(value: R) -> Either[Any, R]:
    return Right(value)
