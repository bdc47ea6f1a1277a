"""Helpers over sequences of values and of ``Either`` values.

All of them keep the input order within each output list.
"""
from __future__ import annotations
from typing import Any, Callable, Iterable, List, Tuple, TypeVar

from .either import Either, Right

T = TypeVar("T")
L = TypeVar("L")
R = TypeVar("R")


def partition_map(items: Iterable[T], classify: Callable[[T], Either[L, R]]) -> Tuple[List[L], List[R]]:
    ls: List[L] = []
    rs: List[R] = []
    for item in items:
        classify(item).fold(ls.append, rs.append)
    return ls, rs


def partitioned(eithers: Iterable[Either[L, R]]) -> Tuple[List[L], List[R]]:
    return partition_map(eithers, lambda e: e)


def lefts(eithers: Iterable[Either[L, Any]]) -> List[L]:
    return [e.value for e in eithers if e.is_left()]


def rights(eithers: Iterable[Either[Any, R]]) -> List[R]:
    return [e.value for e in eithers if e.is_right()]


def partition(items: Iterable[T], predicate: Callable[[T], bool]) -> Tuple[List[T], List[T]]:
    """Split ``items`` into ``(failed, passed)`` by ``predicate``."""
    return partition_map(items, lambda x: Either.if_cond(predicate(x), lambda: x, lambda: x))


def traverse(items: Iterable[T], f: Callable[[T], Either[L, R]]) -> Either[L, List[R]]:
    """Apply ``f`` in order, stopping at the first Left, which is returned."""
    out: List[R] = []
    for item in items:
        e = f(item)
        if e.is_left():
            return e  # type: ignore[return-value]
        out.append(e.value)
    return Right(out)


def sequence(eithers: Iterable[Either[L, R]]) -> Either[L, List[R]]:
    return traverse(eithers, lambda e: e)
