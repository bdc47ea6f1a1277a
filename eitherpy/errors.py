from __future__ import annotations
from typing import Generic, TypeVar

E = TypeVar("E")


class Failure(Exception, Generic[E]):
    """Raised by ``Either.get_or_raise`` for a Left whose payload is not an exception."""

    def __init__(self, error: E):
        super().__init__(repr(error)); self.error = error
