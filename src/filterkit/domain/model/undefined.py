"""Undefined sentinel.

None stands for an explicit null value. UNDEFINED stands for "nothing there":
a missing key, a missing path segment. The two never compare strictly equal.
"""

from __future__ import annotations

from typing import Final


class Undefined:
    """Singleton marker for absent values. Falsy."""

    __slots__ = ()

    _instance: Undefined | None = None

    def __new__(cls) -> Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = Undefined()
