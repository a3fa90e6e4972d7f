"""Filter type aliases.

Filter: pure single-argument function, predicate or transform.
Processor: pre-transform applied before a filter's own logic.
Path: keys from the root of a nested structure down to one leaf.
"""

from collections.abc import Callable
from typing import TypeAlias, TypeVar

P = TypeVar("P")
R = TypeVar("R")
T = TypeVar("T")

Filter: TypeAlias = Callable[[P], R]

Processor: TypeAlias = Callable[[T], object]

Path: TypeAlias = tuple[str | int, ...]
