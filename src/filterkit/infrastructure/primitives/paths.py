"""Nested structure access.

Structures are mappings, lists and tuples. Strings are leaves.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from filterkit.domain.model.undefined import UNDEFINED
from filterkit.infrastructure.primitives.type_checks import is_structured

if TYPE_CHECKING:
    from filterkit.infrastructure.filters.types import Path


def get(data: object, path: Path) -> object:
    """Get value at path.

    Args:
        data: Root structure.
        path: Keys (mappings) or integer indexes (lists, tuples).

    Returns:
        Value at path, or UNDEFINED if any segment is absent.
        Empty path returns data itself.
    """
    current = data
    for key in path:
        match current:
            case Mapping():
                if key not in current:
                    return UNDEFINED
                current = current[key]
            case list() | tuple():
                if isinstance(key, bool) or not isinstance(key, int):
                    return UNDEFINED
                if not -len(current) <= key < len(current):
                    return UNDEFINED
                current = current[key]
            case _:
                return UNDEFINED
    return current


def get_paths(data: object) -> tuple[Path, ...]:
    """Enumerate every root-to-leaf path, depth-first.

    Leaves are non-structured values and empty nested structures.
    A non-structured or empty root has no paths.
    """
    if not is_structured(data) or not data:
        return ()
    return tuple(_walk(data, ()))


def _walk(node: object, prefix: Path) -> Iterator[Path]:
    if not is_structured(node) or not node:
        yield prefix
        return

    children = node.items() if isinstance(node, Mapping) else enumerate(node)
    for key, child in children:
        yield from _walk(child, (*prefix, key))
