"""Override-wins dictionary merge.

Shared keys take the value of the map supplied *later*; keys present in
only one side are carried over unchanged.  The merge is shallow: nested
maps are replaced, not combined, so callers that need a nested merge
merge the inner map on its own and write it back.
"""

from __future__ import annotations

from typing import Mapping, MutableMapping, TypeVar

K = TypeVar("K")
V = TypeVar("V")


def merge(base: Mapping[K, V], incoming: Mapping[K, V]) -> dict[K, V]:
    """Return a new dict with *incoming* merged over *base*.

    Neither argument is mutated.

    Example::

        merge({"a": 1, "b": 2}, {"b": 3})  # {"a": 1, "b": 3}
    """
    result: dict[K, V] = dict(base)
    result.update(incoming)
    return result


def merge_into(target: MutableMapping[K, V], incoming: Mapping[K, V]) -> MutableMapping[K, V]:
    """In-place variant of :func:`merge`; returns *target* for chaining."""
    for key, value in incoming.items():
        target[key] = value
    return target


__all__ = ["merge", "merge_into"]
