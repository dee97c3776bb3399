"""Order-preserving grouping helper."""

from collections.abc import Callable, Hashable, Iterable
from typing import TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def group_by(items: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """Group ``items`` by ``key(item)``.

    Keys keep the order in which they were first seen and members keep their
    input order, so ``groups[k][0]`` is always the first item with key ``k``.
    Pure function: a fresh dict is built on every call.
    """
    groups: dict[K, list[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups
