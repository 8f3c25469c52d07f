from __future__ import annotations

from typing import Callable, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


def index_of(items: Sequence[T], predicate: Callable[[T], bool]) -> Optional[int]:
    return next((i for i, item in enumerate(items) if predicate(item)), None)


def replace_at(items: Sequence[T], index: int, new: T) -> Tuple[T, ...]:
    return tuple(items[:index]) + (new,) + tuple(items[index + 1 :])


def remove_at(items: Sequence[T], index: int) -> Tuple[T, ...]:
    return tuple(items[:index]) + tuple(items[index + 1 :])
