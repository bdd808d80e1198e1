"""Splitting a sequence of items into fixed-size pages."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """A contiguous run of items taken from a larger sequence."""

    items: tuple[T, ...]

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return "".join(str(item) for item in self.items)


class Paginator(Generic[T]):
    """Pages of at most ``page_size`` items each, in input order."""

    def __init__(self, items: Iterable[T], page_size: int) -> None:
        values = tuple(items)
        if page_size < 1:
            raise ValueError("page_size must be positive")
        self._pages = [
            Page(values[start:start + page_size])
            for start in range(0, len(values), page_size)
        ]

    def __iter__(self) -> Iterator[Page[T]]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)


def paginate(items: Iterable[T], page_size: int) -> Paginator[T]:
    """Split ``items`` into pages of ``page_size``."""
    return Paginator(items, page_size)