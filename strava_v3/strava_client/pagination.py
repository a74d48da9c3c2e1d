"""Wrapper for list endpoints that paginate."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, List, TypeVar

from ..config import DEFAULT_PAGE_SIZE

T = TypeVar("T")


@dataclass(frozen=True)
class Paginated(Generic[T]):
    """One page of results plus the bookkeeping needed to ask for the next.

    ``url`` is the request that produced ``data``.
    """

    url: str
    data: List[T] = field(default_factory=list)
    page: int = 1
    per_page: int = DEFAULT_PAGE_SIZE

    def last_page(self) -> bool:
        """Return ``True`` unless the page is exactly full.

        Approximation: a final page that happens to hold exactly
        ``per_page`` items is reported as not being the last.
        """

        return len(self.data) != self.per_page

    def fetch_next_page(self) -> "Paginated[T]":
        raise NotImplementedError("Fetching the next page is not implemented")

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)
