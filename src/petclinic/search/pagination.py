"""
Page and page request types shared by the owner and vet listings.

Page numbers are 1-based throughout.
"""

import math
from dataclasses import dataclass, field
from typing import Generic, List, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    """
    A request for one page of results.

    Attributes:
        page: 1-based page number; values below 1 are clamped to 1
        size: Maximum number of items per page
    """

    page: int = 1
    size: int = 5

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("Page size must be at least 1")
        if self.page < 1:
            object.__setattr__(self, "page", 1)

    @property
    def offset(self) -> int:
        """Number of items before the first item of this page."""
        return (self.page - 1) * self.size


@dataclass
class Page(Generic[T]):
    """One page of content together with the totals of the full result."""

    content: List[T] = field(default_factory=list)
    number: int = 1
    size: int = 5
    total_elements: int = 0

    @property
    def total_pages(self) -> int:
        """ceil(total_elements / size); zero when there are no elements."""
        return math.ceil(self.total_elements / self.size)

    @property
    def is_empty(self) -> bool:
        return not self.content

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 1

    def __len__(self) -> int:
        return len(self.content)

    def __iter__(self):
        return iter(self.content)


def paginate(items: Sequence[T], page: int = 1, size: int = 5) -> Page[T]:
    """
    Slice an in-memory sequence into one page.

    Args:
        items: Complete, already filtered sequence
        page: 1-based page number (values below 1 are treated as 1)
        size: Page size

    Returns:
        Page whose totals reflect all of ``items``; a page past the end has
        empty content.
    """
    request = PageRequest(page=page, size=size)
    start = request.offset
    if start >= len(items):
        content: List[T] = []
    else:
        content = list(items[start : min(start + request.size, len(items))])

    return Page(
        content=content,
        number=request.page,
        size=request.size,
        total_elements=len(items),
    )
