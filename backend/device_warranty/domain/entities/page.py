"""Generic page of results returned by list operations."""

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def page_offset(page: int, size: int) -> int:
    """Zero-based row offset for a 1-based ``page`` of ``size`` rows."""
    if page < 1:
        raise ValueError(f"page must be a positive integer, got {page}")
    if size < 1:
        raise ValueError(f"size must be a positive integer, got {size}")
    return (page - 1) * size


@dataclass
class Page(Generic[T]):
    items: list[T]
    current_page: int
    size: int
    total_items: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.size) if self.size else 0
