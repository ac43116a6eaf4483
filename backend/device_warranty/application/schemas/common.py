"""Shared DTO configuration and the pagination envelope."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base DTO — camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PageResponse(CamelModel, Generic[T]):
    """Pagination envelope: ``{items, currentPage, totalPages, totalItems}``."""

    items: list[T]
    current_page: int
    total_pages: int
    total_items: int
