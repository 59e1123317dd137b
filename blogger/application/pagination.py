"""Pagination models shared by listing use cases."""

import math
from typing import Generic, Sequence, TypeVar

from pydantic import BaseModel, Field

from blogger.application.view import ViewModel
from blogger.domain.value import SortDirection

T = TypeVar("T")


class PageRequest(BaseModel):
    """Page selection for listings."""

    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1, le=50)
    sort_direction: SortDirection = SortDirection.DESC

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


class Page(ViewModel, Generic[T]):
    """One page of a listing."""

    pages_count: int
    page: int
    page_size: int
    total_count: int
    items: list[T]

    @classmethod
    def build(
        cls, items: Sequence[T], total_count: int, request: PageRequest
    ) -> "Page[T]":
        """Build a page from the selected items and the total match count.

        Args:
            items: Items on this page
            total_count: Number of matches over all pages
            request: Page selection that produced the items

        Returns:
            Page with the page count derived from the totals
        """
        return cls(
            pages_count=math.ceil(total_count / request.page_size),
            page=request.page_number,
            page_size=request.page_size,
            total_count=total_count,
            items=list(items),
        )
