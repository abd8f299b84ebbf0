from __future__ import annotations

import math
from typing import Any, List, Sequence

from pydantic import BaseModel, ConfigDict, Field

from recordquery.config import settings
from recordquery.errors import ConfigurationError


class Page(BaseModel):
    """One slice of an ordered result."""
    model_config = ConfigDict(extra="forbid")

    items: List[Any] = Field(default_factory=list)
    pageNumber: int
    pageSize: int
    totalCount: int
    totalPages: int


def total_pages(count: int, page_size: int) -> int:
    return math.ceil(count / page_size) if count else 0


def paginate(
    records: Sequence[Any],
    page_size: int = settings.DEFAULT_PAGE_SIZE,
    page_number: int = 1,
) -> Page:
    """
    Slice `records` into 1-based pages.

    A page number past the end yields an empty page rather than an error.
    """
    if page_size < 1:
        raise ConfigurationError(f"page_size must be at least 1, got {page_size}")
    if page_number < 1:
        raise ConfigurationError(f"page_number must be at least 1, got {page_number}")

    start = (page_number - 1) * page_size
    return Page(
        items=list(records[start:start + page_size]),
        pageNumber=page_number,
        pageSize=page_size,
        totalCount=len(records),
        totalPages=total_pages(len(records), page_size),
    )
