from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

from pydantic import Field

from .interfaces import ListLinks, MollieModel

T = TypeVar("T")


class ListResponse(MollieModel, Generic[T]):
    """One page of a Mollie collection. Items keep the order the API returned."""

    total_count: Optional[int] = None
    offset: Optional[int] = None
    count: Optional[int] = None
    data: List[T] = Field(default_factory=list)
    links: Optional[ListLinks] = None
