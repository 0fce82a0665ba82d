"""
Result envelope for paginated reads.
"""
from __future__ import annotations

from typing import Generic, List, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """
    One slice of the record set plus the size of the whole set.

    `total` counts every record, independent of which slice `data` holds.
    """

    total: int = Field(..., ge=0, description="Number of records in the store.")
    data: List[T] = Field(default_factory=list, description="Records on this page.")


__all__ = ["Page"]
