# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Common schema types."""

import math
from decimal import Decimal
from typing import Annotated, Generic, TypeVar

from pydantic import AfterValidator, BaseModel, PlainSerializer

T = TypeVar("T")

# Annotated type that serializes Decimal as float for JSON responses
SerializedDecimal = Annotated[
    Decimal, PlainSerializer(lambda x: float(x), return_type=float)
]


class PaginationMeta(BaseModel):
    """Pagination metadata."""

    total: int
    page: int
    per_page: int
    pages: int

    @classmethod
    def build(cls, total: int, page: int, per_page: int) -> "PaginationMeta":
        """Build metadata for a page of results."""
        return cls(
            total=total,
            page=page,
            per_page=per_page,
            pages=math.ceil(total / per_page) if per_page else 0,
        )


class PaginatedResponse(BaseModel, Generic[T]):
    """Paginated response wrapper."""

    data: list[T]
    meta: PaginationMeta


class HealthResponse(BaseModel):
    """Health check response."""

    status: str


def _check_file_url(value: str) -> str:
    """Accept upload paths and absolute http(s) URLs only."""
    if not value.startswith(("/", "http://", "https://")):
        raise ValueError("File URL must be an upload path or an http(s) URL")
    return value


FileUrl = Annotated[str, AfterValidator(_check_file_url)]
