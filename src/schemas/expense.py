# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Expense schemas."""

import datetime
import uuid
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from src.models.enums import BudgetCategory
from src.schemas.common import PaginatedResponse, SerializedDecimal


class ExpenseCreate(BaseModel):
    """Schema for creating an expense."""

    description: str = Field(..., min_length=1, max_length=500)
    amount: Decimal = Field(..., ge=0, decimal_places=2)
    currency: str = Field(default="EUR", min_length=3, max_length=3)
    date: datetime.date
    category: BudgetCategory
    location: str | None = Field(None, max_length=200)
    receipt_url: str | None = Field(None, max_length=500)
    notes: str | None = None
    budget_id: uuid.UUID | None = None

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: Decimal) -> Decimal:
        """Validate that amount is positive and round to 2 decimal places."""
        if v <= 0:
            raise ValueError("Amount must be positive")
        return round(v, 2)

    @field_validator("receipt_url")
    @classmethod
    def empty_receipt_url(cls, v: str | None) -> str | None:
        """Treat an empty receipt URL as missing."""
        return v or None


class ExpenseUpdate(BaseModel):
    """Schema for updating an expense."""

    description: str | None = Field(None, min_length=1, max_length=500)
    amount: Decimal | None = Field(None, gt=0, decimal_places=2)
    currency: str | None = Field(None, min_length=3, max_length=3)
    date: datetime.date | None = None
    category: BudgetCategory | None = None
    location: str | None = Field(None, max_length=200)
    receipt_url: str | None = Field(None, max_length=500)
    notes: str | None = None
    budget_id: uuid.UUID | None = None

    @field_validator("receipt_url")
    @classmethod
    def empty_receipt_url(cls, v: str | None) -> str | None:
        """Treat an empty receipt URL as missing."""
        return v or None


class ExpenseResponse(BaseModel):
    """Schema for expense response."""

    id: uuid.UUID
    trip_id: uuid.UUID
    budget_id: uuid.UUID | None
    description: str
    amount: SerializedDecimal
    currency: str
    date: datetime.date
    category: BudgetCategory
    location: str | None
    receipt_url: str | None
    notes: str | None
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = {"from_attributes": True}


class ExpenseCategoryTotal(BaseModel):
    """Spending for one category."""

    category: BudgetCategory
    total: SerializedDecimal
    count: int


class ExpenseSummary(BaseModel):
    """Spending totals for a trip."""

    total_spent: SerializedDecimal
    total_expenses: int
    category_totals: list[ExpenseCategoryTotal]


class ExpenseListResponse(PaginatedResponse[ExpenseResponse]):
    """Page of expenses plus trip-wide totals."""

    summary: ExpenseSummary
