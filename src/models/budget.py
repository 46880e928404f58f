# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Budget line model."""

from __future__ import annotations

import uuid as uuid_lib
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Enum, ForeignKey, Numeric, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.base import Base, TimestampMixin
from src.models.enums import BudgetCategory

if TYPE_CHECKING:
    from src.models.expense import Expense
    from src.models.trip import Trip


class Budget(Base, TimestampMixin):
    """Planned spending for one category of a trip."""

    __tablename__ = "budgets"
    __table_args__ = (
        UniqueConstraint("trip_id", "category", name="uq_budget_trip_category"),
    )

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    trip_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("trips.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    category: Mapped[BudgetCategory] = mapped_column(
        Enum(BudgetCategory),
        nullable=False,
    )
    planned_amount: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 2), nullable=True
    )
    actual_amount: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 2), nullable=True
    )
    currency: Mapped[str] = mapped_column(String(3), default="EUR", nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    trip: Mapped[Trip] = relationship("Trip", back_populates="budgets")
    expenses: Mapped[list[Expense]] = relationship("Expense", back_populates="budget")
