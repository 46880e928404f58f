# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Pydantic schemas package."""
from src.schemas.accommodation import (
    AccommodationCreate,
    AccommodationResponse,
    AccommodationUpdate,
)
from src.schemas.activity import ActivityCreate, ActivityResponse, ActivityUpdate
from src.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from src.schemas.budget import (
    BudgetCreate,
    BudgetListResponse,
    BudgetResponse,
    BudgetSummary,
    BudgetUpdate,
)
from src.schemas.common import (
    HealthResponse,
    PaginatedResponse,
    PaginationMeta,
)
from src.schemas.dashboard import ModuleProgress, TripDashboard
from src.schemas.document import (
    DocumentCreate,
    DocumentListResponse,
    DocumentResponse,
    DocumentUpdate,
)
from src.schemas.expense import (
    ExpenseCreate,
    ExpenseListResponse,
    ExpenseResponse,
    ExpenseSummary,
    ExpenseUpdate,
)
from src.schemas.itinerary import (
    ItineraryActivityCreate,
    ItineraryActivityResponse,
    ItineraryCreate,
    ItineraryResponse,
    ItineraryUpdate,
)
from src.schemas.note import (
    NoteCreate,
    NoteListResponse,
    NoteResponse,
    NoteStatistics,
    NoteUpdate,
)
from src.schemas.photo import PhotoCreate, PhotoListResponse, PhotoResponse
from src.schemas.transportation import (
    TransportationCreate,
    TransportationResponse,
    TransportationUpdate,
)
from src.schemas.trip import TripCreate, TripResponse, TripUpdate
from src.schemas.user import UserCreate, UserResponse

__all__ = [
    "AccommodationCreate",
    "AccommodationResponse",
    "AccommodationUpdate",
    "ActivityCreate",
    "ActivityResponse",
    "ActivityUpdate",
    "AuthResponse",
    "BudgetCreate",
    "BudgetListResponse",
    "BudgetResponse",
    "BudgetSummary",
    "BudgetUpdate",
    "DocumentCreate",
    "DocumentListResponse",
    "DocumentResponse",
    "DocumentUpdate",
    "ExpenseCreate",
    "ExpenseListResponse",
    "ExpenseResponse",
    "ExpenseSummary",
    "ExpenseUpdate",
    "HealthResponse",
    "ItineraryActivityCreate",
    "ItineraryActivityResponse",
    "ItineraryCreate",
    "ItineraryResponse",
    "ItineraryUpdate",
    "LoginRequest",
    "ModuleProgress",
    "NoteCreate",
    "NoteListResponse",
    "NoteResponse",
    "NoteStatistics",
    "NoteUpdate",
    "PaginatedResponse",
    "PaginationMeta",
    "PhotoCreate",
    "PhotoListResponse",
    "PhotoResponse",
    "RegisterRequest",
    "TransportationCreate",
    "TransportationResponse",
    "TransportationUpdate",
    "TripCreate",
    "TripDashboard",
    "TripResponse",
    "TripUpdate",
    "UserCreate",
    "UserResponse",
]
