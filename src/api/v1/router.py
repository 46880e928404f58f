# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from src.api.v1 import (
    accommodation,
    activities,
    auth,
    budgets,
    dashboard,
    documents,
    expenses,
    itineraries,
    notes,
    photos,
    transportation,
    trips,
)

api_router = APIRouter()

# Auth routes
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# Trip routes
api_router.include_router(trips.router, prefix="/trips", tags=["trips"])

# Dashboard routes (nested under trips)
api_router.include_router(dashboard.router, prefix="/trips", tags=["dashboard"])

# Planning module routes (nested under trips)
api_router.include_router(
    transportation.router, prefix="/trips", tags=["transportation"]
)
api_router.include_router(accommodation.router, prefix="/trips", tags=["accommodation"])
api_router.include_router(activities.router, prefix="/trips", tags=["activities"])
api_router.include_router(itineraries.router, prefix="/trips", tags=["itineraries"])
api_router.include_router(budgets.router, prefix="/trips", tags=["budget"])
api_router.include_router(expenses.router, prefix="/trips", tags=["expenses"])
api_router.include_router(documents.router, prefix="/trips", tags=["documents"])
api_router.include_router(photos.router, prefix="/trips", tags=["photos"])
api_router.include_router(notes.router, prefix="/trips", tags=["notes"])
