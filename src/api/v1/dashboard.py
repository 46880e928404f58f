# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Trip dashboard API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, get_owned_trip
from src.models import Trip
from src.schemas.dashboard import TripDashboard
from src.services import dashboard_service
from src.services.dashboard_service import DashboardAggregationError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/{trip_id}/dashboard", response_model=TripDashboard)
async def get_trip_dashboard(
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> TripDashboard:
    """Get the planning dashboard for a trip.

    Returns the trip with its duration, days until departure and overall
    completion, raw counts and sums per module, and per-module progress.
    """
    try:
        return await dashboard_service.get_trip_dashboard(db, trip)
    except DashboardAggregationError:
        logger.exception(f"Error building dashboard for trip {trip.id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        ) from None
