# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for trip_service."""

from datetime import datetime

import pytest

from src.models.enums import TripStatus
from src.schemas.trip import TripCreate, TripUpdate
from src.services import trip_service
from src.services.trip_service import InvalidTripDatesError


def make_trip(db_session, user_id, name: str = "Trip", day: int = 1):
    data = TripCreate(
        name=name,
        destination="Vienna",
        start_date=datetime(2030, 3, day, 9, 0),
        end_date=datetime(2030, 3, day + 3, 18, 0),
    )
    return trip_service.create_trip(db_session, data, user_id)


def test_create_trip_starts_in_planning(db_session, test_user):
    trip = make_trip(db_session, test_user.id, name="Vienna weekend")

    assert trip.status == TripStatus.PLANNING
    assert trip.user_id == test_user.id
    assert trip.name == "Vienna weekend"


def test_trip_dates_are_stored_as_naive_utc():
    data = TripCreate(
        name="Zoned",
        destination="Tokyo",
        start_date="2030-04-01T09:00:00+09:00",
        end_date="2030-04-05T09:00:00+09:00",
    )

    assert data.start_date == datetime(2030, 4, 1, 0, 0)
    assert data.start_date.tzinfo is None


def test_create_rejects_end_before_start():
    with pytest.raises(ValueError):
        TripCreate(
            name="Backwards",
            destination="Nowhere",
            start_date=datetime(2030, 5, 2),
            end_date=datetime(2030, 5, 1),
        )


def test_get_trip_for_user_hides_other_users_trips(db_session, test_user, other_user):
    trip = make_trip(db_session, test_user.id)

    assert trip_service.get_trip_for_user(db_session, trip.id, test_user.id) == trip
    assert trip_service.get_trip_for_user(db_session, trip.id, other_user.id) is None


def test_get_trips_filters_and_paginates(db_session, test_user, other_user):
    make_trip(db_session, test_user.id, name="Early", day=1)
    make_trip(db_session, test_user.id, name="Late", day=20)
    make_trip(db_session, test_user.id, name="Middle Beach", day=10)
    make_trip(db_session, other_user.id, name="Not mine")

    trips, total = trip_service.get_trips(db_session, test_user.id)
    assert total == 3
    assert [t.name for t in trips] == ["Late", "Middle Beach", "Early"]

    trips, total = trip_service.get_trips(db_session, test_user.id, search="beach")
    assert total == 1
    assert trips[0].name == "Middle Beach"

    trips, total = trip_service.get_trips(db_session, test_user.id, page=2, per_page=2)
    assert total == 3
    assert [t.name for t in trips] == ["Early"]


def test_get_trips_filters_by_status(db_session, test_user):
    trip = make_trip(db_session, test_user.id, name="Done")
    make_trip(db_session, test_user.id, name="Planning")
    trip_service.update_trip(
        db_session, trip, TripUpdate(status=TripStatus.COMPLETED)
    )

    trips, total = trip_service.get_trips(
        db_session, test_user.id, status=TripStatus.COMPLETED
    )
    assert total == 1
    assert trips[0].name == "Done"


def test_update_trip_checks_merged_dates(db_session, test_user):
    trip = make_trip(db_session, test_user.id)

    with pytest.raises(InvalidTripDatesError):
        trip_service.update_trip(
            db_session, trip, TripUpdate(end_date=datetime(2030, 2, 1))
        )

    updated = trip_service.update_trip(
        db_session, trip, TripUpdate(end_date=datetime(2030, 3, 10), name=None)
    )
    assert updated.end_date == datetime(2030, 3, 10)
    assert updated.name == "Trip"


def test_delete_trip(db_session, test_user):
    trip = make_trip(db_session, test_user.id)
    trip_id = trip.id
    trip_service.delete_trip(db_session, trip)

    assert trip_service.get_trip_for_user(db_session, trip_id, test_user.id) is None
