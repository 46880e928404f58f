# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for accommodation_service."""

from datetime import datetime

import pytest

from src.models.enums import AccommodationType
from src.schemas.accommodation import AccommodationCreate, AccommodationUpdate
from src.services import accommodation_service
from src.services.accommodation_service import (
    InvalidStayDatesError,
    OverlappingStayError,
)


def book_stay(
    db_session,
    trip,
    check_in: datetime = datetime(2030, 6, 1, 15, 0),
    check_out: datetime = datetime(2030, 6, 5, 11, 0),
    name: str = "Casa do Largo",
):
    data = AccommodationCreate(
        name=name,
        type=AccommodationType.HOTEL,
        address="Largo do Chafariz de Dentro 1, Lisboa",
        check_in_date=check_in,
        check_out_date=check_out,
    )
    return accommodation_service.create_accommodation(db_session, trip, data)


def test_create_accommodation(db_session, test_trip):
    stay = book_stay(db_session, test_trip)

    assert stay.trip_id == test_trip.id
    assert stay.booking_url is None


def test_empty_booking_url_is_dropped():
    data = AccommodationCreate(
        name="Hostel",
        type=AccommodationType.HOSTEL,
        address="Rua Augusta",
        check_in_date=datetime(2030, 6, 1, 15, 0),
        check_out_date=datetime(2030, 6, 2, 11, 0),
        booking_url="",
    )

    assert data.booking_url is None


def test_rating_must_be_between_one_and_five():
    with pytest.raises(ValueError):
        AccommodationUpdate(rating=6)


def test_stay_outside_trip_is_rejected(db_session, test_trip):
    with pytest.raises(InvalidStayDatesError):
        book_stay(
            db_session,
            test_trip,
            check_in=datetime(2030, 6, 9, 15, 0),
            check_out=datetime(2030, 6, 12, 11, 0),
        )


def test_overlapping_stay_is_rejected(db_session, test_trip):
    book_stay(db_session, test_trip)

    with pytest.raises(OverlappingStayError):
        book_stay(
            db_session,
            test_trip,
            check_in=datetime(2030, 6, 4, 15, 0),
            check_out=datetime(2030, 6, 7, 11, 0),
            name="Second hotel",
        )


def test_back_to_back_stays_are_allowed(db_session, test_trip):
    first = book_stay(db_session, test_trip)

    second = book_stay(
        db_session,
        test_trip,
        check_in=first.check_out_date,
        check_out=datetime(2030, 6, 8, 11, 0),
        name="Porto flat",
    )

    stays, total = accommodation_service.get_accommodations(db_session, test_trip.id)
    assert total == 2
    assert [s.id for s in stays] == [first.id, second.id]


def test_update_rechecks_overlap_but_not_against_itself(db_session, test_trip):
    first = book_stay(db_session, test_trip)
    second = book_stay(
        db_session,
        test_trip,
        check_in=datetime(2030, 6, 6, 15, 0),
        check_out=datetime(2030, 6, 9, 11, 0),
        name="Sintra lodge",
    )

    moved = accommodation_service.update_accommodation(
        db_session,
        test_trip,
        first,
        AccommodationUpdate(check_out_date=datetime(2030, 6, 6, 11, 0)),
    )
    assert moved.check_out_date == datetime(2030, 6, 6, 11, 0)

    with pytest.raises(OverlappingStayError):
        accommodation_service.update_accommodation(
            db_session,
            test_trip,
            second,
            AccommodationUpdate(check_in_date=datetime(2030, 6, 5, 15, 0)),
        )


def test_search_accommodations(db_session, test_trip):
    book_stay(db_session, test_trip)

    _, total = accommodation_service.get_accommodations(
        db_session, test_trip.id, search="chafariz"
    )
    assert total == 1

    _, total = accommodation_service.get_accommodations(
        db_session, test_trip.id, accommodation_type=AccommodationType.AIRBNB
    )
    assert total == 0
