# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for transportation_service."""

from datetime import datetime
from decimal import Decimal

import pytest

from src.models.enums import TransportType
from src.schemas.transportation import TransportationCreate, TransportationUpdate
from src.services import transportation_service
from src.services.transportation_service import InvalidTransportationTimesError


def book_leg(
    db_session,
    trip,
    departure: datetime = datetime(2030, 6, 1, 12, 0),
    arrival: datetime = datetime(2030, 6, 1, 14, 30),
    transport_type: TransportType = TransportType.FLIGHT,
    company: str | None = "TAP",
):
    data = TransportationCreate(
        type=transport_type,
        company=company,
        departure_location="Vienna",
        arrival_location="Lisbon",
        departure_datetime=departure,
        arrival_datetime=arrival,
        price=Decimal("129.90"),
    )
    return transportation_service.create_transportation(db_session, trip, data)


def test_create_transportation(db_session, test_trip):
    leg = book_leg(db_session, test_trip)

    assert leg.trip_id == test_trip.id
    assert leg.currency == "EUR"
    assert leg.price == Decimal("129.90")


def test_arrival_must_follow_departure():
    with pytest.raises(ValueError):
        TransportationCreate(
            type=TransportType.TRAIN,
            departure_location="Lisbon",
            arrival_location="Porto",
            departure_datetime=datetime(2030, 6, 2, 10, 0),
            arrival_datetime=datetime(2030, 6, 2, 9, 0),
        )


def test_leg_outside_trip_is_rejected(db_session, test_trip):
    # The trip starts at 10:00 on June 1st
    with pytest.raises(InvalidTransportationTimesError):
        book_leg(
            db_session,
            test_trip,
            departure=datetime(2030, 6, 1, 8, 0),
            arrival=datetime(2030, 6, 1, 11, 0),
        )

    with pytest.raises(InvalidTransportationTimesError):
        book_leg(
            db_session,
            test_trip,
            departure=datetime(2030, 6, 11, 8, 0),
            arrival=datetime(2030, 6, 11, 12, 0),
        )


def test_list_is_ordered_by_departure_and_filterable(db_session, test_trip):
    book_leg(
        db_session,
        test_trip,
        departure=datetime(2030, 6, 10, 16, 0),
        arrival=datetime(2030, 6, 10, 20, 0),
        company="Ryanair",
    )
    book_leg(
        db_session,
        test_trip,
        departure=datetime(2030, 6, 4, 9, 0),
        arrival=datetime(2030, 6, 4, 12, 0),
        transport_type=TransportType.TRAIN,
        company="CP",
    )
    book_leg(db_session, test_trip)

    legs, total = transportation_service.get_transportation(db_session, test_trip.id)
    assert total == 3
    assert [leg.company for leg in legs] == ["TAP", "CP", "Ryanair"]

    legs, total = transportation_service.get_transportation(
        db_session, test_trip.id, transport_type=TransportType.TRAIN
    )
    assert total == 1

    legs, total = transportation_service.get_transportation(
        db_session, test_trip.id, search="ryan"
    )
    assert [leg.company for leg in legs] == ["Ryanair"]


def test_update_checks_merged_times(db_session, test_trip):
    leg = book_leg(db_session, test_trip)

    with pytest.raises(InvalidTransportationTimesError):
        transportation_service.update_transportation(
            db_session,
            test_trip,
            leg,
            TransportationUpdate(arrival_datetime=datetime(2030, 6, 1, 11, 0)),
        )

    updated = transportation_service.update_transportation(
        db_session,
        test_trip,
        leg,
        TransportationUpdate(
            arrival_datetime=datetime(2030, 6, 1, 15, 0), confirmation_code="XY12Z"
        ),
    )
    assert updated.arrival_datetime == datetime(2030, 6, 1, 15, 0)
    assert updated.confirmation_code == "XY12Z"


def test_update_ignores_null_required_fields(db_session, test_trip):
    leg = book_leg(db_session, test_trip)

    updated = transportation_service.update_transportation(
        db_session,
        test_trip,
        leg,
        TransportationUpdate(departure_location=None, company=None),
    )

    assert updated.departure_location == "Vienna"
    assert updated.company is None


def test_delete_transportation(db_session, test_trip):
    leg = book_leg(db_session, test_trip)
    leg_id = leg.id

    transportation_service.delete_transportation(db_session, leg)

    assert (
        transportation_service.get_transportation_for_trip(
            db_session, leg_id, test_trip.id
        )
        is None
    )
