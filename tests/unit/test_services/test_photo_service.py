# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for photo_service."""

from datetime import date, datetime

import pytest

from src.models import Itinerary
from src.schemas.photo import PhotoCreate, PhotoUpdate
from src.services import photo_service


def add_photo(db_session, trip_id, name: str = "tram", **kwargs):
    data = PhotoCreate(file_url=f"/uploads/{name}.jpg", **kwargs)
    return photo_service.create_photo(db_session, trip_id, data)


def test_file_url_is_checked():
    with pytest.raises(ValueError):
        PhotoCreate(file_url="uploads/tram.jpg")


def test_list_newest_capture_first(db_session, test_trip):
    add_photo(db_session, test_trip.id, "early", taken_at=datetime(2030, 6, 2, 9, 0))
    add_photo(db_session, test_trip.id, "late", taken_at=datetime(2030, 6, 5, 19, 0))

    photos, total = photo_service.get_photos(db_session, test_trip.id)

    assert total == 2
    assert [p.file_url for p in photos] == ["/uploads/late.jpg", "/uploads/early.jpg"]


def test_filter_by_day_includes_undated_itinerary_photos(db_session, test_trip):
    day = Itinerary(trip_id=test_trip.id, date=date(2030, 6, 3))
    db_session.add(day)
    db_session.commit()

    add_photo(db_session, test_trip.id, "taken", taken_at=datetime(2030, 6, 3, 14, 0))
    add_photo(db_session, test_trip.id, "undated", itinerary_id=day.id)
    add_photo(db_session, test_trip.id, "other", taken_at=datetime(2030, 6, 4, 8, 0))

    photos, total = photo_service.get_photos(
        db_session, test_trip.id, day=date(2030, 6, 3)
    )

    assert total == 2
    assert {p.file_url for p in photos} == {"/uploads/taken.jpg", "/uploads/undated.jpg"}


def test_statistics_need_both_coordinates(db_session, test_trip):
    add_photo(db_session, test_trip.id, "full", latitude=38.7, longitude=-9.14)
    add_photo(db_session, test_trip.id, "half", latitude=38.7)

    statistics = photo_service.get_photo_statistics(db_session, test_trip.id)

    assert statistics.total == 2
    assert statistics.with_location == 1


def test_update_and_delete_photo(db_session, test_trip):
    photo = add_photo(db_session, test_trip.id)

    updated = photo_service.update_photo(
        db_session, photo, PhotoUpdate(caption="Tram 28 in Alfama")
    )
    assert updated.caption == "Tram 28 in Alfama"

    photo_id = photo.id
    photo_service.delete_photo(db_session, photo)
    assert photo_service.get_photo_for_trip(db_session, photo_id, test_trip.id) is None
