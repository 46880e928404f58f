# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for transportation and accommodation endpoints."""

import uuid


def create_leg(client, trip_id, **overrides):
    payload = {
        "type": "flight",
        "company": "TAP",
        "departure_location": "Vienna",
        "arrival_location": "Lisbon",
        "departure_datetime": "2030-06-01T12:00:00",
        "arrival_datetime": "2030-06-01T14:30:00",
        "price": 129.9,
        **overrides,
    }
    return client.post(f"/api/v1/trips/{trip_id}/transportation", json=payload)


def create_stay(client, trip_id, **overrides):
    payload = {
        "name": "Casa do Largo",
        "type": "hotel",
        "address": "Alfama, Lisboa",
        "check_in_date": "2030-06-01T15:00:00",
        "check_out_date": "2030-06-05T11:00:00",
        **overrides,
    }
    return client.post(f"/api/v1/trips/{trip_id}/accommodation", json=payload)


class TestTransportationEndpoints:
    """Tests for /api/v1/trips/{trip_id}/transportation endpoints."""

    def test_requires_authentication(self, client, test_trip):
        """Test that endpoint requires authentication."""
        response = client.get(f"/api/v1/trips/{test_trip.id}/transportation")
        assert response.status_code == 401

    def test_transportation_lifecycle(self, authenticated_client, test_trip):
        """Test creating, reading, updating, listing and deleting a leg."""
        base = f"/api/v1/trips/{test_trip.id}/transportation"

        response = create_leg(authenticated_client, test_trip.id)
        assert response.status_code == 201
        leg = response.json()
        assert leg["price"] == 129.9
        assert leg["currency"] == "EUR"

        response = authenticated_client.get(f"{base}/{leg['id']}")
        assert response.status_code == 200
        assert response.json()["company"] == "TAP"

        response = authenticated_client.put(
            f"{base}/{leg['id']}", json={"confirmation_code": "ABC123"}
        )
        assert response.status_code == 200
        assert response.json()["confirmation_code"] == "ABC123"

        response = authenticated_client.get(base, params={"type": "flight"})
        assert response.status_code == 200
        assert response.json()["meta"]["total"] == 1

        response = authenticated_client.delete(f"{base}/{leg['id']}")
        assert response.status_code == 204
        response = authenticated_client.get(f"{base}/{leg['id']}")
        assert response.status_code == 404

    def test_leg_outside_trip(self, authenticated_client, test_trip):
        """Test that legs must fall within the trip."""
        response = create_leg(
            authenticated_client,
            test_trip.id,
            departure_datetime="2030-05-31T12:00:00",
        )
        assert response.status_code == 400

    def test_arrival_before_departure(self, authenticated_client, test_trip):
        """Test that arrival must follow departure."""
        response = create_leg(
            authenticated_client,
            test_trip.id,
            arrival_datetime="2030-06-01T11:00:00",
        )
        assert response.status_code == 422

    def test_other_users_trip(self, client, other_user, test_trip):
        """Test that another traveller cannot see the trip's legs."""
        client.post(
            "/api/v1/auth/login",
            json={"username": "otheruser", "password": "otherpassword123"},
        )
        response = client.get(f"/api/v1/trips/{test_trip.id}/transportation")
        assert response.status_code == 404
        assert response.json()["detail"] == "Trip not found"


class TestAccommodationEndpoints:
    """Tests for /api/v1/trips/{trip_id}/accommodation endpoints."""

    def test_requires_authentication(self, client, test_trip):
        """Test that endpoint requires authentication."""
        response = client.get(f"/api/v1/trips/{test_trip.id}/accommodation")
        assert response.status_code == 401

    def test_accommodation_lifecycle(self, authenticated_client, test_trip):
        """Test creating, reading, updating and deleting a stay."""
        base = f"/api/v1/trips/{test_trip.id}/accommodation"

        response = create_stay(authenticated_client, test_trip.id, booking_url="")
        assert response.status_code == 201
        stay = response.json()
        assert stay["booking_url"] is None

        response = authenticated_client.put(
            f"{base}/{stay['id']}", json={"rating": 4, "total_price": 480}
        )
        assert response.status_code == 200
        assert response.json()["rating"] == 4
        assert response.json()["total_price"] == 480.0

        response = authenticated_client.get(f"{base}/{stay['id']}")
        assert response.status_code == 200

        response = authenticated_client.delete(f"{base}/{stay['id']}")
        assert response.status_code == 204

    def test_overlapping_stay(self, authenticated_client, test_trip):
        """Test that stays cannot overlap."""
        create_stay(authenticated_client, test_trip.id)
        response = create_stay(
            authenticated_client,
            test_trip.id,
            name="Second hotel",
            check_in_date="2030-06-03T15:00:00",
            check_out_date="2030-06-06T11:00:00",
        )
        assert response.status_code == 400
        assert response.json()["detail"] == (
            "Accommodation is already booked for these dates"
        )

    def test_missing_stay(self, authenticated_client, test_trip):
        """Test reading a stay that does not exist."""
        response = authenticated_client.get(
            f"/api/v1/trips/{test_trip.id}/accommodation/{uuid.uuid4()}"
        )
        assert response.status_code == 404
        assert response.json()["detail"] == "Accommodation not found"
