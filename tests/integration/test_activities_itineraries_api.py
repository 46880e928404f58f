# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for activity and itinerary endpoints."""

import uuid


def create_activity(client, trip_id, name="Belém Tower", **overrides):
    return client.post(
        f"/api/v1/trips/{trip_id}/activities",
        json={"name": name, "category": "cultural", **overrides},
    )


def create_itinerary(client, trip_id, day="2030-06-02"):
    return client.post(
        f"/api/v1/trips/{trip_id}/itineraries", json={"date": day, "notes": "Belém"}
    )


class TestActivityEndpoints:
    """Tests for /api/v1/trips/{trip_id}/activities endpoints."""

    def test_requires_authentication(self, client, test_trip):
        """Test that endpoint requires authentication."""
        response = client.get(f"/api/v1/trips/{test_trip.id}/activities")
        assert response.status_code == 401

    def test_activity_lifecycle(self, authenticated_client, test_trip):
        """Test creating, reading, updating, listing and deleting an activity."""
        base = f"/api/v1/trips/{test_trip.id}/activities"

        response = create_activity(
            authenticated_client, test_trip.id, price=10, currency="EUR"
        )
        assert response.status_code == 201
        activity = response.json()
        assert activity["price"] == 10.0

        response = authenticated_client.put(
            f"{base}/{activity['id']}", json={"rating": 5, "duration_hours": 1.5}
        )
        assert response.status_code == 200
        assert response.json()["duration_hours"] == 1.5

        response = authenticated_client.get(base, params={"category": "cultural"})
        assert response.json()["meta"]["total"] == 1

        response = authenticated_client.get(f"{base}/{activity['id']}")
        assert response.status_code == 200

        response = authenticated_client.delete(f"{base}/{activity['id']}")
        assert response.status_code == 204
        response = authenticated_client.get(f"{base}/{activity['id']}")
        assert response.status_code == 404
        assert response.json()["detail"] == "Activity not found"

    def test_invalid_rating(self, authenticated_client, test_trip):
        """Test that ratings run from 1 to 5."""
        response = create_activity(authenticated_client, test_trip.id, rating=0)
        assert response.status_code == 422


class TestItineraryEndpoints:
    """Tests for /api/v1/trips/{trip_id}/itineraries endpoints."""

    def test_requires_authentication(self, client, test_trip):
        """Test that endpoint requires authentication."""
        response = client.get(f"/api/v1/trips/{test_trip.id}/itineraries")
        assert response.status_code == 401

    def test_itinerary_lifecycle(self, authenticated_client, test_trip):
        """Test planning, listing, moving and deleting a day."""
        base = f"/api/v1/trips/{test_trip.id}/itineraries"

        response = create_itinerary(authenticated_client, test_trip.id)
        assert response.status_code == 201
        day = response.json()
        assert day["activities"] == []

        create_itinerary(authenticated_client, test_trip.id, day="2030-06-01")
        response = authenticated_client.get(base)
        assert [d["date"] for d in response.json()] == ["2030-06-01", "2030-06-02"]

        response = authenticated_client.put(
            f"{base}/{day['id']}", json={"date": "2030-06-04"}
        )
        assert response.status_code == 200
        assert response.json()["date"] == "2030-06-04"

        response = authenticated_client.delete(f"{base}/{day['id']}")
        assert response.status_code == 204
        response = authenticated_client.get(f"{base}/{day['id']}")
        assert response.status_code == 404

    def test_date_rules(self, authenticated_client, test_trip):
        """Test the trip range and one-day-one-itinerary rules."""
        response = create_itinerary(authenticated_client, test_trip.id, "2030-07-01")
        assert response.status_code == 400

        create_itinerary(authenticated_client, test_trip.id)
        response = create_itinerary(authenticated_client, test_trip.id)
        assert response.status_code == 400
        assert response.json()["detail"] == "An itinerary already exists for this date"

    def test_schedule_activities(self, authenticated_client, test_trip):
        """Test adding, updating, reordering and removing scheduled activities."""
        itinerary_id = create_itinerary(authenticated_client, test_trip.id).json()["id"]
        base = f"/api/v1/trips/{test_trip.id}/itineraries/{itinerary_id}/activities"
        tower = create_activity(authenticated_client, test_trip.id).json()
        monastery = create_activity(
            authenticated_client, test_trip.id, name="Jerónimos"
        ).json()

        response = authenticated_client.post(
            base,
            json={
                "activity_id": tower["id"],
                "start_time": "09:00",
                "end_time": "10:00",
            },
        )
        assert response.status_code == 201
        first = response.json()
        assert first["order"] == 1
        assert first["activity"]["name"] == "Belém Tower"

        second = authenticated_client.post(
            base, json={"activity_id": monastery["id"]}
        ).json()
        assert second["order"] == 2

        response = authenticated_client.post(base, json={"activity_id": tower["id"]})
        assert response.status_code == 400

        response = authenticated_client.put(
            f"{base}/{first['id']}", json={"end_time": "08:30"}
        )
        assert response.status_code == 400

        response = authenticated_client.put(
            base,
            json={
                "activities": [
                    {"id": first["id"], "order": 2},
                    {"id": second["id"], "order": 1},
                ]
            },
        )
        assert response.status_code == 200
        assert [e["id"] for e in response.json()] == [second["id"], first["id"]]

        response = authenticated_client.delete(f"{base}/{second['id']}")
        assert response.status_code == 204

        response = authenticated_client.get(base)
        assert [(e["id"], e["order"]) for e in response.json()] == [(first["id"], 1)]

    def test_schedule_unknown_activity(self, authenticated_client, test_trip):
        """Test scheduling an activity that is not part of the trip."""
        itinerary_id = create_itinerary(authenticated_client, test_trip.id).json()["id"]

        response = authenticated_client.post(
            f"/api/v1/trips/{test_trip.id}/itineraries/{itinerary_id}/activities",
            json={"activity_id": str(uuid.uuid4())},
        )
        assert response.status_code == 404
        assert response.json()["detail"] == "Activity not found"
