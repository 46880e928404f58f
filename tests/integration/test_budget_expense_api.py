# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for budget and expense endpoints."""

import uuid


def create_budget(client, trip_id, category="food", planned_amount=200):
    return client.post(
        f"/api/v1/trips/{trip_id}/budget",
        json={"category": category, "planned_amount": planned_amount},
    )


def create_expense(client, trip_id, **overrides):
    payload = {
        "description": "Dinner in Alfama",
        "amount": 45.5,
        "date": "2030-06-03",
        "category": "food",
        **overrides,
    }
    return client.post(f"/api/v1/trips/{trip_id}/expenses", json=payload)


class TestBudgetEndpoints:
    """Tests for /api/v1/trips/{trip_id}/budget endpoints."""

    def test_requires_authentication(self, client, test_trip):
        """Test that endpoint requires authentication."""
        response = client.get(f"/api/v1/trips/{test_trip.id}/budget")
        assert response.status_code == 401

    def test_create_and_list(self, authenticated_client, test_trip):
        """Test budget lines show spending from linked expenses."""
        response = create_budget(authenticated_client, test_trip.id)
        assert response.status_code == 201
        budget_id = response.json()["id"]

        response = create_expense(
            authenticated_client, test_trip.id, budget_id=budget_id
        )
        assert response.status_code == 201

        response = authenticated_client.get(f"/api/v1/trips/{test_trip.id}/budget")
        assert response.status_code == 200
        data = response.json()
        assert data["items"][0]["actual_amount"] == 45.5
        assert data["summary"]["total_planned"] == 200.0
        assert data["summary"]["remaining"] == 154.5

    def test_duplicate_category(self, authenticated_client, test_trip):
        """Test that each category can only be budgeted once."""
        create_budget(authenticated_client, test_trip.id)
        response = create_budget(authenticated_client, test_trip.id)
        assert response.status_code == 400

    def test_get_and_update_budget(self, authenticated_client, test_trip):
        """Test reading and updating a single budget line."""
        budget_id = create_budget(authenticated_client, test_trip.id).json()["id"]
        create_expense(authenticated_client, test_trip.id, budget_id=budget_id)
        url = f"/api/v1/trips/{test_trip.id}/budget/{budget_id}"

        response = authenticated_client.get(url)
        assert response.status_code == 200
        assert response.json()["actual_amount"] == 45.5

        response = authenticated_client.put(url, json={"planned_amount": 300})
        assert response.status_code == 200
        data = response.json()
        assert data["planned_amount"] == 300.0
        assert data["actual_amount"] == 45.5
        assert data["category"] == "food"

    def test_update_to_taken_category(self, authenticated_client, test_trip):
        """Test that a line cannot move onto a category already budgeted."""
        create_budget(authenticated_client, test_trip.id, category="transport")
        budget_id = create_budget(authenticated_client, test_trip.id).json()["id"]

        response = authenticated_client.put(
            f"/api/v1/trips/{test_trip.id}/budget/{budget_id}",
            json={"category": "transport"},
        )
        assert response.status_code == 400

    def test_get_missing_budget(self, authenticated_client, test_trip):
        """Test reading a budget line that does not exist."""
        response = authenticated_client.get(
            f"/api/v1/trips/{test_trip.id}/budget/{uuid.uuid4()}"
        )
        assert response.status_code == 404
        assert response.json()["detail"] == "Budget not found"

    def test_delete_missing_budget(self, authenticated_client, test_trip):
        """Test deleting a budget line that does not exist."""
        response = authenticated_client.delete(
            f"/api/v1/trips/{test_trip.id}/budget/{uuid.uuid4()}"
        )
        assert response.status_code == 404


class TestExpenseEndpoints:
    """Tests for /api/v1/trips/{trip_id}/expenses endpoints."""

    def test_requires_authentication(self, client, test_trip):
        """Test that endpoint requires authentication."""
        response = client.get(f"/api/v1/trips/{test_trip.id}/expenses")
        assert response.status_code == 401

    def test_create_and_list(self, authenticated_client, test_trip):
        """Test listing expenses with their summary."""
        create_expense(authenticated_client, test_trip.id)
        create_expense(
            authenticated_client,
            test_trip.id,
            description="Tram 28",
            amount=3,
            category="transport",
        )

        response = authenticated_client.get(f"/api/v1/trips/{test_trip.id}/expenses")
        assert response.status_code == 200
        data = response.json()
        assert data["meta"]["total"] == 2
        assert data["summary"]["total_spent"] == 48.5
        assert data["summary"]["category_totals"][0]["category"] == "food"

    def test_date_outside_trip(self, authenticated_client, test_trip):
        """Test that expenses must fall within the trip."""
        response = create_expense(authenticated_client, test_trip.id, date="2030-07-01")
        assert response.status_code == 400

    def test_unknown_budget(self, authenticated_client, test_trip):
        """Test linking an expense to a budget of another trip."""
        response = create_expense(
            authenticated_client, test_trip.id, budget_id=str(uuid.uuid4())
        )
        assert response.status_code == 404
        assert response.json()["detail"] == "Budget not found"

    def test_delete_expense(self, authenticated_client, test_trip):
        """Test deleting an expense."""
        expense_id = create_expense(authenticated_client, test_trip.id).json()["id"]

        response = authenticated_client.delete(
            f"/api/v1/trips/{test_trip.id}/expenses/{expense_id}"
        )
        assert response.status_code == 204

        response = authenticated_client.get(f"/api/v1/trips/{test_trip.id}/expenses")
        assert response.json()["meta"]["total"] == 0

    def test_get_and_update_expense(self, authenticated_client, test_trip):
        """Test reading and updating a single expense."""
        expense_id = create_expense(authenticated_client, test_trip.id).json()["id"]
        url = f"/api/v1/trips/{test_trip.id}/expenses/{expense_id}"

        response = authenticated_client.get(url)
        assert response.status_code == 200
        assert response.json()["description"] == "Dinner in Alfama"

        response = authenticated_client.put(
            url, json={"amount": 52, "location": "Alfama"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["amount"] == 52.0
        assert data["location"] == "Alfama"
        assert data["date"] == "2030-06-03"

    def test_update_expense_outside_trip(self, authenticated_client, test_trip):
        """Test that an updated date must stay within the trip."""
        expense_id = create_expense(authenticated_client, test_trip.id).json()["id"]

        response = authenticated_client.put(
            f"/api/v1/trips/{test_trip.id}/expenses/{expense_id}",
            json={"date": "2030-05-20"},
        )
        assert response.status_code == 400

    def test_update_expense_with_foreign_budget(self, authenticated_client, test_trip):
        """Test linking an existing expense to an unknown budget line."""
        expense_id = create_expense(authenticated_client, test_trip.id).json()["id"]

        response = authenticated_client.put(
            f"/api/v1/trips/{test_trip.id}/expenses/{expense_id}",
            json={"budget_id": str(uuid.uuid4())},
        )
        assert response.status_code == 404

    def test_get_missing_expense(self, authenticated_client, test_trip):
        """Test reading an expense that does not exist."""
        response = authenticated_client.get(
            f"/api/v1/trips/{test_trip.id}/expenses/{uuid.uuid4()}"
        )
        assert response.status_code == 404
        assert response.json()["detail"] == "Expense not found"
