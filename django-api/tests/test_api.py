"""Integration tests for the box office HTTP API.

Each test starts from the seeded demo venue: event 1 "Evento Inicial"
(8x12 at 5000.00) and customers 1-3 (Ana Perez, Luis Munoz, Maria Lopez).
Run with: pytest tests/test_api.py -v
"""

import pytest
from rest_framework.test import APIClient

pytestmark = pytest.mark.usefixtures("app_booking")


class TestCustomers:
    """Tests for /api/customers"""

    def test_list_seeded_customers(self, api_client: APIClient):
        response = api_client.get("/api/customers")
        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Ana Perez", "Luis Munoz", "Maria Lopez"]
        assert response.json()[0]["classification"] == "STUDENT"

    def test_register_customer(self, api_client: APIClient):
        response = api_client.post(
            "/api/customers", {"name": "Pedro Soto", "classification": "SENIOR"}, format="json"
        )
        assert response.status_code == 201
        assert response.json() == {"id": 4, "name": "Pedro Soto", "classification": "SENIOR"}

    def test_register_blank_name(self, api_client: APIClient):
        response = api_client.post(
            "/api/customers", {"name": "   ", "classification": "STANDARD"}, format="json"
        )
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_NAME"

    def test_update_customer(self, api_client: APIClient):
        response = api_client.patch(
            "/api/customers/3", {"classification": "STUDENT"}, format="json"
        )
        assert response.status_code == 200
        assert response.json()["classification"] == "STUDENT"
        assert response.json()["name"] == "Maria Lopez"

    def test_retire_and_compact(self, api_client: APIClient):
        assert api_client.delete("/api/customers/2").status_code == 204
        assert api_client.get("/api/customers/2").status_code == 404
        assert api_client.delete("/api/customers/2").status_code == 404
        assert api_client.post("/api/customers/compact").status_code == 204
        ids = [c["id"] for c in api_client.get("/api/customers").json()]
        assert ids == [1, 3]


class TestEvents:
    """Tests for /api/events"""

    def test_get_event(self, api_client: APIClient):
        response = api_client.get("/api/events/1")
        assert response.status_code == 200
        assert response.json() == {
            "id": 1,
            "name": "Evento Inicial",
            "rows": 8,
            "columns": 12,
            "base_price": "5000.00",
            "capacity": 96,
            "free_seats": 96,
            "sales": 0,
        }

    def test_get_event_not_found(self, api_client: APIClient):
        assert api_client.get("/api/events/99").status_code == 404

    def test_create_event(self, api_client: APIClient):
        response = api_client.post(
            "/api/events",
            {"name": "Matinee", "rows": 4, "columns": 10, "base_price": "2500.00"},
            format="json",
        )
        assert response.status_code == 201
        assert response.json()["capacity"] == 40
        assert len(api_client.get("/api/events").json()) == 2

    def test_create_event_too_large(self, api_client: APIClient):
        response = api_client.post(
            "/api/events",
            {"name": "Huge", "rows": 9, "columns": 10, "base_price": "1.00"},
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_DIMENSIONS"

    def test_rename_and_reprice(self, api_client: APIClient):
        response = api_client.patch(
            "/api/events/1", {"name": "Gala", "base_price": "6000"}, format="json"
        )
        assert response.status_code == 200
        assert response.json()["name"] == "Gala"
        assert response.json()["base_price"] == "6000.00"

    def test_rejected_reprice_leaves_name_unchanged(self, api_client: APIClient):
        response = api_client.patch(
            "/api/events/1", {"name": "Gala", "base_price": "-5"}, format="json"
        )
        assert response.status_code == 400
        event = api_client.get("/api/events/1").json()
        assert event["name"] == "Evento Inicial"
        assert event["base_price"] == "5000.00"

    def test_reprice_unknown_event(self, api_client: APIClient):
        response = api_client.patch("/api/events/99", {"base_price": "10"}, format="json")
        assert response.status_code == 404

    def test_delete_event_with_sales_is_refused(self, api_client: APIClient):
        api_client.post("/api/events/1/sales", {"customer_id": 1, "seat_ids": [1]}, format="json")
        response = api_client.delete("/api/events/1")
        assert response.status_code == 409
        assert api_client.get("/api/events/1").status_code == 200

    def test_delete_event_without_sales(self, api_client: APIClient):
        assert api_client.delete("/api/events/1").status_code == 204
        assert api_client.get("/api/events/1").status_code == 404


class TestSales:
    """Tests for POST /api/events/{id}/sales and /api/sales"""

    def test_sell_by_ids(self, api_client: APIClient):
        response = api_client.post(
            "/api/events/1/sales", {"customer_id": 1, "seat_ids": [1, 2, 3]}, format="json"
        )
        assert response.status_code == 201
        body = response.json()
        assert body["seat_labels"] == ["A1", "A2", "A3"]
        assert body["gross_amount"] == "15000.00"
        assert body["discount_amount"] == "1500.00"
        assert body["net_amount"] == "13500.00"
        assert api_client.get("/api/events/1").json()["free_seats"] == 93

    def test_sell_by_label_range(self, api_client: APIClient):
        response = api_client.post(
            "/api/events/1/sales", {"customer_id": 2, "labels": "A3-A6"}, format="json"
        )
        assert response.status_code == 201
        assert response.json()["seat_ids"] == [3, 4, 5, 6]
        assert response.json()["discount_amount"] == "3000.00"

    def test_sell_by_id_text_with_quantity_mismatch(self, api_client: APIClient):
        response = api_client.post(
            "/api/events/1/sales", {"customer_id": 3, "ids": "3-6", "quantity": 3}, format="json"
        )
        assert response.status_code == 400
        assert response.json()["code"] == "QUANTITY_MISMATCH"

    def test_sell_contiguous_block(self, api_client: APIClient):
        api_client.post("/api/events/1/sales", {"customer_id": 1, "seat_ids": [14]}, format="json")
        response = api_client.post(
            "/api/events/1/sales", {"customer_id": 3, "row": "b", "quantity": 3}, format="json"
        )
        assert response.status_code == 201
        assert response.json()["seat_labels"] == ["B3", "B4", "B5"]

    def test_duplicate_seat(self, api_client: APIClient):
        response = api_client.post(
            "/api/events/1/sales", {"customer_id": 1, "seat_ids": [4, 4, 5]}, format="json"
        )
        assert response.status_code == 400
        assert response.json()["code"] == "DUPLICATE_SEAT"
        assert response.json()["seat_id"] == 4
        assert api_client.get("/api/sales").json() == []

    def test_unknown_customer(self, api_client: APIClient):
        response = api_client.post(
            "/api/events/1/sales", {"customer_id": 99, "seat_ids": [1]}, format="json"
        )
        assert response.status_code == 404
        assert response.json()["code"] == "CUSTOMER_NOT_FOUND"

    def test_needs_exactly_one_selector(self, api_client: APIClient):
        response = api_client.post(
            "/api/events/1/sales",
            {"customer_id": 1, "seat_ids": [1], "labels": "A2"},
            format="json",
        )
        assert response.status_code == 400

    def test_delete_sale_frees_seats(self, api_client: APIClient):
        sale = api_client.post(
            "/api/events/1/sales", {"customer_id": 1, "seat_ids": [7]}, format="json"
        ).json()
        assert api_client.get(f"/api/sales/{sale['id']}").status_code == 200
        assert api_client.delete(f"/api/sales/{sale['id']}").status_code == 204
        assert api_client.get(f"/api/sales/{sale['id']}").status_code == 404
        assert api_client.get("/api/events/1").json()["free_seats"] == 96


class TestPlanViews:
    """Tests for the text views of an event"""

    def test_occupancy_plan(self, api_client: APIClient):
        api_client.post("/api/events/1/sales", {"customer_id": 1, "seat_ids": [1]}, format="json")
        response = api_client.get("/api/events/1/plan")
        assert response.status_code == 200
        assert response["Content-Type"].startswith("text/plain")
        text = response.content.decode()
        assert text.startswith("Plan - Evento Inicial | Price: 5000.00 | Free: 95/96")
        assert " A | X  O " in text

    def test_id_map(self, api_client: APIClient):
        text = api_client.get("/api/events/1/plan?view=ids").content.decode()
        assert "  96|" in text

    def test_plan_unknown_event(self, api_client: APIClient):
        response = api_client.get("/api/events/99/plan")
        assert response.status_code == 404
        assert response.content.decode() == "Event not found."

    def test_report(self, api_client: APIClient):
        response = api_client.get("/api/events/1/report")
        assert response.content.decode() == (
            "Event: Evento Inicial | Sales: 0 | Occupied: 0/96 (0.0%) | Free: 96"
        )

    def test_row_free_seats(self, api_client: APIClient):
        api_client.post("/api/events/1/sales", {"customer_id": 1, "seat_ids": [2]}, format="json")
        body = api_client.get("/api/events/1/rows/A/free").json()
        assert body["seat_ids"][:2] == [1, 3]
        assert body["labels"][:2] == ["A1", "A3"]

    def test_row_contiguous(self, api_client: APIClient):
        body = api_client.get("/api/events/1/rows/C/contiguous?n=2").json()
        assert body == {"row": "C", "seat_ids": [25, 26]}

    def test_row_contiguous_bad_row(self, api_client: APIClient):
        body = api_client.get("/api/events/1/rows/ZZ/contiguous?n=2").json()
        assert body["seat_ids"] == []


class TestQuotes:
    """Tests for /api/events/{event_id}/quote"""

    def test_quote_applies_discount_without_selling(self, api_client: APIClient):
        response = api_client.get("/api/events/1/quote", {"customer_id": 1, "seats": 3})
        assert response.status_code == 200
        assert response.json() == {
            "seats": 3,
            "gross": "15000.00",
            "discount": "1500.00",
            "net": "13500.00",
        }
        assert api_client.get("/api/events/1").json()["free_seats"] == 96
        assert api_client.get("/api/sales").json() == []

    def test_quote_unknown_customer(self, api_client: APIClient):
        response = api_client.get("/api/events/1/quote", {"customer_id": 99, "seats": 1})
        assert response.status_code == 404
        assert response.json()["code"] == "CUSTOMER_NOT_FOUND"

    def test_quote_unknown_event(self, api_client: APIClient):
        response = api_client.get("/api/events/99/quote", {"customer_id": 1, "seats": 1})
        assert response.status_code == 404
        assert response.json()["code"] == "EVENT_NOT_FOUND"

    @pytest.mark.parametrize(
        "params", [{"seats": 1}, {"customer_id": "x", "seats": 1}, {"customer_id": 1, "seats": 0}]
    )
    def test_quote_rejects_bad_query(self, api_client: APIClient, params):
        response = api_client.get("/api/events/1/quote", params)
        assert response.status_code == 400


class TestProjectWiring:
    """The API runs with no database and no contrib apps."""

    def test_no_database_or_contrib_apps(self, settings):
        assert settings.INSTALLED_APPS == ["rest_framework", "boxoffice"]
        assert not settings.DATABASES.get("default", {}).get("ENGINE", "").endswith("sqlite3")

    def test_requests_are_anonymous(self, api_client: APIClient):
        response = api_client.get("/api/customers")
        assert response.status_code == 200
        assert response.wsgi_request.user is None

    def test_health_check(self, api_client: APIClient):
        response = api_client.get("/health/")
        assert response.status_code == 200
        assert response.content == b"OK"
