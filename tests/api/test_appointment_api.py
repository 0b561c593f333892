"""
API tests for /api/appointments.
"""

from datetime import datetime, timedelta
from urllib.parse import quote

import pytest

from realestate.core.config import now as app_now
from tests.factories.payload_factories import (
    agent_payload,
    appointment_payload,
    property_payload,
)


@pytest.fixture
def listing(client):
    agent = client.post("/api/agents", json=agent_payload()).get_json()["data"]
    return client.post(
        "/api/properties", json=property_payload(agent["id"])
    ).get_json()["data"]


def _create_appointment(client, property_id, **overrides):
    response = client.post(
        "/api/appointments", json=appointment_payload(property_id, **overrides)
    )
    assert response.status_code == 201, response.get_json()
    return response.get_json()["data"]


class TestAppointmentEndpoints:
    def test_create_defaults(self, client, listing):
        appointment = _create_appointment(client, listing["id"])

        assert appointment["status"] == "SCHEDULED"
        assert appointment["appointment_type"] == "VIEWING"
        assert appointment["duration_minutes"] == 60
        assert appointment["is_upcoming"] is True
        assert datetime.fromisoformat(appointment["end_time"]) == datetime.fromisoformat(
            appointment["scheduled_at"]
        ) + timedelta(minutes=60)

    def test_past_time_is_rejected(self, client, listing):
        past = (app_now() - timedelta(days=1)).isoformat()

        response = client.post(
            "/api/appointments", json=appointment_payload(listing["id"], scheduled_at=past)
        )

        assert response.status_code == 400

    def test_cancel(self, client, listing):
        appointment = _create_appointment(client, listing["id"])

        response = client.post(f"/api/appointments/{appointment['id']}/cancel")

        assert response.status_code == 200
        assert response.get_json()["data"]["status"] == "CANCELLED"
        assert response.get_json()["data"]["is_upcoming"] is False

    def test_completed_cannot_be_cancelled(self, client, listing):
        appointment = _create_appointment(client, listing["id"])
        client.patch(f"/api/appointments/{appointment['id']}", json={"status": "COMPLETED"})

        response = client.post(f"/api/appointments/{appointment['id']}/cancel")

        assert response.status_code == 400

    def test_between(self, client, listing):
        soon = _create_appointment(
            client,
            listing["id"],
            scheduled_at=(app_now() + timedelta(days=1)).isoformat(),
        )
        _create_appointment(
            client,
            listing["id"],
            scheduled_at=(app_now() + timedelta(days=20)).isoformat(),
        )
        start = quote(app_now().isoformat())
        end = quote((app_now() + timedelta(days=2)).isoformat())

        response = client.get(f"/api/appointments/between?start={start}&end={end}")

        assert response.status_code == 200
        assert [a["id"] for a in response.get_json()["data"]] == [soon["id"]]

    def test_between_requires_both_bounds(self, client):
        response = client.get("/api/appointments/between?start=2026-01-01T00:00:00")

        assert response.status_code == 400

    def test_property_appointments(self, client, listing):
        appointment = _create_appointment(client, listing["id"])

        response = client.get(f"/api/properties/{listing['id']}/appointments")

        assert [a["id"] for a in response.get_json()["data"]] == [appointment["id"]]
