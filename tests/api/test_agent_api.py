"""
API tests for /api/agents.
"""

from datetime import datetime

import pytest

from tests.factories.payload_factories import agent_payload, property_payload


def _create_agent(client, **overrides):
    response = client.post("/api/agents", json=agent_payload(**overrides))
    assert response.status_code == 201, response.get_json()
    return response.get_json()["data"]


class TestAgentEndpoints:
    def test_create_returns_envelope_with_defaults(self, client):
        response = client.post(
            "/api/agents", json=agent_payload(email="Jane.Doe@Example-Realty.com")
        )

        assert response.status_code == 201
        body = response.get_json()
        assert body["success"] is True
        agent = body["data"]
        assert agent["id"] is not None
        assert agent["email"] == "jane.doe@example-realty.com"
        assert agent["status"] == "ACTIVE"
        assert agent["hire_date"] is not None
        assert agent["created_at"] == agent["updated_at"]
        assert agent["full_name"] == "Alice Walker"
        assert agent["license_valid"] is True

    def test_validation_errors_are_listed_per_field(self, client):
        response = client.post(
            "/api/agents",
            json=agent_payload(first_name="A", email="not-an-email", commission_rate="120"),
        )

        assert response.status_code == 400
        body = response.get_json()
        assert body["success"] is False
        errors = body["data"]["errors"]
        assert {"field": "first_name", "message": "First name must be between 2 and 50 characters"} in errors
        assert {"field": "email", "message": "Email should be valid"} in errors
        assert {"field": "commission_rate", "message": "Commission rate must be between 0 and 100"} in errors

    def test_expired_license_is_rejected_on_create(self, client):
        response = client.post(
            "/api/agents", json=agent_payload(license_expiry_date="2001-01-01")
        )

        assert response.status_code == 400
        fields = [error["field"] for error in response.get_json()["data"]["errors"]]
        assert "license_expiry_date" in fields

    def test_blank_license_expiry_is_a_validation_error(self, client):
        response = client.post("/api/agents", json=agent_payload(license_expiry_date=""))

        assert response.status_code == 400
        assert {
            "field": "license_expiry_date",
            "message": "License expiry date is required",
        } in response.get_json()["data"]["errors"]

    def test_duplicate_email_is_conflict(self, client):
        _create_agent(client, email="dup@example-realty.com")

        response = client.post(
            "/api/agents", json=agent_payload(email="dup@example-realty.com")
        )

        assert response.status_code == 409
        data = response.get_json()["data"]
        assert data["error"] == "conflict"
        assert data["errors"][0]["field"] == "email"

    def test_duplicate_license_is_conflict(self, client):
        _create_agent(client, license_number="TX-1")

        response = client.post("/api/agents", json=agent_payload(license_number="TX-1"))

        assert response.status_code == 409
        assert response.get_json()["data"]["errors"][0]["field"] == "license_number"

    def test_get_missing_agent(self, client):
        response = client.get("/api/agents/9999")

        assert response.status_code == 404
        assert response.get_json()["data"]["error"] == "not_found"

    def test_body_must_be_json_object(self, client):
        response = client.post("/api/agents", json=["not", "an", "object"])

        assert response.status_code == 400

    def test_patch_updates_timestamp_only_forward(self, client):
        agent = _create_agent(client)

        response = client.patch(
            f"/api/agents/{agent['id']}",
            json={"bio": "Waterfront specialist", "created_at": "2000-01-01T00:00:00"},
        )

        assert response.status_code == 200
        updated = response.get_json()["data"]
        assert updated["bio"] == "Waterfront specialist"
        assert updated["created_at"] == agent["created_at"]
        assert datetime.fromisoformat(updated["updated_at"]) > datetime.fromisoformat(
            agent["updated_at"]
        )

    def test_list_with_filter(self, client):
        _create_agent(client, city="Austin")
        _create_agent(client, city="Dallas")

        response = client.get("/api/agents?city=Dallas")

        assert response.status_code == 200
        assert [agent["city"] for agent in response.get_json()["data"]] == ["Dallas"]

    def test_unsupported_filter(self, client):
        response = client.get("/api/agents?shoe_size=9")

        assert response.status_code == 400


class TestAgentLicense:
    def test_license_status_on_date(self, client):
        agent = _create_agent(client, license_expiry_date="2035-01-01")

        valid = client.get(f"/api/agents/{agent['id']}/license?on=2034-12-31")
        expired = client.get(f"/api/agents/{agent['id']}/license?on=2035-01-01")

        assert valid.get_json()["data"]["is_valid"] is True
        assert expired.get_json()["data"]["is_valid"] is False
        assert expired.get_json()["data"]["license_expiry_date"] == "2035-01-01"

    def test_bad_date_parameter(self, client):
        agent = _create_agent(client)

        response = client.get(f"/api/agents/{agent['id']}/license?on=tomorrow")

        assert response.status_code == 400

    def test_expired_licenses_listing(self, client):
        agent = _create_agent(client, license_expiry_date="2035-01-01")

        response = client.get("/api/agents/expired-licenses?on=2036-01-01")

        assert response.status_code == 200
        assert [a["id"] for a in response.get_json()["data"]] == [agent["id"]]


class TestAgentDelete:
    def test_delete_cascades_to_listings(self, client):
        agent = _create_agent(client)
        prop = client.post(
            "/api/properties", json=property_payload(agent["id"])
        ).get_json()["data"]

        response = client.delete(f"/api/agents/{agent['id']}")

        assert response.status_code == 200
        assert client.get(f"/api/agents/{agent['id']}").status_code == 404
        assert client.get(f"/api/properties/{prop['id']}").status_code == 404

    def test_delete_missing_agent(self, client):
        assert client.delete("/api/agents/424242").status_code == 404

    def test_agent_properties_listing(self, client):
        agent = _create_agent(client)
        client.post("/api/properties", json=property_payload(agent["id"]))

        response = client.get(f"/api/agents/{agent['id']}/properties")

        assert response.status_code == 200
        assert len(response.get_json()["data"]) == 1
