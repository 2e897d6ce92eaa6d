"""
API tests for the /application endpoints, run against a temporary SQLite database.
"""

import pytest

from tests.helpers import make_profile_payload, register_and_login

BASE = "/api/v1/application"

FAMILY_PAYLOAD = {
    "fatherName": "Imran Khan",
    "motherName": "Fatima Khan",
    "fatherOccupation": "govt",
}
EDUCATION_PAYLOAD = {
    "matricGrades": "A+ (1020/1100)",
    "fscGrades": "A (950/1100)",
    "collegeName": "Government College Lahore",
}
EXTRACURRICULAR_PAYLOAD = {"clubs": "Debating, Chess", "certDocName": "debate.pdf"}


class TestSectionRoutes:
    """Tests for create-or-update-{section} and get-{section}."""

    @pytest.mark.parametrize(
        ("section", "message"),
        [
            ("profile", "Profile not found"),
            ("family", "Family information not found"),
            ("education", "Education information not found"),
            ("extracurricular", "Extracurricular information not found"),
        ],
    )
    def test_not_found_before_submission(self, client, auth_headers, section, message):
        response = client.get(f"{BASE}/get-{section}", headers=auth_headers)

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": message}

    def test_profile_upsert_then_fetch(self, client, auth_headers, profile_payload):
        response = client.post(
            f"{BASE}/create-or-update-profile", json=profile_payload, headers=auth_headers
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Profile saved successfully"
        saved = body["data"]["profile"]
        assert saved["cnic"] == "35202-1234567-1"
        assert saved["primaryLang"] == "en"
        assert saved["middleName"] is None

        fetched = client.get(f"{BASE}/get-profile", headers=auth_headers).json()["data"]["profile"]
        assert fetched["id"] == saved["id"]
        assert fetched["firstName"] == "Ayesha"

    def test_upsert_is_idempotent_and_keeps_id(self, client, auth_headers, profile_payload):
        url = f"{BASE}/create-or-update-profile"
        first = client.post(url, json=profile_payload, headers=auth_headers).json()["data"]
        again = client.post(url, json=profile_payload, headers=auth_headers).json()["data"]

        changed_payload = make_profile_payload(firstName="  Sana  ", gender="Female")
        changed = client.post(url, json=changed_payload, headers=auth_headers).json()["data"]

        assert first["profile"]["id"] == again["profile"]["id"] == changed["profile"]["id"]
        assert changed["profile"]["firstName"] == "Sana"
        assert changed["profile"]["createdAt"] == first["profile"]["createdAt"]

    def test_family_upsert_replaces_fields(self, client, auth_headers):
        url = f"{BASE}/create-or-update-family"
        client.post(url, json=FAMILY_PAYLOAD, headers=auth_headers)
        updated = {**FAMILY_PAYLOAD, "fatherOccupation": "non-govt"}
        client.post(url, json=updated, headers=auth_headers)

        family = client.get(f"{BASE}/get-family", headers=auth_headers).json()["data"]["family"]

        assert family["fatherOccupation"] == "non-govt"

    def test_validation_error_lists_every_field(self, client, auth_headers):
        response = client.post(
            f"{BASE}/create-or-update-family", json={"fatherName": "I"}, headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Validation error",
            "errors": [
                "Father's name must be at least 2 characters long",
                "Mother's name is required",
                "Father's occupation is required",
            ],
        }

    def test_boolean_photo_size_is_rejected(self, client, auth_headers):
        payload = make_profile_payload(photoName="me.jpg", photoBytes=True)

        response = client.post(
            f"{BASE}/create-or-update-profile", json=payload, headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["errors"] == ["Photo size must be a whole number of bytes"]
        assert client.get(f"{BASE}/get-profile", headers=auth_headers).status_code == 404

    def test_requires_token(self, client):
        response = client.post(f"{BASE}/create-or-update-family", json=FAMILY_PAYLOAD)

        assert response.status_code == 401
        assert response.json()["message"] == "Access token is required"

    def test_auth_checked_before_body(self, client):
        response = client.post(f"{BASE}/create-or-update-family", json={})

        assert response.status_code == 401

    def test_cnic_belongs_to_one_user(self, client, auth_headers, profile_payload):
        client.post(f"{BASE}/create-or-update-profile", json=profile_payload, headers=auth_headers)
        other_headers = register_and_login(client, email="sana@example.com")

        response = client.post(
            f"{BASE}/create-or-update-profile", json=profile_payload, headers=other_headers
        )

        assert response.status_code == 409
        assert response.json()["message"] == "A profile with this CNIC already exists"

    def test_resubmitting_own_cnic_is_allowed(self, client, auth_headers, profile_payload):
        url = f"{BASE}/create-or-update-profile"
        client.post(url, json=profile_payload, headers=auth_headers)

        response = client.post(url, json=profile_payload, headers=auth_headers)

        assert response.status_code == 200

    def test_sections_are_per_user(self, client, auth_headers):
        client.post(f"{BASE}/create-or-update-family", json=FAMILY_PAYLOAD, headers=auth_headers)
        other_headers = register_and_login(client, email="sana@example.com")

        response = client.get(f"{BASE}/get-family", headers=other_headers)

        assert response.status_code == 404


class TestAllRoute:
    """Tests for GET /application/all."""

    def test_nothing_submitted(self, client, auth_headers):
        response = client.get(f"{BASE}/all", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "data": {
                "profile": None,
                "family": None,
                "education": None,
                "extracurricular": None,
            },
        }

    def test_partial_application(self, client, auth_headers, profile_payload):
        client.post(f"{BASE}/create-or-update-profile", json=profile_payload, headers=auth_headers)

        data = client.get(f"{BASE}/all", headers=auth_headers).json()["data"]

        assert data["profile"]["cnic"] == "35202-1234567-1"
        assert data["family"] is None
        assert data["education"] is None
        assert data["extracurricular"] is None

    def test_complete_application(self, client, auth_headers, profile_payload):
        for section, payload in [
            ("profile", profile_payload),
            ("family", FAMILY_PAYLOAD),
            ("education", EDUCATION_PAYLOAD),
            ("extracurricular", EXTRACURRICULAR_PAYLOAD),
        ]:
            response = client.post(
                f"{BASE}/create-or-update-{section}", json=payload, headers=auth_headers
            )
            assert response.status_code == 200, response.json()

        data = client.get(f"{BASE}/all", headers=auth_headers).json()["data"]

        assert data["family"]["motherName"] == "Fatima Khan"
        assert data["education"]["collegeName"] == "Government College Lahore"
        assert data["extracurricular"]["certDocName"] == "debate.pdf"

    def test_requires_token(self, client):
        assert client.get(f"{BASE}/all").status_code == 401
