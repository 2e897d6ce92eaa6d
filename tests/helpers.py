"""
Test helpers: request payloads and auth shortcuts.
"""

from datetime import date

from fastapi.testclient import TestClient

DEFAULT_PASSWORD = "Str0ng!Pass"


def years_ago(years: int, today: date | None = None) -> date:
    """The same calendar day `years` years back (Feb 29 falls back to Feb 28)."""
    today = today or date.today()
    try:
        return today.replace(year=today.year - years)
    except ValueError:
        return today.replace(year=today.year - years, day=28)


def make_register_payload(**overrides) -> dict:
    payload = {
        "email": "ayesha.khan@example.com",
        "password": DEFAULT_PASSWORD,
        "fullName": "Ayesha Khan",
        "dob": years_ago(20).isoformat(),
        "phone": "+923001234567",
        "address": "House 12, Street 5, Lahore",
        "role": "undergraduate",
    }
    payload.update(overrides)
    return payload


def make_profile_payload(**overrides) -> dict:
    payload = {
        "firstName": "Ayesha",
        "lastName": "Khan",
        "address": "House 12, Street 5, Lahore",
        "primaryLang": "en",
        "citizen": "PK",
        "cnic": "35202-1234567-1",
        "gender": "Female",
        "dob": years_ago(19).isoformat(),
        "maritalStatus": "Unmarried",
        "phone": "+923001234567",
    }
    payload.update(overrides)
    return payload


def register_and_login(client: TestClient, **overrides) -> dict[str, str]:
    """Register an account, log in, and return bearer auth headers."""
    payload = make_register_payload(**overrides)
    response = client.post("/api/v1/auth/register", json=payload)
    assert response.status_code == 201, response.json()

    response = client.post(
        "/api/v1/auth/login",
        json={"email": payload["email"], "password": payload["password"]},
    )
    assert response.status_code == 200, response.json()
    return {"Authorization": f"Bearer {response.json()['data']['token']}"}
