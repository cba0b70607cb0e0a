"""Shared helpers for end-to-end tests."""

from fastapi.testclient import TestClient


def default_profile_id(client: TestClient) -> str:
    """Follow the landing redirect to find the seeded profile's id."""
    response = client.get("/", follow_redirects=False)
    assert response.status_code == 302
    return response.headers["location"].lstrip("/")


def create_user(client: TestClient, name: str = "Alice") -> str:
    """Register a user and return its id."""
    response = client.post("/api/users", json={"name": name})
    assert response.status_code == 201
    return response.json()["id"]


def create_comment(client: TestClient, profile_id: str, user_id: str, **fields) -> dict:
    """Post a comment and return the response body."""
    payload = {"userId": user_id, "title": "A comment", **fields}
    response = client.post(f"/api/profiles/{profile_id}/comments", json=payload)
    assert response.status_code == 201, response.text
    return response.json()
