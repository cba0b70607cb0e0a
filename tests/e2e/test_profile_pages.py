"""End-to-end tests for the server-rendered profile pages."""

from uuid import uuid4

import pytest

from tests.e2e.helpers import default_profile_id


@pytest.mark.e2e
class TestLanding:
    """Tests for GET /."""

    def test_redirects_to_seeded_profile(self, client):
        """Startup seeds one profile and / redirects to it."""
        profile_id = default_profile_id(client)

        page = client.get(f"/{profile_id}")

        assert page.status_code == 200
        assert "text/html" in page.headers["content-type"]
        assert "A Martinez" in page.text
        assert "Adolph Larrue Martinez III." in page.text
        assert "/static/space.png" in page.text

    def test_no_profiles(self, unseeded_client):
        """An empty store answers 404 with a plain message."""
        response = unseeded_client.get("/", follow_redirects=False)

        assert response.status_code == 404
        assert response.text == "No profiles found."


@pytest.mark.e2e
class TestProfilePage:
    """Tests for GET /{id}."""

    def test_malformed_and_unknown_ids_look_the_same(self, client):
        """Both yield 404 with identical bodies."""
        malformed = client.get("/not-a-real-id")
        unknown = client.get(f"/{uuid4()}")

        assert malformed.status_code == 404
        assert unknown.status_code == 404
        assert malformed.text == unknown.text == "Profile not found."

    def test_static_assets_served(self, client):
        response = client.get("/static/style.css")

        assert response.status_code == 200


@pytest.mark.e2e
class TestCreateProfile:
    """Tests for POST /."""

    def test_create_profile_forces_image(self, client):
        """The image is always the default, and tritype is coerced."""
        # Act
        response = client.post(
            "/",
            json={
                "name": "New Person",
                "description": "Someone new.",
                "mbti": "INFP",
                "enneagram": "4w5",
                "variant": "sx/sp",
                "tritype": "459",
                "socionics": "EII",
                "sloan": "RCUAI",
                "psyche": "FEVL",
                "image": "/evil.png",
            },
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["image"] == "/static/space.png"
        assert body["tritype"] == 459
        assert body["temperaments"] == ""
        assert set(body) == {
            "id",
            "name",
            "description",
            "mbti",
            "enneagram",
            "variant",
            "tritype",
            "socionics",
            "sloan",
            "psyche",
            "temperaments",
            "image",
        }

        page = client.get(f"/{body['id']}")
        assert page.status_code == 200
        assert "New Person" in page.text

    def test_create_profile_missing_field(self, client):
        response = client.post("/", json={"name": "Only a name"})

        assert response.status_code == 400
        assert response.json() == {"detail": "description is required"}

    def test_seeded_profile_stays_the_landing_page(self, client):
        """Creating more profiles doesn't change the landing redirect."""
        landing = default_profile_id(client)

        client.post(
            "/",
            json={
                "name": "Another",
                "description": "d",
                "mbti": "ESTJ",
                "enneagram": "1w2",
                "variant": "sp/so",
                "tritype": 136,
                "socionics": "LSE",
                "sloan": "SCOEN",
                "psyche": "LVFE",
            },
        )

        assert default_profile_id(client) == landing
