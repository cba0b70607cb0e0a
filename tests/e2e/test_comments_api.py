"""End-to-end tests for comments and likes."""

from uuid import uuid4

import pytest

from tests.e2e.helpers import create_comment, create_user, default_profile_id


@pytest.mark.e2e
class TestCreateComment:
    """Tests for POST /api/profiles/{id}/comments."""

    def test_create_comment(self, client):
        """A new comment carries its author snapshot and no likes."""
        # Arrange
        profile_id = default_profile_id(client)
        user_id = create_user(client, "Alice")

        # Act
        body = create_comment(
            client, profile_id, user_id, title=" Title ", body="Body", mbti="ISFJ", zodiac=""
        )

        # Assert
        assert body["title"] == "Title"
        assert body["profileId"] == profile_id
        assert body["userId"] == user_id
        assert body["user"] == {"id": user_id, "name": "Alice"}
        assert body["likeCount"] == 0
        assert body["mbti"] == "ISFJ"
        assert body["zodiac"] is None
        assert body["enneagram"] is None

    def test_invalid_mbti_is_bad_request(self, client):
        profile_id = default_profile_id(client)
        user_id = create_user(client)

        response = client.post(
            f"/api/profiles/{profile_id}/comments",
            json={"userId": user_id, "title": "Hi", "mbti": "INVALID"},
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "invalid mbti value"}

    def test_missing_title_is_bad_request(self, client):
        profile_id = default_profile_id(client)
        user_id = create_user(client)

        response = client.post(
            f"/api/profiles/{profile_id}/comments", json={"userId": user_id}
        )

        assert response.status_code == 400

    def test_unknown_user_is_bad_request(self, client):
        profile_id = default_profile_id(client)

        response = client.post(
            f"/api/profiles/{profile_id}/comments",
            json={"userId": str(uuid4()), "title": "Hi"},
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "User not found"}

    def test_unknown_profile_is_not_found(self, client):
        user_id = create_user(client)

        response = client.post(
            f"/api/profiles/{uuid4()}/comments",
            json={"userId": user_id, "title": "Hi"},
        )

        assert response.status_code == 404


@pytest.mark.e2e
class TestListComments:
    """Tests for GET /api/profiles/{id}/comments."""

    def test_best_ranks_liked_comment_first(self, client):
        """Two likes beat zero likes regardless of creation order."""
        # Arrange
        profile_id = default_profile_id(client)
        author = create_user(client, "Author")
        liked = create_comment(client, profile_id, author, title="Liked")
        create_comment(client, profile_id, author, title="Unliked")
        for name in ("Fan 1", "Fan 2"):
            fan = create_user(client, name)
            response = client.post(
                f"/api/profiles/{profile_id}/comments/{liked['id']}/like",
                json={"userId": fan},
            )
            assert response.status_code == 200

        # Act
        response = client.get(f"/api/profiles/{profile_id}/comments?sort=best")

        # Assert
        assert response.status_code == 200
        comments = response.json()["comments"]
        assert [c["title"] for c in comments] == ["Liked", "Unliked"]
        assert comments[0]["likeCount"] == 2
        assert comments[0]["user"] == {"id": author, "name": "Author"}

    def test_recent_ignores_likes(self, client):
        """Recent order is by creation time; likes don't move a comment."""
        # Arrange
        profile_id = default_profile_id(client)
        author = create_user(client)
        comment = create_comment(client, profile_id, author, title="Only one")
        client.post(
            f"/api/profiles/{profile_id}/comments/{comment['id']}/like",
            json={"userId": author},
        )

        # Act
        response = client.get(f"/api/profiles/{profile_id}/comments?sort=RECENT")

        # Assert
        comments = response.json()["comments"]
        assert [c["id"] for c in comments] == [comment["id"]]
        assert set(comments[0]) == {
            "id",
            "profileId",
            "userId",
            "user",
            "title",
            "body",
            "mbti",
            "enneagram",
            "zodiac",
            "likeCount",
            "createdAt",
        }

    def test_filter_mbti_excludes_comments_without_guess(self, client):
        """filter=mbti drops comments whose mbti is null or empty."""
        profile_id = default_profile_id(client)
        author = create_user(client)
        create_comment(client, profile_id, author, title="Typed", mbti="ENTJ")
        create_comment(client, profile_id, author, title="Empty", mbti="")
        create_comment(client, profile_id, author, title="Untyped")

        response = client.get(f"/api/profiles/{profile_id}/comments?filter=mbti")

        titles = [c["title"] for c in response.json()["comments"]]
        assert titles == ["Typed"]

    def test_unknown_profile_is_not_found(self, client):
        response = client.get(f"/api/profiles/{uuid4()}/comments")

        assert response.status_code == 404


@pytest.mark.e2e
class TestLikes:
    """Tests for POST/DELETE /api/profiles/{id}/comments/{cid}/like."""

    def test_double_like_then_double_unlike(self, client):
        """Likes are a set: repeats change nothing and never error."""
        # Arrange
        profile_id = default_profile_id(client)
        user_id = create_user(client)
        comment = create_comment(client, profile_id, user_id)
        url = f"/api/profiles/{profile_id}/comments/{comment['id']}/like"

        # Act & Assert
        assert client.post(url, json={"userId": user_id}).json()["likeCount"] == 1
        assert client.post(url, json={"userId": user_id}).json()["likeCount"] == 1

        first = client.request("DELETE", url, json={"userId": user_id})
        assert first.status_code == 200
        assert first.json()["likeCount"] == 0

        second = client.delete(url, params={"userId": user_id})
        assert second.status_code == 200
        assert second.json()["likeCount"] == 0

    def test_user_id_from_query(self, client):
        profile_id = default_profile_id(client)
        user_id = create_user(client)
        comment = create_comment(client, profile_id, user_id)

        response = client.post(
            f"/api/profiles/{profile_id}/comments/{comment['id']}/like",
            params={"userId": user_id},
        )

        assert response.status_code == 200
        assert response.json()["likeCount"] == 1

    def test_malformed_ids_are_bad_request(self, client):
        profile_id = default_profile_id(client)
        user_id = create_user(client)
        comment = create_comment(client, profile_id, user_id)

        bad_comment = client.post(
            f"/api/profiles/{profile_id}/comments/nope/like", json={"userId": user_id}
        )
        bad_user = client.post(
            f"/api/profiles/{profile_id}/comments/{comment['id']}/like",
            json={"userId": "nope"},
        )

        assert bad_comment.status_code == 400
        assert bad_user.status_code == 400

    def test_unknown_comment_is_not_found(self, client):
        profile_id = default_profile_id(client)
        user_id = create_user(client)

        response = client.post(
            f"/api/profiles/{profile_id}/comments/{uuid4()}/like",
            json={"userId": user_id},
        )

        assert response.status_code == 404
        assert response.json() == {"detail": "Comment not found"}
