"""Unit tests for row/model mappers."""

from uuid import uuid4

from persona.persistence.mappers import comment_to_dict, row_to_comment, row_to_profile
from tests.factories import BASE_TIME, make_comment, make_profile


class TestCommentMapping:
    """Tests for comment row mapping."""

    def test_row_to_comment_builds_like_set(self):
        """Like rows become the liked_by set, duplicates collapse."""
        # Arrange
        liker = uuid4()
        row = {
            "id": str(uuid4()),
            "profile_id": uuid4(),
            "user_id": uuid4(),
            "title": "Title",
            "body": None,
            "mbti": "INFJ",
            "enneagram": None,
            "zodiac": None,
            "created_at": BASE_TIME,
            "updated_at": BASE_TIME,
        }

        # Act
        comment = row_to_comment(row, [liker, liker])

        # Assert
        assert comment.liked_by == frozenset({liker})
        assert comment.like_count == 1
        assert comment.body == ""

    def test_comment_to_dict_excludes_likes(self):
        """Likes are stored in their own table, not in the comment row."""
        comment = make_comment(uuid4(), uuid4(), liked_by=frozenset({uuid4()}))

        row = comment_to_dict(comment)

        assert "liked_by" not in row
        assert "like_count" not in row
        assert row["title"] == comment.title


class TestProfileMapping:
    """Tests for profile row mapping."""

    def test_row_to_profile_defaults_temperaments(self):
        """A NULL temperaments column maps to an empty string."""
        profile = make_profile()
        row = {**profile.model_dump(), "temperaments": None}

        mapped = row_to_profile(row)

        assert mapped.temperaments == ""
        assert mapped.id == profile.id
