"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from persona.domain.error import NotFoundError, ValidationError
from persona.domain.repository import CommentRepository
from persona.domain.service import CommentService
from persona.domain.value import CommentFilter, CommentId, CommentSort, ProfileId, UserId
from tests.factories import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_comment_normalises_fields(self, unit_env):
        """Title and body are trimmed, blank guesses are stored as None."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        profile_id = ProfileId(uuid4())
        user_id = UserId(uuid4())

        # Act
        comment = await comment_service.create_comment(
            profile_id=profile_id,
            user_id=user_id,
            title="  Definitely an INTP  ",
            body="  look at the way they argue ",
            mbti="INTP",
            enneagram="",
            zodiac=None,
        )

        # Assert
        assert comment.title == "Definitely an INTP"
        assert comment.body == "look at the way they argue"
        assert comment.mbti == "INTP"
        assert comment.enneagram is None
        assert comment.zodiac is None
        assert comment.like_count == 0
        assert comment.liked_by == frozenset()

        saved = await comment_repo.find_by_id(comment.id, profile_id)
        assert saved is not None

    @pytest.mark.asyncio
    async def test_create_comment_body_defaults_to_empty(self, unit_env):
        """A missing body becomes an empty string."""
        comment_service = await unit_env.get(CommentService)

        comment = await comment_service.create_comment(
            profile_id=ProfileId(uuid4()), user_id=UserId(uuid4()), title="Hi"
        )

        assert comment.body == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title", [None, "", "   "])
    async def test_create_comment_requires_title(self, unit_env, title):
        """Blank titles are rejected."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(ValidationError, match="title is required"):
            await comment_service.create_comment(
                profile_id=ProfileId(uuid4()), user_id=UserId(uuid4()), title=title
            )

    @pytest.mark.asyncio
    async def test_create_comment_rejects_invalid_guess(self, unit_env):
        """A guess outside the vocabulary is rejected before anything is saved."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        profile_id = ProfileId(uuid4())

        # Act & Assert
        with pytest.raises(ValidationError, match="invalid mbti value"):
            await comment_service.create_comment(
                profile_id=profile_id,
                user_id=UserId(uuid4()),
                title="Hmm",
                mbti="INVALID",
            )
        assert await comment_repo.find_by_profile(profile_id) == []


class TestListComments:
    """Tests for list_comments method."""

    @pytest.mark.asyncio
    async def test_best_sort_ranks_likes_over_recency(self, unit_env):
        """The most liked comment comes first even if it is the oldest."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        profile_id = ProfileId(uuid4())
        author = UserId(uuid4())

        popular = await comment_repo.save(
            make_comment(
                profile_id,
                author,
                "Popular",
                minutes=0,
                liked_by=frozenset({UserId(uuid4()), UserId(uuid4())}),
            )
        )
        newest = await comment_repo.save(make_comment(profile_id, author, "Newest", minutes=10))
        older = await comment_repo.save(make_comment(profile_id, author, "Older", minutes=5))

        # Act
        comments = await comment_service.list_comments(profile_id, CommentSort.BEST)

        # Assert - likes first, then newest among equals
        assert [c.id for c in comments] == [popular.id, newest.id, older.id]

    @pytest.mark.asyncio
    async def test_recent_sort_ignores_likes(self, unit_env):
        """Recent ordering is by creation time only."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        profile_id = ProfileId(uuid4())
        author = UserId(uuid4())

        liked = await comment_repo.save(
            make_comment(profile_id, author, minutes=0, liked_by=frozenset({author}))
        )
        fresh = await comment_repo.save(make_comment(profile_id, author, minutes=1))

        comments = await comment_service.list_comments(profile_id, CommentSort.RECENT)

        assert [c.id for c in comments] == [fresh.id, liked.id]

    @pytest.mark.asyncio
    async def test_filter_keeps_comments_with_guess(self, unit_env):
        """Filtering by a system drops comments without a guess for it."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        profile_id = ProfileId(uuid4())
        author = UserId(uuid4())

        with_mbti = await comment_repo.save(make_comment(profile_id, author, mbti="ENFP"))
        await comment_repo.save(make_comment(profile_id, author, zodiac="Leo"))
        await comment_repo.save(make_comment(profile_id, author, mbti=""))

        # Act
        comments = await comment_service.list_comments(
            profile_id, CommentSort.BEST, CommentFilter.MBTI
        )

        # Assert
        assert [c.id for c in comments] == [with_mbti.id]

    @pytest.mark.asyncio
    async def test_list_only_returns_profile_comments(self, unit_env):
        """Comments on other profiles are not listed."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        profile_id = ProfileId(uuid4())
        author = UserId(uuid4())
        await comment_repo.save(make_comment(ProfileId(uuid4()), author))

        assert await comment_service.list_comments(profile_id) == []


class TestLikes:
    """Tests for like_comment and unlike_comment."""

    @pytest.mark.asyncio
    async def test_double_like_counts_once(self, unit_env):
        """Liking twice leaves a single like."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        profile_id = ProfileId(uuid4())
        liker = UserId(uuid4())
        comment = await comment_repo.save(make_comment(profile_id, UserId(uuid4())))

        # Act
        await comment_service.like_comment(comment.id, profile_id, liker)
        result = await comment_service.like_comment(comment.id, profile_id, liker)

        # Assert
        assert result.like_count == 1
        assert result.liked_by == frozenset({liker})

    @pytest.mark.asyncio
    async def test_likes_from_different_users_accumulate(self, unit_env):
        """Each distinct user adds one like."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        profile_id = ProfileId(uuid4())
        comment = await comment_repo.save(make_comment(profile_id, UserId(uuid4())))

        await comment_service.like_comment(comment.id, profile_id, UserId(uuid4()))
        result = await comment_service.like_comment(comment.id, profile_id, UserId(uuid4()))

        assert result.like_count == 2

    @pytest.mark.asyncio
    async def test_double_unlike_is_harmless(self, unit_env):
        """Unliking twice ends at zero without an error."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        profile_id = ProfileId(uuid4())
        liker = UserId(uuid4())
        comment = await comment_repo.save(
            make_comment(profile_id, UserId(uuid4()), liked_by=frozenset({liker}))
        )

        await comment_service.unlike_comment(comment.id, profile_id, liker)
        result = await comment_service.unlike_comment(comment.id, profile_id, liker)

        assert result.like_count == 0

    @pytest.mark.asyncio
    async def test_like_missing_comment_raises(self, unit_env):
        """Liking an unknown comment raises NotFoundError."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError, match="Comment not found"):
            await comment_service.like_comment(
                CommentId(uuid4()), ProfileId(uuid4()), UserId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_like_comment_under_wrong_profile_raises(self, unit_env):
        """A comment is only reachable through its own profile."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(ProfileId(uuid4()), UserId(uuid4())))

        with pytest.raises(NotFoundError):
            await comment_service.like_comment(
                comment.id, ProfileId(uuid4()), UserId(uuid4())
            )
