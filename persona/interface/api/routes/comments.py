"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, ConfigDict, Field

from persona.application.usecase.comment import (
    CommentResponse,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    LikeCommentRequest,
    LikeCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    UnlikeCommentUseCase,
)
from persona.domain.error import NotFoundError, ValidationError

router = APIRouter(prefix="/api/profiles", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str | None = Field(default=None, alias="userId")
    title: str | None = None
    body: str | None = None
    mbti: str | None = None
    enneagram: str | None = None
    zodiac: str | None = None


class LikeAPIRequest(BaseModel):
    """API request body for liking or unliking a comment."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str | None = Field(default=None, alias="userId")


def _not_found(e: NotFoundError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{e.resource} not found",
    )


@router.post(
    "/{profile_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    profile_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Comment on a profile, optionally guessing its personality types.

    Args:
        profile_id: Profile UUID
        request: Comment data
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment with its author snapshot

    Raises:
        HTTPException: 404 if the profile doesn't exist, 400 if a field is invalid
    """
    try:
        use_case_request = CreateCommentRequest(
            profile_id=profile_id,
            user_id=request.user_id,
            title=request.title,
            body=request.body,
            mbti=request.mbti,
            enneagram=request.enneagram,
            zodiac=request.zodiac,
        )
        return await create_comment_use_case.execute(use_case_request)
    except NotFoundError as e:
        raise _not_found(e)
    except ValidationError as e:
        logfire.warn("Comment creation rejected", profile_id=profile_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Failed to create comment", profile_id=profile_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create comment",
        )


@router.get("/{profile_id}/comments", response_model=ListCommentsResponse)
async def list_comments(
    profile_id: str,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    sort: str | None = Query(default=None),
    comment_filter: str | None = Query(default=None, alias="filter"),
) -> ListCommentsResponse:
    """List every comment on a profile.

    Args:
        profile_id: Profile UUID
        list_comments_use_case: List comments use case from DI
        sort: "best" (default, most liked first) or "recent"
        comment_filter: "all" (default), "mbti", "enneagram" or "zodiac"

    Returns:
        Comments with their authors' current names

    Raises:
        HTTPException: 404 if the profile doesn't exist
    """
    try:
        return await list_comments_use_case.execute(
            ListCommentsRequest(profile_id=profile_id, sort=sort, filter=comment_filter)
        )
    except NotFoundError as e:
        raise _not_found(e)
    except Exception as e:
        logfire.error("Failed to list comments", profile_id=profile_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list comments",
        )


async def _toggle_like(
    use_case: LikeCommentUseCase | UnlikeCommentUseCase,
    profile_id: str,
    comment_id: str,
    body: LikeAPIRequest | None,
    query_user_id: str | None,
) -> CommentResponse:
    # The body wins over the query string
    user_id = body.user_id if body and body.user_id else query_user_id
    try:
        return await use_case.execute(
            LikeCommentRequest(
                profile_id=profile_id,
                comment_id=comment_id,
                user_id=user_id,
            )
        )
    except NotFoundError as e:
        raise _not_found(e)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error(
            "Failed to update like",
            profile_id=profile_id,
            comment_id=comment_id,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update like",
        )


@router.post(
    "/{profile_id}/comments/{comment_id}/like", response_model=CommentResponse
)
async def like_comment(
    profile_id: str,
    comment_id: str,
    like_comment_use_case: FromDishka[LikeCommentUseCase],
    request: LikeAPIRequest | None = None,
    user_id: str | None = Query(default=None, alias="userId"),
) -> CommentResponse:
    """Like a comment. Liking an already liked comment changes nothing.

    The user ID may be sent in the JSON body or as a query parameter.

    Raises:
        HTTPException: 400 if an ID is malformed, 404 if the profile or comment is missing
    """
    return await _toggle_like(
        like_comment_use_case, profile_id, comment_id, request, user_id
    )


@router.delete(
    "/{profile_id}/comments/{comment_id}/like", response_model=CommentResponse
)
async def unlike_comment(
    profile_id: str,
    comment_id: str,
    unlike_comment_use_case: FromDishka[UnlikeCommentUseCase],
    request: LikeAPIRequest | None = None,
    user_id: str | None = Query(default=None, alias="userId"),
) -> CommentResponse:
    """Remove a like. Removing a like that isn't there changes nothing.

    Raises:
        HTTPException: 400 if an ID is malformed, 404 if the profile or comment is missing
    """
    return await _toggle_like(
        unlike_comment_use_case, profile_id, comment_id, request, user_id
    )
