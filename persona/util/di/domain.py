"""Domain layer DI providers."""

from dishka import Scope, provide

from persona.config import Settings
from persona.domain.repository import (
    CommentRepository,
    ProfileRepository,
    UserRepository,
    VoteRepository,
)
from persona.domain.service import (
    CommentService,
    ProfileService,
    UserService,
    VoteService,
)
from persona.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with the repository/session
    lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_profile_service(
        self, profile_repository: ProfileRepository, settings: Settings
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(
            profile_repository=profile_repository,
            default_image=settings.profiles.default_image,
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_vote_service(self, vote_repository: VoteRepository) -> VoteService:
        """Provide vote domain service."""
        return VoteService(vote_repository=vote_repository)
