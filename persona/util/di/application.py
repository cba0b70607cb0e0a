"""Application layer DI providers."""

from dishka import Scope, provide

from persona.application.usecase.comment import (
    CreateCommentUseCase,
    LikeCommentUseCase,
    ListCommentsUseCase,
    UnlikeCommentUseCase,
)
from persona.application.usecase.profile import (
    CreateProfileUseCase,
    GetDefaultProfileUseCase,
    GetProfileUseCase,
    SeedDefaultProfileUseCase,
)
from persona.application.usecase.user import CreateUserUseCase, GetUserUseCase
from persona.application.usecase.vote import (
    CastVoteUseCase,
    GetMyVoteUseCase,
    GetVoteTallyUseCase,
)
from persona.domain.service import (
    CommentService,
    ProfileService,
    UserService,
    VoteService,
)
from persona.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider."""

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_create_user_use_case(self, user_service: UserService) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)

    # Profile use cases
    @provide(scope=Scope.REQUEST)
    def get_get_profile_use_case(
        self, profile_service: ProfileService
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_get_default_profile_use_case(
        self, profile_service: ProfileService
    ) -> GetDefaultProfileUseCase:
        """Provide get default profile use case."""
        return GetDefaultProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_create_profile_use_case(
        self, profile_service: ProfileService
    ) -> CreateProfileUseCase:
        """Provide create profile use case."""
        return CreateProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_seed_default_profile_use_case(
        self, profile_service: ProfileService
    ) -> SeedDefaultProfileUseCase:
        """Provide seed default profile use case."""
        return SeedDefaultProfileUseCase(profile_service=profile_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        profile_service: ProfileService,
        user_service: UserService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            profile_service=profile_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self,
        comment_service: CommentService,
        profile_service: ProfileService,
        user_service: UserService,
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service,
            profile_service=profile_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_like_comment_use_case(
        self, comment_service: CommentService, profile_service: ProfileService
    ) -> LikeCommentUseCase:
        """Provide like comment use case."""
        return LikeCommentUseCase(
            comment_service=comment_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_unlike_comment_use_case(
        self, comment_service: CommentService, profile_service: ProfileService
    ) -> UnlikeCommentUseCase:
        """Provide unlike comment use case."""
        return UnlikeCommentUseCase(
            comment_service=comment_service, profile_service=profile_service
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self,
        vote_service: VoteService,
        profile_service: ProfileService,
        user_service: UserService,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            vote_service=vote_service,
            profile_service=profile_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_my_vote_use_case(
        self, vote_service: VoteService, profile_service: ProfileService
    ) -> GetMyVoteUseCase:
        """Provide get my vote use case."""
        return GetMyVoteUseCase(
            vote_service=vote_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_vote_tally_use_case(
        self, vote_service: VoteService, profile_service: ProfileService
    ) -> GetVoteTallyUseCase:
        """Provide get vote tally use case."""
        return GetVoteTallyUseCase(
            vote_service=vote_service, profile_service=profile_service
        )
