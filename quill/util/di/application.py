"""Application layer DI providers."""

from dishka import Scope, provide

from quill.application.usecase.comment import CreateCommentUseCase, GetCommentsUseCase
from quill.application.usecase.post import GetPostEngagementUseCase
from quill.application.usecase.relation import (
    GetRelationStatusesUseCase,
    GetRelationStatusUseCase,
    SetRelationUseCase,
    TargetResolver,
    ToggleRelationUseCase,
)
from quill.application.usecase.user import GetFollowStatsUseCase
from quill.domain.service import (
    CommentService,
    JWTService,
    PostService,
    RelationService,
    UserService,
)
from quill.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_target_resolver(self, user_service: UserService) -> TargetResolver:
        """Provide relation target resolver."""
        return TargetResolver(user_service=user_service)

    # Relation use cases
    @provide(scope=Scope.REQUEST)
    def get_relation_status_use_case(
        self,
        relation_service: RelationService,
        target_resolver: TargetResolver,
        jwt_service: JWTService,
    ) -> GetRelationStatusUseCase:
        """Provide get relation status use case."""
        return GetRelationStatusUseCase(
            relation_service=relation_service,
            target_resolver=target_resolver,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_relation_statuses_use_case(
        self,
        relation_service: RelationService,
        target_resolver: TargetResolver,
        jwt_service: JWTService,
    ) -> GetRelationStatusesUseCase:
        """Provide batch relation status use case."""
        return GetRelationStatusesUseCase(
            relation_service=relation_service,
            target_resolver=target_resolver,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_set_relation_use_case(
        self,
        relation_service: RelationService,
        target_resolver: TargetResolver,
        jwt_service: JWTService,
    ) -> SetRelationUseCase:
        """Provide set relation use case."""
        return SetRelationUseCase(
            relation_service=relation_service,
            target_resolver=target_resolver,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_toggle_relation_use_case(
        self,
        relation_service: RelationService,
        target_resolver: TargetResolver,
        jwt_service: JWTService,
    ) -> ToggleRelationUseCase:
        """Provide toggle relation use case."""
        return ToggleRelationUseCase(
            relation_service=relation_service,
            target_resolver=target_resolver,
            jwt_service=jwt_service,
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, jwt_service: JWTService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, jwt_service=jwt_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_follow_stats_use_case(
        self,
        user_service: UserService,
        relation_service: RelationService,
        jwt_service: JWTService,
    ) -> GetFollowStatsUseCase:
        """Provide follow stats use case."""
        return GetFollowStatsUseCase(
            user_service=user_service,
            relation_service=relation_service,
            jwt_service=jwt_service,
        )

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_post_engagement_use_case(
        self,
        post_service: PostService,
        relation_service: RelationService,
        comment_service: CommentService,
        jwt_service: JWTService,
    ) -> GetPostEngagementUseCase:
        """Provide post engagement use case."""
        return GetPostEngagementUseCase(
            post_service=post_service,
            relation_service=relation_service,
            comment_service=comment_service,
            jwt_service=jwt_service,
        )
