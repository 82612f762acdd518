"""Domain layer DI providers."""

from dishka import Scope, provide

from quill.config import AuthSettings
from quill.domain.repository import (
    CommentRepository,
    PostRepository,
    RelationRepository,
    UserRepository,
)
from quill.domain.service import (
    CommentService,
    JWTService,
    PostService,
    RelationService,
    UserService,
)
from quill.util.di.base import ProviderBase
from quill.util.retry import RetryPolicy


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, retry_policy: RetryPolicy
    ) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository, retry_policy=retry_policy)

    @provide
    def get_post_service(
        self, post_repository: PostRepository, retry_policy: RetryPolicy
    ) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository, retry_policy=retry_policy)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        user_service: UserService,
        retry_policy: RetryPolicy,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_service=post_service,
            user_service=user_service,
            retry_policy=retry_policy,
        )

    @provide
    def get_relation_service(
        self,
        relation_repository: RelationRepository,
        post_service: PostService,
        user_service: UserService,
        retry_policy: RetryPolicy,
    ) -> RelationService:
        """Provide relation (like, bookmark, follow) domain service."""
        return RelationService(
            relation_repository=relation_repository,
            post_service=post_service,
            user_service=user_service,
            retry_policy=retry_policy,
        )
