"""Unit tests for comment use cases."""

from uuid import uuid4

import pytest

from quill.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from quill.config import AuthSettings
from quill.domain.error import InvalidOperationError, NotFoundError, UnauthorizedError
from quill.domain.repository import PostRepository, UserRepository
from tests.conftest import make_post, make_token, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def seed(env):
    """Save a user and a post; return the post and the user's token."""
    user_repo = await env.get(UserRepository)
    post_repo = await env.get(PostRepository)
    settings = await env.get(AuthSettings)
    user = await user_repo.save(make_user("reader.example", "Reader"))
    post = await post_repo.save(make_post(user))
    return post, make_token(user, settings)


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_and_reply(self, unit_env):
        """Should create a comment and a reply with author summaries."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post, token = await seed(unit_env)

        # Act
        comment = await use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id), content="Nice", auth_token=token
            )
        )
        reply = await use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id),
                content="Thanks",
                parent_id=comment.id,
                auth_token=token,
            )
        )

        # Assert
        assert comment.parent_id is None
        assert comment.author.handle == "reader.example"
        assert comment.author.display_name == "Reader"
        assert reply.parent_id == comment.id

    @pytest.mark.asyncio
    async def test_anonymous_unauthorized(self, unit_env):
        """Commenting requires a session."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post, _ = await seed(unit_env)

        # Act & Assert
        with pytest.raises(UnauthorizedError):
            await use_case.execute(
                CreateCommentRequest(post_id=str(post.id), content="Hi")
            )

    @pytest.mark.asyncio
    async def test_malformed_post_id_not_found(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        _, token = await seed(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(post_id="abc", content="Hi", auth_token=token)
            )

    @pytest.mark.asyncio
    async def test_malformed_parent_id_invalid(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post, token = await seed(unit_env)

        # Act & Assert
        with pytest.raises(InvalidOperationError):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=str(post.id),
                    content="Hi",
                    parent_id="abc",
                    auth_token=token,
                )
            )


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_thread_with_total(self, unit_env):
        """Should nest replies and count every comment."""
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        use_case = await unit_env.get(GetCommentsUseCase)
        post, token = await seed(unit_env)
        root = await create.execute(
            CreateCommentRequest(post_id=str(post.id), content="Root", auth_token=token)
        )
        await create.execute(
            CreateCommentRequest(
                post_id=str(post.id),
                content="Reply",
                parent_id=root.id,
                auth_token=token,
            )
        )

        # Act
        response = await use_case.execute(GetCommentsRequest(post_id=str(post.id)))

        # Assert
        assert response.total == 2
        assert len(response.comments) == 1
        assert response.comments[0].comment.id == root.id
        assert [r.content for r in response.comments[0].replies] == ["Reply"]

    @pytest.mark.asyncio
    async def test_unknown_post_not_found(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentsRequest(post_id=str(uuid4())))
