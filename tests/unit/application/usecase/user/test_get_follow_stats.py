"""Unit tests for GetFollowStatsUseCase."""

import pytest

from quill.application.usecase.user import (
    GetFollowStatsRequest,
    GetFollowStatsUseCase,
)
from quill.config import AuthSettings
from quill.domain.error import NotFoundError
from quill.domain.repository import UserRepository
from quill.domain.service import RelationService
from quill.domain.value import RelationKind
from quill.domain.value.types import Handle
from tests.conftest import make_token, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestGetFollowStats:
    """Tests for GetFollowStatsUseCase."""

    @pytest.mark.asyncio
    async def test_counts_and_viewer_flag(self, unit_env):
        """Should count both directions and flag the viewer's follow."""
        # Arrange
        use_case = await unit_env.get(GetFollowStatsUseCase)
        relation_service = await unit_env.get(RelationService)
        user_repo = await unit_env.get(UserRepository)
        settings = await unit_env.get(AuthSettings)
        alice = await user_repo.save(make_user("alice.example"))
        bob = await user_repo.save(make_user("bob.example"))
        await relation_service.toggle(RelationKind.FOLLOW, bob.id, alice.id)

        # Act
        as_bob = await use_case.execute(
            GetFollowStatsRequest(
                handle=Handle(root="alice.example"),
                auth_token=make_token(bob, settings),
            )
        )
        anonymous = await use_case.execute(
            GetFollowStatsRequest(handle=Handle(root="alice.example"))
        )

        # Assert
        assert as_bob.followers == 1
        assert as_bob.following == 0
        assert as_bob.is_following is True
        assert anonymous.is_following is False

    @pytest.mark.asyncio
    async def test_unknown_handle(self, unit_env):
        use_case = await unit_env.get(GetFollowStatsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetFollowStatsRequest(handle=Handle(root="nobody.example"))
            )
