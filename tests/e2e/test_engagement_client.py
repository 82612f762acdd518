"""End-to-end tests driving the API through EngagementToggle."""

import httpx
import pytest

from quill.adapter.engagement import EngagementClient, EngagementState, EngagementToggle
from quill.adapter.error import EngagementRequestError
from quill.domain.value import RelationKind
from tests.conftest import make_token


def client_for(api, user=None) -> EngagementClient:
    token = make_token(user, api.auth) if user else None
    return EngagementClient(
        "http://test", auth_token=token, transport=httpx.ASGITransport(app=api.app)
    )


class TestEngagementToggleAgainstApi:
    """Optimistic toggles reconciled by the real endpoints."""

    @pytest.mark.asyncio
    async def test_like_reconciles_to_server_count(self, api):
        """Display shows 11 optimistically, then the server's 12."""
        # Arrange
        author = api.add_user("author.example")
        post = api.add_post(author)
        others = [api.add_user(f"fan{i}.example") for i in range(11)]
        for fan in others[:10]:
            async with client_for(api, fan) as fan_client:
                await fan_client.set_active(RelationKind.LIKE, str(post.id), True)

        reader = api.add_user("reader.example")
        async with client_for(api, reader) as client:
            like = EngagementToggle(
                client, RelationKind.LIKE, str(post.id), active=False, count=10
            )
            # Another fan likes while the widget shows a stale 10
            async with client_for(api, others[10]) as fan_client:
                await fan_client.set_active(RelationKind.LIKE, str(post.id), True)

            # Act
            state = await like.toggle()

        # Assert
        assert state == EngagementState.idle(True, 12)

    @pytest.mark.asyncio
    async def test_self_follow_reverts(self, api):
        # Arrange
        errors = []
        reader = api.add_user("reader.example")
        async with client_for(api, reader) as client:
            follow = EngagementToggle(
                client, RelationKind.FOLLOW, "reader.example", on_error=errors.append
            )

            # Act & Assert
            with pytest.raises(EngagementRequestError):
                await follow.toggle()

        assert follow.state == EngagementState.idle(False, 0)
        assert errors == ["Cannot follow yourself"]

    @pytest.mark.asyncio
    async def test_anonymous_refresh(self, api):
        # Arrange
        post = api.add_post(api.add_user("author.example"))
        async with client_for(api) as client:
            bookmark = EngagementToggle(client, RelationKind.BOOKMARK, str(post.id))

            # Act
            state = await bookmark.refresh()

        # Assert
        assert state == EngagementState.idle(False, 0)


class TestServerToggleAgainstApi:
    """EngagementClient.toggle flips the edge server-side."""

    @pytest.mark.asyncio
    async def test_toggle_twice_returns_to_inactive(self, api):
        # Arrange
        post = api.add_post(api.add_user("author.example"))
        reader = api.add_user("reader.example")

        async with client_for(api, reader) as client:
            # Act
            liked = await client.toggle(RelationKind.LIKE, str(post.id))
            unliked = await client.toggle(RelationKind.LIKE, str(post.id))

        # Assert
        assert (liked.active, liked.count) == (True, 1)
        assert (unliked.active, unliked.count) == (False, 0)

    @pytest.mark.asyncio
    async def test_anonymous_toggle_rejected(self, api):
        post = api.add_post(api.add_user("author.example"))

        async with client_for(api) as client:
            with pytest.raises(EngagementRequestError) as exc_info:
                await client.toggle(RelationKind.BOOKMARK, str(post.id))

        assert exc_info.value.status_code == 401
