"""Unit tests for EngagementToggle and EngagementClient."""

import asyncio

import httpx
import pytest

from quill.adapter.engagement import (
    EngagementClient,
    EngagementPhase,
    EngagementState,
    EngagementToggle,
)
from quill.adapter.error import (
    EngagementClosedError,
    EngagementRequestError,
    ToggleInProgressError,
)
from quill.domain.value import RelationKind

POST_ID = "7c9e6679-7425-40de-944b-e07fc1f90ae7"


def make_client(handler) -> EngagementClient:
    """Client backed by an in-process handler instead of the network."""
    return EngagementClient(
        "http://test", auth_token="token", transport=httpx.MockTransport(handler)
    )


class Gate:
    """Handler that holds each response until released."""

    def __init__(self, response: httpx.Response):
        self.response = response
        self.released = asyncio.Event()
        self.requests: list[httpx.Request] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        await self.released.wait()
        return self.response


class TestToggle:
    """Tests for EngagementToggle.toggle."""

    @pytest.mark.asyncio
    async def test_success_reconciles_with_server_count(self):
        """Optimistic 11 is replaced by the server's 12."""
        # Arrange
        gate = Gate(httpx.Response(200, json={"active": True, "count": 12}))
        like = EngagementToggle(
            make_client(gate), RelationKind.LIKE, POST_ID, active=False, count=10
        )

        # Act
        task = asyncio.create_task(like.toggle())
        await asyncio.sleep(0)
        optimistic = like.state
        gate.released.set()
        settled = await task

        # Assert
        assert optimistic.phase is EngagementPhase.PENDING
        assert (optimistic.active, optimistic.count) == (True, 11)
        assert settled == EngagementState.idle(True, 12)
        assert gate.requests[0].method == "POST"
        assert gate.requests[0].url.path == f"/relations/like/{POST_ID}"
        assert gate.requests[0].headers["cookie"] == "auth_token=token"

    @pytest.mark.asyncio
    async def test_untoggle_sends_delete(self):
        # Arrange
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={"active": False, "count": 0})

        bookmark = EngagementToggle(
            make_client(handler), RelationKind.BOOKMARK, POST_ID, active=True, count=1
        )

        # Act
        await bookmark.toggle()

        # Assert
        assert requests[0].method == "DELETE"
        assert bookmark.active is False
        assert bookmark.count == 0

    @pytest.mark.asyncio
    async def test_failure_reverts_and_reports(self):
        """A refused toggle restores the prior display and calls on_error."""
        # Arrange
        errors = []

        def handler(request):
            return httpx.Response(400, json={"error": "Cannot follow yourself"})

        follow = EngagementToggle(
            make_client(handler),
            RelationKind.FOLLOW,
            "alice.example",
            active=False,
            count=5,
            on_error=errors.append,
        )

        # Act & Assert
        with pytest.raises(EngagementRequestError) as exc_info:
            await follow.toggle()

        assert exc_info.value.status_code == 400
        assert errors == ["Cannot follow yourself"]
        assert follow.state == EngagementState.idle(False, 5)

    @pytest.mark.asyncio
    async def test_network_failure_reverts(self):
        # Arrange
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        like = EngagementToggle(
            make_client(handler), RelationKind.LIKE, POST_ID, active=True, count=2
        )

        # Act & Assert
        with pytest.raises(EngagementRequestError, match="Network error") as exc_info:
            await like.toggle()
        assert exc_info.value.status_code is None
        assert like.state == EngagementState.idle(True, 2)

    @pytest.mark.asyncio
    async def test_second_toggle_while_pending_rejected(self):
        """Only one request per instance is in flight."""
        # Arrange
        gate = Gate(httpx.Response(200, json={"active": True, "count": 1}))
        like = EngagementToggle(make_client(gate), RelationKind.LIKE, POST_ID)
        task = asyncio.create_task(like.toggle())
        await asyncio.sleep(0)

        # Act & Assert
        with pytest.raises(ToggleInProgressError):
            await like.toggle()

        gate.released.set()
        await task
        assert len(gate.requests) == 1

    @pytest.mark.asyncio
    async def test_instances_do_not_block_each_other(self):
        """A pending like does not stop a bookmark on the same post."""
        # Arrange
        gate = Gate(httpx.Response(200, json={"active": True, "count": 1}))
        client = make_client(gate)
        like = EngagementToggle(client, RelationKind.LIKE, POST_ID)
        bookmark = EngagementToggle(client, RelationKind.BOOKMARK, POST_ID)

        # Act
        tasks = [
            asyncio.create_task(like.toggle()),
            asyncio.create_task(bookmark.toggle()),
        ]
        await asyncio.sleep(0)
        both_pending = like.state.pending and bookmark.state.pending
        gate.released.set()
        await asyncio.gather(*tasks)

        # Assert
        assert both_pending
        assert like.active and bookmark.active

    @pytest.mark.asyncio
    async def test_response_after_close_discarded(self):
        # Arrange
        gate = Gate(httpx.Response(200, json={"active": True, "count": 9}))
        like = EngagementToggle(make_client(gate), RelationKind.LIKE, POST_ID)
        task = asyncio.create_task(like.toggle())
        await asyncio.sleep(0)

        # Act
        like.close()
        gate.released.set()
        await task

        # Assert - display frozen at the optimistic state
        assert not like.alive
        assert like.state.pending
        assert like.count == 1
        with pytest.raises(EngagementClosedError):
            await like.toggle()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, text="<html>proxy page</html>"),
            httpx.Response(200, json={"liked": True}),
        ],
    )
    async def test_unreadable_success_body_reverts(self, response):
        """A 2xx that is not {active, count} counts as a failed toggle."""
        # Arrange
        errors = []
        like = EngagementToggle(
            make_client(lambda request: response),
            RelationKind.LIKE,
            POST_ID,
            active=False,
            count=10,
            on_error=errors.append,
        )

        # Act & Assert
        with pytest.raises(EngagementRequestError, match="Unexpected response"):
            await like.toggle()

        assert like.state == EngagementState.idle(False, 10)
        assert errors == ["Unexpected response from server"]

    @pytest.mark.asyncio
    async def test_unexpected_client_error_reverts(self):
        """Errors outside the client's own error type still roll back."""

        class BrokenClient:
            async def set_active(self, kind, target, active):
                raise RuntimeError("boom")

        errors = []
        like = EngagementToggle(
            BrokenClient(), RelationKind.LIKE, POST_ID, count=3, on_error=errors.append
        )

        with pytest.raises(RuntimeError):
            await like.toggle()

        assert like.state == EngagementState.idle(False, 3)
        assert errors == ["boom"]

    @pytest.mark.asyncio
    async def test_cancelled_toggle_reverts_and_can_retry(self):
        """Cancelling mid-flight restores the display and frees the instance."""
        # Arrange
        errors = []
        gate = Gate(httpx.Response(200, json={"active": True, "count": 6}))
        like = EngagementToggle(
            make_client(gate),
            RelationKind.LIKE,
            POST_ID,
            count=5,
            on_error=errors.append,
        )
        task = asyncio.create_task(like.toggle())
        await asyncio.sleep(0)

        # Act
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        # Assert
        assert like.state == EngagementState.idle(False, 5)
        assert errors == []

        gate.released.set()
        assert await like.toggle() == EngagementState.idle(True, 6)


class TestRefresh:
    """Tests for EngagementToggle.refresh."""

    @pytest.mark.asyncio
    async def test_refresh_syncs_from_server(self):
        # Arrange
        def handler(request):
            assert request.method == "GET"
            return httpx.Response(200, json={"active": True, "count": 4})

        like = EngagementToggle(make_client(handler), RelationKind.LIKE, POST_ID)

        # Act
        state = await like.refresh()

        # Assert
        assert state == EngagementState.idle(True, 4)

    @pytest.mark.asyncio
    async def test_refresh_during_pending_toggle_discarded(self):
        """A status fetched mid-toggle must not clobber the pending display."""
        # Arrange
        toggle_gate = asyncio.Event()

        async def handler(request):
            if request.method == "GET":
                return httpx.Response(200, json={"active": False, "count": 0})
            await toggle_gate.wait()
            return httpx.Response(200, json={"active": True, "count": 1})

        like = EngagementToggle(make_client(handler), RelationKind.LIKE, POST_ID)
        task = asyncio.create_task(like.toggle())
        await asyncio.sleep(0)

        # Act
        during = await like.refresh()
        toggle_gate.set()
        after = await task

        # Assert
        assert during.pending
        assert after == EngagementState.idle(True, 1)


class TestClientRequests:
    """Tests for the requests EngagementClient sends."""

    @pytest.mark.asyncio
    async def test_toggle_posts_to_toggle_endpoint(self):
        # Arrange
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={"active": True, "count": 3})

        # Act
        async with make_client(handler) as client:
            status = await client.toggle(RelationKind.LIKE, POST_ID)

        # Assert
        assert (status.active, status.count) == (True, 3)
        assert len(requests) == 1
        assert requests[0].method == "POST"
        assert requests[0].url.path == f"/relations/like/{POST_ID}/toggle"
        assert "auth_token=token" in requests[0].headers.get("cookie", "")


class TestClientErrors:
    """Tests for EngagementClient error mapping."""

    @pytest.mark.asyncio
    async def test_non_json_error_body(self):
        def handler(request):
            return httpx.Response(502, text="Bad gateway")

        async with make_client(handler) as client:
            with pytest.raises(EngagementRequestError, match="status 502"):
                await client.get_status(RelationKind.LIKE, POST_ID)
