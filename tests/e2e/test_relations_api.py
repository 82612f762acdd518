"""End-to-end tests for relation endpoints."""

from uuid import uuid4

import pytest


class TestRelationEndpoints:
    """End-to-end tests for like, bookmark and follow endpoints.

    Note: These tests focus on the HTTP API interface layer.
    More detailed business logic tests are in unit tests.
    """

    @pytest.mark.asyncio
    async def test_anonymous_status(self, api):
        """Anonymous readers see counts but never an active flag."""
        # Arrange
        author = api.add_user("author.example")
        post = api.add_post(author)
        await api.client.post(
            f"/relations/like/{post.id}", headers=api.session(author)
        )

        # Act
        response = await api.client.get(f"/relations/like/{post.id}")

        # Assert
        assert response.status_code == 200
        assert response.json() == {"active": False, "count": 1}

    @pytest.mark.asyncio
    async def test_anonymous_status_of_unknown_post(self, api):
        # Act
        response = await api.client.get(f"/relations/bookmark/{uuid4()}")

        # Assert
        assert response.status_code == 200
        assert response.json() == {"active": False, "count": 0}

    @pytest.mark.asyncio
    async def test_toggle_requires_auth(self, api):
        """Should return 401 when not authenticated."""
        # Arrange
        post = api.add_post(api.add_user("author.example"))

        # Act
        response = await api.client.post(f"/relations/like/{post.id}/toggle")

        # Assert
        assert response.status_code == 401
        assert "Authentication required" in response.json()["error"]

    @pytest.mark.asyncio
    async def test_toggle_with_invalid_token(self, api):
        """Should return 401 with invalid token."""
        # Arrange
        post = api.add_post(api.add_user("author.example"))

        # Act
        response = await api.client.post(
            f"/relations/like/{post.id}/toggle",
            headers={"Cookie": "auth_token=invalid-token"},
        )

        # Assert
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_toggle_round_trip(self, api):
        """Toggle on then off restores the original count."""
        # Arrange
        reader = api.add_user("reader.example")
        post = api.add_post(api.add_user("author.example"))
        path = f"/relations/like/{post.id}/toggle"

        # Act
        on = await api.client.post(path, headers=api.session(reader))
        off = await api.client.post(path, headers=api.session(reader))

        # Assert
        assert on.json() == {"active": True, "count": 1}
        assert off.json() == {"active": False, "count": 0}

    @pytest.mark.asyncio
    async def test_add_and_remove_are_idempotent(self, api):
        # Arrange
        reader = api.add_user("reader.example")
        post = api.add_post(api.add_user("author.example"))
        path = f"/relations/bookmark/{post.id}"
        headers = api.session(reader)

        # Act
        first = await api.client.post(path, headers=headers)
        second = await api.client.post(path, headers=headers)
        removed = await api.client.delete(path, headers=headers)
        removed_again = await api.client.delete(path, headers=headers)

        # Assert
        assert first.json() == second.json() == {"active": True, "count": 1}
        assert removed.json() == removed_again.json() == {"active": False, "count": 0}
        assert api.store.relations == []

    @pytest.mark.asyncio
    async def test_follow_by_handle(self, api):
        # Arrange
        reader = api.add_user("reader.example")
        api.add_user("author.example")

        # Act
        response = await api.client.post(
            "/relations/follow/author.example/toggle", headers=api.session(reader)
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {"active": True, "count": 1}

    @pytest.mark.asyncio
    async def test_self_follow_rejected(self, api):
        # Arrange
        reader = api.add_user("reader.example")

        # Act
        response = await api.client.post(
            "/relations/follow/reader.example", headers=api.session(reader)
        )

        # Assert
        assert response.status_code == 400
        assert response.json() == {"error": "Cannot follow yourself"}

    @pytest.mark.asyncio
    async def test_unknown_post_not_found(self, api):
        # Arrange
        reader = api.add_user("reader.example")

        # Act
        response = await api.client.post(
            f"/relations/like/{uuid4()}/toggle", headers=api.session(reader)
        )

        # Assert
        assert response.status_code == 404
        assert "Post not found" in response.json()["error"]

    @pytest.mark.asyncio
    async def test_unknown_kind_rejected(self, api):
        # Act
        response = await api.client.get(f"/relations/upvote/{uuid4()}")

        # Assert
        assert response.status_code == 400
        assert "error" in response.json()

    @pytest.mark.asyncio
    async def test_batch_statuses(self, api):
        """Batch endpoint reports each requested target."""
        # Arrange
        reader = api.add_user("reader.example")
        author = api.add_user("author.example")
        liked = api.add_post(author, "Liked")
        other = api.add_post(author, "Other")
        await api.client.post(
            f"/relations/like/{liked.id}", headers=api.session(reader)
        )

        # Act
        response = await api.client.post(
            "/relations/like/statuses",
            json={"targets": [str(liked.id), str(other.id)]},
            headers=api.session(reader),
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["kind"] == "like"
        assert body["statuses"][str(liked.id)] == {"active": True, "count": 1}
        assert body["statuses"][str(other.id)] == {"active": False, "count": 0}

    @pytest.mark.asyncio
    async def test_follow_stats(self, api):
        # Arrange
        reader = api.add_user("reader.example")
        api.add_user("author.example")
        await api.client.post(
            "/relations/follow/author.example", headers=api.session(reader)
        )

        # Act
        response = await api.client.get(
            "/users/author.example/follow-stats", headers=api.session(reader)
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "handle": "author.example",
            "followers": 1,
            "following": 0,
            "is_following": True,
        }

    @pytest.mark.asyncio
    async def test_post_engagement(self, api):
        # Arrange
        reader = api.add_user("reader.example")
        post = api.add_post(api.add_user("author.example"))
        await api.client.post(f"/relations/like/{post.id}", headers=api.session(reader))

        # Act
        response = await api.client.get(
            f"/posts/{post.id}/engagement", headers=api.session(reader)
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["like"] == {"active": True, "count": 1}
        assert body["bookmark"] == {"active": False, "count": 0}
        assert body["comment_count"] == 0
