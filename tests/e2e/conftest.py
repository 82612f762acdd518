"""Fixtures for end-to-end API tests."""

from dataclasses import dataclass

import httpx
import pytest_asyncio
from fastapi import FastAPI

from quill.config import AuthSettings
from quill.domain.model import Post, User
from quill.interface.api.app import create_app
from quill.persistence.repository.inmemory import InMemoryStore
from tests.conftest import make_post, make_token, make_user
from tests.di import build_test_container


@dataclass
class Api:
    """Running app with direct access to its in-memory store."""

    app: FastAPI
    client: httpx.AsyncClient
    store: InMemoryStore
    auth: AuthSettings

    def add_user(self, handle: str, display_name: str | None = None) -> User:
        user = make_user(handle, display_name)
        self.store.users[user.id] = user
        return user

    def add_post(self, author: User, title: str = "Test Post") -> Post:
        post = make_post(author, title)
        self.store.posts[post.id] = post
        return post

    def session(self, user: User) -> dict[str, str]:
        """Headers carrying the user's session cookie."""
        return {"Cookie": f"auth_token={make_token(user, self.auth)}"}


@pytest_asyncio.fixture
async def api():
    """App wired to the test container, served in-process."""
    container = build_test_container()
    app = create_app(container=container)
    store = await container.get(InMemoryStore)
    auth = await container.get(AuthSettings)

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield Api(app=app, client=client, store=store, auth=auth)

    await container.close()
