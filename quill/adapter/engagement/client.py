"""HTTP client for the engagement API.

Used by server-rendered pages and integration tooling to drive likes,
bookmarks and follows the same way the browser does.
"""

import httpx
import logfire
from pydantic import BaseModel

from quill.adapter.error import EngagementRequestError
from quill.domain.value import RelationKind


class RemoteStatus(BaseModel):
    """Relation state as reported by the server."""

    active: bool
    count: int


class EngagementClient:
    """Async client for the ``/relations`` endpoints.

    The session token is sent as the ``auth_token`` cookie, like a browser.
    """

    def __init__(
        self,
        base_url: str,
        auth_token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ) -> None:
        """Initialize engagement client.

        Args:
            base_url: API base URL, e.g. ``http://localhost:8000``
            auth_token: Session token (None for anonymous)
            transport: Custom transport (tests use MockTransport/ASGITransport)
            timeout: Request timeout in seconds
        """
        cookies = {"auth_token": auth_token} if auth_token else None
        self._http = httpx.AsyncClient(
            base_url=base_url,
            cookies=cookies,
            transport=transport,
            timeout=timeout,
        )

    async def __aenter__(self) -> "EngagementClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._http.aclose()

    async def get_status(self, kind: RelationKind, target: str) -> RemoteStatus:
        """Fetch the current relation state (works anonymously)."""
        return await self._request("GET", f"/relations/{kind.value}/{target}")

    async def set_active(
        self, kind: RelationKind, target: str, active: bool
    ) -> RemoteStatus:
        """Ensure the relation is present (POST) or absent (DELETE)."""
        method = "POST" if active else "DELETE"
        return await self._request(method, f"/relations/{kind.value}/{target}")

    async def toggle(self, kind: RelationKind, target: str) -> RemoteStatus:
        """Flip the relation server-side."""
        return await self._request("POST", f"/relations/{kind.value}/{target}/toggle")

    async def _request(self, method: str, path: str) -> RemoteStatus:
        """Send a request and parse ``{active, count}``.

        Raises:
            EngagementRequestError: On transport failure, error status or bad body
        """
        try:
            response = await self._http.request(method, path)
        except httpx.HTTPError as e:
            logfire.error(
                "Engagement request transport error",
                method=method,
                path=path,
                error=str(e),
            )
            raise EngagementRequestError(f"Network error: {e}") from e

        if response.is_error:
            message = _error_message(response)
            logfire.warn(
                "Engagement request failed",
                method=method,
                path=path,
                status_code=response.status_code,
                error=message,
            )
            raise EngagementRequestError(message, status_code=response.status_code)

        try:
            return RemoteStatus.model_validate(response.json())
        except ValueError as e:
            # Non-JSON body (e.g. a proxy page) or JSON without {active, count}
            logfire.error(
                "Engagement response unreadable",
                method=method,
                path=path,
                status_code=response.status_code,
                error=str(e),
            )
            raise EngagementRequestError(
                "Unexpected response from server", status_code=response.status_code
            ) from e


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return f"Request failed with status {response.status_code}"
