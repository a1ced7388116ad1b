"""Async GitHub GraphQL client using httpx."""

from logging import getLogger
from typing import Any, Protocol

import httpx
from pydantic import SecretStr

logger = getLogger(__name__)


class GraphQLError(Exception):
    """Raised when GitHub rejects a GraphQL request."""


class GraphQLExecutor(Protocol):
    """Anything able to run a GraphQL document against GitHub."""

    async def execute_graphql(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]: ...


class GitHubAPIClient:
    """Async GitHub API client for making GraphQL requests."""

    def __init__(self, token: SecretStr, base_url: str = "https://api.github.com") -> None:
        """Initialize GitHub API client.

        Args:
            token: GitHub token (the workflow GITHUB_TOKEN or a Personal Access Token)
            base_url: Base URL for GitHub API (default: https://api.github.com)
        """
        self.token = token.get_secret_value()
        self.base_url = base_url.rstrip("/")
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "GitHubAPIClient":
        """Enter async context manager."""
        self._client = httpx.AsyncClient(
            headers={
                "Authorization": f"Bearer {self.token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            },
            timeout=httpx.Timeout(30.0, connect=10.0),
        )
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        if self._client:
            await self._client.aclose()

    async def execute_graphql(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Execute a GraphQL query or mutation against GitHub's GraphQL API.

        Requests are sent exactly once; callers decide which failures are worth retrying.

        Args:
            query: GraphQL document
            variables: Optional dictionary of GraphQL variables

        Returns:
            GraphQL response dictionary (with a "data" key, which may be null)

        Raises:
            GraphQLError: If the HTTP request fails or the response contains errors
            httpx.TransportError: If GitHub cannot be reached
        """
        if not self._client:
            raise RuntimeError("Client not initialized - use async with context manager")

        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        response = await self._client.request("POST", f"{self.base_url}/graphql", json=payload)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            # The body carries GitHub's explanation, which callers match on
            raise GraphQLError(f"HTTP {e.response.status_code}: {e.response.text}") from e

        result: dict[str, Any] = response.json() or {}

        if result.get("errors"):
            error_messages = [error.get("message", str(error)) for error in result["errors"]]
            raise GraphQLError(f"GraphQL errors: {'; '.join(error_messages)}")

        return result
