import os

# Keep the runner's environment from leaking into settings BEFORE any botmerge imports
for name in ("GITHUB_LOGIN", "MERGE_METHOD", "PRESET", "MAX_ATTEMPTS", "GITHUB_TOKEN"):
    os.environ.pop(name, None)
    os.environ.pop(f"INPUT_{name}", None)

from typing import Any

import pytest
from pydantic import SecretStr

from botmerge.conf.merge import MergeMethod, MergeSettings, Preset
from botmerge.services.github.client import GitHubAPIClient

DEPENDABOT_LOGIN = "dependabot[bot]"
PULL_REQUEST_ID = "MDExOlB1bGxSZXF1ZXN0MzE3MDI5MjU4"
MINOR_BUMP_TITLE = "bump @types/jest from 26.0.12 to 26.1.0"
MAJOR_BUMP_TITLE = "bump @types/jest from 26.0.12 to 27.0.13"


class FakeGraphQLClient:
    """Records GraphQL calls and replays scripted responses or errors."""

    def __init__(self, *results: Any) -> None:
        self.results = list(results)
        self.calls: list[tuple[str, dict[str, Any] | None]] = []

    async def execute_graphql(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        self.calls.append((query, variables))
        result = self.results.pop(0) if self.results else {"data": {}}
        if isinstance(result, Exception):
            raise result
        return result


def make_event_payload(author: str = DEPENDABOT_LOGIN, title: str = MINOR_BUMP_TITLE) -> dict[str, Any]:
    return {
        "action": "opened",
        "pull_request": {
            "number": 42,
            "node_id": PULL_REQUEST_ID,
            "title": title,
            "user": {"login": author},
        },
        "repository": {"name": "botmerge", "owner": {"login": "octocat"}},
    }


def make_query_response(
    commit_author: str | None = DEPENDABOT_LOGIN,
    title: str = MINOR_BUMP_TITLE,
    mergeable: str = "MERGEABLE",
    merged: bool = False,
    state: str = "OPEN",
    review_state: str | None = "APPROVED",
) -> dict[str, Any]:
    return {
        "data": {
            "repository": {
                "pullRequest": {
                    "id": PULL_REQUEST_ID,
                    "title": title,
                    "mergeable": mergeable,
                    "merged": merged,
                    "state": state,
                    "commits": {
                        "edges": [
                            {
                                "node": {
                                    "commit": {
                                        "author": {"name": commit_author},
                                        "message": "Update test\n\nSigned-off-by: dependabot[bot]",
                                        "messageHeadline": "Update test",
                                    }
                                }
                            }
                        ]
                    },
                    "reviews": {"edges": [{"node": {"state": review_state}}] if review_state else []},
                }
            }
        }
    }


@pytest.fixture
def mock_client() -> GitHubAPIClient:
    """Create a test GitHub API client for mocking."""
    return GitHubAPIClient(token=SecretStr("test_token"))


@pytest.fixture
def merge_settings() -> MergeSettings:
    """Merge policy matching a typical Dependabot setup."""
    return MergeSettings(
        github_login=DEPENDABOT_LOGIN,
        merge_method=MergeMethod.SQUASH,
        preset=Preset.DEPENDABOT_MINOR,
    )
