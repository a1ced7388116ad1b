from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PullRequestEvent:
    """The parts of a pull_request webhook payload needed to evaluate a merge."""

    number: int
    node_id: str
    title: str
    author_login: str
    repository_name: str
    repository_owner: str

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "PullRequestEvent | None":
        """Build an event from a raw webhook payload.

        Returns:
            The parsed event, or None if the payload has no usable pull request or repository
        """
        pull_request = payload.get("pull_request")
        repository = payload.get("repository")
        if not pull_request or not repository:
            return None

        try:
            return cls(
                number=pull_request["number"],
                node_id=pull_request["node_id"],
                title=pull_request["title"],
                author_login=pull_request["user"]["login"],
                repository_name=repository["name"],
                repository_owner=repository["owner"]["login"],
            )
        except (KeyError, TypeError):
            return None


@dataclass(frozen=True)
class PullRequestSnapshot:
    """Pull request state fetched once per evaluation."""

    id: str
    title: str
    mergeable: str  # MERGEABLE, CONFLICTING or UNKNOWN
    merged: bool
    state: str  # OPEN, CLOSED or MERGED
    last_commit_author_name: str | None = None
    last_commit_message: str = ""
    last_commit_headline: str = ""
    latest_review_state: str | None = None  # APPROVED, CHANGES_REQUESTED, COMMENTED, DISMISSED or PENDING

    @classmethod
    def from_graphql(cls, response: dict[str, Any]) -> "PullRequestSnapshot | None":
        """Build a snapshot from the pull request query response.

        The query asks for the last commit and the latest review only, so the first
        edge of each connection is the one that matters.

        Returns:
            The snapshot, or None if the response does not resolve a pull request
        """
        data = response.get("data") or {}
        repository = data.get("repository") or {}
        pull_request = repository.get("pullRequest")
        if not pull_request:
            return None

        commit: dict[str, Any] = {}
        commit_edges = (pull_request.get("commits") or {}).get("edges") or []
        if commit_edges and commit_edges[0]:
            commit = (commit_edges[0].get("node") or {}).get("commit") or {}
        author = commit.get("author") or {}

        review: dict[str, Any] = {}
        review_edges = (pull_request.get("reviews") or {}).get("edges") or []
        if review_edges and review_edges[0]:
            review = review_edges[0].get("node") or {}

        return cls(
            id=pull_request["id"],
            title=pull_request["title"],
            mergeable=pull_request["mergeable"],
            merged=pull_request["merged"],
            state=pull_request["state"],
            last_commit_author_name=author.get("name"),
            last_commit_message=commit.get("message", ""),
            last_commit_headline=commit.get("messageHeadline", ""),
            latest_review_state=review.get("state"),
        )


@dataclass(frozen=True)
class MergeInput:
    """Variables for the mergePullRequest mutation."""

    pull_request_id: str
    commit_headline: str
    merge_method: str

    def to_variables(self) -> dict[str, str]:
        """Return the GraphQL variables for this merge."""
        return {
            "pullRequestId": self.pull_request_id,
            "commitHeadline": self.commit_headline,
            "mergeMethod": self.merge_method,
        }
