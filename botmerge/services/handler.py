"""Handle pull request events by merging eligible bot pull requests."""

import asyncio
from collections.abc import Awaitable, Callable
from logging import getLogger
from typing import Any

from botmerge.conf.merge import MergeSettings

from .eligibility import evaluate
from .github.client import GraphQLExecutor
from .github.models import MergeInput, PullRequestEvent, PullRequestSnapshot
from .github.queries import FIND_PULL_REQUEST_INFO, MERGE_PULL_REQUEST
from .retry import RetryPolicy, with_retry

logger = getLogger(__name__)

PULL_REQUEST_EVENTS = frozenset({"pull_request", "pull_request_target"})

MERGE_FAILED_MESSAGE = (
    "An error occurred while merging the Pull Request. This is usually caused by the base branch "
    "being out of sync with the target branch. In this case, the base branch must be rebased. "
    "Some tools, such as Dependabot, do that automatically."
)


async def fetch_snapshot(client: GraphQLExecutor, event: PullRequestEvent) -> PullRequestSnapshot | None:
    """Fetch commit, review and mergeability state for the event's pull request.

    Args:
        client: GraphQL executor
        event: Pull request event

    Returns:
        The snapshot, or None if GitHub did not resolve the pull request
    """
    response = await client.execute_graphql(
        FIND_PULL_REQUEST_INFO,
        {
            "pullRequestNumber": event.number,
            "repositoryName": event.repository_name,
            "repositoryOwner": event.repository_owner,
        },
    )
    return PullRequestSnapshot.from_graphql(response)


async def merge_pull_request(client: GraphQLExecutor, merge_input: MergeInput) -> dict[str, Any]:
    """Run the mergePullRequest mutation once."""
    return await client.execute_graphql(MERGE_PULL_REQUEST, merge_input.to_variables())


async def handle_pull_request(
    client: GraphQLExecutor,
    payload: dict[str, Any],
    config: MergeSettings,
    max_attempts: int | None = None,
    sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
) -> None:
    """Merge the pull request described by a webhook payload if policy allows it.

    Never raises: every failure is logged so that the workflow step completes.

    Args:
        client: GraphQL executor used for the query and the merge mutation
        payload: Raw pull_request event payload
        config: Merge policy settings
        max_attempts: Total merge attempts (defaults to config.max_attempts)
        sleep: Delay primitive used between merge attempts
    """
    event = PullRequestEvent.from_payload(payload)
    if event is None:
        logger.warning("Required pull request information is unavailable.")
        return

    expected_login = config.github_login
    if event.author_login != expected_login:
        logger.info(f"Pull request not created by {expected_login}, skipping.")
        return

    try:
        snapshot = await fetch_snapshot(client, event)
        if snapshot is None:
            logger.warning("Unable to fetch pull request information.")
            return

        logger.info(f"Found pull request information: {snapshot}.")

        decision = evaluate(snapshot, config)
        if not decision.merge or decision.mutation_input is None:
            logger.info(decision.reason)
            return

        merge_input = decision.mutation_input
        policy = RetryPolicy(max_attempts=max_attempts or config.max_attempts)
        try:
            await with_retry(lambda: merge_pull_request(client, merge_input), policy, sleep=sleep)
        except Exception as e:
            logger.error(MERGE_FAILED_MESSAGE)
            logger.debug(f"Original error: {e}.")
            return

        logger.info(f"Pull request #{event.number} merged using {merge_input.merge_method}.")
    except Exception as e:
        logger.error(f"Unable to process pull request #{event.number}: {e}")


async def handle_event(
    client: GraphQLExecutor,
    event_name: str | None,
    payload: dict[str, Any],
    config: MergeSettings,
    max_attempts: int | None = None,
) -> None:
    """Dispatch a workflow event to the pull request handler.

    Args:
        client: GraphQL executor
        event_name: Name of the triggering event (e.g. pull_request)
        payload: Raw event payload
        config: Merge policy settings
        max_attempts: Total merge attempts (defaults to config.max_attempts)
    """
    if event_name not in PULL_REQUEST_EVENTS:
        logger.info(f"Event {event_name} is not a pull request event, skipping.")
        return

    await handle_pull_request(client, payload, config, max_attempts=max_attempts)
