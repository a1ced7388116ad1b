"""Decide whether a bot pull request may be merged automatically."""

from dataclasses import dataclass

from botmerge.conf.merge import MergeSettings, Preset

from .bump import BumpCategory, classify
from .github.models import MergeInput, PullRequestSnapshot

PRESET_CEILINGS: dict[Preset, BumpCategory] = {
    Preset.DEPENDABOT_PATCH: BumpCategory.PATCH,
    Preset.DEPENDABOT_MINOR: BumpCategory.MINOR,
    Preset.DEPENDABOT_MAJOR: BumpCategory.MAJOR,
    Preset.DEPENDABOT_ALL: BumpCategory.MAJOR,
}


@dataclass(frozen=True)
class MergeDecision:
    """Outcome of an eligibility evaluation."""

    merge: bool
    mutation_input: MergeInput | None = None
    reason: str | None = None


def preset_ceiling(preset: Preset) -> BumpCategory:
    """Return the highest bump category a preset allows."""
    return PRESET_CEILINGS[preset]


def _skip(reason: str) -> MergeDecision:
    return MergeDecision(merge=False, reason=reason)


def evaluate(snapshot: PullRequestSnapshot | None, config: MergeSettings) -> MergeDecision:
    """Evaluate a pull request snapshot against the merge policy.

    Checks run in a fixed order and stop at the first failure so that each
    skip has its own reason.

    Args:
        snapshot: Pull request state, or None if it could not be fetched
        config: Merge policy settings

    Returns:
        MergeDecision carrying either the mutation input or the reason to skip
    """
    if snapshot is None:
        return _skip("Pull request information is unavailable.")

    if snapshot.last_commit_author_name != config.github_login:
        return _skip(f"Pull request changes were not made by {config.github_login}.")

    if snapshot.merged or snapshot.state != "OPEN":
        return _skip("Pull request is already merged or closed.")

    if snapshot.mergeable != "MERGEABLE":
        return _skip(f"Pull request is not mergeable ({snapshot.mergeable}).")

    if snapshot.latest_review_state != "APPROVED":
        return _skip("Pull request has not been approved.")

    ceiling = preset_ceiling(config.preset)
    category = classify(snapshot.title)
    if category is None:
        return _skip(f"Unable to determine bump category from title: {snapshot.title!r}.")
    if category > ceiling:
        return _skip(f"Bump category {category.name} exceeds preset {config.preset.value}.")

    return MergeDecision(
        merge=True,
        mutation_input=MergeInput(
            pull_request_id=snapshot.id,
            commit_headline=snapshot.title,
            merge_method=config.merge_method.value,
        ),
    )
