"""Classify dependency bump pull requests by semantic version delta."""

import re
from enum import IntEnum

# Prefixes such as "v" and pre-release suffixes are ignored; only the numeric triple matters.
_VERSION_RE = re.compile(r"(\d+)\.(\d+)\.(\d+)")


class BumpCategory(IntEnum):
    """Impact of a version change, ordered PATCH < MINOR < MAJOR."""

    PATCH = 1
    MINOR = 2
    MAJOR = 3


def parse_versions(title: str) -> tuple[tuple[int, int, int], tuple[int, int, int]] | None:
    """Extract the "from" and "to" version triples from a pull request title.

    Args:
        title: Pull request title, e.g. "bump @types/jest from 26.0.12 to 26.1.0"

    Returns:
        Tuple of (old_version, new_version) triples, or None if the title does not
        contain two versions
    """
    matches = _VERSION_RE.findall(title)
    if len(matches) < 2:
        return None

    old, new = matches[0], matches[1]
    return (
        (int(old[0]), int(old[1]), int(old[2])),
        (int(new[0]), int(new[1]), int(new[2])),
    )


def classify(title: str) -> BumpCategory | None:
    """Classify the version bump described by a pull request title.

    The first component that differs decides the category. A change in the patch
    component, or no change at all, is a PATCH bump.

    Args:
        title: Pull request title

    Returns:
        The bump category, or None when the title cannot be classified
    """
    versions = parse_versions(title)
    if versions is None:
        return None

    old, new = versions
    if old[0] != new[0]:
        return BumpCategory.MAJOR
    if old[1] != new[1]:
        return BumpCategory.MINOR
    return BumpCategory.PATCH


def check_category(title: str, max_category: BumpCategory | str) -> bool:
    """Return True if the title describes a bump no larger than max_category.

    Args:
        title: Pull request title
        max_category: Highest permitted category, as a BumpCategory or its name

    Returns:
        True when the title can be classified and its category is permitted

    Raises:
        ValueError: If max_category is a name that is not a bump category
    """
    if isinstance(max_category, str):
        try:
            max_category = BumpCategory[max_category.upper()]
        except KeyError:
            accepted = ", ".join(category.name for category in BumpCategory)
            raise ValueError(f"Unknown bump category: {max_category}. Expected one of: {accepted}") from None

    category = classify(title)
    if category is None:
        return False
    return category <= max_category
