from enum import Enum
from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings


class MergeMethod(str, Enum):
    """Merge methods accepted by the mergePullRequest mutation."""

    MERGE = "MERGE"
    SQUASH = "SQUASH"
    REBASE = "REBASE"


class Preset(str, Enum):
    """Ceilings on the dependency bump category that may be merged automatically."""

    DEPENDABOT_PATCH = "DEPENDABOT_PATCH"
    DEPENDABOT_MINOR = "DEPENDABOT_MINOR"
    DEPENDABOT_MAJOR = "DEPENDABOT_MAJOR"
    DEPENDABOT_ALL = "DEPENDABOT_ALL"


class MergeSettings(BaseSettings):
    """Auto-merge policy configuration."""

    github_login: str = Field(
        default="dependabot[bot]",
        validation_alias=AliasChoices("github_login", "INPUT_GITHUB_LOGIN"),
        description="Login of the bot whose pull requests may be merged automatically",
    )
    merge_method: MergeMethod = Field(
        default=MergeMethod.SQUASH,
        validation_alias=AliasChoices("merge_method", "INPUT_MERGE_METHOD"),
        description="Merge method used for the merge mutation (MERGE, SQUASH or REBASE)",
    )
    preset: Preset = Field(
        default=Preset.DEPENDABOT_MINOR,
        validation_alias=AliasChoices("preset", "INPUT_PRESET"),
        description="Highest bump category eligible for merging",
    )
    max_attempts: int = Field(
        default=3,
        validation_alias=AliasChoices("max_attempts", "INPUT_MAX_ATTEMPTS"),
        description="Total merge attempts when the base branch was modified concurrently",
    )

    @field_validator("merge_method", "preset", mode="before")
    @classmethod
    def normalize_case(cls, v: Any) -> Any:
        """Accept lowercase action inputs such as ``squash``."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("max_attempts")
    @classmethod
    def validate_max_attempts(cls, v: int) -> int:
        """Validate that at least one merge attempt is made."""
        if v < 1:
            raise ValueError("max_attempts must be at least 1")
        return v
