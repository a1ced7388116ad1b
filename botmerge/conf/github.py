from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings


class GitHubSettings(BaseSettings):
    """GitHub API configuration and workflow event settings."""

    github_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("github_token", "INPUT_GITHUB_TOKEN"),
        description="Token used to authenticate against the GitHub GraphQL API",
    )

    github_api_url: str = Field(
        default="https://api.github.com",
        description="Base URL for the GitHub API (set by the Actions runner on GitHub Enterprise)",
    )

    # Populated by the Actions runner for every workflow run
    github_event_path: str | None = Field(
        default=None,
        description="Path to the JSON file holding the triggering event payload",
    )
    github_event_name: str | None = Field(
        default=None,
        description="Name of the event that triggered the workflow (e.g. pull_request)",
    )
