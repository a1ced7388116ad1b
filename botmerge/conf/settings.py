from pydantic_settings import SettingsConfigDict

from .github import GitHubSettings
from .merge import MergeSettings


class Settings(GitHubSettings, MergeSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    project_name: str = "botmerge"
