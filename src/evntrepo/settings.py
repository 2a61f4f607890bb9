"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

import logging

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from evntrepo.models.errors import RepositoryConfigError
from evntrepo.models.index import Repository

DEFAULT_EVENTS_PATH = "./events"


class Settings(BaseSettings):
    """Configuration for an evntrepo run.

    Values are read from environment variables and from a ``.env`` file in
    the working directory. Inside GitHub Actions the ``events-path`` action
    input arrives as ``INPUT_EVENTS-PATH`` and the repository as
    ``GITHUB_REPOSITORY``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    log_level: str = "INFO"

    # Inputs
    events_path: str = Field(
        DEFAULT_EVENTS_PATH,
        validation_alias=AliasChoices("INPUT_EVENTS-PATH", "EVENTS_PATH", "events_path"),
    )
    github_repository: str | None = None
    pages_url: str | None = None  # overrides the default https://<owner>.github.io/<name>

    # Artifacts
    index_file: str = ".index.json"
    listing_file: str = ".ls"

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        if value.upper() not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return value

    @field_validator("events_path")
    @classmethod
    def _default_blank_events_path(cls, value: str) -> str:
        # An unset action input is passed as an empty string.
        return value.strip() or DEFAULT_EVENTS_PATH

    @property
    def repository(self) -> Repository:
        """Return the owner/name coordinates from ``GITHUB_REPOSITORY``."""
        value = (self.github_repository or "").strip()
        owner, sep, name = value.partition("/")
        if not sep or not owner or not name or "/" in name:
            raise RepositoryConfigError(
                "GITHUB_REPOSITORY must be set to 'owner/repo'"
                + (f" (got {value!r})" if value else "")
            )
        return Repository(owner=owner, name=name)

    @property
    def effective_pages_url(self) -> str:
        """Return the publication base URL (explicit override takes precedence)."""
        if self.pages_url:
            return self.pages_url.rstrip("/")
        return self.repository.pages_url
