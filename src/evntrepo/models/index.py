"""Models for the published event index and repository coordinates."""

from __future__ import annotations

from pydantic import BaseModel


class Repository(BaseModel):
    """Owner/name coordinates of the hosting repository."""

    owner: str
    name: str

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.name}"

    @property
    def pages_url(self) -> str:
        """Default GitHub Pages URL for a project site."""
        return f"https://{self.owner}.github.io/{self.name}"


class IndexEntry(BaseModel):
    path: str
    url: str


class EventIndex(BaseModel):
    """Contents of the repository-wide ``.index.json`` manifest."""

    repository: str
    events: list[IndexEntry] = []
