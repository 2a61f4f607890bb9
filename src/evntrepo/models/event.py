"""Event data schema. Every file in the events directory must validate against ``EventData``."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field, model_validator


class EventStatus(StrEnum):
    SCHEDULED = "scheduled"
    POSTPONED = "postponed"
    CANCELLED = "cancelled"


class VenueKind(StrEnum):
    PHYSICAL = "physical"
    ONLINE = "online"


class Venue(BaseModel):
    """A place an event happens, either an address or an online room."""

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    kind: VenueKind = VenueKind.PHYSICAL
    address: str | None = None
    url: str | None = None

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def _check_location(self) -> Venue:
        if self.kind is VenueKind.ONLINE and not self.url:
            raise ValueError("Online venues require a url")
        return self


class EventInstance(BaseModel):
    """A single occurrence of an event."""

    start: datetime
    end: datetime | None = None
    venue_id: str | None = Field(None, alias="venueId")
    status: EventStatus = EventStatus.SCHEDULED

    model_config = {"extra": "forbid", "populate_by_name": True}

    @model_validator(mode="after")
    def _check_order(self) -> EventInstance:
        if self.end is None:
            return self
        if (self.start.tzinfo is None) != (self.end.tzinfo is None):
            raise ValueError("Instance start and end must both have a timezone or neither")
        if self.end < self.start:
            raise ValueError("Instance end must not be before its start")
        return self


class EventLink(BaseModel):
    url: str = Field(min_length=1)
    label: str | None = None

    model_config = {"extra": "forbid"}


class EventData(BaseModel):
    """Top-level document of an event data file."""

    version: int = Field(1, alias="v", ge=1)
    name: str = Field(min_length=1)
    description: str | None = None
    venues: list[Venue] = []
    instances: list[EventInstance] = Field(min_length=1)
    links: list[EventLink] = []
    tags: list[str] = []

    model_config = {"extra": "forbid", "populate_by_name": True}
