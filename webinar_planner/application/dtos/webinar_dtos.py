"""Webinar DTOs returned by command handlers."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class OrganizedWebinar:
    """Result of a successful OrganizeWebinar command.

    Attributes:
        id: Identifier assigned to the new webinar.
    """

    id: str
