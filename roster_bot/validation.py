from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .models import PlayerEntry, TeamDetails


class InvalidValueError(ValueError):
    """Base exception for validation failures."""


@dataclass(slots=True, frozen=True)
class FormField:
    field_id: str
    label: str
    required: bool = True


TEAM_FORM_FIELDS: tuple[FormField, ...] = (
    FormField("team_name", "Team Name"),
    FormField("team_tag", "Team Tag"),
    FormField("contact_email", "Contact Email"),
    FormField("captain_discord_id", "Your Discord ID"),
)

PLAYER_FORM_FIELDS: tuple[FormField, ...] = (
    FormField("pubg_name", "PUBG Name"),
    FormField("pubg_uid", "PUBG UID"),
    FormField("discord_id", "Discord ID"),
)


def require_text(raw: str | None, label: str) -> str:
    value = (raw or "").strip()
    if not value:
        raise InvalidValueError(f"{label} is required")
    return value


def _collect(
    values: Mapping[str, str], fields: tuple[FormField, ...]
) -> dict[str, str]:
    collected: dict[str, str] = {}
    missing: list[str] = []
    for form_field in fields:
        try:
            collected[form_field.field_id] = require_text(
                values.get(form_field.field_id), form_field.label
            )
        except InvalidValueError:
            if form_field.required:
                missing.append(form_field.label)
            collected[form_field.field_id] = ""
    if missing:
        raise InvalidValueError(f"Missing required field(s): {', '.join(missing)}")
    return collected


def parse_team_details(values: Mapping[str, str]) -> TeamDetails:
    """Build team details from submitted form values, requiring every field."""
    return TeamDetails(**_collect(values, TEAM_FORM_FIELDS))


def parse_player_entry(values: Mapping[str, str]) -> PlayerEntry:
    return PlayerEntry(**_collect(values, PLAYER_FORM_FIELDS))


__all__ = [
    "FormField",
    "InvalidValueError",
    "PLAYER_FORM_FIELDS",
    "TEAM_FORM_FIELDS",
    "parse_player_entry",
    "parse_team_details",
    "require_text",
]
