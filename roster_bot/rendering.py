"""Pure rendering of a team roster into per-slot message payloads."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from . import actions
from .models import MAX_PLAYERS, Team
from .registry import Slot

log = logging.getLogger("roster-bot")

# Discord allows at most five action rows per message.
MAX_ROWS_PER_MESSAGE = 5
OVERFLOW_AFTER = 5


class Visibility(str, Enum):
    PUBLIC = "public"
    EPHEMERAL = "ephemeral"


class Pagination(str, Enum):
    SINGLE = "single"
    OVERFLOW = "overflow"


class ButtonStyle(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    DANGER = "danger"


@dataclass(slots=True, frozen=True)
class RenderMode:
    visibility: Visibility = Visibility.PUBLIC
    pagination: Pagination = Pagination.SINGLE

    @property
    def ephemeral(self) -> bool:
        return self.visibility is Visibility.EPHEMERAL

    @classmethod
    def from_values(cls, visibility: str | None, pagination: str | None) -> RenderMode:
        """Parse mode names, falling back to the defaults on unknown values."""
        mode = cls()
        raw_visibility = (visibility or mode.visibility.value).strip().lower()
        raw_pagination = (pagination or mode.pagination.value).strip().lower()
        try:
            resolved_visibility = Visibility(raw_visibility)
        except ValueError:
            log.warning(
                "Unknown roster visibility %r; using %s",
                visibility,
                mode.visibility.value,
            )
            resolved_visibility = mode.visibility
        try:
            resolved_pagination = Pagination(raw_pagination)
        except ValueError:
            log.warning(
                "Unknown roster pagination %r; using %s",
                pagination,
                mode.pagination.value,
            )
            resolved_pagination = mode.pagination
        return cls(visibility=resolved_visibility, pagination=resolved_pagination)


@dataclass(slots=True, frozen=True)
class ButtonSpec:
    custom_id: str
    label: str
    style: ButtonStyle
    row: int
    disabled: bool = False


@dataclass(slots=True, frozen=True)
class RenderedMessage:
    content: str
    buttons: tuple[ButtonSpec, ...] = ()


@dataclass(slots=True)
class RosterRender:
    messages: dict[Slot, RenderedMessage | None] = field(default_factory=dict)

    def get(self, slot: Slot) -> RenderedMessage | None:
        return self.messages.get(slot)


def player_buttons(index: int, row: int) -> tuple[ButtonSpec, ButtonSpec]:
    position = index + 1
    return (
        ButtonSpec(
            custom_id=actions.edit_player(index).encode(),
            label=f"Edit Player {position}",
            style=ButtonStyle.PRIMARY,
            row=row,
        ),
        ButtonSpec(
            custom_id=actions.remove_player(index).encode(),
            label=f"Remove Player {position}",
            style=ButtonStyle.DANGER,
            row=row,
        ),
    )


def control_buttons(team: Team) -> tuple[ButtonSpec, ...]:
    return (
        ButtonSpec(
            custom_id=actions.EDIT_TEAM.encode(),
            label="Edit Team",
            style=ButtonStyle.PRIMARY,
            row=0,
        ),
        ButtonSpec(
            custom_id=actions.ADD_PLAYER.encode(),
            label="Add Players",
            style=ButtonStyle.SECONDARY,
            row=0,
            disabled=team.is_full,
        ),
    )


def render_list(team: Team, mode: RenderMode) -> RenderedMessage:
    if mode.pagination is Pagination.OVERFLOW:
        listed = team.players[:OVERFLOW_AFTER]
        players_per_row = 1
    else:
        listed = team.players
        players_per_row = 2

    lines: list[str] = []
    header = team.header()
    if header:
        lines.append(header)
    lines.append("**Your Team Players:**")
    if listed:
        lines.extend(player.describe(idx + 1) for idx, player in enumerate(listed))
    else:
        lines.append("No players added yet.")
    lines.append("")
    lines.append(f"Total players: {team.player_count}/{MAX_PLAYERS}")

    buttons: list[ButtonSpec] = []
    for idx in range(len(listed)):
        buttons.extend(player_buttons(idx, idx // players_per_row))
    return RenderedMessage(content="\n".join(lines), buttons=tuple(buttons))


def render_overflow(team: Team, mode: RenderMode) -> RenderedMessage | None:
    if mode.pagination is not Pagination.OVERFLOW:
        return None
    if team.player_count <= OVERFLOW_AFTER:
        return None
    extra = team.players[OVERFLOW_AFTER:]
    lines = [
        player.describe(OVERFLOW_AFTER + offset + 1)
        for offset, player in enumerate(extra)
    ]
    buttons: list[ButtonSpec] = []
    for offset in range(len(extra)):
        buttons.extend(player_buttons(OVERFLOW_AFTER + offset, offset))
    return RenderedMessage(content="\n".join(lines), buttons=tuple(buttons))


def render_status(team: Team, status: str | None) -> RenderedMessage:
    lines = []
    if status:
        lines.append(status)
    lines.append("Use the buttons below to edit your team or add players.")
    return RenderedMessage(content="\n".join(lines), buttons=control_buttons(team))


def render_roster(
    team: Team, mode: RenderMode, status: str | None = None
) -> RosterRender:
    """Render every slot for ``team``; a None payload means the slot is unused."""
    return RosterRender(
        messages={
            Slot.LIST: render_list(team, mode),
            Slot.OVERFLOW: render_overflow(team, mode),
            Slot.STATUS: render_status(team, status),
        }
    )


__all__ = [
    "ButtonSpec",
    "ButtonStyle",
    "MAX_ROWS_PER_MESSAGE",
    "OVERFLOW_AFTER",
    "Pagination",
    "RenderMode",
    "RenderedMessage",
    "RosterRender",
    "Visibility",
    "control_buttons",
    "render_list",
    "render_overflow",
    "render_roster",
    "render_status",
]
