"""Team roster registration helpers."""

from .actions import ActionKind, RosterAction
from .models import MAX_PLAYERS, PlayerEntry, Team, TeamDetails, utc_now_iso
from .registry import MessageRegistry, Slot
from .rendering import Pagination, RenderMode, Visibility, render_roster
from .router import InteractionRouter, RosterContext
from .storage import (
    PlayerNotFoundError,
    RosterError,
    RosterFullError,
    RosterNotFoundError,
    RosterStorage,
    TeamNotFoundError,
)
from .sync import ChannelTarget, FollowupTarget, RenderSync
from .validation import InvalidValueError, parse_player_entry, parse_team_details

__all__ = [
    "ActionKind",
    "RosterAction",
    "MAX_PLAYERS",
    "PlayerEntry",
    "Team",
    "TeamDetails",
    "utc_now_iso",
    "MessageRegistry",
    "Slot",
    "Pagination",
    "RenderMode",
    "Visibility",
    "render_roster",
    "InteractionRouter",
    "RosterContext",
    "PlayerNotFoundError",
    "RosterError",
    "RosterFullError",
    "RosterNotFoundError",
    "RosterStorage",
    "TeamNotFoundError",
    "ChannelTarget",
    "FollowupTarget",
    "RenderSync",
    "InvalidValueError",
    "parse_player_entry",
    "parse_team_details",
]
