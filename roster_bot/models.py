from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Final

ISO_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"
MAX_PLAYERS: Final = 6


def utc_now_iso() -> str:
    """Return current UTC timestamp in ISO-8601 format (ms precision)."""
    return datetime.now(UTC).strftime(ISO_FORMAT)


@dataclass(slots=True, frozen=True)
class TeamDetails:
    team_name: str
    team_tag: str
    contact_email: str
    captain_discord_id: str


@dataclass(slots=True, frozen=True)
class PlayerEntry:
    pubg_name: str
    pubg_uid: str
    discord_id: str

    def describe(self, position: int) -> str:
        return (
            f"**Player {position}:** PUBG Name: {self.pubg_name}, "
            f"PUBG UID: {self.pubg_uid}, Discord ID: {self.discord_id}"
        )


@dataclass(slots=True)
class Team:
    owner_id: int
    team_name: str
    team_tag: str
    contact_email: str
    captain_discord_id: str = ""
    players: list[PlayerEntry] = field(default_factory=list)
    registered_at: str = field(default_factory=utc_now_iso)
    updated_at: str = field(default_factory=utc_now_iso)

    @classmethod
    def create(cls, owner_id: int, details: TeamDetails) -> Team:
        team = cls(owner_id=owner_id, team_name="", team_tag="", contact_email="")
        team.apply_details(details)
        return team

    @property
    def player_count(self) -> int:
        return len(self.players)

    @property
    def is_full(self) -> bool:
        return len(self.players) >= MAX_PLAYERS

    def has_player(self, index: int) -> bool:
        return 0 <= index < len(self.players)

    def apply_details(self, details: TeamDetails) -> None:
        self.team_name = details.team_name
        self.team_tag = details.team_tag
        self.contact_email = details.contact_email
        self.captain_discord_id = details.captain_discord_id

    def details(self) -> TeamDetails:
        return TeamDetails(
            team_name=self.team_name,
            team_tag=self.team_tag,
            contact_email=self.contact_email,
            captain_discord_id=self.captain_discord_id,
        )

    def header(self) -> str | None:
        if self.team_name and self.team_tag:
            return f"**{self.team_name} ({self.team_tag})**"
        return None

    def clone(self) -> Team:
        return Team(
            owner_id=self.owner_id,
            team_name=self.team_name,
            team_tag=self.team_tag,
            contact_email=self.contact_email,
            captain_discord_id=self.captain_discord_id,
            players=list(self.players),
            registered_at=self.registered_at,
            updated_at=self.updated_at,
        )


__all__ = [
    "ISO_FORMAT",
    "MAX_PLAYERS",
    "PlayerEntry",
    "Team",
    "TeamDetails",
    "utc_now_iso",
]
