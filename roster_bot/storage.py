from __future__ import annotations

from .models import MAX_PLAYERS, PlayerEntry, Team, TeamDetails, utc_now_iso


class RosterError(Exception):
    """Base exception for roster precondition failures."""


class RosterFullError(RosterError):
    def __init__(self, owner_id: int) -> None:
        super().__init__(f"You already have {MAX_PLAYERS} players in your team.")
        self.owner_id = owner_id


class RosterNotFoundError(RosterError):
    """Raised when the addressed team or player does not exist."""


class TeamNotFoundError(RosterNotFoundError):
    def __init__(self, owner_id: int) -> None:
        super().__init__("You need to create a team first!")
        self.owner_id = owner_id


class PlayerNotFoundError(RosterNotFoundError):
    def __init__(self, owner_id: int, index: int) -> None:
        super().__init__("Player not found.")
        self.owner_id = owner_id
        self.index = index


class RosterStorage:
    """Volatile team storage keyed by the registering user's id.

    Every returned team is a copy, so callers cannot mutate stored state
    outside these operations.
    """

    def __init__(self) -> None:
        self._teams: dict[int, Team] = {}

    def get_team(self, owner_id: int) -> Team | None:
        team = self._teams.get(owner_id)
        return team.clone() if team is not None else None

    def team_count(self) -> int:
        return len(self._teams)

    def require_capacity(self, owner_id: int) -> Team:
        team = self._require_team(owner_id)
        if team.is_full:
            raise RosterFullError(owner_id)
        return team.clone()

    def get_player(self, owner_id: int, index: int) -> PlayerEntry:
        return self._require_player(owner_id, index).players[index]

    def upsert_team(self, owner_id: int, details: TeamDetails) -> Team:
        team = self._teams.get(owner_id)
        if team is None:
            team = Team.create(owner_id, details)
            self._teams[owner_id] = team
        else:
            team.apply_details(details)
            team.updated_at = utc_now_iso()
        return team.clone()

    def append_player(self, owner_id: int, player: PlayerEntry) -> Team:
        team = self._require_team(owner_id)
        if team.is_full:
            raise RosterFullError(owner_id)
        team.players.append(player)
        team.updated_at = utc_now_iso()
        return team.clone()

    def update_player(self, owner_id: int, index: int, player: PlayerEntry) -> Team:
        team = self._require_player(owner_id, index)
        team.players[index] = player
        team.updated_at = utc_now_iso()
        return team.clone()

    def remove_player(self, owner_id: int, index: int) -> Team:
        team = self._require_player(owner_id, index)
        del team.players[index]
        team.updated_at = utc_now_iso()
        return team.clone()

    def _require_team(self, owner_id: int) -> Team:
        team = self._teams.get(owner_id)
        if team is None:
            raise TeamNotFoundError(owner_id)
        return team

    def _require_player(self, owner_id: int, index: int) -> Team:
        team = self._require_team(owner_id)
        if not team.has_player(index):
            raise PlayerNotFoundError(owner_id, index)
        return team


__all__ = [
    "PlayerNotFoundError",
    "RosterError",
    "RosterFullError",
    "RosterNotFoundError",
    "RosterStorage",
    "TeamNotFoundError",
]
