"""Typed custom ids for roster buttons and forms."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_SEPARATOR = ":"


class ActionKind(str, Enum):
    CREATE_TEAM = "create_team"
    EDIT_TEAM = "edit_team"
    ADD_PLAYER = "add_players"
    EDIT_PLAYER = "edit_player"
    REMOVE_PLAYER = "remove_player"
    SHOW_MY_ID = "show_my_discord_id"
    TEAM_FORM = "team_form"
    ADD_PLAYER_FORM = "add_player_form"
    EDIT_PLAYER_FORM = "edit_player_form"

    @property
    def indexed(self) -> bool:
        return self in _INDEXED_KINDS


_INDEXED_KINDS = frozenset(
    {ActionKind.EDIT_PLAYER, ActionKind.REMOVE_PLAYER, ActionKind.EDIT_PLAYER_FORM}
)


@dataclass(slots=True, frozen=True)
class RosterAction:
    kind: ActionKind
    index: int | None = None

    def __post_init__(self) -> None:
        if self.kind.indexed:
            if self.index is None or self.index < 0:
                raise ValueError(f"{self.kind.value} requires a non-negative index")
        elif self.index is not None:
            raise ValueError(f"{self.kind.value} does not take an index")

    def encode(self) -> str:
        if self.index is None:
            return self.kind.value
        return f"{self.kind.value}{_SEPARATOR}{self.index}"

    @classmethod
    def decode(cls, custom_id: str) -> RosterAction | None:
        """Return the action for ``custom_id`` or None if it is not ours."""
        name, _, raw_index = custom_id.partition(_SEPARATOR)
        try:
            kind = ActionKind(name)
        except ValueError:
            return None
        if not kind.indexed:
            return cls(kind) if not raw_index else None
        if not raw_index.isdigit():
            return None
        return cls(kind, int(raw_index))

    def as_form(self) -> RosterAction:
        """Map a button action to the form it opens."""
        if self.kind in (ActionKind.CREATE_TEAM, ActionKind.EDIT_TEAM):
            return RosterAction(ActionKind.TEAM_FORM)
        if self.kind is ActionKind.ADD_PLAYER:
            return RosterAction(ActionKind.ADD_PLAYER_FORM)
        if self.kind is ActionKind.EDIT_PLAYER:
            return RosterAction(ActionKind.EDIT_PLAYER_FORM, self.index)
        raise ValueError(f"{self.kind.value} does not open a form")


CREATE_TEAM = RosterAction(ActionKind.CREATE_TEAM)
EDIT_TEAM = RosterAction(ActionKind.EDIT_TEAM)
ADD_PLAYER = RosterAction(ActionKind.ADD_PLAYER)
SHOW_MY_ID = RosterAction(ActionKind.SHOW_MY_ID)


def edit_player(index: int) -> RosterAction:
    return RosterAction(ActionKind.EDIT_PLAYER, index)


def remove_player(index: int) -> RosterAction:
    return RosterAction(ActionKind.REMOVE_PLAYER, index)


__all__ = [
    "ADD_PLAYER",
    "CREATE_TEAM",
    "EDIT_TEAM",
    "SHOW_MY_ID",
    "ActionKind",
    "RosterAction",
    "edit_player",
    "remove_player",
]
