from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

import discord

from .actions import ActionKind, RosterAction
from .models import Team
from .registry import MessageRegistry
from .rendering import RenderMode
from .storage import RosterError, RosterStorage
from .sync import RenderSync, target_for
from .validation import InvalidValueError, parse_player_entry, parse_team_details
from .views import PlayerFormModal, TeamFormModal

log = logging.getLogger("roster-bot")

ButtonHandler = Callable[[discord.Interaction, RosterAction], Awaitable[None]]
FormHandler = Callable[
    [discord.Interaction, RosterAction, dict[str, str]], Awaitable[None]
]


@dataclass(slots=True)
class RosterContext:
    """Process-lifetime roster state shared by the router and runtime."""

    mode: RenderMode = field(default_factory=RenderMode)
    storage: RosterStorage = field(default_factory=RosterStorage)
    registry: MessageRegistry = field(default_factory=MessageRegistry)


async def send_ephemeral(interaction: discord.Interaction, message: str) -> None:
    if interaction.response.is_done():
        await interaction.followup.send(message, ephemeral=True)
    else:
        await interaction.response.send_message(message, ephemeral=True)


async def acknowledge(interaction: discord.Interaction, mode: RenderMode) -> None:
    if interaction.response.is_done():
        return
    if mode.ephemeral:
        await interaction.response.defer(ephemeral=True, thinking=True)
    else:
        await interaction.response.defer()


class InteractionRouter:
    """Runs the roster transition table for button presses and form submissions.

    Mutating commands hold ``_lock`` from precondition check through render,
    so one command finishes before the next one starts on this router. Indices
    are always checked against the current store, never the rendered state.
    """

    def __init__(self, context: RosterContext) -> None:
        self.context = context
        self.sync = RenderSync(context.registry, context.mode)
        self._lock = asyncio.Lock()
        self._buttons: dict[ActionKind, ButtonHandler] = {
            ActionKind.CREATE_TEAM: self.open_team_form,
            ActionKind.EDIT_TEAM: self.open_team_form,
            ActionKind.ADD_PLAYER: self.open_add_player_form,
            ActionKind.EDIT_PLAYER: self.open_edit_player_form,
            ActionKind.REMOVE_PLAYER: self.remove_player,
            ActionKind.SHOW_MY_ID: self.show_my_id,
        }
        self._forms: dict[ActionKind, FormHandler] = {
            ActionKind.TEAM_FORM: self.submit_team,
            ActionKind.ADD_PLAYER_FORM: self.submit_add_player,
            ActionKind.EDIT_PLAYER_FORM: self.submit_edit_player,
        }

    @property
    def storage(self) -> RosterStorage:
        return self.context.storage

    # ----- Dispatch -----
    async def button_pressed(
        self, interaction: discord.Interaction, custom_id: str
    ) -> bool:
        """Handle a component press; returns False for ids this bot does not own."""
        action = RosterAction.decode(custom_id)
        handler = self._buttons.get(action.kind) if action is not None else None
        if handler is None:
            return False
        log.debug("Button %s pressed by %s", custom_id, interaction.user.id)
        await handler(interaction, action)  # type: ignore[arg-type]
        return True

    async def form_submitted(
        self,
        interaction: discord.Interaction,
        action: RosterAction,
        values: dict[str, str],
    ) -> None:
        handler = self._forms.get(action.kind)
        if handler is None:
            log.warning("No form handler for %s", action.encode())
            return
        await handler(interaction, action, values)

    # ----- Buttons -----
    async def open_team_form(
        self, interaction: discord.Interaction, action: RosterAction
    ) -> None:
        existing = self.storage.get_team(interaction.user.id)
        if existing is not None:
            details = existing.details()
            prefill = {
                "team_name": details.team_name,
                "team_tag": details.team_tag,
                "contact_email": details.contact_email,
                "captain_discord_id": details.captain_discord_id
                or str(interaction.user.id),
            }
        else:
            prefill = {"captain_discord_id": str(interaction.user.id)}
        modal = TeamFormModal(
            action=action.as_form(),
            on_submit_handler=self.form_submitted,
            prefill=prefill,
            is_edit=action.kind is ActionKind.EDIT_TEAM,
        )
        await interaction.response.send_modal(modal)

    async def open_add_player_form(
        self, interaction: discord.Interaction, action: RosterAction
    ) -> None:
        try:
            team = self.storage.require_capacity(interaction.user.id)
        except RosterError as exc:
            await send_ephemeral(interaction, str(exc))
            return
        modal = PlayerFormModal(
            action=action.as_form(),
            on_submit_handler=self.form_submitted,
            position=team.player_count + 1,
        )
        await interaction.response.send_modal(modal)

    async def open_edit_player_form(
        self, interaction: discord.Interaction, action: RosterAction
    ) -> None:
        index = action.index or 0
        try:
            player = self.storage.get_player(interaction.user.id, index)
        except RosterError as exc:
            await send_ephemeral(interaction, str(exc))
            return
        modal = PlayerFormModal(
            action=action.as_form(),
            on_submit_handler=self.form_submitted,
            position=index + 1,
            prefill={
                "pubg_name": player.pubg_name,
                "pubg_uid": player.pubg_uid,
                "discord_id": player.discord_id,
            },
        )
        await interaction.response.send_modal(modal)

    async def remove_player(
        self, interaction: discord.Interaction, action: RosterAction
    ) -> None:
        user_id = interaction.user.id
        index = action.index or 0
        async with self._lock:
            try:
                team = self.storage.remove_player(user_id, index)
            except RosterError as exc:
                await send_ephemeral(interaction, str(exc))
                return
            log.info("Removed player %s from team of %s", index + 1, user_id)
            await self._render(interaction, team, "Player removed.")

    async def show_my_id(
        self, interaction: discord.Interaction, _action: RosterAction | None = None
    ) -> None:
        await send_ephemeral(interaction, f"Your Discord ID is: {interaction.user.id}")

    # ----- Forms -----
    async def submit_team(
        self,
        interaction: discord.Interaction,
        _action: RosterAction,
        values: dict[str, str],
    ) -> None:
        user_id = interaction.user.id
        try:
            details = parse_team_details(values)
        except InvalidValueError as exc:
            await send_ephemeral(interaction, str(exc))
            return
        async with self._lock:
            created = self.storage.get_team(user_id) is None
            team = self.storage.upsert_team(user_id, details)
            log.info(
                "Team %s (%s) %s for %s",
                team.team_name,
                team.team_tag,
                "created" if created else "updated",
                user_id,
            )
            await self._render(
                interaction, team, "Team created!" if created else "Team updated!"
            )

    async def submit_add_player(
        self,
        interaction: discord.Interaction,
        _action: RosterAction,
        values: dict[str, str],
    ) -> None:
        user_id = interaction.user.id
        try:
            player = parse_player_entry(values)
        except InvalidValueError as exc:
            await send_ephemeral(interaction, str(exc))
            return
        async with self._lock:
            try:
                team = self.storage.append_player(user_id, player)
            except RosterError as exc:
                await send_ephemeral(interaction, str(exc))
                return
            log.info("Added player %s to team of %s", team.player_count, user_id)
            await self._render(interaction, team, "Player added!")

    async def submit_edit_player(
        self,
        interaction: discord.Interaction,
        action: RosterAction,
        values: dict[str, str],
    ) -> None:
        user_id = interaction.user.id
        index = action.index or 0
        try:
            player = parse_player_entry(values)
        except InvalidValueError as exc:
            await send_ephemeral(interaction, str(exc))
            return
        async with self._lock:
            try:
                team = self.storage.update_player(user_id, index, player)
            except RosterError as exc:
                await send_ephemeral(interaction, str(exc))
                return
            log.info("Updated player %s in team of %s", index + 1, user_id)
            await self._render(interaction, team, "Player updated!")

    async def _render(
        self, interaction: discord.Interaction, team: Team, status: str
    ) -> None:
        mode = self.context.mode
        await acknowledge(interaction, mode)
        await self.sync.render(
            interaction.user.id,
            team,
            target_for(interaction, mode),
            status=status,
        )


__all__ = [
    "InteractionRouter",
    "RosterContext",
    "acknowledge",
    "send_ephemeral",
]
