from __future__ import annotations

import logging
from typing import Protocol

import discord
from discord.abc import Messageable

from .models import Team
from .registry import MessageRegistry, Slot
from .rendering import RenderedMessage, RenderMode, render_roster
from .views import build_view

log = logging.getLogger("roster-bot")

# On-screen order when every slot is sent fresh.
SLOT_ORDER: tuple[Slot, ...] = (Slot.LIST, Slot.OVERFLOW, Slot.STATUS)


class RenderTarget(Protocol):
    async def send(self, message: RenderedMessage) -> int: ...

    async def edit(self, message_id: int, message: RenderedMessage) -> None: ...

    async def delete(self, message_id: int) -> None: ...


class ChannelTarget:
    """Publicly visible messages in the channel the interaction came from."""

    def __init__(self, channel: Messageable) -> None:
        self._channel = channel

    async def send(self, message: RenderedMessage) -> int:
        sent = await self._channel.send(
            content=message.content, view=build_view(message.buttons)
        )
        return sent.id

    async def edit(self, message_id: int, message: RenderedMessage) -> None:
        existing = await self._channel.fetch_message(message_id)
        await existing.edit(content=message.content, view=build_view(message.buttons))

    async def delete(self, message_id: int) -> None:
        existing = await self._channel.fetch_message(message_id)
        await existing.delete()


class FollowupTarget:
    """Ephemeral messages visible only to the invoking user.

    Interaction webhooks can only edit messages created under the same
    interaction token, so later interactions fall back to fresh messages.
    """

    def __init__(self, interaction: discord.Interaction) -> None:
        self._interaction = interaction

    async def send(self, message: RenderedMessage) -> int:
        sent = await self._interaction.followup.send(
            content=message.content,
            view=build_view(message.buttons),
            ephemeral=True,
            wait=True,
        )
        return sent.id

    async def edit(self, message_id: int, message: RenderedMessage) -> None:
        await self._interaction.followup.edit_message(
            message_id, content=message.content, view=build_view(message.buttons)
        )

    async def delete(self, message_id: int) -> None:
        await self._interaction.followup.delete_message(message_id)


def target_for(interaction: discord.Interaction, mode: RenderMode) -> RenderTarget:
    if mode.ephemeral or interaction.channel is None:
        return FollowupTarget(interaction)
    return ChannelTarget(interaction.channel)  # type: ignore[arg-type]


class RenderSync:
    """Keeps each user's bound messages in line with their team.

    Every slot is reconciled with edit-or-recreate: a bound message is edited
    in place, and any platform failure drops the binding and sends a new
    message whose id becomes the binding.
    """

    def __init__(self, registry: MessageRegistry, mode: RenderMode) -> None:
        self.registry = registry
        self.mode = mode

    async def render(
        self,
        user_id: int,
        team: Team,
        target: RenderTarget,
        *,
        status: str | None = None,
    ) -> None:
        rendered = render_roster(team, self.mode, status)
        for slot in SLOT_ORDER:
            await self.reconcile(user_id, slot, target, rendered.get(slot))

    async def reconcile(
        self,
        user_id: int,
        slot: Slot,
        target: RenderTarget,
        message: RenderedMessage | None,
    ) -> int | None:
        bound_id = self.registry.get(user_id, slot)

        if message is None:
            if bound_id is not None:
                self.registry.discard(user_id, slot)
                try:
                    await target.delete(bound_id)
                except discord.HTTPException as exc:
                    log.info(
                        "Could not delete %s message %s for %s: %s",
                        slot.value,
                        bound_id,
                        user_id,
                        exc,
                    )
            return None

        if bound_id is not None:
            try:
                await target.edit(bound_id, message)
            except discord.HTTPException as exc:
                log.info(
                    "Stale %s message %s for %s (%s); sending a new one",
                    slot.value,
                    bound_id,
                    user_id,
                    exc,
                )
                self.registry.discard(user_id, slot)
            else:
                return bound_id

        try:
            new_id = await target.send(message)
        except discord.HTTPException as exc:
            log.warning(
                "Failed to send %s message for %s: %s", slot.value, user_id, exc
            )
            return None
        self.registry.bind(user_id, slot, new_id)
        return new_id


__all__ = [
    "ChannelTarget",
    "FollowupTarget",
    "RenderSync",
    "RenderTarget",
    "SLOT_ORDER",
    "target_for",
]
