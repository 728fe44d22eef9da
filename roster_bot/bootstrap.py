"""Idempotent posting of the per-guild entry-point messages."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import discord

from . import actions
from .actions import RosterAction
from .views import entry_view

log = logging.getLogger("roster-bot")

HISTORY_SCAN_LIMIT = 20


@dataclass(slots=True, frozen=True)
class EntryPoint:
    channel_name: str
    action: RosterAction
    content: str
    label: str


def registration_entry(channel_name: str) -> EntryPoint:
    return EntryPoint(
        channel_name=channel_name,
        action=actions.CREATE_TEAM,
        content="Click the button below to register a new team:",
        label="Create Team",
    )


def my_id_entry(channel_name: str) -> EntryPoint:
    return EntryPoint(
        channel_name=channel_name,
        action=actions.SHOW_MY_ID,
        content="Click the button below to see your Discord ID:",
        label="My Discord ID",
    )


def message_has_button(message: discord.Message, custom_id: str) -> bool:
    for component in message.components:
        for child in getattr(component, "children", [component]):
            if getattr(child, "custom_id", None) == custom_id:
                return True
    return False


async def find_entry_message(
    channel: discord.TextChannel,
    bot_user_id: int,
    custom_id: str,
    *,
    limit: int = HISTORY_SCAN_LIMIT,
) -> discord.Message | None:
    """Scan recent history for a bot message carrying ``custom_id``.

    Only the last ``limit`` messages are checked; an older entry message is
    not found and a new one gets posted.
    """
    async for message in channel.history(limit=limit):
        if message.author.id == bot_user_id and message_has_button(message, custom_id):
            return message
    return None


async def ensure_entry_message(
    guild: discord.Guild, bot_user_id: int, entry: EntryPoint
) -> discord.Message | None:
    channel = discord.utils.get(guild.text_channels, name=entry.channel_name)
    if channel is None:
        log.warning(
            "Channel #%s not found in guild %s; skipping entry message",
            entry.channel_name,
            guild.id,
        )
        return None

    custom_id = entry.action.encode()
    try:
        existing = await find_entry_message(channel, bot_user_id, custom_id)
    except discord.HTTPException as exc:
        log.warning("Cannot read history of #%s: %s", entry.channel_name, exc)
        return None
    if existing is not None:
        log.info("Entry message for %s already present in #%s", custom_id, channel.name)
        return existing

    try:
        message = await channel.send(
            content=entry.content, view=entry_view(entry.action, entry.label)
        )
    except discord.HTTPException as exc:
        log.warning("Failed to post entry message in #%s: %s", channel.name, exc)
        return None
    log.info("Posted entry message for %s in #%s", custom_id, channel.name)
    return message


async def bootstrap_guild(
    guild: discord.Guild, bot_user_id: int, entries: list[EntryPoint]
) -> None:
    for entry in entries:
        await ensure_entry_message(guild, bot_user_id, entry)


__all__ = [
    "EntryPoint",
    "HISTORY_SCAN_LIMIT",
    "bootstrap_guild",
    "ensure_entry_message",
    "find_entry_message",
    "message_has_button",
    "my_id_entry",
    "registration_entry",
]
