"""Discord runtime wiring the roster router into a client."""

from __future__ import annotations

import logging

import discord
from discord import app_commands

from bots.config import RosterBotConfig
from roster_bot.bootstrap import bootstrap_guild, my_id_entry, registration_entry
from roster_bot.router import InteractionRouter, RosterContext

log = logging.getLogger("roster-bot")


class RosterRuntime:
    def __init__(self, config: RosterBotConfig) -> None:
        intents = discord.Intents.default()
        intents.guilds = True

        self.config = config
        self.bot = discord.Client(intents=intents)
        self.tree = app_commands.CommandTree(self.bot)
        self.context = RosterContext(mode=config.render_mode)
        self.router = InteractionRouter(self.context)
        self._bootstrapped = False

    @property
    def guild_object(self) -> discord.Object | None:
        if self.config.guild_id is None:
            return None
        return discord.Object(id=self.config.guild_id)

    def configure(self) -> None:
        router = self.router

        command_kwargs: dict[str, object] = {}
        if self.guild_object is not None:
            command_kwargs["guild"] = self.guild_object

        @self.tree.command(
            name="myid",
            description="Display your Discord user ID",
            **command_kwargs,
        )
        async def my_id_command(  # pragma: no cover - Discord wiring
            interaction: discord.Interaction,
        ) -> None:
            await router.show_my_id(interaction)

        self.bot.event(self.on_ready)
        self.bot.event(self.on_interaction)
        self.bot.event(self.on_message)

    async def on_ready(self) -> None:
        guild = self.guild_object
        if guild is not None:
            await self.tree.sync(guild=guild)
            log.info("Commands synced to guild %s", guild.id)
        else:
            await self.tree.sync()
            log.info("Commands synced globally")

        if self.config.bootstrap_enabled and not self._bootstrapped:
            self._bootstrapped = True
            await self.bootstrap()
        log.info("Roster bot ready as %s (%s)", self.bot.user, self.bot.user.id)

    async def bootstrap(self) -> None:
        entries = [
            registration_entry(self.config.register_channel),
            my_id_entry(self.config.my_id_channel),
        ]
        for guild in self.bot.guilds:
            if self.config.guild_id is not None and guild.id != self.config.guild_id:
                continue
            try:
                await bootstrap_guild(guild, self.bot.user.id, entries)
            except Exception as exc:  # pylint: disable=broad-except
                log.exception("Bootstrap failed for guild %s: %s", guild.id, exc)

    async def on_interaction(self, interaction: discord.Interaction) -> None:
        if interaction.type is not discord.InteractionType.component:
            return
        custom_id = (interaction.data or {}).get("custom_id")
        if not custom_id:
            return
        try:
            await self.router.button_pressed(interaction, str(custom_id))
        except Exception as exc:  # pylint: disable=broad-except
            log.exception("Failed to handle button %s: %s", custom_id, exc)

    async def on_message(self, message: discord.Message) -> None:
        if message.author.bot:
            return
        if getattr(message.channel, "name", None) != self.config.my_id_channel:
            return
        try:
            await message.reply(f"Your Discord ID is: {message.author.id}")
        except discord.HTTPException as exc:
            log.warning("Failed to reply with id to %s: %s", message.author.id, exc)

    async def run(self) -> None:
        self.configure()
        log.info(
            "Starting roster bot (visibility=%s, pagination=%s)",
            self.config.render_mode.visibility.value,
            self.config.render_mode.pagination.value,
        )
        async with self.bot:
            await self.bot.start(self.config.discord_token)

    @classmethod
    def create(cls) -> "RosterRuntime":
        config = RosterBotConfig.load()
        return cls(config)


async def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    runtime = RosterRuntime.create()
    await runtime.run()


__all__ = ["RosterRuntime", "main"]
