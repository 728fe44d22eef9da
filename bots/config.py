"""Configuration helpers for the roster bot runtime."""

from __future__ import annotations

import os
from dataclasses import dataclass

from roster_bot.rendering import RenderMode

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

REQUIRED_VARS = ("DISCORD_TOKEN",)


def env_bool(name: str, *, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return default


def env_int(name: str, *, default: int | None = None) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_str(name: str, *, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


@dataclass(frozen=True)
class RosterBotConfig:
    discord_token: str
    guild_id: int | None
    register_channel: str
    my_id_channel: str
    render_mode: RenderMode
    bootstrap_enabled: bool

    @classmethod
    def load(cls) -> "RosterBotConfig":
        missing = [name for name in REQUIRED_VARS if not os.getenv(name)]
        if missing:
            raise RuntimeError("Missing env vars: " + ", ".join(missing))

        return cls(
            discord_token=os.environ["DISCORD_TOKEN"],
            guild_id=env_int("ROSTER_GUILD_ID"),
            register_channel=env_str("ROSTER_REGISTER_CHANNEL", default="register"),
            my_id_channel=env_str("ROSTER_ID_CHANNEL", default="my-discord-id"),
            render_mode=RenderMode.from_values(
                os.getenv("ROSTER_VISIBILITY"), os.getenv("ROSTER_PAGINATION")
            ),
            bootstrap_enabled=env_bool("ROSTER_BOOTSTRAP", default=True),
        )
