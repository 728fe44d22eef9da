"""Runtime for the team roster bot.

`bots.config` reads the environment and `bots.runtime` wires the
`roster_bot` router into a discord.py client.
"""

__all__ = ["config", "runtime"]
