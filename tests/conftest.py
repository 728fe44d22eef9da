from __future__ import annotations

import itertools
from types import SimpleNamespace
from unittest import mock

import discord
import pytest

_message_ids = itertools.count(1000)


def not_found() -> discord.NotFound:
    response = mock.Mock(status=404, reason="Not Found")
    return discord.NotFound(response, "Unknown Message")


def http_error() -> discord.HTTPException:
    return discord.HTTPException(mock.Mock(status=500, reason="Error"), "Boom")


class FakeMessage:
    def __init__(self, channel, *, content=None, view=None, author_id: int = 1) -> None:
        self.id = next(_message_ids)
        self.channel = channel
        self.content = content
        self.view = view
        self.author = SimpleNamespace(id=author_id, bot=True)
        self.components: list[object] = []
        self.edits: list[dict[str, object]] = []
        self.deleted = False

    async def edit(self, **kwargs):
        if self.deleted:
            raise not_found()
        self.edits.append(kwargs)
        self.content = kwargs.get("content", self.content)
        self.view = kwargs.get("view", self.view)
        return self

    async def delete(self) -> None:
        self.channel.messages.pop(self.id, None)
        self.deleted = True


class FakeChannel:
    def __init__(self, name: str = "register", *, bot_user_id: int = 1) -> None:
        self.id = 555
        self.name = name
        self.bot_user_id = bot_user_id
        self.messages: dict[int, FakeMessage] = {}
        self.sent: list[FakeMessage] = []
        self.fail_send = False
        self.fail_history = False

    async def send(self, content=None, *, view=None):
        if self.fail_send:
            raise http_error()
        message = FakeMessage(
            self, content=content, view=view, author_id=self.bot_user_id
        )
        self.messages[message.id] = message
        self.sent.append(message)
        return message

    async def fetch_message(self, message_id: int) -> FakeMessage:
        message = self.messages.get(message_id)
        if message is None:
            raise not_found()
        return message

    def history(self, *, limit: int):
        async def iterate():
            if self.fail_history:
                raise discord.Forbidden(
                    mock.Mock(status=403, reason="Forbidden"), "Missing Access"
                )
            for message in list(reversed(self.sent))[:limit]:
                yield message

        return iterate()

    def live_messages(self) -> list[FakeMessage]:
        return list(self.messages.values())


class FakeResponse:
    def __init__(self) -> None:
        self.messages: list[dict[str, object]] = []
        self.modal = None
        self.deferred: dict[str, object] | None = None
        self._done = False

    async def send_message(self, message=None, *, ephemeral: bool = False, **kwargs):
        self.messages.append({"content": message, "ephemeral": ephemeral, **kwargs})
        self._done = True

    async def send_modal(self, modal) -> None:
        self.modal = modal
        self._done = True

    async def defer(self, **kwargs) -> None:
        self.deferred = kwargs
        self._done = True

    def is_done(self) -> bool:
        return self._done


class FakeFollowup:
    def __init__(self, channel: FakeChannel) -> None:
        self.channel = channel
        self.sent: list[dict[str, object]] = []
        self.edited: list[int] = []
        self.deleted: list[int] = []
        self.owned: set[int] = set()

    async def send(self, content=None, *, view=None, ephemeral=False, wait=False):
        message = FakeMessage(self.channel, content=content, view=view)
        self.owned.add(message.id)
        self.sent.append({"content": content, "ephemeral": ephemeral, "id": message.id})
        return message

    async def edit_message(self, message_id: int, **kwargs) -> None:
        if message_id not in self.owned:
            raise not_found()
        self.edited.append(message_id)

    async def delete_message(self, message_id: int) -> None:
        if message_id not in self.owned:
            raise not_found()
        self.owned.discard(message_id)
        self.deleted.append(message_id)


class FakeInteraction:
    def __init__(self, user_id: int, channel: FakeChannel, *, custom_id=None) -> None:
        self.user = SimpleNamespace(id=user_id, bot=False)
        self.channel = channel
        self.guild = None
        self.type = discord.InteractionType.component
        self.data = {"custom_id": custom_id} if custom_id else {}
        self.response = FakeResponse()
        self.followup = FakeFollowup(channel)


@pytest.fixture
def channel() -> FakeChannel:
    return FakeChannel()


@pytest.fixture
def make_interaction(channel):
    def factory(user_id: int = 7, *, custom_id=None, on=None) -> FakeInteraction:
        return FakeInteraction(user_id, on or channel, custom_id=custom_id)

    return factory


@pytest.fixture
def errors():
    return SimpleNamespace(not_found=not_found, http_error=http_error)


@pytest.fixture
def make_channel():
    def factory(name: str = "register", *, bot_user_id: int = 1) -> FakeChannel:
        return FakeChannel(name, bot_user_id=bot_user_id)

    return factory
