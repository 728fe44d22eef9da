from __future__ import annotations

from enum import Enum


class Slot(str, Enum):
    LIST = "list"
    STATUS = "status"
    OVERFLOW = "overflow"


class MessageRegistry:
    """Tracks which message currently renders each slot of a user's roster.

    Bindings only hold message ids; the messages themselves may disappear at
    any time and are replaced by the render sync.
    """

    def __init__(self) -> None:
        self._bindings: dict[int, dict[Slot, int]] = {}

    def get(self, user_id: int, slot: Slot) -> int | None:
        return self._bindings.get(user_id, {}).get(slot)

    def bind(self, user_id: int, slot: Slot, message_id: int) -> None:
        self._bindings.setdefault(user_id, {})[slot] = message_id

    def discard(self, user_id: int, slot: Slot) -> int | None:
        slots = self._bindings.get(user_id)
        if not slots:
            return None
        message_id = slots.pop(slot, None)
        if not slots:
            del self._bindings[user_id]
        return message_id

    def bindings_for(self, user_id: int) -> dict[Slot, int]:
        return dict(self._bindings.get(user_id, {}))


__all__ = ["MessageRegistry", "Slot"]
