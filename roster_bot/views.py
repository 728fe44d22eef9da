"""discord.py components for roster buttons and forms."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping, Sequence

import discord

from .actions import RosterAction
from .rendering import ButtonSpec, ButtonStyle
from .validation import PLAYER_FORM_FIELDS, TEAM_FORM_FIELDS, FormField

FormSubmitHandler = Callable[
    [discord.Interaction, RosterAction, dict[str, str]], Awaitable[None]
]

_BUTTON_STYLES = {
    ButtonStyle.PRIMARY: discord.ButtonStyle.primary,
    ButtonStyle.SECONDARY: discord.ButtonStyle.secondary,
    ButtonStyle.DANGER: discord.ButtonStyle.danger,
}


def build_view(buttons: Sequence[ButtonSpec]) -> discord.ui.View:
    """Lay out rendered buttons as a view.

    Presses are routed through ``on_interaction`` by custom id, so the view is
    stopped up front and never lands in the client's view store.
    """
    view = discord.ui.View(timeout=None)
    for spec in buttons:
        view.add_item(
            discord.ui.Button(
                label=spec.label,
                style=_BUTTON_STYLES[spec.style],
                custom_id=spec.custom_id,
                disabled=spec.disabled,
                row=spec.row,
            )
        )
    view.stop()
    return view


def entry_view(action: RosterAction, label: str) -> discord.ui.View:
    return build_view(
        [
            ButtonSpec(
                custom_id=action.encode(),
                label=label,
                style=ButtonStyle.PRIMARY,
                row=0,
            )
        ]
    )


class RosterFormModal(discord.ui.Modal):
    def __init__(
        self,
        *,
        title: str,
        action: RosterAction,
        fields: Sequence[FormField],
        on_submit_handler: FormSubmitHandler,
        prefill: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(title=title, custom_id=action.encode())
        self.action = action
        self._handler = on_submit_handler
        self._inputs: list[discord.ui.TextInput] = []
        prefill = prefill or {}
        for form_field in fields:
            text_input = discord.ui.TextInput(
                label=form_field.label,
                custom_id=form_field.field_id,
                style=discord.TextStyle.short,
                required=form_field.required,
                default=prefill.get(form_field.field_id) or None,
            )
            self._inputs.append(text_input)
            self.add_item(text_input)

    def values(self) -> dict[str, str]:
        return {
            str(text_input.custom_id): text_input.value for text_input in self._inputs
        }

    async def on_submit(self, interaction: discord.Interaction) -> None:
        await self._handler(interaction, self.action, self.values())


class TeamFormModal(RosterFormModal):
    def __init__(
        self,
        *,
        action: RosterAction,
        on_submit_handler: FormSubmitHandler,
        prefill: Mapping[str, str],
        is_edit: bool,
    ) -> None:
        super().__init__(
            title="Edit Team" if is_edit else "Team Registration",
            action=action,
            fields=TEAM_FORM_FIELDS,
            on_submit_handler=on_submit_handler,
            prefill=prefill,
        )


class PlayerFormModal(RosterFormModal):
    def __init__(
        self,
        *,
        action: RosterAction,
        on_submit_handler: FormSubmitHandler,
        position: int,
        prefill: Mapping[str, str] | None = None,
    ) -> None:
        verb = "Edit" if prefill else "Add"
        super().__init__(
            title=f"{verb} Player {position}",
            action=action,
            fields=PLAYER_FORM_FIELDS,
            on_submit_handler=on_submit_handler,
            prefill=prefill,
        )


__all__ = [
    "FormSubmitHandler",
    "PlayerFormModal",
    "RosterFormModal",
    "TeamFormModal",
    "build_view",
    "entry_view",
]
