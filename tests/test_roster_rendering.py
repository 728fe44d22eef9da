from collections import Counter

from roster_bot import (
    MAX_PLAYERS,
    Pagination,
    PlayerEntry,
    RenderMode,
    Slot,
    Team,
    TeamDetails,
    Visibility,
    render_roster,
)
from roster_bot.rendering import (
    MAX_ROWS_PER_MESSAGE,
    ButtonStyle,
    render_list,
    render_overflow,
    render_status,
)

SINGLE = RenderMode()
OVERFLOW = RenderMode(Visibility.EPHEMERAL, Pagination.OVERFLOW)


def make_team(player_count: int = 0) -> Team:
    team = Team.create(
        7,
        TeamDetails(
            team_name="Foxhound",
            team_tag="FOX",
            contact_email="a@b.com",
            captain_discord_id="7",
        ),
    )
    for idx in range(player_count):
        team.players.append(PlayerEntry(f"Player{idx}", f"UID{idx}", str(idx)))
    return team


def add_button(rendered) -> object:
    return next(b for b in rendered.buttons if b.custom_id == "add_players")


def test_empty_roster_content():
    message = render_list(make_team(), SINGLE)

    assert message.content == (
        "**Foxhound (FOX)**\n"
        "**Your Team Players:**\n"
        "No players added yet.\n"
        "\n"
        "Total players: 0/6"
    )
    assert message.buttons == ()


def test_header_omitted_without_tag():
    team = make_team()
    team.team_tag = ""

    assert render_list(team, SINGLE).content.startswith("**Your Team Players:**")


def test_player_lines_and_affordance_pairs():
    message = render_list(make_team(2), SINGLE)

    assert "**Player 1:** PUBG Name: Player0, PUBG UID: UID0, Discord ID: 0" in (
        message.content
    )
    assert "**Player 2:** PUBG Name: Player1" in message.content
    assert message.content.endswith("Total players: 2/6")
    assert [b.custom_id for b in message.buttons] == [
        "edit_player:0",
        "remove_player:0",
        "edit_player:1",
        "remove_player:1",
    ]
    assert message.buttons[1].style is ButtonStyle.DANGER
    assert message.buttons[0].label == "Edit Player 1"


def test_single_mode_fits_six_players_in_row_limit():
    message = render_list(make_team(MAX_PLAYERS), SINGLE)
    rows = Counter(button.row for button in message.buttons)

    assert len(message.buttons) == MAX_PLAYERS * 2
    assert max(rows) < MAX_ROWS_PER_MESSAGE
    assert all(count <= 5 for count in rows.values())
    assert render_overflow(make_team(MAX_PLAYERS), SINGLE) is None


def test_overflow_mode_moves_sixth_player():
    team = make_team(MAX_PLAYERS)

    listed = render_list(team, OVERFLOW)
    overflow = render_overflow(team, OVERFLOW)

    assert "**Player 5:**" in listed.content
    assert "**Player 6:**" not in listed.content
    assert listed.content.endswith("Total players: 6/6")
    assert {b.row for b in listed.buttons} == set(range(5))
    assert overflow is not None
    assert overflow.content.startswith("**Player 6:** PUBG Name: Player5")
    assert [b.custom_id for b in overflow.buttons] == [
        "edit_player:5",
        "remove_player:5",
    ]


def test_overflow_slot_empty_until_sixth_player():
    assert render_overflow(make_team(5), OVERFLOW) is None


def test_add_player_disabled_exactly_when_full():
    for count in range(MAX_PLAYERS + 1):
        status = render_status(make_team(count), "Player added!")
        assert add_button(status).disabled is (count == MAX_PLAYERS)


def test_status_message_content():
    status = render_status(make_team(), "Team created!")

    assert status.content.splitlines()[0] == "Team created!"
    assert [b.label for b in status.buttons] == ["Edit Team", "Add Players"]
    assert render_status(make_team(), None).content.startswith("Use the buttons")


def test_render_roster_covers_every_slot():
    rendered = render_roster(make_team(6), OVERFLOW, "Player added!")

    assert set(rendered.messages) == {Slot.LIST, Slot.OVERFLOW, Slot.STATUS}
    assert rendered.get(Slot.OVERFLOW) is not None
    assert render_roster(make_team(6), SINGLE).get(Slot.OVERFLOW) is None


def test_render_is_deterministic():
    team = make_team(3)
    assert render_roster(team, SINGLE, "x") == render_roster(team, SINGLE, "x")


def test_render_mode_from_values(caplog):
    assert RenderMode.from_values(None, None) == RenderMode()
    assert RenderMode.from_values(" Ephemeral ", "OVERFLOW") == OVERFLOW

    with caplog.at_level("WARNING"):
        mode = RenderMode.from_values("loud", "pages")

    assert mode == RenderMode()
    assert "Unknown roster visibility" in caplog.text
    assert "Unknown roster pagination" in caplog.text
