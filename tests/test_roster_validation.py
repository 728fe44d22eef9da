import pytest

from roster_bot import InvalidValueError, parse_player_entry, parse_team_details
from roster_bot.validation import require_text


def test_parse_team_details_strips_values():
    details = parse_team_details(
        {
            "team_name": "  Foxhound ",
            "team_tag": "FOX",
            "contact_email": "a@b.com ",
            "captain_discord_id": "7",
        }
    )

    assert details.team_name == "Foxhound"
    assert details.contact_email == "a@b.com"


def test_parse_team_details_lists_every_missing_field():
    with pytest.raises(InvalidValueError) as excinfo:
        parse_team_details({"team_name": "Foxhound", "team_tag": "   "})

    message = str(excinfo.value)
    assert "Team Tag" in message
    assert "Contact Email" in message
    assert "Your Discord ID" in message
    assert "Team Name" not in message


def test_parse_player_entry():
    player = parse_player_entry(
        {"pubg_name": "Shroud", "pubg_uid": "5123", "discord_id": "42"}
    )

    assert (player.pubg_name, player.pubg_uid, player.discord_id) == (
        "Shroud",
        "5123",
        "42",
    )


def test_parse_player_entry_requires_presence_only():
    player = parse_player_entry(
        {"pubg_name": "x", "pubg_uid": "not-a-number", "discord_id": "?"}
    )
    assert player.pubg_uid == "not-a-number"

    with pytest.raises(InvalidValueError, match="PUBG UID"):
        parse_player_entry({"pubg_name": "x", "discord_id": "1"})


def test_require_text():
    assert require_text(" ok ", "Field") == "ok"
    with pytest.raises(InvalidValueError, match="Field is required"):
        require_text(None, "Field")
