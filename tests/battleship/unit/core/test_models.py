import pytest

from battleship.core.models import Coord, Difficulty, Rule, ShipType, Status


def test_ship_type_size_mapping() -> None:
    assert ShipType.X.size == 5
    assert ShipType.V.size == 5
    assert ShipType.H.size == 7
    assert ShipType.I.size == 3


def test_status_chars_round_trip_and_reject_unknown() -> None:
    for status in Status:
        assert Status.from_char(status.char) is status
    assert Status.LIVE.emoji == "🚢"
    assert Status.SPACE.emoji == ""
    with pytest.raises(ValueError):
        Status.from_char("?")


def test_status_resolved_only_for_hit_and_kill() -> None:
    assert {status for status in Status if status.is_resolved} == {Status.HIT, Status.KILL}


def test_rule_and_difficulty_parse_labels_case_insensitively() -> None:
    assert Rule.parse("supercharge") is Rule.SUPER_CHARGE
    assert Rule.parse("DESPERATION") is Rule.DESPERATION
    assert Rule.parse(" Default ") is Rule.DEFAULT
    assert Difficulty.parse("hard") is Difficulty.HARD
    assert Rule.variants() == ("Default", "SuperCharge", "Desperation")
    assert Difficulty.variants() == ("Easy", "Hard")


def test_rule_parse_rejects_unknown_name() -> None:
    with pytest.raises(ValueError, match="Default, SuperCharge, Desperation"):
        Rule.parse("Blitz")


def test_coords_sort_row_major() -> None:
    assert sorted([Coord(1, 0), Coord(0, 5), Coord(0, 1)]) == [Coord(0, 1), Coord(0, 5), Coord(1, 0)]
