import random

import pytest

from logic.lineup_generator import LineupGenerator
from models.game import Game
from models.lineup import InningLineup, Lineup, PlayerCombination, PositionAssignment
from models.player import Player
from models.position import (
    FIELD_POSITIONS,
    LINEUP_ORDER,
    POSITIONS,
    normalize_position,
    position_category,
)


def test_position_categories_partition_the_field():
    categories = {pos: position_category(pos) for pos in POSITIONS}
    assert categories["P"] == "pitching"
    assert categories["C"] == "catching"
    assert [p for p, c in categories.items() if c == "infield"] == ["1B", "2B", "SS", "3B"]
    assert [p for p, c in categories.items() if c == "outfield"] == ["LF", "CF", "RF"]
    assert set(LINEUP_ORDER) == set(POSITIONS)
    assert FIELD_POSITIONS == ("1B", "2B", "SS", "3B", "LF", "CF", "RF")


def test_normalize_position_rejects_unknown_codes():
    assert normalize_position(" ss ") == "SS"
    with pytest.raises(ValueError):
        normalize_position("DH")
    with pytest.raises(ValueError):
        normalize_position(None)


def test_player_exclusions_are_normalized():
    player = Player("p1", "Pat", is_pitcher=True, excluded_positions=["p", " c", ""])
    assert player.excluded_positions == frozenset({"P", "C"})
    assert not player.can_play("P")
    assert player.can_play("ss")


def test_game_coerces_available_ids():
    game = Game("g1", 6, available_player_ids=["a", "b"])
    assert game.available_player_ids == frozenset({"a", "b"})
    assert game.is_available("a")
    assert not game.is_available("z")


def test_combination_requires_two_players():
    combo = PlayerCombination(["a", "b"], "pals")
    assert combo.player_ids == ("a", "b")
    with pytest.raises(ValueError):
        PlayerCombination(("a",), "solo")
    with pytest.raises(ValueError):
        PlayerCombination(("a", "b", "c"), "crowd")


def test_inning_helpers_report_open_slots():
    assignments = tuple(
        PositionAssignment(pos, None if pos == "P" else f"id-{pos}", None) for pos in LINEUP_ORDER
    )
    inning = InningLineup(1, assignments, frozenset({"x"}))
    assert inning.player_at("SS") == "id-SS"
    assert inning.player_at("P") is None
    assert inning.unfilled_positions() == ["P"]
    assert len(inning.filled()) == 8
    assert "id-C" in inning.player_ids()


def test_lineup_equality_ignores_identity_fields():
    inning = InningLineup(1, (PositionAssignment("P", "a", "A"),))
    first = Lineup("g1", (inning,))
    second = Lineup("g1", (inning,))
    assert first.lineup_id != second.lineup_id
    assert first == second
    assert first.inning(1) is inning
    with pytest.raises(KeyError):
        first.inning(2)


def test_integer_player_ids_match_game_availability():
    players = [
        Player(player_id=i, name=f"Player {i}", is_pitcher=i < 3, is_catcher=i in (3, 4))
        for i in range(9)
    ]
    assert players[0].player_id == "0"
    game = Game(game_id="g1", innings=3, available_player_ids=range(9))
    lineup = LineupGenerator(players, game, rng=random.Random(0)).generate()
    assert len(lineup.innings) == 3
    for inning in lineup.innings:
        assert inning.unfilled_positions() == []
        assert set(inning.player_ids()) == {str(i) for i in range(9)}
