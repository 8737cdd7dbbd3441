from __future__ import annotations

"""Roster narrowing and validation ahead of lineup generation."""

from typing import List, Sequence

from models.game import Game
from models.player import Player
from utils.exceptions import LineupInputError


def filter_available_players(roster: Sequence[Player], game: Game) -> List[Player]:
    """Return players marked available for ``game`` in roster order."""

    return [p for p in roster if p.player_id in game.available_player_ids]


def validate_game_inputs(roster: Sequence[Player], game: Game) -> None:
    """Raise :class:`LineupInputError` if ``game`` does not fit ``roster``.

    The generator itself tolerates thin rosters; this only rejects setups
    that are mistakes: a non-positive inning count, or availability entries
    for players that are not on the roster.
    """

    problems: list[str] = []
    if not isinstance(game.innings, int) or game.innings <= 0:
        problems.append(f"Game {game.game_id} must have at least one inning (got {game.innings}).")
    roster_ids = {p.player_id for p in roster}
    unknown = sorted(pid for pid in game.available_player_ids if pid not in roster_ids)
    if unknown:
        problems.append(f"Unknown available players: {', '.join(unknown)}.")
    if problems:
        raise LineupInputError(problems)


__all__ = ["filter_available_players", "validate_game_inputs"]
