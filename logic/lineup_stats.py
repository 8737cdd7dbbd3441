from __future__ import annotations

"""Per-player innings tallies for generated lineups.

:class:`StatsAccumulator` is updated inning by inning while a lineup is being
generated.  :func:`calculate_lineup_stats` rebuilds the same numbers from a
finished :class:`~models.lineup.Lineup`, e.g. one loaded back from CSV.
"""

from dataclasses import replace
from typing import Dict, Iterable, List

from models.lineup import InningLineup, Lineup, LineupStats, PlayerLineupStats
from models.player import Player
from models.position import INFIELD, OUTFIELD, PITCHING, position_category


class StatsAccumulator:
    def __init__(self, players: Iterable[Player]) -> None:
        self._stats: Dict[str, PlayerLineupStats] = {
            p.player_id: PlayerLineupStats(p.player_id, p.name) for p in players
        }

    def update(self, inning: InningLineup) -> None:
        """Credit every filled assignment of ``inning``.

        Catching counts toward total innings only.  Ids that are not part of
        the tracked roster are ignored.
        """

        for assignment in inning.assignments:
            if assignment.player_id is None:
                continue
            row = self._stats.get(assignment.player_id)
            if row is None:
                continue
            row.total_innings += 1
            category = position_category(assignment.position)
            if category == PITCHING:
                row.pitching_innings += 1
            elif category == INFIELD:
                row.infield_innings += 1
            elif category == OUTFIELD:
                row.outfield_innings += 1

    def get(self, player_id: str) -> PlayerLineupStats | None:
        return self._stats.get(player_id)

    def snapshot(self) -> Dict[str, PlayerLineupStats]:
        """Return a copy of the current tallies keyed by player id."""
        return {pid: replace(row) for pid, row in self._stats.items()}

    def rows(self) -> List[PlayerLineupStats]:
        return [replace(row) for row in self._stats.values()]


def calculate_lineup_stats(lineup: Lineup, players: Iterable[Player]) -> List[PlayerLineupStats]:
    """Return one stats row per player in ``players`` folded over ``lineup``."""

    accumulator = StatsAccumulator(players)
    for inning in lineup.innings:
        accumulator.update(inning)
    return accumulator.rows()


def summarize_lineup(lineup: Lineup, players: Iterable[Player]) -> LineupStats:
    return LineupStats(
        total_innings=len(lineup.innings),
        player_stats=calculate_lineup_stats(lineup, players),
    )


__all__ = ["StatsAccumulator", "calculate_lineup_stats", "summarize_lineup"]
