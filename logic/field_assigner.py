from __future__ import annotations

import logging
import random
from typing import List, Mapping, Sequence, Set

from models.lineup import PlayerLineupStats, PositionAssignment
from models.player import Player
from models.position import FIELD_POSITIONS, INFIELD, position_category

from .lineup_config import LineupConfig

logger = logging.getLogger(__name__)


class FieldAssigner:
    """Fill the seven non-battery positions for one inning.

    Slots are processed in :data:`models.position.FIELD_POSITIONS` order.  For
    each slot the eligible player with the fewest innings in that half of the
    field (infield or outfield) so far gets the spot.
    """

    def __init__(
        self, rng: random.Random | None = None, config: LineupConfig | None = None
    ) -> None:
        self.rng = rng or random.Random()
        self.config = config or LineupConfig()

    def _field_time(self, stats: Mapping[str, PlayerLineupStats], pid: str, category: str) -> int:
        row = stats.get(pid)
        if row is None:
            return 0
        return row.infield_innings if category == INFIELD else row.outfield_innings

    def pick(
        self,
        position: str,
        candidates: Sequence[Player],
        stats: Mapping[str, PlayerLineupStats],
        used: Set[str],
    ) -> Player | None:
        eligible = [
            p for p in candidates if p.player_id not in used and p.can_play(position)
        ]
        if not eligible:
            return None
        category = position_category(position)

        def time_at(p: Player) -> int:
            return self._field_time(stats, p.player_id, category)

        if self.config.flag("randomizeFieldTies"):
            least = min(time_at(p) for p in eligible)
            return self.rng.choice([p for p in eligible if time_at(p) == least])
        # sorted() is stable, so ties keep roster order
        return sorted(eligible, key=time_at)[0]

    def assign(
        self,
        candidates: Sequence[Player],
        stats: Mapping[str, PlayerLineupStats],
        used: Set[str],
    ) -> List[PositionAssignment]:
        """Return assignments for every field slot, marking picks in ``used``.

        ``stats`` must be the snapshot from before the current inning.  Slots
        nobody can fill come back with ``player_id=None``.
        """

        assignments: List[PositionAssignment] = []
        for position in FIELD_POSITIONS:
            player = self.pick(position, candidates, stats, used)
            if player is None:
                logger.debug("No eligible player left for %s", position)
                assignments.append(PositionAssignment(position))
                continue
            used.add(player.player_id)
            assignments.append(PositionAssignment(position, player.player_id, player.name))
        return assignments


__all__ = ["FieldAssigner"]
