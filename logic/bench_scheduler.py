from __future__ import annotations

import logging
import random
from typing import List, Sequence, Set

from models.player import Player
from models.position import POSITIONS

logger = logging.getLogger(__name__)

ACTIVE_SLOTS = len(POSITIONS)


class BenchScheduler:
    """Plan which players sit out each inning when more than nine are available.

    Bench turns are handed out in tiers: everyone sits once before anyone sits
    twice, and everyone sits twice before the third-and-later turns, which are
    drawn in random order.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def bench_size(self, available_players: Sequence[Player]) -> int:
        return max(0, len(available_players) - ACTIVE_SLOTS)

    def plan(self, available_players: Sequence[Player], innings: int) -> List[frozenset[str]]:
        """Return one set of benched player ids per inning."""

        quota = self.bench_size(available_players)
        if quota == 0:
            return [frozenset() for _ in range(max(0, innings))]

        benched_once: Set[str] = set()
        benched_twice: Set[str] = set()
        schedule: List[frozenset[str]] = []

        for inning in range(1, innings + 1):
            # Tiers are fixed at the start of the inning so a player picked
            # from one tier cannot be picked again from the next.
            never = [p for p in available_players if p.player_id not in benched_once]
            once = [
                p
                for p in available_players
                if p.player_id in benched_once and p.player_id not in benched_twice
            ]
            repeat = [p for p in available_players if p.player_id in benched_twice]

            bench: List[str] = []
            for player in never:
                if len(bench) >= quota:
                    break
                bench.append(player.player_id)
                benched_once.add(player.player_id)
            for player in once:
                if len(bench) >= quota:
                    break
                bench.append(player.player_id)
                benched_twice.add(player.player_id)
            if len(bench) < quota and repeat:
                shuffled = list(repeat)
                self.rng.shuffle(shuffled)
                for player in shuffled:
                    if len(bench) >= quota:
                        break
                    bench.append(player.player_id)

            logger.debug("Inning %d bench plan: %s", inning, ", ".join(bench))
            schedule.append(frozenset(bench))
        return schedule


__all__ = ["ACTIVE_SLOTS", "BenchScheduler"]
