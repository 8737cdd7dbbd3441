from __future__ import annotations

import logging
import random
from typing import Iterable, Mapping, Optional, Sequence, Set

from models.player import Player

from .lineup_config import LineupConfig

logger = logging.getLogger(__name__)


class RoleSelector:
    """Choose the battery (pitcher and catcher) for a single inning.

    Pitching is rotated: arms that have not pitched yet go first, then the
    ones with the fewest appearances.  Ties are broken with ``rng`` so repeated
    generations for the same roster spread the mound around.
    """

    def __init__(
        self, rng: random.Random | None = None, config: LineupConfig | None = None
    ) -> None:
        self.rng = rng or random.Random()
        self.config = config or LineupConfig()

    # ------------------------------------------------------------------
    # Pitcher
    # ------------------------------------------------------------------
    def pitcher_candidates(
        self,
        available: Sequence[Player],
        used: Set[str],
        bench: Iterable[str] = (),
    ) -> list[Player]:
        benched = set(bench)
        return [
            p
            for p in available
            if p.is_pitcher
            and p.player_id not in used
            and p.player_id not in benched
            and p.can_play("P")
        ]

    def _rotate(self, candidates: Sequence[Player], usage: Mapping[str, int]) -> Player:
        fresh = [p for p in candidates if usage.get(p.player_id, 0) == 0]
        if fresh:
            return self.rng.choice(fresh)
        fewest = min(usage.get(p.player_id, 0) for p in candidates)
        tied = [p for p in candidates if usage.get(p.player_id, 0) == fewest]
        return self.rng.choice(tied)

    def select_pitcher(
        self,
        available: Sequence[Player],
        usage: Mapping[str, int],
        used: Set[str],
        bench: Iterable[str] = (),
    ) -> Optional[Player]:
        """Return the pitcher for the inning or ``None`` if nobody can pitch.

        Eligible arms are unused, not benched, flagged ``is_pitcher`` and do
        not exclude ``P``.  Unlike that base rule, when no such arm exists the
        rotation falls back to arms scheduled for the bench instead of leaving
        the mound open; :meth:`resolve_bench_conflict` then swaps the chosen
        arm off the bench.
        """

        benched = set(bench)
        candidates = self.pitcher_candidates(available, used, benched)
        if candidates:
            return self._rotate(candidates, usage)
        benched_arms = [
            p
            for p in self.pitcher_candidates(available, used)
            if p.player_id in benched
        ]
        if benched_arms:
            pitcher = self._rotate(benched_arms, usage)
            logger.debug("Pulling %s off the bench to pitch", pitcher.player_id)
            return pitcher
        return None

    def resolve_bench_conflict(
        self,
        pitcher: Player,
        bench: Set[str],
        available: Sequence[Player],
        used: Set[str],
    ) -> Optional[str]:
        """Take ``pitcher`` off ``bench`` and bench a replacement instead.

        ``bench`` is modified in place.  Returns the id of the replacement, or
        ``None`` when the pitcher was not benched or nobody can take the spot.
        """

        if pitcher.player_id not in bench:
            return None
        bench.discard(pitcher.player_id)
        pool = [
            p
            for p in available
            if p.player_id not in used
            and p.player_id not in bench
            and p.player_id != pitcher.player_id
        ]
        if not pool:
            return None
        replacement = pool[0]
        if self.config.flag("preferNonPitcherBenchBackfill"):
            non_pitchers = [p for p in pool if not p.is_pitcher]
            if non_pitchers:
                replacement = non_pitchers[0]
        bench.add(replacement.player_id)
        logger.debug(
            "Benched %s in place of pitcher %s", replacement.player_id, pitcher.player_id
        )
        return replacement.player_id

    # ------------------------------------------------------------------
    # Catcher
    # ------------------------------------------------------------------
    def select_catcher(
        self,
        available: Sequence[Player],
        used: Set[str],
        bench: Iterable[str] = (),
    ) -> Optional[Player]:
        benched = set(bench)
        open_players = [
            p
            for p in available
            if p.player_id not in used and p.player_id not in benched and p.can_play("C")
        ]
        catchers = [p for p in open_players if p.is_catcher]
        if catchers:
            return self.rng.choice(catchers)
        if not open_players:
            return None
        # Emergency catcher: anyone left who does not refuse the position.
        if self.config.flag("randomizeEmergencyCatcher"):
            catcher = self.rng.choice(open_players)
        else:
            catcher = open_players[0]
        logger.debug("No designated catcher available; using %s", catcher.player_id)
        return catcher


__all__ = ["RoleSelector"]
