from __future__ import annotations

"""Inning-by-inning defensive lineup generation.

:class:`LineupGenerator` threads bench turns, pitching usage and field-time
tallies through the innings of one game:

1. plan the bench for every inning up front,
2. per inning pick the pitcher, then the catcher,
3. note any pairing hints,
4. fill the remaining field slots by least infield/outfield time,
5. credit the inning to the running stats.

Nothing raises for short rosters.  Slots without an eligible player stay open
so a coach with eight kids still gets a lineup.
"""

import logging
import random
from collections import Counter
from typing import Iterable, List, Optional, Sequence

from models.game import Game
from models.lineup import InningLineup, Lineup, PlayerCombination, PlayerLineupStats, PositionAssignment
from models.player import Player
from models.position import LINEUP_ORDER
from utils.roster_filter import filter_available_players

from .bench_scheduler import BenchScheduler
from .field_assigner import FieldAssigner
from .lineup_config import LineupConfig
from .lineup_stats import StatsAccumulator
from .pairing_hints import apply_pairing_hints
from .role_selector import RoleSelector

logger = logging.getLogger(__name__)


class LineupGenerator:
    def __init__(
        self,
        players: Sequence[Player],
        game: Game,
        combinations: Iterable[PlayerCombination] = (),
        *,
        rng: random.Random | None = None,
        config: LineupConfig | None = None,
    ) -> None:
        self.players = list(players)
        self.game = game
        self.combinations = list(combinations)
        self.rng = rng or random.Random()
        self.config = config or LineupConfig()
        self.bench_scheduler = BenchScheduler(self.rng)
        self.role_selector = RoleSelector(self.rng, self.config)
        self.field_assigner = FieldAssigner(self.rng, self.config)
        self.bench_plan: List[frozenset[str]] = []
        self.accumulator: StatsAccumulator | None = None

    @property
    def stats(self) -> List[PlayerLineupStats]:
        """Per-player tallies from the last :meth:`generate` call."""
        return self.accumulator.rows() if self.accumulator else []

    def generate(self) -> Lineup:
        available = filter_available_players(self.players, self.game)
        self.accumulator = StatsAccumulator(available)
        pitcher_usage: Counter[str] = Counter()
        self.bench_plan = self.bench_scheduler.plan(available, self.game.innings)

        innings: List[InningLineup] = []
        for number, planned in enumerate(self.bench_plan, start=1):
            inning = self._generate_inning(number, available, planned, pitcher_usage)
            self.accumulator.update(inning)
            innings.append(inning)

        lineup = Lineup(game_id=self.game.game_id, innings=tuple(innings))
        open_slots = sum(len(i.unfilled_positions()) for i in innings)
        logger.info(
            "Generated %d innings for game %s with %d players (%d open slots)",
            len(innings),
            self.game.game_id,
            len(available),
            open_slots,
        )
        return lineup

    def _generate_inning(
        self,
        number: int,
        available: Sequence[Player],
        planned_bench: frozenset[str],
        pitcher_usage: Counter[str],
    ) -> InningLineup:
        bench = set(planned_bench)
        used: set[str] = set()
        placed: dict[str, PositionAssignment] = {}

        pitcher = self.role_selector.select_pitcher(available, pitcher_usage, used, bench)
        if pitcher is not None:
            self.role_selector.resolve_bench_conflict(pitcher, bench, available, used)
            used.add(pitcher.player_id)
            pitcher_usage[pitcher.player_id] += 1
            placed["P"] = PositionAssignment("P", pitcher.player_id, pitcher.name)
        else:
            logger.warning("Inning %d: no eligible pitcher, leaving P open", number)

        catcher = self.role_selector.select_catcher(available, used, bench)
        if catcher is not None:
            used.add(catcher.player_id)
            placed["C"] = PositionAssignment("C", catcher.player_id, catcher.name)
        else:
            logger.warning("Inning %d: no eligible catcher, leaving C open", number)

        remaining = [p for p in available if p.player_id not in used and p.player_id not in bench]
        apply_pairing_hints(
            self.combinations, remaining, used, log=self.config.flag("logPairingHints")
        )

        snapshot = self.accumulator.snapshot() if self.accumulator else {}
        for assignment in self.field_assigner.assign(remaining, snapshot, used):
            placed[assignment.position] = assignment

        assignments = tuple(placed.get(pos, PositionAssignment(pos)) for pos in LINEUP_ORDER)
        logger.debug(
            "Inning %d: %s | bench %s",
            number,
            ", ".join(f"{a.position}={a.player_id or '-'}" for a in assignments),
            ", ".join(sorted(bench)) or "none",
        )
        return InningLineup(inning=number, assignments=assignments, bench=frozenset(bench))


def generate_lineup(
    players: Sequence[Player],
    game: Game,
    combinations: Iterable[PlayerCombination] = (),
    *,
    seed: Optional[int] = None,
    config: LineupConfig | None = None,
) -> Lineup:
    """Generate a lineup with a fresh generator seeded by ``seed``."""

    generator = LineupGenerator(
        players, game, combinations, rng=random.Random(seed), config=config
    )
    return generator.generate()


__all__ = ["LineupGenerator", "generate_lineup"]
