"""Run many seeded lineups for one roster and report rotation fairness.

For each generation the audit checks the advisory bench plan against the
tiered policy (no second turn before everyone sat once, no third before
everyone sat twice) and collects how evenly bench, pitching and field time
were spread.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
import argparse
import os
import random
import sys

from tqdm import tqdm

# Ensure project root is on the path when running this script directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from logic.lineup_config import LineupConfig, load_config
from logic.lineup_generator import LineupGenerator
from models.game import Game
from models.player import Player
from utils.player_loader import load_players_from_csv


@dataclass
class AuditReport:
    runs: int = 0
    tier_violations: int = 0
    open_slots: int = 0
    max_bench_spread: int = 0
    max_pitching_spread: int = 0
    bench_turns: Counter = field(default_factory=Counter)

    def as_lines(self) -> list[str]:
        return [
            f"Runs: {self.runs}",
            f"Bench tier violations: {self.tier_violations}",
            f"Open slots: {self.open_slots}",
            f"Max bench spread (most - fewest turns): {self.max_bench_spread}",
            f"Max pitching spread among pitchers: {self.max_pitching_spread}",
        ]


def tier_violations(bench_plan: list[frozenset[str]], player_ids: list[str]) -> int:
    """Count planned bench turns handed out ahead of the tier order."""

    counts = Counter({pid: 0 for pid in player_ids})
    violations = 0
    for bench in bench_plan:
        sitting_in = [counts[pid] for pid in player_ids if pid not in bench]
        floor = min(sitting_in) if sitting_in else 0
        for pid in bench:
            turns = counts[pid]
            # A second turn while someone still has none, or a third while
            # someone has only one.
            if (turns == 1 and floor == 0) or (turns >= 2 and floor <= 1):
                violations += 1
        for pid in bench:
            counts[pid] += 1
    return violations


def audit(
    players: list[Player],
    innings: int,
    runs: int,
    *,
    seed: int = 0,
    config: LineupConfig | None = None,
    use_tqdm: bool = True,
) -> AuditReport:
    game = Game(
        game_id="audit",
        innings=innings,
        available_player_ids={p.player_id for p in players},
    )
    pitcher_ids = {p.player_id for p in players if p.is_pitcher}
    report = AuditReport()
    iterator = range(runs)
    if use_tqdm:
        iterator = tqdm(iterator, desc="Generating lineups")
    for run in iterator:
        generator = LineupGenerator(
            players, game, rng=random.Random(seed + run), config=config
        )
        lineup = generator.generate()
        report.runs += 1
        report.open_slots += sum(len(i.unfilled_positions()) for i in lineup.innings)
        report.tier_violations += tier_violations(
            generator.bench_plan, [p.player_id for p in players]
        )

        turns = Counter({p.player_id: 0 for p in players})
        for inning in lineup.innings:
            turns.update(inning.bench)
        report.bench_turns.update(turns)
        if turns:
            spread = max(turns.values()) - min(turns.values())
            report.max_bench_spread = max(report.max_bench_spread, spread)

        pitching = [row.pitching_innings for row in generator.stats if row.player_id in pitcher_ids]
        if pitching:
            report.max_pitching_spread = max(
                report.max_pitching_spread, max(pitching) - min(pitching)
            )
    return report


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--players", required=True, help="Roster CSV file")
    parser.add_argument("--innings", type=int, default=6, help="Innings per game (default: 6)")
    parser.add_argument("--runs", type=int, default=500, help="Generations to audit (default: 500)")
    parser.add_argument("--seed", type=int, default=0, help="First seed (default: 0)")
    parser.add_argument("--config", default=None, help="Lineup INI file")
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable tqdm progress bar.",
    )
    args = parser.parse_args(argv)

    env_disable = os.getenv("DISABLE_TQDM", "").lower() in {"1", "true", "yes"}
    players = load_players_from_csv(args.players)
    report = audit(
        players,
        args.innings,
        args.runs,
        seed=args.seed,
        config=load_config(args.config),
        use_tqdm=not (args.disable_tqdm or env_disable),
    )
    for line in report.as_lines():
        print(line)
    return 1 if report.tier_violations else 0


if __name__ == "__main__":
    sys.exit(main())
