"""Generate an inning-by-inning defensive lineup from a roster CSV.

Example::

    python scripts/generate_lineup.py --players samples/roster_sample.csv \
        --innings 6 --seed 7 --output data/lineups/game1.csv
"""

from __future__ import annotations

from pathlib import Path
import argparse
import logging
import random
import sys

# Ensure project root is on the path when running this script directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from logic.lineup_config import load_config
from logic.lineup_generator import LineupGenerator
from models.game import Game
from models.lineup import Lineup, PlayerLineupStats
from models.position import LINEUP_ORDER
from utils.exceptions import LineupError
from utils.lineup_io import save_lineup_csv
from utils.player_loader import load_combinations_from_csv, load_players_from_csv
from utils.roster_filter import validate_game_inputs


def format_lineup(lineup: Lineup, names: dict[str, str]) -> str:
    header = ["Inn"] + list(LINEUP_ORDER) + ["Bench"]
    rows = [header]
    for inning in lineup.innings:
        row = [str(inning.inning)]
        for pos in LINEUP_ORDER:
            pid = inning.player_at(pos)
            row.append(names.get(pid, pid) if pid else "-")
        row.append(", ".join(names.get(pid, pid) for pid in sorted(inning.bench)) or "")
        rows.append(row)
    widths = [max(len(r[i]) for r in rows) for i in range(len(header))]
    return "\n".join(
        "  ".join(cell.ljust(widths[i]) for i, cell in enumerate(r)).rstrip() for r in rows
    )


def format_stats(stats: list[PlayerLineupStats]) -> str:
    lines = [f"{'Player':<20} {'IF':>3} {'OF':>3} {'P':>3} {'C':>3} {'Tot':>4}"]
    for row in stats:
        lines.append(
            f"{row.player_name:<20} {row.infield_innings:>3} {row.outfield_innings:>3} "
            f"{row.pitching_innings:>3} {row.catching_innings:>3} {row.total_innings:>4}"
        )
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a fair defensive rotation for one game."
    )
    parser.add_argument("--players", required=True, help="Roster CSV file")
    parser.add_argument("--innings", type=int, default=6, help="Innings to schedule (default: 6)")
    parser.add_argument(
        "--available",
        default=None,
        help="Comma separated player ids available for the game (default: whole roster)",
    )
    parser.add_argument("--combinations", default=None, help="Optional pairing hints CSV")
    parser.add_argument("--game-id", default="game", help="Identifier stored on the lineup")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for deterministic runs (default: random)",
    )
    parser.add_argument("--config", default=None, help="Lineup INI file (default: logic/lineup.ini)")
    parser.add_argument("--overrides", default=None, help="JSON overrides for the lineup config")
    parser.add_argument("--output", default=None, help="Write the lineup to this CSV file")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log output")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.WARNING - 10 * min(args.verbose, 2)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        players = load_players_from_csv(args.players)
        if args.available:
            available = {pid.strip() for pid in args.available.split(",") if pid.strip()}
        else:
            available = {p.player_id for p in players}
        game = Game(game_id=args.game_id, innings=args.innings, available_player_ids=available)
        validate_game_inputs(players, game)
        combinations = (
            load_combinations_from_csv(args.combinations) if args.combinations else []
        )
        config = load_config(args.config, args.overrides)
    except (LineupError, OSError, KeyError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    generator = LineupGenerator(
        players, game, combinations, rng=random.Random(args.seed), config=config
    )
    lineup = generator.generate()

    names = {p.player_id: p.name for p in players}
    print(format_lineup(lineup, names))
    print()
    print(format_stats(generator.stats))
    if args.output:
        path = save_lineup_csv(lineup, args.output)
        print(f"\nLineup written to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
