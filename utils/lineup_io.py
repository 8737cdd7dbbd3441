"""CSV import/export for generated lineups.

Files use one row per position per inning with the columns
``inning,position,player_id,player_name``.  Open slots are written with an
empty ``player_id`` so a reloaded lineup keeps them open.
"""

from __future__ import annotations

import csv
from collections import defaultdict
from pathlib import Path
from typing import Dict, List

from models.lineup import InningLineup, Lineup, PositionAssignment
from models.position import LINEUP_ORDER, normalize_position
from utils.exceptions import RosterFileError
from utils.path_utils import resolve_path

FIELDNAMES = ["inning", "position", "player_id", "player_name"]


def save_lineup_csv(lineup: Lineup, path: str | Path) -> Path:
    """Write ``lineup`` to ``path`` and return the resolved path."""

    out_path = resolve_path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.writer(fh)
        writer.writerow(FIELDNAMES)
        for inning in lineup.innings:
            for assignment in inning.assignments:
                writer.writerow(
                    [
                        inning.inning,
                        assignment.position,
                        assignment.player_id or "",
                        assignment.player_name or "",
                    ]
                )
    return out_path


def load_lineup_csv(path: str | Path, game_id: str = "") -> Lineup:
    """Rebuild a :class:`Lineup` from a file written by :func:`save_lineup_csv`.

    Bench membership is not stored in the file, so reloaded innings have an
    empty ``bench``.
    """

    in_path = resolve_path(path)
    rows: Dict[int, Dict[str, PositionAssignment]] = defaultdict(dict)
    with in_path.open(newline="", encoding="utf-8") as fh:
        reader = csv.DictReader(fh)
        for row_number, row in enumerate(reader, start=2):
            try:
                inning = int((row.get("inning") or "").strip())
                position = normalize_position(row.get("position"))
            except ValueError as exc:
                raise RosterFileError(in_path, row_number, str(exc)) from exc
            if position in rows[inning]:
                raise RosterFileError(
                    in_path, row_number, f"Duplicate {position} in inning {inning}"
                )
            player_id = (row.get("player_id") or "").strip() or None
            player_name = (row.get("player_name") or "").strip() or None
            rows[inning][position] = PositionAssignment(position, player_id, player_name)

    innings: List[InningLineup] = []
    for number in sorted(rows):
        placed = rows[number]
        assignments = tuple(placed.get(pos, PositionAssignment(pos)) for pos in LINEUP_ORDER)
        innings.append(InningLineup(inning=number, assignments=assignments))
    return Lineup(game_id=game_id, innings=tuple(innings))


__all__ = ["FIELDNAMES", "load_lineup_csv", "save_lineup_csv"]
