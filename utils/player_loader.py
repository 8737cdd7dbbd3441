import csv
import re
from pathlib import Path

from models.lineup import PlayerCombination
from models.player import Player, normalize_exclusions
from utils.exceptions import RosterFileError
from utils.path_utils import resolve_path

_POSITION_SPLIT = re.compile(r"[|;/]")


def _required_str(row, key):
    value = (row.get(key) or "").strip()
    if not value:
        raise ValueError(f"Missing required field: {key}")
    return value


def _optional_bool(row, key, default=False):
    value = row.get(key)
    if value is None or value == "":
        return default
    return str(value).strip().lower() in {"1", "true", "yes", "on", "y"}


def _positions(row, key):
    raw = row.get(key) or ""
    return normalize_exclusions(part for part in _POSITION_SPLIT.split(raw))


def load_players_from_csv(file_path):
    """Load roster players from a CSV file.

    Expected columns are ``player_id``, ``name``, ``is_pitcher``,
    ``is_catcher`` and ``excluded_positions`` (codes separated by ``|``,
    ``;`` or ``/``).  Relative paths are resolved against the project root.
    Malformed rows raise :class:`~utils.exceptions.RosterFileError`.
    """

    csv_path = resolve_path(file_path)
    players = []
    seen: set[str] = set()
    with csv_path.open(mode="r", newline="", encoding="utf-8") as csvfile:
        reader = csv.DictReader(csvfile)
        # Header is row 1
        for row_number, row in enumerate(reader, start=2):
            try:
                player_id = _required_str(row, "player_id")
                player = Player(
                    player_id=player_id,
                    name=(row.get("name") or "").strip() or player_id,
                    is_pitcher=_optional_bool(row, "is_pitcher"),
                    is_catcher=_optional_bool(row, "is_catcher"),
                    excluded_positions=_positions(row, "excluded_positions"),
                    team_id=(row.get("team_id") or "").strip() or None,
                )
            except ValueError as exc:
                raise RosterFileError(csv_path, row_number, str(exc)) from exc
            if player_id in seen:
                raise RosterFileError(csv_path, row_number, f"Duplicate player_id {player_id}")
            seen.add(player_id)
            players.append(player)
    return players


def load_combinations_from_csv(file_path):
    """Load pairing hints from ``player1,player2,description`` rows."""

    csv_path = resolve_path(file_path)
    combinations = []
    with csv_path.open(mode="r", newline="", encoding="utf-8") as csvfile:
        reader = csv.DictReader(csvfile)
        for row_number, row in enumerate(reader, start=2):
            try:
                ids = (_required_str(row, "player1"), _required_str(row, "player2"))
            except ValueError as exc:
                raise RosterFileError(csv_path, row_number, str(exc)) from exc
            combinations.append(
                PlayerCombination(
                    player_ids=ids,
                    description=(row.get("description") or "").strip(),
                    combination_id=f"combo-{row_number - 1}",
                )
            )
    return combinations


__all__ = ["load_combinations_from_csv", "load_players_from_csv"]
