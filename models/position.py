from __future__ import annotations

"""Defensive position constants and helpers."""

from typing import Tuple

PITCHING_POSITIONS: Tuple[str, ...] = ("P",)
CATCHING_POSITIONS: Tuple[str, ...] = ("C",)
INFIELD_POSITIONS: Tuple[str, ...] = ("1B", "2B", "SS", "3B")
OUTFIELD_POSITIONS: Tuple[str, ...] = ("LF", "CF", "RF")

# Field slots are filled in this order once the battery is set.
FIELD_POSITIONS: Tuple[str, ...] = INFIELD_POSITIONS + OUTFIELD_POSITIONS
LINEUP_ORDER: Tuple[str, ...] = PITCHING_POSITIONS + CATCHING_POSITIONS + FIELD_POSITIONS
POSITIONS: Tuple[str, ...] = ("C", "P", "1B", "2B", "SS", "3B", "LF", "CF", "RF")

PITCHING = "pitching"
CATCHING = "catching"
INFIELD = "infield"
OUTFIELD = "outfield"


def normalize_position(pos: str | None) -> str:
    """Return ``pos`` stripped and upper-cased.

    Raises :class:`ValueError` when the result is not one of the nine
    defensive positions.
    """

    value = (pos or "").strip().upper()
    if value not in POSITIONS:
        raise ValueError(f"Unknown position: {pos!r}")
    return value


def position_category(pos: str) -> str:
    pos = normalize_position(pos)
    if pos in PITCHING_POSITIONS:
        return PITCHING
    if pos in CATCHING_POSITIONS:
        return CATCHING
    if pos in INFIELD_POSITIONS:
        return INFIELD
    return OUTFIELD


__all__ = [
    "CATCHING",
    "CATCHING_POSITIONS",
    "FIELD_POSITIONS",
    "INFIELD",
    "INFIELD_POSITIONS",
    "LINEUP_ORDER",
    "OUTFIELD",
    "OUTFIELD_POSITIONS",
    "PITCHING",
    "PITCHING_POSITIONS",
    "POSITIONS",
    "normalize_position",
    "position_category",
]
