from __future__ import annotations

"""Lineup output records.

Every inning carries one :class:`PositionAssignment` per defensive position.
A slot that could not be filled keeps ``player_id=None`` rather than a
placeholder id so callers can render it as an open position.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import FrozenSet, List, Optional, Tuple


@dataclass(frozen=True)
class PositionAssignment:
    position: str
    player_id: Optional[str] = None
    player_name: Optional[str] = None

    @property
    def is_filled(self) -> bool:
        return self.player_id is not None


@dataclass(frozen=True)
class InningLineup:
    inning: int
    assignments: Tuple[PositionAssignment, ...] = ()
    # Players who sat out this inning after any pitcher bench override.
    bench: FrozenSet[str] = frozenset()

    def player_at(self, position: str) -> Optional[str]:
        for assignment in self.assignments:
            if assignment.position == position:
                return assignment.player_id
        return None

    def filled(self) -> List[PositionAssignment]:
        return [a for a in self.assignments if a.is_filled]

    def player_ids(self) -> List[str]:
        return [a.player_id for a in self.assignments if a.player_id is not None]

    def unfilled_positions(self) -> List[str]:
        return [a.position for a in self.assignments if not a.is_filled]


def _new_lineup_id() -> str:
    return f"lineup-{uuid.uuid4().hex[:12]}"


@dataclass(frozen=True)
class Lineup:
    game_id: str
    innings: Tuple[InningLineup, ...] = ()
    lineup_id: str = field(default_factory=_new_lineup_id, compare=False)
    created_at: datetime = field(default_factory=datetime.now, compare=False)

    def inning(self, number: int) -> InningLineup:
        """Return the lineup for 1-based inning ``number``."""

        for inning in self.innings:
            if inning.inning == number:
                return inning
        raise KeyError(f"Inning {number} not in lineup {self.lineup_id}")


@dataclass
class PlayerLineupStats:
    player_id: str
    player_name: str
    infield_innings: int = 0
    outfield_innings: int = 0
    pitching_innings: int = 0
    total_innings: int = 0

    @property
    def catching_innings(self) -> int:
        return self.total_innings - (
            self.infield_innings + self.outfield_innings + self.pitching_innings
        )


@dataclass
class LineupStats:
    total_innings: int
    player_stats: List[PlayerLineupStats] = field(default_factory=list)


@dataclass(frozen=True)
class PlayerCombination:
    """Hint that two players should be positioned together."""

    player_ids: Tuple[str, ...]
    description: str = ""
    combination_id: Optional[str] = None

    def __post_init__(self) -> None:
        ids = tuple(str(pid) for pid in self.player_ids)
        if len(ids) != 2:
            raise ValueError(
                f"A player combination needs exactly two players, got {len(ids)}"
            )
        object.__setattr__(self, "player_ids", ids)


__all__ = [
    "InningLineup",
    "Lineup",
    "LineupStats",
    "PlayerCombination",
    "PlayerLineupStats",
    "PositionAssignment",
]
