from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional

from models.position import normalize_position


@dataclass
class Player:
    player_id: str
    name: str
    is_pitcher: bool = False
    is_catcher: bool = False
    # Positions this player must never be assigned, regardless of flags
    excluded_positions: FrozenSet[str] = field(default_factory=frozenset)
    team_id: Optional[str] = None

    def __post_init__(self) -> None:
        # Ids are compared against Game.available_player_ids, which holds strings.
        self.player_id = str(self.player_id)
        self.excluded_positions = normalize_exclusions(self.excluded_positions)

    def can_play(self, position: str) -> bool:
        return normalize_position(position) not in self.excluded_positions


def normalize_exclusions(positions: Iterable[str] | None) -> FrozenSet[str]:
    """Return ``positions`` as a frozenset of normalized position codes.

    Blank entries are skipped; unknown codes raise :class:`ValueError`.
    """

    cleaned = set()
    for pos in positions or ():
        if not str(pos or "").strip():
            continue
        cleaned.add(normalize_position(str(pos)))
    return frozenset(cleaned)


__all__ = ["Player", "normalize_exclusions"]
