from dataclasses import dataclass, field
from typing import FrozenSet, Optional


@dataclass
class Game:
    game_id: str
    innings: int
    available_player_ids: FrozenSet[str] = field(default_factory=frozenset)
    opponent: Optional[str] = None
    team_id: Optional[str] = None

    def __post_init__(self) -> None:
        self.available_player_ids = frozenset(
            str(pid) for pid in self.available_player_ids
        )

    def is_available(self, player_id: str) -> bool:
        return player_id in self.available_player_ids
