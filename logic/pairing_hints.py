from __future__ import annotations

"""Player pairing hints.

Coaches can record that two players should be positioned together.  The hook
is deliberately inert: a hint whose players are both still unplaced is
acknowledged and logged, but assignments are left alone and no randomness is
consumed, so a lineup generated with hints matches one generated without.
Enforcing pairs (e.g. adjacent positions) is an open design question.
"""

import logging
from typing import Iterable, List, Sequence, Set

from models.lineup import PlayerCombination
from models.player import Player

logger = logging.getLogger(__name__)


def apply_pairing_hints(
    combinations: Iterable[PlayerCombination],
    remaining: Sequence[Player],
    used: Set[str],
    *,
    log: bool = True,
) -> List[PlayerCombination]:
    """Return the hints whose two players are both in ``remaining`` and unused."""

    pool = {p.player_id for p in remaining}
    acknowledged: List[PlayerCombination] = []
    for combo in combinations:
        first, second = combo.player_ids
        if first in pool and second in pool and first not in used and second not in used:
            acknowledged.append(combo)
            if log:
                logger.info(
                    "Pairing hint noted (not enforced): %s + %s %s",
                    first,
                    second,
                    combo.description,
                )
    return acknowledged


__all__ = ["apply_pairing_hints"]
