from __future__ import annotations

"""Tuning switches for the lineup generator.

Values live in the ``[Lineup]`` section of ``logic/lineup.ini``.  An optional
JSON file may override individual keys without touching the shipped file.
Every switch defaults to the behaviour coaches get out of the box, so a
missing file or section still produces a usable configuration.
"""

import configparser
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

from utils.path_utils import get_base_dir

SECTION = "Lineup"

_DEFAULTS: Dict[str, Any] = {
    # Pick randomly among players tied for the least infield/outfield time
    # instead of keeping roster order.
    "randomizeFieldTies": 0,
    # Pick the emergency catcher randomly instead of the first eligible player.
    "randomizeEmergencyCatcher": 0,
    # Prefer a non-pitcher when backfilling the bench after a benched player
    # is pulled in to pitch.
    "preferNonPitcherBenchBackfill": 1,
    # Emit an INFO record for every acknowledged pairing hint.
    "logPairingHints": 1,
}


def _coerce(raw: str) -> Any:
    value = raw.strip()
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value


@dataclass
class LineupConfig:
    """Mapping-like access to lineup tuning values.

    Values can be read with :py:meth:`get` or as attributes; keys missing from
    :attr:`values` fall back to the module defaults.
    """

    values: Dict[str, Any] = field(default_factory=dict)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LineupConfig":
        """Create an instance from a flat mapping or one keyed by section."""

        if SECTION in data and isinstance(data[SECTION], dict):
            section = data[SECTION]
        else:
            section = data
        return cls(dict(section))

    @classmethod
    def from_file(cls, path: str | Path) -> "LineupConfig":
        """Read the ``[Lineup]`` section of the INI file at ``path``."""

        parser = configparser.ConfigParser()
        # Keep camelCase keys intact.
        parser.optionxform = str  # type: ignore[assignment]
        with Path(path).open("r", encoding="utf-8") as fh:
            parser.read_file(fh)
        if not parser.has_section(SECTION):
            return cls()
        return cls({key: _coerce(val) for key, val in parser.items(SECTION)})

    # ------------------------------------------------------------------
    # Mapping style helpers
    # ------------------------------------------------------------------
    def get(self, key: str, default: Any = None) -> Any:
        """Return ``key`` from the configuration, the module default or ``default``."""

        if key in self.values:
            return self.values[key]
        return _DEFAULTS.get(key, default)

    def flag(self, key: str) -> bool:
        return bool(self.get(key, 0))

    def __getattr__(self, item: str) -> Any:  # pragma: no cover - simple delegation
        values = self.__dict__.get("values", {})
        if item in values:
            return values[item]
        if item in _DEFAULTS:
            return _DEFAULTS[item]
        raise AttributeError(item)


def load_config(
    ini_path: str | Path | None = None,
    overrides_path: str | Path | None = None,
) -> LineupConfig:
    """Load configuration from ``ini_path`` and optional JSON overrides.

    Relative paths resolve against the project root.  Override keys must be
    known configuration keys; anything else raises :class:`KeyError` so typos
    do not silently fall back to defaults.
    """

    base_dir = get_base_dir()
    if ini_path is None:
        ini_path = base_dir / "logic" / "lineup.ini"
    else:
        ini_path = Path(ini_path)
        if not ini_path.is_absolute():
            ini_path = base_dir / ini_path

    cfg = LineupConfig.from_file(ini_path) if ini_path.exists() else LineupConfig()

    if overrides_path is None:
        overrides_path = base_dir / "data" / "lineup_overrides.json"
    else:
        overrides_path = Path(overrides_path)
        if not overrides_path.is_absolute():
            overrides_path = base_dir / overrides_path

    if overrides_path.exists():
        with overrides_path.open("r", encoding="utf-8") as fh:
            overrides = json.load(fh)
        if isinstance(overrides, dict):
            if SECTION in overrides and isinstance(overrides[SECTION], dict):
                overrides = overrides[SECTION]
            unknown = set(overrides) - set(_DEFAULTS)
            if unknown:
                unknown_list = ", ".join(sorted(unknown))
                raise KeyError(f"Unknown lineup config keys: {unknown_list}")
            cfg.values.update(overrides)
    return cfg


__all__ = ["LineupConfig", "load_config"]
