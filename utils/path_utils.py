from __future__ import annotations

from pathlib import Path
import sys


def get_base_dir() -> Path:
    """Return project root or PyInstaller's temporary directory."""
    return Path(getattr(sys, "_MEIPASS", Path(__file__).resolve().parent.parent))


def resolve_path(path: str | Path) -> Path:
    """Return ``path`` unchanged when absolute, else relative to the project root."""
    candidate = Path(path)
    if candidate.is_absolute():
        return candidate
    return get_base_dir() / candidate
