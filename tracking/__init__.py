"""Record which functions actually run in a live process."""

from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import Set

_LOCK = threading.RLock()
_DEFAULT_FILE = Path(__file__).resolve().parents[1] / "logs" / "functions_in_use.txt"
_TRACKING_FILE = Path(os.getenv("TRACKING_FILE", str(_DEFAULT_FILE)))
_DISABLED = os.getenv("TRACKING_DISABLED", "").strip().lower() in {"1", "true", "yes", "on"}
# Names already written this run (or by a previous run).
_SEEN: Set[str] = set()


def _initialize_seen_cache() -> None:
    """Populate the in-memory cache with any already-recorded function names."""
    if not _TRACKING_FILE.exists():
        return
    try:
        with _TRACKING_FILE.open("r", encoding="utf-8") as handle:
            _SEEN.update(line.strip() for line in handle if line.strip())
    except OSError:
        return


def t(func_name: str) -> None:
    """Record ``func_name`` the first time it runs in this process."""
    if _DISABLED or not func_name:
        return

    with _LOCK:
        if func_name in _SEEN:
            return

        try:
            _TRACKING_FILE.parent.mkdir(parents=True, exist_ok=True)
            with _TRACKING_FILE.open("a", encoding="utf-8") as handle:
                handle.write(f"{func_name}\n")
        except OSError:
            return

        _SEEN.add(func_name)


_initialize_seen_cache()

__all__ = ["t"]
