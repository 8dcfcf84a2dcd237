"""Best completion time and remaining hints, kept in a small JSON file."""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_HINTS = 3


class ProgressStore:
    """Load on construction, save after every change."""

    def __init__(self, path: str | Path, default_hints: int = DEFAULT_HINTS) -> None:
        self.path = Path(path)
        self.default_hints = default_hints
        self.best_time_ms: int | None = None
        self.hints_remaining = default_hints
        self._load()

    def consume_hint(self) -> bool:
        """Use one hint; False if none were left."""
        if self.hints_remaining <= 0:
            return False
        self.hints_remaining -= 1
        self._save()
        return True

    def reset_hints(self) -> None:
        self.hints_remaining = self.default_hints
        self._save()

    def record_completion(self, time_ms: int) -> None:
        if self.best_time_ms is None or time_ms < self.best_time_ms:
            self.best_time_ms = time_ms
        self._save()

    def _load(self) -> None:
        if not self.path.exists():
            return
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable progress file %s: %s", self.path, e)
            return
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed progress file %s", self.path)
            return

        best = data.get("bestTimeMs")
        if isinstance(best, int) and not isinstance(best, bool):
            self.best_time_ms = best
        hints = data.get("hintsRemaining")
        if isinstance(hints, int) and not isinstance(hints, bool):
            self.hints_remaining = hints

    def _save(self) -> None:
        payload = {"bestTimeMs": self.best_time_ms, "hintsRemaining": self.hints_remaining}
        try:
            self.path.write_text(json.dumps(payload), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save progress file %s: %s", self.path, e)
