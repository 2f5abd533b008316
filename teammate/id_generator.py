"""Participant id source.

One ``IdGenerator`` is built per process (or per test) and passed to whatever
creates participants. Ids look like ``P0001``; only the numeric suffix is
guaranteed unique.
"""

from __future__ import annotations

from collections.abc import Iterable
import logging
import re
import threading


logger = logging.getLogger(__name__)

_INITIAL_VALUE = 1


class IdGenerator:
    """Thread-safe monotonic participant id counter."""

    def __init__(self, prefix: str = "P", width: int = 4) -> None:
        self._prefix = prefix
        self._width = width
        self._pattern = re.compile(rf"^{re.escape(prefix)}(\d+)$")
        self._next = _INITIAL_VALUE
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def next_id(self) -> str:
        """Return a fresh id and advance the counter."""
        with self._lock:
            value = self._next
            self._next += 1
        return self.format_id(value)

    def peek_next_id(self) -> str:
        """Return the id the next call to ``next_id`` will issue."""
        with self._lock:
            return self.format_id(self._next)

    @property
    def issued_count(self) -> int:
        """Highest numeric id issued or accounted for so far."""
        with self._lock:
            return self._next - 1

    def reconcile(self, max_seen: int) -> None:
        """Move the counter past *max_seen*; never moves it backwards."""
        with self._lock:
            if max_seen + 1 > self._next:
                self._next = max_seen + 1
            logger.info("Next participant id will be %s", self.format_id(self._next))

    def reconcile_from_ids(self, participant_ids: Iterable[str]) -> None:
        """Reconcile against the largest well-formed id in *participant_ids*."""
        max_seen = 0
        for pid in participant_ids:
            value = self.parse_numeric(pid)
            if value is not None and value > max_seen:
                max_seen = value
        self.reconcile(max_seen)

    def advance_if_collides(self, participant_id: str) -> None:
        """Ensure an accepted (reloaded) id is never issued again."""
        value = self.parse_numeric(participant_id)
        if value is None:
            logger.warning("Invalid participant id format: %s", participant_id)
            return
        with self._lock:
            if value >= self._next:
                self._next = value + 1

    def reset(self) -> None:
        with self._lock:
            self._next = _INITIAL_VALUE

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------
    def format_id(self, value: int) -> str:
        return f"{self._prefix}{value:0{self._width}d}"

    def parse_numeric(self, participant_id: str | None) -> int | None:
        """Numeric suffix of *participant_id*, or ``None`` if malformed."""
        if not participant_id:
            return None
        match = self._pattern.match(participant_id.strip())
        return int(match.group(1)) if match else None
