"""CSV persistence for surveyed participants."""

from __future__ import annotations

from collections.abc import Iterable
import csv
from dataclasses import dataclass, field
import logging
from pathlib import Path
import threading

from pydantic import ValidationError as PydanticValidationError

from teammate.errors import DataError, FileProcessingError
from teammate.id_generator import IdGenerator
from teammate.participant import Participant, reload_participant
from teammate.personality import ROLE_DISPLAY_NAMES
from teammate.validation import is_valid_email


logger = logging.getLogger(__name__)

CSV_HEADER: list[str] = [
    "ParticipantID",
    "Name",
    "Email",
    "GameInterest",
    "SkillLevel",
    "PreferredRole",
    "PersonalityScore",
]


@dataclass
class LoadReport:
    participants: list[Participant] = field(default_factory=list)
    # (line number, reason) for every row that was not loaded
    skipped: list[tuple[int, str]] = field(default_factory=list)


def _to_row(p: Participant) -> list[str]:
    return [
        p.participant_id,
        p.name,
        p.email,
        p.game_interest or "",
        str(p.skill_level),
        ROLE_DISPLAY_NAMES[p.preferred_role],
        str(p.personality_score),
    ]


def exclude_known(participants: Iterable[Participant], known_emails: Iterable[str]) -> list[Participant]:
    """Keep participants whose email (case-insensitive) has not been seen.

    An email counts as seen if it is in *known_emails* or belongs to an
    earlier participant in *participants*, so the first occurrence wins.
    """
    seen = {e.strip().lower() for e in known_emails}
    kept: list[Participant] = []
    for p in participants:
        key = p.email.strip().lower()
        if key in seen:
            logger.info("Skipping duplicate participant %s (%s)", p.participant_id, p.email)
            continue
        seen.add(key)
        kept.append(p)
    return kept


class ParticipantRepository:
    """Thread-safe CSV store for participants."""

    def __init__(self, csv_path: str = "players.csv", email_domain: str | None = None) -> None:
        """Initialize repository with a CSV path.

        Args:
            csv_path: File to read and write.
            email_domain: When set, rows whose email is outside this domain
                are skipped on load.
        """
        self._path = Path(csv_path)
        self._email_domain = email_domain
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------
    def load_participants(self, ids: IdGenerator) -> LoadReport:
        """Load every valid row, skipping (and logging) malformed ones.

        *ids* is advanced past every loaded id.

        Raises:
            FileProcessingError: If the file is missing, unreadable, or has no
                valid rows.
        """
        with self._lock:
            rows = self._read_rows()

        report = LoadReport()
        for line_no, row in rows:
            try:
                report.participants.append(self._parse_row(row, ids))
            except (DataError, PydanticValidationError) as exc:
                logger.warning("Skipping invalid data at line %d: %s", line_no, exc)
                report.skipped.append((line_no, str(exc)))

        if not report.participants:
            raise FileProcessingError(
                f"No valid participant data found in {self._path}. Expected columns: {','.join(CSV_HEADER)}"
            )
        ids.reconcile_from_ids(p.participant_id for p in report.participants)
        logger.info(
            "Loaded %d participants from %s (%d skipped)",
            len(report.participants), self._path, len(report.skipped),
        )
        return report

    def max_issued_id(self, ids: IdGenerator) -> int:
        """Largest well-formed numeric id on disk; 0 when there is none."""
        with self._lock:
            if not self._path.exists():
                return 0
            rows = self._read_rows()
        values = [ids.parse_numeric(row[0]) for _, row in rows if row]
        return max((v for v in values if v is not None), default=0)

    def known_emails(self) -> set[str]:
        """Lower-cased emails already on disk."""
        with self._lock:
            if not self._path.exists():
                return set()
            rows = self._read_rows()
        return {row[2].strip().lower() for _, row in rows if len(row) > 2 and row[2].strip()}

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------
    def append_participant(self, participant: Participant) -> None:
        """Append one participant, writing the header for a new file."""
        with self._lock:
            is_new = not self._path.exists()
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                with open(self._path, "a", newline="", encoding="utf-8") as fh:
                    writer = csv.writer(fh)
                    if is_new:
                        writer.writerow(CSV_HEADER)
                    writer.writerow(_to_row(participant))
            except OSError as exc:
                raise FileProcessingError(f"Failed to save participant: {exc}") from exc
        logger.info("Saved participant %s to %s", participant.participant_id, self._path)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _read_rows(self) -> list[tuple[int, list[str]]]:
        """Non-empty data rows with their 1-based line numbers (header skipped)."""
        if not self._path.exists():
            raise FileProcessingError(f"File not found: {self._path}")
        try:
            with open(self._path, newline="", encoding="utf-8") as fh:
                return [
                    (line_no, row)
                    for line_no, row in enumerate(csv.reader(fh), start=1)
                    if line_no > 1 and any(cell.strip() for cell in row)
                ]
        except OSError as exc:
            raise FileProcessingError(f"Error reading {self._path}: {exc}") from exc

    def _parse_row(self, row: list[str], ids: IdGenerator) -> Participant:
        if len(row) < len(CSV_HEADER):
            raise DataError(f"Insufficient data fields. Expected {len(CSV_HEADER)}, got {len(row)}")
        pid, name, email, game, skill, role, score = (cell.strip() for cell in row[: len(CSV_HEADER)])
        if not name:
            raise DataError("Name cannot be empty")
        if self._email_domain is not None and not is_valid_email(email, self._email_domain):
            raise DataError(f"Invalid email domain. Must be @{self._email_domain}: {email}")
        try:
            skill_level = int(skill)
            personality_score = int(score)
        except ValueError as exc:
            raise DataError("Invalid number format in skill level or personality score") from exc
        return reload_participant(
            ids,
            pid,
            name=name,
            email=email,
            game_interest=game,
            skill_level=skill_level,
            preferred_role=role,
            personality_score=personality_score,
        )
