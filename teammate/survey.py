"""Five-question personality survey and its score conversion."""

from __future__ import annotations

from collections.abc import Sequence

from teammate.errors import DataError


PERSONALITY_QUESTIONS: list[str] = [
    "I prefer taking charge in group situations",
    "I enjoy analyzing problems before taking action",
    "I work well under pressure",
    "I prefer following established procedures",
    "I enjoy coming up with creative solutions",
]

MIN_ANSWER = 1
MAX_ANSWER = 5


def score_survey(responses: Sequence[int]) -> int:
    """Convert five 1–5 answers into a personality score.

    The raw total (5–25) maps linearly onto 50–90.

    Raises:
        DataError: On a wrong number of answers or an answer outside 1–5.
    """
    if len(responses) != len(PERSONALITY_QUESTIONS):
        raise DataError(f"Expected {len(PERSONALITY_QUESTIONS)} answers, got {len(responses)}")
    for i, answer in enumerate(responses, start=1):
        if answer < MIN_ANSWER or answer > MAX_ANSWER:
            raise DataError(f"Answer {i} must be between {MIN_ANSWER} and {MAX_ANSWER}: {answer}")
    total = sum(responses)
    return 50 + (total - len(PERSONALITY_QUESTIONS)) * 2
