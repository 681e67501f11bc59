"""Permissive parsing of ratings and student counts entered by the inspector."""

from typing import Iterable, Optional

from src.data.models import SchoolRecord

VALID_SCORES = (1, 2, 3, 4, 5)
_SCORE_TEXT = {str(s) for s in VALID_SCORES}


def normalize_score(value) -> Optional[int]:
    """
    Convert a raw rating to an int in 1-5, or None when unrated.

    Accepts "1".."5" (surrounding whitespace ignored) and the ints 1..5.
    Anything else, including "", "0", "6", "2.5" and booleans, is unrated.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value in VALID_SCORES else None
    if isinstance(value, str):
        text = value.strip()
        if text in _SCORE_TEXT:
            return int(text)
    return None


def rated_scores(values: Iterable) -> list[int]:
    """Normalize values and drop the unrated ones."""
    scores = []
    for value in values:
        score = normalize_score(value)
        if score is not None:
            scores.append(score)
    return scores


def parse_student_count(value) -> Optional[int]:
    """Safely convert a student count to a non-negative int."""
    if value is None or isinstance(value, bool):
        return None
    try:
        count = int(float(value))
    except (ValueError, TypeError, OverflowError):
        return None
    return count if count >= 0 else None


def student_count(school: SchoolRecord) -> int:
    """Student count used by aggregates; unset or malformed counts as 0."""
    return parse_student_count(school.students) or 0
