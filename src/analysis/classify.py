"""Per-school risk classification."""

import copy
import math
from typing import Optional

from config.settings import get_settings
from src.data.constants import CHALLENGES
from src.data.models import Characterization, ClassifiedSchool, Dimension, SchoolRecord

from .normalize import rated_scores


def round_half_up(value: float, digits: int = 2) -> float:
    """Round to `digits` decimals with exact halves going up (2.625 -> 2.63)."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def school_average(school: SchoolRecord) -> Optional[float]:
    """Unweighted mean of the rated scores across all dimensions, None if nothing is rated."""
    scores = rated_scores(school.score(d) for d in Dimension)
    if not scores:
        return None
    return sum(scores) / len(scores)


def characterize(average: Optional[float]) -> tuple[Characterization, int]:
    """
    Map an average score to a characterization and tier.

    Bounds are inclusive on the risk side: 2.5 is high-risk, 3.5 is moderate.
    A school with no ratings is stable; missing data is not poor performance.
    """
    settings = get_settings()
    if average is None:
        return Characterization.STABLE, 1
    if average <= settings.HIGH_RISK_THRESHOLD:
        return Characterization.HIGH_RISK, 3
    if average <= settings.MODERATE_THRESHOLD:
        return Characterization.MODERATE, 2
    return Characterization.STABLE, 1


def specific_challenges(school: SchoolRecord) -> tuple[tuple[str, str], ...]:
    """Resolve tagged challenge indexes to (dimension label, challenge text) pairs."""
    resolved = []
    for dimension in Dimension:
        texts = CHALLENGES.get(dimension, [])
        for index in sorted(school.challenges(dimension)):
            if 0 <= index < len(texts):
                resolved.append((dimension.label, texts[index]))
    return tuple(resolved)


def classify_school(school: SchoolRecord) -> ClassifiedSchool:
    """Classify one school. The record is copied, never modified."""
    average = school_average(school)
    characterization, tier = characterize(average)
    return ClassifiedSchool(
        school=copy.deepcopy(school),
        characterization=characterization,
        tier=tier,
        average=round_half_up(average) if average is not None else None,
        specific_challenges=specific_challenges(school),
    )
