"""Cohort-level aggregation: summary counters, heat table and chart distributions."""

import copy
import logging
import math
from typing import Iterable, Sequence

from config.settings import get_settings
from src.data.constants import CHALLENGES
from src.data.models import (
    AnalysisResult,
    ChallengeTally,
    Characterization,
    ChartDatum,
    ClassifiedSchool,
    CohortSummary,
    Dimension,
    HeatEntry,
    ORG_SUMMARY_DIMENSIONS,
    SchoolRecord,
)

from .classify import classify_school, round_half_up
from .normalize import normalize_score, student_count

logger = logging.getLogger(__name__)


# Student-count buckets: (label, lower bound exclusive, upper bound inclusive)
SIZE_BUCKETS = [
    ("Small (up to 250)", None, 250),
    ("Medium (251-400)", 250, 400),
    ("Large (401-600)", 400, 600),
    ("Very large (600+)", 600, None),
]

PERFORMANCE_LABELS = {
    3: "Low (1-2.5)",
    2: "Medium (2.51-3.5)",
    1: "High (3.51-5)",
}


def _percentage(part: int, whole: int) -> int:
    """Rounded percentage, half-up; 0 for an empty whole."""
    if whole <= 0:
        return 0
    return int(math.floor(100 * part / whole + 0.5))


def _mean(values: Sequence[int], digits: int = 2) -> float:
    if not values:
        return 0
    return round_half_up(sum(values) / len(values), digits)


def heat_table(schools: Sequence[ClassifiedSchool]) -> tuple[HeatEntry, ...]:
    """Per dimension, the share of schools with a rated score at or below the low cutoff."""
    cutoff = get_settings().LOW_SCORE_CUTOFF
    entries = []
    for dimension in Dimension:
        low = 0
        for c in schools:
            score = normalize_score(c.school.score(dimension))
            if score is not None and score <= cutoff:
                low += 1
        entries.append(
            HeatEntry(
                dimension=dimension,
                label=dimension.label,
                percentage=_percentage(low, len(schools)),
                low_schools=low,
            )
        )
    return tuple(entries)


def organizational_averages(schools: Sequence[ClassifiedSchool]) -> tuple[ChartDatum, ...]:
    """Mean rated score for each organizational summary dimension, 0 when none are rated."""
    data = []
    for dimension in ORG_SUMMARY_DIMENSIONS:
        scores = []
        for c in schools:
            score = normalize_score(c.school.score(dimension))
            if score is not None:
                scores.append(score)
        data.append(ChartDatum(name=dimension.label, value=_mean(scores)))
    return tuple(data)


def school_size_distribution(schools: Sequence[ClassifiedSchool]) -> tuple[ChartDatum, ...]:
    """Count schools per student-count bucket, omitting empty buckets."""
    counts = [0] * len(SIZE_BUCKETS)
    for c in schools:
        students = student_count(c.school)
        for i, (_, lower, upper) in enumerate(SIZE_BUCKETS):
            if (lower is None or students > lower) and (upper is None or students <= upper):
                counts[i] += 1
                break
    return tuple(
        ChartDatum(name=label, value=count)
        for (label, _, _), count in zip(SIZE_BUCKETS, counts)
        if count > 0
    )


def challenge_analysis(schools: Sequence[ClassifiedSchool]) -> dict[Dimension, ChallengeTally]:
    """How many schools tagged each challenge, per dimension that has any tags."""
    analysis = {}
    for dimension in Dimension:
        texts = CHALLENGES.get(dimension, [])
        tally: dict[str, int] = {}
        affected = 0
        for c in schools:
            indexes = [i for i in sorted(c.school.challenges(dimension)) if 0 <= i < len(texts)]
            if not indexes:
                continue
            affected += 1
            for i in indexes:
                tally[texts[i]] = tally.get(texts[i], 0) + 1
        if affected:
            analysis[dimension] = ChallengeTally(challenges=tally, affected_schools=affected)
    return analysis


def aggregate_cohort(schools: Sequence[ClassifiedSchool]) -> CohortSummary:
    """
    Summarize a classified cohort.

    Pure and deterministic: tier buckets keep input order, every other field
    is independent of it. Unrated scores never enter a denominator.
    """
    schools = list(schools)
    tiers = {1: [], 2: [], 3: []}
    for c in schools:
        tiers[c.tier].append(c)

    return CohortSummary(
        total_schools=len(schools),
        total_students=sum(student_count(c.school) for c in schools),
        risky_schools=sum(1 for c in schools if c.characterization == Characterization.HIGH_RISK),
        excellent_schools=sum(1 for c in schools if c.characterization == Characterization.STABLE),
        tier1=tuple(tiers[1]),
        tier2=tuple(tiers[2]),
        tier3=tuple(tiers[3]),
        heat=heat_table(schools),
        organizational=organizational_averages(schools),
        overall_performance=tuple(
            ChartDatum(name=PERFORMANCE_LABELS[tier], value=len(tiers[tier])) for tier in (3, 2, 1)
        ),
        school_size=school_size_distribution(schools),
        challenge_analysis=challenge_analysis(schools),
    )


def analyze(records: Iterable[SchoolRecord]) -> AnalysisResult:
    """Classify and aggregate a snapshot of the school collection. Insights start empty."""
    snapshot = copy.deepcopy(list(records))
    classified = tuple(classify_school(r) for r in snapshot)
    summary = aggregate_cohort(classified)
    logger.info(
        "Analyzed %d schools: %d tier 1, %d tier 2, %d tier 3",
        summary.total_schools,
        len(summary.tier1),
        len(summary.tier2),
        len(summary.tier3),
    )
    return AnalysisResult(schools=classified, summary=summary)
