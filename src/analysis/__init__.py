from .normalize import normalize_score, parse_student_count, student_count
from .classify import classify_school, characterize, school_average
from .cohort import aggregate_cohort, analyze

__all__ = [
    "normalize_score",
    "parse_student_count",
    "student_count",
    "classify_school",
    "characterize",
    "school_average",
    "aggregate_cohort",
    "analyze",
]
