from .models import (
    Dimension,
    Characterization,
    RatedDimension,
    SchoolRecord,
    ClassifiedSchool,
    CohortSummary,
    Insight,
    AnalysisResult,
)

__all__ = [
    "Dimension",
    "Characterization",
    "RatedDimension",
    "SchoolRecord",
    "ClassifiedSchool",
    "CohortSummary",
    "Insight",
    "AnalysisResult",
]
