"""Data models for school mapping records and their analysis results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Dimension(Enum):
    """A rated rubric dimension. The set is closed: 4 academic, 9 organizational."""

    LANGUAGE = "language"
    MATH = "math"
    ENGLISH = "english"
    SCIENCE = "science"
    CLIMATE = "climate"
    STAFF_STABILITY = "staff_stability"
    VISION = "vision"
    STAFF_QUALITY = "staff_quality"
    LEADERSHIP = "leadership"
    COLLABORATION = "collaboration"
    PARENT_INVOLVEMENT = "parent_involvement"
    TEACHING_ORGANIZATION = "teaching_organization"
    TEACHER_COLLABORATION = "teacher_collaboration"

    @property
    def label(self) -> str:
        return DIMENSION_LABELS[self]

    @property
    def is_academic(self) -> bool:
        return self in ACADEMIC_DIMENSIONS


DIMENSION_LABELS = {
    Dimension.LANGUAGE: "Language",
    Dimension.MATH: "Math",
    Dimension.ENGLISH: "English",
    Dimension.SCIENCE: "Science",
    Dimension.CLIMATE: "School Climate",
    Dimension.STAFF_STABILITY: "Staff Stability",
    Dimension.VISION: "Vision",
    Dimension.STAFF_QUALITY: "Staff Quality",
    Dimension.LEADERSHIP: "Leadership",
    Dimension.COLLABORATION: "Collaboration",
    Dimension.PARENT_INVOLVEMENT: "Parent Involvement",
    Dimension.TEACHING_ORGANIZATION: "Teaching Organization",
    Dimension.TEACHER_COLLABORATION: "Teacher Collaboration",
}

ACADEMIC_DIMENSIONS = (
    Dimension.LANGUAGE,
    Dimension.MATH,
    Dimension.ENGLISH,
    Dimension.SCIENCE,
)

ORGANIZATIONAL_DIMENSIONS = tuple(d for d in Dimension if d not in ACADEMIC_DIMENSIONS)

# Dimensions summarized in the organizational-functioning chart
ORG_SUMMARY_DIMENSIONS = (
    Dimension.CLIMATE,
    Dimension.STAFF_STABILITY,
    Dimension.LEADERSHIP,
    Dimension.COLLABORATION,
    Dimension.PARENT_INVOLVEMENT,
)


class Characterization(str, Enum):
    """Overall status label derived from a school's tier."""

    STABLE = "stable"
    MODERATE = "moderate-challenges"
    HIGH_RISK = "high-risk"


@dataclass
class RatedDimension:
    """Score and tagged challenges for one dimension of one school."""

    score: Optional[int] = None  # 1-5, None means unrated
    challenge_indexes: set[int] = field(default_factory=set)


def _empty_dimensions() -> dict[Dimension, RatedDimension]:
    return {d: RatedDimension() for d in Dimension}


@dataclass
class SchoolRecord:
    """A school as entered by the inspector. Never holds derived values."""

    id: int
    name: str = ""
    principal: str = ""
    students: Optional[int] = None
    notes: str = ""
    dimensions: dict[Dimension, RatedDimension] = field(default_factory=_empty_dimensions)

    def score(self, dimension: Dimension) -> Optional[int]:
        rated = self.dimensions.get(dimension)
        return rated.score if rated is not None else None

    def challenges(self, dimension: Dimension) -> set[int]:
        rated = self.dimensions.get(dimension)
        return rated.challenge_indexes if rated is not None else set()

    @property
    def display_name(self) -> str:
        return self.name or f"School #{self.id}"


@dataclass(frozen=True)
class ClassifiedSchool:
    """A snapshot of a school record plus its freshly derived classification."""

    school: SchoolRecord
    characterization: Characterization
    tier: int
    average: Optional[float] = None
    specific_challenges: tuple[tuple[str, str], ...] = ()

    @property
    def id(self) -> int:
        return self.school.id

    @property
    def name(self) -> str:
        return self.school.display_name


@dataclass(frozen=True)
class HeatEntry:
    """Share of schools scoring low on one dimension."""

    dimension: Dimension
    label: str
    percentage: int
    low_schools: int


@dataclass(frozen=True)
class ChartDatum:
    """A single named value for bar/pie charts."""

    name: str
    value: float


@dataclass(frozen=True)
class ChallengeTally:
    """How often each challenge of a dimension was tagged across the cohort."""

    challenges: dict[str, int]
    affected_schools: int


@dataclass(frozen=True)
class CohortSummary:
    """Aggregate counters and chart tables for one analysis run."""

    total_schools: int
    total_students: int
    risky_schools: int
    excellent_schools: int
    tier1: tuple[ClassifiedSchool, ...]
    tier2: tuple[ClassifiedSchool, ...]
    tier3: tuple[ClassifiedSchool, ...]
    heat: tuple[HeatEntry, ...]
    organizational: tuple[ChartDatum, ...]
    overall_performance: tuple[ChartDatum, ...]
    school_size: tuple[ChartDatum, ...]
    challenge_analysis: dict[Dimension, ChallengeTally] = field(default_factory=dict)


@dataclass(frozen=True)
class Insight:
    """A narrative item produced by the text-generation service."""

    title: str
    text: str


@dataclass(frozen=True)
class AnalysisResult:
    """Everything the dashboard and plan wizard need from one analysis run."""

    schools: tuple[ClassifiedSchool, ...]
    summary: CohortSummary
    insights: tuple[Insight, ...] = ()

    def to_payload(self) -> dict:
        """JSON-serializable projection sent to the narrative service."""
        s = self.summary
        return {
            "summary": {
                "totalSchools": s.total_schools,
                "totalStudents": s.total_students,
                "riskySchools": s.risky_schools,
                "excellentSchools": s.excellent_schools,
            },
            "tiers": {
                "tier1": len(s.tier1),
                "tier2": len(s.tier2),
                "tier3": len(s.tier3),
            },
            "heatmap": [
                {"field": h.label, "percentage": h.percentage, "lowSchools": h.low_schools}
                for h in s.heat
            ],
            "organizational": [{"name": d.name, "value": d.value} for d in s.organizational],
            "schools": [
                {
                    "name": c.name,
                    "characterization": c.characterization.value,
                    "tier": c.tier,
                    "average": c.average,
                    "challenges": [f"{label}: {text}" for label, text in c.specific_challenges],
                }
                for c in self.schools
            ],
        }
