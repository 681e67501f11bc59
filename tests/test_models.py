"""Tests for data models — dataclass creation and computed properties."""

from src.data.constants import CHALLENGES
from src.data.models import (
    ACADEMIC_DIMENSIONS,
    Characterization,
    ClassifiedSchool,
    Dimension,
    ORG_SUMMARY_DIMENSIONS,
    ORGANIZATIONAL_DIMENSIONS,
    RatedDimension,
    SchoolRecord,
)
from src.plan.models import FinalIssue, PlanSuggestion


class TestDimension:
    def test_thirteen_dimensions(self):
        assert len(Dimension) == 13

    def test_academic_and_organizational_partition(self):
        assert len(ACADEMIC_DIMENSIONS) == 4
        assert len(ORGANIZATIONAL_DIMENSIONS) == 9
        assert set(ACADEMIC_DIMENSIONS) | set(ORGANIZATIONAL_DIMENSIONS) == set(Dimension)
        assert Dimension.MATH.is_academic
        assert not Dimension.CLIMATE.is_academic

    def test_org_summary_dimensions(self):
        assert ORG_SUMMARY_DIMENSIONS == (
            Dimension.CLIMATE,
            Dimension.STAFF_STABILITY,
            Dimension.LEADERSHIP,
            Dimension.COLLABORATION,
            Dimension.PARENT_INVOLVEMENT,
        )

    def test_every_dimension_has_label_and_challenges(self):
        for dimension in Dimension:
            assert dimension.label
            assert CHALLENGES[dimension]


class TestSchoolRecord:
    def test_defaults(self):
        school = SchoolRecord(id=1)
        assert school.name == ""
        assert school.principal == ""
        assert school.notes == ""
        assert school.students is None
        assert set(school.dimensions) == set(Dimension)
        assert all(r == RatedDimension() for r in school.dimensions.values())

    def test_dimensions_not_shared(self):
        a, b = SchoolRecord(id=1), SchoolRecord(id=2)
        a.dimensions[Dimension.MATH].score = 3
        a.dimensions[Dimension.MATH].challenge_indexes.add(0)
        assert b.score(Dimension.MATH) is None
        assert b.challenges(Dimension.MATH) == set()

    def test_display_name_falls_back_to_id(self):
        assert SchoolRecord(id=4).display_name == "School #4"
        assert SchoolRecord(id=4, name="Oak Hill").display_name == "Oak Hill"


class TestClassifiedSchool:
    def test_identity_passthrough(self):
        classified = ClassifiedSchool(
            school=SchoolRecord(id=3, name="Lakeview"),
            characterization=Characterization.MODERATE,
            tier=2,
        )
        assert classified.id == 3
        assert classified.name == "Lakeview"
        assert classified.characterization == "moderate-challenges"
        assert classified.specific_challenges == ()


class TestPlanModels:
    def test_final_issue_payload(self):
        issue = FinalIssue(title="Climate", root_causes=["Turnover"])
        payload = issue.to_payload()
        assert payload["title"] == "Climate"
        assert payload["root_causes"] == ["Turnover"]
        assert payload["original_challenge"] == ""

    def test_plan_suggestion_usable(self):
        assert PlanSuggestion("Goal", ("A",)).is_usable
        assert not PlanSuggestion("  ", ("A",)).is_usable
        assert not PlanSuggestion("Goal", ("  ",)).is_usable
