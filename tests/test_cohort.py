"""Tests for cohort aggregation and the full analysis run."""

import copy
import json

from src.analysis.classify import classify_school
from src.analysis.cohort import aggregate_cohort, analyze
from src.data.models import Characterization, Dimension, ORG_SUMMARY_DIMENSIONS, SchoolRecord


def _school(school_id: int, scores: dict = None, students=None, name: str = "") -> SchoolRecord:
    school = SchoolRecord(id=school_id, name=name or f"School {school_id}", students=students)
    for dimension, score in (scores or {}).items():
        school.dimensions[dimension].score = score
    return school


def _all(score: int) -> dict:
    return {d: score for d in Dimension}


def _aggregate(schools):
    return aggregate_cohort([classify_school(s) for s in schools])


def _heat(summary, dimension):
    return next(h for h in summary.heat if h.dimension == dimension)


def _org(summary, dimension):
    return next(d for d in summary.organizational if d.name == dimension.label)


class TestSummaryCounters:
    def test_counts(self):
        schools = [
            _school(1, _all(2), students=100),
            _school(2, _all(3), students="300"),
            _school(3, _all(5), students=None),
            _school(4),
        ]
        summary = _aggregate(schools)
        assert summary.total_schools == 4
        assert summary.total_students == 400
        assert summary.risky_schools == 1
        assert summary.excellent_schools == 2

    def test_malformed_student_count_is_zero(self):
        summary = _aggregate([_school(1, students="lots"), _school(2, students=50)])
        assert summary.total_students == 50


class TestTierPartition:
    def test_every_school_in_exactly_one_bucket(self):
        schools = [_school(i, _all(score)) for i, score in enumerate([1, 2, 3, 4, 5, 3, 2], start=1)]
        summary = _aggregate(schools)
        assert len(summary.tier1) + len(summary.tier2) + len(summary.tier3) == summary.total_schools
        ids = [c.id for c in summary.tier1 + summary.tier2 + summary.tier3]
        assert sorted(ids) == [1, 2, 3, 4, 5, 6, 7]

    def test_buckets_preserve_input_order(self):
        schools = [_school(5, _all(2)), _school(2, _all(1)), _school(9, _all(2))]
        summary = _aggregate(schools)
        assert [c.id for c in summary.tier3] == [5, 2, 9]

    def test_overall_performance_matches_tiers(self):
        schools = [_school(1, _all(1)), _school(2, _all(1)), _school(3, _all(3)), _school(4, _all(5))]
        summary = _aggregate(schools)
        assert [(d.name, d.value) for d in summary.overall_performance] == [
            ("Low (1-2.5)", 2),
            ("Medium (2.51-3.5)", 1),
            ("High (3.51-5)", 1),
        ]


class TestHeatTable:
    def test_climate_scenario(self):
        schools = [
            _school(1, {Dimension.CLIMATE: 1}),
            _school(2, {Dimension.CLIMATE: 2}),
            _school(3, {Dimension.CLIMATE: 5}),
        ]
        summary = _aggregate(schools)
        climate = _heat(summary, Dimension.CLIMATE)
        assert climate.percentage == 67
        assert climate.low_schools == 2
        assert _org(summary, Dimension.CLIMATE).value == 2.67

    def test_covers_all_dimensions(self):
        summary = _aggregate([_school(1)])
        assert [h.dimension for h in summary.heat] == list(Dimension)

    def test_unrated_never_counts_as_low(self):
        summary = _aggregate([_school(1), _school(2, {Dimension.MATH: 4})])
        assert all(h.percentage == 0 for h in summary.heat)

    def test_half_rounds_up(self):
        summary = _aggregate([_school(1, {Dimension.MATH: 2}), _school(2, {Dimension.MATH: 5})])
        assert _heat(summary, Dimension.MATH).percentage == 50
        schools = [_school(i, {Dimension.MATH: 1 if i == 1 else 4}) for i in range(1, 9)]
        assert _heat(_aggregate(schools), Dimension.MATH).percentage == 13


class TestOrganizationalAverages:
    def test_five_summary_dimensions(self):
        summary = _aggregate([_school(1, _all(3))])
        assert [d.name for d in summary.organizational] == [d.label for d in ORG_SUMMARY_DIMENSIONS]
        assert all(d.value == 3.0 for d in summary.organizational)

    def test_denominator_uses_rated_only(self):
        schools = [_school(1, {Dimension.LEADERSHIP: 4}), _school(2), _school(3, {Dimension.LEADERSHIP: 1})]
        summary = _aggregate(schools)
        assert _org(summary, Dimension.LEADERSHIP).value == 2.5

    def test_exact_half_rounds_up(self):
        climate = [5, 5, 2, 2, 2, 2, 2, 1]
        schools = [_school(i, {Dimension.CLIMATE: score}) for i, score in enumerate(climate, start=1)]
        summary = _aggregate(schools)
        assert _org(summary, Dimension.CLIMATE).value == 2.63

    def test_zero_when_unrated(self):
        summary = _aggregate([_school(1, {Dimension.MATH: 3})])
        assert _org(summary, Dimension.STAFF_STABILITY).value == 0


class TestSchoolSize:
    def test_one_per_bucket(self):
        schools = [_school(i, students=n) for i, n in enumerate([100, 300, 500, 700], start=1)]
        summary = _aggregate(schools)
        assert [(d.name, d.value) for d in summary.school_size] == [
            ("Small (up to 250)", 1),
            ("Medium (251-400)", 1),
            ("Large (401-600)", 1),
            ("Very large (600+)", 1),
        ]

    def test_bucket_boundaries(self):
        schools = [_school(i, students=n) for i, n in enumerate([250, 251, 400, 401, 600, 601], start=1)]
        summary = _aggregate(schools)
        assert [d.value for d in summary.school_size] == [1, 2, 2, 1]

    def test_empty_buckets_omitted(self):
        summary = _aggregate([_school(1, students=700), _school(2, students=900)])
        assert [(d.name, d.value) for d in summary.school_size] == [("Very large (600+)", 2)]

    def test_unset_count_is_small(self):
        summary = _aggregate([_school(1)])
        assert [d.name for d in summary.school_size] == ["Small (up to 250)"]


class TestChallengeAnalysis:
    def test_tallies_tags(self):
        a, b = _school(1), _school(2)
        a.dimensions[Dimension.MATH].challenge_indexes = {0, 1}
        b.dimensions[Dimension.MATH].challenge_indexes = {0}
        summary = _aggregate([a, b])
        tally = summary.challenge_analysis[Dimension.MATH]
        assert tally.affected_schools == 2
        assert tally.challenges == {"Gaps in number sense": 2, "Difficulty with word problems": 1}
        assert Dimension.CLIMATE not in summary.challenge_analysis


class TestEmptyCohort:
    def test_all_zero(self):
        summary = aggregate_cohort([])
        assert summary.total_schools == 0
        assert summary.total_students == 0
        assert all(h.percentage == 0 for h in summary.heat)
        assert all(d.value == 0 for d in summary.organizational)
        assert all(d.value == 0 for d in summary.overall_performance)
        assert summary.school_size == ()
        assert summary.tier1 == summary.tier2 == summary.tier3 == ()


class TestAnalyze:
    def test_idempotent(self):
        schools = [_school(1, _all(2), students=100), _school(2, {Dimension.MATH: 4}, students=420)]
        assert analyze(schools) == analyze(schools)

    def test_does_not_mutate_input(self):
        schools = [_school(1, _all(2), students=100)]
        schools[0].dimensions[Dimension.MATH].challenge_indexes = {1}
        before = copy.deepcopy(schools)
        result = analyze(schools)
        result.schools[0].school.dimensions[Dimension.MATH].challenge_indexes.add(2)
        assert schools == before

    def test_later_edits_do_not_leak_into_result(self):
        schools = [_school(1, _all(2))]
        result = analyze(schools)
        schools[0].dimensions[Dimension.MATH].score = 5
        assert result.schools[0].school.score(Dimension.MATH) == 2

    def test_starts_without_insights(self):
        assert analyze([_school(1)]).insights == ()

    def test_order_only_affects_bucket_order(self):
        schools = [_school(1, _all(2), students=100), _school(2, _all(4), students=700), _school(3, _all(3))]
        forward = analyze(schools).summary
        backward = analyze(list(reversed(schools))).summary
        assert forward.heat == backward.heat
        assert forward.organizational == backward.organizational
        assert forward.school_size == backward.school_size
        assert forward.total_students == backward.total_students

    def test_payload_is_json_serializable(self):
        schools = [_school(1, _all(2), students=100)]
        schools[0].dimensions[Dimension.CLIMATE].challenge_indexes = {0}
        payload = analyze(schools).to_payload()
        decoded = json.loads(json.dumps(payload))
        assert decoded["summary"]["totalSchools"] == 1
        assert decoded["tiers"] == {"tier1": 0, "tier2": 0, "tier3": 1}
        assert decoded["schools"][0]["characterization"] == Characterization.HIGH_RISK.value
        assert decoded["schools"][0]["challenges"] == ["School Climate: Violence or bullying incidents"]
        assert len(decoded["heatmap"]) == 13
