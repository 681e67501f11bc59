"""Tests for the intervention-plan wizard and its HTML report."""

from dataclasses import replace
from datetime import date

import pytest

from src.analysis.cohort import analyze
from src.data.constants import SUGGESTED_ACTIONS_BANK, WIZARD_STEPS
from src.data.models import Dimension, Insight, SchoolRecord
from src.plan.models import FinalIssue, InterventionPlan, PlanSuggestion
from src.plan.report import render_report
from src.plan.wizard import PlanWizard, apply_suggestions, lines_to_list


class TestNavigation:
    def test_starts_at_first_step(self):
        wizard = PlanWizard()
        assert wizard.step == 0
        assert wizard.is_first
        assert wizard.step_title == WIZARD_STEPS[0]

    def test_next_clamps_at_last(self):
        wizard = PlanWizard()
        for _ in range(len(WIZARD_STEPS) + 3):
            wizard.next()
        assert wizard.step == len(WIZARD_STEPS) - 1
        assert wizard.is_last

    def test_back_clamps_at_first(self):
        wizard = PlanWizard()
        wizard.next()
        wizard.back()
        wizard.back()
        assert wizard.step == 0


class TestApplySuggestions:
    def test_replaces_goal_and_objectives(self):
        plan = InterventionPlan(main_goal="old", smart_objectives=["old"], tier1_outcomes=["keep"])
        updated = apply_suggestions(plan, PlanSuggestion(" New goal ", ("A", " ", "B ")))
        assert updated.main_goal == "New goal"
        assert updated.smart_objectives == ["A", "B"]
        assert updated.tier1_outcomes == ["keep"]

    @pytest.mark.parametrize(
        "suggestion",
        [None, PlanSuggestion("", ("A",)), PlanSuggestion("Goal", ()), PlanSuggestion("Goal", ("", "  "))],
    )
    def test_unusable_suggestion_leaves_plan(self, suggestion):
        plan = InterventionPlan(main_goal="mine", smart_objectives=["keep"])
        assert apply_suggestions(plan, suggestion) is plan

    def test_wizard_reports_change(self):
        wizard = PlanWizard()
        assert wizard.apply_suggestions(PlanSuggestion("Goal", ("A",)))
        assert not wizard.apply_suggestions(PlanSuggestion("", ()))
        assert wizard.plan.main_goal == "Goal"


class TestTier2Groups:
    def test_add_update_remove(self):
        wizard = PlanWizard()
        first = wizard.add_tier2_group()
        second = wizard.add_tier2_group()
        assert first.name == "Tier 2 group 1"
        assert second.name == "Tier 2 group 2"
        assert first.id != second.id

        wizard.update_tier2_group(first.id, "outcomes", ["Shared coaching"])
        assert wizard.plan.tier2_groups[0].outcomes == ["Shared coaching"]

        wizard.remove_tier2_group(first.id)
        assert [g.id for g in wizard.plan.tier2_groups] == [second.id]

    def test_update_unknown_field_raises(self):
        wizard = PlanWizard()
        group = wizard.add_tier2_group()
        with pytest.raises(ValueError):
            wizard.update_tier2_group(group.id, "id", "x")

    def test_update_unknown_id_raises(self):
        wizard = PlanWizard()
        wizard.add_tier2_group()
        with pytest.raises(KeyError):
            wizard.update_tier2_group("missing", "name", "x")


class TestSupportPlan:
    def test_action_defaults(self):
        action = PlanWizard().add_action()
        assert action.category == "Professional development"
        assert action.tier == "Tier 1"
        assert action.frequency == "Weekly"

    def test_action_from_bank(self):
        wizard = PlanWizard()
        action = wizard.add_action(**SUGGESTED_ACTIONS_BANK[2])
        assert action.name == SUGGESTED_ACTIONS_BANK[2]["name"]
        assert action.tier == "Tier 3"

    def test_removing_action_unlinks_tasks(self):
        wizard = PlanWizard()
        action = wizard.add_action(name="Coaching")
        task = wizard.add_task(task="Schedule sessions", action_id=action.id)
        wizard.remove_action(action.id)
        assert wizard.support.core_actions == []
        assert task.action_id == ""
        assert task.status == "Not started"

    def test_partners_and_resources(self):
        wizard = PlanWizard()
        partner = wizard.add_partner(name="Municipality")
        resource = wizard.add_resource(name="Budget")
        wizard.update_partner(partner.id, "role", "Funding")
        wizard.update_resource(resource.id, "details", "50k")
        assert wizard.support.partners[0].role == "Funding"
        assert wizard.support.resources[0].details == "50k"
        wizard.remove_partner(partner.id)
        wizard.remove_resource(resource.id)
        assert wizard.support.partners == []
        assert wizard.support.resources == []


class TestLinesToList:
    def test_split(self):
        assert lines_to_list("a\nb") == ["a", "b"]

    def test_empty(self):
        assert lines_to_list("") == []


class TestRenderReport:
    def _analysis(self):
        school = SchoolRecord(id=1, name="Riverside <Middle>", students=540)
        for dimension in Dimension:
            school.dimensions[dimension].score = 2
        result = analyze([school])
        return replace(result, insights=(Insight("Trend", "Low climate"),))

    def test_contains_sections_and_escapes(self):
        wizard = PlanWizard()
        wizard.plan.main_goal = "Raise achievement & belonging"
        wizard.plan.smart_objectives = ["Objective A", ""]
        wizard.add_tier2_group("Math group")
        action = wizard.add_action(name="Coaching")
        wizard.add_task(task="Kickoff", action_id=action.id)
        issue = FinalIssue(title="Low climate", root_causes=["Turnover"])

        html = render_report(self._analysis(), issue, wizard.plan, wizard.support, inspector="Yael", today=date(2024, 1, 2))

        assert html.startswith("<!DOCTYPE html>")
        assert "Riverside &lt;Middle&gt;" in html
        assert "Raise achievement &amp; belonging" in html
        assert "Objective A" in html
        assert "Math group" in html
        assert "<td>Kickoff</td>" in html
        assert "<td>Coaching</td>" in html
        assert "Turnover" in html
        assert "02/01/2024" in html
        assert "Low climate" in html
        assert "540" in html

    def test_empty_plan_renders(self):
        html = render_report(self._analysis(), FinalIssue(), InterventionPlan(), PlanWizard().support)
        assert "None specified." in html
