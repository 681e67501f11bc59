"""
Intervention Plan Page - Define the central issue and author the plan step by step.
"""

import streamlit as st

from src.data.constants import (
    ACTION_CATEGORIES,
    FREQUENCY_OPTIONS,
    PARTNER_CATEGORIES,
    RESOURCE_CATEGORIES,
    SUGGESTED_ACTIONS_BANK,
    SUGGESTED_PARTNERS_BANK,
    SUGGESTED_RESOURCES_BANK,
    TARGET_AUDIENCE_OPTIONS,
    TASK_STATUSES,
    TIER_OPTIONS,
)
from src.data.models import AnalysisResult
from src.insights.requestor import suggest_plan
from src.plan.models import FinalIssue
from src.plan.report import render_report
from src.plan.wizard import PlanWizard, lines_to_list
from src.session import current_analysis, get_inspector, get_narrative_client, get_registry, get_wizard

st.set_page_config(
    page_title="Intervention Plan - School Mapping Planner",
    page_icon="🧭",
    layout="wide",
)


def _challenge_options(analysis: AnalysisResult) -> list[str]:
    options = []
    for dimension, tally in analysis.summary.challenge_analysis.items():
        for text, count in sorted(tally.challenges.items(), key=lambda kv: -kv[1]):
            options.append(f"{dimension.label}: {text} ({count} schools)")
    return options


def _render_issue_form(analysis: AnalysisResult) -> None:
    st.subheader("Central issue")
    issue: FinalIssue = st.session_state.get("final_issue") or FinalIssue()

    with st.form("issue_form"):
        options = [""] + _challenge_options(analysis)
        original = st.selectbox(
            "Challenge this issue grows from",
            options=options,
            index=options.index(issue.original_challenge) if issue.original_challenge in options else 0,
        )
        title = st.text_input("Issue title", value=issue.title)
        col1, col2 = st.columns(2)
        with col1:
            action = st.text_input("Action (what needs to change)", value=issue.action)
            subject = st.text_input("Subject (who it concerns)", value=issue.subject)
            level = st.selectbox(
                "Level",
                options=["", "Inspector", "School", "Classroom"],
                index=["", "Inspector", "School", "Classroom"].index(issue.level)
                if issue.level in ["", "Inspector", "School", "Classroom"] else 0,
            )
        with col2:
            context = st.text_area("Context", value=issue.context)
            result = st.text_area("Desired result", value=issue.result)
        vision = st.text_area("Vision", value=issue.vision)
        rationale = st.text_area("Rationale", value=issue.rationale)
        root_causes = st.text_area("Root causes (one per line)", value="\n".join(issue.root_causes))

        if st.form_submit_button("Save issue"):
            st.session_state.final_issue = FinalIssue(
                title=title,
                action=action,
                subject=subject,
                context=context,
                result=result,
                vision=vision,
                rationale=rationale,
                level=level,
                original_challenge=original,
                root_causes=[c for c in lines_to_list(root_causes) if c.strip()],
            )
            st.session_state.pop("suggestions_for", None)
            st.rerun()


def _request_suggestions(wizard: PlanWizard, issue: FinalIssue) -> None:
    """Fetch goal suggestions once per saved issue; failures keep the user's text."""
    if st.session_state.get("suggestions_for") == issue:
        return
    st.session_state.suggestions_for = issue
    client = get_narrative_client()
    if client is None:
        return
    with st.spinner("Generating goal suggestions..."):
        wizard.plan = suggest_plan(wizard.plan, issue, client.generate_plan_suggestions)


def _render_goals(wizard: PlanWizard) -> None:
    wizard.plan.main_goal = st.text_area("Main goal", value=wizard.plan.main_goal, height=100)
    objectives = st.text_area("SMART objectives (one per line)", value="\n".join(wizard.plan.smart_objectives))
    wizard.plan.smart_objectives = lines_to_list(objectives)


def _render_mtss(wizard: PlanWizard, analysis: AnalysisResult) -> None:
    plan = wizard.plan
    st.markdown("**Tier 1: Universal**")
    plan.tier1_outcomes = lines_to_list(
        st.text_area("Outcomes and actions for all schools", value="\n".join(plan.tier1_outcomes))
    )

    st.markdown("**Tier 2: Group support**")
    tier2_names = [c.name for c in analysis.summary.tier2]
    for group in list(plan.tier2_groups):
        with st.container(border=True):
            name = st.text_input("Group name", value=group.name, key=f"group_name_{group.id}")
            outcomes = st.text_area("Group outcomes", value="\n".join(group.outcomes), key=f"group_outcomes_{group.id}")
            schools = st.multiselect(
                "Schools",
                options=sorted(set(tier2_names) | set(group.schools)),
                default=group.schools,
                key=f"group_schools_{group.id}",
            )
            wizard.update_tier2_group(group.id, "name", name)
            wizard.update_tier2_group(group.id, "outcomes", lines_to_list(outcomes))
            wizard.update_tier2_group(group.id, "schools", schools)
            if st.button("Remove group", key=f"group_remove_{group.id}"):
                wizard.remove_tier2_group(group.id)
                st.rerun()
    if st.button("Add Tier 2 group"):
        wizard.add_tier2_group()
        st.rerun()

    st.markdown("**Tier 3: Intensive**")
    plan.tier3_outcomes = lines_to_list(
        st.text_area("Outcomes for schools in intensive support", value="\n".join(plan.tier3_outcomes))
    )


def _render_summary(wizard: PlanWizard) -> None:
    plan = wizard.plan
    st.markdown(f"**Main goal:** {plan.main_goal or '-'}")
    st.markdown("**Objectives:**")
    for objective in plan.smart_objectives:
        if objective.strip():
            st.write(f"- {objective}")
    st.markdown(f"**Tier 1 outcomes:** {len([o for o in plan.tier1_outcomes if o.strip()])}")
    st.markdown(f"**Tier 2 groups:** {len(plan.tier2_groups)}")
    st.markdown(f"**Tier 3 outcomes:** {len([o for o in plan.tier3_outcomes if o.strip()])}")


def _select(label: str, options: list[str], value: str, key: str) -> str:
    return st.selectbox(label, options=options, index=options.index(value) if value in options else 0, key=key)


def _render_actions(wizard: PlanWizard) -> None:
    col_main, col_bank = st.columns([2, 1])
    with col_main:
        for action in list(wizard.support.core_actions):
            with st.container(border=True):
                wizard.update_action(action.id, "name", st.text_input("Action", value=action.name, key=f"action_name_{action.id}"))
                wizard.update_action(
                    action.id, "description",
                    st.text_area("Description", value=action.description, key=f"action_desc_{action.id}"),
                )
                c1, c2, c3, c4 = st.columns(4)
                with c1:
                    wizard.update_action(action.id, "category", _select("Category", ACTION_CATEGORIES, action.category, f"action_cat_{action.id}"))
                with c2:
                    wizard.update_action(action.id, "tier", _select("Tier", TIER_OPTIONS, action.tier, f"action_tier_{action.id}"))
                with c3:
                    wizard.update_action(
                        action.id, "target_audience",
                        _select("Audience", TARGET_AUDIENCE_OPTIONS, action.target_audience, f"action_aud_{action.id}"),
                    )
                with c4:
                    wizard.update_action(action.id, "frequency", _select("Frequency", FREQUENCY_OPTIONS, action.frequency, f"action_freq_{action.id}"))
                if st.button("Remove", key=f"action_remove_{action.id}"):
                    wizard.remove_action(action.id)
                    st.rerun()
        if st.button("Add action"):
            wizard.add_action()
            st.rerun()
    with col_bank:
        st.markdown("**Suggestion bank**")
        for i, suggestion in enumerate(SUGGESTED_ACTIONS_BANK):
            st.caption(f"{suggestion['name']} · {suggestion['tier']}")
            if st.button("Add", key=f"bank_action_{i}"):
                wizard.add_action(**suggestion)
                st.rerun()


def _render_partners_and_resources(wizard: PlanWizard) -> None:
    col1, col2 = st.columns(2)
    with col1:
        st.markdown("**Partners**")
        for partner in list(wizard.support.partners):
            with st.container(border=True):
                wizard.update_partner(partner.id, "name", st.text_input("Partner", value=partner.name, key=f"partner_name_{partner.id}"))
                wizard.update_partner(partner.id, "category", _select("Category", PARTNER_CATEGORIES, partner.category, f"partner_cat_{partner.id}"))
                wizard.update_partner(partner.id, "role", st.text_input("Role", value=partner.role, key=f"partner_role_{partner.id}"))
                if st.button("Remove", key=f"partner_remove_{partner.id}"):
                    wizard.remove_partner(partner.id)
                    st.rerun()
        if st.button("Add partner"):
            wizard.add_partner()
            st.rerun()
        for i, suggestion in enumerate(SUGGESTED_PARTNERS_BANK):
            if st.button(f"+ {suggestion['name']}", key=f"bank_partner_{i}"):
                wizard.add_partner(**suggestion)
                st.rerun()
    with col2:
        st.markdown("**Resources**")
        for resource in list(wizard.support.resources):
            with st.container(border=True):
                wizard.update_resource(resource.id, "name", st.text_input("Resource", value=resource.name, key=f"resource_name_{resource.id}"))
                wizard.update_resource(
                    resource.id, "category",
                    _select("Category", RESOURCE_CATEGORIES, resource.category, f"resource_cat_{resource.id}"),
                )
                wizard.update_resource(resource.id, "details", st.text_input("Details", value=resource.details, key=f"resource_details_{resource.id}"))
                if st.button("Remove", key=f"resource_remove_{resource.id}"):
                    wizard.remove_resource(resource.id)
                    st.rerun()
        if st.button("Add resource"):
            wizard.add_resource()
            st.rerun()
        for i, suggestion in enumerate(SUGGESTED_RESOURCES_BANK):
            if st.button(f"+ {suggestion['name']}", key=f"bank_resource_{i}"):
                wizard.add_resource(**suggestion)
                st.rerun()


def _render_tasks(wizard: PlanWizard) -> None:
    action_ids = [""] + [a.id for a in wizard.support.core_actions]
    action_names = {a.id: a.name or "(unnamed action)" for a in wizard.support.core_actions}
    for task in list(wizard.support.operational_plan):
        with st.container(border=True):
            c1, c2 = st.columns(2)
            with c1:
                wizard.update_task(task.id, "task", st.text_input("Task", value=task.task, key=f"task_task_{task.id}"))
                wizard.update_task(task.id, "responsible", st.text_input("Responsible", value=task.responsible, key=f"task_resp_{task.id}"))
                wizard.update_task(
                    task.id, "action_id",
                    st.selectbox(
                        "Core action",
                        options=action_ids,
                        index=action_ids.index(task.action_id) if task.action_id in action_ids else 0,
                        format_func=lambda i: action_names.get(i, "-"),
                        key=f"task_action_{task.id}",
                    ),
                )
            with c2:
                wizard.update_task(task.id, "start_date", st.text_input("Start date", value=task.start_date, key=f"task_start_{task.id}"))
                wizard.update_task(task.id, "end_date", st.text_input("End date", value=task.end_date, key=f"task_end_{task.id}"))
                wizard.update_task(task.id, "status", _select("Status", TASK_STATUSES, task.status, f"task_status_{task.id}"))
            if st.button("Remove", key=f"task_remove_{task.id}"):
                wizard.remove_task(task.id)
                st.rerun()
    if st.button("Add task"):
        wizard.add_task()
        st.rerun()


def _render_report(wizard: PlanWizard, analysis: AnalysisResult, issue: FinalIssue) -> None:
    st.markdown("The plan is complete. Download the full report to share it.")
    html = render_report(analysis, issue, wizard.plan, wizard.support, inspector=get_inspector())
    st.download_button(
        "📄 Download full report",
        data=html.encode("utf-8"),
        file_name="intervention_plan_report.html",
        mime="text/html",
    )
    if st.button("Start over"):
        for key in ("wizard", "final_issue", "suggestions_for"):
            st.session_state.pop(key, None)
        st.rerun()


def main():
    st.title("🧭 Intervention Plan")

    if not len(get_registry()):
        st.info("👈 Add schools on the Mapping page first.")
        return

    analysis = current_analysis()
    _render_issue_form(analysis)

    issue = st.session_state.get("final_issue")
    if issue is None:
        st.info("Save the central issue to start building the plan.")
        return

    wizard = get_wizard()
    _request_suggestions(wizard, issue)

    st.divider()
    st.progress((wizard.step + 1) / len(wizard.steps), text=f"Step {wizard.step + 1} of {len(wizard.steps)}: {wizard.step_title}")

    renderers = [
        lambda: _render_goals(wizard),
        lambda: _render_mtss(wizard, analysis),
        lambda: _render_summary(wizard),
        lambda: _render_actions(wizard),
        lambda: _render_partners_and_resources(wizard),
        lambda: _render_tasks(wizard),
        lambda: _render_report(wizard, analysis, issue),
    ]
    with st.container(border=True):
        renderers[wizard.step]()

    col1, _, col2 = st.columns([1, 4, 1])
    with col1:
        if not wizard.is_first and st.button("← Back"):
            wizard.back()
            st.rerun()
    with col2:
        if not wizard.is_last and st.button("Next →"):
            wizard.next()
            st.rerun()


if __name__ == "__main__":
    main()
