"""State and edits for the multi-step intervention-plan wizard."""

import uuid
from dataclasses import fields, replace
from typing import Optional

from src.data.constants import (
    ACTION_CATEGORIES,
    FREQUENCY_OPTIONS,
    PARTNER_CATEGORIES,
    RESOURCE_CATEGORIES,
    TARGET_AUDIENCE_OPTIONS,
    TASK_STATUSES,
    TIER_OPTIONS,
    WIZARD_STEPS,
)

from .models import (
    InterventionPlan,
    PlanSuggestion,
    SupportPlan,
    SupportPlanAction,
    SupportPlanPartner,
    SupportPlanResource,
    SupportPlanTask,
    Tier2Group,
)


def apply_suggestions(plan: InterventionPlan, suggestion: Optional[PlanSuggestion]) -> InterventionPlan:
    """Replace goal and objectives only when the suggestion has both; otherwise keep the plan."""
    if suggestion is None or not suggestion.is_usable:
        return plan
    return replace(
        plan,
        main_goal=suggestion.main_goal.strip(),
        smart_objectives=[o.strip() for o in suggestion.smart_objectives if o.strip()],
    )


def lines_to_list(text: str) -> list[str]:
    """Split textarea input into one entry per line."""
    return text.split("\n") if text else []


def _new_id() -> str:
    return uuid.uuid4().hex[:12]


def _update(items: list, item_id: str, field_name: str, value) -> None:
    allowed = {f.name for f in fields(items[0])} - {"id"} if items else set()
    for item in items:
        if item.id == item_id:
            if field_name not in allowed:
                raise ValueError(f"Unknown field: {field_name}")
            setattr(item, field_name, value)
            return
    raise KeyError(f"Unknown item id: {item_id}")


def _remove(items: list, item_id: str) -> list:
    return [item for item in items if item.id != item_id]


class PlanWizard:
    """Holds the plans being authored and the current wizard step."""

    def __init__(self, plan: Optional[InterventionPlan] = None, support: Optional[SupportPlan] = None):
        self.step = 0
        self.plan = plan or InterventionPlan()
        self.support = support or SupportPlan()

    @property
    def steps(self) -> list[str]:
        return WIZARD_STEPS

    @property
    def step_title(self) -> str:
        return WIZARD_STEPS[self.step]

    @property
    def is_first(self) -> bool:
        return self.step == 0

    @property
    def is_last(self) -> bool:
        return self.step == len(WIZARD_STEPS) - 1

    def next(self) -> int:
        self.step = min(self.step + 1, len(WIZARD_STEPS) - 1)
        return self.step

    def back(self) -> int:
        self.step = max(self.step - 1, 0)
        return self.step

    def apply_suggestions(self, suggestion: Optional[PlanSuggestion]) -> bool:
        """Merge a service suggestion into the plan; True if anything changed."""
        updated = apply_suggestions(self.plan, suggestion)
        changed = updated is not self.plan
        self.plan = updated
        return changed

    # -------------------------------------------------------------------------
    # MTSS tiers
    # -------------------------------------------------------------------------

    def add_tier2_group(self, name: Optional[str] = None) -> Tier2Group:
        group = Tier2Group(
            id=_new_id(),
            name=name or f"Tier 2 group {len(self.plan.tier2_groups) + 1}",
        )
        self.plan.tier2_groups.append(group)
        return group

    def update_tier2_group(self, group_id: str, field_name: str, value) -> None:
        _update(self.plan.tier2_groups, group_id, field_name, value)

    def remove_tier2_group(self, group_id: str) -> None:
        self.plan.tier2_groups = _remove(self.plan.tier2_groups, group_id)

    # -------------------------------------------------------------------------
    # Support plan
    # -------------------------------------------------------------------------

    def add_action(self, **prefill) -> SupportPlanAction:
        """Add a core action, optionally prefilled from the suggestion bank."""
        values = {
            "category": ACTION_CATEGORIES[0],
            "tier": TIER_OPTIONS[0],
            "target_audience": TARGET_AUDIENCE_OPTIONS[0],
            "frequency": FREQUENCY_OPTIONS[0],
        }
        values.update({k: v for k, v in prefill.items() if k != "id"})
        action = SupportPlanAction(id=_new_id(), **values)
        self.support.core_actions.append(action)
        return action

    def update_action(self, action_id: str, field_name: str, value) -> None:
        _update(self.support.core_actions, action_id, field_name, value)

    def remove_action(self, action_id: str) -> None:
        self.support.core_actions = _remove(self.support.core_actions, action_id)
        # Tasks keep their text but lose the link to a deleted action
        for task in self.support.operational_plan:
            if task.action_id == action_id:
                task.action_id = ""

    def add_partner(self, **prefill) -> SupportPlanPartner:
        values = {"category": PARTNER_CATEGORIES[0]}
        values.update({k: v for k, v in prefill.items() if k != "id"})
        partner = SupportPlanPartner(id=_new_id(), **values)
        self.support.partners.append(partner)
        return partner

    def update_partner(self, partner_id: str, field_name: str, value) -> None:
        _update(self.support.partners, partner_id, field_name, value)

    def remove_partner(self, partner_id: str) -> None:
        self.support.partners = _remove(self.support.partners, partner_id)

    def add_resource(self, **prefill) -> SupportPlanResource:
        values = {"category": RESOURCE_CATEGORIES[0]}
        values.update({k: v for k, v in prefill.items() if k != "id"})
        resource = SupportPlanResource(id=_new_id(), **values)
        self.support.resources.append(resource)
        return resource

    def update_resource(self, resource_id: str, field_name: str, value) -> None:
        _update(self.support.resources, resource_id, field_name, value)

    def remove_resource(self, resource_id: str) -> None:
        self.support.resources = _remove(self.support.resources, resource_id)

    def add_task(self, **prefill) -> SupportPlanTask:
        values = {"status": TASK_STATUSES[0]}
        values.update({k: v for k, v in prefill.items() if k != "id"})
        task = SupportPlanTask(id=_new_id(), **values)
        self.support.operational_plan.append(task)
        return task

    def update_task(self, task_id: str, field_name: str, value) -> None:
        _update(self.support.operational_plan, task_id, field_name, value)

    def remove_task(self, task_id: str) -> None:
        self.support.operational_plan = _remove(self.support.operational_plan, task_id)
