"""Data models for the central issue and the intervention/support plans."""

from dataclasses import asdict, dataclass, field


@dataclass
class GeneratedIssue:
    """A central issue described in the inspector's own words."""

    title: str = ""
    action: str = ""
    subject: str = ""
    context: str = ""
    result: str = ""
    vision: str = ""
    rationale: str = ""
    level: str = ""


@dataclass
class FinalIssue(GeneratedIssue):
    """The issue the plan is built around, with the challenge it came from."""

    original_challenge: str = ""
    root_causes: list[str] = field(default_factory=list)

    def to_payload(self) -> dict:
        return asdict(self)


@dataclass
class Tier2Group:
    id: str
    name: str
    outcomes: list[str] = field(default_factory=list)
    schools: list[str] = field(default_factory=list)


@dataclass
class InterventionPlan:
    main_goal: str = ""
    smart_objectives: list[str] = field(default_factory=list)
    tier1_outcomes: list[str] = field(default_factory=list)
    tier2_groups: list[Tier2Group] = field(default_factory=list)
    tier3_outcomes: list[str] = field(default_factory=list)


@dataclass
class SupportPlanAction:
    id: str
    name: str = ""
    description: str = ""
    category: str = ""
    tier: str = ""
    target_audience: str = ""
    frequency: str = ""


@dataclass
class SupportPlanPartner:
    id: str
    name: str = ""
    category: str = ""
    role: str = ""


@dataclass
class SupportPlanResource:
    id: str
    name: str = ""
    category: str = ""
    details: str = ""


@dataclass
class SupportPlanTask:
    id: str
    task: str = ""
    responsible: str = ""
    start_date: str = ""
    end_date: str = ""
    status: str = ""
    action_id: str = ""


@dataclass
class SupportPlan:
    core_actions: list[SupportPlanAction] = field(default_factory=list)
    partners: list[SupportPlanPartner] = field(default_factory=list)
    resources: list[SupportPlanResource] = field(default_factory=list)
    operational_plan: list[SupportPlanTask] = field(default_factory=list)


@dataclass(frozen=True)
class PlanSuggestion:
    """Main goal and SMART objectives proposed by the text-generation service."""

    main_goal: str = ""
    smart_objectives: tuple[str, ...] = ()

    @property
    def is_usable(self) -> bool:
        return bool(self.main_goal.strip()) and any(o.strip() for o in self.smart_objectives)
