from .models import FinalIssue, GeneratedIssue, InterventionPlan, PlanSuggestion, SupportPlan
from .wizard import PlanWizard, apply_suggestions

__all__ = [
    "FinalIssue",
    "GeneratedIssue",
    "InterventionPlan",
    "PlanSuggestion",
    "SupportPlan",
    "PlanWizard",
    "apply_suggestions",
]
