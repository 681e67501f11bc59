from .client import NarrativeClient, NarrativeError, parse_insights, parse_plan_suggestions
from .requestor import FALLBACK_INSIGHT, InsightRequestor, request_insights, suggest_plan

__all__ = [
    "NarrativeClient",
    "NarrativeError",
    "parse_insights",
    "parse_plan_suggestions",
    "FALLBACK_INSIGHT",
    "InsightRequestor",
    "request_insights",
    "suggest_plan",
]
