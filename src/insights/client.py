"""Gemini client for narrative insights and plan suggestions."""

import json
import logging
from typing import Any, Optional

from google import genai
from google.genai import types

from config.settings import get_settings
from src.data.models import Insight
from src.plan.models import FinalIssue, PlanSuggestion

from .prompts import (
    INSIGHTS_SYSTEM_PROMPT,
    PLAN_SYSTEM_PROMPT,
    build_insights_prompt,
    build_plan_prompt,
)

logger = logging.getLogger(__name__)


class NarrativeError(Exception):
    """The narrative service failed or returned something unusable."""


def _load_json(text: Optional[str]) -> Any:
    if not text:
        raise NarrativeError("Empty response from narrative service")
    cleaned = text.strip()
    # Models sometimes wrap JSON in a markdown fence even in JSON mode
    if cleaned.startswith("```"):
        cleaned = cleaned.strip("`")
        if cleaned.startswith("json"):
            cleaned = cleaned[len("json"):]
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise NarrativeError(f"Response is not valid JSON: {e}") from e


def parse_insights(text: Optional[str]) -> list[Insight]:
    """
    Parse a narrative response into Insight items.

    Accepts a JSON array of {"title", "text"} objects, or an object holding
    such an array under "insights". Any other shape raises NarrativeError;
    a response with one bad item is rejected as a whole.
    """
    data = _load_json(text)
    if isinstance(data, dict) and "insights" in data:
        data = data["insights"]
    if not isinstance(data, list) or not data:
        raise NarrativeError("Expected a non-empty list of insights")

    insights = []
    for item in data:
        if not isinstance(item, dict):
            raise NarrativeError(f"Insight is not an object: {item!r}")
        title, body = item.get("title"), item.get("text")
        if not isinstance(title, str) or not isinstance(body, str):
            raise NarrativeError(f"Insight missing string title/text: {item!r}")
        insights.append(Insight(title=title, text=body))
    return insights


def parse_plan_suggestions(text: Optional[str]) -> PlanSuggestion:
    """Parse {"mainGoal": str, "smartObjectives": [str]} into a PlanSuggestion."""
    data = _load_json(text)
    if not isinstance(data, dict):
        raise NarrativeError("Expected a JSON object with mainGoal and smartObjectives")
    main_goal = data.get("mainGoal", "")
    objectives = data.get("smartObjectives", [])
    if not isinstance(main_goal, str) or not isinstance(objectives, list):
        raise NarrativeError("mainGoal must be a string and smartObjectives a list")
    if not all(isinstance(o, str) for o in objectives):
        raise NarrativeError("smartObjectives must only contain strings")
    return PlanSuggestion(main_goal=main_goal, smart_objectives=tuple(objectives))


class NarrativeClient:
    """Calls Gemini in JSON mode for insights and plan suggestions."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        settings = get_settings()
        api_key = api_key or settings.GOOGLE_API_KEY
        if not api_key:
            raise NarrativeError("GOOGLE_API_KEY is not configured")
        self.client = genai.Client(api_key=api_key)
        self.model_name = model or settings.LLM_MODEL
        self.temperature = settings.LLM_TEMPERATURE
        self.max_tokens = settings.LLM_MAX_TOKENS

    def _generate(self, system_prompt: str, prompt: str) -> Optional[str]:
        config = types.GenerateContentConfig(
            system_instruction=system_prompt,
            temperature=self.temperature,
            max_output_tokens=self.max_tokens,
            response_mime_type="application/json",
        )
        response = self.client.models.generate_content(
            model=self.model_name,
            contents=prompt,
            config=config,
        )
        return response.text

    def generate_insights(self, payload: dict) -> list[Insight]:
        """Ask for narrative insights about an analysis payload."""
        prompt = build_insights_prompt(json.dumps(payload, ensure_ascii=False, indent=2))
        return parse_insights(self._generate(INSIGHTS_SYSTEM_PROMPT, prompt))

    def generate_plan_suggestions(self, issue: FinalIssue) -> PlanSuggestion:
        """Ask for a main goal and SMART objectives for a central issue."""
        prompt = build_plan_prompt(json.dumps(issue.to_payload(), ensure_ascii=False, indent=2))
        return parse_plan_suggestions(self._generate(PLAN_SYSTEM_PROMPT, prompt))
