"""Narrative-service boundary: merges generated text into analysis results without touching numbers."""

import logging
import threading
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeout
from dataclasses import replace
from typing import Callable, Optional

from config.settings import get_settings
from src.data.models import AnalysisResult, Insight
from src.plan.models import FinalIssue, InterventionPlan, PlanSuggestion
from src.plan.wizard import apply_suggestions

from .client import NarrativeError

logger = logging.getLogger(__name__)

FALLBACK_INSIGHT = Insight(
    title="Insights unavailable",
    text="AI insights could not be generated. All figures and classifications above are unaffected.",
)

InsightGenerator = Callable[[dict], list[Insight]]
PlanGenerator = Callable[[FinalIssue], PlanSuggestion]


def request_insights(result: AnalysisResult, generate: InsightGenerator) -> AnalysisResult:
    """
    Ask the narrative service for insights and merge them into the result.

    Any failure, including a non-conforming response, yields exactly one
    fallback insight. Numeric fields are carried over unchanged.
    """
    try:
        insights = generate(result.to_payload())
        if not isinstance(insights, (list, tuple)) or not insights:
            raise NarrativeError("Narrative service returned no insights")
        if not all(isinstance(i, Insight) for i in insights):
            raise NarrativeError("Narrative service returned malformed insights")
    except Exception as e:
        logger.warning("Insight generation failed, using fallback: %s", e)
        insights = [FALLBACK_INSIGHT]
    return replace(result, insights=tuple(insights))


def suggest_plan(plan: InterventionPlan, issue: FinalIssue, generate: PlanGenerator) -> InterventionPlan:
    """Fill the main goal and objectives from the service; failures leave the plan as is."""
    try:
        suggestion = generate(issue)
    except Exception as e:
        logger.warning("Plan suggestion failed, keeping user-entered plan: %s", e)
        return plan
    return apply_suggestions(plan, suggestion)


class InsightRequestor:
    """
    Runs insight requests in the background with last-request-wins semantics.

    Each submit() starts a new generation. A response is kept only if its
    generation is still the latest when it arrives; stale ones are dropped.
    """

    def __init__(self, generate: InsightGenerator, executor: Optional[ThreadPoolExecutor] = None):
        self._generate = generate
        self._executor = executor or ThreadPoolExecutor(
            max_workers=get_settings().NARRATIVE_WORKERS,
            thread_name_prefix="insights",
        )
        self._lock = threading.Lock()
        self._generation = 0
        self._future: Optional[Future] = None
        self._latest: Optional[AnalysisResult] = None

    @property
    def generation(self) -> int:
        return self._generation

    def submit(self, result: AnalysisResult) -> int:
        """Supersede any pending request with one for this result; returns its generation."""
        with self._lock:
            self._generation += 1
            generation = self._generation
            self._latest = None
            if self._future is not None:
                self._future.cancel()

        future = self._executor.submit(request_insights, result, self._generate)
        future.add_done_callback(lambda f: self._store(generation, f))
        with self._lock:
            if generation == self._generation:
                self._future = future
        return generation

    def _store(self, generation: int, future: Future) -> None:
        if future.cancelled():
            return
        merged = future.result()
        with self._lock:
            if generation != self._generation:
                logger.info("Discarding stale insights for generation %d", generation)
                return
            self._latest = merged

    def latest(self, generation: Optional[int] = None) -> Optional[AnalysisResult]:
        """Merged result for the current generation, or None while it is pending or superseded."""
        with self._lock:
            if generation is not None and generation != self._generation:
                return None
            return self._latest

    def is_pending(self, generation: Optional[int] = None) -> bool:
        """True while the current request is still running and has not been superseded."""
        with self._lock:
            if generation is not None and generation != self._generation:
                return False
            if self._latest is not None or self._future is None:
                return False
            return not self._future.cancelled()

    def wait(self, timeout: Optional[float] = None) -> Optional[AnalysisResult]:
        """Block until the current request finishes and return its merged result."""
        with self._lock:
            future, generation = self._future, self._generation
        if future is None:
            return self.latest(generation)
        try:
            future.result(timeout=timeout)
        except (CancelledError, FutureTimeout):
            return None
        self._store(generation, future)
        return self.latest(generation)

    def shutdown(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)
