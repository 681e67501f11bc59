"""Streamlit session-state accessors shared by the pages."""

import logging
from typing import Optional

import streamlit as st

from config.settings import get_settings
from src.analysis.cohort import analyze
from src.data.models import AnalysisResult
from src.data.registry import SchoolRegistry
from src.insights.client import NarrativeClient, NarrativeError
from src.insights.requestor import InsightRequestor
from src.plan.wizard import PlanWizard

logger = logging.getLogger(__name__)


def get_registry() -> SchoolRegistry:
    if "registry" not in st.session_state:
        registry = SchoolRegistry()
        registry.load_demo()
        st.session_state.registry = registry
    return st.session_state.registry


def get_inspector() -> str:
    if "inspector" not in st.session_state:
        st.session_state.inspector = get_settings().DEFAULT_INSPECTOR
    return st.session_state.inspector


def get_narrative_client() -> Optional[NarrativeClient]:
    """Shared Gemini client, or None when no API key is configured."""
    if "narrative_client" not in st.session_state:
        try:
            st.session_state.narrative_client = NarrativeClient()
        except NarrativeError as e:
            logger.warning("Narrative service disabled: %s", e)
            st.session_state.narrative_client = None
    return st.session_state.narrative_client


def get_requestor() -> Optional[InsightRequestor]:
    if "insight_requestor" not in st.session_state:
        client = get_narrative_client()
        st.session_state.insight_requestor = (
            InsightRequestor(client.generate_insights) if client is not None else None
        )
    return st.session_state.insight_requestor


def current_analysis() -> AnalysisResult:
    """
    Numeric analysis of the latest collection, recomputed only when it changed.

    A change also supersedes any insight request still in flight.
    """
    registry = get_registry()
    if st.session_state.get("analysis_version") != registry.version or "analysis" not in st.session_state:
        result = analyze(registry.snapshot())
        st.session_state.analysis = result
        st.session_state.analysis_version = registry.version
        requestor = get_requestor()
        st.session_state.insight_generation = requestor.submit(result) if requestor else None
    return st.session_state.analysis


def get_wizard() -> PlanWizard:
    if "wizard" not in st.session_state:
        st.session_state.wizard = PlanWizard()
    return st.session_state.wizard
