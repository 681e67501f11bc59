"""
Analysis Page - MTSS classification, charts and AI insights.
"""

import pandas as pd
import streamlit as st

from src.data.models import AnalysisResult
from src.insights.requestor import FALLBACK_INSIGHT
from src.session import current_analysis, get_registry, get_requestor
from src.viz.charts import (
    create_heat_radar,
    create_organizational_chart,
    create_performance_chart,
    create_school_size_chart,
)

st.set_page_config(
    page_title="Analysis - School Mapping Planner",
    page_icon="📊",
    layout="wide",
)

INSIGHT_POLL_SECONDS = 2

TIER_DESCRIPTIONS = [
    ("Tier 1 - Universal support", "tier1", "All schools receive universal support: professional development, ongoing guidance and basic support."),
    ("Tier 2 - Targeted support", "tier2", "Schools with moderate challenges that need targeted intervention on top of universal support."),
    ("Tier 3 - Intensive intervention", "tier3", "High-risk schools that need immediate, intensive intervention."),
]


def _render_summary(analysis: AnalysisResult) -> None:
    summary = analysis.summary
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("📚 Total schools", summary.total_schools)
    with col2:
        st.metric("👨‍🎓 Total students", f"{summary.total_students:,}")
    with col3:
        st.metric("⚠️ High-risk schools", summary.risky_schools)
    with col4:
        st.metric("⭐ Stable schools", summary.excellent_schools)


def _render_tiers(analysis: AnalysisResult) -> None:
    st.subheader("🎯 MTSS Classification")
    for title, attr, description in TIER_DESCRIPTIONS:
        schools = getattr(analysis.summary, attr)
        with st.container(border=True):
            st.markdown(f"**{title}** · {len(schools)} schools")
            st.caption(description)
            if schools:
                st.write(", ".join(c.name for c in schools))


def _render_school_table(analysis: AnalysisResult) -> None:
    rows = [
        {
            "School": c.name,
            "Average": c.average,
            "Characterization": c.characterization.value,
            "Tier": c.tier,
            "Challenges": len(c.specific_challenges),
        }
        for c in analysis.schools
    ]
    st.dataframe(pd.DataFrame(rows), hide_index=True, use_container_width=True)


@st.fragment(run_every=INSIGHT_POLL_SECONDS)
def _render_insights() -> None:
    """Show the insights once they arrive; the rest of the page stays interactive meanwhile."""
    st.subheader("💡 Key Insights and Patterns (AI)")
    requestor = get_requestor()
    if requestor is None:
        insights = [FALLBACK_INSIGHT]
    else:
        generation = st.session_state.get("insight_generation")
        merged = requestor.latest(generation)
        if merged is None and requestor.is_pending(generation):
            st.info("⏳ Generating insights... they will appear here when ready.")
            return
        insights = merged.insights if merged is not None else [FALLBACK_INSIGHT]
        if merged is not None:
            st.session_state.analysis = merged

    for insight in insights:
        with st.container(border=True):
            st.markdown(f"**{insight.title}**")
            st.write(insight.text)


def main():
    st.title("📊 Analysis Dashboard")

    registry = get_registry()
    if not len(registry):
        st.info("👈 Add schools on the Mapping page first.")
        return

    analysis = current_analysis()

    _render_summary(analysis)
    st.divider()
    _render_tiers(analysis)

    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(create_heat_radar(analysis.summary.heat), use_container_width=True)
        st.plotly_chart(create_performance_chart(analysis.summary.overall_performance), use_container_width=True)
    with col2:
        st.plotly_chart(create_organizational_chart(analysis.summary.organizational), use_container_width=True)
        st.plotly_chart(create_school_size_chart(analysis.summary.school_size), use_container_width=True)

    with st.expander("Per-school classification"):
        _render_school_table(analysis)

    if analysis.summary.challenge_analysis:
        with st.expander("Tagged challenges across the cohort"):
            for dimension, tally in analysis.summary.challenge_analysis.items():
                st.markdown(f"**{dimension.label}** ({tally.affected_schools} schools)")
                for text, count in sorted(tally.challenges.items(), key=lambda kv: -kv[1]):
                    st.write(f"- {text}: {count}")

    st.divider()
    _render_insights()

    st.markdown("---")
    st.page_link("pages/3_intervention_plan.py", label="Continue to the central issue →", icon="🧭")


if __name__ == "__main__":
    main()
