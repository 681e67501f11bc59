"""
School Mapping & Intervention Planner

Record assessment data for the schools under an inspector's supervision,
classify them into MTSS tiers and build a structured intervention plan.
"""

import logging

import streamlit as st

from config.settings import get_settings
from src.session import current_analysis, get_registry

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="School Mapping Planner",
    page_icon="🏫",
    layout="wide",
    initial_sidebar_state="expanded",
)


def main():
    settings = get_settings()
    if not settings.has_google_key:
        st.sidebar.warning("GOOGLE_API_KEY is not set. AI insights and plan suggestions are disabled.")

    st.title("School Mapping & Intervention Planner")

    st.markdown(
        """
        Map the schools under your supervision and turn the mapping into an action plan:

        - **Academic scores**: Language, Math, English and Science on a 1-5 scale
        - **Organizational health**: climate, staff stability, vision, leadership and more
        - **Challenges**: tag specific challenges for every dimension

        ### Getting Started

        Use the sidebar to navigate between pages:

        1. **Mapping** - Enter schools, ratings, notes and challenges; export to CSV
        2. **Analysis** - MTSS tier classification, heat map and AI insights
        3. **Intervention Plan** - Define the central issue and author the plan step by step
        """
    )

    registry = get_registry()
    analysis = current_analysis()
    summary = analysis.summary

    col1, col2, col3, col4 = st.columns(4)

    with col1:
        st.metric(label="Schools", value=f"{summary.total_schools:,}")
        st.caption("In the current mapping")

    with col2:
        st.metric(label="Students", value=f"{summary.total_students:,}")
        st.caption("Across all schools")

    with col3:
        st.metric(label="High-risk", value=summary.risky_schools)
        st.caption("Tier 3 schools")

    with col4:
        st.metric(label="Stable", value=summary.excellent_schools)
        st.caption("Tier 1 schools")

    st.markdown("---")

    if not len(registry):
        st.info("💡 **Tip**: Start on the Mapping page. You can load a demo cohort to explore the tool.")
    else:
        st.info(
            "💡 **Tip**: Unrated dimensions are left out of every average. "
            "A school with no ratings at all is treated as stable."
        )


if __name__ == "__main__":
    main()
