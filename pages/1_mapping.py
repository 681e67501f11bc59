"""
Mapping Page - Enter schools, ratings and challenges.
"""

import streamlit as st

from src.analysis.normalize import parse_student_count
from src.data.constants import CHALLENGES
from src.data.export import export_csv, export_filename
from src.data.models import ACADEMIC_DIMENSIONS, ORGANIZATIONAL_DIMENSIONS, Dimension, SchoolRecord
from src.data.registry import SchoolRegistry
from src.session import get_inspector, get_registry

st.set_page_config(
    page_title="Mapping - School Mapping Planner",
    page_icon="📝",
    layout="wide",
)

SCORE_OPTIONS = ["", "1", "2", "3", "4", "5"]
SCORE_LABELS = {
    "": "Select level",
    "1": "1 - Very low",
    "2": "2 - Low",
    "3": "3 - Medium",
    "4": "4 - High",
    "5": "5 - Very high",
}


def _sync_text(registry: SchoolRegistry, school: SchoolRecord, field_name: str, value) -> None:
    if field_name == "students":
        changed = parse_student_count(value) != school.students
    else:
        changed = value != getattr(school, field_name)
    if changed:
        registry.update_field(school.id, field_name, value)


def _render_dimension(registry: SchoolRegistry, school: SchoolRecord, dimension: Dimension) -> None:
    score = school.score(dimension)
    current = "" if score is None else str(score)
    selected = st.selectbox(
        dimension.label,
        options=SCORE_OPTIONS,
        index=SCORE_OPTIONS.index(current),
        format_func=lambda v: SCORE_LABELS[v],
        key=f"score_{school.id}_{dimension.value}",
    )
    if selected != current:
        registry.set_score(school.id, dimension, selected)

    tagged = school.challenges(dimension)
    with st.popover(f"🎯 Challenges ({len(tagged)})", use_container_width=True):
        for index, text in enumerate(CHALLENGES[dimension]):
            checked = st.checkbox(
                text,
                value=index in tagged,
                key=f"challenge_{school.id}_{dimension.value}_{index}",
            )
            if checked != (index in tagged):
                registry.set_challenge(school.id, dimension, index, checked)


def _render_school(registry: SchoolRegistry, school: SchoolRecord) -> None:
    with st.expander(f"🏫 {school.display_name}", expanded=not school.name):
        col1, col2, col3, col4 = st.columns([3, 3, 2, 1])
        with col1:
            name = st.text_input("School name", value=school.name, key=f"name_{school.id}")
            _sync_text(registry, school, "name", name)
        with col2:
            principal = st.text_input("Principal", value=school.principal, key=f"principal_{school.id}")
            _sync_text(registry, school, "principal", principal)
        with col3:
            students = st.text_input(
                "Students",
                value="" if school.students is None else str(school.students),
                key=f"students_{school.id}",
            )
            _sync_text(registry, school, "students", students)
        with col4:
            st.write("")
            if st.button("🗑️ Delete", key=f"remove_{school.id}"):
                registry.remove_school(school.id)
                st.rerun()

        st.markdown("**Academic achievement**")
        cols = st.columns(len(ACADEMIC_DIMENSIONS))
        for col, dimension in zip(cols, ACADEMIC_DIMENSIONS):
            with col:
                _render_dimension(registry, school, dimension)

        st.markdown("**Organizational health**")
        per_row = 5
        for start in range(0, len(ORGANIZATIONAL_DIMENSIONS), per_row):
            row = ORGANIZATIONAL_DIMENSIONS[start:start + per_row]
            cols = st.columns(per_row)
            for col, dimension in zip(cols, row):
                with col:
                    _render_dimension(registry, school, dimension)

        notes = st.text_area(
            "Notes and planned actions",
            value=school.notes,
            key=f"notes_{school.id}",
        )
        _sync_text(registry, school, "notes", notes)


def main():
    st.title("📝 School Mapping")
    st.markdown("Rate each school on a 1-5 scale and tag the challenges you observed.")

    registry = get_registry()

    with st.sidebar:
        st.header("Mapping Controls")
        st.session_state.inspector = st.text_input("Inspector name", value=get_inspector())

        if st.button("➕ Add School", use_container_width=True):
            registry.add_school()
            st.rerun()

        if st.button("Load Demo Data", use_container_width=True):
            registry.load_demo()
            st.rerun()

        if st.button("Clear All", use_container_width=True):
            registry.clear()
            st.rerun()

        st.divider()
        st.download_button(
            "⬇️ Export CSV",
            data=export_csv(registry.schools, st.session_state.inspector),
            file_name=export_filename(),
            mime="text/csv",
            use_container_width=True,
            disabled=not len(registry),
        )

    if not len(registry):
        st.info("👈 Add a school or load the demo data to get started.")
        return

    st.caption(f"{len(registry)} schools in the mapping")
    for school in registry.schools:
        _render_school(registry, school)

    st.markdown("---")
    st.page_link("pages/2_analysis.py", label="Continue to analysis →", icon="📊")


if __name__ == "__main__":
    main()
