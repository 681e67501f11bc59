"""In-memory school collection edited on the mapping page."""

import copy
import logging
from typing import Optional

from src.analysis.normalize import normalize_score, parse_student_count

from .constants import CHALLENGES, DEMO_SCHOOLS
from .models import Dimension, SchoolRecord

logger = logging.getLogger(__name__)

TEXT_FIELDS = ("name", "principal", "notes")


class SchoolRegistry:
    """Ordered, mutable collection of SchoolRecords with monotonic ids."""

    def __init__(self):
        self._schools: list[SchoolRecord] = []
        self._next_id = 1
        self.version = 0

    def __len__(self) -> int:
        return len(self._schools)

    def __iter__(self):
        return iter(self._schools)

    @property
    def schools(self) -> list[SchoolRecord]:
        return list(self._schools)

    def _touch(self) -> None:
        self.version += 1

    def get(self, school_id: int) -> SchoolRecord:
        for school in self._schools:
            if school.id == school_id:
                return school
        raise KeyError(f"Unknown school id: {school_id}")

    # -------------------------------------------------------------------------
    # Collection edits
    # -------------------------------------------------------------------------

    def add_school(self, name: str = "", principal: str = "", students=None, notes: str = "") -> SchoolRecord:
        """Append a new school with every dimension unrated."""
        school = SchoolRecord(
            id=self._next_id,
            name=name,
            principal=principal,
            students=parse_student_count(students),
            notes=notes,
        )
        self._next_id += 1
        self._schools.append(school)
        self._touch()
        return school

    def remove_school(self, school_id: int) -> None:
        school = self.get(school_id)
        self._schools.remove(school)
        self._touch()

    def clear(self) -> None:
        """Remove every school. Ids keep increasing so they are never reused."""
        self._schools = []
        self._touch()

    def load_demo(self) -> None:
        """Replace the collection with the demo cohort."""
        self._schools = []
        for name, principal, students, scores, notes in DEMO_SCHOOLS:
            school = self.add_school(name=name, principal=principal, students=students, notes=notes)
            for dimension, raw in zip(Dimension, scores):
                school.dimensions[dimension].score = normalize_score(raw)
        logger.info("Loaded %d demo schools", len(self._schools))
        self._touch()

    # -------------------------------------------------------------------------
    # Field edits
    # -------------------------------------------------------------------------

    def update_field(self, school_id: int, field_name: str, value) -> None:
        """Update a free-text field or the student count."""
        school = self.get(school_id)
        if field_name == "students":
            school.students = parse_student_count(value)
        elif field_name in TEXT_FIELDS:
            setattr(school, field_name, "" if value is None else str(value))
        else:
            raise ValueError(f"Unknown field: {field_name}")
        self._touch()

    def set_score(self, school_id: int, dimension: Dimension, value) -> Optional[int]:
        """Store a rating; anything outside 1-5 becomes unrated."""
        score = normalize_score(value)
        self.get(school_id).dimensions[dimension].score = score
        self._touch()
        return score

    def set_challenge(self, school_id: int, dimension: Dimension, index: int, checked: bool) -> None:
        """Tag or untag one challenge. Repeated tags have no extra effect."""
        if not 0 <= index < len(CHALLENGES.get(dimension, [])):
            logger.warning("Ignoring challenge index %s for %s", index, dimension.value)
            return
        indexes = self.get(school_id).dimensions[dimension].challenge_indexes
        if checked:
            indexes.add(index)
        else:
            indexes.discard(index)
        self._touch()

    def snapshot(self) -> list[SchoolRecord]:
        """Deep copy of the collection, safe to hand to the analysis engine."""
        return copy.deepcopy(self._schools)
