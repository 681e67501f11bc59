"""CSV export of the mapping table."""

import csv
from datetime import date
from typing import Iterable, Optional

import pandas as pd

from .constants import CHALLENGES
from .models import Dimension, SchoolRecord


def schools_to_dataframe(schools: Iterable[SchoolRecord], inspector: str = "") -> pd.DataFrame:
    """One row per school: identity, scores, notes, then tagged challenge texts."""
    rows = []
    for school in schools:
        row = {
            "Inspector": inspector,
            "School": school.name,
            "Principal": school.principal,
            "Students": "" if school.students is None else str(school.students),
        }
        for dimension in Dimension:
            score = school.score(dimension)
            row[dimension.label] = "" if score is None else str(score)
        row["Notes"] = school.notes
        for dimension in Dimension:
            texts = CHALLENGES.get(dimension, [])
            row[f"{dimension.label} challenges"] = "; ".join(
                texts[i] for i in sorted(school.challenges(dimension)) if 0 <= i < len(texts)
            )
        rows.append(row)

    columns = (
        ["Inspector", "School", "Principal", "Students"]
        + [d.label for d in Dimension]
        + ["Notes"]
        + [f"{d.label} challenges" for d in Dimension]
    )
    return pd.DataFrame(rows, columns=columns)


def export_csv(schools: Iterable[SchoolRecord], inspector: str = "") -> bytes:
    """UTF-8 CSV with a byte-order mark so spreadsheet apps detect the encoding."""
    df = schools_to_dataframe(schools, inspector)
    text = df.to_csv(index=False, quoting=csv.QUOTE_ALL)
    return text.encode("utf-8-sig")


def export_filename(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"school_mapping_{today.strftime('%d_%m_%Y')}.csv"
