"""Tests for CSV export of the mapping table."""

import csv
import io
from datetime import date

from src.data.models import Dimension, SchoolRecord
from src.data.export import export_csv, export_filename, schools_to_dataframe


def _school() -> SchoolRecord:
    school = SchoolRecord(id=1, name='Oak "Hill"', principal="Dana", students=320, notes="Line one, line two")
    school.dimensions[Dimension.MATH].score = 2
    school.dimensions[Dimension.MATH].challenge_indexes = {1, 0}
    return school


class TestSchoolsToDataframe:
    def test_columns(self):
        df = schools_to_dataframe([_school()], inspector="Yael")
        columns = list(df.columns)
        assert columns[:4] == ["Inspector", "School", "Principal", "Students"]
        assert columns[4:17] == [d.label for d in Dimension]
        assert columns[17] == "Notes"
        assert columns[18:] == [f"{d.label} challenges" for d in Dimension]

    def test_row_values(self):
        row = schools_to_dataframe([_school()], inspector="Yael").iloc[0]
        assert row["Inspector"] == "Yael"
        assert row["Students"] == "320"
        assert row["Math"] == "2"
        assert row["Language"] == ""
        assert row["Math challenges"] == "Gaps in number sense; Difficulty with word problems"

    def test_empty(self):
        df = schools_to_dataframe([])
        assert df.empty
        assert "Notes" in df.columns


class TestExportCsv:
    def test_bom_and_quoting(self):
        data = export_csv([_school()], inspector="Yael")
        assert data.startswith(b"\xef\xbb\xbf")
        text = data.decode("utf-8-sig")
        rows = list(csv.reader(io.StringIO(text)))
        assert rows[0][0] == "Inspector"
        assert rows[1][1] == 'Oak "Hill"'
        assert rows[1][17] == "Line one, line two"
        assert '"Inspector"' in text.splitlines()[0]


class TestExportFilename:
    def test_format(self):
        assert export_filename(date(2024, 3, 9)) == "school_mapping_09_03_2024.csv"
