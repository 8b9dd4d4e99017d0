import io

import pandas as pd
import pytest

from conceptmap.exceptions import MissingColumnsError
from conceptmap.input_parser import load_table, normalize_columns, parse_df, read_records
from conceptmap.models import ConceptRecord

CSV = """concept,dependencies,category,week,lecture weight,lab weight,hw weight,lecture coverage
Sets,,basics,1,1.0,0.5,,1
Functions,Sets,basics,,2.0,,1.0,
Limits,Functions; Sets,calculus,3,1.5,1.0,0.5,
"""


def test_read_records_from_csv_buffer():
    records = read_records(io.StringIO(CSV), name="concepts.csv")

    assert [r.concept for r in records] == ["Sets", "Functions", "Limits"]
    assert records[0] == ConceptRecord(
        concept="Sets",
        dependencies="",
        category="basics",
        week=1,
        lecture_weight=1.0,
        lab_weight=0.5,
        hw_weight=0.0,
        lecture_coverage=1.0,
    )
    assert records[1].week is None
    assert records[2].dependencies == "Functions; Sets"


def test_optional_columns_default():
    df = pd.DataFrame({"Concept": ["A", "B"], "Dependencies": ["", "A"]})
    records = parse_df(df)
    assert records == [
        ConceptRecord(concept="A", dependencies=""),
        ConceptRecord(concept="B", dependencies="A"),
    ]


def test_column_aliases():
    df = pd.DataFrame({" Topic ": ["A"], "Prerequisites": [None], "Lecture": [2]})
    assert list(normalize_columns(df).columns) == ["concept", "dependencies", "lecture weight"]
    [record] = parse_df(df)
    assert record.lecture_weight == 2.0
    assert record.category is None


def test_missing_columns_suggest_close_matches():
    df = pd.DataFrame({"concepts": ["A"], "dependncies": [""]})
    with pytest.raises(MissingColumnsError) as excinfo:
        parse_df(df)
    assert excinfo.value.missing == ["concept", "dependencies"]
    assert excinfo.value.suggestions == {"concept": "concepts", "dependencies": "dependncies"}
    assert "Did you mean" in str(excinfo.value)


def test_non_numeric_weight_is_rejected():
    df = pd.DataFrame({"concept": ["A"], "dependencies": [""], "lab weight": ["lots"]})
    with pytest.raises(ValueError, match="lab weight"):
        parse_df(df)


def test_load_table_reads_json(tmp_path):
    path = tmp_path / "concepts.json"
    path.write_text('[{"concept": "A", "dependencies": ""}]')
    df = load_table(path)
    assert list(df["concept"]) == ["A"]


def test_fractional_week_is_rejected():
    df = pd.DataFrame({"concept": ["A", "B"], "dependencies": ["", ""], "week": [1, 1.5]})
    with pytest.raises(ValueError, match="week"):
        parse_df(df)


def test_whole_number_schedule_columns_are_kept():
    df = pd.DataFrame({"concept": ["A", "B"], "dependencies": ["", ""], "earliest": [2.0, None]})
    first, second = parse_df(df)
    assert first.earliest == 2
    assert second.earliest is None


def test_load_table_rejects_old_excel_format(tmp_path):
    path = tmp_path / "concepts.xls"
    path.write_text("concept,dependencies\n")
    with pytest.raises(ValueError, match="Unsupported file type"):
        load_table(path)
