import difflib      # for fuzzy matching of column names
from pathlib import Path

import pandas as pd

from .config import (
    ALIAS_MAP,
    COVERAGE_COLUMNS,
    REQUIRED_COLUMNS,
    SCHEDULE_COLUMNS,
    WEIGHT_COLUMNS,
)
from .exceptions import MissingColumnsError
from .models import ConceptRecord


def load_table(source, name=None):
    """
    input: path, or file-like object (uploaded file, stdin) plus its file name
    reads csv, json or excel (.xlsx) according to the extension; csv when there is none
    output: pandas dataframe
    """
    name = name or getattr(source, "name", None) or str(source)
    file_type = Path(str(name)).suffix.lower().lstrip(".")
    if file_type == "json":
        return pd.read_json(source)
    if file_type == "xlsx":
        return pd.read_excel(source)
    if file_type not in ["", "csv"]:
        raise ValueError("Unsupported file type. Use only excel (.xlsx), csv or json files")
    # keep text columns as text, e.g. a concept named "1"
    return pd.read_csv(source, dtype=str, skipinitialspace=True)


def normalize_columns(df):
    """
    input: dataframe as read
    output: copy with stripped, lower-cased and de-aliased column names
    """
    df = df.copy()
    df.columns = [str(col).strip().lower() for col in df.columns]
    df.rename(columns=lambda col: ALIAS_MAP.get(col, col), inplace=True)
    return df


def check_columns(df):
    """Raise MissingColumnsError, with close-match suggestions, if a required column is absent."""
    if REQUIRED_COLUMNS.issubset(df.columns):
        return
    missing = REQUIRED_COLUMNS - set(df.columns)
    suggestions = {}
    for col in sorted(missing):
        close = difflib.get_close_matches(col, list(df.columns), n=1, cutoff=0.6)
        if close:
            suggestions[col] = close[0]
    raise MissingColumnsError(missing, suggestions)


def _numeric(df, col):
    try:
        return pd.to_numeric(df[col])
    except (ValueError, TypeError):
        raise ValueError(f"The '{col}' column should contain only numbers.") from None


def _text(value):
    if pd.isna(value):
        return None
    return str(value)


def parse_df(df):
    """
    input: dataframe with at least concept (string) and dependencies
           (semicolon separated string) columns; category, week/earliest/latest
           and the weight/coverage columns are optional
    output: list of ConceptRecord, one per row, in row order
    """
    df = normalize_columns(df)
    check_columns(df)

    # fill in numeric defaults
    for col in list(WEIGHT_COLUMNS) + list(COVERAGE_COLUMNS):
        if col in df.columns:
            df[col] = _numeric(df, col).fillna(0.0)
    for col in SCHEDULE_COLUMNS:
        if col in df.columns:
            df[col] = _numeric(df, col)
            if (df[col].dropna() % 1 != 0).any():
                raise ValueError(f"The '{col}' column should contain only whole numbers.")

    records = []
    for index, row in df.iterrows():
        fields = {
            "concept": _text(row["concept"]) or "",
            "dependencies": _text(row["dependencies"]) or "",
            "category": _text(row["category"]) if "category" in df.columns else None,
        }
        for col, attr in {**WEIGHT_COLUMNS, **COVERAGE_COLUMNS}.items():
            if col in df.columns:
                fields[attr] = float(row[col])
        for col, attr in SCHEDULE_COLUMNS.items():
            if col in df.columns and not pd.isna(row[col]):
                fields[attr] = int(row[col])
        records.append(ConceptRecord(**fields))
    return records


def read_records(source, name=None):
    """load_table + parse_df."""
    return parse_df(load_table(source, name))
