"""
Complaint Data Preprocessing Module
====================================
This module handles loading the complaint export, date parsing, tag explosion and
missing-value canonicalization.

Key Functions:
- load_complaints(): Reads the raw export with every field as text
- parse_dates(): Converts date fields to datetimes (NaT when unparseable)
- explode_tags(): One row per tag value, other fields duplicated
- canonicalize_missing(): Empty strings and "N/A" become NaN
- normalize_complaints(): Full normalization workflow
"""

import logging
from pathlib import Path

import numpy as np
import pandas as pd

from .config import (
    COMPLAINT_SCHEMA,
    DATE_FORMAT,
    DEFAULT_FIELD_SPEC,
    MISSING_MARKERS,
    REQUIRED_COLUMNS,
    TAG_SEPARATOR,
    TAGS_COL,
)

logger = logging.getLogger(__name__)


def load_complaints(file_path):
    """
    Load the complaint export from a CSV file.

    Every column is read as text and no value is turned into NaN here, so the
    normalizer sees the literal empty strings and "N/A" markers.

    Args:
        file_path: Path to the complaints CSV file

    Returns:
        DataFrame of raw complaint records

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file cannot be parsed or lacks a required column
    """
    file_path = Path(file_path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Complaints file not found: {file_path}")

    try:
        df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise ValueError(f"Could not read complaints file {file_path}: {e}") from e

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"Complaints file {file_path} is missing columns: {', '.join(missing)}")

    logger.info(f"Loaded {len(df)} complaints with {len(df.columns)} columns from {file_path}")
    return df


def _field_spec(column):
    return COMPLAINT_SCHEMA.get(column, DEFAULT_FIELD_SPEC)


def _columns_of_type(df, field_type):
    return [col for col in df.columns if _field_spec(col)[0] == field_type]


def parse_dates(df):
    """
    Parse every date field declared in the schema.

    Values that do not match DATE_FORMAT (including empty strings) become NaT.

    Args:
        df: DataFrame of complaint records

    Returns:
        New DataFrame with datetime64 date columns
    """
    df = df.copy()
    for col in _columns_of_type(df, 'date'):
        df[col] = pd.to_datetime(df[col], format=DATE_FORMAT, errors='coerce')
        logger.debug(f"Parsed {col}: {df[col].isna().sum()} missing or unparseable")
    return df


def _split_tags(value):
    if isinstance(value, str):
        return value.split(TAG_SEPARATOR)
    return [value]


def explode_tags(df):
    """
    Split multi-valued tags into separate rows.

    A value like "Older American, Servicemember" yields two rows that share
    every other field, including the complaint identifier. A record without
    tags passes through once.

    Args:
        df: DataFrame with a 'Tags' column

    Returns:
        New DataFrame with one tag value per row
    """
    if TAGS_COL not in df.columns:
        return df.copy()

    df = df.copy()
    df[TAGS_COL] = df[TAGS_COL].map(_split_tags)
    exploded = df.explode(TAGS_COL, ignore_index=True)

    logger.info(f"✓ Exploded tags: {len(df)} → {len(exploded)} rows")
    return exploded


def canonicalize_missing(df):
    """
    Replace missing-value markers with NaN.

    Applies to every column whose schema policy is 'markers'; columns absent
    from the schema are treated as text.

    Args:
        df: DataFrame of complaint records

    Returns:
        New DataFrame with "" and "N/A" replaced by NaN
    """
    df = df.copy()
    replaced = 0
    for col in df.columns:
        if _field_spec(col)[1] != 'markers':
            continue
        is_marker = df[col].isin(MISSING_MARKERS)
        replaced += int(is_marker.sum())
        df[col] = df[col].mask(is_marker, np.nan)

    logger.info(f"✓ Replaced {replaced} empty or N/A values with missing markers")
    return df


def summarize_unique_counts(df):
    """Count distinct values per column (missing counted as one value)."""
    unique_counts = df.nunique(dropna=False)
    for col, count in unique_counts.items():
        logger.info(f"  {col:35s} {count:8d} unique values")
    return unique_counts


def normalize_complaints(df):
    """
    Complete record normalization.

    Dates are parsed, tags exploded and missing markers canonicalized. No row
    is dropped at this stage.

    Args:
        df: Raw complaints DataFrame (all fields as text)

    Returns:
        Normalized DataFrame
    """
    logger.info("[1/3] Parsing dates...")
    df = parse_dates(df)

    logger.info("[2/3] Exploding tags...")
    df = explode_tags(df)

    logger.info("[3/3] Canonicalizing missing values...")
    df = canonicalize_missing(df)

    logger.info(f"✓ Normalized dataset: {len(df)} rows")
    return df
