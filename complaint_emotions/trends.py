"""
Complaint volume over time.

Counts distinct complaints per calendar quarter of the received date.
"""

import logging

import pandas as pd

from .config import DATE_FORMAT, DATE_RECEIVED_COL, ID_COL

logger = logging.getLogger(__name__)

QUARTERLY_COLUMNS = ['year', 'quarter', 'year_quarter', 'complaint_count', 'quarter_date']


def complaints_by_quarter(df):
    """
    Number of complaints received in each quarter.

    Rows without a received date are excluded here (and only here).

    Args:
        df: Normalized complaints DataFrame

    Returns:
        DataFrame with columns [year, quarter, year_quarter, complaint_count, quarter_date],
        sorted by quarter_date
    """
    received = pd.to_datetime(df[DATE_RECEIVED_COL], format=DATE_FORMAT, errors='coerce')
    dated = pd.DataFrame({ID_COL: df[ID_COL], 'received': received}).dropna(subset=['received'])
    dated = dated.drop_duplicates(subset=[ID_COL]).copy()

    dropped = len(df) - len(dated)
    if dropped:
        logger.info(f"Skipped {dropped} rows (missing date or repeated complaint) for the time series")

    if dated.empty:
        return pd.DataFrame(columns=QUARTERLY_COLUMNS)

    dated['year'] = dated['received'].dt.year
    dated['quarter'] = dated['received'].dt.quarter

    counts = dated.groupby(['year', 'quarter']).size().reset_index(name='complaint_count')
    counts['year_quarter'] = counts['year'].astype(str) + ' Q' + counts['quarter'].astype(str)
    counts['quarter_date'] = pd.to_datetime(pd.DataFrame({
        'year': counts['year'],
        'month': (counts['quarter'] - 1) * 3 + 1,
        'day': 1,
    }))

    counts = counts.sort_values('quarter_date', ignore_index=True)
    return counts[QUARTERLY_COLUMNS]


def summarize_quarters(quarterly_counts):
    """
    Average complaints per quarter and the busiest quarter.

    Returns:
        Dictionary with quarters, average_per_quarter, peak_quarter, peak_count
    """
    if quarterly_counts.empty:
        return {
            'quarters': 0,
            'average_per_quarter': 0,
            'peak_quarter': None,
            'peak_count': 0,
        }

    peak = quarterly_counts.loc[quarterly_counts['complaint_count'].idxmax()]
    summary = {
        'quarters': len(quarterly_counts),
        'average_per_quarter': int(round(quarterly_counts['complaint_count'].mean())),
        'peak_quarter': peak['year_quarter'],
        'peak_count': int(peak['complaint_count']),
    }

    logger.info(f"Average complaints per quarter: {summary['average_per_quarter']}")
    logger.info(f"Peak quarter: {summary['peak_quarter']} with {summary['peak_count']} complaints")
    return summary
