"""
Unit tests for quarterly complaint counts.
"""

import pandas as pd
import pytest

from complaint_emotions.preprocess_data import normalize_complaints
from complaint_emotions.trends import complaints_by_quarter, summarize_quarters


def test_counts_per_quarter(raw_complaints):
    """Exploded rows count once and undated complaints are left out."""
    counts = complaints_by_quarter(normalize_complaints(raw_complaints))

    assert counts['year_quarter'].tolist() == ['2015 Q1', '2015 Q3']
    assert counts['complaint_count'].tolist() == [2, 1]
    assert counts['quarter_date'].tolist() == [pd.Timestamp(2015, 1, 1), pd.Timestamp(2015, 7, 1)]


def test_quarters_sorted_chronologically():
    df = pd.DataFrame({
        'Complaint ID': ['1', '2', '3', '4'],
        'Date received': pd.to_datetime(['2021-11-02', '2019-05-10', '2021-01-03', '2019-04-01']),
    })

    counts = complaints_by_quarter(df)

    assert counts['year_quarter'].tolist() == ['2019 Q2', '2021 Q1', '2021 Q4']
    assert counts['complaint_count'].tolist() == [2, 1, 1]
    assert counts['quarter_date'].is_monotonic_increasing


def test_no_dated_complaints():
    df = pd.DataFrame({'Complaint ID': ['1'], 'Date received': [pd.NaT]})

    counts = complaints_by_quarter(df)

    assert counts.empty
    assert list(counts.columns) == ['year', 'quarter', 'year_quarter', 'complaint_count', 'quarter_date']


def test_summarize_quarters():
    counts = pd.DataFrame({
        'year_quarter': ['2020 Q1', '2020 Q2', '2020 Q3'],
        'complaint_count': [4, 9, 6],
    })

    summary = summarize_quarters(counts)

    assert summary == {
        'quarters': 3,
        'average_per_quarter': 6,
        'peak_quarter': '2020 Q2',
        'peak_count': 9,
    }


def test_summarize_no_quarters():
    summary = summarize_quarters(pd.DataFrame(columns=['year_quarter', 'complaint_count']))

    assert summary['quarters'] == 0
    assert summary['peak_quarter'] is None


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
