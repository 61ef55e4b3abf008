"""Shared fixtures: a small complaint export and hand-built lexicons."""

import pandas as pd
import pytest


@pytest.fixture
def raw_complaints():
    """Raw export as load_complaints() returns it: every field a string."""
    return pd.DataFrame({
        'Date received': ['01/15/2015', '02/20/2015', '07/04/2015', ''],
        'Product': ['Credit card', 'Mortgage', 'N/A', 'Bank account or service'],
        'Sub-product': ['', 'Conventional fixed mortgage', '', 'Checking account'],
        'Issue': ['Billing disputes', 'Loan servicing', 'Other', 'Account opening'],
        'Sub-issue': ['', '', 'N/A', ''],
        'Consumer complaint narrative': [
            'I am very angry and do not trust them',
            'This is fraud. Fraud!',
            '',
            'The service was good',
        ],
        'Company': ['BANK OF MONTREAL', 'BANK OF MONTREAL', 'BANK OF MONTREAL', 'N/A'],
        'Tags': ['Older American, Servicemember', '', 'N/A', 'Servicemember'],
        'Consumer disputed?': ['Yes', 'No', 'Yes', 'No'],
        'Date sent to company': ['01/16/2015', '02/20/2015', 'N/A', '03/01/2015'],
        'Complaint ID': ['1', '2', '3', '4'],
    })


@pytest.fixture
def stop_words():
    return frozenset([
        'i', 'am', 'very', 'and', 'do', 'not', 'them', 'this', 'is', 'the', 'was',
    ])


@pytest.fixture
def polarity_lexicon():
    return pd.DataFrame({
        'word': ['angry', 'fraud', 'unfair', 'good', 'trust'],
        'sentiment': ['negative', 'negative', 'negative', 'positive', 'positive'],
    })


@pytest.fixture
def emotion_lexicon():
    return pd.DataFrame({
        'word': ['angry', 'trust', 'fraud', 'fraud', 'fraud', 'furious'],
        'sentiment': ['anger', 'trust', 'anger', 'disgust', 'negative', 'anger'],
    })
