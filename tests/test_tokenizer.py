"""
Unit tests for narrative tokenization.
"""

import inspect

import numpy as np
import pandas as pd
import pytest

from complaint_emotions.tokenizer import iter_tokens, tokenize_narratives


def test_tokens_are_lowercase_words():
    tokens = list(iter_tokens('1', 'Yes', 'I am very angry and do not trust them'))

    assert [word for _, _, word in tokens] == [
        'i', 'am', 'very', 'angry', 'and', 'do', 'not', 'trust', 'them'
    ]
    assert all(cid == '1' and flag == 'Yes' for cid, flag, _ in tokens)


def test_punctuation_is_stripped():
    words = [w for _, _, w in iter_tokens('1', 'No', "Don't CALL me... again!! (XXXX) $50.00")]

    assert words == ["don't", 'call', 'me', 'again', 'xxxx', '50', '00']


def test_iter_tokens_is_lazy():
    assert inspect.isgenerator(iter_tokens('1', 'No', 'some text'))


@pytest.mark.parametrize("narrative", ['', '   ', '?!', None, np.nan])
def test_empty_narrative_yields_nothing(narrative):
    assert list(iter_tokens('1', 'No', narrative)) == []


def test_tokenizing_is_deterministic():
    text = "They charged me twice, then refused to refund; I'm furious."

    assert list(iter_tokens('9', 'Yes', text)) == list(iter_tokens('9', 'Yes', text))


def test_tokenize_narratives_one_row_per_token():
    df = pd.DataFrame({
        'Complaint ID': ['1', '2'],
        'Consumer disputed?': ['Yes', 'No'],
        'Consumer complaint narrative': ['Late fee charged', np.nan],
    })

    tokens = tokenize_narratives(df)

    assert list(tokens.columns) == ['Complaint ID', 'Consumer disputed?', 'word']
    assert tokens['word'].tolist() == ['late', 'fee', 'charged']
    assert (tokens['Complaint ID'] == '1').all()


def test_exploded_rows_are_tokenized_once():
    """Rows repeated by tag explosion do not multiply tokens."""
    df = pd.DataFrame({
        'Complaint ID': ['1', '1'],
        'Consumer disputed?': ['Yes', 'Yes'],
        'Tags': ['Older American', 'Servicemember'],
        'Consumer complaint narrative': ['angry customer', 'angry customer'],
    })

    tokens = tokenize_narratives(df)

    assert tokens['word'].tolist() == ['angry', 'customer']


def test_records_without_id_are_not_merged():
    df = pd.DataFrame({
        'Complaint ID': ['', '', '5', '5'],
        'Consumer disputed?': ['Yes', 'No', 'No', 'No'],
        'Consumer complaint narrative': ['late fee', 'rude agent', 'fraud', 'fraud'],
    })

    tokens = tokenize_narratives(df)

    assert tokens['word'].tolist() == ['late', 'fee', 'rude', 'agent', 'fraud']


def test_missing_dispute_column_gives_missing_flags():
    df = pd.DataFrame({
        'Complaint ID': ['1'],
        'Consumer complaint narrative': ['overdraft fee'],
    })

    tokens = tokenize_narratives(df)

    assert len(tokens) == 2
    assert tokens['Consumer disputed?'].isna().all()


def test_no_narratives_gives_empty_table():
    df = pd.DataFrame({
        'Complaint ID': ['1'],
        'Consumer disputed?': ['No'],
        'Consumer complaint narrative': [np.nan],
    })

    tokens = tokenize_narratives(df)

    assert tokens.empty
    assert list(tokens.columns) == ['Complaint ID', 'Consumer disputed?', 'word']


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
