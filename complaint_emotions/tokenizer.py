"""
Narrative tokenization.

Splits complaint narratives into lowercase word tokens, one row per
(complaint, token).
"""

import logging

import numpy as np
import pandas as pd
from nltk.tokenize import RegexpTokenizer

from .config import DISPUTED_COL, ID_COL, NARRATIVE_COL, WORD_COL

logger = logging.getLogger(__name__)

# Letters and digits; an apostrophe inside a word does not split it
WORD_PATTERN = r"[^\W_]+(?:['’][^\W_]+)*"

_word_tokenizer = RegexpTokenizer(WORD_PATTERN)


def iter_tokens(complaint_id, disputed, narrative):
    """
    Yield (complaint_id, disputed, word) for each word in the narrative.

    Words are case-folded and stripped of punctuation, in left-to-right order.
    A missing or empty narrative yields nothing.
    """
    if not isinstance(narrative, str):
        return
    for word in _word_tokenizer.tokenize(narrative.lower()):
        yield complaint_id, disputed, word


def tokenize_narratives(df):
    """
    Tokenize every complaint narrative.

    Rows sharing a complaint identifier (from tag explosion) are tokenized once.
    Rows with an empty or missing identifier are each tokenized on their own.

    Args:
        df: Normalized complaints DataFrame

    Returns:
        DataFrame with columns [Complaint ID, Consumer disputed?, word]
    """
    has_id = df[ID_COL].notna() & (df[ID_COL].astype(str).str.strip() != '')
    records = pd.concat([
        df[has_id].drop_duplicates(subset=[ID_COL]),
        df[~has_id],
    ]).sort_index()
    if DISPUTED_COL in records.columns:
        flags = records[DISPUTED_COL]
    else:
        flags = pd.Series(np.nan, index=records.index)

    rows = [
        token
        for complaint_id, disputed, narrative in zip(records[ID_COL], flags, records[NARRATIVE_COL])
        for token in iter_tokens(complaint_id, disputed, narrative)
    ]
    tokens = pd.DataFrame(rows, columns=[ID_COL, DISPUTED_COL, WORD_COL])

    logger.info(f"✓ Tokenized {len(records)} narratives into {len(tokens)} tokens")
    return tokens
