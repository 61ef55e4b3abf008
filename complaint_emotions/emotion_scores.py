"""
Emotion Score Aggregation
==========================
Per-complaint emotion proportions and their averages by dispute status.

Key Functions:
- compute_emotion_scores(): category counts and proportions per complaint
- aggregate_by_dispute(): mean count and mean proportion per (dispute status, category)
"""

import logging

import pandas as pd

from .config import COUNT_COL, DISPUTED_COL, ID_COL, PROPORTION_COL, SENTIMENT_COL

logger = logging.getLogger(__name__)


def compute_emotion_scores(emotion_tokens):
    """
    Count emotion categories per complaint and normalize by the complaint's total.

    A category a complaint never matched has no row (it is not stored as zero).
    Proportions of one complaint sum to 1.0.

    Args:
        emotion_tokens: DataFrame with columns [Complaint ID, Consumer disputed?, word, sentiment]

    Returns:
        DataFrame with columns [Complaint ID, Consumer disputed?, sentiment, n, emotion_proportion]
    """
    keys = [ID_COL, DISPUTED_COL, SENTIMENT_COL]
    scores = emotion_tokens.groupby(keys, dropna=False).size().reset_index(name=COUNT_COL)

    totals = scores.groupby(ID_COL)[COUNT_COL].transform('sum')
    scores[PROPORTION_COL] = scores[COUNT_COL] / totals

    logger.info(
        f"✓ Computed {len(scores)} emotion scores for "
        f"{scores[ID_COL].nunique()} complaints"
    )
    return scores


def aggregate_by_dispute(emotion_scores):
    """
    Average emotion scores by dispute status.

    Non-numeric counts or proportions are treated as missing and skipped by
    the means. Complaints with no dispute flag are left out.

    Args:
        emotion_scores: Output of compute_emotion_scores()

    Returns:
        DataFrame with columns [Consumer disputed?, sentiment, avg_score, avg_proportion]
    """
    scores = emotion_scores.copy()
    scores[COUNT_COL] = pd.to_numeric(scores[COUNT_COL], errors='coerce')
    scores[PROPORTION_COL] = pd.to_numeric(scores[PROPORTION_COL], errors='coerce')

    by_dispute = scores.groupby([DISPUTED_COL, SENTIMENT_COL]).agg(
        avg_score=(COUNT_COL, 'mean'),
        avg_proportion=(PROPORTION_COL, 'mean'),
    ).reset_index()

    excluded = scores[DISPUTED_COL].isna().sum()
    if excluded:
        logger.warning(f"Excluded {excluded} emotion scores with no dispute flag")

    logger.info(
        f"✓ Aggregated emotions: {by_dispute[DISPUTED_COL].nunique()} dispute groups × "
        f"{by_dispute[SENTIMENT_COL].nunique()} categories"
    )
    return by_dispute
