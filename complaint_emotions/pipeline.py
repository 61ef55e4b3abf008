"""
Complaint emotion pipeline.

Runs normalization → tokenization → lexicon joins → aggregation as a chain of
stages, each taking a DataFrame and returning a new one.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

import pandas as pd

from .config import ID_COL, NRC_LEXICON_PATH
from .emotion_scores import aggregate_by_dispute, compute_emotion_scores
from .lexicon import (
    count_negative_words,
    join_emotions,
    load_emotion_lexicon,
    load_polarity_lexicon,
    load_stop_words,
    remove_stop_words,
)
from .preprocess_data import load_complaints, normalize_complaints, summarize_unique_counts
from .tokenizer import tokenize_narratives
from .trends import complaints_by_quarter, summarize_quarters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Intermediate and final tables of one pipeline run."""
    normalized: pd.DataFrame
    unique_counts: pd.Series
    tokens: pd.DataFrame
    negative_words: pd.DataFrame
    emotion_tokens: pd.DataFrame
    emotion_scores: pd.DataFrame
    emotion_by_dispute: pd.DataFrame
    quarterly_counts: pd.DataFrame
    quarterly_summary: Dict = field(default_factory=dict)
    record_count: int = 0


def run_emotion_pipeline(raw_complaints, stop_words, polarity_lexicon, emotion_lexicon):
    """
    Run every stage on in-memory tables.

    Args:
        raw_complaints: Raw complaints DataFrame (all fields as text)
        stop_words: Collection of words to drop before the emotion join
        polarity_lexicon: DataFrame [word, sentiment] with positive/negative labels
        emotion_lexicon: DataFrame [word, sentiment] with emotion categories

    Returns:
        PipelineResult
    """
    logger.info("=" * 60)
    logger.info("STARTING COMPLAINT EMOTION PIPELINE")
    logger.info("=" * 60)

    normalized = normalize_complaints(raw_complaints)
    unique_counts = summarize_unique_counts(normalized)

    tokens = tokenize_narratives(normalized)
    negative_words = count_negative_words(tokens, polarity_lexicon)

    content_tokens = remove_stop_words(tokens, stop_words)
    emotion_tokens = join_emotions(content_tokens, emotion_lexicon)

    emotion_scores = compute_emotion_scores(emotion_tokens)
    emotion_by_dispute = aggregate_by_dispute(emotion_scores)

    quarterly_counts = complaints_by_quarter(normalized)
    quarterly_summary = summarize_quarters(quarterly_counts)

    record_count = normalized[ID_COL].nunique()
    logger.info(
        f"✓ Pipeline complete: {record_count} complaints, "
        f"{emotion_scores[ID_COL].nunique()} with emotion content"
    )

    return PipelineResult(
        normalized=normalized,
        unique_counts=unique_counts,
        tokens=tokens,
        negative_words=negative_words,
        emotion_tokens=emotion_tokens,
        emotion_scores=emotion_scores,
        emotion_by_dispute=emotion_by_dispute,
        quarterly_counts=quarterly_counts,
        quarterly_summary=quarterly_summary,
        record_count=record_count,
    )


def run_from_file(input_path, lexicon_path: Optional[str] = None):
    """
    Load the complaint export and lexicons, then run the pipeline.

    Raises:
        FileNotFoundError / ValueError: If the input or the emotion lexicon cannot be read
    """
    raw_complaints = load_complaints(input_path)
    emotion_lexicon = load_emotion_lexicon(lexicon_path or NRC_LEXICON_PATH)
    stop_words = load_stop_words()
    polarity_lexicon = load_polarity_lexicon()

    return run_emotion_pipeline(raw_complaints, stop_words, polarity_lexicon, emotion_lexicon)
