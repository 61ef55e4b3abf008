"""
Lexicon loading and token joins
================================
Stop-word removal, negative-polarity filtering and the emotion fan-out join.

Lexicons are plain DataFrames with columns [word, sentiment]:
- polarity lexicon: Bing Liu opinion lexicon from NLTK (positive / negative)
- emotion lexicon: NRC word-level emotion lexicon, several rows per word
"""

import logging
from pathlib import Path

import nltk
import pandas as pd
from nltk.corpus import opinion_lexicon, stopwords

from .config import (
    COUNT_COL,
    NEGATIVE_LABEL,
    NLTK_RESOURCES,
    SENTIMENT_COL,
    STOP_WORDS_LANGUAGE,
    WORD_COL,
)

logger = logging.getLogger(__name__)


def ensure_nltk_resource(name):
    """Download an NLTK corpus if it is not installed yet."""
    try:
        nltk.data.find(NLTK_RESOURCES[name])
    except LookupError:
        logger.info(f"Downloading NLTK resource '{name}'...")
        nltk.download(name, quiet=True)


def load_stop_words(language=STOP_WORDS_LANGUAGE):
    """
    Raises:
        ValueError: If the NLTK stop-word corpus is unavailable
    """
    ensure_nltk_resource('stopwords')
    try:
        stop_words = frozenset(stopwords.words(language))
    except LookupError as e:
        raise ValueError(f"Could not load NLTK resource 'stopwords': {e}") from e
    logger.info(f"Loaded {len(stop_words)} {language} stop words")
    return stop_words


def load_polarity_lexicon():
    """
    Load the Bing Liu opinion lexicon shipped with NLTK.

    Returns:
        DataFrame with columns [word, sentiment], sentiment in {positive, negative}

    Raises:
        ValueError: If the NLTK opinion lexicon is unavailable
    """
    ensure_nltk_resource('opinion_lexicon')
    try:
        positive_words = list(opinion_lexicon.positive())
        negative_words = list(opinion_lexicon.negative())
    except LookupError as e:
        raise ValueError(f"Could not load NLTK resource 'opinion_lexicon': {e}") from e

    positive = pd.DataFrame({WORD_COL: positive_words, SENTIMENT_COL: 'positive'})
    negative = pd.DataFrame({WORD_COL: negative_words, SENTIMENT_COL: NEGATIVE_LABEL})
    lexicon = pd.concat([positive, negative], ignore_index=True)
    logger.info(f"Loaded polarity lexicon: {len(positive)} positive, {len(negative)} negative words")
    return lexicon


def load_emotion_lexicon(lexicon_path):
    """
    Load the NRC word-level emotion lexicon.

    The file is tab separated: word, emotion, association (0/1). Only rows
    with association 1 are kept; preamble or malformed lines are skipped.

    Args:
        lexicon_path: Path to NRC-Emotion-Lexicon-Wordlevel file

    Returns:
        DataFrame with columns [word, sentiment], one row per (word, category)

    Raises:
        FileNotFoundError: If the lexicon file does not exist
        ValueError: If the file cannot be parsed
    """
    lexicon_path = Path(lexicon_path)
    if not lexicon_path.is_file():
        raise FileNotFoundError(f"Emotion lexicon not found: {lexicon_path}")

    try:
        raw = pd.read_csv(
            lexicon_path,
            sep='\t',
            names=['word', 'emotion', 'association'],
            dtype=str,
            keep_default_na=False,
            on_bad_lines='skip',
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise ValueError(f"Could not read emotion lexicon {lexicon_path}: {e}") from e

    associated = raw[pd.to_numeric(raw['association'], errors='coerce') == 1]
    lexicon = pd.DataFrame({
        WORD_COL: associated['word'].str.strip().str.lower(),
        SENTIMENT_COL: associated['emotion'].str.strip(),
    }).drop_duplicates(ignore_index=True)

    logger.info(
        f"Loaded emotion lexicon: {lexicon[WORD_COL].nunique()} words, "
        f"{lexicon[SENTIMENT_COL].nunique()} categories"
    )
    return lexicon


def remove_stop_words(tokens, stop_words):
    """Drop tokens that appear in the stop-word set."""
    kept = tokens[~tokens[WORD_COL].isin(list(stop_words))].reset_index(drop=True)
    logger.info(f"✓ Removed {len(tokens) - len(kept)} stop-word tokens")
    return kept


def filter_negative(tokens, polarity_lexicon):
    """
    Keep only tokens labelled negative in the polarity lexicon.

    Args:
        tokens: Token DataFrame with a 'word' column
        polarity_lexicon: DataFrame with columns [word, sentiment]

    Returns:
        New DataFrame of negative tokens
    """
    is_negative = polarity_lexicon[SENTIMENT_COL] == NEGATIVE_LABEL
    negative_words = polarity_lexicon.loc[is_negative, WORD_COL].unique()
    return tokens[tokens[WORD_COL].isin(negative_words)].reset_index(drop=True)


def count_negative_words(tokens, polarity_lexicon):
    """
    Frequency of each negative word, most frequent first.

    Returns:
        DataFrame with columns [word, n]
    """
    negative = filter_negative(tokens, polarity_lexicon)
    counts = negative[WORD_COL].value_counts().rename_axis(WORD_COL).reset_index(name=COUNT_COL)
    counts = counts.sort_values([COUNT_COL, WORD_COL], ascending=[False, True], ignore_index=True)
    logger.info(f"✓ Found {len(negative)} negative tokens ({len(counts)} distinct words)")
    return counts


def build_emotion_index(emotion_lexicon):
    """Map each word to the tuple of emotion categories it carries."""
    return emotion_lexicon.groupby(WORD_COL, sort=False)[SENTIMENT_COL].agg(tuple).to_dict()


def join_emotions(tokens, emotion_lexicon):
    """
    Attach emotion categories to tokens.

    A token matching several categories yields one row per category;
    tokens absent from the lexicon are dropped.

    Args:
        tokens: Token DataFrame with a 'word' column
        emotion_lexicon: DataFrame with columns [word, sentiment]

    Returns:
        New DataFrame with the token columns plus 'sentiment'
    """
    index = build_emotion_index(emotion_lexicon)

    joined = tokens.copy()
    joined[SENTIMENT_COL] = joined[WORD_COL].map(index.get)
    joined = joined[joined[SENTIMENT_COL].notna()]
    joined = joined.explode(SENTIMENT_COL, ignore_index=True)

    logger.info(f"✓ Matched {len(joined)} emotion rows from {len(tokens)} tokens")
    return joined
