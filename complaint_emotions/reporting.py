"""
Reporting
==========
Renders the pipeline's tables: negative-word cloud, emotion-by-dispute bar chart
and the quarterly complaint trend. Also writes every table as CSV.
"""

import logging
from pathlib import Path

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import plotly.express as px
from wordcloud import WordCloud

from .config import (
    CHART_HEIGHT,
    CHART_WIDTH,
    COLOR_PALETTE_DISPUTE,
    COUNT_COL,
    DISPUTE_LABELS,
    DISPUTED_COL,
    EMOTION_BY_DISPUTE_FILE,
    EMOTION_CHART_FILE,
    EMOTION_SCORES_FILE,
    NEGATIVE_WORDS_FILE,
    NORMALIZED_FILE,
    QUARTERLY_FILE,
    SENTIMENT_COL,
    TREND_CHART_FILE,
    TREND_LINE_COLOR,
    UNKNOWN_DISPUTE_LABEL,
    WORD_COL,
    WORDCLOUD_BACKGROUND,
    WORDCLOUD_COLORMAP,
    WORDCLOUD_FILE,
    WORDCLOUD_HEIGHT,
    WORDCLOUD_MAX_WORDS,
    WORDCLOUD_WIDTH,
)

logger = logging.getLogger(__name__)

STATUS_COL = 'Complaint Status'


def dispute_label(flag):
    """Chart label for a 'Consumer disputed?' value."""
    return DISPUTE_LABELS.get(flag, UNKNOWN_DISPUTE_LABEL)


def render_word_cloud(word_counts, output_path, max_words=WORDCLOUD_MAX_WORDS):
    """
    Render a frequency-weighted word cloud to a PNG file.

    Args:
        word_counts: DataFrame with columns [word, n]
        output_path: Destination PNG path
        max_words: Maximum number of words drawn

    Returns:
        Path of the written image, or None when there are no words
    """
    if word_counts.empty:
        logger.warning("No negative words found, skipping word cloud")
        return None

    frequencies = dict(zip(word_counts[WORD_COL], word_counts[COUNT_COL].astype(float)))
    wordcloud = WordCloud(
        width=WORDCLOUD_WIDTH,
        height=WORDCLOUD_HEIGHT,
        background_color=WORDCLOUD_BACKGROUND,
        colormap=WORDCLOUD_COLORMAP,
        max_words=max_words,
    ).generate_from_frequencies(frequencies)

    fig, ax = plt.subplots(figsize=(8, 8))
    ax.imshow(wordcloud, interpolation='bilinear')
    ax.axis('off')
    fig.savefig(output_path, bbox_inches='tight', facecolor=WORDCLOUD_BACKGROUND)
    plt.close(fig)

    logger.info(f"✓ Saved word cloud to {output_path}")
    return Path(output_path)


def build_emotion_chart(emotion_by_dispute):
    """
    Grouped bar chart of average emotion proportion per category and dispute status.

    Args:
        emotion_by_dispute: Output of aggregate_by_dispute()

    Returns:
        plotly Figure
    """
    data = emotion_by_dispute.copy()
    data[STATUS_COL] = data[DISPUTED_COL].map(dispute_label)

    fig = px.bar(
        data,
        x=SENTIMENT_COL,
        y='avg_proportion',
        color=STATUS_COL,
        barmode='group',
        color_discrete_map=COLOR_PALETTE_DISPUTE,
        labels={SENTIMENT_COL: 'Emotion', 'avg_proportion': 'Average Proportion of Words'},
        title='Emotional Content in Disputed vs. Non-Disputed Complaints',
        height=CHART_HEIGHT,
        width=CHART_WIDTH,
    )
    fig.update_xaxes(tickangle=-45)
    return fig


def build_trend_chart(quarterly_counts):
    """Line chart of complaints per quarter."""
    fig = px.line(
        quarterly_counts,
        x='quarter_date',
        y='complaint_count',
        markers=True,
        hover_data=['year_quarter'],
        labels={'quarter_date': 'Year-Quarter', 'complaint_count': 'Number of Complaints'},
        title='Number of Complaints Over Time',
        height=CHART_HEIGHT,
        width=CHART_WIDTH,
    )
    fig.update_traces(line_color=TREND_LINE_COLOR)
    fig.update_xaxes(dtick='M12', tickformat='%Y')
    fig.update_yaxes(tickformat=',')
    return fig


def write_report(result, output_dir, render=True):
    """
    Write the pipeline tables as CSV and, optionally, the rendered figures.

    Args:
        result: PipelineResult from the emotion pipeline
        output_dir: Directory to write into (created if needed)
        render: Also render the word cloud and the charts

    Returns:
        Dictionary of artifact name -> written path
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    tables = {
        'normalized': (result.normalized, NORMALIZED_FILE),
        'negative_words': (result.negative_words, NEGATIVE_WORDS_FILE),
        'emotion_scores': (result.emotion_scores, EMOTION_SCORES_FILE),
        'emotion_by_dispute': (result.emotion_by_dispute, EMOTION_BY_DISPUTE_FILE),
        'quarterly_counts': (result.quarterly_counts, QUARTERLY_FILE),
    }

    written = {}
    for name, (table, filename) in tables.items():
        path = output_dir / filename
        table.to_csv(path, index=False)
        written[name] = path
    logger.info(f"✓ Saved {len(tables)} tables to {output_dir}")

    if not render:
        return written

    wordcloud_path = render_word_cloud(result.negative_words, output_dir / WORDCLOUD_FILE)
    if wordcloud_path is not None:
        written['wordcloud'] = wordcloud_path

    if result.emotion_by_dispute.empty:
        logger.warning("No emotion scores to chart, skipping emotion chart")
    else:
        path = output_dir / EMOTION_CHART_FILE
        build_emotion_chart(result.emotion_by_dispute).write_html(str(path))
        written['emotion_chart'] = path

    if result.quarterly_counts.empty:
        logger.warning("No dated complaints, skipping trend chart")
    else:
        path = output_dir / TREND_CHART_FILE
        build_trend_chart(result.quarterly_counts).write_html(str(path))
        written['trend_chart'] = path

    return written
