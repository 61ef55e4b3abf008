"""
Configuration file for Complaint Emotion Analysis
==================================================
Contains column names, the complaint schema, lexicon locations and other configurable parameters.
"""

import os
from pathlib import Path


# ==================== COLUMN NAMES ====================
# Names as they appear in the CFPB complaint export

DATE_RECEIVED_COL = 'Date received'
DATE_SENT_COL = 'Date sent to company'
PRODUCT_COL = 'Product'
SUB_PRODUCT_COL = 'Sub-product'
ISSUE_COL = 'Issue'
SUB_ISSUE_COL = 'Sub-issue'
NARRATIVE_COL = 'Consumer complaint narrative'
COMPANY_COL = 'Company'
TAGS_COL = 'Tags'
DISPUTED_COL = 'Consumer disputed?'
ID_COL = 'Complaint ID'

# Derived columns
WORD_COL = 'word'
SENTIMENT_COL = 'sentiment'
COUNT_COL = 'n'
PROPORTION_COL = 'emotion_proportion'


# ==================== PARSING ====================

DATE_FORMAT = '%m/%d/%Y'
TAG_SEPARATOR = ', '

# Literal values treated as "no value" in text fields
MISSING_MARKERS = ['', 'N/A']


# ==================== COMPLAINT SCHEMA ====================
# field name -> (expected type, missing-marker policy)
#
# Types: 'date', 'text', 'tags', 'flag', 'id'
# Policies:
#   'coerce'  - unparseable values become NaT
#   'markers' - values in MISSING_MARKERS become NaN
#   'keep'    - value passed through untouched
# Columns not listed here are treated as ('text', 'markers').

COMPLAINT_SCHEMA = {
    DATE_RECEIVED_COL: ('date', 'coerce'),
    DATE_SENT_COL: ('date', 'coerce'),
    PRODUCT_COL: ('text', 'markers'),
    SUB_PRODUCT_COL: ('text', 'markers'),
    ISSUE_COL: ('text', 'markers'),
    SUB_ISSUE_COL: ('text', 'markers'),
    NARRATIVE_COL: ('text', 'markers'),
    COMPANY_COL: ('text', 'markers'),
    TAGS_COL: ('tags', 'markers'),
    DISPUTED_COL: ('flag', 'markers'),
    ID_COL: ('id', 'keep'),
}

DEFAULT_FIELD_SPEC = ('text', 'markers')

# Columns the pipeline cannot run without
REQUIRED_COLUMNS = [ID_COL, NARRATIVE_COL, DATE_RECEIVED_COL]


# ==================== LEXICONS ====================

# NRC word-level emotion lexicon (word<TAB>emotion<TAB>association)
NRC_LEXICON_PATH = os.environ.get(
    'NRC_LEXICON_PATH',
    str(Path('data') / 'NRC-Emotion-Lexicon-Wordlevel-v0.92.txt')
)

STOP_WORDS_LANGUAGE = 'english'
NEGATIVE_LABEL = 'negative'

# NLTK resources fetched on first use
NLTK_RESOURCES = {
    'stopwords': 'corpora/stopwords',
    'opinion_lexicon': 'corpora/opinion_lexicon',
}


# ==================== DISPUTE LABELS ====================
# "Consumer disputed?" = Yes means the consumer contested the company's response

DISPUTE_LABELS = {
    'Yes': 'Disputed',
    'No': 'Not Disputed',
}

UNKNOWN_DISPUTE_LABEL = 'Unknown'


# ==================== VISUALIZATION SETTINGS ====================

COLOR_PALETTE_DISPUTE = {
    'Disputed': '#E74C3C',      # Red
    'Not Disputed': '#3498DB',  # Blue
}

TREND_LINE_COLOR = '#2E86AB'

CHART_HEIGHT = 500
CHART_WIDTH = 800

# Word cloud
WORDCLOUD_WIDTH = 800
WORDCLOUD_HEIGHT = 800
WORDCLOUD_BACKGROUND = 'black'
WORDCLOUD_COLORMAP = 'Dark2'
WORDCLOUD_MAX_WORDS = 200


# ==================== OUTPUT ====================

OUTPUT_DIR = 'output'
NORMALIZED_FILE = 'normalized_complaints.csv'
NEGATIVE_WORDS_FILE = 'negative_word_counts.csv'
EMOTION_SCORES_FILE = 'emotion_scores.csv'
EMOTION_BY_DISPUTE_FILE = 'emotion_by_dispute.csv'
QUARTERLY_FILE = 'complaints_by_quarter.csv'
WORDCLOUD_FILE = 'negative_wordcloud.png'
EMOTION_CHART_FILE = 'emotion_by_dispute.html'
TREND_CHART_FILE = 'complaints_over_time.html'


# ==================== LOGGING ====================

LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'
