#!/usr/bin/env python3
"""
Complaint Emotion Analysis - Batch Processing for CFPB Complaint Exports

This script cleans a consumer complaint export, scores the emotional content of each
complaint narrative with the NRC emotion lexicon, and compares disputed vs.
non-disputed complaints. Tables are saved as CSV; the negative-word cloud, the
emotion chart and the quarterly trend chart are rendered alongside.

Usage:
    python run_analysis.py --input data/complaints.csv
    python run_analysis.py --input data/complaints.csv --lexicon NRC-Emotion-Lexicon-Wordlevel-v0.92.txt --output results/
    python run_analysis.py --help

Requirements:
    - pandas, nltk, wordcloud, matplotlib, plotly
    - NRC word-level emotion lexicon (path via --lexicon or NRC_LEXICON_PATH)
"""

import argparse
import logging
import sys

from complaint_emotions import config
from complaint_emotions.pipeline import run_from_file
from complaint_emotions.reporting import dispute_label, write_report


def setup_logging(log_level="INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=config.LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def print_summary(result):
    """Print the headline numbers of a pipeline run."""
    print("\nSummary:")
    print(f"  Total complaints: {result.record_count}")
    print(f"  Complaints with emotion content: {result.emotion_scores[config.ID_COL].nunique()}")
    print(f"  Distinct negative words: {len(result.negative_words)}")

    if not result.emotion_by_dispute.empty:
        print("\nAverage emotion proportion by dispute status:")
        for _, row in result.emotion_by_dispute.iterrows():
            status = dispute_label(row[config.DISPUTED_COL])
            print(f"  {status:14s} {row[config.SENTIMENT_COL]:14s} "
                  f"{row['avg_proportion']:.3f} (avg count {row['avg_score']:.2f})")

    summary = result.quarterly_summary
    if summary.get('peak_quarter'):
        print(f"\nAverage complaints per quarter: {summary['average_per_quarter']}")
        print(f"Peak quarter: {summary['peak_quarter']} with {summary['peak_count']} complaints")


def main():
    parser = argparse.ArgumentParser(
        description="Compare emotional content of disputed vs. non-disputed consumer complaints",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze an export with the default lexicon location
  python run_analysis.py --input data/complaints.csv

  # Custom lexicon and output directory
  python run_analysis.py --input data/complaints.csv --lexicon nrc.txt --output results/

  # Tables only, no rendering
  python run_analysis.py --input data/complaints.csv --no-render
        """
    )

    parser.add_argument(
        "--input",
        type=str,
        required=True,
        help="Complaint export CSV"
    )

    parser.add_argument(
        "--lexicon",
        type=str,
        default=config.NRC_LEXICON_PATH,
        help=f"NRC word-level emotion lexicon (default: {config.NRC_LEXICON_PATH})"
    )

    parser.add_argument(
        "--output",
        type=str,
        default=config.OUTPUT_DIR,
        help=f"Output directory for tables and charts (default: {config.OUTPUT_DIR}/)"
    )

    parser.add_argument(
        "--no-render",
        action="store_true",
        help="Only write CSV tables, skip the word cloud and charts"
    )

    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {config.LOG_LEVEL})"
    )

    args = parser.parse_args()

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    print("=" * 60)
    print("COMPLAINT EMOTION ANALYSIS")
    print("=" * 60)
    print(f"Input: {args.input}")
    print(f"Lexicon: {args.lexicon}")
    print(f"Output: {args.output}")
    print("=" * 60)

    try:
        result = run_from_file(args.input, lexicon_path=args.lexicon)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Could not read input: {e}")
        print(f"\n✗ Error: {e}")
        sys.exit(1)

    written = write_report(result, args.output, render=not args.no_render)

    print_summary(result)
    print(f"\nWrote {len(written)} files to {args.output}")
    print("\n✓ Analysis completed successfully!")


if __name__ == "__main__":
    main()
