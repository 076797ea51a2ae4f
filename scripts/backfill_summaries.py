#!/usr/bin/env python3
"""
Generate summaries for records that have a transcript but no summary.

A request whose summary step failed leaves its record without one, and later
requests return that record unchanged. Run this to fill the gaps.

Usage:
    python scripts/backfill_summaries.py            # Summarize records missing a summary
    python scripts/backfill_summaries.py --dry-run  # Only list them
"""

import argparse
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app, get_orchestrator
from errors import TranscriptServiceError


def backfill(orchestrator, dry_run=False):
    """Summarize every incomplete record; returns (done, failed) counts."""
    records = orchestrator.store.missing_summaries()

    if not records:
        print("No records to process.")
        return 0, 0

    print(f"Processing {len(records)} record(s)...\n")

    done = failed = 0
    for record in records:
        print(f"Video ID: {record.video_id}")

        if dry_run:
            print("  (dry run - not summarized)\n")
            continue

        try:
            orchestrator.summarize(record)
            print("  Saved.")
            done += 1
        except TranscriptServiceError as e:
            print(f"  Error: {e}")
            failed += 1

        print()

    print("Done.")
    return done, failed


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate missing transcript summaries")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be done without making changes",
    )
    args = parser.parse_args(argv)

    app = create_app()
    with app.app_context():
        _, failed = backfill(get_orchestrator(), dry_run=args.dry_run)

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
