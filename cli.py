#!/usr/bin/env python3
"""
YouTube Transcript Service - CLI Version

Fetch, store and summarize a YouTube video's transcript from the command line,
using the same database and providers as the web app.
"""

import argparse
import logging
import sys

from app import create_app, get_orchestrator
from config import Settings
from errors import TranscriptServiceError
from models import TranscriptStore, db


def print_colored(text: str, color: str = "white") -> None:
    """Print colored text to terminal."""
    colors = {
        "red": "\033[91m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "blue": "\033[94m",
        "magenta": "\033[95m",
        "cyan": "\033[96m",
        "white": "\033[97m",
        "bold": "\033[1m",
        "reset": "\033[0m"
    }

    print(f"{colors.get(color, '')}{text}{colors['reset']}")


def format_record_output(result) -> None:
    """Display a resolved transcript record."""
    record = result.record
    print_colored(f"\n{'='*60}", "cyan")
    print_colored(f"{record.title}", "bold")
    print_colored(f"YouTube Video: https://youtube.com/watch?v={record.video_id}", "blue")
    print_colored(f"{'='*60}\n", "cyan")

    print_colored(result.message, "green" if record.transcript else "yellow")
    print()

    for heading, content, color in (
        ("📝 SUMMARY", record.summary, "cyan"),
        ("📋 TRANSCRIPT", record.transcript, "blue"),
    ):
        if not content:
            continue
        print_colored(heading, color)
        print_colored("-" * 40, "white")
        for line in content.split('\n'):
            if line.strip():
                print(f"  {line.strip()}")
        print()


def list_processed_videos(app, limit: int = 10) -> None:
    """List previously processed videos."""
    with app.app_context():
        videos = TranscriptStore(db.session).recent(limit)

        if not videos:
            print_colored("No videos have been processed yet.", "yellow")
            return

        print_colored(f"\n{'='*50}", "cyan")
        print_colored("RECENTLY PROCESSED VIDEOS", "bold")
        print_colored(f"{'='*50}\n", "cyan")

        for i, video in enumerate(videos, 1):
            print_colored(f"{i}. {video.title} ({video.video_id})", "white")
            print_colored(f"   Processed: {video.created_at.strftime('%Y-%m-%d %H:%M:%S')}", "yellow")
            print_colored(f"   URL: {video.video_url}", "blue")
            if video.transcript and not video.summary:
                print_colored("   Summary: missing", "red")
            elif video.summary:
                print_colored("   Summary: available", "green")

            print()


def main(argv=None, app=None):
    """Main CLI function."""
    parser = argparse.ArgumentParser(
        description="YouTube Transcript Service - CLI Version",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
  %(prog)s --list
  %(prog)s --list --limit 5
  %(prog)s --help
        """
    )

    parser.add_argument(
        "url",
        nargs="?",
        help="YouTube video URL to transcribe and summarize"
    )

    parser.add_argument(
        "-l", "--list",
        action="store_true",
        help="List previously processed videos"
    )

    parser.add_argument(
        "--limit",
        type=int,
        default=10,
        help="Maximum number of videos to list (default: 10)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show detailed processing information"
    )

    args = parser.parse_args(argv)

    if app is None:
        settings = Settings.from_env()
        if args.verbose:
            settings.log_level = "DEBUG"

        # Check if API key is set
        if not settings.openai_api_key:
            print_colored("Error: OPENAI_API_KEY environment variable not set.", "red")
            print_colored("Please set your OpenAI API key in a .env file or environment.", "yellow")
            sys.exit(1)

        app = create_app(settings)
    elif args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    # Handle list command
    if args.list:
        list_processed_videos(app, args.limit)
        return

    # Handle URL input
    if not args.url:
        parser.print_help()
        print_colored("\nError: Please provide a YouTube URL or use --list to see processed videos.", "red")
        sys.exit(1)

    print_colored("🎬 YouTube Transcript Service", "bold")
    print_colored(f"Processing URL: {args.url}", "blue")

    with app.app_context():
        try:
            result = get_orchestrator().resolve(args.url)
        except TranscriptServiceError as e:
            print_colored(f"❌ Error: {e.message}", "red")
            if args.verbose:
                print_colored(str(e), "yellow")
            sys.exit(1)

        format_record_output(result)

    if result.created:
        print_colored("✨ Done! Video data saved to database.", "green")


if __name__ == "__main__":
    main()
