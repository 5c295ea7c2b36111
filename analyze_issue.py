#!/usr/bin/env python3
"""
Analyze a single GitHub issue
Prints a text analysis, AI label and priority suggestions, and writes an HTML report
"""
# /// script
# requires-python = ">=3.8"
# dependencies = [
#     "requests",
#     "openai",
#     "python-dotenv",
#     "rich",
# ]
# ///

import argparse
import sys

from dotenv import load_dotenv
from rich.console import Console

from config import ConfigurationError, load_config
from issue_analyzer import IssueAnalyzer
from utils import format_labels_for_display

console = Console()


def positive_int(value: str) -> int:
    """argparse type for issue numbers"""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid issue number: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"issue number must be positive, got {number}")
    return number


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Analyze a GitHub issue and generate an HTML report with AI insight',
        epilog='''
Configuration (environment or .env file):
  GITHUB_REPO_OWNER, GITHUB_REPO_NAME, GITHUB_TOKEN, OPENAI_API_KEY   required
  OPENAI_MODEL_LONG, OPENAI_MODEL_SHORT, GITHUB_API_URL,
  REQUEST_TIMEOUT_SECONDS                                            optional
        ''',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('issue_number', type=positive_int, help='Number of the issue to analyze')
    parser.add_argument('--owner', help='Repository owner (overrides GITHUB_REPO_OWNER)')
    parser.add_argument('--repo', help='Repository name (overrides GITHUB_REPO_NAME)')
    parser.add_argument('--output-dir', '-o', default='.', help='Directory for the HTML report (default: current directory)')
    parser.add_argument('--skip-html', action='store_true', help='Do not write the HTML report')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_arguments(argv)

    # Load environment variables from .env file
    load_dotenv()

    try:
        config = load_config(owner=args.owner, repo=args.repo)
    except ConfigurationError as e:
        console.print(f"❌ {e}", style="red", markup=False)
        return 1

    console.print(f"🔍 Repository: {config.repo_display}")
    analyzer = IssueAnalyzer(config)

    console.print(f"📋 Analyzing issue #{args.issue_number}...")
    # Issue and AI text is written as-is, without emoji codes or wrapping
    console.out(analyzer.analyze_issue(args.issue_number), highlight=False)

    console.print("\n🏷️  Suggesting labels...")
    suggested_labels = analyzer.suggest_labels(args.issue_number)
    console.out(f"Suggested labels: {format_labels_for_display(suggested_labels) or 'none'}", highlight=False)

    console.print("\n🎯 Prioritizing issue...")
    priority = analyzer.prioritize_issue(args.issue_number)
    console.out(f"Suggested priority: {priority}", highlight=False)

    if not args.skip_html:
        report_path = analyzer.generate_html_report(args.issue_number, args.output_dir)
        if report_path:
            console.print(f"\n✅ HTML report generated: {report_path}")
            console.print("Analysis complete. Open the HTML file in your browser to view the report.")
        else:
            console.print("\n⚠️  HTML report was not generated", style="yellow", markup=False)

    return 0


if __name__ == "__main__":
    sys.exit(main())
