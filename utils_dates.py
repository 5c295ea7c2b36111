#!/usr/bin/env python3
"""
Shared date utilities for GitHub issue analysis
Used by report_generator.py
"""

from datetime import datetime
from typing import Optional


def parse_issue_date(date_str: str) -> datetime:
    """
    Parse ISO format date string from GitHub API.

    Args:
        date_str: ISO format date string like "2025-09-18T15:25:13Z"

    Returns:
        datetime object with timezone info
    """
    if isinstance(date_str, str):
        return datetime.fromisoformat(date_str.replace('Z', '+00:00'))
    return date_str


def format_timestamp(date_str: Optional[str]) -> str:
    """
    Format an API timestamp for human-readable reports.

    Unparseable values are returned unchanged so a report never fails on a date.
    """
    if not date_str:
        return 'Unknown'

    try:
        created = parse_issue_date(date_str)
    except (ValueError, AttributeError, TypeError):
        return str(date_str)

    formatted = created.strftime("%B %d, %Y %H:%M")
    if created.tzinfo is not None:
        formatted += f" {created.tzname() or ''}".rstrip()
    return formatted
