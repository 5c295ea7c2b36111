#!/usr/bin/env python3
"""
Shared utilities for GitHub issue processing
Contains URL generation, label handling, and issue number extraction utilities
Used by models.py, report_generator.py and issue_analyzer.py
"""

from typing import Dict, List, Optional, Union, Any


def generate_issue_url(issue: Dict[str, Any], github_owner: Optional[str] = None, github_repo: Optional[str] = None) -> str:
    """
    Generate standardized GitHub issue URL from issue data.

    Args:
        issue: Issue dictionary containing number/issue_number and optionally html_url
        github_owner: GitHub repository owner (optional if html_url is in issue)
        github_repo: GitHub repository name (optional if html_url is in issue)

    Returns:
        Formatted GitHub issue URL or fallback issue reference
    """
    issue_num = get_issue_number(issue)

    # Use the URL reported by the API if available
    if issue.get('html_url'):
        return issue['html_url']

    if github_owner and github_repo and issue_num:
        return f"https://github.com/{github_owner}/{github_repo}/issues/{issue_num}"

    # Fallback to simple issue reference
    return f"Issue #{issue_num}" if issue_num else "Issue #Unknown"


def get_issue_number(issue: Dict[str, Any]) -> Optional[int]:
    """
    Extract issue number from various possible fields in issue data.

    Args:
        issue: Issue dictionary that may contain 'number' or 'issue_number'

    Returns:
        Issue number as integer, or None if not found
    """
    number = issue.get('number', issue.get('issue_number'))
    if number is not None:
        try:
            return int(number)
        except (ValueError, TypeError):
            pass
    return None


def get_label_names(raw_labels: Union[List, str, None]) -> List[str]:
    """
    Normalize labels from the REST format (list of dicts with 'name') or a list of strings.

    Args:
        raw_labels: Labels as returned by the API, or already-flattened names

    Returns:
        List of label names in API order
    """
    if not raw_labels:
        return []

    if isinstance(raw_labels, str):
        return [raw_labels]

    names = []
    for label in raw_labels:
        if isinstance(label, dict):
            name = label.get('name')
            if name:
                names.append(str(name))
        elif label:
            names.append(str(label))
    return names


def format_labels_for_display(raw_labels: Union[List, str, None], separator: str = ', ') -> str:
    """
    Format labels for display in reports.

    Args:
        raw_labels: Labels in REST format (list of dicts with 'name') or a list of strings
        separator: String to join labels with (default: ', ')

    Returns:
        Formatted string of label names joined by separator
    """
    return separator.join(get_label_names(raw_labels))
