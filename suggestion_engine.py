#!/usr/bin/env python3
"""
Rule-based suggestions for improving an issue report
Rules are independent; every rule that matches adds one line under the header.
"""

from typing import List

from config import SHORT_BODY_THRESHOLD
from models import Issue
from text_analysis import split_body_lines, extract_code_blocks

SUGGESTIONS_HEADER = "Suggestions:"

NO_DESCRIPTION_SUGGESTION = "- Consider adding a description to the issue."
SHORT_DESCRIPTION_SUGGESTION = "- The issue description is quite short. Consider adding more details."
NO_CODE_SUGGESTION = "- If applicable, consider adding code examples or error logs."
NO_LABELS_SUGGESTION = "- Consider adding labels to categorize the issue."


def provide_suggestions(issue: Issue) -> List[str]:
    """
    Suggest improvements for an issue.

    Returns:
        The "Suggestions:" header followed by one line per matching rule
    """
    suggestions = [SUGGESTIONS_HEADER]

    if not issue.body:
        suggestions.append(NO_DESCRIPTION_SUGGESTION)
    elif len(issue.body) < SHORT_BODY_THRESHOLD:
        suggestions.append(SHORT_DESCRIPTION_SUGGESTION)

    if not extract_code_blocks(split_body_lines(issue.body)):
        suggestions.append(NO_CODE_SUGGESTION)

    if not issue.labels:
        suggestions.append(NO_LABELS_SUGGESTION)

    return suggestions
