#!/usr/bin/env python3
"""
Data model for the issue analysis pipeline
Issue is read from the GitHub REST API; AnalysisResult is rebuilt on every run
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any

from utils import get_issue_number, get_label_names


@dataclass(frozen=True)
class Issue:
    """A single GitHub issue as returned by GET /repos/{owner}/{repo}/issues/{number}"""
    number: int
    title: str
    body: Optional[str]
    labels: List[str]
    author: str
    created_at: str
    state: str = 'open'
    html_url: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'Issue':
        """Build an Issue from the REST JSON payload"""
        number = get_issue_number(data)
        if number is None:
            raise ValueError("Issue payload has no number")

        user = data.get('user') or {}
        author = user.get('login', 'unknown') if isinstance(user, dict) else str(user)

        return cls(
            number=number,
            title=data.get('title') or '',
            body=data.get('body'),
            labels=get_label_names(data.get('labels')),
            author=author,
            created_at=data.get('created_at') or '',
            state=data.get('state') or 'open',
            html_url=data.get('html_url'),
        )


@dataclass
class AnalysisResult:
    """Local, rule-based findings about one issue"""
    summary: str
    code_blocks: List[str] = field(default_factory=list)
    mentions: List[str] = field(default_factory=list)
    languages: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
