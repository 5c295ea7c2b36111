#!/usr/bin/env python3
"""
GitHub Issue Fetcher

Retrieves a single issue from the GitHub REST API. Every call issues a fresh
request: there is no caching and no retrying.
"""

from typing import Optional

import requests

from config import AppConfig
from models import Issue


class FetchError(Exception):
    """Raised when an issue cannot be retrieved from the tracker"""

    def __init__(self, message: str, issue_number: Optional[int] = None,
                 status_code: Optional[int] = None, cause: Optional[BaseException] = None):
        self.issue_number = issue_number
        self.status_code = status_code
        self.cause = cause
        super().__init__(message)


class IssueFetcher:
    """Read-only access to one repository's issues"""

    def __init__(self, config: AppConfig, session: Optional[requests.Session] = None):
        self.owner = config.owner
        self.repo = config.repo
        self.base_url = config.github_api_url
        self.timeout = config.request_timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'Authorization': f'token {config.github_token}',
            'Accept': 'application/vnd.github.v3+json',
            'User-Agent': 'github-issue-analyzer'
        })

    def issue_url(self, issue_number: int) -> str:
        return f"{self.base_url}/repos/{self.owner}/{self.repo}/issues/{issue_number}"

    def fetch(self, issue_number: int) -> Issue:
        """
        Fetch one issue.

        Args:
            issue_number: Positive issue number

        Returns:
            The parsed Issue

        Raises:
            ValueError: if issue_number is not a positive integer
            FetchError: on transport failure, non-success status or malformed payload
        """
        if isinstance(issue_number, bool) or not isinstance(issue_number, int) or issue_number < 1:
            raise ValueError(f"Issue number must be a positive integer, got {issue_number!r}")

        url = self.issue_url(issue_number)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(f"Request for issue #{issue_number} failed: {e}",
                             issue_number=issue_number, cause=e) from e

        if response.status_code >= 400:
            if response.status_code == 404:
                message = f"Issue #{issue_number} not found in {self.owner}/{self.repo}"
            elif response.status_code in (401, 403):
                message = f"Access to {self.owner}/{self.repo} denied ({response.status_code}) - check token permissions"
            else:
                message = f"GitHub returned {response.status_code} for issue #{issue_number}"
            try:
                response.raise_for_status()
            except requests.HTTPError as e:
                raise FetchError(message, issue_number=issue_number,
                                 status_code=response.status_code, cause=e) from e
            raise FetchError(message, issue_number=issue_number, status_code=response.status_code)

        try:
            return Issue.from_api(response.json())
        except (ValueError, TypeError, AttributeError) as e:
            raise FetchError(f"Malformed response for issue #{issue_number}: {e}",
                             issue_number=issue_number, status_code=response.status_code,
                             cause=e) from e
