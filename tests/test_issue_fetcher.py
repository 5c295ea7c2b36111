#!/usr/bin/env python3
"""
Unit tests for issue_fetcher.py - GitHub issue retrieval
"""
# /// script
# requires-python = ">=3.8"
# dependencies = [
#     "requests",
#     "pytest",
# ]
# ///

import unittest
from unittest.mock import Mock, patch
import os
import sys

import requests

# Add parent directory to path to import modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from config import AppConfig
from issue_fetcher import IssueFetcher, FetchError
from models import Issue


class TestIssueFetcher(unittest.TestCase):
    """Test the IssueFetcher class"""

    def setUp(self):
        """Set up test fixtures"""
        self.config = AppConfig(owner="test_owner", repo="test_repo",
                                github_token="fake_token", openai_api_key="key",
                                request_timeout=5.0)
        self.fetcher = IssueFetcher(self.config)
        self.sample_issue = {
            "number": 123,
            "title": "Test Issue",
            "body": "Something broke",
            "state": "open",
            "created_at": "2024-01-15T10:00:00Z",
            "labels": [{"name": "bug"}, {"name": "p1"}],
            "user": {"login": "testuser"},
            "html_url": "https://github.com/test_owner/test_repo/issues/123"
        }

    def _response(self, status_code=200, payload=None):
        response = Mock()
        response.status_code = status_code
        response.json.return_value = payload
        if status_code >= 400:
            response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
        return response

    def test_session_headers(self):
        """Requests carry the token and the v3 media type"""
        headers = self.fetcher.session.headers
        self.assertEqual(headers['Authorization'], 'token fake_token')
        self.assertEqual(headers['Accept'], 'application/vnd.github.v3+json')

    def test_fetch_success(self):
        with patch.object(self.fetcher.session, 'get', return_value=self._response(200, self.sample_issue)) as mock_get:
            issue = self.fetcher.fetch(123)

        mock_get.assert_called_once_with(
            "https://api.github.com/repos/test_owner/test_repo/issues/123", timeout=5.0
        )
        self.assertIsInstance(issue, Issue)
        self.assertEqual(issue.number, 123)
        self.assertEqual(issue.title, "Test Issue")
        self.assertEqual(issue.labels, ["bug", "p1"])
        self.assertEqual(issue.author, "testuser")
        self.assertEqual(issue.created_at, "2024-01-15T10:00:00Z")

    def test_every_fetch_issues_a_request(self):
        """No caching between calls"""
        with patch.object(self.fetcher.session, 'get', return_value=self._response(200, self.sample_issue)) as mock_get:
            self.fetcher.fetch(123)
            self.fetcher.fetch(123)
        self.assertEqual(mock_get.call_count, 2)

    def test_not_found(self):
        with patch.object(self.fetcher.session, 'get', return_value=self._response(404, {"message": "Not Found"})):
            with self.assertRaises(FetchError) as ctx:
                self.fetcher.fetch(999)

        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(ctx.exception.issue_number, 999)
        self.assertIsInstance(ctx.exception.cause, requests.HTTPError)
        self.assertIn("not found", str(ctx.exception))

    def test_unauthorized(self):
        with patch.object(self.fetcher.session, 'get', return_value=self._response(401, {})):
            with self.assertRaises(FetchError) as ctx:
                self.fetcher.fetch(1)
        self.assertEqual(ctx.exception.status_code, 401)

    def test_transport_error(self):
        with patch.object(self.fetcher.session, 'get', side_effect=requests.ConnectionError("down")):
            with self.assertRaises(FetchError) as ctx:
                self.fetcher.fetch(1)

        self.assertIsNone(ctx.exception.status_code)
        self.assertIsInstance(ctx.exception.__cause__, requests.ConnectionError)

    def test_malformed_json(self):
        response = self._response(200)
        response.json.side_effect = ValueError("not json")
        with patch.object(self.fetcher.session, 'get', return_value=response):
            with self.assertRaises(FetchError):
                self.fetcher.fetch(1)

    def test_invalid_issue_number(self):
        with patch.object(self.fetcher.session, 'get') as mock_get:
            for bad in (0, -3, "5", 1.5, True):
                with self.subTest(bad=bad):
                    with self.assertRaises(ValueError):
                        self.fetcher.fetch(bad)
        mock_get.assert_not_called()

    def test_custom_api_url(self):
        config = AppConfig(owner="o", repo="r", github_token="t", openai_api_key="k",
                           github_api_url="https://ghe.example.com/api/v3")
        fetcher = IssueFetcher(config)
        self.assertEqual(fetcher.issue_url(4), "https://ghe.example.com/api/v3/repos/o/r/issues/4")


class TestIssueFromApi(unittest.TestCase):
    """Test payload conversion"""

    def test_null_body_and_missing_fields(self):
        issue = Issue.from_api({"number": 5, "title": "T", "body": None, "labels": [], "user": None})
        self.assertIsNone(issue.body)
        self.assertEqual(issue.labels, [])
        self.assertEqual(issue.author, "unknown")

    def test_string_labels(self):
        issue = Issue.from_api({"number": 5, "title": "T", "labels": ["bug", "docs"], "user": {"login": "me"}})
        self.assertEqual(issue.labels, ["bug", "docs"])

    def test_missing_number(self):
        with self.assertRaises(ValueError):
            Issue.from_api({"title": "no number"})


if __name__ == '__main__':
    unittest.main()
