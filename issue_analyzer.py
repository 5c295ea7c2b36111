#!/usr/bin/env python3
"""
Issue Analysis Pipeline

Sequences fetch -> local analysis -> AI calls -> report assembly for one issue.
Every top-level operation fetches the issue afresh and degrades to a fixed
placeholder instead of raising when the tracker or the AI service fails.
"""

import os
from typing import Callable, List, Optional

from rich.console import Console

from ai_service import AIInsightClient, AIServiceError
from config import (
    AppConfig,
    ANALYSIS_UNAVAILABLE_TEXT,
    INSIGHT_UNAVAILABLE_TEXT,
    PRIORITY_UNAVAILABLE_TEXT
)
from issue_fetcher import IssueFetcher, FetchError
from language_detector import LanguageDetector
from models import Issue, AnalysisResult
from report_generator import ReportGenerator, report_filename
from suggestion_engine import provide_suggestions
from text_analysis import split_body_lines, extract_code_blocks, extract_mentions, summarize_body

console = Console()


def write_report_file(path: str, data: bytes) -> None:
    """Write a rendered report to disk"""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, 'wb') as f:
        f.write(data)


class IssueAnalyzer:
    """Runs the analysis pipeline for issues of one repository"""

    def __init__(self, config: AppConfig,
                 fetcher: Optional[IssueFetcher] = None,
                 ai_client: Optional[AIInsightClient] = None,
                 language_detector: Optional[LanguageDetector] = None,
                 report_generator: Optional[ReportGenerator] = None,
                 report_sink: Callable[[str, bytes], None] = write_report_file):
        self.config = config
        self.fetcher = fetcher or IssueFetcher(config)
        self.ai_client = ai_client or AIInsightClient.create_from_config(config)
        self.language_detector = language_detector or LanguageDetector()
        self.report_generator = report_generator or ReportGenerator(config.owner, config.repo)
        self.report_sink = report_sink

    def build_analysis(self, issue: Issue) -> AnalysisResult:
        """Local, rule-based analysis of an issue (no I/O)"""
        body_lines = split_body_lines(issue.body)
        code_blocks = extract_code_blocks(body_lines)

        return AnalysisResult(
            summary=summarize_body(body_lines),
            code_blocks=code_blocks,
            mentions=extract_mentions(issue.body),
            languages=self.language_detector.detect(code_blocks),
            suggestions=provide_suggestions(issue)
        )

    def _get_insight(self, issue: Issue) -> str:
        try:
            return self.ai_client.get_insight(issue)
        except AIServiceError as e:
            console.print(f"⚠️  AI insight failed for issue #{issue.number}: {e}", style="yellow", markup=False)
            return INSIGHT_UNAVAILABLE_TEXT

    def _get_label_suggestions(self, issue: Issue) -> List[str]:
        try:
            return self.ai_client.suggest_labels(issue)
        except AIServiceError as e:
            console.print(f"⚠️  Label suggestion failed for issue #{issue.number}: {e}", style="yellow", markup=False)
            return []

    def _get_priority(self, issue: Issue) -> str:
        try:
            return self.ai_client.prioritize(issue)
        except AIServiceError as e:
            console.print(f"⚠️  Prioritization failed for issue #{issue.number}: {e}", style="yellow", markup=False)
            return PRIORITY_UNAVAILABLE_TEXT

    def _fetch(self, issue_number: int) -> Optional[Issue]:
        try:
            return self.fetcher.fetch(issue_number)
        except (FetchError, ValueError) as e:
            console.print(f"❌ Error fetching issue #{issue_number}: {e}", style="red", markup=False)
            return None

    def analyze_issue(self, issue_number: int) -> str:
        """
        Produce the plain-text analysis of an issue with AI insight appended.

        Returns:
            The report text, or a fixed sentence if the issue could not be fetched
        """
        issue = self._fetch(issue_number)
        if issue is None:
            return ANALYSIS_UNAVAILABLE_TEXT

        analysis = self.build_analysis(issue)
        insight = self._get_insight(issue)
        return self.report_generator.assemble_text(issue, analysis, insight)

    def suggest_labels(self, issue_number: int) -> List[str]:
        """AI label suggestions; empty when the issue or the AI service is unavailable"""
        issue = self._fetch(issue_number)
        if issue is None:
            return []
        return self._get_label_suggestions(issue)

    def prioritize_issue(self, issue_number: int) -> str:
        """AI priority suggestion, or a fixed sentence on failure"""
        issue = self._fetch(issue_number)
        if issue is None:
            return PRIORITY_UNAVAILABLE_TEXT
        return self._get_priority(issue)

    def generate_html_report(self, issue_number: int, output_dir: str = '.') -> Optional[str]:
        """
        Render the HTML report and hand it to the report sink.

        The insight, label and priority calls fail independently; each failed
        section gets a placeholder and the report is still written.

        Returns:
            Path of the written report, or None if the issue could not be fetched
            or the file could not be written
        """
        issue = self._fetch(issue_number)
        if issue is None:
            return None

        analysis = self.build_analysis(issue)
        insight = self._get_insight(issue)
        label_suggestions = self._get_label_suggestions(issue)
        priority = self._get_priority(issue)

        document = self.report_generator.assemble_html(
            issue, analysis, insight, label_suggestions, priority
        )

        path = os.path.join(output_dir, report_filename(issue.number))
        try:
            self.report_sink(path, document.encode('utf-8'))
        except OSError as e:
            console.print(f"❌ Could not write report {path}: {e}", style="red", markup=False)
            return None

        return path
