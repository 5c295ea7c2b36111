#!/usr/bin/env python3
"""
Report Generation Module for GitHub Issue Analysis
Handles formatting the plain-text analysis and the HTML report
Both renderings are pure functions of their inputs; writing files is left to the caller
"""

import html
from typing import List, Optional

from config import (
    REPORT_FILENAME_TEMPLATE,
    INSIGHT_UNAVAILABLE_TEXT,
    PRIORITY_UNAVAILABLE_TEXT,
    LABELS_UNAVAILABLE_TEXT
)
from models import Issue, AnalysisResult
from utils import generate_issue_url
from utils_dates import format_timestamp


HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{page_title}</title>
<style>
  body {{ font-family: -apple-system, "Segoe UI", Helvetica, Arial, sans-serif; max-width: 860px; margin: 2em auto; padding: 0 1em; color: #24292f; line-height: 1.5; }}
  h1 {{ font-size: 1.6em; border-bottom: 1px solid #d0d7de; padding-bottom: .3em; }}
  h2 {{ font-size: 1.2em; margin-top: 1.6em; }}
  .meta {{ color: #57606a; }}
  .label, .suggested-label {{ display: inline-block; padding: 0 .6em; margin: 0 .3em .3em 0; border-radius: 2em; font-size: .85em; }}
  .label {{ background: #ddf4ff; color: #0969da; }}
  .suggested-label {{ background: #fff8c5; color: #7d4e00; border: 1px solid #d4a72c; }}
  .priority {{ background: #ffebe9; border-left: 4px solid #cf222e; padding: .5em 1em; font-weight: 600; white-space: pre-wrap; }}
  pre {{ background: #f6f8fa; padding: 1em; overflow-x: auto; border-radius: 6px; }}
  .insight {{ white-space: pre-wrap; background: #f6f8fa; padding: 1em; border-radius: 6px; }}
  footer {{ margin-top: 3em; color: #57606a; font-size: .85em; }}
</style>
</head>
<body>
<h1>Issue #{number}: {title}</h1>
<p class="meta">Created by <strong>{author}</strong> on {created_at} &middot; <a href="{issue_url}">{issue_url}</a></p>
{labels_section}
<h2>Issue Description</h2>
<pre>{summary}</pre>
{code_section}
{mentions_section}
<h2>Suggestions</h2>
<ul>
{suggestions}
</ul>
<h2>AI Insight</h2>
<div class="insight">{insight}</div>
<h2>Suggested Labels</h2>
<p>{label_suggestions}</p>
<h2>Suggested Priority</h2>
<p class="priority">{priority}</p>
<footer>Generated by github-issue-analyzer for {repository}</footer>
</body>
</html>
"""


def report_filename(issue_number: int) -> str:
    """Name of the HTML report file for an issue"""
    return REPORT_FILENAME_TEMPLATE.format(number=issue_number)


class ReportGenerator:
    """Generates text and HTML reports for a single analysed issue"""

    def __init__(self, github_owner: Optional[str] = None, github_repo: Optional[str] = None):
        self.github_owner = github_owner
        self.github_repo = github_repo

    @property
    def repo_display(self) -> str:
        if self.github_owner and self.github_repo:
            return f"{self.github_owner}/{self.github_repo}"
        return "Repository"

    def _issue_url(self, issue: Issue) -> str:
        return generate_issue_url({'number': issue.number, 'html_url': issue.html_url},
                                  self.github_owner, self.github_repo)

    def generate_header(self, issue: Issue) -> List[str]:
        """Generate header with issue metadata"""
        lines = [
            f"Issue #{issue.number}: {issue.title}",
            "",
            f"Created by: {issue.author}",
            f"Created at: {format_timestamp(issue.created_at)}",
            ""
        ]

        if issue.labels:
            lines.append("Labels:")
            lines.extend(f"- {label}" for label in issue.labels)
            lines.append("")

        return lines

    def add_description_section(self, analysis: AnalysisResult) -> List[str]:
        return ["Issue Description:", analysis.summary, ""]

    def add_code_section(self, analysis: AnalysisResult) -> List[str]:
        """Code block count and languages, only when blocks were found"""
        if not analysis.code_blocks:
            return []

        return [
            f"Code Blocks Found: {len(analysis.code_blocks)}",
            f"Languages detected: {', '.join(analysis.languages)}",
            ""
        ]

    def add_mentions_section(self, analysis: AnalysisResult) -> List[str]:
        if not analysis.mentions:
            return []

        lines = ["Mentions:"]
        lines.extend(f"- {mention}" for mention in analysis.mentions)
        lines.append("")
        return lines

    def render_analysis(self, issue: Issue, analysis: AnalysisResult) -> str:
        """Render the local analysis block in fixed section order"""
        lines = []
        lines.extend(self.generate_header(issue))
        lines.extend(self.add_description_section(analysis))
        lines.extend(self.add_code_section(analysis))
        lines.extend(self.add_mentions_section(analysis))
        lines.extend(analysis.suggestions)
        return '\n'.join(lines)

    def assemble_text(self, issue: Issue, analysis: AnalysisResult, insight: Optional[str]) -> str:
        """Analysis block followed by the AI insight"""
        lines = [
            self.render_analysis(issue, analysis),
            "",
            "AI Insight:",
            insight or INSIGHT_UNAVAILABLE_TEXT
        ]
        return '\n'.join(lines)

    def assemble_html(self, issue: Issue, analysis: AnalysisResult, insight: Optional[str],
                      label_suggestions: Optional[List[str]] = None,
                      priority: Optional[str] = None) -> str:
        """
        Render the full HTML report.

        Every interpolated value is escaped; issue and AI text may contain markup.
        """
        esc = html.escape

        labels_section = ""
        if issue.labels:
            tags = ''.join(f'<span class="label">{esc(label)}</span>' for label in issue.labels)
            labels_section = f"<h2>Labels</h2>\n<p>{tags}</p>"

        code_section = ""
        if analysis.code_blocks:
            languages = ', '.join(analysis.languages)
            blocks = '\n'.join(f"<pre><code>{esc(block)}</code></pre>" for block in analysis.code_blocks)
            code_section = (
                f"<h2>Code Blocks</h2>\n"
                f"<p>Code Blocks Found: {len(analysis.code_blocks)}<br>Languages detected: {esc(languages)}</p>\n"
                f"{blocks}"
            )

        mentions_section = ""
        if analysis.mentions:
            items = '\n'.join(f"<li>{esc(mention)}</li>" for mention in analysis.mentions)
            mentions_section = f"<h2>Mentions</h2>\n<ul>\n{items}\n</ul>"

        # The first entry is the "Suggestions:" header, rendered as the <h2>
        suggestion_lines = [line[2:] if line.startswith('- ') else line for line in analysis.suggestions[1:]]
        suggestions = '\n'.join(f"<li>{esc(line)}</li>" for line in suggestion_lines)

        if label_suggestions:
            label_html = ''.join(f'<span class="suggested-label">{esc(label)}</span>' for label in label_suggestions)
        else:
            label_html = esc(LABELS_UNAVAILABLE_TEXT)

        return HTML_TEMPLATE.format(
            page_title=esc(f"Issue #{issue.number} Analysis Report"),
            number=issue.number,
            title=esc(issue.title),
            author=esc(issue.author),
            created_at=esc(format_timestamp(issue.created_at)),
            issue_url=esc(self._issue_url(issue)),
            labels_section=labels_section,
            summary=esc(analysis.summary),
            code_section=code_section,
            mentions_section=mentions_section,
            suggestions=suggestions,
            insight=esc(insight or INSIGHT_UNAVAILABLE_TEXT),
            label_suggestions=label_html,
            priority=esc(priority or PRIORITY_UNAVAILABLE_TEXT),
            repository=esc(self.repo_display),
        )
