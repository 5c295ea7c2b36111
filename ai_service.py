#!/usr/bin/env python3
"""
AI Insight Service for GitHub Issues
Handles OpenAI integration: free-form insight, label suggestions and prioritization
Responses are surfaced as text; nothing beyond line splitting is parsed.
"""

from typing import List, Optional

from openai import OpenAI, OpenAIError

from config import (
    AI_ANALYSIS_TEMPERATURE,
    AI_INSIGHT_MAX_TOKENS,
    AI_LABELS_MAX_TOKENS,
    AI_PRIORITY_MAX_TOKENS,
    DEFAULT_OPENAI_MODELS,
    AppConfig
)
from models import Issue


INSIGHT_PROMPT = """Analyze the following GitHub issue and provide insights:

Title: {title}
Body: {body}

Please provide:
1. A brief summary of the issue
2. Potential root causes
3. Suggested steps to resolve the issue
4. Any additional recommendations"""

LABELS_PROMPT = """Based on the following GitHub issue, suggest 3-5 appropriate labels:

Title: {title}
Body: {body}

Please provide the labels as a list, one per line, with no numbering or extra commentary."""

PRIORITY_PROMPT = """Analyze the following GitHub issue and suggest a priority level (Low, Medium, High, or Critical):

Title: {title}
Body: {body}

Please provide the priority level and a brief justification."""


class AIServiceError(Exception):
    """Raised when the generative service is unreachable or returns an error"""

    def __init__(self, message: str, operation: Optional[str] = None):
        self.operation = operation
        super().__init__(message)


class AIInsightClient:
    """Service for AI-powered issue insight using OpenAI"""

    def __init__(self, client: Optional[OpenAI] = None,
                 long_model: str = DEFAULT_OPENAI_MODELS['long'],
                 short_model: str = DEFAULT_OPENAI_MODELS['short']):
        self.client = client
        self.long_model = long_model
        self.short_model = short_model

    @classmethod
    def create_from_config(cls, config: AppConfig) -> 'AIInsightClient':
        """Create a client instance from the application configuration"""
        client = None
        if config.openai_api_key:
            client = OpenAI(api_key=config.openai_api_key, timeout=config.request_timeout)
        return cls(client, long_model=config.long_model, short_model=config.short_model)

    def is_available(self) -> bool:
        """Check if AI service is available (has valid client)"""
        return self.client is not None

    def _complete(self, operation: str, prompt: str, model: str, max_tokens: int) -> str:
        """Send one prompt and return the completion text"""
        if not self.client:
            raise AIServiceError("OpenAI client is not configured", operation)

        try:
            response = self.client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=max_tokens,
                temperature=AI_ANALYSIS_TEMPERATURE
            )
        except OpenAIError as e:
            raise AIServiceError(f"OpenAI request failed during {operation}: {e}", operation) from e

        if not response.choices or response.choices[0].message.content is None:
            raise AIServiceError(f"OpenAI returned an empty response during {operation}", operation)

        return response.choices[0].message.content

    @staticmethod
    def _format_prompt(template: str, issue: Issue) -> str:
        return template.format(title=issue.title, body=issue.body or '')

    def get_insight(self, issue: Issue) -> str:
        """Ask for summary, root cause, fix plan and recommendations, returned verbatim"""
        prompt = self._format_prompt(INSIGHT_PROMPT, issue)
        return self._complete('insight', prompt, self.long_model, AI_INSIGHT_MAX_TOKENS).strip()

    def suggest_labels(self, issue: Issue) -> List[str]:
        """
        Ask for 3-5 label suggestions.

        Returns:
            Non-blank response lines in response order, otherwise untouched
        """
        prompt = self._format_prompt(LABELS_PROMPT, issue)
        response = self._complete('labels', prompt, self.long_model, AI_LABELS_MAX_TOKENS)
        return [line for line in response.splitlines() if line.strip()]

    def prioritize(self, issue: Issue) -> str:
        """Ask for a priority level with justification; not parsed into a fixed level"""
        prompt = self._format_prompt(PRIORITY_PROMPT, issue)
        return self._complete('priority', prompt, self.short_model, AI_PRIORITY_MAX_TOKENS).strip()
