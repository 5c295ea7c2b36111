"""
Configuration module for the GitHub Issue Analyzer
Contains all configurable constants and settings used across the application.
"""

import os
from dataclasses import dataclass
from typing import List, Dict, Any, Mapping, Optional


# ============================================================================
# TEXT ANALYSIS
# ============================================================================

# Marker that opens and closes a fenced code block
CODE_FENCE_MARKER: str = '```'

# Description summary limits
SUMMARY_MAX_LINES: int = 5
SUMMARY_MAX_CHARS: int = 200
SUMMARY_ELLIPSIS: str = '...'
NO_DESCRIPTION_TEXT: str = 'No description provided.'

# Bodies shorter than this get a "too short" suggestion
SHORT_BODY_THRESHOLD: int = 50


# ============================================================================
# LANGUAGE DETECTION HINTS
# ============================================================================

# Checked in order; the first language with a matching hint wins for a block.
# More specific languages come before the ones whose hints they would trip.
LANGUAGE_HINTS: Dict[str, List[str]] = {
    'php':        ['<?php', '$this->', 'echo $'],
    'java':       ['public class', 'import java.', 'System.out.println', 'public static void'],
    'cpp':        ['#include', 'std::', 'cout <<'],
    'csharp':     ['using System', 'namespace ', 'Console.WriteLine'],
    'typescript': ['interface ', ': string', ': number', 'import type'],
    'go':         ['package main', 'func ', 'fmt.', ':='],
    'rust':       ['fn main', 'let mut', 'println!', 'impl '],
    'javascript': ['function', 'const ', 'let ', 'var ', '=>', 'console.log', 'require('],
    'python':     ['def ', 'import ', 'from ', 'print(', 'self.', 'elif '],
    'ruby':       ['puts ', 'require \'', 'attr_accessor'],
    'sql':        ['SELECT ', 'INSERT INTO', 'CREATE TABLE'],
    'shell':      ['#!/bin/bash', '#!/bin/sh', 'sudo ', 'apt-get ', 'echo '],
}


# ============================================================================
# AI INTEGRATION SETTINGS
# ============================================================================

# Model tiers: 'long' for insight and labels, 'short' for quick prioritization
DEFAULT_OPENAI_MODELS: Dict[str, str] = {
    'long': 'gpt-4o',
    'short': 'gpt-4o-mini',
}

# AI analysis temperature setting (lower = more consistent)
AI_ANALYSIS_TEMPERATURE: float = 0.2

# Completion length limits per operation
AI_INSIGHT_MAX_TOKENS: int = 1000
AI_LABELS_MAX_TOKENS: int = 100
AI_PRIORITY_MAX_TOKENS: int = 150


# ============================================================================
# DEGRADED RESULTS
# ============================================================================

ANALYSIS_UNAVAILABLE_TEXT: str = 'Unable to analyze the issue at this time.'
INSIGHT_UNAVAILABLE_TEXT: str = 'AI insight is unavailable at this time.'
PRIORITY_UNAVAILABLE_TEXT: str = 'Unable to determine priority at this time.'
LABELS_UNAVAILABLE_TEXT: str = 'No label suggestions available.'


# ============================================================================
# REMOTE SERVICES & REPORT OUTPUT
# ============================================================================

DEFAULT_GITHUB_API_URL: str = 'https://api.github.com'

# Seconds before a GitHub or OpenAI call is abandoned
DEFAULT_REQUEST_TIMEOUT: float = 30.0

# Report file name, formatted with the issue number
REPORT_FILENAME_TEMPLATE: str = 'issue-{number}-report.html'


# ============================================================================
# ENVIRONMENT VARIABLE HELPERS
# ============================================================================

REQUIRED_ENV_VARS: Dict[str, str] = {
    'owner': 'GITHUB_REPO_OWNER',
    'repo': 'GITHUB_REPO_NAME',
    'github_token': 'GITHUB_TOKEN',
    'openai_api_key': 'OPENAI_API_KEY',
}


class ConfigurationError(Exception):
    """Raised when required configuration is missing"""

    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(f"Missing required configuration: {', '.join(self.missing)}")


def get_openai_model(tier: str = 'long', env: Optional[Mapping[str, str]] = None) -> str:
    """Get OpenAI model for a tier ('long' or 'short') with fallback to the default."""
    if tier not in DEFAULT_OPENAI_MODELS:
        raise ValueError(f"Unknown model tier: {tier}")
    env = os.environ if env is None else env
    return env.get(f'OPENAI_MODEL_{tier.upper()}') or DEFAULT_OPENAI_MODELS[tier]


@dataclass(frozen=True)
class AppConfig:
    """Process-wide settings, built once at startup and passed to the pipeline"""
    owner: str
    repo: str
    github_token: str
    openai_api_key: str
    long_model: str = DEFAULT_OPENAI_MODELS['long']
    short_model: str = DEFAULT_OPENAI_MODELS['short']
    github_api_url: str = DEFAULT_GITHUB_API_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    @property
    def repo_display(self) -> str:
        return f"{self.owner}/{self.repo}"


# ============================================================================
# CONFIGURATION VALIDATION
# ============================================================================

def validate_configuration(env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Validate configuration and return status."""
    env = os.environ if env is None else env

    config_status = {
        'github_owner': env.get('GITHUB_REPO_OWNER', ''),
        'github_repo': env.get('GITHUB_REPO_NAME', ''),
        'github_token': bool(env.get('GITHUB_TOKEN')),
        'openai_api_key': bool(env.get('OPENAI_API_KEY')),
        'openai_models': {tier: get_openai_model(tier, env) for tier in DEFAULT_OPENAI_MODELS},
        'missing': []
    }

    for env_name in REQUIRED_ENV_VARS.values():
        if not env.get(env_name):
            config_status['missing'].append(env_name)

    return config_status


def load_config(env: Optional[Mapping[str, str]] = None, owner: Optional[str] = None,
                repo: Optional[str] = None) -> AppConfig:
    """
    Build the application configuration from environment variables.

    Args:
        env: Mapping to read from (defaults to os.environ)
        owner: Repository owner overriding GITHUB_REPO_OWNER
        repo: Repository name overriding GITHUB_REPO_NAME

    Returns:
        Populated AppConfig

    Raises:
        ConfigurationError: if any required value is absent
    """
    env = dict(os.environ if env is None else env)
    if owner:
        env['GITHUB_REPO_OWNER'] = owner
    if repo:
        env['GITHUB_REPO_NAME'] = repo

    status = validate_configuration(env)
    if status['missing']:
        raise ConfigurationError(status['missing'])

    timeout_raw = env.get('REQUEST_TIMEOUT_SECONDS')
    try:
        request_timeout = float(timeout_raw) if timeout_raw else DEFAULT_REQUEST_TIMEOUT
    except ValueError:
        raise ConfigurationError([f'REQUEST_TIMEOUT_SECONDS (not a number: {timeout_raw!r})'])

    return AppConfig(
        owner=env['GITHUB_REPO_OWNER'],
        repo=env['GITHUB_REPO_NAME'],
        github_token=env['GITHUB_TOKEN'],
        openai_api_key=env['OPENAI_API_KEY'],
        long_model=status['openai_models']['long'],
        short_model=status['openai_models']['short'],
        github_api_url=(env.get('GITHUB_API_URL') or DEFAULT_GITHUB_API_URL).rstrip('/'),
        request_timeout=request_timeout,
    )


# Export key constants for easy import
__all__ = [
    'CODE_FENCE_MARKER',
    'SUMMARY_MAX_LINES',
    'SUMMARY_MAX_CHARS',
    'SUMMARY_ELLIPSIS',
    'NO_DESCRIPTION_TEXT',
    'SHORT_BODY_THRESHOLD',
    'LANGUAGE_HINTS',
    'DEFAULT_OPENAI_MODELS',
    'AI_ANALYSIS_TEMPERATURE',
    'AI_INSIGHT_MAX_TOKENS',
    'AI_LABELS_MAX_TOKENS',
    'AI_PRIORITY_MAX_TOKENS',
    'ANALYSIS_UNAVAILABLE_TEXT',
    'INSIGHT_UNAVAILABLE_TEXT',
    'PRIORITY_UNAVAILABLE_TEXT',
    'LABELS_UNAVAILABLE_TEXT',
    'DEFAULT_GITHUB_API_URL',
    'DEFAULT_REQUEST_TIMEOUT',
    'REPORT_FILENAME_TEMPLATE',
    'ConfigurationError',
    'AppConfig',
    'get_openai_model',
    'validate_configuration',
    'load_config'
]
