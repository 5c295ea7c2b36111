#!/usr/bin/env python3
"""
Heuristic programming-language detection for code blocks
"""

from typing import Dict, List, Optional

from config import LANGUAGE_HINTS


class LanguageDetector:
    """
    Keyword-hint language classifier.

    Each block is matched against an ordered {language: hints} table by plain
    substring search; the first language with any matching hint wins and the
    block is not checked further. Prose that happens to contain a hint will be
    misclassified, and languages outside the table are never reported.
    """

    def __init__(self, hints: Optional[Dict[str, List[str]]] = None):
        self.hints = LANGUAGE_HINTS if hints is None else hints

    def detect_block(self, code_block: str) -> Optional[str]:
        """Return the language tag for one block, or None if nothing matches"""
        for language, keywords in self.hints.items():
            if any(keyword in code_block for keyword in keywords):
                return language
        return None

    def detect(self, code_blocks: List[str]) -> List[str]:
        """Return the distinct languages found across blocks, in first-seen order"""
        languages = []
        for block in code_blocks:
            language = self.detect_block(block)
            if language and language not in languages:
                languages.append(language)
        return languages
