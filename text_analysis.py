#!/usr/bin/env python3
"""
Text analysis helpers for GitHub issue bodies
Extracts fenced code blocks and @mentions and builds a short description summary.
All functions are pure; none of them raise on empty or missing input.
"""

import re
from typing import List, Optional

from config import (
    CODE_FENCE_MARKER,
    SUMMARY_MAX_LINES,
    SUMMARY_MAX_CHARS,
    SUMMARY_ELLIPSIS,
    NO_DESCRIPTION_TEXT
)

MENTION_PATTERN = re.compile(r'@(\w+)')


def split_body_lines(body: Optional[str]) -> List[str]:
    """
    Split an issue body into lines; a missing body has no lines.

    Only LF and CRLF end a line. Other Unicode separators stay inside the line.
    """
    if not body:
        return []
    return body.replace("\r\n", "\n").split("\n")


def extract_code_blocks(body_lines: List[str]) -> List[str]:
    """
    Extract fenced code blocks from issue body lines.

    Any line starting with the fence marker toggles between inside and outside
    a block. Content of a block that is never closed is dropped.

    Args:
        body_lines: Issue body split into lines

    Returns:
        Stripped block contents in body order
    """
    code_blocks = []
    in_code_block = False
    current_block = ""

    for line in body_lines:
        if line.startswith(CODE_FENCE_MARKER):
            if in_code_block:
                code_blocks.append(current_block.strip())
                current_block = ""
            in_code_block = not in_code_block
        elif in_code_block:
            current_block += line + "\n"

    return code_blocks


def extract_mentions(body: Optional[str]) -> List[str]:
    """Return every @handle in the body, in order and with repeats"""
    if not body:
        return []
    return MENTION_PATTERN.findall(body)


def summarize_body(body_lines: List[str]) -> str:
    """
    Summarize the start of an issue description.

    Takes the first few lines, cuts them to the character limit and always
    appends the ellipsis, so the result is at most
    SUMMARY_MAX_CHARS + len(SUMMARY_ELLIPSIS) characters long.
    """
    if not body_lines or not any(line.strip() for line in body_lines):
        return NO_DESCRIPTION_TEXT

    head = "\n".join(body_lines[:SUMMARY_MAX_LINES])
    return head[:SUMMARY_MAX_CHARS] + SUMMARY_ELLIPSIS
