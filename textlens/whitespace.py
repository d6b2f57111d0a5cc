#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: whitespace.py
# Project: textlens
# Description: Whitespace cleaner and whitespace statistics
# Created: 2025-05-21 15:48:09
# Modified: 2025-06-02 11:23:52

import re
import time
import logging
from typing import Dict, Any

from textlens.textanalysis import round_half_up

logger = logging.getLogger(__name__)


def clean_whitespace(
    text: str,
    trim_lines: bool = True,
    remove_extra_spaces: bool = True,
    remove_extra_newlines: bool = True,
    remove_leading_whitespace: bool = False,
    remove_trailing_whitespace: bool = False,
    normalize_line_endings: bool = True,
    remove_tabs: bool = False,
    remove_all_whitespace: bool = False
) -> Dict[str, Any]:
    """
    Remove and normalize whitespace according to the enabled options.

    Steps run in this order: line endings, tabs, extra spaces, line
    trimming, extra newlines, leading and trailing whitespace. Only
    steps that actually changed the text are listed in changes_applied.

    Args:
        text (str): Input text
        trim_lines (bool): Strip each line
        remove_extra_spaces (bool): Collapse runs of spaces and tabs
        remove_extra_newlines (bool): Allow at most one blank line in a row
        remove_leading_whitespace (bool): Strip the start of the text
        remove_trailing_whitespace (bool): Strip the end of the text
        normalize_line_endings (bool): Convert CRLF and CR to LF
        remove_tabs (bool): Delete tab characters
        remove_all_whitespace (bool): Delete every whitespace character,
                                      ignoring all other options

    Returns:
        Dict: original, cleaned, changes_applied and characters_saved
    """
    start = time.perf_counter()

    if text is None:
        raise ValueError("Text is required")

    cleaned = text
    changes_applied = []

    def apply(label, func):
        nonlocal cleaned
        before = cleaned
        cleaned = func(cleaned)
        if cleaned != before:
            changes_applied.append(label)

    if remove_all_whitespace:
        cleaned = re.sub(r"\s+", "", cleaned)
        changes_applied.append("Removed all whitespace")
    else:
        if normalize_line_endings:
            apply("Normalized line endings", lambda s: s.replace("\r\n", "\n").replace("\r", "\n"))
        if remove_tabs:
            apply("Removed tabs", lambda s: s.replace("\t", ""))
        if remove_extra_spaces:
            apply("Removed extra spaces", lambda s: re.sub(r"[ \t]+", " ", s))
        if trim_lines:
            apply("Trimmed lines", lambda s: "\n".join(line.strip() for line in s.split("\n")))
        if remove_extra_newlines:
            apply("Removed extra newlines", lambda s: re.sub(r"\n{3,}", "\n\n", s))
        if remove_leading_whitespace:
            apply("Removed leading whitespace", str.lstrip)
        if remove_trailing_whitespace:
            apply("Removed trailing whitespace", str.rstrip)

    elapsed = (time.perf_counter() - start) * 1000
    logger.debug(f"Whitespace cleaner applied {len(changes_applied)} change(s) in {elapsed:.2f}ms")

    return {
        "original": text,
        "cleaned": cleaned,
        "changes_applied": changes_applied,
        "characters_saved": len(text) - len(cleaned),
        "processing_time": elapsed,
    }


def analyze_whitespace(text: str) -> Dict[str, Any]:
    """
    Count the kinds of whitespace in a text.

    Args:
        text (str): Input text

    Returns:
        Dict: Per-kind counts and the overall whitespace percentage
    """
    spaces = text.count(" ")
    tabs = text.count("\t")
    newlines = text.count("\n")
    carriage_returns = text.count("\r")

    empty_lines = sum(1 for line in text.split("\n") if not line.strip())
    leading = len(text) - len(text.lstrip())
    trailing = len(text) - len(text.rstrip())
    consecutive_spaces = sum(len(run) for run in re.findall(r" {2,}", text))

    total_whitespace = spaces + tabs + newlines + carriage_returns
    percentage = int(round_half_up(total_whitespace / len(text) * 100)) if text else 0

    return {
        "spaces": spaces,
        "tabs": tabs,
        "newlines": newlines,
        "carriage_returns": carriage_returns,
        "empty_lines": empty_lines,
        "leading_whitespace": leading,
        "trailing_whitespace": trailing,
        "consecutive_spaces": consecutive_spaces,
        "total_whitespace": total_whitespace,
        "whitespace_percentage": percentage,
    }


def tabs_to_spaces(text: str, tab_size: int = 2) -> str:
    return text.replace("\t", " " * tab_size)


def spaces_to_tabs(text: str, tab_size: int = 2) -> str:
    return re.sub(" {%d}" % tab_size, "\t", text)


def remove_blank_lines(text: str) -> str:
    return "\n".join(line for line in text.split("\n") if line.strip())


def collapse_blank_lines(text: str) -> str:
    return re.sub(r"\n\s*\n", "\n\n", text)


def indent(text: str, spaces: int = 2) -> str:
    prefix = " " * spaces
    return "\n".join(prefix + line for line in text.split("\n"))


def unindent(text: str) -> str:
    """Remove the smallest common indentation, ignoring blank lines."""
    lines = text.split("\n")
    indents = [len(line) - len(line.lstrip()) for line in lines if line.strip()]

    min_indent = min(indents) if indents else 0
    if min_indent == 0:
        return text

    return "\n".join(line[min_indent:] for line in lines)
