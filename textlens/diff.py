#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: diff.py
# Project: textlens
# Description: Line, word and character diffs with similarity scoring
# Created: 2025-05-21 10:03:44
# Modified: 2025-06-02 11:22:30

import re
import time
import logging
from typing import Dict, List, Any, Sequence

import numpy as np

from textlens.textanalysis import calculate_similarity

logger = logging.getLogger(__name__)


def compute_line_diff(original: Sequence[str], modified: Sequence[str]) -> List[Dict[str, Any]]:
    """
    Diff two sequences using a longest-common-subsequence table.

    Args:
        original (Sequence[str]): Original items (lines, words or characters)
        modified (Sequence[str]): Modified items

    Returns:
        List[Dict]: Changes in document order, each with type
                    ("added", "removed" or "unchanged"), value and
                    1-based line_number in its own sequence
    """
    m = len(original)
    n = len(modified)

    # Items are compared by integer id so each row is one vector comparison
    ids: Dict[str, int] = {}
    original_ids = np.array([ids.setdefault(item, len(ids)) for item in original], dtype=np.int64)
    modified_ids = np.array([ids.setdefault(item, len(ids)) for item in modified], dtype=np.int64)

    dp = np.zeros((m + 1, n + 1), dtype=np.int64)
    for i in range(1, m + 1):
        above = dp[i - 1]
        row = np.zeros(n + 1, dtype=np.int64)
        row[1:] = np.maximum(above[1:], above[:-1] + (modified_ids == original_ids[i - 1]))
        dp[i] = np.maximum.accumulate(row)

    changes = []
    i, j = m, n
    while i > 0 or j > 0:
        if i > 0 and j > 0 and original[i - 1] == modified[j - 1]:
            changes.append({"type": "unchanged", "value": original[i - 1], "line_number": i})
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or dp[i, j - 1] >= dp[i - 1, j]):
            changes.append({"type": "added", "value": modified[j - 1], "line_number": j})
            j -= 1
        else:
            changes.append({"type": "removed", "value": original[i - 1], "line_number": i})
            i -= 1

    changes.reverse()
    return changes


def compare_texts(
    original: str,
    modified: str,
    ignore_whitespace: bool = False,
    ignore_case: bool = False
) -> Dict[str, Any]:
    """
    Compare two texts line by line.

    Args:
        original (str): Original text
        modified (str): Modified text
        ignore_whitespace (bool): Collapse whitespace runs before comparing
        ignore_case (bool): Compare case-insensitively

    Returns:
        Dict: changes, additions, deletions, unchanged and similarity
    """
    start = time.perf_counter()

    if original is None or modified is None:
        raise ValueError("Both original and modified texts are required")

    processed_original = original
    processed_modified = modified

    if ignore_whitespace:
        processed_original = re.sub(r"\s+", " ", processed_original).strip()
        processed_modified = re.sub(r"\s+", " ", processed_modified).strip()

    if ignore_case:
        processed_original = processed_original.lower()
        processed_modified = processed_modified.lower()

    changes = compute_line_diff(
        processed_original.split("\n"),
        processed_modified.split("\n")
    )

    additions = sum(1 for change in changes if change["type"] == "added")
    deletions = sum(1 for change in changes if change["type"] == "removed")
    unchanged = sum(1 for change in changes if change["type"] == "unchanged")

    result = {
        "original": original,
        "modified": modified,
        "changes": changes,
        "additions": additions,
        "deletions": deletions,
        "unchanged": unchanged,
        "similarity": calculate_similarity(processed_original, processed_modified),
        "processing_time": (time.perf_counter() - start) * 1000,
    }

    logger.debug(f"Diff: +{additions} -{deletions} in {result['processing_time']:.2f}ms")
    return result


def compare_words(original: str, modified: str) -> List[Dict[str, Any]]:
    """Word-level diff; whitespace separators are kept as their own items."""
    return compute_line_diff(re.split(r"(\s+)", original), re.split(r"(\s+)", modified))


def compare_characters(original: str, modified: str) -> List[Dict[str, Any]]:
    return compute_line_diff(list(original), list(modified))


def generate_unified_diff(
    original: Sequence[str],
    modified: Sequence[str],
    original_name: str = "original",
    modified_name: str = "modified"
) -> str:
    """
    Render a diff of two line lists in unified format.

    Args:
        original (Sequence[str]): Original lines
        modified (Sequence[str]): Modified lines
        original_name (str): Label for the --- header
        modified_name (str): Label for the +++ header

    Returns:
        str: Unified diff text with @@ hunk headers
    """
    changes = compute_line_diff(original, modified)
    lines = [f"--- {original_name}", f"+++ {modified_name}"]

    chunk: List[str] = []
    chunk_start_original = 1
    chunk_start_modified = 1
    original_count = 0
    modified_count = 0
    original_line = 0
    modified_line = 0

    def flush():
        lines.append(
            f"@@ -{chunk_start_original},{original_count} "
            f"+{chunk_start_modified},{modified_count} @@"
        )
        lines.extend(chunk)

    for change in changes:
        if change["type"] == "unchanged":
            if chunk:
                flush()
                chunk = []
                original_count = 0
                modified_count = 0
            original_line += 1
            modified_line += 1
            chunk_start_original = original_line + 1
            chunk_start_modified = modified_line + 1
            continue

        if not chunk:
            chunk_start_original = original_line + 1
            chunk_start_modified = modified_line + 1

        if change["type"] == "removed":
            chunk.append(f"-{change['value']}")
            original_count += 1
            original_line += 1
        else:
            chunk.append(f"+{change['value']}")
            modified_count += 1
            modified_line += 1

    if chunk:
        flush()

    return "\n".join(lines)


def get_diff_stats(original: str, modified: str) -> Dict[str, Any]:
    result = compare_texts(original, modified)
    return {
        "lines_added": result["additions"],
        "lines_removed": result["deletions"],
        "lines_changed": result["additions"] + result["deletions"],
        "similarity": result["similarity"],
        "is_identical": result["additions"] == 0 and result["deletions"] == 0,
    }
