#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: keywords.py
# Project: textlens
# Description: Keyword density checker
# Created: 2025-05-20 14:37:51
# Modified: 2025-06-02 11:21:07

import re
import time
import logging
from typing import Dict, List, Any, Optional

from bs4 import BeautifulSoup

from textlens.textanalysis import (
    STOP_WORDS,
    count_words,
    get_word_frequency,
    get_ngram_frequency,
    calculate_keyword_density,
    count_keyword_matches,
    round_half_up,
)

logger = logging.getLogger(__name__)

DEFAULT_TOP_COUNT = 20
OPTIMAL_DENSITY = {"min": 0.5, "max": 2.5, "ideal": 1.5}


def strip_html(html: str) -> str:
    """
    Extract readable text from raw HTML content.

    Args:
        html (str): HTML source as a string.

    Returns:
        str: Visible text on a single line.
    """
    soup = BeautifulSoup(html, "html.parser")

    for tag in soup(["script", "style"]):
        tag.decompose()

    text = soup.get_text(separator=" ")
    return re.sub(r"\s+", " ", text).strip()


def frequency_to_density_items(
    frequency: Dict[str, int],
    total_words: int,
    include_stop_words: bool,
    top_count: int
) -> List[Dict[str, Any]]:
    """
    Turn a frequency map into density rows sorted by count.

    Stop words (unless included) and single-character keys are skipped.

    Args:
        frequency (Dict): Word or phrase to count
        total_words (int): Word count of the analyzed text
        include_stop_words (bool): Keep stop words in the output
        top_count (int): Maximum number of rows

    Returns:
        List[Dict]: keyword, count and density rows
    """
    items = []

    for keyword, count in frequency.items():
        if not include_stop_words and keyword.lower() in STOP_WORDS:
            continue
        if len(keyword) <= 1:
            continue

        density = (count / total_words) * 100 if total_words > 0 else 0
        items.append({
            "keyword": keyword,
            "count": count,
            "density": round_half_up(density, 2),
        })

    items.sort(key=lambda item: item["count"], reverse=True)
    return items[:top_count]


def density_recommendation(density: float) -> str:
    if density < OPTIMAL_DENSITY["min"]:
        return "Keyword density is low. Consider using the keyword more naturally in your content."
    elif density <= OPTIMAL_DENSITY["max"]:
        return "Keyword density is optimal for SEO."
    elif density <= 4:
        return "Keyword density is slightly high. Reduce usage to avoid keyword stuffing."
    return "Keyword density is too high. This may be seen as keyword stuffing by search engines."


def analyze_keyword_density(
    content: str,
    target_keyword: Optional[str] = None,
    is_html: bool = False,
    include_stop_words: bool = False,
    top_count: int = DEFAULT_TOP_COUNT
) -> Dict[str, Any]:
    """
    Analyze word and phrase density in content.

    Args:
        content (str): Text or HTML to analyze
        target_keyword (str, optional): Keyword or phrase to score
        is_html (bool): Strip markup before counting
        include_stop_words (bool): Keep stop words in the single-word table
        top_count (int): Rows per table

    Returns:
        Dict: Totals, single word and phrase tables, target keyword result
    """
    start = time.perf_counter()

    if not content or not content.strip():
        raise ValueError("Content is required")

    if is_html:
        content = strip_html(content)

    total_words = count_words(content)
    single_word_freq = get_word_frequency(content, False)

    single_words = frequency_to_density_items(
        single_word_freq, total_words, include_stop_words, top_count
    )
    two_word_phrases = frequency_to_density_items(
        get_ngram_frequency(content, 2, False), total_words, True, top_count
    )
    three_word_phrases = frequency_to_density_items(
        get_ngram_frequency(content, 3, False), total_words, True, top_count
    )

    target_result = None
    if target_keyword and target_keyword.strip():
        density = calculate_keyword_density(content, target_keyword)
        count = count_keyword_matches(content, target_keyword)

        target_result = {
            "keyword": target_keyword,
            "count": count,
            "density": round_half_up(density, 2),
            "recommendation": density_recommendation(density),
        }

    elapsed = (time.perf_counter() - start) * 1000
    logger.debug(f"Keyword density: {total_words} words, {len(single_word_freq)} unique in {elapsed:.2f}ms")

    return {
        "total_words": total_words,
        "unique_words": len(single_word_freq),
        "single_words": single_words,
        "two_word_phrases": two_word_phrases,
        "three_word_phrases": three_word_phrases,
        "target_keyword": target_result,
        "processing_time": elapsed,
    }


def get_optimal_density() -> Dict[str, float]:
    return dict(OPTIMAL_DENSITY)


def suggest_related_keywords(content: str, main_keyword: str) -> List[str]:
    """
    Two-word phrases from the content that share a word with main_keyword.

    Args:
        content (str): Text to mine
        main_keyword (str): Keyword or phrase

    Returns:
        List[str]: Up to 10 related phrases
    """
    if not content or not content.strip():
        return []

    result = analyze_keyword_density(content, include_stop_words=False, top_count=50)
    main_words = set(main_keyword.lower().split())

    related = []
    for phrase in result["two_word_phrases"]:
        phrase_words = phrase["keyword"].lower().split()
        if any(word in main_words for word in phrase_words) and \
                phrase["keyword"].lower() != main_keyword.lower():
            related.append(phrase["keyword"])

    return related[:10]
