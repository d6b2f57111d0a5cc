#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: __init__.py
# Project: textlens
# Description: 
# Created: 2025-05-12 16:47:22
# Modified: 2025-06-02 11:34:02

from .__version__ import __version__
from .textanalysis import (
    STOP_WORDS,
    count_words,
    count_sentences,
    count_paragraphs,
    count_lines,
    calculate_reading_time,
    calculate_speaking_time,
    get_word_frequency,
    get_ngram_frequency,
    calculate_keyword_density,
    escape_regex,
    keyword_pattern,
    count_keyword_matches,
    extract_urls,
    extract_hashtags,
    extract_mentions,
    count_emojis,
    normalize_whitespace,
    levenshtein_distance,
    calculate_similarity,
    remove_stop_words,
)
from .wordcount import (
    word_count_report,
    get_word_stats,
    estimate_grade_level,
    format_time,
)
from .keywords import (
    analyze_keyword_density,
    suggest_related_keywords,
    get_optimal_density,
)
from .diff import (
    compare_texts,
    compare_words,
    compare_characters,
    generate_unified_diff,
    get_diff_stats,
)
from .whitespace import (
    clean_whitespace,
    analyze_whitespace,
)
from .social import (
    count_characters,
    check_platform_limit,
    count_hashtags,
    analyze_hashtags,
)

__all__ = [
    "__version__",
    "STOP_WORDS",
    "count_words",
    "count_sentences",
    "count_paragraphs",
    "count_lines",
    "calculate_reading_time",
    "calculate_speaking_time",
    "get_word_frequency",
    "get_ngram_frequency",
    "calculate_keyword_density",
    "escape_regex",
    "keyword_pattern",
    "count_keyword_matches",
    "extract_urls",
    "extract_hashtags",
    "extract_mentions",
    "count_emojis",
    "normalize_whitespace",
    "levenshtein_distance",
    "calculate_similarity",
    "remove_stop_words",
    "word_count_report",
    "get_word_stats",
    "estimate_grade_level",
    "format_time",
    "analyze_keyword_density",
    "suggest_related_keywords",
    "get_optimal_density",
    "compare_texts",
    "compare_words",
    "compare_characters",
    "generate_unified_diff",
    "get_diff_stats",
    "clean_whitespace",
    "analyze_whitespace",
    "count_characters",
    "check_platform_limit",
    "count_hashtags",
    "analyze_hashtags",
]
