#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: wordcount.py
# Project: textlens
# Description: Word counter with reading time and grade level
# Created: 2025-05-20 09:12:05
# Modified: 2025-06-02 11:20:13

import re
import time
import logging
from typing import Dict, Any
from collections import Counter

from textlens.textanalysis import (
    DEFAULT_READING_WPM,
    DEFAULT_SPEAKING_WPM,
    count_words,
    count_sentences,
    count_paragraphs,
    count_lines,
    calculate_reading_time,
    calculate_speaking_time,
    get_word_frequency,
    tokenize_words,
    round_half_up,
)

logger = logging.getLogger(__name__)


def word_count_report(
    text: str,
    reading_wpm: int = DEFAULT_READING_WPM,
    speaking_wpm: int = DEFAULT_SPEAKING_WPM
) -> Dict[str, Any]:
    """
    Count characters, words, sentences, paragraphs and lines.

    Args:
        text (str): Input text
        reading_wpm (int): Silent reading speed in words per minute
        speaking_wpm (int): Speaking speed in words per minute

    Returns:
        Dict: Counts, reading/speaking time and averages
    """
    start = time.perf_counter()

    if text is None:
        raise ValueError("Text is required")

    characters_no_spaces = len(re.sub(r"\s", "", text))
    words = count_words(text)
    sentences = count_sentences(text)

    average_word_length = round_half_up(characters_no_spaces / words, 1) if words else 0
    average_sentence_length = round_half_up(words / sentences, 1) if sentences else 0

    result = {
        "characters": len(text),
        "characters_no_spaces": characters_no_spaces,
        "words": words,
        "sentences": sentences,
        "paragraphs": count_paragraphs(text),
        "lines": count_lines(text),
        "reading_time_minutes": calculate_reading_time(text, reading_wpm),
        "speaking_time_minutes": calculate_speaking_time(text, speaking_wpm),
        "average_word_length": average_word_length,
        "average_sentence_length": average_sentence_length,
        "processing_time": (time.perf_counter() - start) * 1000,
    }

    logger.debug(f"Word count: {words} words in {result['processing_time']:.2f}ms")
    return result


def get_word_stats(text: str) -> Dict[str, Any]:
    """
    Vocabulary statistics: unique words, extremes and the ten most common.

    Args:
        text (str): Input text

    Returns:
        Dict: Word statistics
    """
    frequency = Counter(get_word_frequency(text, case_sensitive=False))
    words = tokenize_words(text)

    longest_word = ""
    shortest_word = words[0] if words else ""
    for word in words:
        if len(word) > len(longest_word):
            longest_word = word
        if 0 < len(word) < len(shortest_word):
            shortest_word = word

    total_chars = sum(len(word) for word in words)

    return {
        "total_words": len(words),
        "unique_words": len(frequency),
        "average_word_length": round_half_up(total_chars / len(words), 1) if words else 0,
        "longest_word": longest_word,
        "shortest_word": shortest_word,
        "most_common_words": [
            {"word": word, "count": count}
            for word, count in frequency.most_common(10)
        ],
    }


def format_time(minutes: int) -> str:
    """Render a minute count as "1 minute", "2 hours 5 minutes" and so on."""
    if minutes < 1:
        return "Less than a minute"
    if minutes == 1:
        return "1 minute"
    if minutes < 60:
        return f"{minutes} minutes"

    hours, remaining = divmod(minutes, 60)
    if remaining == 0:
        return "1 hour" if hours == 1 else f"{hours} hours"

    return f"{hours} hour{'s' if hours > 1 else ''} {remaining} minute{'s' if remaining > 1 else ''}"


def count_word_syllables(word: str) -> int:
    """
    Count the number of syllables in a word (approximation).

    Args:
        word (str): Lower-case input word

    Returns:
        int: Estimated syllable count
    """
    if len(word) <= 3:
        return 1

    # Drop silent endings and a leading consonant y
    word = re.sub(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$", "", word)
    word = re.sub(r"^y", "", word)

    groups = re.findall(r"[aeiouy]{1,2}", word)
    return len(groups) if groups else 1


def count_syllables(text: str) -> int:
    words = re.findall(r"\b[a-z]+\b", text.lower())
    return sum(count_word_syllables(word) for word in words)


def _difficulty(reading_ease: float) -> str:
    if reading_ease >= 90:
        return "Very Easy"
    elif reading_ease >= 80:
        return "Easy"
    elif reading_ease >= 70:
        return "Fairly Easy"
    elif reading_ease >= 60:
        return "Standard"
    elif reading_ease >= 50:
        return "Fairly Difficult"
    elif reading_ease >= 30:
        return "Difficult"
    return "Very Difficult"


def estimate_grade_level(text: str) -> Dict[str, Any]:
    """
    Estimate Flesch-Kincaid grade level and Flesch reading ease.

    Args:
        text (str): Input text

    Returns:
        Dict: grade_level, reading_ease and a difficulty label
    """
    words = count_words(text)
    sentences = count_sentences(text)

    if words == 0 or sentences == 0:
        return {
            "grade_level": 0,
            "reading_ease": 100,
            "difficulty": "Very Easy",
        }

    syllables = count_syllables(text)
    words_per_sentence = words / sentences
    syllables_per_word = syllables / words

    # Flesch-Kincaid Grade Level
    grade_level = 0.39 * words_per_sentence + 11.8 * syllables_per_word - 15.59

    # Flesch Reading Ease
    reading_ease = 206.835 - 1.015 * words_per_sentence - 84.6 * syllables_per_word

    return {
        "grade_level": max(0, round_half_up(grade_level, 1)),
        "reading_ease": max(0, min(100, round_half_up(reading_ease, 1))),
        "difficulty": _difficulty(reading_ease),
    }
