#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: textanalysis.py
# Project: textlens
# Description: Plain-text counting, frequency and similarity helpers
# Created: 2025-05-12 16:47:22
# Modified: 2025-06-02 11:18:40

"""
Text Analysis Module

Pure text helpers shared by the word counter, keyword density checker,
diff checker, character and hashtag counters.
"""

import re
import math
from typing import Dict, List
from collections import Counter

# Third-party imports
import numpy as np
from nltk.util import ngrams

DEFAULT_READING_WPM = 225
DEFAULT_SPEAKING_WPM = 140

WORD_PATTERN = re.compile(r"\b[\w'-]+\b")
SENTENCE_SPLIT_PATTERN = re.compile(r"[.!?]+\s*")
PARAGRAPH_SPLIT_PATTERN = re.compile(r"\n\s*\n")

URL_PATTERN = re.compile(r"https?://[^\s<>\"{}|\\^`\[\]]+", re.IGNORECASE)
HASHTAG_PATTERN = re.compile(r"#\w+")
MENTION_PATTERN = re.compile(r"@\w+")
EMOJI_PATTERN = re.compile(
    "["
    "\U0001F600-\U0001F64F"  # emoticons
    "\U0001F300-\U0001F5FF"  # symbols & pictographs
    "\U0001F680-\U0001F6FF"  # transport & map
    "\U0001F1E0-\U0001F1FF"  # flags
    "\u2600-\u26FF"          # misc symbols
    "\u2700-\u27BF"          # dingbats
    "]"
)

STOP_WORDS = frozenset([
    'a', 'an', 'and', 'are', 'as', 'at', 'be', 'by', 'for', 'from',
    'has', 'he', 'in', 'is', 'it', 'its', 'of', 'on', 'that', 'the',
    'to', 'was', 'were', 'will', 'with', 'this', 'but', 'they',
    'have', 'had', 'what', 'when', 'where', 'who', 'which', 'why', 'how',
    'all', 'each', 'every', 'both', 'few', 'more', 'most', 'other', 'some',
    'such', 'no', 'nor', 'not', 'only', 'own', 'same', 'so', 'than', 'too',
    'very', 'just', 'can', 'should', 'now', 'i', 'you', 'we', 'our', 'your',
])


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like a calculator does: 62.5 -> 63, not banker's rounding."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def tokenize_words(text: str, case_sensitive: bool = False) -> List[str]:
    """
    Split text into word tokens.

    Contractions and hyphenated words ("don't", "well-known") stay whole.

    Args:
        text (str): Input text
        case_sensitive (bool): Keep the original case when True

    Returns:
        List[str]: Tokens in order of appearance
    """
    if not text:
        return []
    if not case_sensitive:
        text = text.lower()
    return WORD_PATTERN.findall(text)


def count_words(text: str) -> int:
    """Count maximal runs of non-whitespace characters."""
    if not text or not text.strip():
        return 0
    return len(text.split())


def count_sentences(text: str) -> int:
    """
    Count sentences delimited by ., ! or ?.

    A trailing fragment without punctuation still counts as a sentence.
    """
    if not text or not text.strip():
        return 0
    fragments = SENTENCE_SPLIT_PATTERN.split(text)
    return sum(1 for fragment in fragments if fragment.strip())


def count_paragraphs(text: str) -> int:
    """Count blocks of text separated by one or more blank lines."""
    if not text or not text.strip():
        return 0
    blocks = PARAGRAPH_SPLIT_PATTERN.split(text)
    return sum(1 for block in blocks if block.strip())


def count_lines(text: str) -> int:
    """
    Count lines by splitting on newlines.

    An empty string is one (empty) line, so count_lines("") == 1.
    """
    return len(text.split("\n"))


def calculate_reading_time(text: str, words_per_minute: int = DEFAULT_READING_WPM) -> int:
    """Reading time in whole minutes, rounded up."""
    if words_per_minute <= 0:
        return 0
    return math.ceil(count_words(text) / words_per_minute)


def calculate_speaking_time(text: str, words_per_minute: int = DEFAULT_SPEAKING_WPM) -> int:
    """Speaking time in whole minutes, rounded up."""
    if words_per_minute <= 0:
        return 0
    return math.ceil(count_words(text) / words_per_minute)


def get_word_frequency(text: str, case_sensitive: bool = False) -> Dict[str, int]:
    """
    Count occurrences of each word.

    Args:
        text (str): Input text
        case_sensitive (bool): Treat "The" and "the" as different words

    Returns:
        Dict[str, int]: Word to occurrence count
    """
    return dict(Counter(tokenize_words(text, case_sensitive)))


def get_ngram_frequency(text: str, n: int, case_sensitive: bool = False) -> Dict[str, int]:
    """
    Count every run of n consecutive words.

    Overlapping windows are all counted, so "a b a b" yields
    {"a b": 2, "b a": 1} for n=2.

    Args:
        text (str): Input text
        n (int): Phrase length in words
        case_sensitive (bool): Keep the original case when True

    Returns:
        Dict[str, int]: Space-joined phrase to occurrence count
    """
    if not text or n < 1:
        return {}

    words = tokenize_words(text, case_sensitive)
    if len(words) < n:
        return {}

    return dict(Counter(" ".join(gram) for gram in ngrams(words, n)))


def escape_regex(value: str) -> str:
    """Escape every regex metacharacter in a user supplied string."""
    return re.escape(value)


def keyword_pattern(keyword: str) -> re.Pattern:
    """
    Compile the whole-word, case-insensitive matcher for a keyword.

    The keyword is stripped and lower-cased, so it is meant to run
    against lower-cased text.
    """
    return re.compile(rf"\b{escape_regex(keyword.strip().lower())}\b", re.IGNORECASE)


def count_keyword_matches(text: str, keyword: str) -> int:
    """Number of whole-word occurrences of keyword in text, ignoring case."""
    if not text or not keyword or not keyword.strip():
        return 0
    return len(keyword_pattern(keyword).findall(text.lower()))


def calculate_keyword_density(text: str, keyword: str) -> float:
    """
    Percentage of the text's words taken up by a keyword or phrase.

    Each whole-word match counts once per word in the keyword, so a
    two-word phrase matching twice accounts for four words. The result
    is not clamped and may exceed 100 for repetitive multi-word phrases.

    Args:
        text (str): Text to search
        keyword (str): Word or phrase, matched case-insensitively

    Returns:
        float: Density percentage, 0 for empty text or keyword
    """
    if not text or not keyword or not keyword.strip():
        return 0

    total_words = count_words(text)
    if total_words == 0:
        return 0

    keyword_words = len(keyword.split())
    matches = count_keyword_matches(text, keyword)

    return (matches * keyword_words / total_words) * 100


def extract_urls(text: str) -> List[str]:
    """Return http(s) URLs in order of appearance, duplicates included."""
    if not text:
        return []
    return URL_PATTERN.findall(text)


def extract_hashtags(text: str) -> List[str]:
    if not text:
        return []
    return HASHTAG_PATTERN.findall(text)


def extract_mentions(text: str) -> List[str]:
    if not text:
        return []
    return MENTION_PATTERN.findall(text)


def count_emojis(text: str) -> int:
    """Count characters that fall in the common emoji blocks."""
    if not text:
        return 0
    return len(EMOJI_PATTERN.findall(text))


def normalize_whitespace(text: str) -> str:
    """
    Canonicalize line endings and collapse redundant whitespace.

    Steps run in a fixed order: line endings to \\n, runs of spaces and
    tabs to a single space, spaces trimmed around newlines, three or more
    newlines reduced to a blank line, then the whole result is stripped.

    Args:
        text (str): Raw input text

    Returns:
        str: Normalized text
    """
    if not text:
        return ""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r" +\n", "\n", text)
    text = re.sub(r"\n +", "\n", text)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def levenshtein_distance(str1: str, str2: str) -> int:
    """
    Minimum number of single-character edits turning str1 into str2.

    The full (m+1) x (n+1) table is kept; each row is filled with vector
    operations. Substitutions and deletions come from the row above, and
    insertions are a running minimum along the row.

    Args:
        str1 (str): Source string
        str2 (str): Target string

    Returns:
        int: Edit distance
    """
    m = len(str1)
    n = len(str2)

    target = np.fromiter(map(ord, str2), dtype=np.int64, count=n)
    columns = np.arange(n + 1, dtype=np.int64)

    dp = np.zeros((m + 1, n + 1), dtype=np.int64)
    dp[:, 0] = np.arange(m + 1)
    dp[0, :] = columns

    for i in range(1, m + 1):
        above = dp[i - 1]
        row = np.empty(n + 1, dtype=np.int64)
        row[0] = i
        row[1:] = np.minimum(above[1:] + 1, above[:-1] + (target != ord(str1[i - 1])))
        dp[i] = np.minimum.accumulate(row - columns) + columns

    return int(dp[m, n])


def calculate_similarity(str1: str, str2: str) -> int:
    """
    Similarity of two strings as a whole percentage.

    Args:
        str1 (str): First string
        str2 (str): Second string

    Returns:
        int: 100 for identical strings, 0 if only one is empty,
             otherwise derived from the edit distance relative to
             the longer string
    """
    if str1 == str2:
        return 100
    if not str1 or not str2:
        return 0

    max_length = max(len(str1), len(str2))
    distance = levenshtein_distance(str1, str2)
    return int(round_half_up((1 - distance / max_length) * 100))


def remove_stop_words(text: str) -> str:
    """
    Lower-case the text and drop common English stop words.

    Lower-casing is unconditional; the result is always lower case.
    """
    words = text.lower().split()
    return " ".join(word for word in words if word not in STOP_WORDS)
