#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: social.py
# Project: textlens
# Description: Platform-aware character counter and hashtag counter
# Created: 2025-05-22 08:55:17
# Modified: 2025-06-02 11:25:41

import re
import time
import logging
from typing import Dict, List, Any
from collections import Counter

from textlens.textanalysis import (
    HASHTAG_PATTERN,
    count_emojis,
    extract_hashtags,
    round_half_up,
)

logger = logging.getLogger(__name__)

PLATFORM_LIMITS = {
    "Twitter/X Tweet": 280,
    "Twitter/X DM": 10000,
    "Instagram Caption": 2200,
    "Instagram Bio": 150,
    "Facebook Post": 63206,
    "Facebook Comment": 8000,
    "LinkedIn Post": 3000,
    "LinkedIn Article": 120000,
    "YouTube Title": 100,
    "YouTube Description": 5000,
    "TikTok Caption": 2200,
    "TikTok Bio": 80,
    "Pinterest Pin": 500,
    "Reddit Title": 300,
    "Reddit Comment": 10000,
    "SMS (Single)": 160,
    "SMS (Unicode)": 70,
    "Email Subject": 78,
    "Meta Title": 60,
    "Meta Description": 160,
}

# Upper bound of hashtags per post that still performs well
HASHTAG_RECOMMENDATIONS = {
    "Instagram": 30,
    "Twitter": 3,
    "LinkedIn": 5,
    "TikTok": 5,
    "YouTube": 15,
    "Facebook": 3,
}

SPAM_PATTERNS = ("follow", "followback", "f4f", "l4l", "like4like", "followforfollow")


def _percent(count: int, total: int) -> int:
    return int(round_half_up(count / total * 100)) if total else 0


def _limit_for(platform: str) -> int:
    if platform not in PLATFORM_LIMITS:
        raise ValueError(
            f"Unknown platform '{platform}'. Choose from: {', '.join(PLATFORM_LIMITS)}"
        )
    return PLATFORM_LIMITS[platform]


def count_characters(text: str) -> Dict[str, Any]:
    """
    Count characters and compare the length against platform limits.

    Args:
        text (str): Input text

    Returns:
        Dict: Character class counts and per-platform limit usage
    """
    start = time.perf_counter()

    if text is None:
        raise ValueError("Text is required")

    total = len(text)
    letters = len(re.findall(r"[a-zA-Z]", text))
    numbers = len(re.findall(r"\d", text))
    spaces = len(re.findall(r"\s", text))

    platform_limits = [
        {
            "platform": platform,
            "limit": limit,
            "remaining": limit - total,
            "is_within_limit": total <= limit,
            "percent_used": _percent(total, limit),
        }
        for platform, limit in PLATFORM_LIMITS.items()
    ]

    elapsed = (time.perf_counter() - start) * 1000
    logger.debug(f"Character count: {total} characters in {elapsed:.2f}ms")

    return {
        "total": total,
        "without_spaces": total - spaces,
        "letters": letters,
        "numbers": numbers,
        "symbols": total - letters - numbers - spaces,
        "spaces": spaces,
        "platform_limits": platform_limits,
        "processing_time": elapsed,
    }


def get_character_breakdown(text: str) -> Dict[str, Any]:
    total = len(text)

    letters = len(re.findall(r"[a-zA-Z]", text))
    numbers = len(re.findall(r"\d", text))
    spaces = len(re.findall(r"\s", text))
    punctuation = len(re.findall(r"[.,!?;:'\"()\[\]{}]", text))
    emojis = count_emojis(text)
    other = total - letters - numbers - spaces - punctuation

    categories = [
        ("Letters", letters),
        ("Numbers", numbers),
        ("Spaces", spaces),
        ("Punctuation", punctuation),
        ("Emojis", emojis),
        ("Other", other),
    ]

    return {
        "total": total,
        "breakdown": [
            {"category": name, "count": count, "percentage": _percent(count, total)}
            for name, count in categories
            if count > 0
        ],
    }


def check_platform_limit(text: str, platform: str) -> Dict[str, Any]:
    """
    Check a text against one platform's character limit.

    Args:
        text (str): Input text
        platform (str): Key of PLATFORM_LIMITS, e.g. "Twitter/X Tweet"

    Returns:
        Dict: Limit usage and a recommendation

    Raises:
        ValueError: If the platform is unknown
    """
    limit = _limit_for(platform)
    current = len(text)
    remaining = limit - current
    percent_used = _percent(current, limit)

    if percent_used <= 80:
        recommendation = "Good length - you have room for more content if needed."
    elif percent_used <= 100:
        recommendation = "Approaching limit - consider your message carefully."
    else:
        recommendation = f"Over limit by {-remaining} characters - must reduce content."

    return {
        "platform": platform,
        "limit": limit,
        "current": current,
        "remaining": remaining,
        "is_within_limit": current <= limit,
        "percent_used": percent_used,
        "recommendation": recommendation,
    }


def get_all_platform_limits() -> List[Dict[str, Any]]:
    return [{"platform": platform, "limit": limit} for platform, limit in PLATFORM_LIMITS.items()]


def split_for_platform(text: str, platform: str) -> List[str]:
    """
    Split text into parts that fit a platform limit, breaking between words.

    A single word longer than the limit becomes its own oversized part.
    """
    limit = _limit_for(platform)
    if len(text) <= limit:
        return [text]

    parts = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if len(candidate) <= limit:
            current = candidate
        else:
            if current:
                parts.append(current)
            current = word

    if current:
        parts.append(current)

    return parts


def count_hashtags(text: str) -> Dict[str, Any]:
    """
    Extract hashtags and compare their number with platform recommendations.

    Args:
        text (str): Post text

    Returns:
        Dict: hashtags, unique hashtags (lower-cased), duplicates and
              per-platform recommendations
    """
    start = time.perf_counter()

    if text is None:
        raise ValueError("Text is required")

    hashtags = extract_hashtags(text)
    counts = Counter(tag.lower() for tag in hashtags)
    unique_hashtags = list(counts)
    duplicates = [tag for tag, count in counts.items() if count > 1]

    platform_recommendations = [
        {
            "platform": platform,
            "recommended": recommended,
            "current": len(hashtags),
            "is_optimal": 1 <= len(hashtags) <= recommended,
        }
        for platform, recommended in HASHTAG_RECOMMENDATIONS.items()
    ]

    elapsed = (time.perf_counter() - start) * 1000
    logger.debug(f"Hashtag count: {len(hashtags)} hashtags in {elapsed:.2f}ms")

    return {
        "text": text,
        "hashtags": hashtags,
        "count": len(hashtags),
        "unique_hashtags": unique_hashtags,
        "unique_count": len(unique_hashtags),
        "duplicates": duplicates,
        "platform_recommendations": platform_recommendations,
        "processing_time": elapsed,
    }


def _is_gibberish(tag: str) -> bool:
    tag_text = tag.replace("#", "", 1)

    # Same character four or more times in a row
    if re.search(r"(.)\1{3,}", tag_text):
        return True

    vowels = re.findall(r"[aeiouAEIOU]", tag_text)
    letters = re.findall(r"[a-zA-Z]", tag_text)
    if len(letters) > 3 and len(vowels) / len(letters) < 0.1:
        return True

    digits = re.findall(r"\d", tag_text)
    if letters and len(digits) / len(tag_text) > 0.5:
        return True

    return bool(re.search(r"[^a-zA-Z0-9_]", tag_text))


def _tag_length(tag: str) -> int:
    return len(tag.replace("#", "", 1))


def analyze_hashtags(hashtags: List[str]) -> Dict[str, Any]:
    """
    Score a list of hashtags and suggest improvements.

    Longest and shortest are measured without the leading #; on a tie
    the earliest hashtag in the list is reported.

    Args:
        hashtags (List[str]): Hashtags including the leading #

    Returns:
        Dict: Length statistics, CamelCase and digit counts, suggestions
    """
    if not hashtags:
        return {
            "average_length": 0,
            "longest_hashtag": "",
            "shortest_hashtag": "",
            "camel_case_count": 0,
            "numbers_count": 0,
            "suggestions": ["Add relevant hashtags to increase discoverability"],
        }

    tag_texts = [tag.replace("#", "", 1) for tag in hashtags]
    average_length = sum(len(tag_text) for tag_text in tag_texts) / len(hashtags)
    camel_case_count = sum(1 for tag_text in tag_texts if re.search(r"[a-z][A-Z]", tag_text))
    numbers_count = sum(1 for tag_text in tag_texts if re.search(r"\d", tag_text))

    suggestions = []
    if average_length > 20:
        suggestions.append("Consider using shorter hashtags for better readability")

    if camel_case_count < len(hashtags) / 2:
        suggestions.append("Use CamelCase for multi-word hashtags (e.g., #SocialMediaMarketing)")

    very_long = [tag for tag in hashtags if len(tag) > 25]
    if very_long:
        suggestions.append(f"{len(very_long)} hashtag(s) are very long - consider shortening")

    gibberish = [tag for tag in hashtags if _is_gibberish(tag)]
    if gibberish:
        suggestions.append(
            f"{len(gibberish)} hashtag(s) appear to be invalid or spam - use meaningful tags"
        )

    spam = [tag for tag in hashtags if any(pattern in tag.lower() for pattern in SPAM_PATTERNS)]
    if len(spam) > len(hashtags) * 0.3:
        suggestions.append("Reduce spam-like hashtags (follow4follow, etc.) - use content-specific tags")

    return {
        "average_length": int(round_half_up(average_length)),
        "longest_hashtag": max(hashtags, key=_tag_length),
        "shortest_hashtag": min(hashtags, key=_tag_length),
        "camel_case_count": camel_case_count,
        "numbers_count": numbers_count,
        "suggestions": suggestions,
    }


def remove_hashtags(text: str) -> str:
    return re.sub(r"\s+", " ", HASHTAG_PATTERN.sub("", text)).strip()


def extract_hashtags_with_positions(text: str) -> List[Dict[str, Any]]:
    return [
        {"hashtag": match.group(0), "start": match.start(), "end": match.end()}
        for match in HASHTAG_PATTERN.finditer(text)
    ]


def format_hashtags(
    tags: List[str],
    add_hash: bool = True,
    lowercase: bool = False,
    separator: str = " "
) -> str:
    """Join tags with consistent # prefixes and optional lower-casing."""
    formatted = []
    for tag in tags:
        tag = tag if tag.startswith("#") else f"#{tag}"
        if not add_hash:
            tag = tag[1:]
        if lowercase:
            tag = tag.lower()
        formatted.append(tag)
    return separator.join(formatted)
