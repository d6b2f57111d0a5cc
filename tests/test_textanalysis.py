#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: test_textanalysis.py
# Description: Tests for the pure text analysis helpers
# Created: 2025-05-23
# Modified: 2025-06-02 11:40:12

import re
import time
import random
import string
import unittest

from textlens.textanalysis import (
    STOP_WORDS,
    round_half_up,
    tokenize_words,
    count_words,
    count_sentences,
    count_paragraphs,
    count_lines,
    calculate_reading_time,
    calculate_speaking_time,
    get_word_frequency,
    get_ngram_frequency,
    escape_regex,
    keyword_pattern,
    count_keyword_matches,
    calculate_keyword_density,
    extract_urls,
    extract_hashtags,
    extract_mentions,
    count_emojis,
    normalize_whitespace,
    levenshtein_distance,
    calculate_similarity,
    remove_stop_words,
)


def reference_distance(str1, str2):
    """Row-by-row edit distance on plain lists."""
    previous = list(range(len(str2) + 1))
    for i, char1 in enumerate(str1, 1):
        current = [i]
        for j, char2 in enumerate(str2, 1):
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + (char1 != char2),
            ))
        previous = current
    return previous[-1]


class CountingTest(unittest.TestCase):
    """Word, sentence, paragraph and line counts"""

    def test_count_words(self):
        self.assertEqual(count_words(""), 0)
        self.assertEqual(count_words("  "), 0)
        self.assertEqual(count_words("a b  c"), 3)
        self.assertEqual(count_words("\tone\ntwo  three\r\n"), 3)

    def test_count_sentences(self):
        self.assertEqual(count_sentences("Hello. World!"), 2)
        self.assertEqual(count_sentences("no punctuation here"), 1)
        self.assertEqual(count_sentences("Wait... what?!"), 2)
        self.assertEqual(count_sentences(""), 0)
        self.assertEqual(count_sentences("   "), 0)

    def test_count_paragraphs(self):
        self.assertEqual(count_paragraphs("p1\n\np2\n  \n\np3"), 3)
        self.assertEqual(count_paragraphs("single line"), 1)
        self.assertEqual(count_paragraphs("line one\nline two"), 1)
        self.assertEqual(count_paragraphs(""), 0)

    def test_count_lines(self):
        self.assertEqual(count_lines("a\nb"), 2)
        self.assertEqual(count_lines("a\nb\n"), 3)

    def test_count_lines_empty_string_is_one_line(self):
        """Splitting "" on newlines yields a single empty line"""
        self.assertEqual(count_lines(""), 1)


class TimingTest(unittest.TestCase):

    def test_reading_time_rounds_up(self):
        self.assertEqual(calculate_reading_time(""), 0)
        self.assertEqual(calculate_reading_time("hello"), 1)
        self.assertEqual(calculate_reading_time("word " * 225), 1)
        self.assertEqual(calculate_reading_time("word " * 226), 2)

    def test_reading_time_custom_rate(self):
        self.assertEqual(calculate_reading_time("word " * 10, words_per_minute=5), 2)

    def test_speaking_time(self):
        self.assertEqual(calculate_speaking_time("word " * 140), 1)
        self.assertEqual(calculate_speaking_time("word " * 141), 2)

    def test_non_positive_rate(self):
        self.assertEqual(calculate_reading_time("a b c", words_per_minute=0), 0)
        self.assertEqual(calculate_speaking_time("a b c", words_per_minute=-1), 0)

    def test_non_empty_text_takes_at_least_a_minute(self):
        for text in ("a", "a b", "x " * 500, "  padded  "):
            self.assertGreaterEqual(calculate_reading_time(text), 1)


class FrequencyTest(unittest.TestCase):

    def test_tokenizer_keeps_contractions_and_hyphens(self):
        self.assertEqual(
            tokenize_words("Don't stop the well-known 'show'"),
            ["don't", "stop", "the", "well-known", "show"]
        )

    def test_word_frequency_case_folding(self):
        self.assertEqual(get_word_frequency("The the THE"), {"the": 3})

    def test_word_frequency_case_sensitive(self):
        self.assertEqual(get_word_frequency("The the", case_sensitive=True), {"The": 1, "the": 1})

    def test_word_frequency_empty(self):
        self.assertEqual(get_word_frequency(""), {})

    def test_ngram_frequency_counts_overlapping_windows(self):
        self.assertEqual(get_ngram_frequency("a b a b", 2), {"a b": 2, "b a": 1})
        self.assertEqual(get_ngram_frequency("a a a a", 2), {"a a": 3})

    def test_ngram_frequency_degenerate(self):
        self.assertEqual(get_ngram_frequency("a b c", 0), {})
        self.assertEqual(get_ngram_frequency("a b c", -2), {})
        self.assertEqual(get_ngram_frequency("a b c", 4), {})
        self.assertEqual(get_ngram_frequency("", 1), {})

    def test_unigrams_match_word_frequency(self):
        text = "One fish, two fish. Red fish, blue fish!"
        self.assertEqual(get_ngram_frequency(text, 1), get_word_frequency(text))

    def test_trigrams_case_sensitive(self):
        self.assertEqual(
            get_ngram_frequency("A b c a B c", 3, case_sensitive=True),
            {"A b c": 1, "b c a": 1, "c a B": 1, "a B c": 1}
        )


class KeywordDensityTest(unittest.TestCase):

    def test_empty_inputs(self):
        self.assertEqual(calculate_keyword_density("", "x"), 0)
        self.assertEqual(calculate_keyword_density("a b c", ""), 0)
        self.assertEqual(calculate_keyword_density("a b c", "   "), 0)
        self.assertEqual(calculate_keyword_density("   ", "a"), 0)

    def test_single_word(self):
        self.assertEqual(calculate_keyword_density("seo seo seo", "seo"), 100)

    def test_case_insensitive(self):
        self.assertEqual(calculate_keyword_density("SEO tips for seo", "Seo"), 50)

    def test_whole_word_only(self):
        self.assertAlmostEqual(calculate_keyword_density("cat category cat", "cat"), 200 / 3)

    def test_phrase_weighted_by_word_count(self):
        density = calculate_keyword_density("red apple and red apple pie", "red apple")
        self.assertAlmostEqual(density, 2 * 2 / 6 * 100)

    def test_phrase_density_is_not_clamped(self):
        # three whitespace-separated words, two non-overlapping two-word matches
        density = calculate_keyword_density("a.go go.go go.b", "go go")
        self.assertGreater(density, 100)

    def test_metacharacters_are_literal(self):
        self.assertEqual(calculate_keyword_density("axb a.b", "a.b"), 50)
        self.assertEqual(calculate_keyword_density("foo ( bar", "("), 0)
        self.assertEqual(calculate_keyword_density("a b", "[unclosed"), 0)

    def test_escape_regex(self):
        for value in ("a.b*c", "(x)", "[y]", "1+1=2?", "^$|\\{}"):
            self.assertTrue(re.fullmatch(escape_regex(value), value))
        self.assertIsNone(re.fullmatch(escape_regex("a.c"), "abc"))

    def test_keyword_pattern(self):
        pattern = keyword_pattern("  Red Apple ")
        self.assertEqual(pattern.findall("red apple and red apples"), ["red apple"])
        self.assertTrue(pattern.flags & re.IGNORECASE)

    def test_match_count_agrees_with_density(self):
        text = "SEO tips and SEO tools for better SEO results"
        self.assertEqual(count_keyword_matches(text, " Seo "), 3)
        self.assertAlmostEqual(calculate_keyword_density(text, " Seo "), 3 / 9 * 100)
        self.assertEqual(count_keyword_matches(text, "  "), 0)
        self.assertEqual(count_keyword_matches("", "seo"), 0)


class ExtractorTest(unittest.TestCase):

    def test_extract_urls(self):
        self.assertEqual(
            extract_urls("visit http://a.com and https://b.com"),
            ["http://a.com", "https://b.com"]
        )

    def test_extract_urls_stops_at_brackets_and_quotes(self):
        self.assertEqual(
            extract_urls('<https://x.io/a?b=1> "http://y.org/p" [http://z.net]'),
            ["https://x.io/a?b=1", "http://y.org/p", "http://z.net"]
        )

    def test_extract_urls_keeps_duplicates(self):
        self.assertEqual(extract_urls("http://a.com http://a.com"), ["http://a.com"] * 2)
        self.assertEqual(extract_urls("HTTPS://A.COM"), ["HTTPS://A.COM"])
        self.assertEqual(extract_urls("ftp://nope.com"), [])

    def test_extract_hashtags_and_mentions(self):
        self.assertEqual(extract_hashtags("#one #two #one"), ["#one", "#two", "#one"])
        self.assertEqual(extract_mentions("@alice hi @bob_1!"), ["@alice", "@bob_1"])
        self.assertEqual(extract_hashtags("no tags # here"), [])
        self.assertEqual(extract_mentions(""), [])

    def test_count_emojis(self):
        self.assertEqual(count_emojis("hi \U0001F600 \U0001F680 ☀ ✂"), 4)
        self.assertEqual(count_emojis("plain text"), 0)
        self.assertEqual(count_emojis(""), 0)


class NormalizeWhitespaceTest(unittest.TestCase):

    SAMPLES = [
        "",
        "a   b\n\n\n\nc",
        "  leading and trailing  ",
        "\r\nx\r\ny\r",
        "a \t b  \n  c",
        "a\n \n \n b",
        "tabs\t\tand\r\n\r\n\r\n\r\nlines  \n\n",
        "x  \n y",
        "\n\n\n",
    ]

    def test_collapses_blank_lines(self):
        self.assertEqual(normalize_whitespace("a   b\n\n\n\nc"), "a b\n\nc")

    def test_line_endings(self):
        self.assertEqual(normalize_whitespace("\r\nx\r\ny\r"), "x\ny")
        self.assertEqual(normalize_whitespace("a\r\r\r\rb"), "a\n\nb")

    def test_spaces_around_newlines(self):
        self.assertEqual(normalize_whitespace("a \t b  \n  c"), "a b\nc")
        self.assertEqual(normalize_whitespace("a\n \n \n b"), "a\n\nb")

    def test_trims_result(self):
        self.assertEqual(normalize_whitespace("  leading and trailing  "), "leading and trailing")
        self.assertEqual(normalize_whitespace("\n\n\n"), "")

    def test_idempotent(self):
        for sample in self.SAMPLES:
            once = normalize_whitespace(sample)
            self.assertEqual(normalize_whitespace(once), once, repr(sample))


class SimilarityTest(unittest.TestCase):

    def test_levenshtein_distance(self):
        self.assertEqual(levenshtein_distance("kitten", "sitting"), 3)
        self.assertEqual(levenshtein_distance("flaw", "lawn"), 2)
        self.assertEqual(levenshtein_distance("intention", "execution"), 5)

    def test_levenshtein_boundary_rows_and_columns(self):
        self.assertEqual(levenshtein_distance("", ""), 0)
        self.assertEqual(levenshtein_distance("", "abc"), 3)
        self.assertEqual(levenshtein_distance("abcdefghij", ""), 10)
        self.assertEqual(levenshtein_distance("a", "b"), 1)

    def test_levenshtein_long_strings(self):
        base = "the quick brown fox jumps over the lazy dog " * 3
        self.assertEqual(levenshtein_distance(base, base), 0)
        self.assertEqual(levenshtein_distance(base, base[:-1]), 1)
        self.assertEqual(levenshtein_distance("x" + base, base + "y"), 2)
        self.assertEqual(levenshtein_distance("a" * 60, "b" * 60), 60)
        self.assertEqual(levenshtein_distance("a" * 50, "a" * 49 + "b"), 1)

    def test_levenshtein_matches_reference(self):
        rng = random.Random(7)
        for _ in range(200):
            str1 = "".join(rng.choice("ab cé") for _ in range(rng.randint(0, 12)))
            str2 = "".join(rng.choice("ab cé") for _ in range(rng.randint(0, 12)))
            self.assertEqual(
                levenshtein_distance(str1, str2), reference_distance(str1, str2), (str1, str2)
            )

    def test_levenshtein_thousands_of_characters(self):
        rng = random.Random(11)
        str1 = "".join(rng.choice(string.ascii_lowercase) for _ in range(1500))
        str2 = "".join(rng.choice(string.ascii_lowercase) for _ in range(1500))

        start = time.perf_counter()
        distance = levenshtein_distance(str1, str2)
        self.assertLess(time.perf_counter() - start, 2)

        self.assertEqual(distance, levenshtein_distance(str2, str1))
        self.assertLessEqual(distance, 1500)
        self.assertEqual(levenshtein_distance(str1, str1[:700] + str1[701:]), 1)

    def test_similarity(self):
        self.assertEqual(calculate_similarity("kitten", "sitting"), 57)
        self.assertEqual(calculate_similarity("abc", "xyz"), 0)

    def test_identical_strings(self):
        for value in ("", "a", "same text", "\n"):
            self.assertEqual(calculate_similarity(value, value), 100)

    def test_one_empty_string(self):
        self.assertEqual(calculate_similarity("", "abc"), 0)
        self.assertEqual(calculate_similarity("abc", ""), 0)

    def test_half_rounds_up(self):
        # distance 3 over length 8 -> 62.5
        self.assertEqual(calculate_similarity("abcdefgh", "abcdeXYZ"), 63)

    def test_round_half_up(self):
        self.assertEqual(round_half_up(62.5), 63)
        self.assertEqual(round_half_up(2.45, 1), 2.5)
        self.assertEqual(round_half_up(4.444, 1), 4.4)


class StopWordTest(unittest.TestCase):

    def test_remove_stop_words(self):
        self.assertEqual(remove_stop_words("The Quick Fox"), "quick fox")
        self.assertEqual(remove_stop_words("  this IS   a test "), "test")
        self.assertEqual(remove_stop_words(""), "")

    def test_output_is_always_lower_case(self):
        self.assertEqual(remove_stop_words("Python ROCKS"), "python rocks")

    def test_stop_word_table(self):
        self.assertIsInstance(STOP_WORDS, frozenset)
        self.assertIn("the", STOP_WORDS)
        self.assertTrue(all(word == word.lower() for word in STOP_WORDS))


if __name__ == "__main__":
    unittest.main()
