#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: cli.py
# Project: textlens
# Created: 2025-05-15
# Modified: 2025-06-02 11:31:18
#
# Command line interface for the textlens toolkit

import os
import sys
import json as j
import click
import pytz
import logging

from datetime import datetime
from typing import Optional, Dict, List, Any

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich import box
from rich.pretty import Pretty
from rich.markup import escape
from rich.logging import RichHandler

from textlens.__version__ import __version__
from textlens.textanalysis import (
    DEFAULT_READING_WPM, DEFAULT_SPEAKING_WPM,
    extract_urls, extract_hashtags, extract_mentions, count_emojis,
    normalize_whitespace, remove_stop_words,
    calculate_similarity, levenshtein_distance,
)
from textlens.wordcount import (
    word_count_report, get_word_stats, estimate_grade_level, format_time,
)
from textlens.keywords import DEFAULT_TOP_COUNT, analyze_keyword_density
from textlens.diff import compare_texts, generate_unified_diff
from textlens.whitespace import clean_whitespace, analyze_whitespace
from textlens.social import (
    PLATFORM_LIMITS, count_characters, check_platform_limit,
    get_character_breakdown, count_hashtags, analyze_hashtags,
)

# Setup console
console = Console()

logger = logging.getLogger("textlens")


def setup_logging(debug: bool = False):
    """Route log records through rich; ERROR by default, DEBUG with --debug."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.ERROR,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


# Utility functions
def handle_output(
    data: Any,
    source: Optional[str],
    save_path: Optional[str] = None,
    json_output: bool = False,
    raw_output: bool = False
):
    """Handle output in either JSON, raw text, or rich formatted mode"""
    if json_output:
        timestamp = datetime.now(pytz.UTC).isoformat()
        if isinstance(data, str):
            data = {
                "timestamp": timestamp,
                "source": source,
                "content": data
            }
        elif isinstance(data, dict):
            data = dict(data, timestamp=timestamp, source=source)

        output = j.dumps(data, indent=4, ensure_ascii=False)

        if save_path:
            return _save(output, save_path)

        click.echo(output)
        return output

    if raw_output:
        if not isinstance(data, str):
            output = j.dumps(data, indent=4, ensure_ascii=False)
        else:
            output = data

        if save_path:
            return _save(output, save_path)

        click.echo(output)
        return output

    if save_path:
        if not isinstance(data, str):
            data = j.dumps(data, indent=4, ensure_ascii=False)
        return _save(data, save_path)

    if isinstance(data, (Group, Table)):
        console.print(data)
        return data
    elif not isinstance(data, str):
        output = Pretty(data)
    else:
        output = data

    console.print(Panel(
        output,
        title=f"Source: {source or 'stdin'}",
        border_style="green",
        expand=True
    ))

    return data


def _save(data: str, save_path: str) -> str:
    with open(save_path, 'w', encoding='utf-8') as f:
        f.write(data)

    console.print(f"[green]Output saved to:[/] {save_path}")
    return data


def read_source(source: Optional[str]) -> Optional[str]:
    """
    Read text from a file path, or from stdin when no source is given.

    Returns:
        Optional[str]: The text, or None when nothing could be read
    """
    if not source or source == "-":
        stdin = click.get_text_stream("stdin")
        if stdin.isatty():
            return None
        data = stdin.read()
        if not data:
            console.print("[red]Error:[/] No data received from stdin.")
            return None
        return data

    path = os.path.abspath(os.path.expanduser(source))
    if not os.path.isfile(path):
        console.print(f"[red]Error:[/] Invalid path '{source}'")
        return None

    logger.debug(f"Reading {path}")
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        return f.read()


def require_text(source: Optional[str]) -> Optional[str]:
    text = read_source(source)
    if text is None:
        console.print("[yellow]No input source provided.[/yellow]")
    return text


def key_value_table(data: Dict[str, Any], title: str) -> Table:
    table = Table(title=title, box=box.ROUNDED, expand=True, show_header=False)
    table.add_column(justify="right", style="cyan", no_wrap=True)
    table.add_column(justify="left", style="green")
    for key, value in data.items():
        table.add_row(key.replace("_", " ").title(), str(value))
    return table


def rows_table(rows: List[Dict[str, Any]], title: str) -> Table:
    table = Table(title=title, box=box.ROUNDED, expand=True)
    if not rows:
        table.add_column("Result", style="yellow")
        table.add_row("None")
        return table

    for column in rows[0]:
        table.add_column(column.replace("_", " ").title(), style="cyan", overflow="fold")
    for row in rows:
        table.add_row(*(str(value) for value in row.values()))
    return table


def output_options(func):
    """Shared --output/--json/--raw options."""
    func = click.option('--raw', is_flag=True, help='Output plain text without formatting')(func)
    func = click.option('--json', is_flag=True, help='Output results as JSON')(func)
    func = click.option('--output', help='Save output to a file')(func)
    return func


# Main CLI group
@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging and tracebacks')
@click.version_option(version=__version__)
def cli(debug: bool):
    """
    textlens: Text analysis toolkit

    Count words, measure keyword density, extract patterns, clean
    whitespace and compare texts. Input is read from SOURCE or stdin.
    """
    setup_logging(debug)


@cli.command()
@click.argument('source', required=False)
@click.option('--reading-wpm', type=int, default=DEFAULT_READING_WPM,
              help=f'Reading speed in words per minute (default: {DEFAULT_READING_WPM})')
@click.option('--speaking-wpm', type=int, default=DEFAULT_SPEAKING_WPM,
              help=f'Speaking speed in words per minute (default: {DEFAULT_SPEAKING_WPM})')
@output_options
def count(
    source: Optional[str],
    reading_wpm: int,
    speaking_wpm: int,
    output: Optional[str],
    json: bool,
    raw: bool
):
    """Count words, sentences, paragraphs and estimate reading time"""
    text = require_text(source)
    if text is None:
        return

    report = word_count_report(text, reading_wpm, speaking_wpm)
    report.pop("processing_time")
    data = {
        "counts": report,
        "word_stats": get_word_stats(text),
        "grade_level": estimate_grade_level(text),
    }

    if json or raw or output:
        handle_output(data, source, output, json, raw)
        return

    summary = dict(report)
    summary["reading_time"] = format_time(report["reading_time_minutes"])
    summary["speaking_time"] = format_time(report["speaking_time_minutes"])
    summary.update(data["grade_level"])
    handle_output(Group(
        key_value_table(summary, "Word Count"),
        rows_table(data["word_stats"]["most_common_words"], "Most Common Words"),
    ), source)


@cli.command()
@click.argument('source', required=False)
@click.option('--keyword', '-k', help='Target keyword or phrase to score')
@click.option('--html', is_flag=True, help='Strip HTML markup before counting')
@click.option('--include-stop-words', is_flag=True, help='Keep stop words in the single word table')
@click.option('--top', type=int, default=DEFAULT_TOP_COUNT,
              help=f'Rows per table (default: {DEFAULT_TOP_COUNT})')
@output_options
def keywords(
    source: Optional[str],
    keyword: Optional[str],
    html: bool,
    include_stop_words: bool,
    top: int,
    output: Optional[str],
    json: bool,
    raw: bool
):
    """Measure keyword and phrase density"""
    text = require_text(source)
    if text is None:
        return

    if not text.strip():
        console.print("[yellow]Content is empty.[/yellow]")
        return

    result = analyze_keyword_density(
        text,
        target_keyword=keyword,
        is_html=html,
        include_stop_words=include_stop_words,
        top_count=top,
    )
    result.pop("processing_time")

    if json or raw or output:
        handle_output(result, source, output, json, raw)
        return

    render = [
        key_value_table({
            "total_words": result["total_words"],
            "unique_words": result["unique_words"],
        }, "Keyword Density"),
        rows_table(result["single_words"], "Single Words"),
        rows_table(result["two_word_phrases"], "Two Word Phrases"),
        rows_table(result["three_word_phrases"], "Three Word Phrases"),
    ]
    if result["target_keyword"]:
        render.append(key_value_table(result["target_keyword"], "Target Keyword"))

    handle_output(Group(*render), source)


@cli.command()
@click.argument('source', required=False)
@output_options
def extract(
    source: Optional[str],
    output: Optional[str],
    json: bool,
    raw: bool
):
    """Extract URLs, hashtags, mentions and count emojis"""
    text = require_text(source)
    if text is None:
        return

    data = {
        "urls": extract_urls(text),
        "hashtags": extract_hashtags(text),
        "mentions": extract_mentions(text),
        "emoji_count": count_emojis(text),
    }
    handle_output(data, source, output, json, raw)


@cli.command()
@click.argument('source', required=False)
@click.option('--normalize', is_flag=True,
              help='Canonical normalization (line endings, spaces, blank lines, trim)')
@click.option('--no-trim-lines', is_flag=True, help='Keep leading/trailing spaces on each line')
@click.option('--keep-extra-spaces', is_flag=True, help='Keep runs of spaces and tabs')
@click.option('--keep-extra-newlines', is_flag=True, help='Keep runs of blank lines')
@click.option('--strip', 'strip_text', is_flag=True, help='Remove leading and trailing whitespace')
@click.option('--remove-tabs', is_flag=True, help='Delete tab characters')
@click.option('--remove-all', is_flag=True, help='Delete every whitespace character')
@click.option('--stats', is_flag=True, help='Show whitespace statistics instead of cleaning')
@output_options
def clean(
    source: Optional[str],
    normalize: bool,
    no_trim_lines: bool,
    keep_extra_spaces: bool,
    keep_extra_newlines: bool,
    strip_text: bool,
    remove_tabs: bool,
    remove_all: bool,
    stats: bool,
    output: Optional[str],
    json: bool,
    raw: bool
):
    """Clean up whitespace in text"""
    text = require_text(source)
    if text is None:
        return

    if stats:
        handle_output(analyze_whitespace(text), source, output, json, raw)
        return

    if normalize:
        cleaned = normalize_whitespace(text)
        if json:
            handle_output({"cleaned": cleaned}, source, output, json, raw)
        else:
            handle_output(cleaned, source, output, json, raw)
        return

    result = clean_whitespace(
        text,
        trim_lines=not no_trim_lines,
        remove_extra_spaces=not keep_extra_spaces,
        remove_extra_newlines=not keep_extra_newlines,
        remove_leading_whitespace=strip_text,
        remove_trailing_whitespace=strip_text,
        remove_tabs=remove_tabs,
        remove_all_whitespace=remove_all,
    )

    if json:
        result.pop("processing_time")
        handle_output(result, source, output, json, raw)
        return

    handle_output(result["cleaned"], source, output, json, raw)
    if not raw and not output:
        for change in result["changes_applied"]:
            console.print(f"[cyan]Applied:[/] {change}")
        console.print(f"[cyan]Characters saved:[/] {result['characters_saved']}")


@cli.command()
@click.argument('source', required=False)
@click.option('--platform', type=click.Choice(sorted(PLATFORM_LIMITS)),
              help='Check a single platform limit')
@output_options
def chars(
    source: Optional[str],
    platform: Optional[str],
    output: Optional[str],
    json: bool,
    raw: bool
):
    """Count characters against social media limits"""
    text = require_text(source)
    if text is None:
        return

    if platform:
        handle_output(check_platform_limit(text, platform), source, output, json, raw)
        return

    result = count_characters(text)
    result.pop("processing_time")
    result["breakdown"] = get_character_breakdown(text)["breakdown"]

    if json or raw or output:
        handle_output(result, source, output, json, raw)
        return

    counts = {key: result[key] for key in ("total", "without_spaces", "letters", "numbers", "symbols", "spaces")}
    handle_output(Group(
        key_value_table(counts, "Character Count"),
        rows_table(result["breakdown"], "Breakdown"),
        rows_table(result["platform_limits"], "Platform Limits"),
    ), source)


@cli.command()
@click.argument('source', required=False)
@output_options
def hashtags(
    source: Optional[str],
    output: Optional[str],
    json: bool,
    raw: bool
):
    """Count and analyze hashtags"""
    text = require_text(source)
    if text is None:
        return

    result = count_hashtags(text)
    result.pop("processing_time")
    result.pop("text")
    result["analysis"] = analyze_hashtags(result["hashtags"])

    handle_output(result, source, output, json, raw)


@cli.command()
@click.argument('source', required=False)
@output_options
def stopwords(
    source: Optional[str],
    output: Optional[str],
    json: bool,
    raw: bool
):
    """Lower-case text and remove common English stop words"""
    text = require_text(source)
    if text is None:
        return

    handle_output(remove_stop_words(text), source, output, json, raw)


@cli.command()
@click.argument('text1')
@click.argument('text2')
@output_options
def similarity(
    text1: str,
    text2: str,
    output: Optional[str],
    json: bool,
    raw: bool
):
    """Levenshtein similarity of two strings"""
    data = {
        "similarity": calculate_similarity(text1, text2),
        "distance": levenshtein_distance(text1, text2),
    }
    handle_output(data, "arguments", output, json, raw)


@cli.command()
@click.argument('original')
@click.argument('modified')
@click.option('--ignore-case', is_flag=True, help='Compare case-insensitively')
@click.option('--ignore-whitespace', is_flag=True, help='Collapse whitespace before comparing')
@click.option('--unified', is_flag=True, help='Print a unified diff')
@output_options
def diff(
    original: str,
    modified: str,
    ignore_case: bool,
    ignore_whitespace: bool,
    unified: bool,
    output: Optional[str],
    json: bool,
    raw: bool
):
    """Compare two text files line by line"""
    original_text = read_source(original)
    modified_text = read_source(modified)
    if original_text is None or modified_text is None:
        return

    if unified:
        text = generate_unified_diff(
            original_text.split("\n"), modified_text.split("\n"), original, modified
        )
        handle_output(text, f"{original} -> {modified}", output, json, raw)
        return

    result = compare_texts(
        original_text, modified_text,
        ignore_whitespace=ignore_whitespace,
        ignore_case=ignore_case,
    )
    result.pop("processing_time")

    if json or raw or output:
        result.pop("original")
        result.pop("modified")
        handle_output(result, f"{original} -> {modified}", output, json, raw)
        return

    marks = {"added": "[green]+", "removed": "[red]-", "unchanged": "[dim] "}
    body = "\n".join(
        f"{marks[change['type']]} {escape(change['value'])}[/]" for change in result["changes"]
    )
    summary = (
        f"[green]+{result['additions']}[/] [red]-{result['deletions']}[/] "
        f"unchanged {result['unchanged']}, similarity {result['similarity']}%"
    )
    handle_output(Group(
        Panel(body or "(empty)", title=f"{original} -> {modified}", border_style="green", expand=True),
        summary,
    ), original)


def main():
    try:
        cli()
    except Exception as e:
        console.print(f"[bold red]Error:[/] {str(e)}")
        if '--debug' in sys.argv:
            import traceback
            console.print(traceback.format_exc())
        sys.exit(1)

if __name__ == "__main__":
    main()
