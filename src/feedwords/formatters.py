#!/usr/bin/env python3
"""
Formatting utilities for analysis results on the command line.
"""

from typing import List

from .models.analysis import AnalysisResult, SourceReference, WordCount
from .models.article import parse_published


def format_word_table(word_counts: List[WordCount], limit: int = 0) -> str:
    """Ranked words as an aligned two-column table."""
    rows = word_counts[:limit] if limit else word_counts
    if not rows:
        return "  (no words)"

    width = max(len(wc.word) for wc in rows)
    width = max(width, 4)
    lines = [f"  {'#':>4}  {'WORD':<{width}}  {'COUNT':>5}"]
    for rank, wc in enumerate(rows, 1):
        lines.append(f"  {rank:>4}  {wc.word:<{width}}  {wc.frequency:>5}")
    return "\n".join(lines)


def format_published(published: str) -> str:
    """Display date for a raw published string."""
    parsed = parse_published(published)
    if parsed is None:
        return published or "Unknown date"
    return parsed.strftime("%Y-%m-%d")


def format_sources(word: str, sources: List[SourceReference], feed_name: str = None) -> str:
    """Source articles for a word."""
    scope = f" from {feed_name}" if feed_name else ""
    header = f'Articles containing "{word}"{scope}:'
    if not sources:
        return f"{header}\n  No source articles found for this word."

    lines = [header]
    for source in sources:
        lines.append(f"  [{format_published(source.published)}] [{source.feed_name}] {source.title or 'Untitled Article'}")
        if source.link:
            lines.append(f"      {source.link}")
    return "\n".join(lines)


def format_analysis(result: AnalysisResult, feed_limit: int = 10) -> str:
    """Full text report of an analysis run."""
    lines = [
        "=== Word Frequency Analysis ===",
        f"Timestamp: {result.timestamp.strftime('%Y-%m-%d %H:%M:%S %Z')}",
        f"Articles analyzed: {result.total_articles}",
        f"Unique words: {result.total_unique_words}",
    ]

    if result.warning:
        lines.append(f"Warning: {result.warning.message}")

    lines.extend(["", "Top words:", format_word_table(result.word_frequency)])

    lines.extend(["", "=== Feeds ==="])
    for report in result.feed_reports:
        status = report.status
        if report.error:
            status += f" ({report.error})"
        lines.append(f"- {report.name}: {report.article_count} articles, {status}")
        if report.word_counts:
            lines.append(format_word_table(report.word_counts, limit=feed_limit))

    return "\n".join(lines)
