from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

from summarizer.types import SummaryResult

RULE = "=" * 60


@dataclass
class ReportStats:
    original_chars: int
    original_words: int
    summary_chars: int
    summary_words: int
    reduction: float | None


def word_count(text: str) -> int:
    return len(text.split())


def reduction_percent(original_chars: int, summary_chars: int) -> float | None:
    if original_chars == 0:
        return None
    return round((1 - summary_chars / original_chars) * 100, 1)


def compute_stats(original: str, result: SummaryResult) -> ReportStats:
    return ReportStats(
        original_chars=len(original),
        original_words=word_count(original),
        summary_chars=len(result.summary),
        summary_words=word_count(result.summary),
        reduction=reduction_percent(len(original), len(result.summary)),
    )


def _section(title: str) -> list[str]:
    return ["", RULE, title, RULE]


def render_report(original: str, result: SummaryResult) -> list[str]:
    stats = compute_stats(original, result)
    usage = result.usage

    lines = _section("ORIGINAL TEXT LENGTH")
    lines += [f"Characters: {stats.original_chars}", f"Words: {stats.original_words}"]

    lines += _section("SUMMARY")
    lines.append(result.summary)

    lines += _section("SUMMARY LENGTH")
    lines += [f"Characters: {stats.summary_chars}", f"Words: {stats.summary_words}"]
    if stats.reduction is not None:
        lines.append(f"Reduction: {stats.reduction:.1f}%")

    lines += _section("TOKEN USAGE (approx)")
    lines += [
        f"Prompt tokens: {usage.prompt_tokens}",
        f"Completion tokens: {usage.completion_tokens}",
        f"Total tokens: {usage.total_tokens}",
        RULE,
    ]
    return lines


def print_report(original: str, result: SummaryResult, out: TextIO | None = None) -> None:
    out = out if out is not None else sys.stdout
    for line in render_report(original, result):
        print(line, file=out)
