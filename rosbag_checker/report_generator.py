"""
Report assembly and rendering.

assemble_report() builds the structured Report, one MatchResult per
requirement entry in declaration order. The text and JSON renderers only
read that structure; classification never depends on presentation.
"""

import math
from typing import Dict, List, Optional

from .constants import (
    COLOR_END,
    SEVERITY_COLORS,
    SEVERITY_FAIL,
    SEVERITY_PASS,
    SEVERITY_WARN,
    STATUS_EMPTY,
    STATUS_NOT_FOUND,
)
from .errors import PatternError
from .evaluator import evaluate_topic
from .matcher import match_topics
from .models import BagFacts, MatchResult, Report, RequirementEntry, TopicResult


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------

def _missing_line(pattern: str, error: Optional[str] = None) -> TopicResult:
    """Stand-in line for a pattern with no matching topic (or a bad regex)."""
    return TopicResult(
        name=pattern,
        message_count=0,
        rate=0.0,
        status=STATUS_EMPTY,
        matched=False,
        error=error,
    )


def evaluate_entry(
    entry: RequirementEntry,
    facts: BagFacts,
    check_frequency: bool,
) -> MatchResult:
    """Match one requirement against the bag and score every matched topic."""
    try:
        matched = match_topics(entry.pattern, facts.topics)
    except PatternError as e:
        return MatchResult(
            entry=entry,
            lines=[_missing_line(entry.pattern, error=str(e))],
            error=str(e),
        )

    if not matched:
        return MatchResult(entry=entry, lines=[_missing_line(entry.pattern)])

    lines = [
        evaluate_topic(fact, facts.duration_seconds, entry.rate_range, check_frequency)
        for fact in matched
    ]
    return MatchResult(entry=entry, lines=lines)


def assemble_report(
    entries: List[RequirementEntry],
    facts: BagFacts,
    check_frequency: bool,
) -> Report:
    return Report(
        bag_path=facts.path,
        storage_format=facts.storage_format,
        duration_seconds=facts.duration_seconds,
        check_frequency=check_frequency,
        results=[evaluate_entry(e, facts, check_frequency) for e in entries],
    )


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------

def summarize(report: Report) -> Dict[str, int]:
    counts = {SEVERITY_PASS: 0, SEVERITY_WARN: 0, SEVERITY_FAIL: 0}
    for line in report.lines:
        counts[line.severity] += 1
    counts["not_found"] = sum(
        1 for r in report.results if r.outcome == STATUS_NOT_FOUND
    )
    counts["pattern_errors"] = sum(1 for r in report.results if r.error is not None)
    counts["requirements"] = len(report.results)
    return counts


# ---------------------------------------------------------------------------
# Text report
# ---------------------------------------------------------------------------

def _format_line(line: TopicResult, color: bool) -> str:
    text = (
        f"Statistics for topic {line.name}\n"
        f"Message count = {line.message_count}, Message frequency = {line.rate:g}"
    )
    if line.error:
        text += f"\n{line.error}"
    if color:
        text = f"{SEVERITY_COLORS[line.severity]}{text}{COLOR_END}"
    return text


def render_text(report: Report, color: bool = True) -> str:
    """Render every report line, blank-line separated, in report order."""
    return "".join(_format_line(line, color) + "\n\n" for line in report.lines)


def render_summary(report: Report) -> str:
    counts = summarize(report)
    return (
        f"{counts['requirements']} requirements: "
        f"{counts[SEVERITY_PASS]} pass, {counts[SEVERITY_WARN]} warn, "
        f"{counts[SEVERITY_FAIL]} fail ({counts['not_found']} not found)"
    )


# ---------------------------------------------------------------------------
# JSON report
# ---------------------------------------------------------------------------

def _json_number(value: float):
    # JSON has no infinity; keep it readable instead of emitting Infinity
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return value


def _result_to_dict(result: MatchResult) -> dict:
    lines = []
    for line in result.lines:
        d = line.to_dict()
        d["rate"] = _json_number(line.rate)
        lines.append(d)
    return {
        "pattern": result.entry.pattern,
        "hz_range": [_json_number(v) for v in result.entry.rate_range.to_list()],
        "outcome": result.outcome,
        "error": result.error,
        "topics": lines,
    }


def generate_json_report(report: Report) -> dict:
    """Generate the full structured JSON report."""
    return {
        "metadata": {
            "bag_path": report.bag_path,
            "storage_format": report.storage_format,
            "duration_sec": _json_number(report.duration_seconds),
            "check_frequency": report.check_frequency,
        },
        "summary": summarize(report),
        "healthy": report.healthy,
        "requirements": [_result_to_dict(r) for r in report.results],
    }
