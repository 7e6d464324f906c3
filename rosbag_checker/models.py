"""
Data models for the bag checker.

Inputs (rate ranges, requirements, bag facts, config) are frozen so a
single check, or many benchmark runs, can never mutate them.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from .constants import (
    DEFAULT_CHECK_FREQUENCY,
    DEFAULT_MAX_HZ,
    DEFAULT_MIN_HZ,
    SEVERITY_ORDER,
    SEVERITY_PASS,
    STATUS_EMPTY,
    STATUS_NOT_FOUND,
    STATUS_SEVERITY,
)


# ---------------------------------------------------------------------------
# Requirements
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RateRange:
    """Inclusive acceptable message rate band, in Hz."""
    min_hz: float = DEFAULT_MIN_HZ
    max_hz: float = DEFAULT_MAX_HZ

    def __post_init__(self):
        if math.isnan(self.min_hz) or math.isnan(self.max_hz):
            raise ValueError("rate range bounds must not be NaN")
        if self.min_hz > self.max_hz:
            raise ValueError(
                f"rate range minimum {self.min_hz} exceeds maximum {self.max_hz}"
            )

    def contains(self, rate: float) -> bool:
        return self.min_hz <= rate <= self.max_hz

    def to_list(self) -> List[float]:
        return [self.min_hz, self.max_hz]


DEFAULT_RATE_RANGE = RateRange()


@dataclass(frozen=True)
class RequirementEntry:
    """One declared topic name or regex with its rate range."""
    pattern: str
    rate_range: RateRange = DEFAULT_RATE_RANGE


# ---------------------------------------------------------------------------
# Topic sources: where the requirement list comes from
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StructuredList:
    """Requirements come from a YAML topic-list document."""
    path: str


@dataclass(frozen=True)
class SinglePattern:
    """A single pattern checked against the default rate range."""
    pattern: str


TopicSource = Union[StructuredList, SinglePattern]


@dataclass(frozen=True)
class CheckConfig:
    """Everything one check needs. Passed explicitly into the pipeline."""
    bag_file: str
    topic_source: TopicSource
    check_frequency: bool = DEFAULT_CHECK_FREQUENCY
    default_range: RateRange = DEFAULT_RATE_RANGE


# ---------------------------------------------------------------------------
# Bag facts
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TopicFact:
    """Message count for one topic physically present in the bag."""
    name: str
    message_count: int
    msgtype: str = ""


@dataclass(frozen=True)
class BagFacts:
    """Recording duration plus per-topic counts, as read from bag metadata."""
    duration_seconds: float
    topics: Tuple[TopicFact, ...]
    path: str = ""
    storage_format: str = ""

    @property
    def topic_names(self) -> List[str]:
        return [t.name for t in self.topics]


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass
class TopicResult:
    """One report line: a matched topic, or the stand-in for a missing one."""
    name: str                       # topic name, or the pattern when unmatched
    message_count: int
    rate: float                     # messages per second
    status: str                     # STATUS_HEALTHY / _OUT_OF_RANGE / _EMPTY
    matched: bool = True            # False for the synthetic not-found line
    error: Optional[str] = None     # pattern compile error, if any

    @property
    def severity(self) -> str:
        return STATUS_SEVERITY[self.status]

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "message_count": self.message_count,
            "rate": self.rate,
            "status": self.status,
            "severity": self.severity,
            "matched": self.matched,
            "error": self.error,
        }


@dataclass
class MatchResult:
    """All report lines produced for one requirement entry."""
    entry: RequirementEntry
    lines: List[TopicResult] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return any(line.matched for line in self.lines)

    @property
    def outcome(self) -> str:
        """NotFound when nothing matched, else the worst line status."""
        if self.error is not None:
            return STATUS_EMPTY
        if not self.found:
            return STATUS_NOT_FOUND
        return min(
            (line.status for line in self.lines),
            key=lambda s: SEVERITY_ORDER.index(STATUS_SEVERITY[s]),
        )


@dataclass
class Report:
    """Ordered check results, one MatchResult per requirement entry."""
    bag_path: str
    storage_format: str
    duration_seconds: float
    check_frequency: bool
    results: List[MatchResult] = field(default_factory=list)

    @property
    def lines(self) -> List[TopicResult]:
        return [line for result in self.results for line in result.lines]

    @property
    def healthy(self) -> bool:
        return all(line.severity == SEVERITY_PASS for line in self.lines)


@dataclass
class BenchmarkResult:
    """Latency statistics for repeated runs of the check pipeline."""
    num_runs: int
    total_ms: float
    mean_ms: float
    std_ms: float
    min_ms: float
    max_ms: float
    median_ms: float
    p95_ms: float
    report: Optional[Report] = None  # report from the final run

    def to_dict(self) -> dict:
        return {
            "num_runs": self.num_runs,
            "total_ms": round(self.total_ms, 4),
            "mean_ms": round(self.mean_ms, 4),
            "std_ms": round(self.std_ms, 4),
            "min_ms": round(self.min_ms, 4),
            "max_ms": round(self.max_ms, 4),
            "median_ms": round(self.median_ms, 4),
            "p95_ms": round(self.p95_ms, 4),
        }
