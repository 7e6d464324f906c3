"""
Rate evaluation: observed rate for a matched topic and its status.

Status precedence (first match wins):
  1. no messages                 -> empty
  2. frequency checking disabled -> healthy
  3. rate outside the range      -> out_of_range
  4. otherwise                   -> healthy
"""

import math

from .constants import STATUS_EMPTY, STATUS_HEALTHY, STATUS_OUT_OF_RANGE
from .models import RateRange, TopicFact, TopicResult


def compute_rate(message_count: int, duration_seconds: float) -> float:
    """
    Messages per second over the whole recording.

    A zero-length recording has no meaningful rate: an empty topic gets 0,
    any other topic gets +inf so the range check flags it.
    """
    if duration_seconds <= 0:
        return 0.0 if message_count == 0 else math.inf
    return message_count / duration_seconds


def classify(
    message_count: int,
    rate: float,
    rate_range: RateRange,
    check_frequency: bool,
) -> str:
    if message_count == 0:
        return STATUS_EMPTY
    if not check_frequency:
        return STATUS_HEALTHY
    if rate < rate_range.min_hz or rate > rate_range.max_hz:
        return STATUS_OUT_OF_RANGE
    return STATUS_HEALTHY


def evaluate_topic(
    fact: TopicFact,
    duration_seconds: float,
    rate_range: RateRange,
    check_frequency: bool,
) -> TopicResult:
    rate = compute_rate(fact.message_count, duration_seconds)
    return TopicResult(
        name=fact.name,
        message_count=fact.message_count,
        rate=rate,
        status=classify(fact.message_count, rate, rate_range, check_frequency),
    )
