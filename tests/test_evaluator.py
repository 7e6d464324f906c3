from __future__ import annotations

import math

from rosbag_checker.constants import STATUS_EMPTY, STATUS_HEALTHY, STATUS_OUT_OF_RANGE
from rosbag_checker.evaluator import classify, compute_rate, evaluate_topic
from rosbag_checker.models import DEFAULT_RATE_RANGE, RateRange, TopicFact


def test_rate_is_count_over_duration() -> None:
    assert compute_rate(1000, 10.0) == 100.0


def test_zero_duration_rate_policy() -> None:
    assert compute_rate(0, 0.0) == 0.0
    assert compute_rate(5, 0.0) == math.inf


def test_healthy_inside_range() -> None:
    result = evaluate_topic(TopicFact("/imu", 1000), 10.0, RateRange(50, 150), True)

    assert result.rate == 100.0
    assert result.status == STATUS_HEALTHY


def test_out_of_range_above_and_below() -> None:
    assert classify(1000, 100.0, RateRange(200, 300), True) == STATUS_OUT_OF_RANGE
    assert classify(1000, 100.0, RateRange(10, 50), True) == STATUS_OUT_OF_RANGE


def test_range_bounds_are_inclusive() -> None:
    assert classify(10, 50.0, RateRange(50, 150), True) == STATUS_HEALTHY
    assert classify(10, 150.0, RateRange(50, 150), True) == STATUS_HEALTHY


def test_zero_messages_is_empty_regardless_of_flags() -> None:
    for check_frequency in (True, False):
        result = evaluate_topic(TopicFact("/status", 0), 10.0, RateRange(0, 1), check_frequency)
        assert result.status == STATUS_EMPTY
        assert result.rate == 0.0


def test_frequency_check_disabled_is_always_healthy() -> None:
    result = evaluate_topic(TopicFact("/imu", 1000), 10.0, RateRange(0, 1), False)

    assert result.status == STATUS_HEALTHY
    assert result.rate == 100.0


def test_zero_duration_is_out_of_range_with_default_range() -> None:
    result = evaluate_topic(TopicFact("/imu", 3), 0.0, DEFAULT_RATE_RANGE, True)

    assert result.rate == math.inf
    assert result.status == STATUS_OUT_OF_RANGE
