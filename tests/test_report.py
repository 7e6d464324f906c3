from __future__ import annotations

import json

from rosbag_checker.constants import (
    COLOR_END,
    COLOR_GREEN,
    COLOR_RED,
    COLOR_YELLOW,
    STATUS_EMPTY,
    STATUS_HEALTHY,
    STATUS_NOT_FOUND,
    STATUS_OUT_OF_RANGE,
)
from rosbag_checker.models import RateRange, RequirementEntry
from rosbag_checker.report_generator import (
    assemble_report,
    generate_json_report,
    render_text,
    summarize,
)

from conftest import make_facts

FACTS = make_facts(10.0, {"/imu": 1000, "/status": 0, "/camera/left/image_raw": 300})


def test_one_block_per_entry_in_input_order() -> None:
    entries = [
        RequirementEntry("/status"),
        RequirementEntry("/imu", RateRange(50, 150)),
        RequirementEntry("/lidar"),
        RequirementEntry("/imu", RateRange(200, 300)),
    ]

    report = assemble_report(entries, FACTS, True)

    assert [r.entry for r in report.results] == entries
    assert [r.outcome for r in report.results] == [
        STATUS_EMPTY,
        STATUS_HEALTHY,
        STATUS_NOT_FOUND,
        STATUS_OUT_OF_RANGE,
    ]


def test_not_found_line_uses_pattern_as_name() -> None:
    report = assemble_report([RequirementEntry("/camera.*x")], FACTS, True)

    (line,) = report.lines
    assert line.name == "/camera.*x"
    assert line.message_count == 0
    assert line.rate == 0.0
    assert line.status == STATUS_EMPTY
    assert line.matched is False


def test_pattern_error_isolated_to_its_entry() -> None:
    entries = [RequirementEntry("/imu["), RequirementEntry("/imu", RateRange(50, 150))]

    report = assemble_report(entries, FACTS, True)

    bad, good = report.results
    assert bad.error is not None
    assert [line.status for line in bad.lines] == [STATUS_EMPTY]
    assert bad.lines[0].name == "/imu["
    assert good.outcome == STATUS_HEALTHY


def test_regex_entry_emits_line_per_matched_topic() -> None:
    report = assemble_report([RequirementEntry("/.*", RateRange(20, 150))], FACTS, True)

    assert [(line.name, line.status) for line in report.lines] == [
        ("/imu", STATUS_HEALTHY),
        ("/status", STATUS_EMPTY),
        ("/camera/left/image_raw", STATUS_HEALTHY),
    ]
    assert report.results[0].outcome == STATUS_EMPTY


def test_render_text_colours_by_severity() -> None:
    entries = [
        RequirementEntry("/imu", RateRange(50, 150)),
        RequirementEntry("/camera/left/image_raw", RateRange(50, 150)),
        RequirementEntry("/status"),
    ]

    text = render_text(assemble_report(entries, FACTS, True))

    assert text == (
        f"{COLOR_GREEN}Statistics for topic /imu\n"
        f"Message count = 1000, Message frequency = 100{COLOR_END}\n\n"
        f"{COLOR_YELLOW}Statistics for topic /camera/left/image_raw\n"
        f"Message count = 300, Message frequency = 30{COLOR_END}\n\n"
        f"{COLOR_RED}Statistics for topic /status\n"
        f"Message count = 0, Message frequency = 0{COLOR_END}\n\n"
    )


def test_render_text_without_colour() -> None:
    text = render_text(assemble_report([RequirementEntry("/lidar")], FACTS, True), color=False)

    assert text == "Statistics for topic /lidar\nMessage count = 0, Message frequency = 0\n\n"


def test_summary_counts() -> None:
    entries = [
        RequirementEntry("/imu", RateRange(50, 150)),
        RequirementEntry("/camera/left/image_raw", RateRange(50, 150)),
        RequirementEntry("/lidar"),
        RequirementEntry("(bad"),
    ]

    counts = summarize(assemble_report(entries, FACTS, True))

    assert counts == {
        "pass": 1,
        "warn": 1,
        "fail": 2,
        "not_found": 1,
        "pattern_errors": 1,
        "requirements": 4,
    }


def test_json_report_is_serializable_with_infinite_values() -> None:
    facts = make_facts(0.0, {"/imu": 10})

    data = generate_json_report(assemble_report([RequirementEntry("/imu")], facts, True))

    text = json.dumps(data, allow_nan=False)
    assert '"rate": "inf"' in text
    assert data["healthy"] is False
    assert data["requirements"][0]["outcome"] == STATUS_OUT_OF_RANGE
