from __future__ import annotations

from typing import Optional

import pytest

from rosbag_checker.models import BagFacts, TopicFact


class FakeMetadataReader:
    """Stands in for read_metadata(); records every call it receives."""

    def __init__(self, duration: float, counts: dict[str, int]) -> None:
        self.duration = duration
        self.counts = counts
        self.calls: list[tuple[str, str]] = []

    def __call__(self, path: str, storage_format: str) -> BagFacts:
        self.calls.append((path, storage_format))
        return BagFacts(
            duration_seconds=self.duration,
            topics=tuple(TopicFact(name, count) for name, count in self.counts.items()),
            path=path,
            storage_format=storage_format,
        )


def make_facts(duration: float, counts: dict[str, int], path: Optional[str] = None) -> BagFacts:
    return BagFacts(
        duration_seconds=duration,
        topics=tuple(TopicFact(name, count) for name, count in counts.items()),
        path=path or "session.db3",
        storage_format="sqlite3",
    )


@pytest.fixture
def bag_file(tmp_path):
    path = tmp_path / "session_0.db3"
    path.write_bytes(b"")
    return str(path)


@pytest.fixture
def imu_reader() -> FakeMetadataReader:
    return FakeMetadataReader(10.0, {"/imu": 1000, "/status": 0, "/camera/left/image_raw": 300})
