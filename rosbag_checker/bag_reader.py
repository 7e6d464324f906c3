"""
Bag metadata access: recording duration and per-topic message counts.

Only the metadata/index is read, never message payloads. rosbag2 bags
(sqlite3 or mcap storage) are opened by directory through
``rosbags.rosbag2``; ROS1 bags are opened by file through ``rosbags.rosbag1``.
"""

import os
from collections import OrderedDict
from typing import Dict, Tuple

from rosbags.rosbag1 import Reader as Rosbag1Reader
from rosbags.rosbag1.reader import ReaderError as Rosbag1ReaderError
from rosbags.rosbag2 import Reader as Rosbag2Reader
from rosbags.rosbag2 import ReaderError as Rosbag2ReaderError

from .constants import FORMAT_ROSBAG1, ROSBAG2_FORMATS, STORAGE_FORMATS
from .errors import BagReadError, UnsupportedFormatError
from .models import BagFacts, TopicFact


def detect_storage_format(path: str) -> str:
    """
    Pick the storage format from the bag path.

    .db3 → sqlite3, .mcap → mcap, .bag → rosbag1. A directory is a rosbag2
    bag and takes the format of the first storage file inside it.
    """
    if os.path.isdir(path):
        for name in sorted(os.listdir(path)):
            fmt = STORAGE_FORMATS.get(os.path.splitext(name)[1].lower())
            if fmt in ROSBAG2_FORMATS:
                return fmt
        raise UnsupportedFormatError(
            f"No .db3 or .mcap storage file found in bag directory {path}"
        )

    ext = os.path.splitext(path)[1].lower()
    fmt = STORAGE_FORMATS.get(ext)
    if fmt is None:
        raise UnsupportedFormatError(
            f"Unsupported bag file {os.path.basename(path)!r}: "
            f"expected one of {', '.join(sorted(STORAGE_FORMATS))}"
        )
    return fmt


def _rosbag2_dir(path: str) -> str:
    """rosbag2 readers take the bag directory (the one holding metadata.yaml)."""
    if os.path.isdir(path):
        return path
    return os.path.dirname(os.path.abspath(path))


def _collect_topics(reader) -> Tuple[float, Tuple[TopicFact, ...]]:
    """Sum message counts per topic across connections, in connection order."""
    counts: Dict[str, int] = OrderedDict()
    types: Dict[str, str] = {}
    for conn in reader.connections:
        counts[conn.topic] = counts.get(conn.topic, 0) + int(conn.msgcount)
        types.setdefault(conn.topic, conn.msgtype)

    if reader.message_count:
        duration = max(reader.duration, 0) / 1e9  # nanoseconds to seconds
    else:
        duration = 0.0

    topics = tuple(
        TopicFact(name=name, message_count=count, msgtype=types.get(name, ""))
        for name, count in counts.items()
    )
    return duration, topics


def read_metadata(path: str, storage_format: str) -> BagFacts:
    """Read duration and topic counts from a bag's metadata."""
    if not os.path.exists(path):
        raise BagReadError(f"Bag not found: {path}")

    if storage_format in ROSBAG2_FORMATS:
        reader_cls, reader_path = Rosbag2Reader, _rosbag2_dir(path)
    elif storage_format == FORMAT_ROSBAG1:
        reader_cls, reader_path = Rosbag1Reader, path
    else:
        raise UnsupportedFormatError(f"Unknown storage format {storage_format!r}")

    try:
        with reader_cls(reader_path) as reader:
            duration, topics = _collect_topics(reader)
    except (Rosbag1ReaderError, Rosbag2ReaderError) as e:
        message = f"Could not read bag {os.path.basename(path)}: {e}"
        if storage_format in ROSBAG2_FORMATS:
            message += (
                f" (rosbag2 bags are opened by directory; {reader_path} "
                f"must contain the bag's metadata.yaml)"
            )
        raise BagReadError(message) from e
    except OSError as e:
        raise BagReadError(f"Could not open bag {path}: {e}") from e

    return BagFacts(
        duration_seconds=duration,
        topics=topics,
        path=path,
        storage_format=storage_format,
    )
