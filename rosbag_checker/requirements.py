"""
Requirement set building: turn a YAML topic list or a single pattern into
an ordered list of RequirementEntry.

Topic-list format:

    topics:
      - name: /imu
        hz_range: [50, 150]
      - name: /camera/.*/image_raw      # no hz_range -> default range

Entries keep their declared order, duplicates included; each one is
evaluated on its own.
"""

import math
import numbers
from typing import Any, List, Optional

import yaml

from .errors import ConfigError
from .models import (
    DEFAULT_RATE_RANGE,
    RateRange,
    RequirementEntry,
    SinglePattern,
    StructuredList,
    TopicSource,
)


def _parse_bound(bound: Any, value: Any, topic_name: str) -> float:
    # YAML 1.1 loads exponent numbers without a dot (1e3) as strings
    if isinstance(bound, str):
        try:
            parsed = float(bound)
        except ValueError:
            parsed = None
        if parsed is not None and not math.isnan(parsed):
            return parsed
    # bool is a numbers.Number too; "true" is never a rate
    elif isinstance(bound, numbers.Real) and not isinstance(bound, bool):
        return float(bound)
    raise ConfigError(
        f"hz_range for topic {topic_name!r} must contain numbers, got {value!r}"
    )


def _parse_rate_range(value: Any, topic_name: str) -> RateRange:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ConfigError(
            f"hz_range for topic {topic_name!r} must be a [min, max] pair, got {value!r}"
        )
    bounds = []
    for bound in value:
        bounds.append(_parse_bound(bound, value, topic_name))
    try:
        return RateRange(bounds[0], bounds[1])
    except ValueError as e:
        raise ConfigError(f"hz_range for topic {topic_name!r}: {e}") from e


def parse_topic_list(
    document: Any,
    default_range: RateRange = DEFAULT_RATE_RANGE,
) -> List[RequirementEntry]:
    """Build requirement entries from an already-loaded topic-list document."""
    if not isinstance(document, dict) or "topics" not in document:
        raise ConfigError("Topic list must be a mapping with a 'topics' key")

    topics = document["topics"]
    if not isinstance(topics, list):
        raise ConfigError("'topics' must be a list of {name, hz_range} entries")

    entries: List[RequirementEntry] = []
    for index, item in enumerate(topics):
        if not isinstance(item, dict):
            raise ConfigError(f"Topic entry #{index} is not a mapping: {item!r}")

        name = item.get("name")
        if not isinstance(name, str) or not name:
            raise ConfigError(f"Topic entry #{index} is missing a 'name'")

        hz_range = item.get("hz_range")
        if hz_range is None:
            rate_range = default_range
        else:
            rate_range = _parse_rate_range(hz_range, name)

        entries.append(RequirementEntry(pattern=name, rate_range=rate_range))

    return entries


def load_topic_list(
    path: str,
    default_range: RateRange = DEFAULT_RATE_RANGE,
) -> List[RequirementEntry]:
    """Read a YAML topic-list file into requirement entries."""
    try:
        with open(path, "r") as f:
            document = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Could not read topic list {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse topic list {path}: {e}") from e

    return parse_topic_list(document, default_range)


def build_requirements(
    source: TopicSource,
    default_range: RateRange = DEFAULT_RATE_RANGE,
) -> List[RequirementEntry]:
    """Resolve a topic source into the ordered requirement list."""
    if isinstance(source, StructuredList):
        return load_topic_list(source.path, default_range)
    if isinstance(source, SinglePattern):
        if not source.pattern:
            raise ConfigError("Topic pattern must not be empty")
        return [RequirementEntry(pattern=source.pattern, rate_range=default_range)]
    raise ConfigError(f"Unknown topic source: {source!r}")


def dump_topic_list(
    entries: List[RequirementEntry],
    path: Optional[str] = None,
) -> str:
    """
    Serialize requirement entries to topic-list YAML.

    Every entry is written with an explicit hz_range, so reloading does not
    depend on the default range. Writes to ``path`` when given.
    """
    document = {
        "topics": [
            {"name": e.pattern, "hz_range": e.rate_range.to_list()}
            for e in entries
        ]
    }
    text = yaml.safe_dump(document, default_flow_style=None, sort_keys=False)
    if path is not None:
        with open(path, "w") as f:
            f.write(text)
    return text
