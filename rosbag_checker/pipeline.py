"""
Pipeline orchestrator: wires the check stages together.

requirements → bag metadata → topic matching → rate evaluation → report

The bag metadata reader is injectable so the pipeline can run against
fake metadata, and so repeated runs each get their own fresh BagFacts.
"""

import time
from typing import Callable, List

from .bag_reader import detect_storage_format, read_metadata
from .models import BagFacts, CheckConfig, Report, RequirementEntry
from .report_generator import assemble_report
from .requirements import build_requirements

MetadataReader = Callable[[str, str], BagFacts]


def run_check(
    config: CheckConfig,
    *,
    metadata_reader: MetadataReader = read_metadata,
    verbose: bool = False,
) -> Report:
    """
    Run one complete bag check.

    Args:
        config: Bag path, topic source, frequency flag and default range
        metadata_reader: Callable (path, storage_format) -> BagFacts
        verbose: Print progress details

    Returns:
        Report with one MatchResult per requirement entry

    Raises:
        ConfigError: topic list missing or malformed (before any bag access)
        UnsupportedFormatError: bag extension not recognised
        BagReadError: bag could not be read
    """
    def log(msg: str):
        if verbose:
            print(msg)

    t0 = time.time()

    entries: List[RequirementEntry] = build_requirements(
        config.topic_source, config.default_range
    )
    log(f"  Requirements: {len(entries)} topic pattern(s)")
    if config.check_frequency:
        log("  Including check for frequency requirements")

    storage_format = detect_storage_format(config.bag_file)
    facts = metadata_reader(config.bag_file, storage_format)
    log(f"  Storage format: {storage_format}")
    log(f"  rosbag duration = {facts.duration_seconds:f}")
    log(f"  Topics in bag: {len(facts.topics)}")
    if facts.duration_seconds <= 0:
        log("  WARNING: zero-length recording, non-empty topics report an infinite rate")

    report = assemble_report(entries, facts, config.check_frequency)
    log(f"  Checked in {time.time() - t0:.3f}s")
    return report
