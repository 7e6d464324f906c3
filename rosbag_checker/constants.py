"""
Configuration constants for the bag checker.

Defaults mirror the checker's parameter set: frequency checking on, an
open-ended default rate range, and 1000 runs for the timing benchmark.
"""

import sys
from typing import Dict, Tuple

# ---------------------------------------------------------------------------
# Rate requirements
# ---------------------------------------------------------------------------
# "No lower bound" is approximated by -1 Hz, "no upper bound" by the
# largest representable double.

DEFAULT_MIN_HZ: float = -1.0
DEFAULT_MAX_HZ: float = sys.float_info.max

DEFAULT_CHECK_FREQUENCY = True

# ---------------------------------------------------------------------------
# Topic status
# ---------------------------------------------------------------------------

STATUS_HEALTHY = "healthy"
STATUS_OUT_OF_RANGE = "out_of_range"
STATUS_EMPTY = "empty"
STATUS_NOT_FOUND = "not_found"  # outcome of a pattern that matched nothing

SEVERITY_PASS = "pass"
SEVERITY_WARN = "warn"
SEVERITY_FAIL = "fail"

STATUS_SEVERITY: Dict[str, str] = {
    STATUS_HEALTHY: SEVERITY_PASS,
    STATUS_OUT_OF_RANGE: SEVERITY_WARN,
    STATUS_EMPTY: SEVERITY_FAIL,
    STATUS_NOT_FOUND: SEVERITY_FAIL,
}

# Worst first; used to pick the outcome of a multi-topic match.
SEVERITY_ORDER: Tuple[str, ...] = (SEVERITY_FAIL, SEVERITY_WARN, SEVERITY_PASS)

# ---------------------------------------------------------------------------
# Storage formats
# ---------------------------------------------------------------------------

FORMAT_SQLITE3 = "sqlite3"
FORMAT_MCAP = "mcap"
FORMAT_ROSBAG1 = "rosbag1"

STORAGE_FORMATS: Dict[str, str] = {
    ".db3": FORMAT_SQLITE3,
    ".mcap": FORMAT_MCAP,
    ".bag": FORMAT_ROSBAG1,
}

ROSBAG2_FORMATS = (FORMAT_SQLITE3, FORMAT_MCAP)

# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------

COLOR_GREEN = "\033[1;32;48m"
COLOR_YELLOW = "\033[1;33;48m"
COLOR_RED = "\033[1;31;48m"
COLOR_END = "\033[1;37;0m"

SEVERITY_COLORS: Dict[str, str] = {
    SEVERITY_PASS: COLOR_GREEN,
    SEVERITY_WARN: COLOR_YELLOW,
    SEVERITY_FAIL: COLOR_RED,
}

# ---------------------------------------------------------------------------
# Benchmark
# ---------------------------------------------------------------------------

DEFAULT_NUM_RUNS = 1000
