"""Exception hierarchy for the bag checker."""


class CheckerError(Exception):
    """Base class for every error the checker reports to the user."""


class ConfigError(CheckerError):
    """Malformed or missing input (topic list, rate range, run count)."""


class UnsupportedFormatError(CheckerError):
    """Bag file extension does not map to a known storage format."""


class BagReadError(CheckerError):
    """Bag is in a supported format but could not be opened or read."""


class PatternError(CheckerError):
    """A topic pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"Invalid topic pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason
