"""
Topic matching: resolve a declared pattern to the topics present in a bag.

A pattern must match the *whole* topic name, so a plain topic name such as
``/imu`` only matches itself, while ``/camera/.*`` matches every camera topic.
"""

import re
from typing import Iterable, List, Pattern

from .errors import PatternError
from .models import TopicFact


def compile_pattern(pattern: str) -> Pattern:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise PatternError(pattern, str(e)) from e


def match_topics(pattern: str, topics: Iterable[TopicFact]) -> List[TopicFact]:
    """
    Return the topics whose full name matches ``pattern``, in bag order.

    An empty list means "not found" and is not an error. Raises PatternError
    if ``pattern`` is not a valid regular expression.
    """
    regex = compile_pattern(pattern)
    return [t for t in topics if regex.fullmatch(t.name)]
