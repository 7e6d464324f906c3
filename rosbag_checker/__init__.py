"""
ROSBag Checker

Verifies that a recorded ROS bag contains the expected topics at the
expected message rates, and reports each topic as pass / warn / fail.

Supports rosbag2 bags (sqlite3 .db3 and .mcap storage) and ROS1 .bag files.
"""

__version__ = "0.1.0"
