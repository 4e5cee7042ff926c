"""Utility helper functions."""

from bloglist.utils.helpers import get_summary, host, time_taken, today_str, try_parse_uuid

__all__ = [
    "get_summary",
    "host",
    "time_taken",
    "today_str",
    "try_parse_uuid",
]
