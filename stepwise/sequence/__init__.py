"""
Package turning schedules into lazily-produced, restartable streams of values.
"""

from .stream import ScheduleStream, to_sequence

__all__ = [
    "ScheduleStream",
    "to_sequence"
]
