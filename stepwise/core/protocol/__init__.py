"""Package providing protocol definitions for schedules and the objects consuming them."""

from .schedule import ScheduleProtocol, StatefulProtocol

__all__ = [
    "ScheduleProtocol",
    "StatefulProtocol"
]
