from typing import Any, Self

from stepwise.core.log import logger
from stepwise.core.protocol import ScheduleProtocol


class ScheduleStream:
    """
    Lazily produces the values of a schedule, one index at a time.

    The stream owns nothing but a cursor: the schedule itself is shared and never modified,
    so resetting the cursor reproduces the exact same values. The stream is infinite; the
    consumer decides when to stop pulling values.

    A stream is not thread safe. Consumers sharing one stream across threads must guard
    `next()` with their own lock.
    """

    def __init__(self, schedule: ScheduleProtocol, start: int = 1):
        """
        Constructs a new ScheduleStream.

        Args:
            schedule: The schedule to draw values from.
            start: The 1-based index of the first value produced, and the index `reset()`
                returns to.

        Raises:
            ValueError: If start is lower than 1.
        """

        _check_cursor(start)

        self._schedule = schedule
        self._start = start
        self._cursor = start

    @property
    def schedule(self) -> ScheduleProtocol:
        """The schedule values are drawn from."""

        return self._schedule

    @property
    def cursor(self) -> int:
        """The index whose value the next call to `next()` returns."""

        return self._cursor

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> float:
        value = self._schedule.value_at(self._cursor)
        self._cursor += 1
        return value

    def peek(self) -> float:
        """Returns the value `next()` would return, without advancing."""

        return self._schedule.value_at(self._cursor)

    def reset(self):
        """Moves the cursor back to the index the stream started at."""

        logger.debug("Resetting schedule stream from index %d to %d", self._cursor, self._start)
        self._cursor = self._start

    def state_dict(self) -> dict[str, Any]:
        """
        Returns the progress of the stream.

        Returns:
            A dictionary holding the cursor.
        """

        return {"cursor": self._cursor}

    def load_state_dict(self, state_dict: dict[str, Any]) -> None:
        """
        Restores progress saved by `state_dict()`.

        Args:
            state_dict: The state dict to restore from.

        Raises:
            ValueError: If the saved cursor is lower than 1.
        """

        cursor = state_dict["cursor"]
        _check_cursor(cursor)
        logger.debug("Restoring schedule stream at index %d", cursor)
        self._cursor = cursor

    def __repr__(self):
        return f"ScheduleStream({self._schedule!r}, cursor={self._cursor})"


def _check_cursor(cursor: int):
    if cursor < 1:
        raise ValueError(f"Iteration index should be at least 1, but got {cursor}")


def to_sequence(schedule: ScheduleProtocol, start_index: int = 1) -> ScheduleStream:
    """
    Turns a schedule into a restartable stream of values.

    Args:
        schedule: The schedule to draw values from.
        start_index: The 1-based index of the first value produced.

    Returns:
        A stream producing `schedule.value_at(start_index)`, then the following indices.
    """

    return ScheduleStream(schedule, start=start_index)
