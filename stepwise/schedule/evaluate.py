import numbers

from stepwise.core.errors import ConfigurationError
from stepwise.core.protocol import ScheduleProtocol

from .decay import Constant

ScheduleLike = ScheduleProtocol | float
"""
Anything accepted where a schedule is expected: a schedule, or a plain real number that is
treated as a constant schedule.
"""


def as_schedule(schedule: ScheduleLike) -> ScheduleProtocol:
    """
    Normalizes a schedule-like value into a schedule.

    Args:
        schedule: A schedule, or a real number standing for a constant schedule.

    Returns:
        The schedule itself, or a Constant wrapping the number.

    Raises:
        ConfigurationError: If the value is neither a number nor a schedule.
    """

    if isinstance(schedule, numbers.Real) and not isinstance(schedule, bool):
        return Constant(float(schedule))
    if isinstance(schedule, ScheduleProtocol):
        return schedule
    raise ConfigurationError(
        f"Expected a schedule or a real number, but got {type(schedule).__name__}"
    )


def value_at(schedule: ScheduleProtocol, t: int) -> float:
    """
    Evaluates a schedule at a single iteration index.

    Args:
        schedule: The schedule to evaluate.
        t: The 1-based iteration index.

    Returns:
        The scheduled value.

    Raises:
        ValueError: If t is lower than 1.
    """

    if t < 1:
        raise ValueError(f"Iteration index should be at least 1, but got {t}")
    return schedule.value_at(t)


def take(schedule: ScheduleProtocol, n: int, start: int = 1) -> list[float]:
    """
    Materializes a finite window of a schedule.

    Args:
        schedule: The schedule to evaluate.
        n: The number of values to produce.
        start: The 1-based index of the first value.

    Returns:
        The values at indices start, start + 1, ..., start + n - 1.
    """

    if start < 1:
        raise ValueError(f"Iteration index should be at least 1, but got {start}")
    return [schedule.value_at(t) for t in range(start, start + n)]
