"""
Combinators building new schedules out of existing ones.

Combinators hold their children by reference and never copy or mutate them, so a single
schedule can safely appear in several compositions.
"""

import bisect
import dataclasses
import itertools
from collections.abc import Iterable
from enum import StrEnum

from stepwise.core.errors import ConfigurationError
from stepwise.core.protocol import ScheduleProtocol

from .blend import BlendBase, BlendLinear
from .evaluate import ScheduleLike, as_schedule
from .validation import require_non_negative_int, require_positive_int


@dataclasses.dataclass(frozen=True)
class Sequence:
    """
    Runs schedules one after another, each for a fixed number of indices.

    With phase lengths `l_1, l_2, ...` and cumulative boundaries `B_i = l_1 + ... + l_i`, index
    t is handed to the first phase i with `t <= B_i`, evaluated at the local index
    `t - B_{i-1}`. A boundary index therefore belongs to the phase it closes. Past the last
    boundary the final schedule keeps running with a growing local index.

    Attributes:
        phases: Ordered (schedule, length) pairs. Plain numbers are accepted in place of
            schedules and treated as constants.
    """

    phases: tuple[tuple[ScheduleProtocol, int], ...]
    _boundaries: tuple[int, ...] = dataclasses.field(init=False, repr=False, compare=False, default=())

    def __post_init__(self):
        phases = tuple(self.phases)
        if len(phases) == 0:
            raise ConfigurationError("Sequence should contain at least one phase")

        normalized = []
        for i, phase in enumerate(phases):
            try:
                schedule, length = phase
            except (TypeError, ValueError) as e:
                raise ConfigurationError(
                    f"Sequence phase {i} should be a (schedule, length) pair, but got {phase!r}"
                ) from e
            normalized.append((as_schedule(schedule), require_positive_int(f"phases[{i}] length", length)))

        object.__setattr__(self, "phases", tuple(normalized))
        object.__setattr__(self, "_boundaries", tuple(itertools.accumulate(length for _, length in normalized)))

    @classmethod
    def from_lists(cls, schedules: Iterable[ScheduleLike], step_sizes: Iterable[int]) -> "Sequence":
        """
        Constructs a Sequence from parallel lists of schedules and phase lengths.

        Args:
            schedules: The schedules, in the order they run.
            step_sizes: The number of indices each schedule runs for.

        Returns:
            The constructed Sequence.

        Raises:
            ConfigurationError: If the two lists differ in length.
        """

        schedules = list(schedules)
        step_sizes = list(step_sizes)
        if len(schedules) != len(step_sizes):
            raise ConfigurationError(
                f"Sequence got {len(schedules)} schedules but {len(step_sizes)} step sizes"
            )
        return cls(tuple(zip(schedules, step_sizes, strict=True)))

    @property
    def total_steps(self) -> int:
        """Number of indices covered by the explicit phases."""

        return self._boundaries[-1]

    def value_at(self, t: int) -> float:
        i = min(bisect.bisect_left(self._boundaries, t), len(self._boundaries) - 1)
        offset = self._boundaries[i - 1] if i > 0 else 0
        return self.phases[i][0].value_at(t - offset)


class LoopExhaustion(StrEnum):
    """
    What a Loop with a repeat count does once all its cycles are completed.

    Attributes:
        hold: Keep returning the value at the last index of the last cycle.
        restart: Keep looping as if no repeat count was given.
    """

    hold = "hold"
    restart = "restart"


@dataclasses.dataclass(frozen=True)
class Loop:
    """
    Repeats a finite window of one or more schedules.

    Index t falls into cycle `c = (t-1) // period` and is evaluated at the local index
    `((t-1) mod period) + 1`. When several schedules are given, cycle c uses schedule
    `c mod len(schedules)`, so the schedules take turns.

    Attributes:
        schedules: A single schedule, or a list of schedules used round-robin.
        period: The number of indices in every cycle.
        repeats: Optional number of cycles. None loops forever.
        exhausted: Behavior past the last of `repeats` cycles. Defaults to holding the last
            value.
    """

    schedules: ScheduleProtocol | tuple[ScheduleProtocol, ...]
    period: int
    repeats: int | None = None
    exhausted: LoopExhaustion = LoopExhaustion.hold

    def __post_init__(self):
        if isinstance(self.schedules, list | tuple):
            schedules = tuple(as_schedule(x) for x in self.schedules)
            if len(schedules) == 0:
                raise ConfigurationError("Loop should contain at least one schedule")
        else:
            schedules = (as_schedule(self.schedules),)

        object.__setattr__(self, "schedules", schedules)
        require_positive_int("period", self.period)
        if self.repeats is not None:
            require_positive_int("repeats", self.repeats)
        try:
            object.__setattr__(self, "exhausted", LoopExhaustion(self.exhausted))
        except ValueError as e:
            raise ConfigurationError(f"Unknown loop exhaustion behavior: {self.exhausted!r}") from e

    def value_at(self, t: int) -> float:
        cycle, local = divmod(t - 1, self.period)
        if (
                self.repeats is not None
                and cycle >= self.repeats
                and self.exhausted == LoopExhaustion.hold
        ):
            cycle, local = self.repeats - 1, self.period - 1
        return self.schedules[cycle % len(self.schedules)].value_at(local + 1)


@dataclasses.dataclass(frozen=True)
class Interpolator:
    """
    Blends from one schedule into another over a range of indices.

    The value is `first(t) * (1 - w) + second(t) * w`. The weight w is 0 up to index `start`,
    1 from index `end` onward, and follows the blend curve in between. Both schedules are
    evaluated at the global index t.

    Attributes:
        first: The schedule in effect before the range.
        second: The schedule in effect after the range.
        start: The last index at which only `first` contributes.
        end: The first index at which only `second` contributes.
        blend: The curve shaping the weight across the range.
    """

    first: ScheduleProtocol
    second: ScheduleProtocol
    start: int
    end: int
    blend: BlendBase = dataclasses.field(default_factory=BlendLinear)

    def __post_init__(self):
        object.__setattr__(self, "first", as_schedule(self.first))
        object.__setattr__(self, "second", as_schedule(self.second))
        require_positive_int("start", self.start)
        require_positive_int("end", self.end)
        if self.end <= self.start:
            raise ConfigurationError(
                f"Interpolator range should end after it starts, but got start={self.start}, end={self.end}"
            )
        if not isinstance(self.blend, BlendBase):
            raise ConfigurationError(f"Unknown blend curve: {self.blend!r}")

    def weight_at(self, t: int) -> float:
        """Returns the weight of the second schedule at index t, within [0, 1]."""

        if t <= self.start:
            return 0.0
        if t >= self.end:
            return 1.0
        progress = (t - self.start) / (self.end - self.start)
        return min(max(self.blend.weight(progress), 0.0), 1.0)

    def value_at(self, t: int) -> float:
        w = self.weight_at(t)
        if w == 0.0:
            return self.first.value_at(t)
        if w == 1.0:
            return self.second.value_at(t)
        return self.first.value_at(t) * (1 - w) + self.second.value_at(t) * w


@dataclasses.dataclass(frozen=True)
class Shifted:
    """
    Evaluates a schedule ahead of the global index by a fixed offset.

    Useful to resume a schedule part-way, e.g. as a later phase of a Sequence.

    Attributes:
        schedule: The wrapped schedule.
        offset: The number of indices skipped at the beginning of the wrapped schedule.
    """

    schedule: ScheduleProtocol
    offset: int

    def __post_init__(self):
        object.__setattr__(self, "schedule", as_schedule(self.schedule))
        require_non_negative_int("offset", self.offset)

    def value_at(self, t: int) -> float:
        return self.schedule.value_at(t + self.offset)
