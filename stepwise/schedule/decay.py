"""
Decay generators: closed-form schedules that shrink a starting value as the index grows.
"""

import bisect
import dataclasses
import itertools
import math
import numbers

from stepwise.core.errors import ConfigurationError

from .validation import require_positive_int, require_real


def scaled_power(scale: float, base: float, exponent: float) -> float:
    """
    Computes `scale * base^exponent`, saturating to a signed infinity instead of overflowing.

    Args:
        scale: The factor applied to the power.
        base: The base of the power.
        exponent: The exponent of the power.

    Returns:
        The product, or `inf`/`-inf` carrying the sign of the exact result when it exceeds the
        float range.
    """

    if scale == 0:
        return 0.0
    try:
        return scale * base ** exponent
    except OverflowError:
        negative = (scale < 0) != (base < 0 and exponent % 2 == 1)
        return -math.inf if negative else math.inf


@dataclasses.dataclass(frozen=True)
class Constant:
    """
    Schedule returning the same value at every index.

    Attributes:
        value: The value returned for every index.
    """

    value: float

    def __post_init__(self):
        require_real("value", self.value)

    def value_at(self, t: int) -> float:
        return self.value


@dataclasses.dataclass(frozen=True)
class Step:
    """
    Step decay: the value is multiplied by `decay` each time a step boundary is passed.

    The value at index t is `start * decay^k`, where k is the number of cumulative step
    boundaries that are less than or equal to `t - 1`. A boundary index therefore still belongs
    to the segment it closes; the decayed value first appears one index later.

    For `step_sizes=[2, 3, 2]` the boundaries are 2, 5 and 7, so indices 1-2 give `start`,
    3-5 give `start * decay`, 6-7 give `start * decay^2` and every index from 8 onward gives
    `start * decay^3`.

    Attributes:
        start: The value at index 1.
        decay: The multiplicative factor applied at every boundary.
        step_sizes: Either a sequence of segment lengths, consumed in order, or a single
            length that repeats forever.
    """

    start: float
    decay: float
    step_sizes: int | tuple[int, ...]
    _boundaries: tuple[int, ...] = dataclasses.field(init=False, repr=False, compare=False, default=())

    def __post_init__(self):
        require_real("start", self.start)
        require_real("decay", self.decay)

        if isinstance(self.step_sizes, numbers.Integral):
            object.__setattr__(self, "step_sizes", require_positive_int("step_sizes", self.step_sizes))
            return

        try:
            sizes = tuple(self.step_sizes)
        except TypeError as e:
            raise ConfigurationError(
                f"'step_sizes' should be an integer or a sequence of integers, but got {self.step_sizes!r}"
            ) from e
        if len(sizes) == 0:
            raise ConfigurationError("Step schedule should contain at least one step size")
        for i, size in enumerate(sizes):
            require_positive_int(f"step_sizes[{i}]", size)

        object.__setattr__(self, "step_sizes", sizes)
        object.__setattr__(self, "_boundaries", tuple(itertools.accumulate(sizes)))

    def value_at(self, t: int) -> float:
        if isinstance(self.step_sizes, int):
            k = (t - 1) // self.step_sizes
        else:
            k = bisect.bisect_right(self._boundaries, t - 1)
        return scaled_power(self.start, self.decay, k)


@dataclasses.dataclass(frozen=True)
class Exp:
    """
    Exponential decay, `start * decay^(t-1)`.

    Attributes:
        start: The value at index 1.
        decay: The per-step decay rate.
    """

    start: float
    decay: float

    def __post_init__(self):
        require_real("start", self.start)
        require_real("decay", self.decay)

    def value_at(self, t: int) -> float:
        return scaled_power(self.start, self.decay, t - 1)


@dataclasses.dataclass(frozen=True)
class Poly:
    """
    Polynomial decay, `start * (1 - (t-1)/max_iter)^degree`.

    The value reaches zero after `max_iter` indices and stays there.

    Attributes:
        start: The value at index 1.
        degree: The exponent of the polynomial.
        max_iter: The number of indices over which the value decays.
    """

    start: float
    degree: float
    max_iter: int

    def __post_init__(self):
        require_real("start", self.start)
        require_real("degree", self.degree)
        require_positive_int("max_iter", self.max_iter)

    def value_at(self, t: int) -> float:
        if t > self.max_iter:
            return 0.0
        return scaled_power(self.start, 1 - (t - 1) / self.max_iter, self.degree)


@dataclasses.dataclass(frozen=True)
class Inv:
    """
    Inverse decay, `start / (1 + decay*(t-1))^degree`.

    Attributes:
        start: The value at index 1.
        decay: The rate at which the denominator grows. Must be non-negative.
        degree: The exponent applied to the denominator.
    """

    start: float
    decay: float
    degree: float

    def __post_init__(self):
        require_real("start", self.start)
        require_real("degree", self.degree)
        if require_real("decay", self.decay) < 0:
            raise ConfigurationError(f"'decay' should be non-negative, but got {self.decay}")

    def value_at(self, t: int) -> float:
        return scaled_power(self.start, 1 + self.decay * (t - 1), -self.degree)
