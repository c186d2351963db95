"""
Cyclic generators: waveforms that oscillate between a floor `l0` and a peak `l1`.

Every waveform is evaluated on the phase `((t-1) mod period) / period`, so a period does not
need to divide the total number of iterations and the values of consecutive periods are
bitwise identical.
"""

import dataclasses
import math

from .validation import require_positive_real, require_real


def cycle_phase(t: int, period: float) -> float:
    """
    Computes the progress through the current period.

    Args:
        t: The 1-based iteration index.
        period: The period length.

    Returns:
        A fraction in [0, 1), zero at the first index of every period.
    """

    return ((t - 1) % period) / period


def cycle_index(t: int, period: float) -> int:
    """Returns the 0-based number of the period that index t falls into."""

    return int((t - 1) // period)


def cos_wave(phase: float) -> float:
    # 1 at phase 0, 0 at phase 1
    return (1 + math.cos(math.pi * phase)) / 2


def triangle_wave(phase: float) -> float:
    # 0 at phase 0, 1 at phase 0.5
    return 1 - abs(2 * phase - 1)


def sin_wave(phase: float) -> float:
    return abs(math.sin(math.pi * phase))


def check_wave_range(l0: float, l1: float, period: float):
    require_real("l0", l0)
    require_real("l1", l1)
    require_positive_real("period", period)


@dataclasses.dataclass(frozen=True)
class CosAnneal:
    r"""
    Cosine annealing with warm restarts.

    Starts at the peak `l1`, follows half a cosine down toward the floor `l0` and jumps back
    to `l1` at the beginning of every period.

      l1 ->  *.        *.        *.
               `.        `.        `.
      l0 ->      `-       `-        `-
             1    period+1  2*period+1

    Attributes:
        l0: The floor of the wave.
        l1: The peak of the wave, returned at index 1.
        period: The number of indices between restarts.
        restart: If False, the cosine is not reset at every period; it keeps going and climbs
            back to `l1` over the following period instead.
    """

    l0: float
    l1: float
    period: float
    restart: bool = True

    def __post_init__(self):
        check_wave_range(self.l0, self.l1, self.period)

    def value_at(self, t: int) -> float:
        if self.restart:
            phase = cycle_phase(t, self.period)
        else:
            phase = (t - 1) / self.period
        w = cos_wave(phase)
        return self.l0 * (1 - w) + self.l1 * w


@dataclasses.dataclass(frozen=True)
class Triangle:
    r"""
    Triangle wave ramping linearly from `l0` up to `l1` and back down within each period.

      l1         /\      /\      /\
      l0        /  \    /  \    /  \
                1   period+1

    Attributes:
        l0: The floor of the wave, returned at index 1.
        l1: The peak of the wave, reached at the middle of every period.
        period: The length of one full up-and-down cycle.
    """

    l0: float
    l1: float
    period: float

    def __post_init__(self):
        check_wave_range(self.l0, self.l1, self.period)

    def value_at(self, t: int) -> float:
        w = triangle_wave(cycle_phase(t, self.period))
        return self.l0 * (1 - w) + self.l1 * w


@dataclasses.dataclass(frozen=True)
class Sin:
    """
    Rectified sine wave, `l0 + (l1 - l0) * |sin(pi * (t-1) / period)|`.

    Attributes:
        l0: The floor of the wave, returned at index 1.
        l1: The peak of the wave, reached at the middle of every period.
        period: The length of one hump.
    """

    l0: float
    l1: float
    period: float

    def __post_init__(self):
        check_wave_range(self.l0, self.l1, self.period)

    def value_at(self, t: int) -> float:
        w = sin_wave(cycle_phase(t, self.period))
        return self.l0 * (1 - w) + self.l1 * w
