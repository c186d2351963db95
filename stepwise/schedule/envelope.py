"""
Cyclic generators whose amplitude shrinks from one period to the next.

The floor `l0` stays fixed; only the span above it is scaled. For cycle `c` (0-based) the
`*Decay2` variants use a span of `(l1 - l0) / 2^c` and the `*Exp` variants a span of
`(l1 - l0) * decay^c`.
"""

import dataclasses
import math

from .cyclic import check_wave_range, cycle_index, cycle_phase, sin_wave, triangle_wave
from .decay import scaled_power
from .validation import require_real


def _exp_envelope(l0: float, span: float, decay: float, cycle: int, w: float) -> float:
    # an infinite span times a zero weight would give NaN at the start of every cycle
    if w == 0:
        return l0
    return l0 + scaled_power(span * w, decay, cycle)


@dataclasses.dataclass(frozen=True)
class TriangleDecay2:
    """
    Triangle wave whose amplitude is halved every period.

    Attributes:
        l0: The floor of the wave.
        l1: The peak of the first period.
        period: The length of one full up-and-down cycle.
    """

    l0: float
    l1: float
    period: float

    def __post_init__(self):
        check_wave_range(self.l0, self.l1, self.period)

    def value_at(self, t: int) -> float:
        amplitude = math.ldexp(self.l1 - self.l0, -cycle_index(t, self.period))
        return self.l0 + amplitude * triangle_wave(cycle_phase(t, self.period))


@dataclasses.dataclass(frozen=True)
class TriangleExp:
    """
    Triangle wave whose amplitude is multiplied by `decay` every period.

    Attributes:
        l0: The floor of the wave.
        l1: The peak of the first period.
        period: The length of one full up-and-down cycle.
        decay: The per-period amplitude factor.
    """

    l0: float
    l1: float
    period: float
    decay: float

    def __post_init__(self):
        check_wave_range(self.l0, self.l1, self.period)
        require_real("decay", self.decay)

    def value_at(self, t: int) -> float:
        w = triangle_wave(cycle_phase(t, self.period))
        return _exp_envelope(self.l0, self.l1 - self.l0, self.decay, cycle_index(t, self.period), w)


@dataclasses.dataclass(frozen=True)
class SinDecay2:
    """Rectified sine wave whose amplitude is halved every period."""

    l0: float
    l1: float
    period: float

    def __post_init__(self):
        check_wave_range(self.l0, self.l1, self.period)

    def value_at(self, t: int) -> float:
        amplitude = math.ldexp(self.l1 - self.l0, -cycle_index(t, self.period))
        return self.l0 + amplitude * sin_wave(cycle_phase(t, self.period))


@dataclasses.dataclass(frozen=True)
class SinExp:
    """Rectified sine wave whose amplitude is multiplied by `decay` every period."""

    l0: float
    l1: float
    period: float
    decay: float

    def __post_init__(self):
        check_wave_range(self.l0, self.l1, self.period)
        require_real("decay", self.decay)

    def value_at(self, t: int) -> float:
        w = sin_wave(cycle_phase(t, self.period))
        return _exp_envelope(self.l0, self.l1 - self.l0, self.decay, cycle_index(t, self.period), w)
