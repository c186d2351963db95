import abc
import math

from .validation import require_real


class BlendBase(abc.ABC):
    """
    Abstract base class for blending curves used by the Interpolator.
    """

    @abc.abstractmethod
    def weight(self, progress: float) -> float:
        """
        Calculates the weight of the second schedule.

        Args:
            progress: Progress fraction through the blending range (0.0 to 1.0).

        Returns:
            The weight, 0.0 at the beginning of the range and 1.0 at its end.
        """

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self):
        return hash((type(self), tuple(sorted(vars(self).items()))))


class BlendLinear(BlendBase):
    """
    Moves the weight linearly from the first schedule to the second.
    """

    def weight(self, progress: float) -> float:
        return progress

    def __repr__(self):
        return "BlendLinear()"


class BlendCosine(BlendBase):
    """
    Moves the weight along a half-period cosine, slow at both ends of the range.
    """

    def weight(self, progress: float) -> float:
        return (1 - math.cos(math.pi * progress)) / 2

    def __repr__(self):
        return "BlendCosine()"


class BlendPoly(BlendBase):
    """
    Moves the weight along a polynomial curve.
    """

    def __init__(self, power: float):
        """
        Constructs a polynomial blend.

        Args:
            power: The exponent of the polynomial. 1.0 is linear, 2.0 is quadratic, etc.
        """

        self._power = require_real("power", power)

    def weight(self, progress: float) -> float:
        return progress ** self._power

    def __repr__(self):
        return f"BlendPoly(power={self._power})"
