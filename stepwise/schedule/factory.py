from stepwise.core.errors import ConfigurationError
from stepwise.core.protocol import ScheduleProtocol

from .blend import BlendBase, BlendCosine, BlendLinear
from .compose import Interpolator, Sequence
from .cyclic import CosAnneal
from .decay import Constant
from .evaluate import ScheduleLike
from .validation import require_positive_int, require_real


def warmup(
        schedule: ScheduleLike,
        steps: int,
        start_value: float = 0.0,
        blend: BlendBase | None = None
) -> Interpolator:
    """
    Prepends a warmup ramp to a schedule.

    The result starts at `start_value` at index 1 and blends into `schedule` so that from index
    `steps + 1` onward it equals `schedule` exactly. The wrapped schedule is evaluated at the
    global index throughout.

    Args:
        schedule: The schedule in effect after the warmup.
        steps: The length of the warmup ramp.
        start_value: The value at index 1.
        blend: The curve shaping the ramp. Linear if omitted.

    Returns:
        An Interpolator implementing the warmup.
    """

    steps = require_positive_int("steps", steps)
    return Interpolator(
        first=Constant(require_real("start_value", start_value)),
        second=schedule,
        start=1,
        end=steps + 1,
        blend=BlendLinear() if blend is None else blend
    )


def one_cycle(
        total_steps: int,
        max_value: float,
        start_value: float | None = None,
        end_value: float | None = None,
        warmup_fraction: float = 0.25
) -> ScheduleProtocol:
    """
    Builds a one-cycle schedule.

    The value rises from `start_value` to `max_value` along a cosine during the first
    `warmup_fraction` of `total_steps`, anneals along a cosine down to `end_value` over the
    remaining steps, and stays at `end_value` afterwards.

    Args:
        total_steps: The length of the whole cycle.
        max_value: The peak value reached at the end of warmup.
        start_value: The value at index 1. Defaults to `max_value / 25`.
        end_value: The final value. Defaults to `max_value / 1e5`.
        warmup_fraction: The share of total_steps (0.0 to 1.0, exclusive) spent rising.

    Returns:
        A Sequence implementing the cycle.

    Raises:
        ConfigurationError: If either the rising or the annealing phase would be empty.
    """

    total_steps = require_positive_int("total_steps", total_steps)
    max_value = require_real("max_value", max_value)
    start_value = max_value / 25 if start_value is None else require_real("start_value", start_value)
    end_value = max_value / 1e5 if end_value is None else require_real("end_value", end_value)

    if not 0.0 < warmup_fraction < 1.0:
        raise ConfigurationError(f"'warmup_fraction' should be in range (0.0, 1.0), but got {warmup_fraction}")

    warmup_steps = round(total_steps * warmup_fraction)
    anneal_steps = total_steps - warmup_steps
    if warmup_steps < 1 or anneal_steps < 1:
        raise ConfigurationError(
            f"One-cycle schedule of {total_steps} steps leaves no room for warmup fraction {warmup_fraction}"
        )

    rise = Interpolator(
        first=Constant(start_value),
        second=Constant(max_value),
        start=1,
        end=warmup_steps + 1,
        blend=BlendCosine()
    )
    anneal = CosAnneal(l0=end_value, l1=max_value, period=anneal_steps, restart=False)

    return Sequence([
        (rise, warmup_steps),
        (anneal, anneal_steps),
        (Constant(end_value), 1)
    ])
