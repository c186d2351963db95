"""
Implements closed-form hyper-parameter schedules and the combinators composing them.
"""

from .blend import BlendBase, BlendCosine, BlendLinear, BlendPoly
from .compose import Interpolator, Loop, LoopExhaustion, Sequence, Shifted
from .config import AnyBlendConfig, AnyScheduleConfig, ScheduleConfig, schedule_from_config
from .cyclic import CosAnneal, Sin, Triangle
from .decay import Constant, Exp, Inv, Poly, Step
from .envelope import SinDecay2, SinExp, TriangleDecay2, TriangleExp
from .evaluate import ScheduleLike, as_schedule, take, value_at
from .factory import one_cycle, warmup

__all__ = [
    "AnyBlendConfig",
    "AnyScheduleConfig",
    "BlendBase",
    "BlendCosine",
    "BlendLinear",
    "BlendPoly",
    "Constant",
    "CosAnneal",
    "Exp",
    "Interpolator",
    "Inv",
    "Loop",
    "LoopExhaustion",
    "Poly",
    "ScheduleConfig",
    "ScheduleLike",
    "Sequence",
    "Shifted",
    "Sin",
    "SinDecay2",
    "SinExp",
    "Step",
    "Triangle",
    "TriangleDecay2",
    "TriangleExp",
    "as_schedule",
    "one_cycle",
    "schedule_from_config",
    "take",
    "value_at",
    "warmup"
]
