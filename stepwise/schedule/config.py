from typing import Annotated, Literal

from pydantic import BaseModel, Field

from stepwise.core.log import logger
from stepwise.core.protocol import ScheduleProtocol

from .blend import BlendBase, BlendCosine, BlendLinear, BlendPoly
from .compose import Interpolator, Loop, LoopExhaustion, Sequence, Shifted
from .cyclic import CosAnneal, Sin, Triangle
from .decay import Constant, Exp, Inv, Poly, Step
from .envelope import SinDecay2, SinExp, TriangleDecay2, TriangleExp


class BlendLinearConfig(BaseModel):
    """
    Configuration for a linear blend.
    """

    type: Literal["linear"] = "linear"


class BlendCosineConfig(BaseModel):
    """
    Configuration for a cosine blend.
    """

    type: Literal["cosine"] = "cosine"


class BlendPolyConfig(BaseModel):
    """
    Configuration for a polynomial blend.

    Attributes:
        power: The exponent of the polynomial function.
    """

    type: Literal["poly"] = "poly"
    power: float = 2.0


AnyBlendConfig = Annotated[
    BlendLinearConfig | BlendCosineConfig | BlendPolyConfig, Field(discriminator="type")
]


def blend_from_config(config: AnyBlendConfig) -> BlendBase:
    """
    Instantiates a concrete blend curve from its configuration.

    Args:
        config: The configuration object.

    Returns:
        The instantiated blend curve.
    """

    match config:
        case BlendLinearConfig():
            return BlendLinear()
        case BlendCosineConfig():
            return BlendCosine()
        case BlendPolyConfig():
            return BlendPoly(config.power)


class ConstantConfig(BaseModel):
    """
    Configuration for a constant schedule.

    Attributes:
        value: The value returned at every index.
    """

    type: Literal["constant"] = "constant"
    value: float


class StepConfig(BaseModel):
    """
    Configuration for step decay.

    Attributes:
        start: The value at index 1.
        decay: The factor applied at every boundary.
        step_sizes: Segment lengths, or a single length repeating forever.
    """

    type: Literal["step"] = "step"
    start: float
    decay: float
    step_sizes: int | list[int]


class ExpConfig(BaseModel):
    """
    Configuration for exponential decay.

    Attributes:
        start: The value at index 1.
        decay: The per-step decay rate.
    """

    type: Literal["exp"] = "exp"
    start: float
    decay: float


class PolyConfig(BaseModel):
    """
    Configuration for polynomial decay.

    Attributes:
        start: The value at index 1.
        degree: The exponent of the polynomial.
        max_iter: The number of indices before the value reaches zero.
    """

    type: Literal["poly"] = "poly"
    start: float
    degree: float
    max_iter: int


class InvConfig(BaseModel):
    """
    Configuration for inverse decay.
    """

    type: Literal["inv"] = "inv"
    start: float
    decay: float
    degree: float


class CosAnnealConfig(BaseModel):
    """
    Configuration for cosine annealing.

    Attributes:
        l0: The floor of the wave.
        l1: The peak of the wave.
        period: The number of indices between restarts.
        restart: Whether the cosine restarts at every period.
    """

    type: Literal["cos_anneal"] = "cos_anneal"
    l0: float
    l1: float
    period: float
    restart: bool = True


class TriangleConfig(BaseModel):
    type: Literal["triangle"] = "triangle"
    l0: float
    l1: float
    period: float


class SinConfig(BaseModel):
    type: Literal["sin"] = "sin"
    l0: float
    l1: float
    period: float


class TriangleDecay2Config(BaseModel):
    type: Literal["triangle_decay2"] = "triangle_decay2"
    l0: float
    l1: float
    period: float


class TriangleExpConfig(BaseModel):
    type: Literal["triangle_exp"] = "triangle_exp"
    l0: float
    l1: float
    period: float
    decay: float


class SinDecay2Config(BaseModel):
    type: Literal["sin_decay2"] = "sin_decay2"
    l0: float
    l1: float
    period: float


class SinExpConfig(BaseModel):
    type: Literal["sin_exp"] = "sin_exp"
    l0: float
    l1: float
    period: float
    decay: float


class SequencePhaseConfig(BaseModel):
    """
    Configuration for a single phase of a sequence.

    Attributes:
        schedule: The schedule running during this phase.
        steps: The number of indices this phase lasts.
    """

    schedule: "AnyScheduleConfig"
    steps: int


class SequenceConfig(BaseModel):
    """
    Configuration for schedules running one after another.

    Attributes:
        phases: The phases, in the order they run.
    """

    type: Literal["sequence"] = "sequence"
    phases: list[SequencePhaseConfig]


class LoopConfig(BaseModel):
    """
    Configuration for a looped schedule.

    Attributes:
        schedules: The schedules used round-robin, one per cycle.
        period: The number of indices in every cycle.
        repeats: Optional number of cycles.
        exhausted: Behavior once `repeats` cycles are completed.
    """

    type: Literal["loop"] = "loop"
    schedules: list["AnyScheduleConfig"]
    period: int
    repeats: int | None = None
    exhausted: LoopExhaustion = LoopExhaustion.hold


class InterpolatorConfig(BaseModel):
    """
    Configuration for a blend between two schedules.

    Attributes:
        first: The schedule in effect up to `start`.
        second: The schedule in effect from `end`.
        start: The last index at which only `first` contributes.
        end: The first index at which only `second` contributes.
        blend: The curve shaping the transition.
    """

    type: Literal["interpolator"] = "interpolator"
    first: "AnyScheduleConfig"
    second: "AnyScheduleConfig"
    start: int
    end: int
    blend: AnyBlendConfig = BlendLinearConfig()


class ShiftedConfig(BaseModel):
    type: Literal["shifted"] = "shifted"
    schedule: "AnyScheduleConfig"
    offset: int


AnyScheduleConfig = Annotated[
    ConstantConfig | StepConfig | ExpConfig | PolyConfig | InvConfig
    | CosAnnealConfig | TriangleConfig | SinConfig
    | TriangleDecay2Config | TriangleExpConfig | SinDecay2Config | SinExpConfig
    | SequenceConfig | LoopConfig | InterpolatorConfig | ShiftedConfig,
    Field(discriminator="type")
]

SequencePhaseConfig.model_rebuild()
SequenceConfig.model_rebuild()
LoopConfig.model_rebuild()
InterpolatorConfig.model_rebuild()
ShiftedConfig.model_rebuild()


class ScheduleConfig(BaseModel):
    """
    Top-level wrapper that validates any schedule configuration from a plain mapping.

    Attributes:
        schedule: The schedule configuration.
    """

    schedule: AnyScheduleConfig


def _build(config: AnyScheduleConfig) -> ScheduleProtocol:
    match config:
        case ConstantConfig():
            return Constant(config.value)
        case StepConfig():
            return Step(config.start, config.decay, config.step_sizes)
        case ExpConfig():
            return Exp(config.start, config.decay)
        case PolyConfig():
            return Poly(config.start, config.degree, config.max_iter)
        case InvConfig():
            return Inv(config.start, config.decay, config.degree)
        case CosAnnealConfig():
            return CosAnneal(config.l0, config.l1, config.period, restart=config.restart)
        case TriangleConfig():
            return Triangle(config.l0, config.l1, config.period)
        case SinConfig():
            return Sin(config.l0, config.l1, config.period)
        case TriangleDecay2Config():
            return TriangleDecay2(config.l0, config.l1, config.period)
        case TriangleExpConfig():
            return TriangleExp(config.l0, config.l1, config.period, config.decay)
        case SinDecay2Config():
            return SinDecay2(config.l0, config.l1, config.period)
        case SinExpConfig():
            return SinExp(config.l0, config.l1, config.period, config.decay)
        case SequenceConfig():
            return Sequence([(_build(phase.schedule), phase.steps) for phase in config.phases])
        case LoopConfig():
            return Loop(
                [_build(x) for x in config.schedules],
                period=config.period,
                repeats=config.repeats,
                exhausted=config.exhausted
            )
        case InterpolatorConfig():
            return Interpolator(
                _build(config.first),
                _build(config.second),
                start=config.start,
                end=config.end,
                blend=blend_from_config(config.blend)
            )
        case ShiftedConfig():
            return Shifted(_build(config.schedule), config.offset)


def schedule_from_config(config: AnyScheduleConfig) -> ScheduleProtocol:
    """
    Constructs a schedule from the provided configuration.

    Args:
        config: The schedule configuration. Combinator configurations are built recursively.

    Returns:
        The constructed schedule.

    Raises:
        ConfigurationError: If any parameter is out of its valid range.
    """

    schedule = _build(config)
    logger.debug("Built schedule %r", schedule)
    return schedule
