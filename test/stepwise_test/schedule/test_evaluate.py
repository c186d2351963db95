import pytest
from stepwise.core import ConfigurationError
from stepwise.core.protocol import ScheduleProtocol
from stepwise.schedule import (
    Constant,
    CosAnneal,
    Exp,
    Interpolator,
    Inv,
    Loop,
    Poly,
    Sequence,
    Shifted,
    Sin,
    SinDecay2,
    SinExp,
    Step,
    Triangle,
    TriangleDecay2,
    TriangleExp,
    as_schedule,
    take,
    value_at,
)


@pytest.mark.local
@pytest.mark.parametrize(
    "schedule",
    [
        Constant(1.0),
        Step(1.0, 0.5, [1, 2]),
        Exp(1.0, 0.5),
        Poly(1.0, 2.0, 5),
        Inv(1.0, 0.1, 1.0),
        CosAnneal(0.0, 1.0, 4),
        Triangle(0.0, 1.0, 4),
        Sin(0.0, 1.0, 4),
        TriangleDecay2(0.0, 1.0, 4),
        TriangleExp(0.0, 1.0, 4, 0.5),
        SinDecay2(0.0, 1.0, 4),
        SinExp(0.0, 1.0, 4, 0.5),
        Sequence([(1.0, 2)]),
        Loop(Exp(1.0, 0.5), 2),
        Interpolator(0.0, 1.0, 1, 2),
        Shifted(Exp(1.0, 0.5), 1),
    ]
)
def test_schedules_satisfy_protocol(schedule):
    assert isinstance(schedule, ScheduleProtocol)
    # evaluation is idempotent
    assert take(schedule, 20) == take(schedule, 20)


@pytest.mark.local
def test_value_at():
    assert value_at(Exp(1.0, 0.5), 3) == 0.25


@pytest.mark.local
@pytest.mark.parametrize("t", [0, -1])
def test_value_at_rejects_index_below_one(t):
    with pytest.raises(ValueError, match="at least 1"):
        value_at(Exp(1.0, 0.5), t)


@pytest.mark.local
def test_take_window():
    assert take(Exp(1.0, 0.5), 2, start=3) == [0.25, 0.125]
    assert take(Exp(1.0, 0.5), 0) == []

    with pytest.raises(ValueError):
        take(Exp(1.0, 0.5), 2, start=0)


@pytest.mark.local
def test_as_schedule():
    schedule = Exp(1.0, 0.5)

    assert as_schedule(schedule) is schedule
    assert as_schedule(0.5) == Constant(0.5)
    assert as_schedule(3) == Constant(3.0)


@pytest.mark.local
@pytest.mark.parametrize("value", ["0.5", None, True, [1.0]])
def test_as_schedule_invalid(value):
    with pytest.raises(ConfigurationError):
        as_schedule(value)
