import math

import pytest
from stepwise.core import ConfigurationError
from stepwise.schedule import BlendCosine, Constant, Exp, one_cycle, take, warmup


@pytest.mark.local
def test_warmup_linear():
    schedule = warmup(Constant(1.0), steps=4)
    assert take(schedule, 6) == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0, 1.0])


@pytest.mark.local
def test_warmup_reaches_wrapped_schedule():
    inner = Exp(1.0, 0.9)
    schedule = warmup(inner, steps=4, start_value=0.1, blend=BlendCosine())

    assert schedule.value_at(1) == 0.1
    for t in range(5, 20):
        assert schedule.value_at(t) == inner.value_at(t)


@pytest.mark.local
def test_warmup_invalid_steps():
    with pytest.raises(ConfigurationError):
        warmup(Constant(1.0), steps=0)


@pytest.mark.local
def test_one_cycle():
    schedule = one_cycle(100, max_value=1.0)
    values = take(schedule, 200)

    assert math.isclose(values[0], 1.0 / 25, rel_tol=1e-9)
    assert max(values) == 1.0
    # the peak is the first index of the annealing phase
    assert values.index(1.0) == 25
    assert all(b >= a for a, b in zip(values[:26], values[1:26], strict=False))
    assert all(b <= a for a, b in zip(values[25:], values[26:], strict=False))
    assert math.isclose(values[-1], 1.0 / 1e5, rel_tol=1e-9)


@pytest.mark.local
def test_one_cycle_custom_values():
    schedule = one_cycle(10, max_value=0.5, start_value=0.1, end_value=0.0, warmup_fraction=0.5)

    assert schedule.value_at(1) == 0.1
    assert schedule.value_at(6) == 0.5
    assert math.isclose(schedule.value_at(11), 0.0, abs_tol=1e-12)
    assert math.isclose(schedule.value_at(500), 0.0, abs_tol=1e-12)


@pytest.mark.local
@pytest.mark.parametrize(
    "factory",
    [
        lambda: one_cycle(100, 1.0, warmup_fraction=0.0),
        lambda: one_cycle(100, 1.0, warmup_fraction=1.0),
        lambda: one_cycle(1, 1.0),
        lambda: one_cycle(0, 1.0),
    ]
)
def test_one_cycle_invalid(factory):
    with pytest.raises(ConfigurationError):
        factory()
