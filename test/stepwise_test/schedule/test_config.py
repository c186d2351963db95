import pytest
from pydantic import ValidationError
from stepwise.core import ConfigurationError
from stepwise.schedule import (
    BlendLinear,
    BlendPoly,
    Constant,
    CosAnneal,
    Exp,
    Interpolator,
    Loop,
    LoopExhaustion,
    ScheduleConfig,
    Sequence,
    SinExp,
    Step,
    schedule_from_config,
    take,
)


def _build(data: dict):
    return schedule_from_config(ScheduleConfig.model_validate({"schedule": data}).schedule)


@pytest.mark.local
@pytest.mark.parametrize(
    ("data", "expected"),
    [
        ({"type": "constant", "value": 0.1}, Constant(0.1)),
        ({"type": "exp", "start": 1.0, "decay": 0.5}, Exp(1.0, 0.5)),
        ({"type": "step", "start": 1.0, "decay": 0.8, "step_sizes": [2, 3, 2]}, Step(1.0, 0.8, [2, 3, 2])),
        ({"type": "step", "start": 1.0, "decay": 0.8, "step_sizes": 4}, Step(1.0, 0.8, 4)),
        ({"type": "cos_anneal", "l0": 0.0, "l1": 1.0, "period": 10}, CosAnneal(0.0, 1.0, 10)),
        (
            {"type": "sin_exp", "l0": 0.0, "l1": 1.0, "period": 4, "decay": 0.5},
            SinExp(0.0, 1.0, 4, 0.5)
        ),
    ]
)
def test_primitive_from_config(data, expected):
    assert _build(data) == expected


@pytest.mark.local
@pytest.mark.parametrize(
    "kind",
    ["triangle", "sin", "triangle_decay2", "sin_decay2"]
)
def test_waveforms_from_config(kind):
    schedule = _build({"type": kind, "l0": 0.0, "l1": 1.0, "period": 4})
    assert schedule.value_at(1) == 0.0
    assert schedule.value_at(3) == 1.0


@pytest.mark.local
def test_poly_and_inv_from_config():
    poly = _build({"type": "poly", "start": 1.0, "degree": 2.0, "max_iter": 10})
    inv = _build({"type": "inv", "start": 1.0, "decay": 1.0, "degree": 1.0})

    assert poly.value_at(11) == 0.0
    assert inv.value_at(2) == 0.5


@pytest.mark.local
def test_nested_from_config():
    schedule = _build({
        "type": "sequence",
        "phases": [
            {
                "schedule": {
                    "type": "interpolator",
                    "first": {"type": "constant", "value": 0.0},
                    "second": {"type": "constant", "value": 1.0},
                    "start": 1,
                    "end": 3
                },
                "steps": 2
            },
            {
                "schedule": {
                    "type": "loop",
                    "schedules": [
                        {"type": "exp", "start": 1.0, "decay": 0.5},
                        {"type": "constant", "value": 0.1}
                    ],
                    "period": 2,
                    "repeats": 2,
                    "exhausted": "hold"
                },
                "steps": 6
            },
            {
                "schedule": {"type": "shifted", "schedule": {"type": "exp", "start": 1.0, "decay": 0.5}, "offset": 1},
                "steps": 1
            }
        ]
    })

    assert isinstance(schedule, Sequence)
    assert take(schedule, 9) == pytest.approx([0.0, 0.5, 1.0, 0.5, 0.1, 0.1, 0.1, 0.1, 0.5])


@pytest.mark.local
def test_interpolator_blend_from_config():
    schedule = _build({
        "type": "interpolator",
        "first": {"type": "constant", "value": 0.0},
        "second": {"type": "constant", "value": 1.0},
        "start": 1,
        "end": 5,
        "blend": {"type": "poly", "power": 3.0}
    })

    assert schedule == Interpolator(Constant(0.0), Constant(1.0), 1, 5, BlendPoly(3.0))
    assert schedule.value_at(3) == 0.125


@pytest.mark.local
def test_interpolator_default_blend():
    schedule = _build({
        "type": "interpolator",
        "first": {"type": "constant", "value": 0.0},
        "second": {"type": "constant", "value": 1.0},
        "start": 1,
        "end": 5
    })
    assert schedule.blend == BlendLinear()


@pytest.mark.local
def test_loop_from_config_defaults():
    schedule = _build({"type": "loop", "schedules": [{"type": "constant", "value": 1.0}], "period": 3})

    assert isinstance(schedule, Loop)
    assert schedule.repeats is None
    assert schedule.exhausted is LoopExhaustion.hold


@pytest.mark.local
@pytest.mark.parametrize(
    "data",
    [
        {"type": "cos_anneal", "l0": 0.0, "l1": 1.0, "period": 0},
        {"type": "step", "start": 1.0, "decay": 0.8, "step_sizes": []},
        {"type": "step", "start": 1.0, "decay": 0.8, "step_sizes": [2, -1]},
        {"type": "loop", "schedules": [], "period": 2},
        {"type": "sequence", "phases": [{"schedule": {"type": "constant", "value": 1.0}, "steps": 0}]},
    ]
)
def test_invalid_values_raise_configuration_error(data):
    with pytest.raises(ConfigurationError):
        _build(data)


@pytest.mark.local
@pytest.mark.parametrize(
    "data",
    [
        {"type": "sawtooth", "l0": 0.0, "l1": 1.0, "period": 4},
        {"type": "exp", "start": 1.0},
        {"type": "loop", "schedules": [{"type": "constant", "value": 1.0}], "period": 2, "exhausted": "clamp"},
    ]
)
def test_malformed_config(data):
    with pytest.raises(ValidationError):
        ScheduleConfig.model_validate({"schedule": data})


@pytest.mark.local
def test_blend_poly_nan_power_from_config():
    with pytest.raises(ConfigurationError, match="power"):
        _build({
            "type": "interpolator",
            "first": {"type": "constant", "value": 0.0},
            "second": {"type": "constant", "value": 1.0},
            "start": 1,
            "end": 5,
            "blend": {"type": "poly", "power": float("nan")}
        })
