import pytest

from controlbox.signal import NamedTimeSignal, StepFunction, SuperPosition
from controlbox.time_range import TimeRange


def test_default_step_function_values():
    step = StepFunction()
    assert step.pre_value == 0
    assert step.post_value == 1
    assert step.step_time == 0.0


def test_step_switches_strictly_after_step_time():
    step = StepFunction().pre(2.0).post(3.0).step(1.1)
    assert step.time_to_signal(1.1) == 2.0
    assert step.time_to_signal(1.0) == 2.0
    assert step.time_to_signal(1.2) == 3.0


def test_step_over_default_time_range():
    step = StepFunction().pre(2.0).post(3.0).step(1.1)
    signal = [step.time_to_signal(t) for t in TimeRange()]
    assert signal[0] == 2.0
    assert signal[20] == 3.0


def test_builder_methods_return_copies():
    original = StepFunction()
    changed = original.pre(5.0)
    assert original.pre_value == 0
    assert changed.pre_value == 5.0
    assert changed.post_value == original.post_value
    assert changed.step_time == original.step_time


def test_step_function_is_immutable():
    step = StepFunction()
    with pytest.raises(AttributeError):
        step.pre_value = 3.0
    assert step.pre_value == 0
    assert step.time_to_signal(-1.0) == 0


@pytest.mark.parametrize("time", [-2.0, 0.0, 0.5, 1.0, 1.5, 10.0])
def test_super_position_adds_components(time):
    first = StepFunction()
    second = StepFunction().pre(0.0).post(-1.0).step(1.0)
    combined = SuperPosition(first, second)
    assert combined.time_to_signal(time) == first.time_to_signal(
        time
    ) + second.time_to_signal(time)


def test_super_position_str_contains_both_parts():
    first = StepFunction()
    second = StepFunction().step(4.0)
    text = str(SuperPosition(first, second))
    assert text == f"SuperPosition({first}, {second})"


def test_named_signal_defaults_to_step_function():
    named = NamedTimeSignal()
    assert named.name == "Default Step Function"
    assert named.signal == StepFunction()
    assert str(named) == f"Time Signal: Default Step Function = {StepFunction()}"


def test_named_signal_delegates_to_signal():
    inner = StepFunction().pre(7.0).post(9.0).step(3.0)
    named = NamedTimeSignal("custom", inner)
    for time in (0.0, 3.0, 4.0):
        assert named.time_to_signal(time) == inner.time_to_signal(time)