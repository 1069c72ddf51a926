import pytest

from controlbox.pt1 import FIXED_POINT_SHIFT_BITS, PT1, FixedPointPT1


def test_negative_input_fixed_point():
    assert -2048 >> FIXED_POINT_SHIFT_BITS == -2
    sut = FixedPointPT1(0.4, 0.4, 2.0)
    assert sut.transfer(-1000) == -1000


def test_fixed_point_new():
    sut = FixedPointPT1(0.4, 0.4, 2.0)
    assert (sut.kp, sut.alpha, sut.previous_output) == (2048, 512, 0)


def test_fixed_point_transfer():
    sut = FixedPointPT1(0.4, 0.4, 2.0)
    assert sut.transfer(1000) == 1000


def test_fixed_point_zero_input_stays_zero():
    sut = FixedPointPT1(1.0, 10.0, 1.0)
    assert [sut.transfer(0) for _ in range(5)] == [0] * 5


def test_fixed_point_overflow_raises():
    sut = FixedPointPT1(0.4, 0.4, 2.0)
    with pytest.raises(OverflowError):
        sut.transfer(10**7)


@pytest.mark.parametrize("cls", [PT1, FixedPointPT1])
@pytest.mark.parametrize(
    "sample_time, t1_time, kp",
    [
        (0.0, 1.0, 1.0),
        (-1.0, 1.0, 1.0),
        (2.0, 1.0, 1.0),
        (1.0, 2.0, 0.0),
        (1.0, 2.0, -1.0),
        (1.0, 2.0, 1000.0),
    ],
)
def test_invalid_parameters(cls, sample_time, t1_time, kp):
    with pytest.raises(ValueError):
        cls(sample_time, t1_time, kp)


def test_float_new_parameters():
    sut = PT1(1.0, 4.0, 2.0)
    assert sut.alpha == 0.25
    assert sut.kp == 2.0
    assert sut.previous_output == 0.0


def test_float_step_response_converges_to_gain():
    sut = PT1(1.0, 10.0, 2.5)
    outputs = [sut.transfer(1.0) for _ in range(300)]
    assert all(a < b for a, b in zip(outputs, outputs[1:]))
    assert outputs[-1] == pytest.approx(2.5)
    assert sut.previous_output == outputs[-1]


def test_float_equal_times_reaches_gain_in_one_step():
    sut = PT1(1.0, 1.0, 3.0)
    assert sut.transfer(2.0) == 6.0


def test_float_equality():
    first = PT1(1.0, 5.0, 1.0)
    assert first == PT1(1.0, 5.0, 1.0)
    assert (first == PT1(1.0, 5.0, 2.0)) is False
    assert first.transfer(1.0) == pytest.approx(0.2)
    assert first.previous_output == pytest.approx(0.2)
    assert (first == PT1(1.0, 5.0, 1.0)) is False