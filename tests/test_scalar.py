import math

import pytest

from zkit import scalar


def test_to_radians_half_turn_is_pi():
    assert scalar.to_radians(180.0) == pytest.approx(math.pi)


@pytest.mark.parametrize("degrees", [-720.0, -45.0, 0.0, 30.0, 359.5])
def test_degree_radian_round_trip(degrees):
    assert scalar.to_degrees(scalar.to_radians(degrees)) == pytest.approx(degrees)


def test_angle_diff_follows_library_modulo():
    assert scalar.angle_diff(0.0, math.pi / 2) == pytest.approx(-math.pi / 2)


def test_copy_sign():
    assert scalar.copy_sign(3.0, -1.0) == -3.0
    assert scalar.copy_sign(-2.0, 5.0) == 2.0
    assert math.copysign(1.0, scalar.copy_sign(1.0, -0.0)) < 0


@pytest.mark.parametrize("x, y", [(7.0, 7.0), (21.0, 3.0), (-8.0, 2.0)])
def test_remainder_of_exact_multiple_is_zero(x, y):
    assert scalar.remainder(x, y) == pytest.approx(0.0)


@pytest.mark.parametrize("x", [0.25, 1.5, 2.75, 10.1, -0.5, -1.25, -3.6])
def test_floor_is_not_above_value(x):
    result = scalar.floor(x)
    assert result <= x
    assert result == int(result)


@pytest.mark.parametrize("x", [0.25, 1.5, 2.75, 10.1])
def test_ceil_and_floor_bracket_positive_fractions(x):
    assert scalar.floor(x) < x < scalar.ceil(x)
    assert scalar.ceil(x) - scalar.floor(x) == 1.0


def test_ceil_of_non_negative_whole_number_steps_up():
    assert scalar.ceil(2.0) > 2.0


@pytest.mark.parametrize("x", [0.1, 0.49, 0.51, 1.5, 7.3, -0.2, -2.5, -4.7])
def test_round_nearest_is_within_half(x):
    result = scalar.round_nearest(x)
    assert abs(result - x) <= 0.5
    assert result == int(result)


@pytest.mark.parametrize("a", [0.25, 1.0, 2.0, 10.0, 1234.5])
def test_quake_rsqrt_approximates_rsqrt(a):
    assert scalar.quake_rsqrt(a) == pytest.approx(scalar.rsqrt(a), rel=1e-4)


@pytest.mark.parametrize("a", [0.5, 3.0, 99.0])
def test_rsqrt_inverts_square_root(a):
    assert scalar.rsqrt(a) ** 2 * a == pytest.approx(1.0)


def test_rsqrt_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        scalar.rsqrt(0.0)


@pytest.mark.parametrize("x", [-3.0, 0.0, 0.5, 4.0])
def test_exp2_log2_round_trip(x):
    assert scalar.log2(scalar.exp2(x)) == pytest.approx(x, abs=1e-12)
    assert scalar.exp2(x) == pytest.approx(2.0 ** x)


@pytest.mark.parametrize("x", [-1.0, -0.5, 0.0, 0.3, 1.0])
def test_fast_exp_is_close_in_unit_range(x):
    assert scalar.fast_exp(x) == pytest.approx(math.exp(x), abs=2e-3)


@pytest.mark.parametrize("x", [-1.0, 0.0, 0.5, 1.0])
def test_fast_exp2_is_close_in_unit_range(x):
    assert scalar.fast_exp2(x) == pytest.approx(2.0 ** x, abs=2e-3)


def test_half_known_patterns():
    assert scalar.half_to_float(0x3C00) == 1.0
    assert scalar.float_to_half(1.0) == 0x3C00
    assert scalar.half_to_float(0x7C00) == math.inf
    assert scalar.half_to_float(0xFC00) == -math.inf
    assert scalar.float_to_half(-math.inf) == 0xFC00
    negative_zero = scalar.half_to_float(0x8000)
    assert negative_zero == 0.0 and math.copysign(1.0, negative_zero) < 0


def test_half_round_trip_for_every_finite_pattern():
    for bits in range(0x10000):
        if (bits >> 10) & 0x1F == 0x1F:
            continue
        assert scalar.float_to_half(scalar.half_to_float(bits)) == bits


def test_half_nan():
    assert math.isnan(scalar.half_to_float(0x7E00))
    encoded = scalar.float_to_half(math.nan)
    assert encoded & 0x7C00 == 0x7C00
    assert encoded & 0x3FF != 0


def test_half_overflow_and_underflow():
    assert scalar.float_to_half(1e6) == 0x7C00
    assert scalar.float_to_half(1e300) == 0x7C00
    assert scalar.float_to_half(1e-10) == 0


@pytest.mark.parametrize("value", [-1, 0x10000, 1.5, True])
def test_half_to_float_rejects_bad_input(value):
    with pytest.raises(ValueError):
        scalar.half_to_float(value)


def test_lerp_endpoints_and_unlerp_inverse():
    assert scalar.lerp(3.0, 11.0, 0.0) == 3.0
    assert scalar.lerp(3.0, 11.0, 1.0) == 11.0
    for t in (0.0, 0.25, 0.8):
        assert scalar.unlerp(scalar.lerp(3.0, 11.0, t), 3.0, 11.0) == pytest.approx(t)


@pytest.mark.parametrize("step", [scalar.smooth_step, scalar.smoother_step])
def test_steps_hit_edges_and_middle(step):
    assert step(2.0, 6.0, 2.0) == 0.0
    assert step(2.0, 6.0, 6.0) == 1.0
    assert step(2.0, 6.0, 4.0) == pytest.approx(0.5)
    assert step(2.0, 6.0, 3.0) < step(2.0, 6.0, 5.0)