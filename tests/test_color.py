import pytest

from minirt.color import Color


def test_add_componentwise():
    assert Color(0.1, 0.2, 0.3) + Color(0.4, 0.5, 0.6) == Color(
        0.1 + 0.4, 0.2 + 0.5, 0.3 + 0.6
    )


def test_mul_by_color_is_componentwise():
    assert Color(0.5, 1.0, 0.0) * Color(0.5, 0.25, 1.0) == Color(0.25, 0.25, 0.0)


def test_mul_by_number_scales():
    c = Color(0.2, 0.4, 0.8)
    assert c * 0.5 == Color(0.1, 0.2, 0.4)
    assert 0.5 * c == c * 0.5


def test_mul_by_white_is_identity():
    c = Color(0.3, 0.6, 0.9)
    assert c * Color(1.0, 1.0, 1.0) == c


def test_clamped_limits_range():
    assert Color(-0.5, 0.5, 1.5).clamped() == Color(0.0, 0.5, 1.0)


def test_clamped_is_idempotent():
    c = Color(2.0, -3.0, 0.25).clamped()
    assert c.clamped() == c


def test_to_int_white_and_black():
    assert Color(1.0, 1.0, 1.0).to_int() == 0xFFFFFF
    assert Color(0.0, 0.0, 0.0).to_int() == 0


def test_to_int_channel_positions():
    assert Color(1.0, 0.0, 0.0).to_int() == 0xFF0000
    assert Color(0.0, 1.0, 0.0).to_int() == 0x00FF00
    assert Color(0.0, 0.0, 1.0).to_int() == 0x0000FF


def test_to_int_clamps_out_of_range():
    assert Color(5.0, -1.0, 2.0).to_int() == Color(1.0, 0.0, 1.0).to_int()


@pytest.mark.parametrize("value", [0.0, 0.1, 0.33, 0.5, 0.99, 1.0])
def test_to_int_channels_fit_in_a_byte(value):
    packed = Color(value, value, value).to_int()
    red, green, blue = packed >> 16, (packed >> 8) & 0xFF, packed & 0xFF
    assert red == green == blue
    assert 0 <= red <= 255