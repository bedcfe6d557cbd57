import pytest

from saffron2d.randomness import (
    Color,
    RandomGenerator,
    color,
    integer,
    real,
    vec2,
    vec3,
    vec4,
)
from saffron2d.vector import Vector2, Vector3, Vector4


def test_integer_within_inclusive_bounds():
    values = {integer(1, 3) for _ in range(300)}
    assert values <= {1, 2, 3}
    assert 3 in values


def test_integer_degenerate_range():
    assert integer(5, 5) == 5


def test_integer_reversed_bounds_rejected():
    with pytest.raises(ValueError):
        integer(10, 1)


def test_real_within_half_open_bounds():
    for _ in range(200):
        value = real(-2.0, 3.0)
        assert -2.0 <= value < 3.0


def test_real_reversed_bounds_rejected():
    with pytest.raises(ValueError):
        real(1.0, 0.0)


def test_vec2_integer_components():
    v = vec2(Vector2(0, 10), Vector2(4, 20))
    assert isinstance(v.x, int) and isinstance(v.y, int)
    assert 0 <= v.x <= 4
    assert 10 <= v.y <= 20


def test_vec3_real_components():
    v = vec3(Vector3(0.0, 1.0, 2.0), Vector3(0.5, 1.5, 2.5))
    assert 0.0 <= v.x < 0.5
    assert 1.0 <= v.y < 1.5
    assert 2.0 <= v.z < 2.5


def test_vec4_fixed_bounds():
    low = Vector4(1, 2, 3, 4)
    assert vec4(low, low) == low


def test_color_is_opaque_by_default():
    for _ in range(50):
        c = color()
        assert c.a == 255
        assert all(0 <= ch <= 255 for ch in (c.r, c.g, c.b))


def test_color_with_random_alpha_stays_in_range():
    alphas = {color(randomize_alpha=True).a for _ in range(200)}
    assert all(0 <= a <= 255 for a in alphas)
    assert len(alphas) > 1


def test_color_rejects_out_of_range_channel():
    with pytest.raises(ValueError):
        Color(256, 0, 0)


def test_generator_floats_in_range():
    gen = RandomGenerator(10.0, 20.0)
    for _ in range(200):
        assert 10.0 <= gen.generate() < 20.0


def test_generator_integers_in_range():
    gen = RandomGenerator(-5, 5)
    values = [gen.generate() for _ in range(200)]
    assert all(isinstance(v, int) and -5 <= v <= 5 for v in values)


def test_generator_bounds_can_change():
    gen = RandomGenerator(0, 1)
    gen.lower = 7
    gen.upper = 7
    assert gen.generate() == 7