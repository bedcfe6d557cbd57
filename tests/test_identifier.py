import pytest

from saffron2d.identifier import UUID


def test_explicit_value_round_trips():
    assert int(UUID(7)) == 7


def test_equality_and_hash_follow_value():
    a, b = UUID(42), UUID(42)
    assert a == b
    assert hash(a) == hash(b)
    assert {a: "x"}[b] == "x"


def test_different_values_are_unequal():
    assert not (UUID(1) == UUID(2))


def test_null_is_zero():
    assert int(UUID.null()) == 0
    assert UUID.null() == UUID(0)


def test_random_values_are_in_range_and_distinct():
    ids = [UUID() for _ in range(200)]
    assert all(0 <= int(i) < 2**64 for i in ids)
    assert len(set(ids)) == len(ids)


def test_copy_by_value():
    original = UUID()
    copy = UUID(int(original))
    assert copy == original


@pytest.mark.parametrize("value", [-1, 2**64])
def test_out_of_range_raises(value):
    with pytest.raises(ValueError):
        UUID(value)


def test_comparison_with_int_is_not_equal():
    assert (UUID(3) == 3) is False