import pytest

from aoc2024.grid import Vertex, char_to_int, sign

POINTS = [(0, 0), (3, -2), (-5, 7), (1, 1)]


def test_sign_of_zero_and_negative():
    assert sign(0) == 0
    assert sign(-7) == -1
    assert sign(42) == 1


def test_char_to_int_digits():
    assert [char_to_int(c) for c in "0123456789"] == list(range(10))


@pytest.mark.parametrize("char", ["a", ".", "", "12", "-"])
def test_char_to_int_rejects_non_digits(char):
    with pytest.raises(ValueError):
        char_to_int(char)


@pytest.mark.parametrize("a", POINTS)
@pytest.mark.parametrize("b", POINTS)
def test_delta_to_moves_onto_target(a, b):
    first = Vertex(*a)
    second = Vertex(*b)
    assert first + first.delta_to(second) == second
    assert first.delta_to(second) == -second.delta_to(first)


def test_delta_to_pinned_value():
    assert Vertex(1, 2).delta_to(Vertex(4, -1)) == Vertex(3, -3)


@pytest.mark.parametrize("a", POINTS)
def test_negation_cancels(a):
    point = Vertex(*a)
    assert point + (-point) == Vertex(0, 0)
    assert -(-point) == point


@pytest.mark.parametrize("a", POINTS)
def test_sign_components(a):
    point = Vertex(*a)
    s = point.sign()
    assert s.x in (-1, 0, 1) and s.y in (-1, 0, 1)
    assert s.x * point.x == abs(point.x)
    assert s.y * point.y == abs(point.y)


def test_sign_pinned_value():
    assert Vertex(-5, 7).sign() == Vertex(-1, 1)
    assert Vertex(0, -3).sign() == Vertex(0, -1)


@pytest.mark.parametrize("a", POINTS)
def test_diff_is_y_minus_x(a):
    point = Vertex(*a)
    assert point.diff() + point.x == point.y


def test_diff_pinned_value():
    assert Vertex(3, -2).diff() == -5
    assert Vertex(1, 4).diff() == 3


def test_rotations_are_inverse_and_cyclic():
    up = Vertex(0, -1)
    assert up.rotate_right() == Vertex(1, 0)
    seen = [up]
    for _ in range(3):
        seen.append(seen[-1].rotate_right())
    assert len(set(seen)) == 4
    assert seen[-1].rotate_right() == up
    for d in seen:
        assert d.rotate_right().rotate_left() == d


def test_vertex_is_hashable_and_immutable():
    assert len({Vertex(1, 2), Vertex(1, 2)}) == 1
    with pytest.raises(AttributeError):
        Vertex(1, 2).x = 5  # type: ignore[misc]