"""Tests for the snake components."""

import pytest

from toroid_snake.snake import Direction, Size


class TestDirection:
    @pytest.mark.parametrize(
        ("direction", "opposite"),
        [
            (Direction.LEFT, Direction.RIGHT),
            (Direction.RIGHT, Direction.LEFT),
            (Direction.UP, Direction.DOWN),
            (Direction.DOWN, Direction.UP),
        ],
    )
    def test_opposite(self, direction, opposite):
        assert direction.opposite() == opposite

    def test_unit_steps(self):
        for direction in Direction:
            dx, dy = direction.value
            assert abs(dx) + abs(dy) == 1

    def test_up_increases_y(self):
        assert Direction.UP.value == (0, 1)

    def test_from_name(self):
        assert Direction.from_name("left") == Direction.LEFT
        assert Direction.from_name("UP") == Direction.UP

    def test_from_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown direction"):
            Direction.from_name("north")


class TestSize:
    def test_square(self):
        size = Size.square(0.8)
        assert size.width == 0.8
        assert size.height == 0.8
