"""Tests for the event queues."""

from toroid_snake.events import EventQueue, GrowthEvent


class TestEventQueue:
    def test_starts_empty(self):
        queue = EventQueue()
        assert not queue
        assert len(queue) == 0

    def test_send_and_drain(self):
        queue = EventQueue()
        queue.send(GrowthEvent())
        queue.send(GrowthEvent())
        assert queue
        assert len(queue.drain()) == 2
        assert not queue

    def test_clear(self):
        queue = EventQueue()
        queue.send(GrowthEvent())
        queue.clear()
        assert queue.drain() == []
