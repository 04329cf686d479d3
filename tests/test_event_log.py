"""Tests for the bounded gameplay event feed."""

from geocoin.core.enums import EventCategory
from geocoin.utils.event_log import EventLog


class TestEventLog:
    def test_sequence_numbers_increase(self):
        log = EventLog()
        a = log.record(EventCategory.MOVE, "a")
        b = log.record(EventCategory.MOVE, "b")
        assert b.seq == a.seq + 1

    def test_since_filters_by_seq(self):
        log = EventLog()
        for i in range(5):
            log.record(EventCategory.MOVE, str(i))
        assert [e.message for e in log.since(4)] == ["3", "4"]

    def test_limit_drops_oldest(self):
        log = EventLog(limit=3)
        for i in range(5):
            log.record(EventCategory.SPAWN, str(i))
        assert [e.message for e in log.latest(10)] == ["2", "3", "4"]
        assert len(log) == 3

    def test_clear_keeps_sequence(self):
        log = EventLog()
        log.record(EventCategory.RESET, "x")
        log.clear()
        assert len(log) == 0
        assert log.record(EventCategory.RESET, "y").seq == 2

    def test_latest_zero(self):
        log = EventLog()
        log.record(EventCategory.MOVE, "x")
        assert log.latest(0) == []
