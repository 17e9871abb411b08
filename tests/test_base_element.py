# tests/test_base_element.py

"""
Unit tests for the element contract.

It verifies that:
1. `as_type` returns the element on a type match and None otherwise.
2. `PriorityType` stores a mutable priority with a MEDIUM default.
3. `PriorityType.view_as` delegates to `as_type`.
"""

from tiered_queue import Priority, PriorityType, as_type


class Announcement(PriorityType):
    def __init__(self, text, priority=Priority.MEDIUM):
        super().__init__(priority)
        self.text = text


class Alarm(PriorityType):
    pass


def test_as_type_match():
    a = Announcement("doors closing")
    assert as_type(a, Announcement) is a
    assert as_type(a, PriorityType) is a


def test_as_type_mismatch_returns_none():
    a = Announcement("doors closing")
    assert as_type(a, Alarm) is None
    assert as_type(a, int) is None


def test_as_type_accepts_tuple_of_classes():
    a = Announcement("doors closing")
    assert as_type(a, (Alarm, Announcement)) is a


def test_as_type_none_input():
    """None (e.g. from an empty peek) is never a match."""
    assert as_type(None, object) is None


def test_default_priority_is_medium():
    assert PriorityType().priority is Priority.MEDIUM


def test_priority_is_mutable():
    a = Announcement("boarding", priority=Priority.LOW)
    a.priority = Priority.HIGH
    assert a.priority is Priority.HIGH


def test_view_as():
    alarm = Alarm(Priority.HIGH)
    assert alarm.view_as(Alarm) is alarm
    assert alarm.view_as(Announcement) is None


def test_repr_is_not_empty():
    assert "Alarm" in repr(Alarm(Priority.HIGH))
