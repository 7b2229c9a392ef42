import pytest

from readyset.event import Event, Events


def test_capacity_from_constructor():
    events = Events(1024)
    assert events.capacity() == 1024
    assert events.is_empty()
    assert len(events) == 0


def test_push_and_iterate():
    events = Events(16)
    first = Event(10, readable=True)
    second = Event(11, writable=True)
    events.push(first)
    events.push(second)
    assert not events.is_empty()
    assert list(events) == [first, second]
    assert len(events) == 2
    assert [e.token for e in events] == [10, 11]


def test_clear_empties_but_keeps_capacity():
    events = Events(4)
    events.push(Event(1, readable=True))
    events.clear()
    assert events.is_empty()
    assert events.capacity() == 4


def test_push_beyond_capacity_fails():
    events = Events(1)
    events.push(Event(1))
    with pytest.raises(OverflowError):
        events.push(Event(2))
    assert len(events) == 1


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Events(-1)


def test_event_flags_reflect_fields():
    event = Event(
        7,
        readable=True,
        error=True,
        read_closed=True,
        priority=True,
        lio=True,
    )
    assert event.is_readable()
    assert not event.is_writable()
    assert event.is_error()
    assert event.is_read_closed()
    assert not event.is_write_closed()
    assert event.is_priority()
    assert not event.is_aio()
    assert event.is_lio()


def test_event_defaults_are_all_false():
    event = Event(3)
    checks = [
        event.is_readable(),
        event.is_writable(),
        event.is_error(),
        event.is_read_closed(),
        event.is_write_closed(),
        event.is_priority(),
        event.is_aio(),
        event.is_lio(),
    ]
    assert checks == [False] * 8
    assert event.token == 3


def test_iteration_is_repeatable():
    events = Events(8)
    events.push(Event(5, writable=True))
    assert list(events) == list(events)
    assert sum(1 for _ in events) == len(events)


def test_repr_lists_events():
    events = Events(2)
    event = Event(9, readable=True)
    events.push(event)
    assert repr(events) == repr([event])