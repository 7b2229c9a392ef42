# readyset

Building blocks for readiness-based, non-blocking I/O:

- `readyset.interest.Interest`: a non-empty set of readiness kinds a
  source is registered for (readable, writable, AIO, LIO, priority).
- `readyset.event.Event` and `readyset.event.Events`: a readiness event
  paired with a token, and a bounded collection of such events.
- `readyset.source.Source`: the abstract interface an event source
  implements so a registry can register, reregister and deregister it.
- `readyset.io_source.IoSource`: wraps any object with a `fileno()` method,
  implements `Source`, and checks that it is registered with at most one
  registry at a time.

The package has no dependencies beyond the standard library.

## Installation

```
pip install readyset
```

## Interests

```python
from readyset.interest import Interest

both = Interest.READABLE | Interest.WRITABLE   # same as READABLE.add(WRITABLE)
assert both.is_readable() and both.is_writable()
print(repr(both))                              # READABLE | WRITABLE

only_write = both.remove(Interest.READABLE)
assert only_write.is_writable() and not only_write.is_readable()
assert only_write.remove(Interest.WRITABLE) is None
```

`Interest` values are immutable and ordered. Building one from bits that
are zero, negative or above `0xFF` raises `ValueError`.

## Events

```python
from readyset.event import Event, Events

events = Events(2)
assert events.capacity() == 2
assert events.is_empty()

events.push(Event(token=7, readable=True))
for event in events:
    print(event.token, event.is_readable(), event.is_writable())

events.clear()
```

`Event` also answers `is_error()`, `is_read_closed()`, `is_write_closed()`,
`is_priority()`, `is_aio()` and `is_lio()`. `Events.push` raises
`OverflowError` once the collection holds `capacity()` events, and a
negative capacity raises `ValueError`.

## Sources

Subclass `readyset.source.Source` and implement `register`, `reregister`
and `deregister`, usually by delegating to a wrapped `IoSource`.

`IoSource` expects the registry it is given to have a `selector()` method
returning an object with `id()`, `register(fd, token, interests)`,
`reregister(fd, token, interests)` and `deregister(fd)`. It passes the
wrapped object's `fileno()` to those calls and tracks which selector it is
associated with:

- registering a source that is already registered raises `FileExistsError`;
- reregistering with a different registry raises `FileExistsError`, and
  reregistering an unregistered source raises `FileNotFoundError`;
- deregistering from a registry it is not registered with raises
  `FileNotFoundError`.

`IoSource.do_io(f)` calls `f` with the wrapped object and returns the
result; `into_inner()` returns the wrapped object. Other attribute access
is passed on to the wrapped object.

## What this package does not do

It provides no poller, registry or selector of its own, no network socket
types and no waker. A registry with the `selector()` interface above has to
be supplied by the caller, and `Events` is filled by whatever code calls
`push`.

## Running the tests

```
pip install -e ".[test]"
pytest
```