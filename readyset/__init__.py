"""Readiness interests, events and event-source primitives for non-blocking I/O."""

__version__ = "0.1.0"
__all__ = ["event", "interest", "io_source", "source"]