"""Hashing, byte and string streams, arenas, time parsing, touchlink and HTTP header utilities."""

__version__ = "1.2.0"