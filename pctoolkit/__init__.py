"""Bit-pattern helpers, ring buffers, a learning state machine, a cursor linked list and a file handle."""

__version__ = "0.1.0"
__all__ = ["functions", "explode", "circbuffer", "lfsm", "lili", "ficheiro"]