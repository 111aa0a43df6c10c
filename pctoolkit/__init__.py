"""Small utilities: bit helpers, pin-transition analysis, a ring buffer, a learning state machine, a cursor linked list, a file wrapper and two command loops."""

__version__ = "0.1.0"

__all__ = ["functions", "explode", "ringbuffer", "lfsm", "lili", "lili_cli", "ficheiro", "lfsm_cli"]