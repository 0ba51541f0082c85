"""Concentric connector pin layout, pin-to-pin wiring and a command-line driver."""

__version__ = "0.1.0"