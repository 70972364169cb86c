"""Threaded simulation of the dining philosophers problem, with a command line."""

__version__ = "1.0.0"
__all__ = ["cli", "parsing", "simulation", "timing"]