"""todoflow - single-list task manager with a pure reducer core."""

__version__ = "0.1.0"
