"""Two-stack sorting with a restricted instruction set."""

__version__ = "0.1.0"