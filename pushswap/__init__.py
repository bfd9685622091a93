"""Sort integers with two stacks, reporting the operations used."""

__version__ = "1.0.0"