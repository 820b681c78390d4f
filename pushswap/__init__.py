"""Two-stack integer sorting with a fixed instruction set, and an instruction checker."""

__version__ = "0.1.0"