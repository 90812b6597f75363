"""Sequential and partitioned reductions over vectors, matrices and text."""

__version__ = "0.1.0"