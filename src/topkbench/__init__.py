"""Benchmark heap, sort and quickselect strategies for top-K selection."""

__version__ = "0.1.0"
