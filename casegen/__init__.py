"""Random test-case generation: graphs, trees, points, range parsing, checkers and command helpers."""

__version__ = "0.1.0"