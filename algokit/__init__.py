"""Classic algorithms and data structures: trees, graphs, suffix arrays, searching and modular arithmetic."""

__version__ = "0.1.0"