"""Classic algorithms on arrays, strings, intervals, graphs, grids and trees."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "dsu",
    "graphs",
    "grids",
    "intervals",
    "number_theory",
    "strings",
    "subarrays",
    "trees",
]