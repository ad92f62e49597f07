"""Programming drills: array and number puzzles, text triangles, bit tricks, file statistics and small containers."""

__version__ = "0.1.0"