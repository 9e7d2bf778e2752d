"""Breadth-first search graph benchmark: R-MAT generation, CSR graphs, BFS, validation and statistics."""

__version__ = "0.1.0"