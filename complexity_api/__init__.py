"""HTTP service exposing the heuristic complexity engine."""

__version__ = "1.0.0"
