"""Utility functions for the rules core."""

from ti4rules.utils.rng import generate_seed, roll_faces

__all__ = [
    "generate_seed",
    "roll_faces",
]
