"""Scoring tools for multi-object tracking in the MOTChallenge format."""

__version__ = "0.4.0"

__all__ = [
    "accumulator",
    "detection_parser",
    "information_file",
]