"""Reader for per-frame detection files in the MOTChallenge text format."""

from __future__ import annotations

import os
import re
from collections.abc import Iterator
from dataclasses import dataclass

_UINT_RE = re.compile(r"\+?\d+")

Point = tuple[float, float]


@dataclass(frozen=True)
class ParsedDetection:
    """A detection box given by its top-left and bottom-right corners."""

    points: tuple[Point, Point]
    scores: tuple[float, float]


def _parse_frame(text: str) -> int:
    text = text.strip()
    return int(text) if _UINT_RE.fullmatch(text) else 0


def _parse_float(text: str) -> float | None:
    text = text.strip()
    if not text or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _split_lines(content: str) -> list[str]:
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


class DetectionFileParser:
    """Detections grouped by frame, read from a CSV file.

    Each line has the form
    ``frame,id,bb_left,bb_top,bb_width,bb_height,conf,x,y,z``. Lines with
    fewer than seven fields, or whose frame lies outside ``1..num_frames``,
    are ignored.
    """

    def __init__(self, file_path: str | os.PathLike[str], num_frames: int) -> None:
        if num_frames < 0:
            raise ValueError("num_frames must not be negative")
        self._frames: list[list[ParsedDetection]] = [[] for _ in range(num_frames)]

        with open(file_path, encoding="utf-8", newline="") as handle:
            content = handle.read()

        for line in _split_lines(content):
            parts = line.split(",")
            if len(parts) < 7:
                continue

            frame = _parse_frame(parts[0])
            if frame == 0 or frame > num_frames:
                continue

            left, top, width, height = (
                value if (value := _parse_float(p)) is not None else 0.0
                for p in parts[2:6]
            )
            conf = _parse_float(parts[6])
            if conf is None:
                conf = 1.0

            detection = ParsedDetection(
                points=((left, top), (left + width, top + height)),
                scores=(conf, conf),
            )
            self._frames[frame - 1].append(detection)

    def get_detections(self, frame: int) -> tuple[ParsedDetection, ...] | None:
        """Detections of a 0-indexed frame, or None when it is out of range."""
        if not 0 <= frame < len(self._frames):
            return None
        return tuple(self._frames[frame])

    def num_frames(self) -> int:
        """Number of frames in the sequence."""
        return len(self._frames)

    def __iter__(self) -> Iterator[list[ParsedDetection]]:
        for detections in self._frames:
            yield list(detections)

    def __len__(self) -> int:
        return len(self._frames)