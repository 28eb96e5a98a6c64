"""Reader for sequence metadata files (``seqinfo.ini``)."""

from __future__ import annotations

import os
import re

_INT_RE = re.compile(r"[+-]?\d+")
_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1


class MetricsError(Exception):
    """Raised when metrics input cannot be interpreted."""


class InformationFile:
    """Key/value lookup over the lines of a sequence metadata file.

    A typical file looks like::

        [Sequence]
        name=MOT17-02-FRCNN
        frameRate=30
        seqLength=600
    """

    def __init__(self, file_path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(file_path)
        with open(self.path, encoding="utf-8") as handle:
            self.lines = handle.read().splitlines()

    def search(self, variable_name: str) -> str:
        """Return the trimmed value of the first line starting with the name."""
        for line in self.lines:
            if line.startswith(variable_name) and "=" in line:
                return line.split("=", 1)[1].strip()
        raise MetricsError(f"couldn't find '{variable_name}' in {self.path}")

    def search_int(self, variable_name: str) -> int:
        """Return the value for the name parsed as a 32-bit integer."""
        value = self.search(variable_name)
        if not _INT_RE.fullmatch(value):
            raise MetricsError(
                f"value for '{variable_name}' is not an integer: {value!r}"
            )
        number = int(value)
        if not _I32_MIN <= number <= _I32_MAX:
            raise MetricsError(
                f"value for '{variable_name}' is not an integer: {value!r} is out of range"
            )
        return number

    def search_string(self, variable_name: str) -> str:
        """Return the value for the name as text."""
        return self.search(variable_name)