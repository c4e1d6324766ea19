import math
import re
from pathlib import Path

from rocketreplay.telemetry.samples import build_sample_table
from rocketreplay.telemetry.types import Status

_LINE_BREAK = re.compile(r"\r\n|\n")


def _numbered_lines(text: str) -> list[tuple[int, str]]:
    return [
        (n, line)
        for n, line in enumerate(_LINE_BREAK.split(text), start=1)
        if line.strip()
    ]


# ---------------------------------------- #


def split_lines(text: str) -> list[str]:
    """Split raw telemetry text into its non-empty lines."""
    return [line for _, line in _numbered_lines(text)]


# ---------------------------------------- #


def _to_float(part: str) -> float:
    try:
        return float(part)
    except ValueError:
        return math.nan


# ---------------------------------------- #


def parse_csv_line(line: str) -> list[float]:
    """
    Split one CSV line into numbers.

    Fields that do not parse become NaN; whether that matters depends on
    the field, which is for the sample builder to decide.
    """
    return [_to_float(part) for part in line.split(",")]


# ---------------------------------------- #


def parse_rows(text: str) -> list[list[float]]:
    return [parse_csv_line(line) for _, line in _numbered_lines(text)]


# ---------------------------------------- #


def read_samples(text: str) -> list[Status]:
    """
    Parse CSV telemetry text into a sample table.

    Errors are reported against line numbers of the original text, blank
    lines included.
    """
    numbered = _numbered_lines(text)
    rows = [parse_csv_line(line) for _, line in numbered]
    return build_sample_table(rows, row_numbers=[n for n, _ in numbered])


# ---------------------------------------- #


def load_samples(path: Path) -> list[Status]:
    return read_samples(Path(path).read_text(encoding="utf-8"))
