from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Final

from rocketreplay.telemetry.types import Status, Vec3

MIN_FIELDS: Final[int] = 9

# Field 7 is reserved by the telemetry source and never read.
_REQUIRED_FIELDS: Final[tuple[int, ...]] = (0, 1, 2, 3, 4, 5, 6, 8)


class TelemetryFormatError(ValueError):
    """A telemetry row could not be turned into a Status."""

    def __init__(self, row: int, reason: str) -> None:
        super().__init__(f"row {row}: {reason}")
        self.row = row
        self.reason = reason


# ---------------------------------------- #


def status_from_row(fields: Sequence[float], row: int = 1) -> Status:
    """
    Build one Status from a numeric telemetry row.

    Rows are laid out as (x, z, y, vx, vz, vy, fuel, reserved, status_code),
    i.e. the vertical axis comes third; the scene is y-up so the vector
    components are permuted on the way in.
    """
    if len(fields) < MIN_FIELDS:
        raise TelemetryFormatError(
            row, f"expected at least {MIN_FIELDS} fields, got {len(fields)}"
        )

    for i in _REQUIRED_FIELDS:
        if math.isnan(fields[i]):
            raise TelemetryFormatError(row, f"field {i} is not a number")
    if not math.isfinite(fields[8]):
        raise TelemetryFormatError(row, "status code must be finite")

    return Status(
        position=Vec3(float(fields[0]), float(fields[2]), float(fields[1])),
        velocity=Vec3(float(fields[3]), float(fields[5]), float(fields[4])),
        fuel=float(fields[6]),
        status_code=int(fields[8]),
    )


# ---------------------------------------- #


def build_sample_table(
    rows: Sequence[Sequence[float]],
    row_numbers: Sequence[int] | None = None,
) -> list[Status]:
    """
    Convert telemetry rows into the ordered sample table.

    The first malformed row aborts the whole build with TelemetryFormatError,
    so a returned table is always dense. ``row_numbers`` lets callers report
    errors against their own numbering (e.g. source line numbers); rows are
    numbered from 1 otherwise.
    """
    samples: list[Status] = []
    for i, fields in enumerate(rows):
        row = row_numbers[i] if row_numbers is not None else i + 1
        samples.append(status_from_row(fields, row))
    return samples
