from __future__ import annotations

from typing import Final

STATUS_FLYING: Final[int] = 0
STATUS_LANDED: Final[int] = 1
STATUS_LANDED_OUT_OF_PLATFORM: Final[int] = 2
STATUS_CRASHED_ON_PLATFORM: Final[int] = 3
STATUS_CRASHED_OUT_OF_PLATFORM: Final[int] = 4
STATUS_CRASHED_ON_PLATFORM_HARD: Final[int] = 5
STATUS_CRASHED_OUT_OF_PLATFORM_HARD: Final[int] = 6
STATUS_OUT_OF_RANGE: Final[int] = 7
STATUS_OUT_OF_FUEL: Final[int] = 8

# Codes 5 and 6 are reported with the same wording as 3 and 4.
STATUS_LABELS: Final[dict[int, str]] = {
    STATUS_FLYING: "Flying",
    STATUS_LANDED: "Landed",
    STATUS_LANDED_OUT_OF_PLATFORM: "Landed Out Of Platform",
    STATUS_CRASHED_ON_PLATFORM: "Crashed On Platform",
    STATUS_CRASHED_OUT_OF_PLATFORM: "Crashed Out Of Platform",
    STATUS_CRASHED_ON_PLATFORM_HARD: "Crashed On Platform",
    STATUS_CRASHED_OUT_OF_PLATFORM_HARD: "Crashed Out Of Platform",
    STATUS_OUT_OF_RANGE: "Out Of Range",
    STATUS_OUT_OF_FUEL: "Out Of Fuel",
}

LANDED_CODES: Final[frozenset[int]] = frozenset(
    {STATUS_LANDED, STATUS_LANDED_OUT_OF_PLATFORM}
)
CRASHED_CODES: Final[frozenset[int]] = frozenset(
    {
        STATUS_CRASHED_ON_PLATFORM,
        STATUS_CRASHED_OUT_OF_PLATFORM,
        STATUS_CRASHED_ON_PLATFORM_HARD,
        STATUS_CRASHED_OUT_OF_PLATFORM_HARD,
    }
)


# ---------------------------------------- #


def is_terminal(code: int) -> bool:
    return code != STATUS_FLYING


# ---------------------------------------- #


def format_status(code: int) -> str:
    return STATUS_LABELS.get(code, str(code))
