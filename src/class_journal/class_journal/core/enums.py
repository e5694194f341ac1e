from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role label of a journal account. Stored as a free-form label; these are the seeded accounts."""

    ADMIN = "admin"
    DEKAN = "dekan"
    DEZHUR = "dezhur"


class AttendanceStatus(str, Enum):
    """Well-known hourly statuses.

    The store accepts any non-empty status text; these are the values the
    derivation and the statistics look at.
    """

    PRESENT = "present"
    ABSENT = "absent"
    UNKNOWN = "unknown"


class DailyStatus(str, Enum):
    """Per-day status derived from the hourly facts (never stored)."""

    PRESENT = "present"
    ABSENT = "absent"
    MIXED = "mixed"
