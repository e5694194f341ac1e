from __future__ import annotations

from typing import Iterable, Optional

from ...core.enums import AttendanceStatus, DailyStatus
from .base import DailyStatusRule


class MajorityVoteRule(DailyStatusRule):
    """Present vs absent hours decide the day; a tie is "mixed".

    Other statuses count for neither side. No present and no absent hour
    means no daily entry.
    """

    def derive(self, statuses: Iterable[str]) -> Optional[str]:
        present = absent = 0
        for status in statuses:
            if status == AttendanceStatus.PRESENT:
                present += 1
            elif status == AttendanceStatus.ABSENT:
                absent += 1

        if present > absent:
            return DailyStatus.PRESENT.value
        if absent > present:
            return DailyStatus.ABSENT.value
        if present > 0:
            return DailyStatus.MIXED.value
        return None
