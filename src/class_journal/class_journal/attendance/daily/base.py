from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional


class DailyStatusRule(ABC):
    """Rule interface: derive one day's status from its hourly statuses."""

    @abstractmethod
    def derive(self, statuses: Iterable[str]) -> Optional[str]:
        """Return the daily status, or None when the day gets no entry."""

        raise NotImplementedError
