from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from ...core.enums import Period


class PeriodGrouping(ABC):
    """Strategy Pattern: map an entry date to the key of the bucket it belongs to.

    Keys are ISO strings, so lexicographic order is chronological order.
    """

    period: Period

    @abstractmethod
    def key_for(self, day: date) -> str:
        raise NotImplementedError
