"""
Cut list aggregation.

Boards are keyed by their identifier string, so asking for 2x4x8 three
times gives one line with a quantity of 3.
"""

import logging
from typing import Iterator, Optional

from ..config import CutSettings
from .lumber import Lumber

logger = logging.getLogger(__name__)

REPORT_HEADER = "Cut list:"


class CutList:
    """Deduplicated boards with quantities. Not thread-safe; see store.CutListStore."""

    def __init__(self, settings: Optional[CutSettings] = None):
        self._settings = settings or CutSettings()
        self._boards: dict[Lumber, int] = {}

    @classmethod
    def with_settings(cls, settings: CutSettings) -> "CutList":
        return cls(settings)

    @property
    def settings(self) -> CutSettings:
        return self._settings

    def add(self, lumber: Lumber) -> int:
        """Add one board. Returns the new quantity for that board."""
        count = self._boards.get(lumber, 0) + 1
        self._boards[lumber] = count
        logger.debug("Cut list: %s now x%d", lumber.get_identifier_string(), count)
        return count

    def get_num_boards(self) -> int:
        """Total boards across all sizes."""
        return sum(self._boards.values())

    def get_count(self, lumber: Lumber) -> int:
        return self._boards.get(lumber, 0)

    def entries(self) -> Iterator[tuple[Lumber, int]]:
        """(board, quantity) pairs sorted by identifier so reports are stable."""
        for lumber in sorted(self._boards, key=lambda b: b.get_identifier_string()):
            yield lumber, self._boards[lumber]

    def __len__(self) -> int:
        return len(self._boards)

    def __contains__(self, lumber) -> bool:
        return lumber in self._boards

    def format_report(self) -> str:
        lines = [REPORT_HEADER]
        for lumber, count in self.entries():
            lines.append(f"{lumber.get_identifier_string()} ({count})")
        lines.append(f"Total boards: {self.get_num_boards()}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format_report()

    def to_dict(self) -> dict:
        return {
            "blade_width_inches": self._settings.blade_width_inches,
            "items": [
                {**lumber.to_dict(), "quantity": count}
                for lumber, count in self.entries()
            ],
            "distinct_boards": len(self),
            "total_boards": self.get_num_boards(),
        }
