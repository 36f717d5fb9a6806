"""
Single responsibility component models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReportData:
    title: str
    rows: tuple[tuple[str, int], ...]

    @property
    def total(self) -> int:
        return sum(value for _, value in self.rows)
