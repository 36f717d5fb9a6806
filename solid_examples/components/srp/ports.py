"""
Single responsibility component ports.
"""

from __future__ import annotations

from typing import Protocol

from .models import ReportData


class ReportSourcePort(Protocol):
    def fetch(self) -> ReportData: ...


class ReportFormatterPort(Protocol):
    def format(self, data: ReportData) -> str: ...


class ReportWriterPort(Protocol):
    def write(self, text: str) -> None: ...
