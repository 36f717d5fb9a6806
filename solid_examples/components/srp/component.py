"""
Single responsibility component.

Fetching, formatting and writing a report are three classes with one
reason to change each; generate_report only wires them together.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .models import ReportData
from .ports import ReportFormatterPort, ReportSourcePort, ReportWriterPort


@dataclass
class ReportFetcher:
    """Fixed in-memory data source."""

    title: str = "Sales"
    rows: tuple[tuple[str, int], ...] = (("north", 120), ("south", 80))

    def fetch(self) -> ReportData:
        return ReportData(title=self.title, rows=self.rows)


class ReportFormatter:
    def format(self, data: ReportData) -> str:
        lines = [data.title]
        lines += [f"{name}: {value}" for name, value in data.rows]
        lines.append(f"total: {data.total}")
        return "\n".join(lines)


class CsvReportFormatter:
    def format(self, data: ReportData) -> str:
        lines = ["name,value"]
        lines += [f"{name},{value}" for name, value in data.rows]
        return "\n".join(lines)


@dataclass
class MemoryReportWriter:
    written: list[str] = field(default_factory=list)

    def write(self, text: str) -> None:
        self.written.append(text)


def generate_report(
    source: ReportSourcePort,
    formatter: ReportFormatterPort,
    writer: ReportWriterPort,
) -> str:
    text = formatter.format(source.fetch())
    writer.write(text)
    return text
