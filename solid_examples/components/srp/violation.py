"""
Single responsibility violation.

ReportManager changes whenever the data source, the layout or the output
target changes.
"""

from __future__ import annotations

from .models import ReportData


class ReportManager:
    def __init__(self) -> None:
        self.output: list[str] = []

    def fetch(self) -> ReportData:
        return ReportData(title="Sales", rows=(("north", 120), ("south", 80)))

    def format(self, data: ReportData) -> str:
        lines = [data.title]
        lines += [f"{name}: {value}" for name, value in data.rows]
        lines.append(f"total: {data.total}")
        return "\n".join(lines)

    def save(self, text: str) -> None:
        self.output.append(text)

    def generate(self) -> str:
        text = self.format(self.fetch())
        self.save(text)
        return text
