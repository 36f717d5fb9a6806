"""
Single responsibility principle (SRP).

A class should have one, and only one, reason to change.
"""

from . import violation
from .component import (
    CsvReportFormatter,
    MemoryReportWriter,
    ReportFetcher,
    ReportFormatter,
    generate_report,
)
from .models import ReportData
from .ports import ReportFormatterPort, ReportSourcePort, ReportWriterPort

__all__ = [
    "CsvReportFormatter",
    "MemoryReportWriter",
    "ReportData",
    "ReportFetcher",
    "ReportFormatter",
    "ReportFormatterPort",
    "ReportSourcePort",
    "ReportWriterPort",
    "generate_report",
    "violation",
]
