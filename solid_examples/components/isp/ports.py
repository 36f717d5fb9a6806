"""
Interface segregation component ports.

One small protocol per device capability.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import Document, ScannedPage


@runtime_checkable
class PrinterPort(Protocol):
    def print_document(self, document: Document) -> str: ...


@runtime_checkable
class ScannerPort(Protocol):
    def scan_document(self, document: Document) -> ScannedPage: ...


@runtime_checkable
class FaxPort(Protocol):
    def fax_document(self, document: Document, number: str) -> str: ...
