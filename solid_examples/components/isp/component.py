"""
Interface segregation component.

Devices implement only the capabilities they actually have; callers ask
for the narrowest one they need.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import Document, ScannedPage
from .ports import PrinterPort


class BasicPrinter:
    def print_document(self, document: Document) -> str:
        return f"Printing {document.title}"


class OfficeMachine:
    """Printer, scanner and fax in one box."""

    def print_document(self, document: Document) -> str:
        return f"Printing {document.title}"

    def scan_document(self, document: Document) -> ScannedPage:
        return ScannedPage(title=document.title, text=document.body)

    def fax_document(self, document: Document, number: str) -> str:
        return f"Faxing {document.title} to {number}"


def print_all(printer: PrinterPort, documents: Iterable[Document]) -> list[str]:
    return [printer.print_document(document) for document in documents]
