"""
Interface segregation violation.

One fat interface forces a plain printer to stub out scanning and faxing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .models import Document, ScannedPage


class MultiFunctionDevice(ABC):
    @abstractmethod
    def print_document(self, document: Document) -> str: ...

    @abstractmethod
    def scan_document(self, document: Document) -> ScannedPage: ...

    @abstractmethod
    def fax_document(self, document: Document, number: str) -> str: ...


class BasicPrinter(MultiFunctionDevice):
    def print_document(self, document: Document) -> str:
        return f"Printing {document.title}"

    def scan_document(self, document: Document) -> ScannedPage:
        raise NotImplementedError("BasicPrinter cannot scan")

    def fax_document(self, document: Document, number: str) -> str:
        raise NotImplementedError("BasicPrinter cannot fax")
