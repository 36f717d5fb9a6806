"""
Interface segregation principle (ISP).

Clients should not be forced to depend on methods they do not use.
"""

from . import violation
from .component import BasicPrinter, OfficeMachine, print_all
from .models import Document, ScannedPage
from .ports import FaxPort, PrinterPort, ScannerPort

__all__ = [
    "BasicPrinter",
    "Document",
    "FaxPort",
    "OfficeMachine",
    "PrinterPort",
    "ScannedPage",
    "ScannerPort",
    "print_all",
    "violation",
]
