"""
Open/closed principle (OCP).

Software entities should be open for extension, closed for modification.
"""

from .component import (
    INVOICE_TYPES,
    Circle,
    GermanyInvoice,
    IndiaInvoice,
    Rectangle,
    Triangle,
    get_invoice,
    run,
    total_area,
)
from .models import (
    GetInvoiceInput,
    InvoiceDocument,
    InvoiceError,
    InvoiceOutput,
    UnknownCountryError,
    to_money,
)
from .ports import Invoice, Shape
from .violation import AreaCalculator, InvoicePrinter

__all__ = [
    # Functions
    "get_invoice",
    "run",
    "total_area",
    "to_money",
    # Variants
    "INVOICE_TYPES",
    "IndiaInvoice",
    "GermanyInvoice",
    "Circle",
    "Rectangle",
    "Triangle",
    # Models
    "GetInvoiceInput",
    "InvoiceDocument",
    "InvoiceError",
    "InvoiceOutput",
    "UnknownCountryError",
    # Ports
    "Invoice",
    "Shape",
    # Violations
    "AreaCalculator",
    "InvoicePrinter",
]
