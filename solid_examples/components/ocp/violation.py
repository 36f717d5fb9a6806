"""
Open/closed violations.

Both classes must be edited every time a new country or shape appears.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal

from .models import InvoiceDocument, UnknownCountryError, to_money


class InvoicePrinter:
    def print_invoice(self, country: str, amount: Decimal) -> InvoiceDocument:
        # New country == new branch here
        country = country.lower()
        if country == "india":
            currency, rate = "INR", Decimal("0.18")
        elif country == "germany":
            currency, rate = "EUR", Decimal("0.19")
        else:
            raise UnknownCountryError(country)

        net = to_money(amount)
        tax = to_money(net * rate)
        return InvoiceDocument(country, currency, net, tax, net + tax)


@dataclass(frozen=True)
class Circle:
    radius: float


@dataclass(frozen=True)
class Rectangle:
    width: float
    height: float


class AreaCalculator:
    def calculate_area(self, shape: object) -> float:
        if isinstance(shape, Circle):
            return math.pi * shape.radius**2
        elif isinstance(shape, Rectangle):
            return shape.width * shape.height
        else:
            raise ValueError(f"Unknown shape: {type(shape).__name__}")

    def total_area(self, shapes: list[object]) -> float:
        return sum(self.calculate_area(shape) for shape in shapes)
