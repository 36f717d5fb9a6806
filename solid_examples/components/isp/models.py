"""
Interface segregation component models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Document:
    title: str
    body: str = ""


@dataclass(frozen=True)
class ScannedPage:
    title: str
    text: str
