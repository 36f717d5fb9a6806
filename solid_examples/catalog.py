"""
Catalog of the SOLID principles and the component illustrating each.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Principle:
    acronym: str
    name: str
    summary: str
    module: str


PRINCIPLES: tuple[Principle, ...] = (
    Principle(
        acronym="SRP",
        name="Single Responsibility Principle",
        summary="A class should have one, and only one, reason to change.",
        module="solid_examples.components.srp",
    ),
    Principle(
        acronym="OCP",
        name="Open/Closed Principle",
        summary="Open for extension, closed for modification.",
        module="solid_examples.components.ocp",
    ),
    Principle(
        acronym="LSP",
        name="Liskov Substitution Principle",
        summary="Subtypes must be usable anywhere their base type is expected.",
        module="solid_examples.components.lsp",
    ),
    Principle(
        acronym="ISP",
        name="Interface Segregation Principle",
        summary="Clients should not depend on methods they do not use.",
        module="solid_examples.components.isp",
    ),
    Principle(
        acronym="DIP",
        name="Dependency Inversion Principle",
        summary="Depend on abstractions, not on concrete implementations.",
        module="solid_examples.components.dip",
    ),
)


def get_principle(acronym: str) -> Principle:
    """Look up a principle by acronym, ignoring case. Raises KeyError."""
    for principle in PRINCIPLES:
        if principle.acronym == acronym.upper():
            return principle
    raise KeyError(acronym)
