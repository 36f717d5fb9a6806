"""
Liskov substitution component ports.

Eating and flying are separate capabilities, so only birds that can fly
promise to.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Animal(Protocol):
    def eat(self) -> str: ...


@runtime_checkable
class FlyingAnimal(Protocol):
    def fly(self) -> str: ...
