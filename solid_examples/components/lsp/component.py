"""
Liskov substitution component.

Every subtype can stand in for its declared capability: anything typed as
FlyingAnimal really flies, and Penguin never claims to.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .ports import Animal, FlyingAnimal

logger = logging.getLogger(__name__)


class Bird:
    """An animal that flies."""

    def eat(self) -> str:
        return "Bird is eating"

    def fly(self) -> str:
        return "Bird is Flying"


class Sparrow(Bird):
    def eat(self) -> str:
        return "Sparrow is eating"

    def fly(self) -> str:
        return "Sparrow is Flying"


class Penguin:
    """An animal only; no fly() to break."""

    def eat(self) -> str:
        return "Penguin is eating"

    def swim(self) -> str:
        return "Penguin is Swimming"


def feed_all(animals: Iterable[Animal]) -> list[str]:
    return [animal.eat() for animal in animals]


def release_flock(flyers: Iterable[FlyingAnimal]) -> list[str]:
    return [flyer.fly() for flyer in flyers]


def split_flyers(animals: Iterable[Animal]) -> tuple[list[FlyingAnimal], list[Animal]]:
    """Partition animals into (flyers, ground-bound) by capability."""
    flyers: list[FlyingAnimal] = []
    grounded: list[Animal] = []
    for animal in animals:
        if isinstance(animal, FlyingAnimal):
            flyers.append(animal)
        else:
            grounded.append(animal)
    logger.debug(f"split_flyers: {len(flyers)} flyers, {len(grounded)} grounded")
    return flyers, grounded
