"""
Liskov substitution principle (LSP).

Subtypes must be usable anywhere their base type is expected.
"""

from . import violation
from .component import Bird, Penguin, Sparrow, feed_all, release_flock, split_flyers
from .models import FlightNotSupportedError
from .ports import Animal, FlyingAnimal

__all__ = [
    "Animal",
    "Bird",
    "FlightNotSupportedError",
    "FlyingAnimal",
    "Penguin",
    "Sparrow",
    "feed_all",
    "release_flock",
    "split_flyers",
    "violation",
]
