"""
Liskov substitution violation.

Penguin is-a Bird, but a Penguin passed where a Bird is expected blows up.
"""

from .models import FlightNotSupportedError


class Bird:
    def eat(self) -> str:
        return f"{type(self).__name__} is eating"

    def fly(self) -> str:
        return f"{type(self).__name__} is Flying"


class Penguin(Bird):
    def fly(self) -> str:
        raise FlightNotSupportedError(type(self).__name__)


def release_flock(birds: list[Bird]) -> list[str]:
    return [bird.fly() for bird in birds]
