"""
Liskov substitution component models.
"""


class FlightNotSupportedError(NotImplementedError):
    """Raised by a subtype that cannot honour its parent's fly() contract."""

    def __init__(self, species: str) -> None:
        self.species = species
        super().__init__(f"{species} cannot fly")
