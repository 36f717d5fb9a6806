"""
Liskov substitution component unit tests.
"""

from __future__ import annotations

import pytest

from solid_examples.components.lsp import (
    Animal,
    Bird,
    FlightNotSupportedError,
    FlyingAnimal,
    Penguin,
    Sparrow,
    feed_all,
    release_flock,
    split_flyers,
    violation,
)


class TestViolation:
    """Penguin as a Bird subclass."""

    def test_penguin_is_a_bird(self) -> None:
        """The hierarchy claims a penguin is a bird."""
        assert isinstance(violation.Penguin(), violation.Bird)

    def test_penguin_breaks_fly(self) -> None:
        """Substituting a penguin for a bird raises."""
        with pytest.raises(FlightNotSupportedError, match="Penguin cannot fly"):
            violation.release_flock([violation.Bird(), violation.Penguin()])

    def test_error_is_not_implemented(self) -> None:
        """FlightNotSupportedError is a NotImplementedError."""
        with pytest.raises(NotImplementedError):
            violation.Penguin().fly()

    def test_penguin_can_still_eat(self) -> None:
        """Eating works for every bird."""
        assert violation.Penguin().eat() == "Penguin is eating"


class TestRefactored:
    """Capabilities instead of a broken hierarchy."""

    def test_bird_messages(self) -> None:
        """Bird eats and flies."""
        bird = Bird()
        assert bird.eat() == "Bird is eating"
        assert bird.fly() == "Bird is Flying"

    def test_capabilities(self) -> None:
        """Bird is both capabilities, Penguin only Animal."""
        assert isinstance(Bird(), Animal)
        assert isinstance(Bird(), FlyingAnimal)
        assert isinstance(Penguin(), Animal)
        assert not isinstance(Penguin(), FlyingAnimal)

    def test_sparrow_substitutes_for_bird(self) -> None:
        """A Bird subclass works wherever Bird does."""
        assert release_flock([Bird(), Sparrow()]) == ["Bird is Flying", "Sparrow is Flying"]

    def test_penguin_swims(self) -> None:
        """Penguin has its own ground-bound behaviour."""
        assert Penguin().swim() == "Penguin is Swimming"

    def test_feed_all_accepts_penguins(self) -> None:
        """Every animal can be fed."""
        assert feed_all([Bird(), Penguin()]) == ["Bird is eating", "Penguin is eating"]

    def test_split_flyers(self) -> None:
        """Penguins never end up in the flock."""
        penguin = Penguin()
        flyers, grounded = split_flyers([Bird(), penguin, Sparrow()])
        assert len(flyers) == 2
        assert grounded == [penguin]
        release_flock(flyers)
