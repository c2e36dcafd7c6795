"""
Person data model for the Hunger Games simulation.
"""

from dataclasses import dataclass

TESSERA_MIN_AGE = 12
TESSERA_MAX_AGE = 18
DUEL_ROLL_SIDES = 10


@dataclass(eq=False)
class Person:
    """A tribute candidate living in one district.

    Persons compare by identity: two people with the same name and age are
    still different people, and populations remove them by identity.
    """
    first_name: str
    last_name: str
    birth_month: int
    age: int
    district_id: int
    effectiveness: int
    tessera: bool = False

    @classmethod
    def create(cls, first_name: str, last_name: str, birth_month: int, age: int,
               district_id: int, effectiveness: int,
               tessera_min_age: int = TESSERA_MIN_AGE,
               tessera_max_age: int = TESSERA_MAX_AGE) -> 'Person':
        """Create a person, setting tessera from the age at creation."""
        return cls(
            first_name=first_name,
            last_name=last_name,
            birth_month=birth_month,
            age=age,
            district_id=district_id,
            effectiveness=effectiveness,
            tessera=tessera_min_age <= age < tessera_max_age
        )

    @property
    def is_odd(self) -> bool:
        return self.birth_month % 2 == 1

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def duel(self, other: 'Person', rng, roll_sides: int = DUEL_ROLL_SIDES) -> 'Person':
        """
        Fight another person and return the winner.

        Both sides roll a die and add their effectiveness; the higher total wins.
        A tie goes to the only tessera holder if there is one, otherwise to a coin flip.
        """
        own_score = rng.uniform(roll_sides) + self.effectiveness
        other_score = rng.uniform(roll_sides) + other.effectiveness

        if own_score > other_score:
            return self
        if other_score > own_score:
            return other

        if self.tessera != other.tessera:
            return self if self.tessera else other
        return self if rng.uniform(2) == 0 else other

    def __str__(self) -> str:
        return f"{self.full_name} (district {self.district_id}, month {self.birth_month}, age {self.age})"
