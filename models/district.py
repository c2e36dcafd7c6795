"""
District data model for the Hunger Games simulation.
"""

from dataclasses import dataclass, field
from typing import List

from .person import Person


@dataclass(eq=False)
class District:
    """A district with its odd-month and even-month populations."""
    district_id: int
    odd_population: List[Person] = field(default_factory=list)
    even_population: List[Person] = field(default_factory=list)

    def add_person(self, person: Person) -> None:
        """Add a person to the population matching their birth-month parity."""
        if person.is_odd:
            self.add_odd_person(person)
        else:
            self.add_even_person(person)

    def add_odd_person(self, person: Person) -> None:
        self.odd_population.append(person)

    def add_even_person(self, person: Person) -> None:
        self.even_population.append(person)

    def population_for(self, person: Person) -> List[Person]:
        return self.odd_population if person.is_odd else self.even_population

    def population(self, odd: bool) -> List[Person]:
        return self.odd_population if odd else self.even_population

    def remove_person(self, person: Person) -> bool:
        """Remove a person from their population by identity. Returns False if absent."""
        population = self.population_for(person)
        for index, candidate in enumerate(population):
            if candidate is person:
                del population[index]
                return True
        return False

    def is_one_sided(self) -> bool:
        """True once either population is empty; such a district leaves the game."""
        return not self.odd_population or not self.even_population

    def __str__(self) -> str:
        return (f"District {self.district_id} "
                f"(odd: {len(self.odd_population)}, even: {len(self.even_population)})")
