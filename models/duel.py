"""
Duel data models for the Hunger Games simulation.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .person import Person


@dataclass
class DuelPair:
    """Two contestants taken out of their districts for one duel.

    person1 comes from an odd-month population, person2 from an even-month one.
    Either side may be absent, in which case the duel is a bye.
    """
    person1: Optional[Person] = None
    person2: Optional[Person] = None

    def is_complete(self) -> bool:
        return self.person1 is not None and self.person2 is not None


@dataclass
class DuelRecord:
    """Outcome of one resolved duel."""
    round_number: int
    winner: Person
    loser: Person
    eliminated_districts: List[int] = field(default_factory=list)
