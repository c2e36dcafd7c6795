"""
Duel engine for the Hunger Games simulation.

Selects pairs of duelers from the active districts, resolves duels and removes
districts from the game once one of their populations runs out.
"""

import logging
from typing import List, Optional

from models.district import District
from models.duel import DuelPair, DuelRecord
from models.person import DUEL_ROLL_SIDES, Person
from models.tree_node import TreeNode
from registry.district_registry import DistrictRegistry
from utils.random_utils import UniformRandom

logger = logging.getLogger(__name__)


class DuelEngine:
    """Picks duelers by walking the registry tree and applies duel outcomes to it."""
    
    def __init__(self, registry: DistrictRegistry, rng: UniformRandom,
                 roll_sides: int = DUEL_ROLL_SIDES):
        self.registry = registry
        self.rng = rng
        self.roll_sides = roll_sides
        self.rounds_fought = 0
    
    def select_duelers(self) -> Optional[DuelPair]:
        """
        Select an odd-month and an even-month dueler from different districts.

        Tessera holders are taken first (first one found in pre-order). A side with no
        tessera holder falls back to a random member of the first district in pre-order
        with people on that side, skipping the other dueler's district.
        Both duelers are removed from their districts before the pair is returned.
        Returns None if either side cannot be filled.
        """
        person1 = self._find_person(odd=True, with_tessera=True, exclude_district_id=None)
        person2 = self._find_person(odd=False, with_tessera=True,
                                    exclude_district_id=self._district_of(person1))
        
        if person1 is None:
            person1 = self._find_person(odd=True, with_tessera=False,
                                        exclude_district_id=self._district_of(person2))
        if person2 is None:
            person2 = self._find_person(odd=False, with_tessera=False,
                                        exclude_district_id=self._district_of(person1))
        
        if person1 is None or person2 is None:
            logger.info("No valid pair of duelers could be selected")
            return None
        
        self._remove_from_district(person1)
        self._remove_from_district(person2)
        logger.debug(f"Selected duelers {person1.full_name} and {person2.full_name}")
        return DuelPair(person1, person2)
    
    @staticmethod
    def _district_of(person: Optional[Person]) -> Optional[int]:
        return person.district_id if person is not None else None
    
    def _find_person(self, odd: bool, with_tessera: bool,
                     exclude_district_id: Optional[int]) -> Optional[Person]:
        return self._find_person_below(self.registry.root, odd, with_tessera, exclude_district_id)
    
    def _find_person_below(self, node: Optional[TreeNode], odd: bool, with_tessera: bool,
                           exclude_district_id: Optional[int]) -> Optional[Person]:
        if node is None:
            return None
        
        district = node.district
        if district.district_id != exclude_district_id:
            population = district.population(odd)
            if with_tessera:
                for person in population:
                    if person.tessera:
                        return person
            elif population:
                return population[self.rng.uniform(len(population))]
        
        found = self._find_person_below(node.left, odd, with_tessera, exclude_district_id)
        if found is not None:
            return found
        return self._find_person_below(node.right, odd, with_tessera, exclude_district_id)
    
    def _remove_from_district(self, person: Person) -> None:
        district = self.registry.find(person.district_id)
        if district is None or not district.remove_person(person):
            logger.warning(f"{person.full_name} was not found in district {person.district_id}")
    
    def resolve_duel(self, pair: DuelPair) -> Optional[DuelRecord]:
        """
        Let the pair fight.

        An incomplete pair is a bye: the lone contestant goes back home and None is
        returned. Otherwise the winner goes back to their district, the loser is out
        of the game, and the loser's then the winner's district are eliminated if
        either of their populations is empty.
        """
        if pair.person1 is None and pair.person2 is None:
            raise ValueError("Cannot resolve a duel without any contestant")
        
        if not pair.is_complete():
            lone = pair.person1 if pair.person1 is not None else pair.person2
            self._return_home(lone)
            logger.info(f"{lone.full_name} has no opponent and returns to district {lone.district_id}")
            return None
        
        winner = pair.person1.duel(pair.person2, self.rng, self.roll_sides)
        loser = pair.person2 if winner is pair.person1 else pair.person1
        self.rounds_fought += 1
        
        winner_district = self._return_home(winner)
        logger.info(f"Round {self.rounds_fought}: {winner.full_name} (district {winner.district_id}) "
                    f"defeated {loser.full_name} (district {loser.district_id})")
        
        eliminated: List[int] = []
        loser_district = self.registry.find(loser.district_id)
        if self._eliminate_if_one_sided(loser_district):
            eliminated.append(loser_district.district_id)
        if self._eliminate_if_one_sided(winner_district):
            eliminated.append(winner_district.district_id)
        
        return DuelRecord(
            round_number=self.rounds_fought,
            winner=winner,
            loser=loser,
            eliminated_districts=eliminated
        )
    
    def _return_home(self, person: Person) -> Optional[District]:
        district = self.registry.find(person.district_id)
        if district is None:
            logger.warning(f"District {person.district_id} is no longer in the game; "
                           f"{person.full_name} cannot return")
            return None
        district.add_person(person)
        return district
    
    def _eliminate_if_one_sided(self, district: Optional[District]) -> bool:
        if district is None or not district.is_one_sided():
            return False
        return self.registry.eliminate(district.district_id)
