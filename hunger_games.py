#!/usr/bin/env python3
"""
Hunger Games Module

Runs the games among the districts of Panem. Districts wait in a staging list
until they enter the game, active districts live in a binary search tree keyed
by district id, and districts leave the tree once one of their populations is
exhausted by duels.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from config.config_manager import ConfigManager
from engine.duel_engine import DuelEngine
from loaders.panem_loader import PanemLoader
from models.district import District
from models.duel import DuelPair, DuelRecord
from models.tree_node import TreeNode
from registry.district_registry import DistrictRegistry
from utils.random_utils import UniformRandom

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Outcome of a full simulation run."""
    duels: List[DuelRecord] = field(default_factory=list)
    surviving_districts: List[int] = field(default_factory=list)
    winner: Optional[District] = None


class HungerGames:
    """Owns the registry, the random source and the duel engine of one run."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config if config is not None else ConfigManager.get_default_config()
        self.rng = UniformRandom(self.config.get('seed', 2023))
        self.registry = DistrictRegistry()
        self.engine = DuelEngine(self.registry, self.rng, self.config.get('duel_roll_sides', 10))

    @classmethod
    def from_config_file(cls, config_file: str = "config.yaml") -> 'HungerGames':
        return cls(ConfigManager.load_config(config_file))

    def setup_panem(self, filename: str) -> None:
        """Read districts and people from the input file into the staging list."""
        loader = PanemLoader(self.registry, self.config)
        loader.load(filename)

    def add_district_to_game(self, district: District) -> bool:
        return self.registry.add(district)

    def find_district(self, district_id: int) -> Optional[District]:
        return self.registry.find(district_id)

    def select_duelers(self) -> Optional[DuelPair]:
        return self.engine.select_duelers()

    def eliminate_district(self, district_id: int) -> bool:
        return self.registry.eliminate(district_id)

    def eliminate_dueler(self, pair: DuelPair) -> Optional[DuelRecord]:
        return self.engine.resolve_duel(pair)

    def get_districts(self) -> List[District]:
        """Districts that have not entered the game yet."""
        return self.registry.staged

    def get_root(self) -> Optional[TreeNode]:
        return self.registry.root

    def run(self, max_rounds: Optional[int] = None) -> GameResult:
        """
        Enter every staged district and fight duels until the game ends.

        The game ends when no districts remain, when no valid pair of duelers
        can be found, or after max_rounds duels.
        """
        if max_rounds is None:
            max_rounds = self.config.get('max_rounds')

        added = self.registry.add_all()
        logger.info(f"{added} districts entered the game")

        result = GameResult()
        while not self.registry.is_empty():
            if max_rounds is not None and len(result.duels) >= max_rounds:
                logger.info(f"Stopping after {max_rounds} rounds")
                break

            pair = self.select_duelers()
            if pair is None:
                break

            record = self.eliminate_dueler(pair)
            if record is not None:
                result.duels.append(record)

        result.surviving_districts = [d.district_id for d in self.registry.inorder()]
        if len(result.surviving_districts) == 1:
            result.winner = self.registry.root.district
            logger.info(f"District {result.winner.district_id} wins the games")
        else:
            logger.info(f"No single winner; {len(result.surviving_districts)} districts remain")
        return result
