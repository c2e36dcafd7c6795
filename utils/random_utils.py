"""
Seeded random number source shared by dueler selection and duels.
"""

import numpy as np


class UniformRandom:
    """Uniform integer generator with an explicit seed.

    One instance is handed to the registry owner and every component that draws
    from it, so a run is reproducible from its seed alone.
    """
    
    def __init__(self, seed: int = 2023):
        self.seed = seed
        self._rng = np.random.default_rng(seed)
    
    def uniform(self, n: int) -> int:
        """Return an integer in [0, n)."""
        if n <= 0:
            raise ValueError(f"uniform() needs a positive bound, got {n}")
        return int(self._rng.integers(0, n))
    
    def reseed(self, seed: int) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)
