"""
Binary search tree node holding one district.
"""

from dataclasses import dataclass
from typing import Optional

from .district import District


@dataclass(eq=False)
class TreeNode:
    """BST node keyed by the id of the district it holds."""
    district: District
    left: Optional['TreeNode'] = None
    right: Optional['TreeNode'] = None

    @property
    def key(self) -> int:
        return self.district.district_id
