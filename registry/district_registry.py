"""
District registry: the staging list of waiting districts and the BST of active ones.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from models.district import District
from models.tree_node import TreeNode

logger = logging.getLogger(__name__)


class DistrictRegistry:
    """Tracks which districts are waiting to enter the game and which are still in it.

    A district is either staged or in the tree, never both. Districts leave the
    staging list when they are placed in the tree and leave the tree when they
    are eliminated. The tree is not rebalanced.
    """
    
    def __init__(self, districts: Optional[Iterable[District]] = None):
        self._staged: List[District] = list(districts) if districts else []
        self._root: Optional[TreeNode] = None
    
    @property
    def staged(self) -> List[District]:
        """Districts that have not entered the game yet, in staging order."""
        return self._staged
    
    @property
    def root(self) -> Optional[TreeNode]:
        return self._root
    
    def stage(self, district: District) -> None:
        """Append a district to the staging list."""
        self._staged.append(district)
    
    def add(self, district: District) -> bool:
        """
        Insert a district into the tree by id.
        Returns False and changes nothing if the id is already present.
        """
        if self._root is None:
            self._root = TreeNode(district)
            self._unstage(district)
            logger.info(f"District {district.district_id} entered the game as root")
            return True
        return self._add_below(self._root, district)
    
    def _add_below(self, node: TreeNode, district: District) -> bool:
        district_id = district.district_id
        if district_id < node.key:
            if node.left is None:
                node.left = TreeNode(district)
                self._unstage(district)
                logger.info(f"District {district_id} entered the game left of {node.key}")
                return True
            return self._add_below(node.left, district)
        if district_id > node.key:
            if node.right is None:
                node.right = TreeNode(district)
                self._unstage(district)
                logger.info(f"District {district_id} entered the game right of {node.key}")
                return True
            return self._add_below(node.right, district)
        
        logger.debug(f"District {district_id} is already in the game")
        return False
    
    def _unstage(self, district: District) -> None:
        for index, staged in enumerate(self._staged):
            if staged is district:
                del self._staged[index]
                return
    
    def add_all(self) -> int:
        """Move every staged district into the tree in staging order. Returns the number added."""
        added = 0
        for district in list(self._staged):
            if self.add(district):
                added += 1
        return added
    
    def find(self, district_id: int) -> Optional[District]:
        """Return the active district with this id, or None if it is not in the game."""
        current = self._root
        if current is None:
            logger.debug("The tree is empty")
        
        while current is not None:
            logger.debug(f"Checking district with ID: {current.key}")
            if current.key == district_id:
                return current.district
            current = current.left if district_id < current.key else current.right
        
        logger.debug(f"District {district_id} not found")
        return None
    
    def eliminate(self, district_id: int) -> bool:
        """
        Remove a district from the tree.

        A node with two children takes over its in-order successor's district and the
        successor's node is unlinked instead, so node objects do not follow their
        district through a deletion.
        Returns False if the district is not in the game.
        """
        parent: Optional[TreeNode] = None
        current = self._root
        is_left_child = False
        
        while current is not None and current.key != district_id:
            parent = current
            is_left_child = district_id < current.key
            current = current.left if is_left_child else current.right
        
        if current is None:
            logger.debug(f"Cannot eliminate district {district_id}: not in the game")
            return False
        
        if current.left is not None and current.right is not None:
            successor_parent = current
            successor = current.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            
            if successor_parent is current:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
            current.district = successor.district
        else:
            child = current.left if current.left is not None else current.right
            self._replace_child(parent, is_left_child, child)
        
        logger.info(f"District {district_id} eliminated from the game")
        return True
    
    def _replace_child(self, parent: Optional[TreeNode], is_left_child: bool,
                       child: Optional[TreeNode]) -> None:
        if parent is None:
            self._root = child
        elif is_left_child:
            parent.left = child
        else:
            parent.right = child
    
    def preorder(self) -> Iterator[District]:
        """Active districts in pre-order: node, left subtree, right subtree."""
        for node, _ in self.preorder_nodes():
            yield node.district
    
    def preorder_nodes(self) -> Iterator[Tuple[TreeNode, int]]:
        """Tree nodes in pre-order together with their depth (root is 0)."""
        stack: List[Tuple[TreeNode, int]] = [(self._root, 0)] if self._root is not None else []
        while stack:
            node, depth = stack.pop()
            yield node, depth
            if node.right is not None:
                stack.append((node.right, depth + 1))
            if node.left is not None:
                stack.append((node.left, depth + 1))
    
    def inorder(self) -> Iterator[District]:
        """Active districts in ascending id order."""
        stack: List[TreeNode] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current.district
            current = current.right
    
    def height(self) -> int:
        """Number of levels in the tree, 0 when empty."""
        return max((depth + 1 for _, depth in self.preorder_nodes()), default=0)
    
    def is_empty(self) -> bool:
        return self._root is None
    
    def __len__(self) -> int:
        return sum(1 for _ in self.preorder_nodes())
    
    def __contains__(self, district_id: int) -> bool:
        return self.find(district_id) is not None
