"""
Spatial hash grid for neighbor lookup in 2D space.
"""

import math
from collections import defaultdict
from typing import Any, Dict, List, Tuple

from .geometry import distance


class SpatialGrid:
    """
    Spatial hash grid for neighbor lookup.

    Divides the pen into cells and answers radius queries by checking only
    the cell holding the query point and its 8 neighbors, so the radius must
    not exceed the cell size. Positions outside the pen are clamped to the
    edge cells.

    Unlike a grid rebuilt once per frame, agents are re-filed as they move
    (see relocate) so queries always see current positions.
    """

    def __init__(self, width: int, height: int, cell_size: int):
        """
        Initialize the spatial grid.

        Args:
            width: Width of the simulation area
            height: Height of the simulation area
            cell_size: Size of each grid cell
        """
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.grid = defaultdict(list)
        self.cols = int(width / cell_size) + 1
        self.rows = int(height / cell_size) + 1
        self._cells: Dict[int, Tuple[int, int]] = {}

    def clear(self) -> None:
        """Clear all agents from the grid."""
        self.grid.clear()
        self._cells.clear()

    def _hash(self, x: float, y: float) -> Tuple[int, int]:
        """
        Convert world coordinates to grid cell coordinates.

        Args:
            x: X position in world coordinates
            y: Y position in world coordinates

        Returns:
            Tuple of (column, row) cell indices
        """
        col = math.floor(x / self.cell_size)
        row = math.floor(y / self.cell_size)
        return (max(0, min(col, self.cols - 1)), max(0, min(row, self.rows - 1)))

    def insert(self, agent: Any) -> None:
        """
        Insert an agent into the grid based on its position.

        Args:
            agent: Agent object with a 'position' attribute (pygame.Vector2)
        """
        cell = self._hash(agent.position.x, agent.position.y)
        self.grid[cell].append(agent)
        self._cells[id(agent)] = cell

    def relocate(self, agent: Any) -> None:
        """
        Move an already inserted agent to the cell matching its current position.

        Args:
            agent: Agent previously passed to insert
        """
        old = self._cells[id(agent)]
        new = self._hash(agent.position.x, agent.position.y)
        if old == new:
            return
        self.grid[old].remove(agent)
        self.grid[new].append(agent)
        self._cells[id(agent)] = new

    def get_neighbors(self, position: Any, radius: float, inclusive: bool = False) -> List[Any]:
        """
        Get all agents within a given radius of a position.

        Args:
            position: Center position (pygame.Vector2)
            radius: Search radius, at most the cell size
            inclusive: Also return agents exactly at the radius

        Returns:
            List of agents within the specified radius
        """
        neighbors = []
        cell = self._hash(position.x, position.y)

        for c in self._get_adjacent_cells(cell):
            for agent in self.grid.get(c, []):
                dist = distance(position, agent.position)
                if dist < radius or (inclusive and dist == radius):
                    neighbors.append(agent)

        return neighbors

    def _get_adjacent_cells(self, cell: Tuple[int, int]) -> List[Tuple[int, int]]:
        """
        Get a cell and its 8 neighboring cells.

        Args:
            cell: The center cell as (column, row)

        Returns:
            List of cell coordinates to check
        """
        col, row = cell
        cells = []
        for dc in [-1, 0, 1]:
            for dr in [-1, 0, 1]:
                nc, nr = col + dc, row + dr
                if 0 <= nc < self.cols and 0 <= nr < self.rows:
                    cells.append((nc, nr))
        return cells
