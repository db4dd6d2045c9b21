"""Connected regions of walkable cells and the bombing heuristic."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Sequence

_STEPS = ((-1, 0), (1, 0), (0, 1), (0, -1))


@dataclass(frozen=True)
class Node:
    """One map cell: ``type`` is one of ``.``, ``*``, ``#`` or ``~``."""

    type: str
    y: int
    x: int

    def walkable(self) -> bool:
        """Open ground and bombs can be walked on."""
        return self.type in ".*"


Grid = Sequence[Sequence[Node]]


class UnionFind:
    """Disjoint sets over the cells of a ``rows`` by ``cols`` grid."""

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        self._parents = list(range(rows * cols))
        self._rank = [0] * (rows * cols)
        self._bombs: dict[int, int] = {}

    def index(self, y: int, x: int) -> int:
        return y * self.cols + x

    def find(self, x: int) -> int:
        root = x
        while self._parents[root] != root:
            root = self._parents[root]
        while self._parents[x] != root:
            self._parents[x], x = root, self._parents[x]
        return root

    def unite(self, a: int, b: int) -> None:
        a_root = self.find(a)
        b_root = self.find(b)
        if a_root == b_root:
            return
        if self._rank[a_root] > self._rank[b_root]:
            self._parents[b_root] = a_root
        elif self._rank[a_root] < self._rank[b_root]:
            self._parents[a_root] = b_root
        else:
            self._parents[b_root] = a_root
            self._rank[a_root] += 1

    def connect_all(self, grid: Grid) -> None:
        """Join every walkable cell with its walkable east and south neighbours."""
        for i, row in enumerate(grid):
            for j, cell in enumerate(row):
                if not cell.walkable():
                    continue
                here = self.index(i, j)
                if j + 1 < self.cols and grid[i][j + 1].walkable():
                    self.unite(here, self.index(i, j + 1))
                if i + 1 < self.rows and grid[i + 1][j].walkable():
                    self.unite(here, self.index(i + 1, j))

    def assign_bombs(self, grid: Grid) -> None:
        """Count the bombs lying in each connected region."""
        for row in grid:
            for cell in row:
                if cell.type == "*":
                    root = self.find(self.index(cell.y, cell.x))
                    self._bombs[root] = self._bombs.get(root, 0) + 1

    def should_bomb(
        self, grid: Grid, current: Node, boulder: Node, end: Node, bombs: int
    ) -> bool:
        """Whether blasting ``boulder`` leads, within ``bombs`` blasts, to the
        destination's region or to a region holding more bombs."""
        if bombs <= 0:
            return False

        end_root = self.find(self.index(end.y, end.x))
        queue = deque([(boulder, bombs)])
        visited = {self.index(boulder.y, boulder.x)}

        while queue:
            node, remaining = queue.popleft()
            for dy, dx in _STEPS:
                ny, nx = node.y + dy, node.x + dx
                if not (0 <= ny < self.rows and 0 <= nx < self.cols):
                    continue
                neighbor = grid[ny][nx]
                key = self.index(ny, nx)
                if key in visited:
                    continue
                visited.add(key)

                if neighbor.walkable():
                    root = self.find(key)
                    if root == end_root or self._bombs.get(root, 0) > 0:
                        return True
                elif neighbor.type == "#" and remaining > 1:
                    queue.append((neighbor, remaining - 1))
        return False