"""Map of cells and the route search through it."""

from __future__ import annotations

import heapq
import itertools
from typing import Iterable, NamedTuple, TextIO

from .point import Point, PointError, RouteError
from .unionfind import Node, UnionFind

_MOVES = ((-1, 0, "n"), (1, 0, "s"), (0, 1, "e"), (0, -1, "w"))


class _State(NamedTuple):
    lat: int
    lng: int
    bombs: int
    route: str
    picked: frozenset
    blasted: frozenset
    cost: int


class Map:
    """A rectangular grid of ``.`` ground, ``*`` bombs, ``#`` boulders and ``~`` water."""

    def __init__(self, lines: Iterable[str]) -> None:
        rows = [line for line in lines if line]
        if not rows:
            raise ValueError("map is empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("map rows differ in length")

        self.rows = len(rows)
        self.columns = width
        self.grid = [
            [Node(ch, y, x) for x, ch in enumerate(row)] for y, row in enumerate(rows)
        ]
        self.all_bombs = {
            y * width + x: node
            for y, row in enumerate(self.grid)
            for x, node in enumerate(row)
            if node.type == "*"
        }
        self.max_bomb_count = len(self.all_bombs)
        self.max_boulders_count = sum(row.count("#") for row in rows)

        self.uf = UnionFind(self.rows, self.columns)
        self.uf.connect_all(self.grid)
        self.uf.assign_bombs(self.grid)

    @classmethod
    def from_stream(cls, stream: TextIO) -> Map:
        """Read a map from a text stream, skipping blank lines."""
        return cls(line.rstrip("\r\n") for line in stream)

    def _in_bounds(self, lat: int, lng: int) -> bool:
        return 0 <= lat < self.rows and 0 <= lng < self.columns

    def check_start_point(self, start: Point) -> bool:
        return self._in_bounds(start.lat, start.lng) and self.grid[start.lat][
            start.lng
        ].walkable()

    def check_end_point(self, end: Point) -> bool:
        return self._in_bounds(end.lat, end.lng)

    def route(self, src: Point, dst: Point) -> str:
        """Return the moves (``n``, ``s``, ``e``, ``w``) leading from ``src`` to ``dst``."""
        if not self.check_start_point(src):
            raise PointError(src)
        if not self.check_end_point(dst):
            raise PointError(dst)

        picked: frozenset = frozenset()
        bombs = 0
        if self.grid[src.lat][src.lng].type == "*":
            bombs = 1
            picked = frozenset({src.lat * self.columns + src.lng})

        counter = itertools.count()
        heap: list = []

        def push(state: _State) -> None:
            distance = abs(dst.lat - state.lat) + abs(dst.lng - state.lng)
            heapq.heappush(heap, (state.cost + distance, -state.bombs, next(counter), state))

        push(_State(src.lat, src.lng, bombs, "", picked, frozenset(), 0))
        visited = {(src.lat, src.lng, bombs)}

        while heap:
            current = heapq.heappop(heap)[-1]
            if current.lat == dst.lat and current.lng == dst.lng:
                return current.route
            for state in self._neighbors(current, dst):
                key = (state.lat, state.lng, state.bombs)
                if key not in visited:
                    visited.add(key)
                    push(state)
        raise RouteError(src, dst)

    def _neighbors(self, current: _State, dst: Point):
        for dy, dx, move in _MOVES:
            ny, nx = current.lat + dy, current.lng + dx
            if not self._in_bounds(ny, nx):
                continue

            cell = self.grid[ny][nx]
            cell_id = ny * self.columns + nx
            bombs = current.bombs
            picked = current.picked
            blasted = current.blasted
            can_visit = False

            if cell.walkable():
                can_visit = True
                if cell.type == "*" and cell_id not in picked:
                    picked = picked | {cell_id}
                    bombs += 1
            elif cell.type == "#":
                if cell_id in current.blasted:
                    can_visit = True
                elif bombs > 0:
                    neighbor_dist = abs(dst.lat - ny) + abs(dst.lng - nx)
                    current_dist = abs(dst.lat - current.lat) + abs(dst.lng - current.lng)
                    if (
                        self.uf.should_bomb(
                            self.grid,
                            self.grid[current.lat][current.lng],
                            cell,
                            self.grid[dst.lat][dst.lng],
                            bombs,
                        )
                        or neighbor_dist < current_dist
                    ):
                        can_visit = True
                        blasted = blasted | {cell_id}
                        bombs -= 1

            if can_visit:
                yield _State(
                    ny, nx, bombs, current.route + move, picked, blasted, current.cost + 1
                )