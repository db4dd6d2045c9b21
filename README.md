# bomber

Find a route across a grid map from one cell to another. The map may hold
boulders. A bomb picked up on the way can blow up a boulder and clear the
path through it.

## Maps

A map is rows of text of equal length. Blank lines are ignored. An empty map,
or one whose rows differ in length, is rejected with `ValueError`.

| Character | Meaning                                     |
|-----------|---------------------------------------------|
| `.`       | open ground you can walk on                 |
| `*`       | a bomb: you can walk on it and pick it up   |
| `#`       | a boulder: a bomb is needed to pass it      |
| `~`       | water: you can never enter it               |

Positions are written as `row column` and count from zero at the top left.

The search is a best-first search ordered by steps taken plus the straight
grid distance to the destination. When costs tie, the state carrying more
bombs comes first. Each bomb is picked up once, and each one blasts one boulder.
A boulder that has been blasted stays open for the rest of that route. A bomb
is only spent on a boulder when the move brings the walker closer to the
destination, or when blasting leads, within the bombs carried, to the
destination's region or to a region holding more bombs. A route that needs a
boulder blasted in any other way is not found.

## Command line

```
bomber [-i] map-file.txt
```

`python -m bomber.cli [-i] map-file.txt` does the same.

Pairs of points are read from standard input, first the source and then the
destination. Each point is two whole numbers. For each pair the program
prints one of these:

- the route, as a string of the letters `n`, `s`, `e` and `w`;
- `No route from (r, c) to (r, c).` if there is no route;
- `Invalid point: (r, c)` if the source is off the map or is not walkable,
  or if the destination is off the map.

Reading stops at the end of input or at the first input that is not a
number. With `-i` the program prints the prompts `src> ` and `dst> `.

The program writes a usage line to standard error and exits with status 1 if
the arguments are wrong. It does the same if the map file cannot be opened or
the map is rejected.

With this `map.txt`:

```
.~~~
.~~~
....
```

```
$ printf '0 0\n2 3\n' | bomber map.txt
sseee
```

## Library use

```python
from bomber.map import Map
from bomber.point import Point, PointError, RouteError

grid = Map([
    "..*#",
    ".##.",
    "....",
])
try:
    print(grid.route(Point(0, 0), Point(0, 3)))
except PointError as err:
    print("bad point", err.point)
except RouteError as err:
    print("no route from", err.src, "to", err.dst)
```

- `Map(lines)` builds a map from an iterable of strings, and
  `Map.from_stream(stream)` builds one from an open text file.
- `Map.check_start_point` and `Map.check_end_point` report whether a point can
  be used as a source or a destination.
- `Point.parse("3 4")` reads a point from two whitespace-separated integers and
  raises `ValueError` otherwise. `str(Point(3, 4))` gives `(3, 4)`.
- `bomber.unionfind` holds `Node`, one map cell, and `UnionFind`, which groups
  the walkable cells into connected regions and counts the bombs in each.

## Tests

```
pip install -e '.[test]'
pytest
```