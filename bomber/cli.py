"""Command line: read a map, then answer route queries from standard input."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

from .map import Map
from .point import Point, PointError, RouteError


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_point(tokens: Iterator[str]) -> Point | None:
    try:
        lat = int(next(tokens))
        lng = int(next(tokens))
    except (StopIteration, ValueError):
        return None
    return Point(lat, lng)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)

    if len(args) == 2 and args[0] == "-i":
        interactive, filename = True, args[1]
    elif len(args) == 1:
        interactive, filename = False, args[0]
    else:
        print("USAGE: bomber [-i] map-file.txt", file=sys.stderr)
        return 1

    try:
        with open(filename, encoding="utf-8") as stream:
            game = Map.from_stream(stream)
    except OSError:
        print(f"ERROR: Could not open file: {filename}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    tokens = _tokens(sys.stdin)
    while True:
        if interactive:
            print("src> ", end="", flush=True)
        src = _read_point(tokens)
        if src is None:
            break
        if interactive:
            print("dst> ", end="", flush=True)
        dst = _read_point(tokens)
        if dst is None:
            break

        try:
            print(game.route(src, dst))
        except RouteError as exc:
            print(f"No route from {exc.src} to {exc.dst}.")
        except PointError as exc:
            print(f"Invalid point: {exc.point}")
    return 0


if __name__ == "__main__":
    sys.exit(main())