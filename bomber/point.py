"""Grid coordinates and the errors raised when routing between them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A cell position: ``lat`` is the row, ``lng`` the column."""

    lat: int
    lng: int

    def __str__(self) -> str:
        return f"({self.lat}, {self.lng})"

    @classmethod
    def parse(cls, text: str) -> Point:
        """Build a point from two whitespace-separated integers."""
        parts = text.split()
        if len(parts) != 2:
            raise ValueError(f"expected two integers, got {text!r}")
        try:
            lat, lng = (int(part) for part in parts)
        except ValueError as exc:
            raise ValueError(f"expected two integers, got {text!r}") from exc
        return cls(lat, lng)


class PointError(Exception):
    """A point lies outside the map or cannot be used as a start."""

    def __init__(self, point: Point) -> None:
        super().__init__(f"Invalid point: {point}")
        self.point = point


class RouteError(Exception):
    """No route exists between two points."""

    def __init__(self, src: Point, dst: Point) -> None:
        super().__init__(f"No route from {src} to {dst}.")
        self.src = src
        self.dst = dst