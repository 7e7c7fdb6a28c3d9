"""Metro routing with a transfer-penalized shortest path search."""

from __future__ import annotations

import heapq
import itertools
import logging
import math
import time
from dataclasses import asdict, dataclass
from typing import Optional

from .exceptions import UnknownStation
from .network import Network, get_network

logger = logging.getLogger(__name__)

HOP_WEIGHT = 1  # cost of travelling between two adjacent stations
TRANSFER_PENALTY = 1  # extra cost of changing lines at an interchange
TIME_PER_HOP = 5  # minutes between adjacent stations, same on every line


@dataclass(frozen=True)
class PathSegment:
    """One step of a route: the station reached, and the line and direction used to get there."""
    station: str
    line: str
    direction: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class RouteResult:
    """A complete route from start to end, both inclusive."""
    path: list[PathSegment]
    time: int
    cost: int

    @property
    def hops(self) -> int:
        return len(self.path) - 1

    @property
    def transfers(self) -> int:
        return count_line_changes(self.path)

    @property
    def stations(self) -> list[str]:
        return [seg.station for seg in self.path]

    def to_dict(self) -> dict:
        return {
            "path": [seg.to_dict() for seg in self.path],
            "time": self.time,
            "cost": self.cost,
        }

    def __str__(self):
        if self.hops == 0:
            return f"You are already at {self.path[0].station}!"

        result = [self.path[0].station]
        for seg in self.path[1:]:
            result.append(f"  -> {seg.station} ({seg.line} line, {seg.direction})")
        result.append(
            f"\nTotal: ~{self.time} minutes, {self.hops} stop(s), "
            f"{self.transfers} transfer(s), cost {self.cost}"
        )
        return "\n".join(result)


def count_line_changes(path: list[PathSegment]) -> int:
    """Count line changes along a path.

    The start segment carries no line of its own, so comparisons begin at the
    first real hop.
    """
    return sum(1 for prev, seg in zip(path[1:], path[2:]) if seg.line != prev.line)


class RouteFinder:
    """Shortest route search over a read-only Network.

    Every call keeps its own search state, so one finder can serve concurrent
    queries.
    """

    def __init__(self, network: Network):
        self.network = network

    def find_route(self, start: str, end: str) -> Optional[RouteResult]:
        """Find the cheapest route using Dijkstra with a line-change penalty.

        Each hop costs HOP_WEIGHT, and leaving a station on a different line
        from the one used to reach it adds TRANSFER_PENALTY. The first hop is
        never penalized.

        Args:
            start: Name of the departure station
            end: Name of the destination station

        Returns:
            RouteResult, or None if end is unreachable from start

        Raises:
            UnknownStation: If either station is not on the network
        """
        for station in (start, end):
            if station not in self.network:
                raise UnknownStation(station)

        if start == end:
            return RouteResult(path=[PathSegment(station=start, line="", direction="")], time=0, cost=0)

        started = time.perf_counter()
        route = self._search(start, end)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.debug(f"Route calculation {start!r} -> {end!r} took {elapsed_ms:.3f} ms")

        return route

    def _search(self, start: str, end: str) -> Optional[RouteResult]:
        distances: dict[str, float] = {start: 0}
        previous: dict[str, tuple[str, str]] = {}  # station -> (predecessor, line)
        visited = set()

        # Priority queue: (distance, order pushed, station, line used to reach it)
        # Equal distances pop in the order they were discovered
        counter = itertools.count()
        pq = [(0, next(counter), start, "")]

        while pq:
            distance, _, current, current_line = heapq.heappop(pq)

            if current in visited:
                continue
            visited.add(current)

            if current == end:
                return self._build_route(start, end, previous)

            for neighbor, line in self.network.neighbors(current):
                if neighbor in visited:
                    continue

                new_distance = distance + HOP_WEIGHT
                if current_line and line != current_line:
                    new_distance += TRANSFER_PENALTY

                if new_distance < distances.get(neighbor, math.inf):
                    distances[neighbor] = new_distance
                    previous[neighbor] = (current, line)
                    heapq.heappush(pq, (new_distance, next(counter), neighbor, line))

        return None

    def _build_route(self, start: str, end: str, previous: dict[str, tuple[str, str]]) -> RouteResult:
        """Walk the predecessor chain back from end and label each step."""
        path = []
        station = end
        while station != start:
            prev_station, line = previous[station]
            path.append(PathSegment(
                station=station,
                line=line,
                direction=self._direction(line, prev_station)
            ))
            station = prev_station
        path.reverse()

        # The start segment mirrors the first hop's line and direction
        path.insert(0, PathSegment(station=start, line=path[0].line, direction=path[0].direction))

        hops = len(path) - 1
        return RouteResult(
            path=path,
            time=hops * TIME_PER_HOP,
            cost=hops * HOP_WEIGHT + count_line_changes(path) * TRANSFER_PENALTY
        )

    def _direction(self, line: str, from_station: str) -> str:
        """Label travel on a line by the terminal it heads towards.

        Leaving the line's first station means heading to its last one;
        leaving any other station is labelled as heading to the first one.
        """
        first, last = self.network.terminals(line)
        if from_station == first:
            return f"towards {last}"
        return f"towards {first}"


def find_route(start: str, end: str) -> Optional[RouteResult]:
    """Find a route between two stations on the default network."""
    return RouteFinder(get_network()).find_route(start, end)


def list_stations() -> list[str]:
    """All stations on the default network."""
    return get_network().stations()
