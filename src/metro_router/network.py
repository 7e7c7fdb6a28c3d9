"""Metro network graph built from ordered line definitions."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Optional

from .exceptions import InvalidTopology
from .lines import METRO_LINES

logger = logging.getLogger(__name__)


def _normalize(name: str) -> str:
    return " ".join(name.lower().split())


class Network:
    """Stations and line-tagged adjacency of a metro system.

    The graph is built once from the line definitions and is read-only
    afterwards, so a single instance can be shared between concurrent queries.
    """

    def __init__(self, lines: Mapping[str, Sequence[str]]):
        self._lines: dict[str, tuple[str, ...]] = {}
        self._stations: dict[str, None] = {}  # insertion-ordered set
        self._adjacency: dict[str, list[tuple[str, str]]] = {}  # station -> [(neighbor, line)]
        self._station_lines: dict[str, list[str]] = {}  # station -> lines serving it
        self._build_graph(lines)

        # Read-only from here on
        self._adjacency = {
            station: tuple(edges) for station, edges in self._adjacency.items()
        }
        self._station_lines = {
            station: tuple(line_names) for station, line_names in self._station_lines.items()
        }
        self._name_index = {_normalize(station): station for station in self._stations}

        logger.info(
            f"Built metro network: {len(self._stations)} stations on {len(self._lines)} lines"
        )

    def _build_graph(self, lines: Mapping[str, Sequence[str]]):
        """Register every station and link it to its neighbors on each line."""
        if not isinstance(lines, Mapping):
            raise InvalidTopology("Line definitions must map line names to station lists")

        for line, stations in lines.items():
            stations = self._validate_line(line, stations)
            self._lines[line] = stations

            for i, station in enumerate(stations):
                self._stations.setdefault(station, None)
                self._adjacency.setdefault(station, [])
                self._station_lines.setdefault(station, []).append(line)

                if i > 0:
                    self._add_edge(station, stations[i - 1], line)
                if i < len(stations) - 1:
                    self._add_edge(station, stations[i + 1], line)

    @staticmethod
    def _validate_line(line, stations) -> tuple[str, ...]:
        if not isinstance(line, str) or not line.strip():
            raise InvalidTopology(f"Line name must be a non-empty string, got {line!r}")
        if isinstance(stations, str) or not isinstance(stations, Sequence):
            raise InvalidTopology(f"Line {line!r} must be an ordered list of stations")
        if not stations:
            raise InvalidTopology(f"Line {line!r} has no stations")

        seen = set()
        for station in stations:
            if not isinstance(station, str) or not station.strip():
                raise InvalidTopology(f"Line {line!r} has an invalid station name: {station!r}")
            if station in seen:
                raise InvalidTopology(f"Station {station!r} appears more than once on line {line!r}")
            seen.add(station)

        return tuple(stations)

    def _add_edge(self, from_station: str, to_station: str, line: str):
        self._adjacency[from_station].append((to_station, line))

    def __contains__(self, station: object) -> bool:
        return station in self._stations

    def __len__(self) -> int:
        return len(self._stations)

    def contains(self, station: str) -> bool:
        """Whether the station exists anywhere on the network."""
        return station in self._stations

    def neighbors(self, station: str) -> list[tuple[str, str]]:
        """Directly reachable (neighbor, line) pairs; empty for isolated or unknown stations."""
        return list(self._adjacency.get(station, ()))

    def stations(self) -> list[str]:
        """All distinct stations, first-seen order while scanning lines as declared."""
        return list(self._stations)

    @property
    def lines(self) -> Mapping[str, tuple[str, ...]]:
        return MappingProxyType(self._lines)

    def line(self, name: str) -> Optional[tuple[str, ...]]:
        return self._lines.get(name)

    def terminals(self, line: str) -> tuple[str, str]:
        """First and last station of a line."""
        stations = self._lines[line]
        return stations[0], stations[-1]

    def lines_at(self, station: str) -> list[str]:
        """Lines serving a station, in declared order."""
        return list(self._station_lines.get(station, ()))

    def is_interchange(self, station: str) -> bool:
        return len(self._station_lines.get(station, ())) > 1

    def stations_on_line(self, line: str) -> list[str]:
        return list(self._lines.get(line, ()))

    def resolve(self, name: str) -> Optional[str]:
        """Find a station's canonical name ignoring case and extra whitespace."""
        if name in self._stations:
            return name
        return self._name_index.get(_normalize(name))


_network: Optional[Network] = None


def get_network() -> Network:
    """Get or create the default network singleton."""
    global _network
    if _network is None:
        _network = Network(METRO_LINES)
    return _network
