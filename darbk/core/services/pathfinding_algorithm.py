"""
Pathfinding Algorithm

Breadth-first shortest path search over the unweighted station graph.
"""

import logging
from collections import deque
from typing import Deque, Dict, List, Sequence

from ..models.graph import MetroGraph
from ..models.station import StationRecord


logger = logging.getLogger(__name__)


def _reconstruct_path(parents: Dict[str, str], start: str, end: str) -> List[str]:
    """Walk parent pointers back from end and return the start -> end path."""
    path = [end]
    node = end
    while node != start:
        node = parents[node]
        path.append(node)
    path.reverse()
    return path


def shortest_path(graph: MetroGraph, start: str, end: str) -> List[str]:
    """
    Find a shortest path (fewest hops) between two station codes.

    Neighbors are expanded in sorted order so results are reproducible,
    but when several shortest paths exist any one of them is a valid answer.

    Args:
        graph: Station graph to search
        start: Origin station code
        end: Destination station code

    Returns:
        Codes from start to end inclusive; ``[start]`` when start == end;
        an empty list when either code is unknown or end is unreachable
    """
    if start not in graph or end not in graph:
        logger.debug(f"No path: '{start}' or '{end}' is not in the station graph")
        return []

    if start == end:
        return [start]

    visited = {start}
    parents: Dict[str, str] = {}
    frontier: Deque[str] = deque([start])

    while frontier:
        current = frontier.popleft()
        for neighbor in sorted(graph.neighbors(current)):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            parents[neighbor] = current

            if neighbor == end:
                path = _reconstruct_path(parents, start, end)
                logger.debug(f"Found path {' -> '.join(path)} after visiting {len(visited)} stations")
                return path

            frontier.append(neighbor)

    logger.debug(f"'{end}' is unreachable from '{start}'")
    return []


def route_stations(graph: MetroGraph, path: Sequence[str]) -> List[StationRecord]:
    """Map a path of codes back to station records, dropping codes that no longer resolve."""
    stations = []
    for code in path:
        station = graph.station(code)
        if station is not None:
            stations.append(station)
    return stations
