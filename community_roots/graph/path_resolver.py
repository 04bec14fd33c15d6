"""Shortest kinship path between two people."""

import logging
from collections import deque
from typing import Iterable, Optional

from community_roots.graph.kinship_graph import KinshipGraph
from community_roots.graph.models import PathStep
from community_roots.models import Person

logger = logging.getLogger(__name__)


def bfs_path(
    graph: KinshipGraph,
    start_id: str,
    end_id: str,
    *,
    max_hops: Optional[int] = None,
) -> Optional[list[PathStep]]:
    """
    Breadth-first search over the kinship graph.

    Neighbors are enqueued in the graph's enumeration order, so for a fixed
    snapshot the result is always the same path.

    Returns:
        ``[]`` when start and end are the same person, the list of steps
        from start (exclusive) to end (inclusive) when connected, or
        ``None`` when end is unknown, unreachable or beyond ``max_hops``.
    """
    if start_id == end_id:
        return []
    if end_id not in graph:
        logger.debug("find_path: %s is not in the snapshot", end_id)
        return None

    queue: deque[tuple[str, list[PathStep]]] = deque([(start_id, [])])
    visited = {start_id}

    while queue:
        current, path = queue.popleft()
        if max_hops is not None and len(path) >= max_hops:
            continue

        for edge in graph.neighbors(current):
            if edge.person_id in visited:
                continue
            next_path = path + [edge]
            if edge.person_id == end_id:
                logger.debug(
                    "find_path %s -> %s: %d hops, %d visited",
                    start_id, end_id, len(next_path), len(visited),
                )
                return next_path
            visited.add(edge.person_id)
            queue.append((edge.person_id, next_path))

    logger.debug("find_path %s -> %s: unreachable (%d visited)", start_id, end_id, len(visited))
    return None


def find_path(
    people: Iterable[Person],
    start_id: str,
    end_id: str,
    max_hops: Optional[int] = None,
) -> Optional[list[PathStep]]:
    """Shortest labeled path between two ids in a fresh snapshot of ``people``."""
    return bfs_path(KinshipGraph(people), start_id, end_id, max_hops=max_hops)
