# path_planner/domain/mechanics/mechanics_planner.py
import heapq
import logging
import math
from dataclasses import dataclass, field
from enum import Enum

from path_planner.app.protocols import PathPlanner
from path_planner.domain.entities.geography import GeoCoord
from path_planner.domain.mechanics.mechanics_graph import GeoGraph

log = logging.getLogger(__name__)

MAX_ITERATIONS = 10_000_000


class SearchStatus(Enum):
    FOUND = "found"
    EXHAUSTED = "exhausted"
    CAPPED = "capped"


@dataclass
class SearchResult:
    status: SearchStatus
    nodes: list[int] = field(default_factory=list)  # end -> start, empty unless FOUND
    explored: list[int] = field(default_factory=list)  # every node with a finite f-score
    pops: int = 0

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.FOUND


class AStarPlanner(PathPlanner):
    """
    A* over a GeoGraph.

    Edge cost is graph.distance(current, neighbor) and the heuristic is
    graph.distance(neighbor, goal). Equal f-scores pop in push order.
    No state survives between calls.
    """

    def __init__(self, graph: GeoGraph, max_iterations: int = MAX_ITERATIONS):
        self.G = graph
        self.max_iterations = max_iterations

    def search(self, start_node: int, end_node: int) -> SearchResult:
        G = self.G
        n = len(G)
        g_score = [math.inf] * n
        f_score = [math.inf] * n
        came_from: dict[int, int] = {}

        g_score[start_node] = 0.0
        f_score[start_node] = G.distance(start_node, end_node)

        seq = 0
        open_set: list[tuple[float, int, int]] = [(0.0, seq, start_node)]
        pops = 0
        status = SearchStatus.EXHAUSTED

        while open_set:
            if pops >= self.max_iterations:
                status = SearchStatus.CAPPED
                break
            f, _, current = heapq.heappop(open_set)
            pops += 1

            if current == end_node:
                status = SearchStatus.FOUND
                break

            # stale entry, a cheaper route to current was pushed later
            if f > f_score[current]:
                continue

            for neighbor in G.neighbors(current):
                tentative = g_score[current] + G.distance(current, neighbor)
                if tentative < g_score[neighbor]:
                    came_from[neighbor] = current
                    g_score[neighbor] = tentative
                    f_score[neighbor] = tentative + G.distance(neighbor, end_node)
                    seq += 1
                    heapq.heappush(open_set, (f_score[neighbor], seq, neighbor))

        explored = [i for i, f in enumerate(f_score) if f < math.inf]
        if status is not SearchStatus.FOUND:
            log.debug(
                "search %s -> %s ended %s after %d pops", start_node, end_node, status.value, pops
            )
            return SearchResult(status, explored=explored, pops=pops)

        path = [end_node]
        current = end_node
        while current in came_from:
            current = came_from[current]
            path.append(current)
        return SearchResult(status, nodes=path, explored=explored, pops=pops)

    def plan_path(self, start_node: int, end_node: int, debug: bool = False) -> list[GeoCoord]:
        res = self.search(start_node, end_node)
        if debug:
            return [self.G.coord(i) for i in res.explored]
        return [self.G.coord(i) for i in res.nodes]

    def path_length(self, nodes: list[int]) -> float:
        """Accumulated edge cost of a node path in travel order (start -> end)."""
        return sum(self.G.distance(a, b) for a, b in zip(nodes, nodes[1:]))
