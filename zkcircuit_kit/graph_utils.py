"""Graph helpers and the option enums shared by the circuit tools."""

from collections import Counter, deque
from enum import Enum
from typing import Hashable, Iterable, Mapping, Sequence, TypeVar

T = TypeVar("T", bound=Hashable)


class _StrEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class GraphBackend(_StrEnum):
    """Graph library used to build and cluster the circuit graph."""

    GRAPH_RS = "graphrs"
    SINGLE_CLUSTERING = "singleclustering"
    XGRAPH = "xgraph"


class EquivalenceMode(_StrEnum):
    """How equivalence between clusters is computed."""

    TOTAL = "total"
    STRUCTURAL = "structural"
    LOCAL = "local"
    NONE = "none"


class ClusteringPreprocessing(_StrEnum):
    """Preprocessing applied before clustering."""

    NONE = "none"
    BRIDGE_FINDING = "bridgefinding"


class FileType(_StrEnum):
    """Kind of constraint file given as input."""

    R1CS = "r1cs"
    ACIR = "acir"


def distance_to_source_set(
    sources: Iterable[T], adjacencies: Mapping[T, Iterable[T]]
) -> dict[T, int]:
    """Breadth-first distance of every reachable vertex from the nearest source.

    Every visited vertex must have an entry in ``adjacencies``.
    """
    distance: dict[T, int] = {source: 0 for source in sources}
    queue = deque(distance)
    while queue:
        current = queue.popleft()
        next_distance = distance[current] + 1
        for neighbour in adjacencies[current]:
            if neighbour not in distance:
                distance[neighbour] = next_distance
                queue.append(neighbour)
    return distance


def dfs_merge_in_dag(
    parent: int,
    child: int,
    adjacencies: Mapping[int, Sequence[int]],
    can_reach: Mapping[int, bool] | None = None,
) -> list[int]:
    """Return the vertices explored from ``parent`` that can reach ``child``.

    ``can_reach`` seeds the search with vertices whose answer is already known;
    by default only ``child`` itself is known to reach ``child``. The result is
    sorted.
    """
    known: dict[int, bool] = dict(can_reach) if can_reach is not None else {child: True}
    stack = [parent]

    while stack:
        current = stack[-1]
        if current in known:
            stack.pop()
            continue

        neighbours = adjacencies[current]
        stack.extend(adj for adj in neighbours if adj not in known)

        if any(known.get(adj, False) for adj in neighbours):
            known.setdefault(current, True)
        elif all(not known.get(adj, True) for adj in neighbours):
            known.setdefault(current, False)

    return sorted(vertex for vertex, reaches in known.items() if reaches)


def dfs_merge_in_dag_with_bfs_preprocessing(
    parent: int,
    child: int,
    adjacencies: Mapping[int, Sequence[int]],
    preprocessing_steps: int,
) -> list[int]:
    """Like :func:`dfs_merge_in_dag`, first marking descendants of ``child``.

    Vertices within ``preprocessing_steps`` edges below ``child`` cannot reach
    it in a DAG, so they are marked as unable to before the search.
    """
    known: dict[int, bool] = {child: True}
    frontier = {child}
    for _ in range(preprocessing_steps):
        frontier = {
            vertex
            for current in frontier
            for vertex in adjacencies[current]
            if vertex not in known
        }
        known.update((vertex, False) for vertex in frontier)

    return dfs_merge_in_dag(parent, child, adjacencies, known)


def count_ints(values: Iterable[T]) -> list[tuple[T, int]]:
    """Count occurrences and return (value, count) pairs sorted by value."""
    return sorted(Counter(values).items())