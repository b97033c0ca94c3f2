"""
Functions related to graphs
"""

from collections import deque
from collections.abc import Iterable, Set
from typing import Callable, TypeVar

T = TypeVar("T")


def breadth_first_layers(
    seeds: Iterable[T],
    node_to_neighbours: Callable[[T], Iterable[T]],
    max_depth: int | None = None,
) -> dict[T, int]:
    """
    Layered breadth-first traversal from a set of seeds.

    The frontier at depth d is fully expanded before depth d + 1, and a
    node is processed once however many shortest paths reach it.

    Args:
        seeds: Nodes at depth 0.
        node_to_neighbours: Function returning the nodes a given node points to.
        max_depth: Nodes further than this are not visited. None means no limit.

    Returns:
        dict[T, int]: visited nodes mapped to their depth, in visiting order
    """
    depth_by_node: dict[T, int] = {}
    queue: deque[T] = deque()
    for seed in seeds:
        if seed not in depth_by_node:
            depth_by_node[seed] = 0
            queue.append(seed)

    while queue:
        current = queue.popleft()
        depth = depth_by_node[current]
        if max_depth is not None and depth >= max_depth:
            continue
        for neighbour in node_to_neighbours(current):
            # Avoid cycles
            if neighbour not in depth_by_node:
                depth_by_node[neighbour] = depth + 1
                queue.append(neighbour)

    return depth_by_node


def nodes_to_connected_components(
    nodes: Iterable[T], node_to_neighbours: Callable[[T], Iterable[T]]
) -> tuple[frozenset[T], ...]:
    """
    Extract connected components from an undirected graph structure.

    Args:
        nodes: nodes of the graph. Seeds are taken in iteration order.
        node_to_neighbours: Function returning the nodes a given node points to.
            It may return nodes outside `nodes`, they are ignored.

    Returns:
        tuple[frozenset[T], ...]: connected components in discovery order
    """
    nodes = list(nodes)
    universe = frozenset(nodes)

    def neighbours_in_universe(node: T) -> Iterable[T]:
        return (n for n in node_to_neighbours(node) if n in universe)

    seen: set[T] = set()
    components: list[frozenset[T]] = []

    # Guarantees all the nodes are at least visited once
    for node in nodes:
        # Avoid visiting an already seen component
        if node in seen:
            continue

        component = frozenset(breadth_first_layers([node], neighbours_in_universe))
        seen.update(component)
        components.append(component)

    return tuple(components)


def count_connected_components(
    nodes: Set[T] | Iterable[T], node_to_neighbours: Callable[[T], Iterable[T]]
) -> int:
    """Number of connected components of the graph."""
    return len(nodes_to_connected_components(nodes, node_to_neighbours))
