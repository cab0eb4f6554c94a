"""Topological ordering of a directed graph read as a list of edges."""

from __future__ import annotations

import sys
from collections import deque
from typing import Iterable

END_MARKER = "0"


def parse_edges(text: str) -> list[tuple[str, str]]:
    """Read whitespace-separated vertex pairs, stopping at the token '0' or the end."""
    words = []
    for word in text.split():
        if word == END_MARKER:
            break
        words.append(word)
    if len(words) % 2:
        raise ValueError(f"edge list has an unpaired vertex: {words[-1]!r}")
    return list(zip(words[::2], words[1::2]))


def topological_order(edges: Iterable[tuple[str, str]]) -> list[str]:
    """Vertices ordered so every edge points forward; vertices on a cycle are left out."""
    adjacency: dict[str, list[str]] = {}
    indegree: dict[str, int] = {}
    for source, target in edges:
        adjacency.setdefault(source, [])
        adjacency.setdefault(target, [])
        adjacency[source].append(target)
        indegree[target] = indegree.get(target, 0) + 1

    queue = deque(vertex for vertex in adjacency if indegree.get(vertex, 0) == 0)
    order = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for successor in adjacency[vertex]:
            indegree[successor] -= 1
            if indegree[successor] == 0:
                queue.append(successor)
    return order


def main(argv=None) -> int:
    """Print a topological order of the edges in the file named by the one argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Must supply the input file name as the only parameter")
        return 1
    try:
        with open(args[0], encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print(f"Unable to open file '{args[0]}'.")
        return 2
    order = topological_order(parse_edges(text))
    sys.stdout.write("".join(f"{vertex} " for vertex in order))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())