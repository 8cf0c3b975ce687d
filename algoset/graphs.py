"""Graph algorithms: scheduling, connectivity, bipartiteness and tree walks."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence

from algoset.dsu import DisjointSet


def _check_node(node: int, n: int) -> None:
    if not 0 <= node < n:
        raise ValueError(f"node {node} is outside 0..{n - 1}")


def _prerequisite_graph(
    num_courses: int, prerequisites: Iterable[Sequence[int]]
) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(num_courses)]
    for course, required in prerequisites:
        _check_node(course, num_courses)
        _check_node(required, num_courses)
        adj[required].append(course)
    return adj


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Return whether all courses can be taken; each pair is ``[course, required]``."""
    adj = _prerequisite_graph(num_courses, prerequisites)
    indegree = [0] * num_courses
    for targets in adj:
        for course in targets:
            indegree[course] += 1
    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    taken = 0
    while queue:
        node = queue.popleft()
        taken += 1
        for course in adj[node]:
            indegree[course] -= 1
            if indegree[course] == 0:
                queue.append(course)
    return taken == num_courses


def find_order(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """Return an order in which to take all courses, or ``[]`` if there is a cycle."""
    adj = _prerequisite_graph(num_courses, prerequisites)
    unvisited, active, done = 0, 1, 2
    state = [unvisited] * num_courses
    finished: list[int] = []
    for start in range(num_courses):
        if state[start] != unvisited:
            continue
        state[start] = active
        stack = [(start, iter(adj[start]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if state[nxt] == active:
                    return []
                if state[nxt] == unvisited:
                    state[nxt] = active
                    stack.append((nxt, iter(adj[nxt])))
                    break
            else:
                stack.pop()
                state[node] = done
                finished.append(node)
    finished.reverse()
    return finished


def count_provinces(is_connected: Sequence[Sequence[int]]) -> int:
    """Return the number of connected groups in an adjacency matrix."""
    n = len(is_connected)
    visited = [False] * n
    provinces = 0
    for start in range(n):
        if visited[start]:
            continue
        provinces += 1
        visited[start] = True
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for other, linked in enumerate(is_connected[node]):
                if linked == 1 and not visited[other]:
                    visited[other] = True
                    queue.append(other)
    return provinces


def is_bipartite(graph: Sequence[Sequence[int]]) -> bool:
    """Return whether the graph given as adjacency lists can be two-coloured."""
    colour: list[int | None] = [None] * len(graph)
    for start in range(len(graph)):
        if colour[start] is not None:
            continue
        colour[start] = 1
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for other in graph[node]:
                if colour[other] == colour[node]:
                    return False
                if colour[other] is None:
                    colour[other] = 1 - colour[node]
                    queue.append(other)
    return True


def _letter_index(char: str) -> int:
    if not "a" <= char <= "z":
        raise ValueError(f"expected a lower-case letter, got {char!r}")
    return ord(char) - ord("a")


def equations_possible(equations: Iterable[str]) -> bool:
    """Return whether equations like ``"a==b"`` and ``"a!=c"`` can all hold."""
    parsed = []
    for equation in equations:
        if len(equation) != 4 or equation[1:3] not in ("==", "!="):
            raise ValueError(f"malformed equation {equation!r}")
        parsed.append(
            (_letter_index(equation[0]), equation[1] == "=", _letter_index(equation[3]))
        )
    letters = DisjointSet(26)
    for left, equal, right in parsed:
        if equal:
            letters.union(left, right)
    return all(
        letters.find(left) != letters.find(right)
        for left, equal, right in parsed
        if not equal
    )


def make_connected(n: int, connections: Iterable[Sequence[int]]) -> int:
    """Return the cable moves needed to connect all ``n`` computers, or -1."""
    cables = list(connections)
    if len(cables) < n - 1:
        return -1
    network = DisjointSet(n)
    components = n
    for a, b in cables:
        if network.union(a, b):
            components -= 1
    return components - 1


def count_unreachable_pairs(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Return the number of node pairs with no path between them."""
    network = DisjointSet(n)
    for u, v in edges:
        network.union(u, v)
    sizes = Counter(network.find(node) for node in range(n))
    remaining = n
    pairs = 0
    for size in sizes.values():
        remaining -= size
        pairs += size * remaining
    return pairs


def _half(value: int) -> int:
    return -(-value // 2) if value < 0 else value // 2


def most_profitable_path(
    edges: Iterable[Sequence[int]], bob: int, amount: Sequence[int]
) -> int:
    """Return Alice's best net income walking from node 0 to a leaf of the tree.

    Bob walks from ``bob`` to node 0 at the same speed; a gate reached by
    both at once shares its amount, one reached by Bob first is free.
    """
    n = len(amount)
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        _check_node(u, n)
        _check_node(v, n)
        adj[u].append(v)
        adj[v].append(u)
    _check_node(bob, n)

    parent: dict[int, int | None] = {0: None}
    stack = [0]
    while stack:
        node = stack.pop()
        for other in adj[node]:
            if other not in parent:
                parent[other] = node
                stack.append(other)

    bob_time: dict[int, int] = {}
    if bob in parent:
        step: int | None = bob
        elapsed = 0
        while step is not None:
            bob_time[step] = elapsed
            step = parent[step]
            elapsed += 1

    best: int | None = None
    walk = [(0, -1, 0, 0)]
    while walk:
        node, came_from, elapsed, income = walk.pop()
        arrival = bob_time.get(node)
        if arrival is None or elapsed < arrival:
            income += amount[node]
        elif elapsed == arrival:
            income += _half(amount[node])
        if len(adj[node]) == 1:
            best = income if best is None else max(best, income)
        walk.extend(
            (other, node, elapsed + 1, income) for other in adj[node] if other != came_from
        )
    if best is None:
        raise ValueError("the tree has no leaf")
    return best