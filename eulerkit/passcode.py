"""Recovering a passcode from login attempts that show characters in order."""

from __future__ import annotations

import heapq
from collections import defaultdict
from collections.abc import Iterable


def derive_passcode(attempts: Iterable[str]) -> str:
    """Shortest, then lexicographically smallest, passcode that holds every attempt in order.

    Each attempt lists characters in the order they appear in the passcode;
    every character appears once. Contradictory attempts raise ValueError.
    """
    successors: defaultdict[str, set[str]] = defaultdict(set)
    indegree: dict[str, int] = {}
    for attempt in attempts:
        for ch in attempt:
            indegree.setdefault(ch, 0)
        for i, first in enumerate(attempt):
            for later in attempt[i + 1 :]:
                if later not in successors[first]:
                    successors[first].add(later)
                    indegree[later] += 1
    ready = [ch for ch, degree in indegree.items() if degree == 0]
    heapq.heapify(ready)
    order = []
    while ready:
        ch = heapq.heappop(ready)
        order.append(ch)
        for later in successors[ch]:
            indegree[later] -= 1
            if indegree[later] == 0:
                heapq.heappush(ready, later)
    if len(order) != len(indegree):
        raise ValueError("the attempts contradict each other")
    return "".join(order)