"""
Workload calculations: transitive prerequisite closure, earliest start per
concept, and curriculum-wide totals per delivery mode.
"""

import logging
from typing import Dict, FrozenSet

from .exceptions import CircularDependencyError
from .models import PRIMARY_MODE, DeliveryMode, WorkloadTotals
from .validator import AcyclicGraph

logger = logging.getLogger(__name__)


class ClosureSolver:
    """
    Memoized transitive closure over a validated graph.

    Only accepts an AcyclicGraph; recursion on a cycle would never reach a
    memoized entry. The memo lives as long as the solver.
    """

    def __init__(self, acyclic: AcyclicGraph):
        if not isinstance(acyclic, AcyclicGraph):
            pending = getattr(acyclic, "pending", ())
            raise CircularDependencyError(pending)
        self.graph = acyclic.graph
        self._placed = frozenset(acyclic.order)
        self._memo: Dict[str, FrozenSet[str]] = {}

    def is_solved(self, name: str) -> bool:
        return name in self._memo

    def closure_of(self, name: str) -> FrozenSet[str]:
        """
        input: concept name
        output: every concept reachable through dependencies, excluding `name`
        """
        if name in self._memo:
            return self._memo[name]
        if name not in self._placed:
            if name in self.graph:
                raise CircularDependencyError({name})
            raise KeyError(name)

        deps = self.graph.get(name).dependencies
        if not deps:
            self._memo[name] = frozenset()
            return self._memo[name]

        closure = set(deps)
        for d in deps:
            closure |= self.closure_of(d)
        self._memo[name] = frozenset(closure)
        return self._memo[name]

    def earliest_start(self, name: str, mode: DeliveryMode = PRIMARY_MODE) -> float:
        """Sum of `mode` weight over the closure of `name`."""
        return sum((self.graph.get(d).weight(mode) for d in self.closure_of(name)), 0.0)


def solve_earliest_starts(acyclic: AcyclicGraph) -> Dict[str, float]:
    """
    input: validated graph token
    output: dict that maps each placed concept to its earliest start
    Also writes Concept.earliest_start for every placed concept.
    """
    solver = ClosureSolver(acyclic)
    es_dict = {}
    for name in acyclic.order:
        es = solver.earliest_start(name)
        acyclic.graph.get(name).earliest_start = es
        es_dict[name] = es
        logger.debug("%s: %d prerequisites, earliest start %.2f",
                     name, len(solver.closure_of(name)), es)
    return es_dict


def total_weights(concepts) -> WorkloadTotals:
    """
    input: iterable of concepts, validated or not
    output: WorkloadTotals with the weight sum of each delivery mode
    """
    concepts = list(concepts)
    sums = {
        mode.value: sum((c.weight(mode) for c in concepts), 0.0)
        for mode in DeliveryMode
    }
    return WorkloadTotals(**sums)
