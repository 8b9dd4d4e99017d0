"""
Graph validation.

Prunes dependencies that do not name a concept, then peels the graph frontier
by frontier to find a topological order. The result is a typed token:
AcyclicGraph when every concept was placed, CyclicGraph otherwise. Only an
AcyclicGraph may be handed to the closure solver.
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet, Tuple, Union

from .builder import ConceptGraph
from .diagnostics import Diagnostics
from .exceptions import CircularDependencyError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AcyclicGraph:
    """
    Proof that `order` is a topological order of `graph`.

    `order` may cover only part of the graph (see CyclicGraph.resolved); it
    is always closed under dependencies.
    """
    graph: ConceptGraph
    order: Tuple[str, ...]


@dataclass(frozen=True)
class CyclicGraph:
    graph: ConceptGraph
    order: Tuple[str, ...]
    pending: FrozenSet[str]

    @property
    def resolved(self) -> AcyclicGraph:
        """Concepts placed before peeling got stuck; none of them depend on a cycle."""
        return AcyclicGraph(self.graph, self.order)

    def require_acyclic(self):
        raise CircularDependencyError(self.pending)


ValidationResult = Union[AcyclicGraph, CyclicGraph]


def prune_dependencies(graph: ConceptGraph, diagnostics: Diagnostics) -> int:
    """
    input: built graph, diagnostics collector
    output: number of dependencies dropped
    Rewrites each concept's dependency list in place, keeping resolvable names.
    """
    dropped = 0
    for c in graph.concepts:
        kept = []
        for d in c.dependencies:
            if d in graph.lookup:
                kept.append(d)
            else:
                diagnostics.dangling(c.name, d, c.sequence_index)
                dropped += 1
        c.dependencies = kept
    return dropped


def peel_frontiers(graph: ConceptGraph):
    """
    input: graph with pruned dependencies
    output: (order, pending)
        - order: names in placement order
        - pending: names never placed (cycles and anything behind them)
    A concept is on the frontier when none of its dependencies is pending.
    Removal is visible to the rest of the same pass.
    """
    pending = set(graph.names)
    order = []
    while pending:
        shrunk = False
        for c in graph.concepts:
            if c.name not in pending:
                continue
            if any(d in pending for d in c.dependencies):
                continue
            order.append(c.name)
            pending.remove(c.name)
            shrunk = True
        if not shrunk:
            break
    return order, pending


def validate(graph: ConceptGraph, diagnostics: Diagnostics) -> ValidationResult:
    """Run once after all records are ingested."""
    dropped = prune_dependencies(graph, diagnostics)
    if dropped:
        logger.info("Dropped %d dangling dependencies", dropped)

    order, pending = peel_frontiers(graph)
    if pending:
        diagnostics.circular(pending)
        return CyclicGraph(graph, tuple(order), frozenset(pending))

    logger.info("Topological order covers all %d concepts", len(order))
    return AcyclicGraph(graph, tuple(order))
