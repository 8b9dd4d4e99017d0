"""
Report assembly.

Runs the pipeline (ingest -> validate -> solve) and exposes the finished
graph to renderers. The report never decides whether rendering should go
ahead; diagnostics are warnings.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Tuple

from .builder import ConceptGraph, GraphBuilder
from .diagnostics import Diagnostics
from .models import Concept, WorkloadTotals
from .validator import AcyclicGraph, CyclicGraph, validate
from .workload import solve_earliest_starts, total_weights

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NodeSpec:
    name: str
    label: str
    category: str
    position: int


@dataclass
class ConceptReport:
    """
    Everything a renderer needs.

    Attributes:
        graph: validated concepts, earliest_start filled where solvable
        diagnostics: every non-fatal problem found
        totals: weight per delivery mode over all concepts
        order: topological order (partial when `pending` is not empty)
        pending: concepts on or behind a cycle
    """
    graph: ConceptGraph
    diagnostics: Diagnostics
    totals: WorkloadTotals
    order: Tuple[str, ...] = ()
    pending: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def acyclic(self) -> bool:
        return not self.pending

    @property
    def concepts(self) -> List[Concept]:
        return self.graph.concepts

    def errors(self) -> Optional[str]:
        """Bullet list of diagnostics, or None when there were none."""
        text = self.diagnostics.render()
        return text or None

    @property
    def earliest_starts(self) -> Dict[str, Optional[float]]:
        return {c.name: c.earliest_start for c in self.concepts}

    def nodes(self) -> List[NodeSpec]:
        return [NodeSpec(c.name, c.label, c.category, c.position) for c in self.concepts]

    def edges(self) -> List[Tuple[str, str]]:
        """(concept, dependency) for every dependency that survived validation."""
        return [(c.name, d) for c in self.concepts for d in c.dependencies]

    def categories(self) -> List[str]:
        """Distinct categories in first-seen order."""
        seen = []
        for c in self.concepts:
            if c.category not in seen:
                seen.append(c.category)
        return seen


def assemble_report(graph, diagnostics, result) -> ConceptReport:
    """
    input: validated graph, diagnostics, AcyclicGraph or CyclicGraph from validate()
    output: ConceptReport with earliest starts solved where possible
    """
    totals = total_weights(graph.concepts)
    if isinstance(result, CyclicGraph):
        acyclic: AcyclicGraph = result.resolved
        pending = result.pending
        logger.info("Solving %d of %d concepts; %d are stuck on cycles",
                    len(acyclic.order), len(graph), len(pending))
    else:
        acyclic = result
        pending = frozenset()
    solve_earliest_starts(acyclic)
    logger.info("Totals: lecture %.2f, lab %.2f, hw %.2f",
                totals.lecture, totals.lab, totals.hw)
    return ConceptReport(graph, diagnostics, totals, tuple(result.order), pending)


def build_report(records) -> ConceptReport:
    """Whole pipeline from deserialized records to report."""
    diagnostics = Diagnostics()
    builder = GraphBuilder(diagnostics)
    for record in records:
        builder.add(record)
    graph = builder.build()
    result = validate(graph, diagnostics)
    return assemble_report(graph, diagnostics, result)
