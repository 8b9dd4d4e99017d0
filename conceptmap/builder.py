"""
Graph builder.

Ingests ConceptRecords one at a time, rejects duplicate names and assigns
each surviving concept a stable position. Dependency names are not checked
here: a prerequisite may be defined by a later record.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .config import DEPENDENCY_SEPARATOR
from .diagnostics import Diagnostics
from .models import Concept

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InsertResult:
    """
    Outcome of GraphBuilder.add.

    inserted: True when the record became a new concept
    position: position of the new concept, or of the existing one on rejection
    """
    inserted: bool
    position: int
    sequence_index: int


@dataclass
class ConceptGraph:
    """
    All concepts of one run, in ingestion order.

    lookup maps name -> position into `concepts`.
    """
    concepts: List[Concept] = field(default_factory=list)
    lookup: Dict[str, int] = field(default_factory=dict)

    def __len__(self):
        return len(self.concepts)

    def __contains__(self, name):
        return name in self.lookup

    def get(self, name: str) -> Concept:
        return self.concepts[self.lookup[name]]

    @property
    def names(self) -> List[str]:
        return [c.name for c in self.concepts]


def split_dependencies(raw: Optional[str]) -> List[str]:
    """
    input: raw dependency field, e.g. "sets; functions;;"
    output: trimmed, non-empty names in original order
    """
    if not raw:
        return []
    deps = [d.strip() for d in raw.split(DEPENDENCY_SEPARATOR)]
    return [d for d in deps if d]


class GraphBuilder:
    """
    Owns the graph under construction until build() hands it off.

    Usage:
        builder = GraphBuilder(diagnostics)
        for record in records:
            builder.add(record)
        graph = builder.build()
    """

    def __init__(self, diagnostics: Optional[Diagnostics] = None):
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self._graph = ConceptGraph()
        self._records = 0

    @property
    def record_count(self) -> int:
        return self._records

    def add(self, record) -> InsertResult:
        if self._graph is None:
            raise RuntimeError("GraphBuilder.add called after build()")
        self._records += 1
        name = record.concept.strip()

        existing = self._graph.lookup.get(name)
        if existing is not None:
            kept = self._graph.concepts[existing]
            self.diagnostics.redundant(name, self._records, kept.sequence_index)
            return InsertResult(False, existing, self._records)

        position = len(self._graph.concepts)
        concept = Concept.from_record(
            record,
            sequence_index=self._records,
            position=position,
            dependencies=split_dependencies(record.dependencies),
        )
        self._graph.concepts.append(concept)
        self._graph.lookup[concept.name] = position
        return InsertResult(True, position, self._records)

    def build(self) -> ConceptGraph:
        """Hand the graph off; the builder cannot be used afterwards."""
        graph, self._graph = self._graph, None
        logger.info("Ingested %d records into %d concepts", self._records, len(graph))
        return graph
