"""
Structured diagnostics.

Builder and validator record problems here instead of raising; the
collector is rendered to bullet text only when the report is assembled.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)


class DiagnosticKind(Enum):
    REDUNDANT = "redundant"
    DANGLING = "dangling"
    CIRCULAR = "circular"


@dataclass(frozen=True)
class Diagnostic:
    """
    One non-fatal problem found in the input.

    REDUNDANT: concept=duplicate name, record=rejected record,
        other_record=record of the kept copy
    DANGLING: concept=owning concept, dependency=unknown name, record=owner's record
    CIRCULAR: names=every concept left pending
    """
    kind: DiagnosticKind
    concept: Optional[str] = None
    dependency: Optional[str] = None
    record: Optional[int] = None
    other_record: Optional[int] = None
    names: Tuple[str, ...] = ()

    @property
    def message(self) -> str:
        if self.kind is DiagnosticKind.REDUNDANT:
            return (
                f'Found redundant copy of concept "{self.concept}" in record {self.record} '
                f"(redundant with record {self.other_record}). Ignoring concept entry."
            )
        if self.kind is DiagnosticKind.DANGLING:
            return (
                f'Dependency on "{self.dependency}" in concept "{self.concept}" in record '
                f"{self.record} does not correspond to a concept. Ignoring dependency."
            )
        return (
            f"Circular conceptual dependencies including (or depended on by) "
            f"{len(self.names)} concepts: {', '.join(self.names)}."
        )


class Diagnostics:
    """Ordered collector of Diagnostic records."""

    def __init__(self):
        self._items: List[Diagnostic] = []

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __bool__(self):
        return bool(self._items)

    def add(self, diagnostic: Diagnostic) -> None:
        logger.info(diagnostic.message)
        self._items.append(diagnostic)

    def redundant(self, concept, record, other_record):
        self.add(Diagnostic(DiagnosticKind.REDUNDANT, concept=concept,
                            record=record, other_record=other_record))

    def dangling(self, concept, dependency, record):
        self.add(Diagnostic(DiagnosticKind.DANGLING, concept=concept,
                            dependency=dependency, record=record))

    def circular(self, names: Iterable[str]):
        self.add(Diagnostic(DiagnosticKind.CIRCULAR, names=tuple(sorted(names))))

    def of_kind(self, kind: DiagnosticKind) -> List[Diagnostic]:
        return [d for d in self._items if d.kind is kind]

    def render(self) -> str:
        """Bullet list, one line per diagnostic; empty string when clean."""
        return "".join(f"- {d.message}\n" for d in self._items)
