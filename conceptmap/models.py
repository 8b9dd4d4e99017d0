"""
Concept data models.

Contains the raw ConceptRecord handed over by the input parser, the
validated Concept owned by the graph, and the per-mode workload records.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class DeliveryMode(Enum):
    """
    Delivery channels a concept is taught through.

    LECTURE is the primary mode: earliest-start values are computed from
    lecture weights only.
    """
    LECTURE = "lecture"
    LAB = "lab"
    HW = "hw"


PRIMARY_MODE = DeliveryMode.LECTURE


@dataclass(frozen=True)
class ConceptRecord:
    """
    One row of the input table, already deserialized.

    Attributes:
        concept: Concept name (untrimmed, as read)
        dependencies: Semicolon separated prerequisite names, may be empty
        category: Free-text category or None
        week, earliest, latest: Scheduling hints, carried but unused
        *_weight: Workload per delivery mode (weeks)
        *_coverage: Coverage per delivery mode, carried but unused
    """
    concept: str
    dependencies: str = ""
    category: Optional[str] = None
    week: Optional[int] = None
    earliest: Optional[int] = None
    latest: Optional[int] = None
    lecture_weight: float = 0.0
    lab_weight: float = 0.0
    hw_weight: float = 0.0
    lecture_coverage: float = 0.0
    lab_coverage: float = 0.0
    hw_coverage: float = 0.0


@dataclass
class Modality:
    """Workload of a concept in one delivery mode."""
    weight: float = 0.0
    coverage: float = 0.0


@dataclass
class Modes:
    lecture: Modality = field(default_factory=Modality)
    lab: Modality = field(default_factory=Modality)
    hw: Modality = field(default_factory=Modality)

    def get(self, mode: DeliveryMode) -> Modality:
        return getattr(self, mode.value)


@dataclass
class Concept:
    """
    A validated curriculum concept.

    `position` is fixed at insertion. `dependencies` starts as the raw split
    of the record and is pruned in place by the validator. `earliest_start`
    is written once by the closure solver and stays None when the concept
    sits on (or behind) a cycle.
    """
    name: str
    category: str
    sequence_index: int
    position: int
    dependencies: List[str] = field(default_factory=list)
    modes: Modes = field(default_factory=Modes)
    week: Optional[int] = None
    earliest: Optional[int] = None
    latest: Optional[int] = None
    earliest_start: Optional[float] = None

    @classmethod
    def from_record(cls, record, sequence_index, position, dependencies):
        return cls(
            name=record.concept.strip(),
            category=(record.category or "").strip(),
            sequence_index=sequence_index,
            position=position,
            dependencies=list(dependencies),
            modes=Modes(
                lecture=Modality(record.lecture_weight, record.lecture_coverage),
                lab=Modality(record.lab_weight, record.lab_coverage),
                hw=Modality(record.hw_weight, record.hw_coverage),
            ),
            week=record.week,
            earliest=record.earliest,
            latest=record.latest,
        )

    def weight(self, mode: DeliveryMode = PRIMARY_MODE) -> float:
        return self.modes.get(mode).weight

    @property
    def label(self) -> str:
        if self.earliest_start is None:
            return f"{self.name}\nearliest: n/a"
        return f"{self.name}\nearliest: {self.earliest_start:.2f}"


@dataclass(frozen=True)
class WorkloadTotals:
    """Curriculum-wide weight per delivery mode."""
    lecture: float = 0.0
    lab: float = 0.0
    hw: float = 0.0

    def get(self, mode: DeliveryMode) -> float:
        return getattr(self, mode.value)

    @property
    def label(self) -> str:
        return (
            f"Summary\nLecture {self.lecture:.2f} weeks"
            f"\nLab {self.lab:.2f} weeks\nHW {self.hw:.2f} weeks"
        )
