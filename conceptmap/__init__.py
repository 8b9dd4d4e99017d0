"""
Concept Map
===========

Turns a table of curriculum concepts and their prerequisites into an
annotated dependency graph. Each concept is labelled with its earliest
start: the lecture weight of everything that has to be taught before it.

Pipeline:

    records  ->  GraphBuilder  ->  validate()  ->  ClosureSolver / total_weights  ->  ConceptReport
    (input_parser)                 (AcyclicGraph | CyclicGraph)                       (render, graph_helpers)

Problems in the data (duplicate concepts, unknown prerequisites, cycles)
are collected as diagnostics and never stop the run.

Usage:

    from conceptmap import read_records, build_report, render_dot

    report = build_report(read_records("concepts.csv"))
    if report.errors():
        print(report.errors())
    print(render_dot(report))
"""

__version__ = "0.1.0"

from .builder import ConceptGraph, GraphBuilder, InsertResult
from .diagnostics import Diagnostic, DiagnosticKind, Diagnostics
from .exceptions import (
    CircularDependencyError,
    ConceptMapError,
    MissingColumnsError,
    PaletteExhaustedError,
)
from .input_parser import load_table, parse_df, read_records
from .models import (
    Concept,
    ConceptRecord,
    DeliveryMode,
    Modality,
    Modes,
    WorkloadTotals,
)
from .render import build_dot, render_dot
from .report import ConceptReport, assemble_report, build_report
from .validator import AcyclicGraph, CyclicGraph, validate
from .workload import ClosureSolver, solve_earliest_starts, total_weights

__all__ = [
    "__version__",
    # Models
    "Concept",
    "ConceptRecord",
    "DeliveryMode",
    "Modality",
    "Modes",
    "WorkloadTotals",
    # Diagnostics and errors
    "Diagnostic",
    "DiagnosticKind",
    "Diagnostics",
    "ConceptMapError",
    "CircularDependencyError",
    "MissingColumnsError",
    "PaletteExhaustedError",
    # Pipeline
    "GraphBuilder",
    "ConceptGraph",
    "InsertResult",
    "validate",
    "AcyclicGraph",
    "CyclicGraph",
    "ClosureSolver",
    "solve_earliest_starts",
    "total_weights",
    "ConceptReport",
    "assemble_report",
    "build_report",
    # Input / output
    "load_table",
    "parse_df",
    "read_records",
    "build_dot",
    "render_dot",
]
