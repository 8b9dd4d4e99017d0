import pytest

from conceptmap.builder import GraphBuilder
from conceptmap.diagnostics import Diagnostics
from conceptmap.models import ConceptRecord


def rec(name, deps="", category=None, lecture=0.0, lab=0.0, hw=0.0):
    return ConceptRecord(
        concept=name,
        dependencies=deps,
        category=category,
        lecture_weight=lecture,
        lab_weight=lab,
        hw_weight=hw,
    )


def build(records, diagnostics=None):
    diagnostics = diagnostics if diagnostics is not None else Diagnostics()
    builder = GraphBuilder(diagnostics)
    for r in records:
        builder.add(r)
    return builder.build(), diagnostics


@pytest.fixture
def chain_records():
    # A -> B -> C
    return [
        rec("A", "B", category="algebra", lecture=1.0),
        rec("B", "C", category="algebra", lecture=2.0),
        rec("C", "", category="sets", lecture=3.0),
    ]
