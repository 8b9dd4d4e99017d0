from conceptmap.diagnostics import DiagnosticKind
from conceptmap.models import WorkloadTotals
from conceptmap.report import build_report

from .conftest import rec


def test_clean_report(chain_records):
    report = build_report(chain_records)

    assert report.errors() is None
    assert report.acyclic
    assert report.order == ("C", "B", "A")
    assert report.earliest_starts == {"A": 5.0, "B": 3.0, "C": 0.0}
    assert report.totals == WorkloadTotals(lecture=6.0)
    assert report.edges() == [("A", "B"), ("B", "C")]
    assert report.categories() == ["algebra", "sets"]
    assert [n.label for n in report.nodes()] == [
        "A\nearliest: 5.00",
        "B\nearliest: 3.00",
        "C\nearliest: 0.00",
    ]


def test_report_collects_every_kind_of_problem():
    report = build_report([
        rec("A", "B; Missing", lecture=1.0),
        rec("B", "A", lecture=2.0),
        rec("A", "", lecture=9.0),
        rec("C", "", lecture=3.0),
        rec("D", "C", lecture=0.5),
    ])

    kinds = [d.kind for d in report.diagnostics]
    assert kinds == [
        DiagnosticKind.REDUNDANT,
        DiagnosticKind.DANGLING,
        DiagnosticKind.CIRCULAR,
    ]
    assert report.errors() == (
        '- Found redundant copy of concept "A" in record 3 (redundant with record 1). '
        "Ignoring concept entry.\n"
        '- Dependency on "Missing" in concept "A" in record 1 does not correspond to a '
        "concept. Ignoring dependency.\n"
        "- Circular conceptual dependencies including (or depended on by) 2 concepts: A, B.\n"
    )

    assert not report.acyclic
    assert report.pending == {"A", "B"}
    assert report.earliest_starts == {"A": None, "B": None, "C": 0.0, "D": 3.0}
    assert report.graph.get("A").label == "A\nearliest: n/a"
    # totals still computed over every surviving concept
    assert report.totals.lecture == 6.5
    # dangling edges gone, cycle edges kept
    assert report.edges() == [("A", "B"), ("B", "A"), ("D", "C")]


def test_uncategorized_concepts_share_one_category():
    report = build_report([rec("A"), rec("B", category="  "), rec("C", category="x")])
    assert report.categories() == ["", "x"]
