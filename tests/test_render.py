import pytest

from conceptmap.config import CATEGORY_PALETTE
from conceptmap.exceptions import PaletteExhaustedError
from conceptmap.render import assign_colors, build_dot, render_dot
from conceptmap.report import build_report

from .conftest import rec


def _attr(dot, name, key):
    [node] = dot.get_node(name)
    return str(node.get(key)).strip('"')


def test_concept_nodes_are_labelled_and_colored(chain_records):
    dot = build_dot(build_report(chain_records))

    assert _attr(dot, "c0", "label") == "A\\nearliest: 5.00"
    assert _attr(dot, "c0", "color") == CATEGORY_PALETTE[0]
    assert _attr(dot, "c2", "color") == CATEGORY_PALETTE[1]


def test_summary_and_legend_nodes(chain_records):
    dot = build_dot(build_report(chain_records + [rec("D")]))

    assert _attr(dot, "summary", "label") == (
        "Summary\\nLecture 6.00 weeks\\nLab 0.00 weeks\\nHW 0.00 weeks"
    )
    assert _attr(dot, "summary", "shape") == "none"
    assert _attr(dot, "category0", "label") == "algebra"
    assert _attr(dot, "category1", "label") == "sets"
    assert _attr(dot, "category2", "label") == "uncategorized"
    assert _attr(dot, "category2", "style") == "filled"
    assert _attr(dot, "category2", "color") == CATEGORY_PALETTE[2]


def test_edges_point_from_concept_to_dependency(chain_records):
    dot = build_dot(build_report(chain_records))
    edges = sorted((e.get_source(), e.get_destination()) for e in dot.get_edges())
    assert edges == [("c0", "c1"), ("c1", "c2")]


def test_render_dot_returns_digraph_text(chain_records):
    text = render_dot(build_report(chain_records))
    assert text.lstrip().startswith("digraph")
    assert "c0 -> c1" in text


def test_too_many_categories_is_fatal():
    records = [rec(f"c{i}", category=f"cat{i}") for i in range(len(CATEGORY_PALETTE) + 1)]
    with pytest.raises(PaletteExhaustedError) as excinfo:
        build_dot(build_report(records))
    assert excinfo.value.capacity == len(CATEGORY_PALETTE)


def test_palette_capacity_is_usable():
    categories = [f"cat{i}" for i in range(len(CATEGORY_PALETTE))]
    assert assign_colors(categories) == dict(zip(categories, CATEGORY_PALETTE))
