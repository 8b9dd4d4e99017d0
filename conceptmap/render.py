"""
DOT rendering of a ConceptReport with pydot.

Concept nodes are colored by category, a summary node shows the curriculum
totals and one legend node is added per category.
"""

import logging

import pydot

from .config import (
    CATEGORY_PALETTE,
    NODE_PENWIDTH,
    SUMMARY_FONTSIZE,
    SUMMARY_NODE,
    UNCATEGORIZED_LABEL,
)
from .exceptions import PaletteExhaustedError

logger = logging.getLogger(__name__)


def assign_colors(categories, palette=CATEGORY_PALETTE):
    """
    input: distinct categories in first-seen order, color palette
    output: {category: color}
    """
    categories = list(categories)
    if len(categories) > len(palette):
        raise PaletteExhaustedError(categories, len(palette))
    return dict(zip(categories, palette))


def node_id(position):
    return f"c{position}"


def dot_label(text):
    # graphviz wants escaped line breaks inside labels
    return text.replace("\n", "\\n")


def build_dot(report, palette=CATEGORY_PALETTE):
    """Build the pydot graph; raises PaletteExhaustedError before adding anything."""
    categories = report.categories()
    colors = assign_colors(categories, palette)

    dot = pydot.Dot(graph_type="digraph")
    dot.set_node_defaults(penwidth=NODE_PENWIDTH)

    for node in report.nodes():
        dot.add_node(
            pydot.Node(node_id(node.position), label=dot_label(node.label), color=colors[node.category])
        )

    dot.add_node(
        pydot.Node(
            SUMMARY_NODE,
            label=dot_label(report.totals.label),
            shape="none",
            fontsize=SUMMARY_FONTSIZE,
        )
    )

    for i, cat in enumerate(categories):
        dot.add_node(
            pydot.Node(
                f"category{i}",
                label=cat or UNCATEGORIZED_LABEL,
                style="filled",
                shape="rectangle",
                color=colors[cat],
            )
        )

    for src, dst in report.edges():
        dot.add_edge(
            pydot.Edge(
                node_id(report.graph.lookup[src]),
                node_id(report.graph.lookup[dst]),
            )
        )
    logger.info("Rendered %d concepts, %d edges, %d categories",
                len(report.concepts), len(report.edges()), len(categories))
    return dot


def render_dot(report, palette=CATEGORY_PALETTE):
    return build_dot(report, palette).to_string()
