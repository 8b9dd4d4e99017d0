# front matter
import networkx as nx


def build_graph(report):
    """
    input: ConceptReport
    output: G → a networkx.DiGraph with one node per concept (label, category,
        earliest_start, lecture weight) and an edge concept → dependency
    """
    G = nx.DiGraph()
    for c in report.concepts:
        G.add_node(
            c.name,
            label=c.label,
            category=c.category,
            earliest_start=c.earliest_start,
            weight=c.weight(),
        )
    for source, target in report.edges():
        G.add_edge(source, target)
    return G


def layered_positions(G, order):
    """
    input: concept graph, topological order (may be partial)
    output: {node: (x, y)} with prerequisites on the left; nodes outside
        `order` (cycles) are stacked in an extra right-most column
    """
    depth = {}
    for node in order:
        depth[node] = max((depth[d] + 1 for d in G.successors(node) if d in depth), default=0)
    last = max(depth.values(), default=-1) + 1
    for node in G.nodes:
        depth.setdefault(node, last)
    columns = {}
    for node, x in depth.items():
        columns.setdefault(x, []).append(node)
    pos = {}
    for x, nodes in columns.items():
        for y, node in enumerate(nodes):
            pos[node] = (x, -y)
    return pos
