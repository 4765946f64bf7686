"""Render a dependency tree as a Graphviz DOT graph."""

from __future__ import annotations

from gradledepcheck.models import DependencyNode, DependencyTree

_CONFLICT_COLOR = "#ffcccc"
_NORMAL_COLOR = "#e8f4e8"


def export(tree: DependencyTree) -> str:
    """Return a ``digraph`` with one node per dependency and an edge per parent link."""
    lines = [
        "digraph dependencies {",
        "  rankdir=TB;",
        "  node [shape=box, style=filled];",
    ]
    visited: set[str] = set()
    for root in tree.roots:
        _emit_node(root, lines, visited)
    lines.append("}")
    return "\n".join(lines)


def _emit_node(node: DependencyNode, lines: list[str], visited: set[str]) -> None:
    node_id = _sanitize_id(node.id)
    if node_id in visited:
        return
    visited.add(node_id)

    label = f"{node.coordinate()}\\n{node.display_version()}"
    color = _CONFLICT_COLOR if node.has_conflict() else _NORMAL_COLOR
    lines.append(f'  "{node_id}" [label="{label}", fillcolor="{color}"];')

    for child in node.children:
        lines.append(f'  "{node_id}" -> "{_sanitize_id(child.id)}";')
        _emit_node(child, lines, visited)


def _sanitize_id(node_id: str) -> str:
    return node_id.replace('"', '\\"')