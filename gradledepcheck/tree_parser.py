"""Parse Gradle's ASCII ``dependencies`` output into a DependencyTree."""

from __future__ import annotations

import re
from dataclasses import dataclass

from gradledepcheck.models import (
    DependencyConflict,
    DependencyNode,
    DependencyTree,
    GradleConfiguration,
)

_LINE_RE = re.compile(r"^([| ]*)[+\\]--- (.+)$")
_DEP_RE = re.compile(r"^([^:]+):([^:]+):(\S+)(.*)$")


@dataclass
class _Entry:
    node: DependencyNode
    depth: int


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def parse(output: str, project_name: str, configuration: GradleConfiguration) -> DependencyTree:
    """Build a tree from ``gradle dependencies`` output, recording version conflicts."""
    roots: list[DependencyNode] = []
    conflicts: list[DependencyConflict] = []
    stack: list[_Entry] = []

    for line in _lines(output):
        match = _LINE_RE.match(line)
        if match is None:
            continue
        prefix = match.group(1)
        dep_text = match.group(2).strip()

        if dep_text.endswith("(n)") or dep_text.startswith("project "):
            continue

        depth = len(prefix) // 5
        node = _parse_dependency(dep_text)
        if node is None:
            continue

        if node.has_conflict():
            requested_by = project_name
            if depth > 0:
                parent = next((e for e in reversed(stack) if e.depth == depth - 1), None)
                if parent is not None:
                    requested_by = parent.node.coordinate()
            conflicts.append(
                DependencyConflict(
                    coordinate=node.coordinate(),
                    requested_version=node.requested_version,
                    resolved_version=node.resolved_version or "",
                    requested_by=requested_by,
                )
            )

        if depth == 0:
            _finalize(stack, roots)
        else:
            while stack and stack[-1].depth >= depth:
                child = stack.pop()
                if not stack:
                    roots.append(child.node)
                    break
                parent_entry = stack[-1]
                if parent_entry.depth == child.depth - 1:
                    parent_entry.node.children.append(child.node)
                else:
                    stack.append(child)
                    break
        stack.append(_Entry(node, depth))

    _finalize(stack, roots)
    return DependencyTree(project_name, configuration, roots, conflicts)


def _finalize(stack: list[_Entry], roots: list[DependencyNode]) -> None:
    while stack:
        entry = stack.pop()
        if stack:
            stack[-1].node.children.append(entry.node)
        else:
            roots.append(entry.node)


def _parse_dependency(text: str) -> DependencyNode | None:
    is_omitted = "(*)" in text
    is_constraint = "(c)" in text
    clean = text.replace("(*)", "").replace("(c)", "").strip()

    left, arrow, right = clean.partition(" -> ")
    if arrow:
        left = left.strip()
        resolved = right.strip()
        match = _DEP_RE.match(left)
        if match is not None:
            group, artifact, requested = match.group(1), match.group(2), match.group(3)
            return DependencyNode(
                group,
                artifact,
                requested,
                resolved_version=resolved if resolved != requested else None,
                is_omitted=is_omitted,
                is_constraint=is_constraint,
            )
        parts = left.split(":", 2)
        if len(parts) >= 2:
            return DependencyNode(
                parts[0],
                parts[1],
                resolved,
                is_omitted=is_omitted,
                is_constraint=is_constraint,
            )

    match = _DEP_RE.match(clean)
    if match is None:
        return None
    rest = match.group(4)
    arrow_pos = rest.find("->")
    resolved_version = rest[arrow_pos + 2:].strip() if arrow_pos >= 0 else None
    return DependencyNode(
        match.group(1),
        match.group(2),
        match.group(3),
        resolved_version=resolved_version,
        is_omitted=is_omitted,
        is_constraint=is_constraint,
    )