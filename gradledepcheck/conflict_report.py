"""Render the version conflicts of a dependency tree as text or JSON."""

from __future__ import annotations

import json
from collections import defaultdict
from typing import Any

from gradledepcheck.models import DependencyConflict, DependencyTree, ReportFormat


def report(tree: DependencyTree, format: ReportFormat) -> str:
    """Describe the conflicts recorded in ``tree`` in the requested format."""
    if format is ReportFormat.JSON:
        return _json_report(tree)
    return _text_report(tree)


def _text_report(tree: DependencyTree) -> str:
    heading = f"{tree.project_name} ({tree.configuration.display_name()})"
    if not tree.conflicts:
        return f"No dependency conflicts found in {heading}."

    grouped: dict[str, list[DependencyConflict]] = defaultdict(list)
    for conflict in tree.conflicts:
        grouped[conflict.coordinate].append(conflict)

    lines = [f"Dependency Conflicts in {heading}", "=" * 60, ""]
    for coordinate in sorted(grouped):
        lines.append(f"  {coordinate}")
        for conflict in grouped[coordinate]:
            risk_suffix = f" [{conflict.risk_level}]" if conflict.risk_level is not None else ""
            lines.append(
                f"    {conflict.requested_version} -> {conflict.resolved_version}"
                f" (requested by {conflict.requested_by}){risk_suffix}"
            )
            if conflict.risk_reason is not None:
                lines.append(f"    risk: {conflict.risk_reason}")
        lines.append("")

    lines.append(
        f"Total: {len(tree.conflicts)} conflict(s) across {len(grouped)} dependency(ies)"
    )
    return "\n".join(lines)


def _json_report(tree: DependencyTree) -> str:
    document = {
        "projectName": tree.project_name,
        "configuration": tree.configuration.value,
        "conflictCount": len(tree.conflicts),
        "conflicts": [conflict.to_dict() for conflict in tree.conflicts],
    }
    return _to_json(document)


def _to_json(document: Any) -> str:
    return json.dumps(document, indent=2, sort_keys=True, ensure_ascii=False)