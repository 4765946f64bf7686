"""Render a flat list of dependencies as text or JSON."""

from __future__ import annotations

import json

from gradledepcheck.models import DependencyTree, FlatDependencyEntry, ReportFormat


def report(
    entries: list[FlatDependencyEntry],
    tree: DependencyTree,
    format: ReportFormat,
) -> str:
    """Describe ``entries`` of ``tree`` as a table in the requested format."""
    if format is ReportFormat.JSON:
        return _json_report(entries, tree)
    return _text_report(entries, tree)


def _text_report(entries: list[FlatDependencyEntry], tree: DependencyTree) -> str:
    heading = f"{tree.project_name} ({tree.configuration.display_name()})"
    if not entries:
        return f"No dependencies found in {heading}."

    lines = [f"Dependencies in {heading}", "=" * 60, ""]
    for entry in entries:
        conflict = " [CONFLICT]" if entry.has_conflict else ""
        versions = (
            f" (versions: {', '.join(sorted(entry.versions))})" if len(entry.versions) > 1 else ""
        )
        lines.append(f"  {entry.coordinate}:{entry.version}{conflict}{versions}")
        if entry.used_by:
            lines.append(f"    used by: {', '.join(entry.used_by)}")

    lines.append("")
    lines.append(f"Total: {len(entries)} unique dependency(ies)")
    return "\n".join(lines)


def _json_report(entries: list[FlatDependencyEntry], tree: DependencyTree) -> str:
    document = {
        "projectName": tree.project_name,
        "configuration": tree.configuration.value,
        "dependencyCount": len(entries),
        "dependencies": [
            {
                "coordinate": entry.coordinate,
                "group": entry.group,
                "artifact": entry.artifact,
                "version": entry.version,
                "hasConflict": entry.has_conflict,
                "occurrenceCount": entry.occurrence_count,
                "usedBy": list(entry.used_by),
                "versions": sorted(entry.versions),
            }
            for entry in entries
        ],
    }
    return json.dumps(document, indent=2, sort_keys=True, ensure_ascii=False)