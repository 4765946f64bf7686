"""Render duplicate-dependency findings as text or JSON."""

from __future__ import annotations

import json
from typing import Any

from gradledepcheck.models import (
    DependencyTree,
    DuplicateDependencyResult,
    DuplicateKind,
    ReportFormat,
)


def report(
    results: list[DuplicateDependencyResult],
    tree: DependencyTree,
    format: ReportFormat,
) -> str:
    """Describe ``results`` for ``tree`` in the requested format."""
    if format is ReportFormat.JSON:
        return _json_report(results, tree)
    return _text_report(results, tree)


def _text_report(results: list[DuplicateDependencyResult], tree: DependencyTree) -> str:
    heading = f"{tree.project_name} ({tree.configuration.display_name()})"
    if not results:
        return f"No duplicate dependencies found in {heading}."

    lines = [f"Duplicate Dependencies in {heading}", "=" * 60, ""]

    cross_module = [r for r in results if r.kind is DuplicateKind.CROSS_MODULE]
    within_module = [r for r in results if r.kind is DuplicateKind.WITHIN_MODULE]

    if cross_module:
        lines.extend(["Cross-module duplicates:", ""])
        for result in cross_module:
            mismatch = " [VERSION MISMATCH]" if result.has_version_mismatch else ""
            lines.append(f"  {result.coordinate}{mismatch}")
            lines.append(f"    modules: {', '.join(result.modules)}")
            for module, version in sorted(result.versions.items()):
                lines.append(f"    {module}: {version}")
            lines.append(f"    recommendation: {result.recommendation}")
            lines.append("")

    if within_module:
        lines.extend(["Within-module duplicates:", ""])
        for result in within_module:
            lines.append(f"  {result.coordinate}")
            lines.append(f"    {result.recommendation}")
            lines.append("")

    lines.append(
        f"Total: {len(results)} duplicate(s) "
        f"({len(cross_module)} cross-module, {len(within_module)} within-module)"
    )
    return "\n".join(lines)


def _result_dict(result: DuplicateDependencyResult) -> dict[str, Any]:
    return {
        "coordinate": result.coordinate,
        "kind": result.kind.value,
        "modules": list(result.modules),
        "versions": dict(result.versions),
        "hasVersionMismatch": result.has_version_mismatch,
        "recommendation": result.recommendation,
    }


def _json_report(results: list[DuplicateDependencyResult], tree: DependencyTree) -> str:
    document = {
        "projectName": tree.project_name,
        "configuration": tree.configuration.value,
        "duplicateCount": len(results),
        "duplicates": [_result_dict(result) for result in results],
    }
    return json.dumps(document, indent=2, sort_keys=True, ensure_ascii=False)