"""Render scope-validation findings as text or JSON."""

from __future__ import annotations

import json

from gradledepcheck.models import DependencyTree, ReportFormat, ScopeValidationResult


def report(
    results: list[ScopeValidationResult],
    tree: DependencyTree,
    format: ReportFormat,
) -> str:
    """Describe test libraries found in production scopes, in the requested format."""
    if format is ReportFormat.JSON:
        return _json_report(results, tree)
    return _text_report(results, tree)


def _text_report(results: list[ScopeValidationResult], tree: DependencyTree) -> str:
    heading = f"{tree.project_name} ({tree.configuration.display_name()})"
    if not results:
        return f"No scope issues found in {heading}."

    lines = [f"Scope Validation Issues in {heading}", "=" * 60, ""]
    for result in results:
        lines.append(f"  {result.coordinate}:{result.version}")
        lines.append(f"    detected as: {result.matched_library}")
        lines.append(f"    recommendation: {result.recommendation}")
        lines.append("")

    lines.append(f"Total: {len(results)} issue(s)")
    return "\n".join(lines)


def _json_report(results: list[ScopeValidationResult], tree: DependencyTree) -> str:
    document = {
        "projectName": tree.project_name,
        "configuration": tree.configuration.value,
        "issueCount": len(results),
        "issues": [
            {
                "coordinate": result.coordinate,
                "version": result.version,
                "matchedLibrary": result.matched_library,
                "configuration": result.configuration.value,
                "recommendation": result.recommendation,
            }
            for result in results
        ],
    }
    return json.dumps(document, indent=2, sort_keys=True, ensure_ascii=False)