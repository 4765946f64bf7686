"""Render a comparison of two dependency trees as text or JSON."""

from __future__ import annotations

import json
from typing import Any

from gradledepcheck.models import (
    ChangeKind,
    DependencyDiffEntry,
    DependencyDiffResult,
    ReportFormat,
)


def report(
    entries: list[DependencyDiffEntry],
    result: DependencyDiffResult,
    format: ReportFormat,
) -> str:
    """Describe ``entries`` (a selection of ``result``) in the requested format."""
    if format is ReportFormat.JSON:
        return _json_report(entries, result)
    return _text_report(entries, result)


def _sorted(entries: list[DependencyDiffEntry]) -> list[DependencyDiffEntry]:
    return sorted(entries, key=lambda entry: entry.coordinate)


def _text_report(entries: list[DependencyDiffEntry], result: DependencyDiffResult) -> str:
    if not entries:
        return f"No differences found between {result.baseline_name} and {result.current_name}."

    lines = [
        f"Dependency Diff: {result.baseline_name} → {result.current_name}",
        "=" * 60,
        "",
    ]

    counts = (
        (len(result.added()), "added"),
        (len(result.removed()), "removed"),
        (len(result.version_changed()), "changed"),
        (len(result.unchanged()), "unchanged"),
    )
    summary = ", ".join(f"{count} {label}" for count, label in counts if count > 0)
    lines.append(f"Summary: {summary}")
    lines.append("")

    for entry in _sorted(entries):
        before = entry.effective_before_version() or "-"
        after = entry.effective_after_version() or "-"
        kind = entry.change_kind
        if kind is ChangeKind.ADDED:
            lines.append(f"  + {entry.coordinate}:{after}")
        elif kind is ChangeKind.REMOVED:
            lines.append(f"  - {entry.coordinate}:{before}")
        elif kind is ChangeKind.VERSION_CHANGED:
            lines.append(f"  ~ {entry.coordinate}: {before} → {after}")
        else:
            lines.append(f"  = {entry.coordinate}:{before}")

    return "\n".join(lines)


def _entry_dict(entry: DependencyDiffEntry) -> dict[str, Any]:
    data: dict[str, Any] = {
        "coordinate": entry.coordinate,
        "changeKind": entry.change_kind.value,
    }
    before = entry.effective_before_version()
    if before is not None:
        data["beforeVersion"] = before
    after = entry.effective_after_version()
    if after is not None:
        data["afterVersion"] = after
    return data


def _json_report(entries: list[DependencyDiffEntry], result: DependencyDiffResult) -> str:
    document = {
        "baseline": result.baseline_name,
        "current": result.current_name,
        "added": len(result.added()),
        "removed": len(result.removed()),
        "changed": len(result.version_changed()),
        "unchanged": len(result.unchanged()),
        "entries": [_entry_dict(entry) for entry in _sorted(entries)],
    }
    return json.dumps(document, indent=2, sort_keys=True, ensure_ascii=False)