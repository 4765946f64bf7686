import json

from gradledepcheck.diff_report import report
from gradledepcheck.models import (
    ChangeKind,
    DependencyDiffEntry,
    DependencyDiffResult,
    ReportFormat,
)


def _entries():
    return [
        DependencyDiffEntry("org.z:z-lib", ChangeKind.UNCHANGED, "1.0", "1.0"),
        DependencyDiffEntry("com.b:lib-b", ChangeKind.ADDED, after_version="2.0"),
        DependencyDiffEntry("com.c:lib-c", ChangeKind.REMOVED, before_version="3.0"),
        DependencyDiffEntry("com.a:lib-a", ChangeKind.VERSION_CHANGED, "1.0", "2.0"),
    ]


def _result(entries):
    return DependencyDiffResult("base", "cur", entries)


def test_empty_entries_message():
    result = _result(_entries())
    assert report([], result, ReportFormat.TEXT) == "No differences found between base and cur."


def test_text_report_lines_for_each_kind():
    entries = _entries()
    lines = report(entries, _result(entries), ReportFormat.TEXT).split("\n")
    assert lines[0] == "Dependency Diff: base → cur"
    assert lines[1] == "=" * 60
    assert "  + com.b:lib-b:2.0" in lines
    assert "  - com.c:lib-c:3.0" in lines
    assert "  ~ com.a:lib-a: 1.0 → 2.0" in lines
    assert "  = org.z:z-lib:1.0" in lines


def test_summary_counts_whole_result_and_skips_zero():
    entries = _entries()
    lines = report(entries, _result(entries), ReportFormat.TEXT).split("\n")
    assert lines[3] == "Summary: 1 added, 1 removed, 1 changed, 1 unchanged"

    only_added = [DependencyDiffEntry("com.b:lib-b", ChangeKind.ADDED, after_version="2.0")]
    lines = report(only_added, _result(only_added), ReportFormat.TEXT).split("\n")
    assert lines[3] == "Summary: 1 added"


def test_text_entries_sorted_by_coordinate():
    entries = _entries()
    lines = report(entries, _result(entries), ReportFormat.TEXT).split("\n")
    entry_lines = lines[5:]
    coordinates = [line[4:].split(":")[0] + ":" + line[4:].split(":")[1] for line in entry_lines]
    assert coordinates == sorted(coordinates)
    assert len(entry_lines) == len(entries)


def test_resolved_versions_take_precedence():
    entry = DependencyDiffEntry(
        "com.a:lib-a",
        ChangeKind.VERSION_CHANGED,
        before_version="1.0",
        after_version="2.0",
        before_resolved_version="1.1",
        after_resolved_version="2.1",
    )
    lines = report([entry], _result([entry]), ReportFormat.TEXT).split("\n")
    assert "  ~ com.a:lib-a: 1.1 → 2.1" in lines


def test_json_report_counts_and_entries():
    entries = _entries()
    parsed = json.loads(report(entries, _result(entries), ReportFormat.JSON))
    assert parsed["baseline"] == "base"
    assert parsed["current"] == "cur"
    assert parsed["added"] == 1
    assert parsed["removed"] == 1
    assert parsed["changed"] == 1
    assert parsed["unchanged"] == 1
    coords = [item["coordinate"] for item in parsed["entries"]]
    assert coords == sorted(coords)
    by_coord = {item["coordinate"]: item for item in parsed["entries"]}
    assert by_coord["com.b:lib-b"]["changeKind"] == ChangeKind.ADDED.value
    assert "beforeVersion" not in by_coord["com.b:lib-b"]
    assert by_coord["com.c:lib-c"]["beforeVersion"] == "3.0"
    assert "afterVersion" not in by_coord["com.c:lib-c"]
    assert by_coord["com.a:lib-a"]["afterVersion"] == "2.0"


def test_json_report_only_lists_given_entries():
    entries = _entries()
    subset = entries[:1]
    parsed = json.loads(report(subset, _result(entries), ReportFormat.JSON))
    assert len(parsed["entries"]) == 1
    assert parsed["added"] == 1