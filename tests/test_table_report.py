import json

from gradledepcheck.models import (
    DependencyTree,
    FlatDependencyEntry,
    GradleConfiguration,
    ReportFormat,
)
from gradledepcheck.table_report import report


def _tree():
    return DependencyTree("test-project", GradleConfiguration.COMPILE_CLASSPATH, [], [])


def _conflicting():
    return FlatDependencyEntry(
        coordinate="com.google.guava:guava",
        group="com.google.guava",
        artifact="guava",
        version="31.1-jre",
        has_conflict=True,
        occurrence_count=2,
        used_by=["org.springframework:spring-core", "com.example:my-app"],
        versions={"31.1-jre", "30.0-jre"},
    )


def _plain():
    return FlatDependencyEntry(
        coordinate="org.slf4j:slf4j-api",
        group="org.slf4j",
        artifact="slf4j-api",
        version="1.7.36",
        has_conflict=False,
        occurrence_count=1,
        used_by=[],
        versions={"1.7.36"},
    )


def _heading(tree):
    return f"{tree.project_name} ({tree.configuration.display_name()})"


def test_empty_entries_message():
    tree = _tree()
    assert report([], tree, ReportFormat.TEXT) == f"No dependencies found in {_heading(tree)}."


def test_text_report_layout_and_total():
    tree = _tree()
    entries = [_conflicting(), _plain()]
    lines = report(entries, tree, ReportFormat.TEXT).split("\n")
    assert lines[0] == f"Dependencies in {_heading(tree)}"
    assert lines[1] == "=" * 60
    assert lines[-2] == ""
    assert lines[-1] == f"Total: {len(entries)} unique dependency(ies)"


def test_conflicting_entry_lists_sorted_versions_and_users():
    lines = report([_conflicting()], _tree(), ReportFormat.TEXT).split("\n")
    assert (
        "  com.google.guava:guava:31.1-jre [CONFLICT] (versions: 30.0-jre, 31.1-jre)" in lines
    )
    assert "    used by: org.springframework:spring-core, com.example:my-app" in lines


def test_plain_entry_has_no_markers_or_users():
    lines = report([_plain()], _tree(), ReportFormat.TEXT).split("\n")
    assert "  org.slf4j:slf4j-api:1.7.36" in lines
    assert all("used by" not in line for line in lines)


def test_json_report_fields():
    entries = [_conflicting(), _plain()]
    parsed = json.loads(report(entries, _tree(), ReportFormat.JSON))
    assert parsed["projectName"] == "test-project"
    assert parsed["configuration"] == GradleConfiguration.COMPILE_CLASSPATH.value
    assert parsed["dependencyCount"] == len(entries)
    first, second = parsed["dependencies"]
    assert first["coordinate"] == "com.google.guava:guava"
    assert first["group"] == "com.google.guava"
    assert first["artifact"] == "guava"
    assert first["hasConflict"] is True
    assert first["occurrenceCount"] == 2
    assert first["usedBy"] == ["org.springframework:spring-core", "com.example:my-app"]
    assert first["versions"] == sorted(first["versions"])
    assert set(first["versions"]) == {"31.1-jre", "30.0-jre"}
    assert second["usedBy"] == []
    assert second["hasConflict"] is False


def test_json_report_empty():
    parsed = json.loads(report([], _tree(), ReportFormat.JSON))
    assert parsed["dependencyCount"] == 0
    assert parsed["dependencies"] == []