"""Parse Gradle dependency trees and render reports, DOT graphs and exports."""

__version__ = "0.1.0"

__all__ = [
    "build_file_parser",
    "conflict_report",
    "diff_report",
    "dot_export",
    "duplicate_report",
    "gradle_runner",
    "models",
    "process_runner",
    "project_list_parser",
    "scope_validation_report",
    "table_report",
    "tree_export",
    "tree_parser",
]