# gradledepcheck

A small library for working with Gradle dependency trees. It reads the ASCII
trees that Gradle prints, records version conflicts, and turns trees and
analysis results into text or JSON reports, Graphviz DOT graphs, and
re-importable exports. It can also run a project's `gradlew` wrapper to get
that output.

It has no third-party runtime dependencies.

## Data model

`gradledepcheck.models` holds the types everything else works on:

- `GradleConfiguration` — `COMPILE_CLASSPATH`, `RUNTIME_CLASSPATH`,
  `TEST_COMPILE_CLASSPATH`, `TEST_RUNTIME_CLASSPATH`.
  `GradleConfiguration.from_str("compileClasspath")` looks one up by its Gradle
  name (raising `ValueError` for an unknown name), and `display_name()` gives
  e.g. `"Compile Classpath"`.
- `DependencyNode` — group, artifact, requested and resolved versions, the
  omitted and constraint flags, and children. `coordinate()`,
  `display_version()` and `has_conflict()` describe it; `walk()` yields it and
  all its descendants.
- `DependencyTree` — project name, configuration, root nodes and
  `DependencyConflict` records, with `nodes()`, `total_node_count()` and
  `to_dict()` / `from_dict()`.
- Result types consumed by the reports: `FlatDependencyEntry`,
  `ScopeValidationResult`, `DuplicateDependencyResult` (with `DuplicateKind`),
  and `DependencyDiffEntry` / `DependencyDiffResult` (with `ChangeKind`).
- `ReportFormat` — `TEXT` or `JSON`.

## Parsing

- `tree_parser.parse(output, project_name, configuration)` turns the output of
  `gradlew dependencies` into a `DependencyTree`, recording a conflict for
  every node whose resolved version differs from the requested one. Omitted
  (`(*)`) and constraint (`(c)`) markers are kept; `(n)` entries and project
  dependencies are skipped.
- `build_file_parser.parse(content)` finds dependency declarations in
  `build.gradle` and `build.gradle.kts` content (Groovy strings, Kotlin DSL
  calls and Groovy map notation), skipping commented lines and returning
  `DependencyDeclaration` objects with 1-based line numbers.
- `project_list_parser.parse(output)` extracts the `GradleModule`s listed by
  `gradlew projects`.

## Reports

Each takes a `ReportFormat` and returns a string. JSON reports are indented
with sorted keys.

- `conflict_report.report(tree, format)` — conflicts grouped by coordinate.
- `table_report.report(entries, tree, format)` — a flat dependency list.
- `scope_validation_report.report(results, tree, format)` — test libraries
  found in production scopes.
- `duplicate_report.report(results, tree, format)` — cross-module and
  within-module duplicates.
- `diff_report.report(entries, result, format)` — changes between two trees,
  sorted by coordinate.

## Export and import

- `dot_export.export(tree)` produces a Graphviz `digraph`; nodes with a
  version conflict are filled `#ffcccc`, others `#e8f4e8`.
- `tree_export.export_json(tree)` and `tree_export.export_text(tree)` write a
  tree as JSON or as Gradle-style text.
- `tree_export.import_tree(data, file_name, fallback_configuration)` reads
  either form back from bytes or a string. For text input the project name is
  taken from the file name, with the extension and a trailing
  `-dependencies`, `-compileClasspath` or `-runtimeClasspath` removed. It
  raises `UnreadableFileError` (invalid UTF-8 or empty data) or
  `NoDependenciesFoundError`, both subclasses of `TreeImportError`.

## Running Gradle

- `process_runner.ProcessGradleRunner` runs `<project>/gradlew` in the project
  directory with `-q`: `run_dependencies`, `run_module_dependencies`,
  `run_dependency_insight` and `list_projects`. Failures raise subclasses of
  `gradle_runner.RunnerError`: `GradlewNotFoundError`, `LaunchFailedError` or
  `ExecutionFailedError` (with `exit_code` and `stderr`).
- `gradle_runner.GradleRunner` is the abstract interface it implements, so a
  stand-in can be supplied in tests.

## Example

```python
from gradledepcheck import conflict_report, dot_export, tree_parser
from gradledepcheck.models import GradleConfiguration, ReportFormat
from gradledepcheck.process_runner import ProcessGradleRunner

configuration = GradleConfiguration.from_str("compileClasspath")
runner = ProcessGradleRunner()

output = runner.run_dependencies("path/to/project", configuration)
tree = tree_parser.parse(output, "my-app", configuration)

print(conflict_report.report(tree, ReportFormat.TEXT))
print(dot_export.export(tree))
```

Saved output can be analysed without Gradle:

```python
from pathlib import Path

from gradledepcheck import tree_export
from gradledepcheck.models import GradleConfiguration

path = Path("my-app-dependencies.txt")
tree = tree_export.import_tree(
    path.read_bytes(),
    path.name,
    GradleConfiguration.from_str("compileClasspath"),
)
print(tree.project_name)         # "my-app"
print(tree.total_node_count())
print(tree_export.export_json(tree))
```

## What it does not do

- There is no command-line program; everything is used from Python.
- The reports render results they are given. The package does not itself
  compute flat dependency tables, scope-validation findings, duplicate
  findings, tree diffs or conflict risk levels, and does not merge per-module
  trees into one multi-module tree; callers build those result objects.