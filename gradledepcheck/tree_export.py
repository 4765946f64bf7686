"""Export dependency trees as JSON or Gradle text, and import them back."""

from __future__ import annotations

import json
from collections.abc import Iterator

from gradledepcheck import tree_parser
from gradledepcheck.models import DependencyNode, DependencyTree, GradleConfiguration

_NAME_SUFFIXES = ("-dependencies", "-compileClasspath", "-runtimeClasspath")


class TreeImportError(Exception):
    """A file could not be turned into a dependency tree."""


class UnreadableFileError(TreeImportError):
    """The file's contents could not be read as text."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Unreadable file: {reason}")
        self.reason = reason


class NoDependenciesFoundError(TreeImportError):
    """The file was read but held no dependencies."""

    def __init__(self) -> None:
        super().__init__("No dependencies found in file")


def export_json(tree: DependencyTree) -> str:
    """Serialise ``tree`` as indented JSON."""
    return json.dumps(tree.to_dict(), indent=2, ensure_ascii=False)


def export_text(tree: DependencyTree) -> str:
    """Render ``tree`` in the ASCII layout of ``gradle dependencies``."""
    lines: list[str] = []
    last_index = len(tree.roots) - 1
    for index, root in enumerate(tree.roots):
        lines.extend(_render_node(root, "", index == last_index))
    return "\n".join(lines)


def _render_node(node: DependencyNode, prefix: str, is_last: bool) -> Iterator[str]:
    connector = "\\---" if is_last else "+---"
    label = f"{node.coordinate()}:{node.display_version()}"
    if node.is_omitted:
        label += " (*)"
    if node.is_constraint:
        label += " (c)"
    yield f"{prefix}{connector} {label}"

    child_prefix = prefix + ("     " if is_last else "|    ")
    last_index = len(node.children) - 1
    for index, child in enumerate(node.children):
        yield from _render_node(child, child_prefix, index == last_index)


def import_tree(
    data: bytes | str,
    file_name: str,
    fallback_configuration: GradleConfiguration,
) -> DependencyTree:
    """Read a tree from exported JSON or Gradle text, detecting which it is.

    Raises UnreadableFileError for undecodable or empty data and
    NoDependenciesFoundError when the text holds no dependencies.
    """
    if isinstance(data, str):
        text = data
    else:
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError:
            raise UnreadableFileError("Not valid UTF-8") from None

    try:
        tree = DependencyTree.from_dict(json.loads(text))
    except ValueError:
        pass
    else:
        tree.assign_ids()
        return tree

    if not text:
        raise UnreadableFileError("Empty file")

    tree = tree_parser.parse(text, _extract_project_name(file_name), fallback_configuration)
    if tree.total_node_count() == 0:
        raise NoDependenciesFoundError()
    return tree


def _extract_project_name(file_name: str) -> str:
    stem, dot, _ = file_name.rpartition(".")
    name = stem if dot else file_name
    for suffix in _NAME_SUFFIXES:
        if name.endswith(suffix):
            return name[: -len(suffix)]
    return name