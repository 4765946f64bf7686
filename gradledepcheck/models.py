"""Core data types describing Gradle dependency trees and analysis results."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class GradleConfiguration(Enum):
    """A Gradle configuration whose dependencies can be resolved."""

    COMPILE_CLASSPATH = "compileClasspath"
    RUNTIME_CLASSPATH = "runtimeClasspath"
    TEST_COMPILE_CLASSPATH = "testCompileClasspath"
    TEST_RUNTIME_CLASSPATH = "testRuntimeClasspath"

    @classmethod
    def from_str(cls, text: str) -> GradleConfiguration:
        """Return the configuration named exactly ``text``; raise ValueError otherwise."""
        for member in cls:
            if member.value == text:
                return member
        raise ValueError(f"Unknown configuration: {text}")

    def display_name(self) -> str:
        """Human-readable name, e.g. ``Compile Classpath``."""
        spaced = re.sub(r"(?<!^)(?=[A-Z])", " ", self.value)
        return spaced[:1].upper() + spaced[1:]


class ReportFormat(Enum):
    TEXT = "text"
    JSON = "json"


class ChangeKind(Enum):
    ADDED = "added"
    REMOVED = "removed"
    VERSION_CHANGED = "versionChanged"
    UNCHANGED = "unchanged"


class DuplicateKind(Enum):
    CROSS_MODULE = "crossModule"
    WITHIN_MODULE = "withinModule"


@dataclass(frozen=True)
class GradleModule:
    name: str
    path: str


@dataclass(frozen=True)
class DependencyDeclaration:
    """A dependency declared in a build file, with its 1-based line number."""

    configuration: str
    group: str
    artifact: str
    version: str
    line: int


def _require(data: Any, key: str, kind: type) -> Any:
    if not isinstance(data, dict):
        raise ValueError(f"Expected an object, got {type(data).__name__}")
    if key not in data:
        raise ValueError(f"Missing field: {key}")
    value = data[key]
    if not isinstance(value, kind):
        raise ValueError(f"Field {key} has the wrong type")
    return value


def _optional(data: dict, key: str, kind: type, default: Any) -> Any:
    value = data.get(key, default)
    if value is None:
        return default
    if not isinstance(value, kind):
        raise ValueError(f"Field {key} has the wrong type")
    return value


@dataclass
class DependencyNode:
    """One resolved dependency and its transitive children."""

    group: str
    artifact: str
    requested_version: str
    resolved_version: str | None = None
    is_omitted: bool = False
    is_constraint: bool = False
    children: list[DependencyNode] = field(default_factory=list)
    id: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            self.id = self._canonical_id()

    def _canonical_id(self) -> str:
        return f"{self.group}:{self.artifact}:{self.requested_version}"

    def coordinate(self) -> str:
        return f"{self.group}:{self.artifact}"

    def display_version(self) -> str:
        """The resolved version if one is known, else the requested version."""
        return self.resolved_version if self.resolved_version is not None else self.requested_version

    def has_conflict(self) -> bool:
        return self.resolved_version is not None and self.resolved_version != self.requested_version

    def walk(self):
        """Yield this node and every descendant, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "group": self.group,
            "artifact": self.artifact,
            "requestedVersion": self.requested_version,
        }
        if self.resolved_version is not None:
            data["resolvedVersion"] = self.resolved_version
        data["isOmitted"] = self.is_omitted
        data["isConstraint"] = self.is_constraint
        data["children"] = [child.to_dict() for child in self.children]
        return data

    @classmethod
    def from_dict(cls, data: Any) -> DependencyNode:
        """Build a node from its dictionary form; raise ValueError if malformed."""
        group = _require(data, "group", str)
        artifact = _require(data, "artifact", str)
        requested = _require(data, "requestedVersion", str)
        children = _optional(data, "children", list, [])
        return cls(
            group,
            artifact,
            requested,
            resolved_version=_optional(data, "resolvedVersion", str, None),
            is_omitted=_optional(data, "isOmitted", bool, False),
            is_constraint=_optional(data, "isConstraint", bool, False),
            children=[cls.from_dict(child) for child in children],
        )


@dataclass
class DependencyConflict:
    coordinate: str
    requested_version: str
    resolved_version: str
    requested_by: str
    risk_level: str | None = None
    risk_reason: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "coordinate": self.coordinate,
            "requestedVersion": self.requested_version,
            "resolvedVersion": self.resolved_version,
            "requestedBy": self.requested_by,
        }
        if self.risk_level is not None:
            data["riskLevel"] = self.risk_level
        if self.risk_reason is not None:
            data["riskReason"] = self.risk_reason
        return data

    @classmethod
    def from_dict(cls, data: Any) -> DependencyConflict:
        """Build a conflict from its dictionary form; raise ValueError if malformed."""
        return cls(
            coordinate=_require(data, "coordinate", str),
            requested_version=_require(data, "requestedVersion", str),
            resolved_version=_require(data, "resolvedVersion", str),
            requested_by=_require(data, "requestedBy", str),
            risk_level=_optional(data, "riskLevel", str, None),
            risk_reason=_optional(data, "riskReason", str, None),
        )


@dataclass
class DependencyTree:
    project_name: str
    configuration: GradleConfiguration
    roots: list[DependencyNode] = field(default_factory=list)
    conflicts: list[DependencyConflict] = field(default_factory=list)

    def nodes(self):
        """Yield every node in the tree, depth first."""
        for root in self.roots:
            yield from root.walk()

    def total_node_count(self) -> int:
        return sum(1 for _ in self.nodes())

    def assign_ids(self) -> None:
        """Give every node its canonical identifier."""
        for node in self.nodes():
            node.id = node._canonical_id()

    def to_dict(self) -> dict[str, Any]:
        return {
            "projectName": self.project_name,
            "configuration": self.configuration.value,
            "roots": [root.to_dict() for root in self.roots],
            "conflicts": [conflict.to_dict() for conflict in self.conflicts],
        }

    @classmethod
    def from_dict(cls, data: Any) -> DependencyTree:
        """Build a tree from its dictionary form; raise ValueError if malformed."""
        project_name = _require(data, "projectName", str)
        configuration = GradleConfiguration.from_str(_require(data, "configuration", str))
        roots = _require(data, "roots", list)
        conflicts = _require(data, "conflicts", list)
        return cls(
            project_name=project_name,
            configuration=configuration,
            roots=[DependencyNode.from_dict(root) for root in roots],
            conflicts=[DependencyConflict.from_dict(conflict) for conflict in conflicts],
        )


@dataclass
class ScopeValidationResult:
    coordinate: str
    version: str
    matched_library: str
    configuration: GradleConfiguration
    recommendation: str


@dataclass
class DuplicateDependencyResult:
    coordinate: str
    kind: DuplicateKind
    modules: list[str]
    versions: dict[str, str]
    has_version_mismatch: bool
    recommendation: str


@dataclass
class FlatDependencyEntry:
    coordinate: str
    group: str
    artifact: str
    version: str
    has_conflict: bool
    occurrence_count: int
    used_by: list[str] = field(default_factory=list)
    versions: set[str] = field(default_factory=set)


@dataclass
class DependencyDiffEntry:
    coordinate: str
    change_kind: ChangeKind
    before_version: str | None = None
    after_version: str | None = None
    before_resolved_version: str | None = None
    after_resolved_version: str | None = None

    def effective_before_version(self) -> str | None:
        return self.before_resolved_version if self.before_resolved_version is not None else self.before_version

    def effective_after_version(self) -> str | None:
        return self.after_resolved_version if self.after_resolved_version is not None else self.after_version


@dataclass
class DependencyDiffResult:
    baseline_name: str
    current_name: str
    entries: list[DependencyDiffEntry] = field(default_factory=list)

    def _of_kind(self, kind: ChangeKind) -> list[DependencyDiffEntry]:
        return [entry for entry in self.entries if entry.change_kind is kind]

    def added(self) -> list[DependencyDiffEntry]:
        return self._of_kind(ChangeKind.ADDED)

    def removed(self) -> list[DependencyDiffEntry]:
        return self._of_kind(ChangeKind.REMOVED)

    def version_changed(self) -> list[DependencyDiffEntry]:
        return self._of_kind(ChangeKind.VERSION_CHANGED)

    def unchanged(self) -> list[DependencyDiffEntry]:
        return self._of_kind(ChangeKind.UNCHANGED)