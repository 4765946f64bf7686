"""Extract dependency declarations from build.gradle and build.gradle.kts files."""

from __future__ import annotations

import re

from gradledepcheck.models import DependencyDeclaration

_CONFIGS = r"(implementation|testImplementation|api|compileOnly|runtimeOnly|annotationProcessor)"

_PATTERNS = (
    re.compile(_CONFIGS + r"""\s+['"]([^:]+):([^:]+):([^'"]+)['"]"""),
    re.compile(_CONFIGS + r"""\s*\(\s*["']([^:]+):([^:]+):([^"']+)["']\s*\)"""),
    re.compile(
        _CONFIGS
        + r"""\s+group:\s*['"]([^'"]+)['"]\s*,\s*name:\s*['"]([^'"]+)['"]\s*,\s*version:\s*['"]([^'"]+)['"]"""
    ),
)


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def parse(content: str) -> list[DependencyDeclaration]:
    """Return the declarations found in ``content``, skipping commented lines."""
    results: list[DependencyDeclaration] = []
    in_block_comment = False

    for line_number, line in enumerate(_lines(content), start=1):
        trimmed = line.strip()
        if "/*" in trimmed:
            in_block_comment = True
        if "*/" in trimmed:
            in_block_comment = False
            continue
        if in_block_comment or trimmed.startswith("//"):
            continue

        for pattern in _PATTERNS:
            match = pattern.search(line)
            if match is not None:
                configuration, group, artifact, version = match.groups()
                results.append(DependencyDeclaration(configuration, group, artifact, version, line_number))
                break

    return results