"""Extract module paths from ``gradle projects`` output."""

from __future__ import annotations

import re

from gradledepcheck.models import GradleModule

_PROJECT_RE = re.compile(r"[+\\]--- Project '([^']+)'")


def parse(output: str) -> list[GradleModule]:
    """Return every project listed in ``output``, in order."""
    return [
        GradleModule(name=path.rsplit(":", 1)[-1], path=path)
        for path in (match.group(1) for match in _PROJECT_RE.finditer(output))
    ]