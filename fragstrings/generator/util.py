"""Name conversion helpers for generated code."""

import re

_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def to_snake_case(name: str) -> str:
    """Convert ``HeaderV2`` or ``httpRequest`` to ``header_v2``/``http_request``."""
    return _BOUNDARY_RE.sub("_", name).lower()


def to_constant_case(name: str) -> str:
    return to_snake_case(name).upper()
