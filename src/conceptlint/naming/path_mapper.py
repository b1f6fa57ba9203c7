"""Path convention: map ``concepts/some_folder/file.rb`` to ``::SomeFolder::File``."""

from __future__ import annotations

import re

from conceptlint.naming.qualified_name import QualifiedName

DEFAULT_ROOT_MARKER = "concepts"
DEFAULT_EXTENSION = ".rb"

# CamelCase -> snake_case boundaries ("HTTPClient" -> "HTTP_Client" -> "http_client").
_ACRONYM_BOUNDARY_RE = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
_WORD_BOUNDARY_RE = re.compile(r"([a-z\d])([A-Z])")


def _root_marker_re(root_marker: str) -> re.Pattern[str]:
    # Greedy prefix: strips through the *last* occurrence of the marker.
    marker = re.escape(root_marker.strip("/"))
    return re.compile(rf"(?:.*/)?{marker}/")


def in_convention_root(path: str, root_marker: str = DEFAULT_ROOT_MARKER) -> bool:
    """Return True if *path* lies below a ``<root_marker>/`` directory."""
    return _root_marker_re(root_marker).match(path) is not None


def strip_convention_root(path: str, root_marker: str = DEFAULT_ROOT_MARKER) -> str:
    """Drop everything up to and including the last ``<root_marker>/``.

    Paths without the marker are returned unchanged.
    """
    match = _root_marker_re(root_marker).match(path)
    if match is None:
        return path
    return path[match.end() :]


def camelize_segment(segment: str) -> str:
    """Convert one ``snake_case`` path segment to ``PascalCase``.

    Only the first character of each underscore-separated run is upper-cased;
    the rest of the run is kept as written, so ``HTTP_client`` becomes
    ``HTTPClient`` and an already capitalised ``SomeFile`` passes through.
    Empty runs (doubled, leading or trailing underscores) vanish, and runs
    starting with a digit are left alone.
    """
    return "".join(run[:1].upper() + run[1:] for run in segment.split("_"))


def expected_name(
    path: str,
    *,
    root_marker: str = DEFAULT_ROOT_MARKER,
    extension: str = DEFAULT_EXTENSION,
) -> QualifiedName:
    """Return the fully qualified name the file at *path* should declare.

    Never raises: a path outside the convention root or with odd segments
    still yields a (likely unmatchable) name, so mismatches surface as
    findings instead of being skipped.
    """
    remainder = strip_convention_root(path, root_marker)
    if extension and remainder.endswith(extension):
        remainder = remainder[: -len(extension)]
    return QualifiedName(tuple(camelize_segment(part) for part in remainder.split("/")))


def underscore(segment: str) -> str:
    """Convert ``PascalCase`` back to ``snake_case`` (``HTTPClient`` -> ``http_client``)."""
    text = _ACRONYM_BOUNDARY_RE.sub(r"\1_\2", segment)
    text = _WORD_BOUNDARY_RE.sub(r"\1_\2", text)
    return text.lower()


def expected_path(
    name: QualifiedName,
    *,
    root_marker: str = DEFAULT_ROOT_MARKER,
    extension: str = DEFAULT_EXTENSION,
) -> str:
    """Return the file path, relative to the convention root's parent, for *name*."""
    parts = [underscore(segment) for segment in name.segments]
    return f"{root_marker.strip('/')}/" + "/".join(parts) + extension
