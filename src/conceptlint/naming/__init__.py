"""Naming engine — qualified names, tree traversals and the path convention."""

from conceptlint.naming.ancestry import enclosing_namespace, resolve_own_name
from conceptlint.naming.collector import collect, iter_declarations
from conceptlint.naming.path_mapper import (
    DEFAULT_EXTENSION,
    DEFAULT_ROOT_MARKER,
    camelize_segment,
    expected_name,
    expected_path,
    in_convention_root,
    strip_convention_root,
    underscore,
)
from conceptlint.naming.qualified_name import ROOT, SEPARATOR, QualifiedName

__all__ = [
    "DEFAULT_EXTENSION",
    "DEFAULT_ROOT_MARKER",
    "ROOT",
    "SEPARATOR",
    "QualifiedName",
    "camelize_segment",
    "collect",
    "enclosing_namespace",
    "expected_name",
    "expected_path",
    "in_convention_root",
    "iter_declarations",
    "resolve_own_name",
    "strip_convention_root",
    "underscore",
]
