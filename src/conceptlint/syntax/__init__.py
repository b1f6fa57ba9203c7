"""Syntax trees — the node contract and the Ruby front end that produces it."""

from conceptlint.syntax.node import (
    MalformedTreeError,
    NodeKind,
    Span,
    SyntaxNode,
    binding,
    klass,
    module,
    other,
    program,
    reference,
)
from conceptlint.syntax.ruby import parse_file, parse_source

__all__ = [
    "MalformedTreeError",
    "NodeKind",
    "Span",
    "SyntaxNode",
    "binding",
    "klass",
    "module",
    "other",
    "parse_file",
    "parse_source",
    "program",
    "reference",
]
