"""Bottom-up name resolution: a node's qualified name from its parent chain."""

from __future__ import annotations

from typing import TYPE_CHECKING

from conceptlint.naming.qualified_name import ROOT, QualifiedName

if TYPE_CHECKING:
    from conceptlint.syntax.node import SyntaxNode


def _namespace_from(node: SyntaxNode | None) -> QualifiedName:
    # Collected innermost-first, applied outermost-first.
    chain: list[str] = []
    current = node
    while current is not None:
        if current.is_container:
            chain.append(current.declared_name())
        current = current.parent

    name = ROOT
    for declared in reversed(chain):
        name = name.child(declared)
    return name


def resolve_own_name(node: SyntaxNode) -> QualifiedName:
    """Return the fully qualified name declared by a module or class node.

    Non-container ancestors (method bodies, ``class << self`` blocks) are
    climbed through without contributing a segment.

    Raises
    ------
    ValueError
        If *node* is not a module or class.
    """
    if not node.is_container:
        msg = f"resolve_own_name() needs a module or class node, got {node.kind.value}"
        raise ValueError(msg)
    return _namespace_from(node)


def enclosing_namespace(node: SyntaxNode) -> QualifiedName:
    """Return the lexical namespace *node* sits in (``ROOT`` at top level)."""
    return _namespace_from(node.parent)
