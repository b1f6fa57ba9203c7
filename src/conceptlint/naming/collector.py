"""Top-down declaration collector: every qualified name a file declares."""

from __future__ import annotations

from typing import TYPE_CHECKING

from conceptlint.naming.qualified_name import ROOT, QualifiedName
from conceptlint.syntax.node import NodeKind

if TYPE_CHECKING:
    from collections.abc import Iterator

    from conceptlint.syntax.node import SyntaxNode


def iter_declarations(
    node: SyntaxNode,
    *,
    namespace: QualifiedName = ROOT,
    include_bindings: bool = True,
) -> Iterator[tuple[SyntaxNode, QualifiedName]]:
    """Yield ``(node, qualified_name)`` for each declaration in document order.

    References end the descent: a constant *use* never opens a namespace,
    and its subtree may hold names of called expressions.  A binding's value
    is visited in the binding's enclosing namespace, not under the binding.
    """
    if node.kind is NodeKind.REFERENCE:
        return

    child_namespace = namespace
    if node.is_container:
        child_namespace = namespace.child(node.declared_name())
        yield node, child_namespace
    elif node.kind is NodeKind.BINDING and include_bindings:
        yield node, namespace.child(node.declared_name())

    for child in node.children:
        yield from iter_declarations(
            child, namespace=child_namespace, include_bindings=include_bindings
        )


def collect(root: SyntaxNode, *, include_bindings: bool = True) -> frozenset[QualifiedName]:
    """Return the set of qualified names declared anywhere under *root*.

    Parameters
    ----------
    root:
        File root (or any subtree, collected as if it were top level).
    include_bindings:
        When *True*, constant assignments (``Name = ...``) count as
        declarations alongside modules and classes.

    Raises
    ------
    MalformedTreeError
        If a module, class or binding carries no name.
    """
    return frozenset(
        name for _node, name in iter_declarations(root, include_bindings=include_bindings)
    )
