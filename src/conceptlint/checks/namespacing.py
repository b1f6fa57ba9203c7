"""Namespace validator: do a file's declarations match the name its path implies?

Modules are namespace segments and pass when they are the expected name or
one of its enclosing namespaces; deeper segments belong to nested files.
Classes (and constant bindings) are leaf declarations: they pass when *some*
declaration in the file is exactly the expected name, so helper classes next
to the primary one are tolerated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from conceptlint.checks.findings import Finding, FindingKind, ModuleAcceptance, NamingConvention
from conceptlint.naming.ancestry import resolve_own_name
from conceptlint.naming.collector import collect, iter_declarations
from conceptlint.naming.path_mapper import expected_name
from conceptlint.syntax.node import NodeKind

if TYPE_CHECKING:
    from conceptlint.naming.qualified_name import QualifiedName
    from conceptlint.syntax.node import SyntaxNode


def module_accepted(
    own: QualifiedName,
    expected: QualifiedName,
    declared: frozenset[QualifiedName],
    mode: ModuleAcceptance,
) -> bool:
    """Decide a module declaration named *own*."""
    if own == expected or own.is_namespace_of(expected):
        return True
    return mode is ModuleAcceptance.FILE_MATCH and expected in declared


def leaf_accepted(expected: QualifiedName, declared: frozenset[QualifiedName]) -> bool:
    """Decide a class or binding declaration (file-scoped exact match)."""
    return expected in declared


def validate(
    root: SyntaxNode,
    path: str,
    convention: NamingConvention | None = None,
) -> list[Finding]:
    """Check every module, class and binding under *root* against *path*.

    Returns one finding per rejected declaration, in document order.  An empty
    list means the file follows the convention.

    Raises
    ------
    MalformedTreeError
        If a declaration node has no name.
    """
    if convention is None:
        convention = NamingConvention()

    include_bindings = convention.bindings_are_declarations
    expected = expected_name(
        path, root_marker=convention.root_marker, extension=convention.extension
    )
    declared = collect(root, include_bindings=include_bindings)

    findings: list[Finding] = []
    for node, qualified in iter_declarations(root, include_bindings=include_bindings):
        if node.kind is NodeKind.MODULE:
            own = resolve_own_name(node)
            if module_accepted(own, expected, declared, convention.module_acceptance):
                continue
            kind = FindingKind.NAMESPACE_PREFIX
        else:
            own = qualified
            if leaf_accepted(expected, declared):
                continue
            kind = FindingKind.EXACT_MATCH

        findings.append(
            Finding(
                node=node,
                kind=kind,
                declared=own,
                expected=expected,
                message=convention.render(kind, path=path, declared=own, expected=expected),
            )
        )
    return findings
