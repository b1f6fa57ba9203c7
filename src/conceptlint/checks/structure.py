"""Structural checks on how constants are declared and referenced."""

from __future__ import annotations

from typing import TYPE_CHECKING

from conceptlint.checks.findings import Finding, FindingKind, NamingConvention
from conceptlint.naming.ancestry import enclosing_namespace, resolve_own_name
from conceptlint.naming.collector import collect, iter_declarations
from conceptlint.naming.qualified_name import SEPARATOR, QualifiedName
from conceptlint.syntax.node import NodeKind

if TYPE_CHECKING:
    from collections.abc import Iterator

    from conceptlint.syntax.node import SyntaxNode


def _references(root: SyntaxNode) -> Iterator[SyntaxNode]:
    for node in root.walk():
        if node.kind is NodeKind.REFERENCE and node.name:
            yield node


def _is_constant_chain(name: QualifiedName) -> bool:
    # Every segment must be a constant; ``self::A`` scopes through an expression.
    return all(segment[:1].isupper() for segment in name.segments)


def check_namespacing_missing(
    root: SyntaxNode,
    path: str,
    convention: NamingConvention | None = None,
) -> list[Finding]:
    """Flag classes declared directly in the root namespace."""
    if convention is None:
        convention = NamingConvention()

    findings: list[Finding] = []
    for node, _qualified in iter_declarations(root, include_bindings=False):
        if node.kind is not NodeKind.CLASS:
            continue
        own = resolve_own_name(node)
        if own.depth > 1:
            continue
        kind = FindingKind.NAMESPACE_MISSING
        findings.append(
            Finding(
                node=node,
                kind=kind,
                declared=own,
                expected=None,
                message=convention.render(kind, path=path, declared=own, expected=None),
            )
        )
    return findings


def check_reaching_inside_namespaces(
    root: SyntaxNode,
    path: str,
    convention: NamingConvention | None = None,
) -> list[Finding]:
    """Flag references that name a constant nested in another namespace (``A::B``)."""
    if convention is None:
        convention = NamingConvention()

    findings: list[Finding] = []
    for node in _references(root):
        qualified = QualifiedName.parse(node.name or "")
        if qualified.depth < 2 or not _is_constant_chain(qualified):
            continue
        kind = FindingKind.REACHING_INSIDE
        findings.append(
            Finding(
                node=node,
                kind=kind,
                declared=node.name,
                expected=None,
                message=convention.render(kind, path=path, declared=node.name, expected=None),
            )
        )
    return findings


def check_prefix_top_level_constants(
    root: SyntaxNode,
    path: str,
    convention: NamingConvention | None = None,
) -> list[Finding]:
    """Flag relative references that do not resolve to a sibling declaration.

    ``Foo`` inside ``module Billing`` is fine when the file declares
    ``::Billing::Foo``; otherwise it names a top-level constant and should be
    written ``::Foo``.
    """
    if convention is None:
        convention = NamingConvention()

    declared = collect(root, include_bindings=True)
    findings: list[Finding] = []
    for node in _references(root):
        name = node.name or ""
        if SEPARATOR in name:
            continue
        scopes = enclosing_namespace(node).prefixes()
        if any(scope.child(name) in declared for scope in scopes):
            continue
        kind = FindingKind.MISSING_ROOT_PREFIX
        findings.append(
            Finding(
                node=node,
                kind=kind,
                declared=name,
                expected=QualifiedName.parse(name),
                message=convention.render(kind, path=path, declared=name, expected=None),
            )
        )
    return findings
