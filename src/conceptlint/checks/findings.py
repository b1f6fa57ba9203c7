"""Findings and the naming convention shared by all checks."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from conceptlint.naming.path_mapper import DEFAULT_EXTENSION, DEFAULT_ROOT_MARKER
from conceptlint.syntax.node import SyntaxNode

if TYPE_CHECKING:
    from conceptlint.naming.qualified_name import QualifiedName


class FindingKind(enum.Enum):
    """Which rule a declaration or reference failed."""

    NAMESPACE_PREFIX = "namespace-prefix"
    EXACT_MATCH = "exact-match"
    NAMESPACE_MISSING = "namespace-missing"
    REACHING_INSIDE = "reaching-inside"
    MISSING_ROOT_PREFIX = "missing-root-prefix"


class ModuleAcceptance(enum.Enum):
    """How a module that is not a namespace of the expected name is judged."""

    PREFIX = "prefix"  # reject
    FILE_MATCH = "file-match"  # tolerate if the file declares the expected name elsewhere


DEFAULT_MESSAGES: dict[FindingKind, str] = {
    FindingKind.NAMESPACE_PREFIX: (
        "Module {declared} is not a namespace of {expected} (expected from {path})"
    ),
    FindingKind.EXACT_MATCH: "Incorrect constant name for {path}: nothing declares {expected}",
    FindingKind.NAMESPACE_MISSING: "Classes in {root_marker}/ should have a namespace",
    FindingKind.REACHING_INSIDE: (
        "Don't reach inside other namespaces ({declared}). Refactor to avoid this "
        "or provide a public aggregate root method."
    ),
    FindingKind.MISSING_ROOT_PREFIX: "Prefix top level constants with :: ({declared})",
}


@dataclass(frozen=True)
class NamingConvention:
    """Path convention and acceptance policy for one lint run."""

    root_marker: str = DEFAULT_ROOT_MARKER
    extension: str = DEFAULT_EXTENSION
    module_acceptance: ModuleAcceptance = ModuleAcceptance.FILE_MATCH
    bindings_are_declarations: bool = True
    messages: dict[FindingKind, str] = field(default_factory=dict)

    def render(
        self,
        kind: FindingKind,
        *,
        path: str,
        declared: QualifiedName | str | None,
        expected: QualifiedName | None,
    ) -> str:
        template = self.messages.get(kind, DEFAULT_MESSAGES[kind])
        return template.format(
            path=path,
            declared="" if declared is None else str(declared),
            expected="" if expected is None else str(expected),
            root_marker=self.root_marker,
        )


@dataclass(frozen=True)
class Finding:
    """A single mismatch tied to the offending node."""

    node: SyntaxNode
    kind: FindingKind
    declared: QualifiedName | str | None
    expected: QualifiedName | None
    message: str

    @property
    def line(self) -> int:
        return self.node.span.line

    @property
    def column(self) -> int:
        return self.node.span.column


# A check inspects one parsed file and returns its findings.
Check = Callable[[SyntaxNode, str, NamingConvention], list[Finding]]
