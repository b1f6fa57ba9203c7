"""Read-only syntax tree contract consumed by the naming engine."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class MalformedTreeError(ValueError):
    """Raised when a declaration node carries no usable name."""


# ---------------------------------------------------------------------------
# Node kinds
# ---------------------------------------------------------------------------


class NodeKind(enum.Enum):
    """Capability tag of a syntax node."""

    MODULE = "module"
    CLASS = "class"
    BINDING = "binding"
    REFERENCE = "reference"
    OTHER = "other"

    @property
    def is_container(self) -> bool:
        return self in (NodeKind.MODULE, NodeKind.CLASS)

    @property
    def is_declaration(self) -> bool:
        return self in (NodeKind.MODULE, NodeKind.CLASS, NodeKind.BINDING)


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Span:
    """Source location of a node (1-based lines, 0-based columns)."""

    line: int = 1
    column: int = 0
    end_line: int = 1
    end_column: int = 0


_NO_SPAN = Span()


@dataclass(eq=False)
class SyntaxNode:
    """One node of a parsed source file.

    ``parent`` is a back-reference filled in when the node is handed to its
    parent's constructor; the tree is owned by its root.  Nodes compare by
    identity so they can be used as dict keys and in findings.
    """

    kind: NodeKind
    name: str | None = None
    type: str = ""
    children: tuple[SyntaxNode, ...] = ()
    span: Span = _NO_SPAN
    parent: SyntaxNode | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.children = tuple(self.children)
        if not self.type:
            self.type = self.kind.value
        for child in self.children:
            child.parent = self

    @property
    def is_container(self) -> bool:
        return self.kind.is_container

    @property
    def is_declaration(self) -> bool:
        return self.kind.is_declaration

    def declared_name(self) -> str:
        """Return the unqualified name declared by a Container or Binding.

        Raises
        ------
        MalformedTreeError
            When the node is a declaration without a name.
        ValueError
            When the node does not declare anything.
        """
        if not self.is_declaration:
            msg = f"{self.kind.value} node does not declare a name"
            raise ValueError(msg)
        if not self.name or self.name == "::":
            msg = f"{self.kind.value} node at line {self.span.line} has no declared name"
            raise MalformedTreeError(msg)
        return self.name

    def walk(self) -> Iterator[SyntaxNode]:
        """Yield this node and all descendants in document order."""
        stack: list[SyntaxNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def ancestors(self) -> Iterator[SyntaxNode]:
        """Yield parents from the innermost outwards."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def program(*children: SyntaxNode, span: Span = _NO_SPAN) -> SyntaxNode:
    """Build a file root."""
    return SyntaxNode(NodeKind.OTHER, type="program", children=children, span=span)


def module(name: str, *children: SyntaxNode, span: Span = _NO_SPAN) -> SyntaxNode:
    return SyntaxNode(NodeKind.MODULE, name=name, children=children, span=span)


def klass(name: str, *children: SyntaxNode, span: Span = _NO_SPAN) -> SyntaxNode:
    return SyntaxNode(NodeKind.CLASS, name=name, children=children, span=span)


def binding(name: str, *value: SyntaxNode, span: Span = _NO_SPAN) -> SyntaxNode:
    """Build a constant assignment; *value* is the right-hand side subtree."""
    return SyntaxNode(NodeKind.BINDING, name=name, type="assignment", children=value, span=span)


def reference(name: str, span: Span = _NO_SPAN) -> SyntaxNode:
    node_type = "scope_resolution" if "::" in name else "constant"
    return SyntaxNode(NodeKind.REFERENCE, name=name, type=node_type, span=span)


def other(node_type: str, *children: SyntaxNode, span: Span = _NO_SPAN) -> SyntaxNode:
    """Build a nameless node (method body, ``class << self``, call, ...)."""
    return SyntaxNode(NodeKind.OTHER, type=node_type, children=children, span=span)
