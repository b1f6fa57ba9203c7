"""Ruby front end: tree-sitter parse trees converted to :class:`SyntaxNode` trees."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tree_sitter import Language, Parser

from conceptlint.syntax.node import NodeKind, Span, SyntaxNode

if TYPE_CHECKING:
    from pathlib import Path

    from tree_sitter import Node as TSNode

logger = logging.getLogger(__name__)

_CONTAINER_TYPES: dict[str, NodeKind] = {
    "module": NodeKind.MODULE,
    "class": NodeKind.CLASS,
}
_CONSTANT_TYPES: frozenset[str] = frozenset({"constant", "scope_resolution"})

# Loaded on first use.
_LANG_CACHE: dict[str, Language] = {}


def _get_language() -> Language:
    language = _LANG_CACHE.get("ruby")
    if language is None:
        import tree_sitter_ruby as tsruby

        language = Language(tsruby.language())
        _LANG_CACHE["ruby"] = language
    return language


def clear_cache() -> None:
    """Clear the language cache (useful for testing)."""
    _LANG_CACHE.clear()


def _text(node: TSNode) -> str:
    return node.text.decode("utf-8") if node.text else ""


def _span(node: TSNode) -> Span:
    # tree-sitter rows are 0-based; spans use 1-based lines.
    return Span(
        line=node.start_point.row + 1,
        column=node.start_point.column,
        end_line=node.end_point.row + 1,
        end_column=node.end_point.column,
    )


def _convert_children(node: TSNode, skip: TSNode | None = None) -> tuple[SyntaxNode, ...]:
    return tuple(
        _convert(child) for child in node.named_children if skip is None or child != skip
    )


def _is_constant_path(node: TSNode) -> bool:
    """True for ``A``, ``::A`` and ``A::B``; False for ``self::A`` or ``foo.bar::A``."""
    if node.type == "constant":
        return True
    if node.type != "scope_resolution":
        return False
    scope = node.child_by_field_name("scope")
    return scope is None or _is_constant_path(scope)


def _convert(node: TSNode) -> SyntaxNode:
    node_type = node.type

    container_kind = _CONTAINER_TYPES.get(node_type)
    if container_kind is not None:
        name_node = node.child_by_field_name("name")
        if name_node is not None and _text(name_node):
            return SyntaxNode(
                container_kind,
                name=_text(name_node),
                type=node_type,
                children=_convert_children(node, skip=name_node),
                span=_span(node),
            )
        logger.debug("Nameless %s at line %d treated as plain node", node_type, _span(node).line)

    elif node_type == "assignment":
        left = node.child_by_field_name("left")
        if left is not None and _is_constant_path(left):
            right = node.child_by_field_name("right")
            return SyntaxNode(
                NodeKind.BINDING,
                name=_text(left),
                type=node_type,
                children=(_convert(right),) if right is not None else (),
                span=_span(node),
            )

    elif node_type in _CONSTANT_TYPES:
        if _is_constant_path(node):
            return SyntaxNode(
                NodeKind.REFERENCE, name=_text(node), type=node_type, span=_span(node)
            )
        # Dynamic scope (``self.class::LIMIT``): only the scope expression is walked.
        scope = node.child_by_field_name("scope")
        return SyntaxNode(
            NodeKind.OTHER,
            type=node_type,
            children=(_convert(scope),) if scope is not None else (),
            span=_span(node),
        )

    return SyntaxNode(
        NodeKind.OTHER,
        type=node_type,
        children=_convert_children(node),
        span=_span(node),
    )


def parse_source(source: str | bytes, *, filename: str = "<source>") -> SyntaxNode:
    """Parse Ruby *source* and return the root of the converted tree.

    Syntax errors do not raise: tree-sitter recovers and the best-effort tree
    is returned after a warning is logged.
    """
    content = source.encode("utf-8") if isinstance(source, str) else source
    parser = Parser(_get_language())
    tree = parser.parse(content)
    if tree.root_node.has_error:
        logger.warning("Syntax errors in %s, checking the recovered tree", filename)
    return _convert(tree.root_node)


def parse_file(file_path: Path) -> SyntaxNode:
    """Read and parse a Ruby file.

    Raises
    ------
    OSError, UnicodeDecodeError
        If the file cannot be read as UTF-8.
    """
    content = file_path.read_text(encoding="utf-8")
    return parse_source(content, filename=str(file_path))
