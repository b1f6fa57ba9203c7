"""Root-anchored constant names (``::A::B::C``)."""

from __future__ import annotations

from dataclasses import dataclass

SEPARATOR = "::"


@dataclass(frozen=True, order=True)
class QualifiedName:
    """An ordered sequence of identifier segments, anchored at the root.

    The empty name is the root namespace itself and renders as ``::``.
    """

    segments: tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str) -> QualifiedName:
        """Parse ``::A::B``, ``A::B`` or ``A`` into a name."""
        stripped = text.removeprefix(SEPARATOR)
        if not stripped:
            return cls()
        return cls(tuple(stripped.split(SEPARATOR)))

    def child(self, name: str) -> QualifiedName:
        """Return the name *name* gets when declared inside this namespace.

        ``name`` may itself be a path (``B::C``).  A root-anchored name
        (``::C``) ignores the current namespace.
        """
        if name.startswith(SEPARATOR):
            return QualifiedName.parse(name)
        return QualifiedName(self.segments + tuple(name.split(SEPARATOR)))

    def is_namespace_of(self, other: QualifiedName) -> bool:
        """Return True if this name is *other* or one of its enclosing namespaces."""
        depth = len(self.segments)
        return other.segments[:depth] == self.segments

    def prefixes(self) -> list[QualifiedName]:
        """Every ancestor-or-self name, outermost first."""
        return [QualifiedName(self.segments[: i + 1]) for i in range(len(self.segments))]

    @property
    def parent(self) -> QualifiedName:
        return QualifiedName(self.segments[:-1])

    @property
    def last(self) -> str:
        return self.segments[-1] if self.segments else ""

    @property
    def depth(self) -> int:
        return len(self.segments)

    @property
    def is_root(self) -> bool:
        return not self.segments

    def __str__(self) -> str:
        return SEPARATOR + SEPARATOR.join(self.segments)


ROOT = QualifiedName()
