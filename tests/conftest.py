"""Shared test fixtures for conceptlint."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from conceptlint.syntax.node import binding, klass, module, other, program, reference

if TYPE_CHECKING:
    from pathlib import Path

    from conceptlint.syntax.node import SyntaxNode


@pytest.fixture()
def nested_tree() -> SyntaxNode:
    """``module SomeFile; module AnotherConstant; class IncorrectName; class AnotherWrongName``."""
    return program(
        module(
            "SomeFile",
            module(
                "AnotherConstant",
                klass("IncorrectName"),
                klass("AnotherWrongName"),
            ),
        )
    )


@pytest.fixture()
def complex_tree() -> SyntaxNode:
    """Hand-built equivalent of a file mixing classes, bindings, methods and metaclasses."""
    return program(
        klass("Egg"),
        klass("Dog"),
        klass("Another", klass("Nested")),
        klass(
            "Something",
            other("call", reference("Thing")),
            binding("Tomato", other("call", reference("Struct"))),
            binding("VERY_LOUD", other("integer")),
            binding("This", other("call", reference("Class"), reference("StandardError"))),
            other("singleton_method", other("body_statement")),
            other("singleton_class", other("self"), module("InsideMetaClass")),
            module("This", other("call"), klass("That")),
        ),
    )


@pytest.fixture()
def tmp_project(tmp_path: Path) -> Path:
    """Create a minimal project with an ``app/concepts`` directory."""
    (tmp_path / "app" / "concepts").mkdir(parents=True)
    return tmp_path
