"""Tests for conceptlint.checks.structure — namespacing and reference rules."""

from __future__ import annotations

from conceptlint.checks import CHECKS
from conceptlint.checks.findings import FindingKind, NamingConvention
from conceptlint.checks.structure import (
    check_namespacing_missing,
    check_prefix_top_level_constants,
    check_reaching_inside_namespaces,
)
from conceptlint.syntax.node import SyntaxNode, klass, module, other, program, reference

PATH = "app/concepts/namespace.rb"


def _assign(value: SyntaxNode) -> SyntaxNode:
    return other("assignment", other("identifier"), value)


class TestNamespacingMissing:
    def test_top_level_class_flagged(self) -> None:
        node = klass("SomeFile")
        findings = check_namespacing_missing(program(node), "app/concepts/some_file.rb")
        assert len(findings) == 1
        assert findings[0].node is node
        assert findings[0].kind is FindingKind.NAMESPACE_MISSING
        assert findings[0].message == "Classes in concepts/ should have a namespace"

    def test_namespaced_class_passes(self) -> None:
        tree = program(module("SomeFile", module("Another", klass("SomeClass"))))
        assert check_namespacing_missing(tree, "app/concepts/some_file.rb") == []

    def test_compound_class_name_counts_as_namespaced(self) -> None:
        assert check_namespacing_missing(program(klass("Billing::Invoice")), PATH) == []

    def test_rooted_class_inside_module_flagged(self) -> None:
        tree = program(module("Billing", klass("::Invoice")))
        assert len(check_namespacing_missing(tree, PATH)) == 1

    def test_modules_are_not_flagged(self) -> None:
        assert check_namespacing_missing(program(module("Billing")), PATH) == []

    def test_message_uses_root_marker(self) -> None:
        convention = NamingConvention(root_marker="domain")
        findings = check_namespacing_missing(program(klass("A")), "domain/a.rb", convention)
        assert findings[0].message == "Classes in domain/ should have a namespace"


class TestReachingInsideNamespaces:
    def test_reference_inside_current_namespace_passes(self) -> None:
        tree = program(
            module("Namespace", klass("AnotherClass")),
            module("Namespace", _assign(reference("AnotherClass"))),
        )
        assert check_reaching_inside_namespaces(tree, PATH) == []

    def test_nested_reference_flagged(self) -> None:
        ref = reference("::AnotherNamespace::AnotherClass")
        tree = program(module("Namespace", _assign(ref)))
        findings = check_reaching_inside_namespaces(tree, PATH)
        assert len(findings) == 1
        assert findings[0].node is ref
        assert findings[0].kind is FindingKind.REACHING_INSIDE
        assert findings[0].declared == "::AnotherNamespace::AnotherClass"

    def test_method_call_on_nested_constant_flagged(self) -> None:
        ref = reference("::AnotherNamespace::AnotherClass")
        tree = program(
            module(
                "Namespace",
                other("singleton_method", other("call", ref, other("identifier"))),
            )
        )
        assert [f.node for f in check_reaching_inside_namespaces(tree, PATH)] == [ref]

    def test_rooted_single_segment_passes(self) -> None:
        tree = program(module("Namespace", _assign(reference("::OtherNamespace"))))
        assert check_reaching_inside_namespaces(tree, PATH) == []

    def test_expression_scoped_reference_passes(self) -> None:
        tree = program(module("Billing", _assign(reference("self::LIMIT"))))
        assert check_reaching_inside_namespaces(tree, PATH) == []

    def test_declaration_names_are_not_references(self) -> None:
        tree = program(module("Billing::Documents"))
        assert check_reaching_inside_namespaces(tree, PATH) == []


class TestPrefixTopLevelConstants:
    def test_reference_to_other_top_level_namespace_flagged(self) -> None:
        ref = reference("OtherNamespace")
        tree = program(
            module("OtherNamespace"),
            module("Namespace", _assign(ref)),
        )
        findings = check_prefix_top_level_constants(tree, PATH)
        assert [f.node for f in findings] == [ref]
        assert findings[0].kind is FindingKind.MISSING_ROOT_PREFIX
        assert findings[0].message == "Prefix top level constants with :: (OtherNamespace)"

    def test_plain_top_level_module_passes(self) -> None:
        assert check_prefix_top_level_constants(program(module("Namespace")), PATH) == []

    def test_sibling_reference_passes(self) -> None:
        tree = program(
            module("Namespace", klass("AnotherClass")),
            module("Namespace", _assign(reference("AnotherClass"))),
        )
        assert check_prefix_top_level_constants(tree, PATH) == []

    def test_reference_to_outer_scope_declaration_passes(self) -> None:
        tree = program(
            module(
                "Billing",
                klass("Error"),
                module("Documents", _assign(reference("Error"))),
            )
        )
        assert check_prefix_top_level_constants(tree, PATH) == []

    def test_prefixed_and_scoped_references_pass(self) -> None:
        tree = program(
            module(
                "Namespace",
                _assign(reference("::OtherNamespace")),
                _assign(reference("Other::Thing")),
            )
        )
        assert check_prefix_top_level_constants(tree, PATH) == []

    def test_top_level_reference_flagged(self) -> None:
        assert len(check_prefix_top_level_constants(program(reference("Struct")), PATH)) == 1


class TestRegistry:
    def test_rule_names(self) -> None:
        assert list(CHECKS) == [
            "namespacing-matching-filename",
            "namespacing-missing",
            "reaching-inside-namespaces",
            "prefix-top-level-constants",
        ]
