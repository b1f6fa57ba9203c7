"""Checks — namespace validation against file paths plus structural constant rules."""

from __future__ import annotations

from conceptlint.checks.findings import (
    DEFAULT_MESSAGES,
    Check,
    Finding,
    FindingKind,
    ModuleAcceptance,
    NamingConvention,
)
from conceptlint.checks.namespacing import validate
from conceptlint.checks.structure import (
    check_namespacing_missing,
    check_prefix_top_level_constants,
    check_reaching_inside_namespaces,
)

# Rule name -> check, in evaluation order.
CHECKS: dict[str, Check] = {
    "namespacing-matching-filename": validate,
    "namespacing-missing": check_namespacing_missing,
    "reaching-inside-namespaces": check_reaching_inside_namespaces,
    "prefix-top-level-constants": check_prefix_top_level_constants,
}

__all__ = [
    "CHECKS",
    "DEFAULT_MESSAGES",
    "Check",
    "Finding",
    "FindingKind",
    "ModuleAcceptance",
    "NamingConvention",
    "check_namespacing_missing",
    "check_prefix_top_level_constants",
    "check_reaching_inside_namespaces",
    "validate",
]
