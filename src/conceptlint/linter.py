"""Linter orchestrator: discover files, parse, run enabled checks, format results."""

from __future__ import annotations

import fnmatch
import json
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from conceptlint.checks import CHECKS
from conceptlint.config import CONFIG_FILENAME, LintConfig, RuleSettings, load_config
from conceptlint.naming.path_mapper import in_convention_root
from conceptlint.syntax.ruby import parse_file

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class LintError(Exception):
    """Raised when lint encounters a configuration error."""


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Violation:
    """A finding resolved to a file location and a configured severity."""

    rule_name: str
    kind: str  # FindingKind value
    severity: str  # "error" | "warn"
    file_path: str
    line_number: int
    column: int
    declared: str | None
    expected: str | None
    message: str


@dataclass
class LintResult:
    """Result of a lint run."""

    violations: list[Violation] = field(default_factory=list)
    rules_evaluated: int = 0
    files_scanned: int = 0
    files_skipped: int = 0
    elapsed_ms: float = 0.0

    @property
    def has_errors(self) -> bool:
        return any(v.severity == "error" for v in self.violations)


# ---------------------------------------------------------------------------
# File discovery
# ---------------------------------------------------------------------------


def _relative(path: Path, project_root: Path) -> str:
    try:
        return path.resolve().relative_to(project_root.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def _excluded(rel_path: str, patterns: tuple[str, ...]) -> bool:
    return any(fnmatch.fnmatch(rel_path, pattern) for pattern in patterns)


def discover_files(project_root: Path, config: LintConfig) -> list[str]:
    """Return project-relative paths of source files under the convention root."""
    convention = config.convention
    found: list[str] = []
    for path in sorted(project_root.rglob(f"*{convention.extension}")):
        if not path.is_file():
            continue
        rel = _relative(path, project_root)
        if not in_convention_root(rel, convention.root_marker):
            continue
        if _excluded(rel, config.exclude):
            logger.debug("Excluded %s", rel)
            continue
        found.append(rel)
    return found


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


def lint_file(project_root: Path, rel_path: str, config: LintConfig) -> list[Violation]:
    """Parse one file and run every enabled check on it.

    Raises
    ------
    OSError, UnicodeDecodeError
        If the file cannot be read.
    """
    root = parse_file(project_root / rel_path)

    violations: list[Violation] = []
    for rule_name in config.enabled_rules():
        settings = config.rules.get(rule_name, RuleSettings())
        for finding in CHECKS[rule_name](root, rel_path, config.convention):
            violations.append(
                Violation(
                    rule_name=rule_name,
                    kind=finding.kind.value,
                    severity=settings.severity,
                    file_path=rel_path,
                    line_number=finding.line,
                    column=finding.column,
                    declared=None if finding.declared is None else str(finding.declared),
                    expected=None if finding.expected is None else str(finding.expected),
                    message=finding.message,
                )
            )
    violations.sort(key=lambda v: (v.line_number, v.column))
    return violations


def lint(
    project_root: Path,
    *,
    config_path: Path | None = None,
    files: list[Path] | None = None,
) -> LintResult:
    """Lint the project (or just *files*) and return the collected violations.

    Parameters
    ----------
    project_root:
        Root the convention paths are taken relative to.
    config_path:
        Optional explicit config file.  When *None* the default location
        ``<project_root>/.conceptlint.yml`` is used; a missing file means
        built-in defaults.
    files:
        Explicit files to check.  Files outside the convention root are
        skipped.  When *None*, the project is scanned.

    Raises
    ------
    LintError
        When the configuration file is invalid.
    """
    start = time.monotonic()

    if config_path is None:
        config_path = project_root / CONFIG_FILENAME
    try:
        config = load_config(config_path)
    except ValueError as exc:
        msg = f"Invalid configuration: {exc}"
        raise LintError(msg) from exc

    result = LintResult(rules_evaluated=len(config.enabled_rules()))

    if files is None:
        candidates = discover_files(project_root, config)
    else:
        candidates = []
        for file_path in files:
            rel = _relative(file_path, project_root)
            if not in_convention_root(rel, config.convention.root_marker):
                logger.debug("Skipping %s: outside %s/", rel, config.convention.root_marker)
                result.files_skipped += 1
                continue
            candidates.append(rel)

    for rel in candidates:
        try:
            violations = lint_file(project_root, rel, config)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Cannot read file %s: %s", rel, exc)
            result.files_skipped += 1
            continue
        result.files_scanned += 1
        result.violations.extend(violations)

    result.elapsed_ms = (time.monotonic() - start) * 1000
    return result


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------


def format_rich(result: LintResult) -> str:
    """Format a LintResult as human-readable text.

    Example output::

        Files: 3 scanned, 0 skipped

        x namespacing-matching-filename (error)
          app/concepts/billing/invoice.rb:2:2
          Incorrect constant name for app/concepts/billing/invoice.rb: ...

        1 violation found (4 rules evaluated, 0.0s)
    """
    lines: list[str] = [
        f"Files: {result.files_scanned} scanned, {result.files_skipped} skipped",
        "",
    ]

    elapsed_str = f"{result.elapsed_ms / 1000:.1f}s"

    if not result.violations:
        lines.append(
            f"✓ No violations found ({result.rules_evaluated} rules evaluated, {elapsed_str})"
        )
        return "\n".join(lines)

    for v in result.violations:
        lines.append(f"✗ {v.rule_name} ({v.severity})")
        lines.append(f"  {v.file_path}:{v.line_number}:{v.column}")
        lines.append(f"  {v.message}")
        lines.append("")

    count = len(result.violations)
    noun = "violation" if count == 1 else "violations"
    lines.append(
        f"{count} {noun} found ({result.rules_evaluated} rules evaluated, {elapsed_str})"
    )
    return "\n".join(lines)


def format_json(result: LintResult) -> str:
    """Format a LintResult as structured JSON with ``violations`` and ``summary``."""
    output: dict[str, object] = {
        "violations": [
            {
                "rule_name": v.rule_name,
                "kind": v.kind,
                "severity": v.severity,
                "file_path": v.file_path,
                "line_number": v.line_number,
                "column": v.column,
                "declared": v.declared,
                "expected": v.expected,
                "message": v.message,
            }
            for v in result.violations
        ],
        "summary": {
            "rules_evaluated": result.rules_evaluated,
            "violations_count": len(result.violations),
            "files_scanned": result.files_scanned,
            "files_skipped": result.files_skipped,
            "elapsed_ms": result.elapsed_ms,
        },
    }
    return json.dumps(output, indent=2)


def format_porcelain(result: LintResult) -> str:
    """One line per violation: ``rule_name:severity:file_path:line:column:message``.

    Returns empty string when there are no violations.
    """
    return "\n".join(
        f"{v.rule_name}:{v.severity}:{v.file_path}:{v.line_number}:{v.column}:{v.message}"
        for v in result.violations
    )
