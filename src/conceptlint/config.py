"""Project configuration: parse and validate ``.conceptlint.yml``."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import yaml

from conceptlint.checks import CHECKS, FindingKind, ModuleAcceptance, NamingConvention

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

CONFIG_FILENAME = ".conceptlint.yml"
VALID_SEVERITIES: frozenset[str] = frozenset({"error", "warn"})
SUPPORTED_SCHEMA_VERSIONS: frozenset[int] = frozenset({1})

_CONVENTION_KEYS: frozenset[str] = frozenset(
    {"root_marker", "extension", "module_acceptance", "bindings_are_declarations"}
)

# Placeholders NamingConvention.render fills in, with sample values.
_TEMPLATE_FIELDS: dict[str, str] = {
    "path": "app/concepts/a.rb",
    "declared": "::A",
    "expected": "::A",
    "root_marker": "concepts",
}

# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RuleSettings:
    """Whether a rule runs and how its findings are graded."""

    enabled: bool = True
    severity: str = "error"  # "error" | "warn"


DEFAULT_RULES: dict[str, RuleSettings] = {
    "namespacing-matching-filename": RuleSettings(enabled=True, severity="error"),
    "namespacing-missing": RuleSettings(enabled=True, severity="error"),
    "reaching-inside-namespaces": RuleSettings(enabled=True, severity="warn"),
    "prefix-top-level-constants": RuleSettings(enabled=False, severity="warn"),
}


@dataclass(frozen=True)
class LintConfig:
    """Fully resolved configuration for a lint run."""

    convention: NamingConvention = field(default_factory=NamingConvention)
    rules: dict[str, RuleSettings] = field(default_factory=lambda: dict(DEFAULT_RULES))
    exclude: tuple[str, ...] = ()

    def enabled_rules(self) -> list[str]:
        """Rule names to evaluate, in registry order."""
        return [name for name in CHECKS if self.rules.get(name, RuleSettings()).enabled]


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _parse_convention(data: Any, messages: dict[FindingKind, str]) -> NamingConvention:
    if data is None:
        return NamingConvention(messages=messages)
    if not isinstance(data, dict):
        msg = f"{CONFIG_FILENAME}: 'convention' must be a mapping"
        raise ValueError(msg)

    unknown = sorted(set(data) - _CONVENTION_KEYS)
    if unknown:
        msg = f"{CONFIG_FILENAME}: unknown convention keys {unknown}"
        raise ValueError(msg)

    defaults = NamingConvention()
    root_marker = str(data.get("root_marker", defaults.root_marker)).strip("/")
    if not root_marker:
        msg = f"{CONFIG_FILENAME}: 'root_marker' must not be empty"
        raise ValueError(msg)

    extension = str(data.get("extension", defaults.extension))
    if extension and not extension.startswith("."):
        extension = "." + extension

    mode_raw = str(data.get("module_acceptance", defaults.module_acceptance.value))
    try:
        mode = ModuleAcceptance(mode_raw)
    except ValueError:
        valid = sorted(m.value for m in ModuleAcceptance)
        msg = f"{CONFIG_FILENAME}: invalid module_acceptance '{mode_raw}', must be one of {valid}"
        raise ValueError(msg) from None

    bindings = data.get("bindings_are_declarations", defaults.bindings_are_declarations)
    if not isinstance(bindings, bool):
        msg = f"{CONFIG_FILENAME}: 'bindings_are_declarations' must be true or false"
        raise ValueError(msg)

    return NamingConvention(
        root_marker=root_marker,
        extension=extension,
        module_acceptance=mode,
        bindings_are_declarations=bindings,
        messages=messages,
    )


def _parse_rules(data: Any) -> dict[str, RuleSettings]:
    rules = dict(DEFAULT_RULES)
    if data is None:
        return rules
    if not isinstance(data, dict):
        msg = f"{CONFIG_FILENAME}: 'rules' must be a mapping of rule name to settings"
        raise ValueError(msg)

    for name, settings in data.items():
        if name not in CHECKS:
            msg = f"{CONFIG_FILENAME}: unknown rule '{name}', expected one of {sorted(CHECKS)}"
            raise ValueError(msg)
        if isinstance(settings, bool):
            settings = {"enabled": settings}
        if not isinstance(settings, dict):
            msg = f"{CONFIG_FILENAME}: rule '{name}' must be a mapping or a boolean"
            raise ValueError(msg)

        current = rules[name]
        severity = str(settings.get("severity", current.severity))
        if severity not in VALID_SEVERITIES:
            msg = (
                f"{CONFIG_FILENAME}: rule '{name}' has invalid severity '{severity}', "
                f"must be one of {sorted(VALID_SEVERITIES)}"
            )
            raise ValueError(msg)
        rules[name] = RuleSettings(
            enabled=bool(settings.get("enabled", current.enabled)),
            severity=severity,
        )
    return rules


def _parse_messages(data: Any) -> dict[FindingKind, str]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"{CONFIG_FILENAME}: 'messages' must be a mapping"
        raise ValueError(msg)

    messages: dict[FindingKind, str] = {}
    for key, template in data.items():
        try:
            kind = FindingKind(key)
        except ValueError:
            valid = sorted(k.value for k in FindingKind)
            msg = f"{CONFIG_FILENAME}: unknown message key '{key}', expected one of {valid}"
            raise ValueError(msg) from None
        template = str(template)
        try:
            template.format(**_TEMPLATE_FIELDS)
        except (KeyError, IndexError, AttributeError, ValueError) as exc:
            msg = (
                f"{CONFIG_FILENAME}: invalid message template for '{key}' ({exc!r}), "
                f"allowed placeholders are {sorted(_TEMPLATE_FIELDS)}"
            )
            raise ValueError(msg) from exc
        messages[kind] = template
    return messages


def parse_config(data: Any) -> LintConfig:
    """Build a :class:`LintConfig` from already-loaded YAML data.

    Raises ``ValueError`` on schema errors.
    """
    if data is None:
        return LintConfig()
    if not isinstance(data, dict):
        msg = f"{CONFIG_FILENAME} must be a YAML mapping"
        raise ValueError(msg)

    version = data.get("version")
    if version is None:
        msg = f"{CONFIG_FILENAME}: missing required 'version' field"
        raise ValueError(msg)
    if version not in SUPPORTED_SCHEMA_VERSIONS:
        expected = sorted(SUPPORTED_SCHEMA_VERSIONS)
        msg = f"{CONFIG_FILENAME}: unsupported version {version}, expected one of {expected}"
        raise ValueError(msg)

    exclude_raw = data.get("exclude", [])
    if not isinstance(exclude_raw, list):
        msg = f"{CONFIG_FILENAME}: 'exclude' must be a list of glob patterns"
        raise ValueError(msg)

    messages = _parse_messages(data.get("messages"))
    return LintConfig(
        convention=_parse_convention(data.get("convention"), messages),
        rules=_parse_rules(data.get("rules")),
        exclude=tuple(str(pattern) for pattern in exclude_raw),
    )


def load_config(config_path: Path) -> LintConfig:
    """Load *config_path*, falling back to defaults when it does not exist.

    Raises ``ValueError`` on YAML syntax or schema errors.
    """
    if not config_path.is_file():
        logger.debug("No config at %s, using defaults", config_path)
        return LintConfig()

    with config_path.open("r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            msg = f"{CONFIG_FILENAME}: invalid YAML: {exc}"
            raise ValueError(msg) from exc

    return parse_config(data)
