"""
Configuration management for LeakGuard
Bundles the rule registry, allowlist and exclusion sets for one scan
"""
import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from leakguard.core.allowlist import Allowlist
from leakguard.core.exceptions import ConfigurationError
from leakguard.core.models import ExclusionSets, PatternRule
from leakguard.core.patterns import (
    DEFAULT_ALLOWLIST,
    DEFAULT_EXCERPT_LENGTH,
    DEFAULT_EXCLUSIONS,
    DEFAULT_RULES,
)


@dataclass(frozen=True)
class ScanConfig:
    """Immutable settings for a single scan run"""
    rules: Tuple[PatternRule, ...]
    allowlist: Allowlist
    exclusions: ExclusionSets
    excerpt_length: int = DEFAULT_EXCERPT_LENGTH
    report_all_rules: bool = False

    @classmethod
    def default(cls) -> 'ScanConfig':
        """Built-in rules, allowlist and exclusions"""
        return cls(
            rules=DEFAULT_RULES,
            allowlist=Allowlist(DEFAULT_ALLOWLIST),
            exclusions=DEFAULT_EXCLUSIONS,
        )

    def with_options(self, **changes) -> 'ScanConfig':
        """Return a copy with the given fields replaced"""
        return replace(self, **changes)


class RuleSchema(BaseModel):
    """A detection rule as written in the config file"""
    name: str = Field(..., min_length=1, description="Human-readable rule name")
    pattern: str = Field(..., min_length=1, description="Regular expression")
    ignore_case: bool = Field(False, description="Match case-insensitively")


class ConfigFileSchema(BaseModel):
    """Top-level layout of a LeakGuard YAML config file"""
    extend_defaults: bool = Field(True, description="Append to the built-in lists instead of replacing them")
    rules: List[RuleSchema] = Field(default_factory=list)
    allowlist: List[str] = Field(default_factory=list)
    ignored_directories: List[str] = Field(default_factory=list)
    ignored_files: List[str] = Field(default_factory=list)
    ignored_suffixes: List[str] = Field(default_factory=list)
    excerpt_length: int = Field(DEFAULT_EXCERPT_LENGTH, gt=0)


def _compile_rules(schemas: List[RuleSchema]) -> Tuple[PatternRule, ...]:
    rules = []
    for rule in schemas:
        try:
            rules.append(PatternRule.compile(rule.name, rule.pattern, rule.ignore_case))
        except re.error as e:
            raise ConfigurationError(
                f"Invalid pattern for rule '{rule.name}': {e}",
                details={"rule": rule.name, "pattern": rule.pattern},
            )
    return tuple(rules)


def build_config(data: dict) -> ScanConfig:
    """
    Build a ScanConfig from already-parsed config data

    Args:
        data: Mapping with the keys described by ConfigFileSchema

    Returns:
        The resulting ScanConfig
    """
    try:
        schema = ConfigFileSchema.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")

    rules = _compile_rules(schema.rules)
    allowlist = tuple(schema.allowlist)
    directories = frozenset(schema.ignored_directories)
    files = frozenset(schema.ignored_files)
    suffixes = frozenset(schema.ignored_suffixes)

    if schema.extend_defaults:
        base = ScanConfig.default()
        rules = base.rules + rules
        allowlist = base.allowlist.entries + allowlist
        directories |= base.exclusions.ignored_directories
        files |= base.exclusions.ignored_files
        suffixes |= base.exclusions.ignored_suffixes

    names = [rule.name for rule in rules]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise ConfigurationError(
            f"Duplicate rule names: {', '.join(duplicates)}",
            details={"duplicates": duplicates},
        )

    return ScanConfig(
        rules=rules,
        allowlist=Allowlist(allowlist),
        exclusions=ExclusionSets(
            ignored_directories=directories,
            ignored_files=files,
            ignored_suffixes=suffixes,
        ),
        excerpt_length=schema.excerpt_length,
    )


def load_config(config_path: Optional[Union[str, Path]] = None) -> ScanConfig:
    """
    Load scan configuration

    Args:
        config_path: Path to a YAML config file (defaults to the built-in configuration)

    Returns:
        The resulting ScanConfig
    """
    if config_path is None:
        return ScanConfig.default()

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {config_path}: {e}")
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Config file {config_path} is not valid YAML: {e}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")

    return build_config(data)
