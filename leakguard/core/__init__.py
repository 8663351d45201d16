"""Core package for LeakGuard."""

from leakguard.core.allowlist import Allowlist
from leakguard.core.exceptions import ConfigurationError, LeakGuardError, ScanError
from leakguard.core.models import ExclusionSets, Finding, PatternRule, ReadError, ReadOk
from leakguard.core.reporter import ConsoleReporter, JsonReporter, Reporter
from leakguard.core.scanner import FileScanner, LineScanner, is_comment_line, read_file
from leakguard.core.walker import TreeWalker, scan_tree

__all__ = [
    "Allowlist",
    "ConfigurationError",
    "ConsoleReporter",
    "ExclusionSets",
    "FileScanner",
    "Finding",
    "JsonReporter",
    "LeakGuardError",
    "LineScanner",
    "PatternRule",
    "ReadError",
    "ReadOk",
    "Reporter",
    "ScanError",
    "TreeWalker",
    "is_comment_line",
    "read_file",
    "scan_tree",
]
