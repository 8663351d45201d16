"""Line and file scanning for exposed secrets."""

import logging
from typing import List, Optional, Sequence

from leakguard.core.allowlist import Allowlist
from leakguard.core.models import Finding, PatternRule, ReadError, ReadOk, ReadResult
from leakguard.core.patterns import DEFAULT_EXCERPT_LENGTH
from leakguard.core.reporter import Reporter

logger = logging.getLogger(__name__)

COMMENT_PREFIXES = ("//", "*")
BYTE_ORDER_MARK = "\ufeff"


def trim_line(line: str) -> str:
    """Strip surrounding whitespace and a byte-order mark from a line."""
    return line.strip().strip(BYTE_ORDER_MARK).strip()


def is_comment_line(line: str) -> bool:
    """
    Guess whether a line is a comment from its leading characters.

    Only ``//`` line comments and ``*`` block-comment continuations are
    recognised. This is a prefix check, not a tokenizer: a string literal
    or markdown bullet starting with ``*`` is skipped too, and ``#`` or
    ``/*`` comments are still scanned.
    """
    return trim_line(line).startswith(COMMENT_PREFIXES)


class LineScanner:
    """Applies the rule registry and allowlist to individual lines."""

    def __init__(
        self,
        rules: Sequence[PatternRule],
        allowlist: Allowlist,
        excerpt_length: int = DEFAULT_EXCERPT_LENGTH,
        report_all_rules: bool = False,
    ):
        """
        Initialize the line scanner.

        Args:
            rules: Detection rules, in priority order
            allowlist: Substrings that suppress findings on a line
            excerpt_length: Maximum characters of the line kept in a finding
            report_all_rules: Report every matching rule instead of the first
        """
        self.rules = tuple(rules)
        self.allowlist = allowlist
        self.excerpt_length = excerpt_length
        self.report_all_rules = report_all_rules

    def scan_line(self, line: str, line_number: int, file_path: str = "") -> Optional[Finding]:
        """Return a finding for the first matching rule, or None."""
        findings = self._scan(line, line_number, file_path, first_only=True)
        return findings[0] if findings else None

    def findings_for(self, line: str, line_number: int, file_path: str = "") -> List[Finding]:
        """Return the findings for a line, honouring ``report_all_rules``."""
        return self._scan(line, line_number, file_path, first_only=not self.report_all_rules)

    def _scan(self, line: str, line_number: int, file_path: str, first_only: bool) -> List[Finding]:
        if is_comment_line(line):
            return []

        matched = []
        for rule in self.rules:
            if rule.matches(line):
                matched.append(rule)
                if first_only:
                    break

        if not matched or self.allowlist.is_allowed(line):
            return []

        excerpt = self.excerpt(line)
        return [
            Finding(
                file_path=file_path,
                line_number=line_number,
                rule_name=rule.name,
                line_excerpt=excerpt,
            )
            for rule in matched
        ]

    def excerpt(self, line: str) -> str:
        """Trim and truncate a line for safe display."""
        return trim_line(line)[: self.excerpt_length]


def read_file(path: str) -> ReadResult:
    """Read a file as UTF-8 text, keeping line endings untouched."""
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return ReadOk(f.read())
    except (OSError, UnicodeDecodeError) as e:
        return ReadError(str(e))


class FileScanner:
    """Scans whole files and streams findings to a reporter."""

    def __init__(self, line_scanner: LineScanner, reporter: Reporter):
        self.line_scanner = line_scanner
        self.reporter = reporter
        self.read_errors = 0

    def scan_file(self, path: str) -> bool:
        """
        Scan one file.

        Unreadable files (permissions, removed mid-scan, binary content)
        are reported and count as having no findings.

        Args:
            path: Path to the file

        Returns:
            True if at least one finding was emitted
        """
        result = read_file(path)
        if isinstance(result, ReadError):
            logger.debug("Could not read %s: %s", path, result.reason)
            self.read_errors += 1
            self.reporter.read_error(path, result.reason)
            return False

        found = False
        for index, line in enumerate(result.content.split("\n")):
            for finding in self.line_scanner.findings_for(line, index + 1, path):
                self.reporter.finding(finding)
                found = True
        return found
