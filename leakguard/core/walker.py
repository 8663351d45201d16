"""Recursive directory traversal for the secret scan."""

import logging
import os
from typing import List, Optional

from leakguard.core.exceptions import ScanError
from leakguard.core.reporter import Reporter
from leakguard.core.scanner import FileScanner, LineScanner
from leakguard.utils.config import ScanConfig

logger = logging.getLogger(__name__)


class TreeWalker:
    """
    Walks a source tree depth-first and scans every eligible file.

    Entries are visited in name order, directories pre-order, so the
    finding stream is identical between runs over an unchanged tree.
    Symbolic links are never followed.
    """

    def __init__(self, config: ScanConfig, reporter: Optional[Reporter] = None):
        """
        Initialize the walker.

        Args:
            config: Rules, allowlist and exclusion sets for this run
            reporter: Receives findings and diagnostics (defaults to a silent Reporter)
        """
        self.config = config
        self.reporter = reporter if reporter is not None else Reporter()
        self.file_scanner = FileScanner(
            LineScanner(
                config.rules,
                config.allowlist,
                excerpt_length=config.excerpt_length,
                report_all_rules=config.report_all_rules,
            ),
            self.reporter,
        )
        self.files_scanned = 0
        self.files_skipped = 0
        self.entry_errors = 0

    @property
    def read_errors(self) -> int:
        """Unreadable files and entries seen so far."""
        return self.entry_errors + self.file_scanner.read_errors

    def walk(self, root: str) -> bool:
        """
        Scan everything below ``root``.

        Counters start from zero on every call.

        Args:
            root: Directory to start from

        Returns:
            True if any file produced a finding

        Raises:
            ScanError: If the root is missing or cannot be listed
        """
        self.files_scanned = 0
        self.files_skipped = 0
        self.entry_errors = 0
        self.file_scanner.read_errors = 0

        if not os.path.isdir(root):
            raise ScanError(f"Directory not found: {root}", details={"root": root})

        try:
            names = self._list(root)
        except OSError as e:
            raise ScanError(f"Cannot read directory {root}: {e}", details={"root": root})

        found = self._walk_entries(root, names)
        logger.debug(
            "Scanned %d files, skipped %d, %d read errors",
            self.files_scanned,
            self.files_skipped,
            self.read_errors,
        )
        return found

    def _list(self, directory: str) -> List[str]:
        return sorted(os.listdir(directory))

    def _walk_directory(self, directory: str) -> bool:
        try:
            names = self._list(directory)
        except OSError as e:
            self._read_error(directory, str(e))
            return False
        return self._walk_entries(directory, names)

    def _walk_entries(self, directory: str, names: List[str]) -> bool:
        found = False
        for name in names:
            if self._visit(os.path.join(directory, name), name):
                found = True
        return found

    def _visit(self, path: str, name: str) -> bool:
        exclusions = self.config.exclusions

        if os.path.islink(path):
            if exclusions.is_ignored_directory(name) or exclusions.is_ignored_file(name):
                self._skip(path)
            else:
                self._read_error(path, "symbolic link not followed")
            return False

        if os.path.isdir(path):
            if exclusions.is_ignored_directory(name):
                self._skip(path)
                return False
            return self._walk_directory(path)

        # FIFOs, sockets, devices, or an entry that vanished since listing
        if not os.path.isfile(path):
            self._read_error(path, "not a regular file")
            return False

        if exclusions.is_ignored_file(name):
            self._skip(path)
            return False

        self.files_scanned += 1
        return self.file_scanner.scan_file(path)

    def _skip(self, path: str) -> None:
        logger.debug("Skipping %s", path)
        self.files_skipped += 1

    def _read_error(self, path: str, reason: str) -> None:
        self.entry_errors += 1
        self.reporter.read_error(path, reason)


def scan_tree(root: str, config: Optional[ScanConfig] = None, reporter: Optional[Reporter] = None) -> bool:
    """
    Run one complete scan and report the verdict.

    Args:
        root: Directory to scan
        config: Scan configuration (defaults to the built-in one)
        reporter: Output sink (defaults to a silent Reporter)

    Returns:
        True if secrets were found
    """
    reporter = reporter if reporter is not None else Reporter()
    walker = TreeWalker(config or ScanConfig.default(), reporter)
    reporter.start(root)
    found = walker.walk(root)
    reporter.finish(found)
    return found
