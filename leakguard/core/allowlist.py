"""Allowlist filter for suppressing known false positives."""

from typing import Iterable, Tuple


class Allowlist:
    """
    Literal substrings that exempt a line from every rule.

    Matching is plain, case-sensitive substring containment. Entries are
    never interpreted as patterns.
    """

    def __init__(self, entries: Iterable[str] = ()):
        """Initialize the allowlist with its entries."""
        self.entries: Tuple[str, ...] = tuple(entry for entry in entries if entry)

    def is_allowed(self, line: str) -> bool:
        """Return True if ``line`` contains any allowlist entry."""
        return any(entry in line for entry in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"Allowlist({list(self.entries)!r})"
