"""Core domain models for LeakGuard."""

import re
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Union


@dataclass(frozen=True)
class PatternRule:
    """A named detector for one kind of credential."""

    name: str
    matcher: re.Pattern

    @classmethod
    def compile(cls, name: str, pattern: str, ignore_case: bool = False) -> "PatternRule":
        """Build a rule from a raw regular expression."""
        flags = re.IGNORECASE if ignore_case else 0
        return cls(name=name, matcher=re.compile(pattern, flags))

    def matches(self, line: str) -> bool:
        """Return True if the pattern occurs anywhere in ``line``."""
        return self.matcher.search(line) is not None


@dataclass(frozen=True)
class ExclusionSets:
    """Names and suffixes the tree walker never enters or scans."""

    ignored_directories: FrozenSet[str] = field(default_factory=frozenset)
    ignored_files: FrozenSet[str] = field(default_factory=frozenset)
    ignored_suffixes: FrozenSet[str] = field(default_factory=frozenset)

    def is_ignored_directory(self, name: str) -> bool:
        """Check a directory base name against the ignored set."""
        return name in self.ignored_directories

    def is_ignored_file(self, name: str) -> bool:
        """Check a file base name against ignored names and suffixes."""
        if name in self.ignored_files:
            return True
        return any(name.endswith(suffix) for suffix in self.ignored_suffixes)


@dataclass(frozen=True)
class Finding:
    """Represents a line that matched a rule and was not allowlisted."""

    file_path: str
    line_number: int
    rule_name: str
    line_excerpt: str

    def to_dict(self) -> Dict[str, object]:
        """Serialize for the JSON report."""
        return {
            "file_path": self.file_path,
            "line_number": self.line_number,
            "rule_name": self.rule_name,
            "line_excerpt": self.line_excerpt,
        }


@dataclass(frozen=True)
class ReadOk:
    """File content that was read successfully."""

    content: str


@dataclass(frozen=True)
class ReadError:
    """A file that could not be read, with the reason."""

    reason: str


ReadResult = Union[ReadOk, ReadError]
