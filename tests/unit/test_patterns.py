"""Unit tests for the built-in rule registry and allowlist."""

import re

import pytest

from leakguard.core.allowlist import Allowlist
from leakguard.core.models import ExclusionSets, PatternRule
from leakguard.core.patterns import DEFAULT_ALLOWLIST, DEFAULT_EXCLUSIONS, DEFAULT_RULES


def rule(name):
    return next(r for r in DEFAULT_RULES if r.name == name)


@pytest.mark.unit
class TestPatternRule:
    """Test PatternRule."""

    def test_compile(self):
        """Test building a rule from a raw pattern."""
        r = PatternRule.compile("Example", r"abc\d+")

        assert r.name == "Example"
        assert isinstance(r.matcher, re.Pattern)
        assert r.matches("xx abc123 yy")
        assert not r.matches("ABC123")

    def test_compile_ignore_case(self):
        """Test case-insensitive rules."""
        r = PatternRule.compile("Example", r"abc\d+", ignore_case=True)

        assert r.matches("ABC123")

    def test_invalid_pattern_raises(self):
        """Test that a broken pattern fails at construction time."""
        with pytest.raises(re.error):
            PatternRule.compile("Broken", "([unclosed")


@pytest.mark.unit
class TestDefaultRules:
    """Test the built-in detectors."""

    def test_registry_order(self):
        """Test that rules are declared in priority order."""
        assert [r.name for r in DEFAULT_RULES] == [
            "GitLab Token",
            "GitHub Token",
            "Private Key",
            "RSA Key",
            "AWS Access Key",
            "Generic API Key",
            "Hardcoded Password",
        ]

    def test_rule_names_unique(self):
        """Test that no two rules share a name."""
        names = [r.name for r in DEFAULT_RULES]
        assert len(names) == len(set(names))

    def test_gitlab_token(self, samples):
        """Test GitLab token detection needs 20+ characters after the prefix."""
        assert rule("GitLab Token").matches(samples.gitlab_token)
        assert not rule("GitLab Token").matches("glpat-" + "short")

    def test_github_token(self, samples):
        """Test GitHub token detection needs exactly 36 characters."""
        assert rule("GitHub Token").matches(samples.github_token)
        assert not rule("GitHub Token").matches("ghp_" + "a" * 35)

    def test_private_key_headers(self, samples):
        """Test PEM headers map to distinct rules."""
        assert rule("Private Key").matches(samples.private_key)
        assert not rule("Private Key").matches(samples.rsa_key)
        assert rule("RSA Key").matches(samples.rsa_key)

    def test_aws_access_key(self, samples):
        """Test AWS key IDs need an uppercase suffix."""
        assert rule("AWS Access Key").matches(samples.aws_key)
        assert not rule("AWS Access Key").matches("AKIA" + "abcdefghijklmnop")

    def test_generic_api_key(self, samples):
        """Test the key/value assignment shape."""
        r = rule("Generic API Key")

        assert r.matches(samples.api_key_line)
        assert r.matches("AUTH" + ": 'ABCDEFGHIJKLMNOPQRST'")
        assert not r.matches("api_key" + ' = "tooshort"')
        assert not r.matches("api_key" + " = os.environ['X']")

    def test_hardcoded_password(self, samples):
        """Test the password assignment shape."""
        r = rule("Hardcoded Password")

        assert r.matches(samples.password_line)
        assert r.matches("PASSWORD" + ": 'p@ss:w0rd'")
        assert not r.matches("pass" + 'word = "short"')
        assert not r.matches("pass" + 'word = "has space inside"')


@pytest.mark.unit
class TestAllowlist:
    """Test Allowlist."""

    def test_substring_match(self):
        """Test plain substring containment."""
        allowlist = Allowlist(["process.env."])

        assert allowlist.is_allowed("const t = process.env.TOKEN;")
        assert not allowlist.is_allowed("const t = process.environment;")

    def test_case_sensitive(self):
        """Test that matching respects case."""
        allowlist = Allowlist(["GITLAB_API_TOKEN"])

        assert allowlist.is_allowed("GITLAB_API_TOKEN=")
        assert not allowlist.is_allowed("gitlab_api_token=")

    def test_not_a_pattern(self):
        """Test that entries are never treated as regular expressions."""
        allowlist = Allowlist(["a.c"])

        assert allowlist.is_allowed("xa.cx")
        assert not allowlist.is_allowed("abc")

    def test_empty_entries_ignored(self):
        """Test that an empty entry does not allow every line."""
        allowlist = Allowlist([""])

        assert len(allowlist) == 0
        assert not allowlist.is_allowed("anything")

    def test_defaults(self):
        """Test the built-in allowlist covers placeholders and env names."""
        allowlist = Allowlist(DEFAULT_ALLOWLIST)

        assert allowlist.is_allowed("your-glpat-token-here")
        assert allowlist.is_allowed("export JIRA_API_TOKEN")
        assert allowlist.is_allowed("process.env.SECRET")


@pytest.mark.unit
class TestExclusionSets:
    """Test ExclusionSets."""

    def test_directory_names(self):
        """Test directory names are matched on the base name."""
        assert DEFAULT_EXCLUSIONS.is_ignored_directory("node_modules")
        assert DEFAULT_EXCLUSIONS.is_ignored_directory(".git")
        assert not DEFAULT_EXCLUSIONS.is_ignored_directory("src")

    def test_file_names_and_suffixes(self):
        """Test file names and suffixes."""
        assert DEFAULT_EXCLUSIONS.is_ignored_file(".env")
        assert DEFAULT_EXCLUSIONS.is_ignored_file("yarn.lock")
        assert DEFAULT_EXCLUSIONS.is_ignored_file("debug.log")
        assert DEFAULT_EXCLUSIONS.is_ignored_file("logo.png")
        assert not DEFAULT_EXCLUSIONS.is_ignored_file(".env.example")
        assert not DEFAULT_EXCLUSIONS.is_ignored_file("logo.jpeg")

    def test_empty_sets(self):
        """Test that an empty ExclusionSets ignores nothing."""
        exclusions = ExclusionSets()

        assert not exclusions.is_ignored_directory("node_modules")
        assert not exclusions.is_ignored_file(".env")
