"""Built-in detection rules, allowlist and exclusion defaults."""

from typing import Tuple

from leakguard.core.models import ExclusionSets, PatternRule

# PEM headers are split so this module does not match its own rules.
_PEM_BEGIN = "-----BEGIN "
_PEM_PRIVATE_KEY = "PRIVATE KEY-----"

DEFAULT_RULES: Tuple[PatternRule, ...] = (
    PatternRule.compile("GitLab Token", r"glpat-[0-9a-zA-Z\-_]{20,}"),
    PatternRule.compile("GitHub Token", r"ghp_[0-9a-zA-Z]{36}"),
    PatternRule.compile("Private Key", _PEM_BEGIN + _PEM_PRIVATE_KEY),
    PatternRule.compile("RSA Key", _PEM_BEGIN + "RSA " + _PEM_PRIVATE_KEY),
    PatternRule.compile("AWS Access Key", r"AKIA[0-9A-Z]{16}"),
    PatternRule.compile(
        "Generic API Key",
        r"""(api_key|apikey|secret|token|password|auth)\s*[:=]\s*["'][a-zA-Z0-9\-_]{16,}["']""",
        ignore_case=True,
    ),
    PatternRule.compile(
        "Hardcoded Password",
        r"""password\s*[:=]\s*["'][^"'\s]{8,}["']""",
        ignore_case=True,
    ),
)

# Placeholder values, env lookups and the names (not values) of the
# variables the API clients read their credentials from.
DEFAULT_ALLOWLIST: Tuple[str, ...] = (
    "your-glpat-token-here",
    "your-api-token",
    "your-password",
    "process.env.",
    "GITLAB_API_TOKEN",
    "JIRA_API_TOKEN",
    "GITLAB_URL",
    "JIRA_BASE_URL",
    "JIRA_EMAIL",
)

DEFAULT_IGNORED_DIRECTORIES = frozenset(
    {".git", "node_modules", "build", "dist", "coverage", ".vscode", ".gemini"}
)

DEFAULT_IGNORED_FILES = frozenset(
    {
        "package-lock.json",
        "yarn.lock",
        ".DS_Store",
        ".env",
        ".env.local",
        ".env.test",
        ".env.production",
    }
)

DEFAULT_IGNORED_SUFFIXES = frozenset({".log", ".png", ".jpg"})

DEFAULT_EXCLUSIONS = ExclusionSets(
    ignored_directories=DEFAULT_IGNORED_DIRECTORIES,
    ignored_files=DEFAULT_IGNORED_FILES,
    ignored_suffixes=DEFAULT_IGNORED_SUFFIXES,
)

DEFAULT_EXCERPT_LENGTH = 100
