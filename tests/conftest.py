"""Test fixtures and utilities."""

from types import SimpleNamespace

import pytest

from leakguard.core.allowlist import Allowlist
from leakguard.core.patterns import DEFAULT_ALLOWLIST, DEFAULT_RULES
from leakguard.core.reporter import Reporter
from leakguard.core.scanner import LineScanner
from leakguard.utils.config import ScanConfig


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without subprocesses")


@pytest.fixture
def samples():
    """Secret-shaped strings, assembled so this file passes its own scan."""
    return SimpleNamespace(
        aws_key="AKIA" + "ABCDEFGHIJKLMNOP",
        github_token="ghp_" + "a1B2c3D4e5" * 3 + "f6G7h8",
        gitlab_token="glpat-" + "x9Y8z7W6v5U4t3S2r1Q0",
        private_key="-----BEGIN " + "PRIVATE KEY-----",
        rsa_key="-----BEGIN RSA " + "PRIVATE KEY-----",
        api_key_line="api_key" + ' = "abcdefghijklmnop1234"',
        password_line="pass" + 'word = "hunter2!hunter2"',
    )


@pytest.fixture
def line_scanner():
    """Line scanner with the built-in rules and allowlist."""
    return LineScanner(DEFAULT_RULES, Allowlist(DEFAULT_ALLOWLIST))


@pytest.fixture
def default_config():
    """Built-in scan configuration."""
    return ScanConfig.default()


@pytest.fixture
def reporter():
    """Silent reporter that records what it receives."""
    return Reporter()


@pytest.fixture
def temp_test_dir(tmp_path):
    """Create a temporary directory for testing."""
    test_dir = tmp_path / "test_repo"
    test_dir.mkdir()
    return test_dir


@pytest.fixture
def sample_tree(temp_test_dir, samples):
    """
    Small source tree with secrets in scanned and ignored places.

    test_repo/
        app.js              AWS key on line 2
        docs/notes.md       clean
        node_modules/x.js   AWS key (ignored directory)
        server.log          AWS key (ignored suffix)
        src/config.py       password on line 3
    """
    (temp_test_dir / "app.js").write_text(
        f'const region = "us-east-1";\nconst token = "{samples.aws_key}";\n'
    )
    (temp_test_dir / "docs").mkdir()
    (temp_test_dir / "docs" / "notes.md").write_text("Nothing to see here.\n")
    (temp_test_dir / "node_modules").mkdir()
    (temp_test_dir / "node_modules" / "x.js").write_text(f'key = "{samples.aws_key}"\n')
    (temp_test_dir / "server.log").write_text(f"{samples.aws_key}\n")
    (temp_test_dir / "src").mkdir()
    (temp_test_dir / "src" / "config.py").write_text(
        f"import os\n\n{samples.password_line}\n"
    )
    return temp_test_dir
