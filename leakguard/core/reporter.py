"""Reporters that turn the finding stream into user-facing output."""

import json
from typing import List

import click

from leakguard.core.models import Finding


class Reporter:
    """
    Receives scan events in traversal order.

    The base class keeps the findings and read errors it has seen so a
    caller can inspect them after the walk; subclasses add output.
    """

    def __init__(self) -> None:
        self.findings: List[Finding] = []
        self.read_errors: List[str] = []

    def start(self, root: str) -> None:
        """Called once before the walk begins."""

    def finding(self, finding: Finding) -> None:
        """Called for every finding, as soon as it is produced."""
        self.findings.append(finding)

    def read_error(self, path: str, reason: str) -> None:
        """Called for every entry that could not be read."""
        self.read_errors.append(path)

    def finish(self, found: bool) -> None:
        """Called once with the overall verdict."""


class ConsoleReporter(Reporter):
    """Human-readable diagnostics on stderr with a pass/fail banner."""

    def start(self, root: str) -> None:
        click.echo("🔍 Starting secret scan...")

    def finding(self, finding: Finding) -> None:
        super().finding(finding)
        click.echo(
            f"{click.style('[FAIL]', fg='red')} Potential {finding.rule_name} found in "
            f"{click.style(f'{finding.file_path}:{finding.line_number}', fg='cyan')}",
            err=True,
        )
        click.echo(f"       Match found: {finding.line_excerpt}...", err=True)

    def read_error(self, path: str, reason: str) -> None:
        super().read_error(path, reason)
        click.echo(f"Error reading file {path}: {reason}", err=True)

    def finish(self, found: bool) -> None:
        if found:
            click.secho(
                "\n❌ Secrets detected! Please remove them before pushing.",
                fg="red",
                err=True,
            )
        else:
            click.secho("\n✅ No secrets found.", fg="green")


class JsonReporter(Reporter):
    """Collects findings and prints a single JSON document at the end."""

    def __init__(self) -> None:
        super().__init__()
        self.root = ""

    def start(self, root: str) -> None:
        self.root = root

    def read_error(self, path: str, reason: str) -> None:
        super().read_error(path, reason)
        click.echo(f"Error reading file {path}: {reason}", err=True)

    def finish(self, found: bool) -> None:
        payload = {
            "root": self.root,
            "passed": not found,
            "total_findings": len(self.findings),
            "findings": [finding.to_dict() for finding in self.findings],
            "read_errors": list(self.read_errors),
        }
        click.echo(json.dumps(payload, indent=2))
