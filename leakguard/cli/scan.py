"""
LeakGuard CLI - Scan Command

Walks a directory tree and reports every line that looks like a secret.

Exit codes:
    0 - No secrets found
    1 - Secrets found, or the tree could not be scanned at all
"""
from typing import Optional

import click

from leakguard.core.exceptions import LeakGuardError
from leakguard.core.reporter import ConsoleReporter, JsonReporter
from leakguard.core.walker import scan_tree
from leakguard.utils.config import load_config
from leakguard.utils.logger import get_logger


@click.command()
@click.argument("root", type=click.Path(), default=".")
@click.option(
    "--config", "-c", "config_path",
    type=click.Path(dir_okay=False),
    envvar="LEAKGUARD_CONFIG",
    default=None,
    help="YAML file with extra rules, allowlist entries and exclusions"
)
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (json prints a single report on stdout)"
)
@click.option(
    "--all-rules",
    is_flag=True,
    help="Report every matching rule per line instead of only the first"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Show debug logging"
)
def scan(root: str, config_path: Optional[str], output_format: str, all_rules: bool, verbose: bool):
    """
    🔍 Scan ROOT (default: current directory) for exposed secrets.

    Examples:
        leakguard scan
        leakguard scan path/to/repo
        leakguard scan --format json > report.json
    """
    get_logger("leakguard", "DEBUG" if verbose else None)

    try:
        config = load_config(config_path)
        if all_rules:
            config = config.with_options(report_all_rules=True)

        reporter = JsonReporter() if output_format == "json" else ConsoleReporter()
        found = scan_tree(root, config, reporter)
    except LeakGuardError as e:
        click.echo(f"❌ Error: {e.message}", err=True)
        raise SystemExit(1)

    raise SystemExit(1 if found else 0)
