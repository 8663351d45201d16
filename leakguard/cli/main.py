"""
LeakGuard CLI - Main entry point
"""
import click

from leakguard import __version__
from leakguard.cli import hooks, scan


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    🛡️  LeakGuard - Pre-commit Secret Leak Scanner

    Scan a source tree for credentials before they are committed.

    WORKFLOW:

    1. Scan the current directory:
       leakguard scan

    2. Block commits that contain secrets:
       leakguard hooks install
    """


# Register subcommands
cli.add_command(scan.scan)
cli.add_command(hooks.hooks)


if __name__ == '__main__':
    cli()
