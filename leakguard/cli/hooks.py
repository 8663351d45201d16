"""
LeakGuard CLI - Git Hooks Management

Provides commands for installing and managing the pre-commit hook
that runs a secret scan before every commit.
"""
import os
import stat
from pathlib import Path

import click

HOOK_MARKER = "LeakGuard"

# Pre-commit hook script template
PRE_COMMIT_HOOK = '''#!/bin/sh
#
# LeakGuard Pre-Commit Hook
# Prevents committing secrets to the repository
#
# To skip this hook (use with caution):
#   git commit --no-verify
#
# To uninstall:
#   leakguard hooks uninstall
#

REPO_ROOT=$(git rev-parse --show-toplevel 2>/dev/null)

if ! command -v leakguard >/dev/null 2>&1; then
    echo "LeakGuard not found. Skipping secret scan."
    echo "   Install with: pip install leakguard"
    exit 0
fi

leakguard scan "$REPO_ROOT"
EXIT_CODE=$?

if [ $EXIT_CODE -ne 0 ]; then
    echo ""
    echo "Commit blocked: remove the secrets above or add them to the allowlist."
    echo "Skip this check with: git commit --no-verify (not recommended)"
    exit 1
fi

exit 0
'''


def _git_dir(path: str) -> Path:
    """Resolve the .git directory of a repository or exit with an error."""
    repo_path = Path(path).resolve()
    git_dir = repo_path / ".git"

    if not git_dir.is_dir():
        click.echo(f"❌ Error: {repo_path} is not a git repository", err=True)
        click.echo("   Run 'git init' first or specify a valid repository path", err=True)
        raise SystemExit(1)

    return git_dir


def _is_leakguard_hook(hook_path: Path) -> bool:
    with open(hook_path, "r", encoding="utf-8", errors="replace") as f:
        return HOOK_MARKER in f.read()


@click.group()
def hooks():
    """🪝 Manage Git pre-commit hooks for secret detection."""
    pass


@hooks.command("install")
@click.option(
    "--path", "-p",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    help="Path to git repository"
)
@click.option(
    "--force", "-f",
    is_flag=True,
    help="Overwrite existing pre-commit hook"
)
def install_hook(path: str, force: bool):
    """
    Install the LeakGuard pre-commit hook.

    Examples:
        leakguard hooks install
        leakguard hooks install --path /path/to/repo --force
    """
    hooks_dir = _git_dir(path) / "hooks"
    hooks_dir.mkdir(exist_ok=True)

    pre_commit_path = hooks_dir / "pre-commit"

    if pre_commit_path.exists() and not force:
        click.echo(f"⚠️  Pre-commit hook already exists at {pre_commit_path}")
        click.echo("   Use --force to overwrite")
        if _is_leakguard_hook(pre_commit_path):
            click.echo("   (This appears to be a LeakGuard hook)")
        else:
            click.echo("   (This is a custom hook - consider backing it up)")
        raise SystemExit(1)

    with open(pre_commit_path, "w", encoding="utf-8") as f:
        f.write(PRE_COMMIT_HOOK)

    os.chmod(pre_commit_path, os.stat(pre_commit_path).st_mode | stat.S_IEXEC)

    click.echo("✅ Pre-commit hook installed successfully!")
    click.echo(f"   Location: {pre_commit_path}")


@hooks.command("uninstall")
@click.option(
    "--path", "-p",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    help="Path to git repository"
)
def uninstall_hook(path: str):
    """
    Uninstall the LeakGuard pre-commit hook.

    Examples:
        leakguard hooks uninstall
    """
    pre_commit_path = _git_dir(path) / "hooks" / "pre-commit"

    if not pre_commit_path.exists():
        click.echo("ℹ️  No pre-commit hook found. Nothing to uninstall.")
        return

    if not _is_leakguard_hook(pre_commit_path):
        click.echo("⚠️  The existing pre-commit hook is not a LeakGuard hook.")
        if not click.confirm("   Do you still want to remove it?"):
            click.echo("   Aborted.")
            return

    pre_commit_path.unlink()
    click.echo("✅ Pre-commit hook uninstalled successfully!")


@hooks.command("status")
@click.option(
    "--path", "-p",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    help="Path to git repository"
)
def hook_status(path: str):
    """
    Check the status of the LeakGuard pre-commit hook.

    Examples:
        leakguard hooks status
    """
    pre_commit_path = _git_dir(path) / "hooks" / "pre-commit"

    if not pre_commit_path.exists():
        click.echo("❌ Pre-commit hook: NOT INSTALLED")
        click.echo("   Run 'leakguard hooks install' to enable secret scanning")
        return

    if not _is_leakguard_hook(pre_commit_path):
        click.echo("⚠️  Pre-commit hook: INSTALLED (Custom/Other)")
        return

    click.echo("✅ Pre-commit hook: INSTALLED (LeakGuard)")
    if os.access(pre_commit_path, os.X_OK):
        click.echo("✅ Hook is executable")
    else:
        click.echo("⚠️  Hook is NOT executable - fixing...")
        os.chmod(pre_commit_path, os.stat(pre_commit_path).st_mode | stat.S_IEXEC)
