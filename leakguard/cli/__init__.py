"""Command-line interface for LeakGuard."""
