"""Shared helpers for LeakGuard."""
