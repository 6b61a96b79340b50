"""CLI helpers for account commands."""

from .account_cli import AccountCLI, assign_path, parse_assignment

__all__ = ["AccountCLI", "assign_path", "parse_assignment"]
