"""HTTP API for spendtracker."""

from spendtracker.api.app import create_app

__all__ = ["create_app"]
