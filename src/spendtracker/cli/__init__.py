"""CLI package for spendtracker."""
