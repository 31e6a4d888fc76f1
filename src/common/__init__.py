"""Shared helpers for configuration files and command-line tools."""
