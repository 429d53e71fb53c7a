"""Headstamp CLI subcommands."""
