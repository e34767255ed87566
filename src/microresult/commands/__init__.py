"""Subcommands of the ``microresult`` CLI."""
