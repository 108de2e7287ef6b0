"""Command-line interface for finagg."""

from finagg.presentation.cli.app import app, cli

__all__ = ["app", "cli"]
