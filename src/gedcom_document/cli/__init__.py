"""
CLI package for gedcom_document.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from gedcom_document.cli.app import app, main

__all__ = [
    "app",
    "main",
]
