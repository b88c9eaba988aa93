"""
Command-line interface for sri-metadata.
"""

from .main import cli_main, main

__all__ = ["cli_main", "main"]
