"""CLI module for gcd-tool.

Provides the `gcd` command-line interface.
"""

from gcd_tool.cli.main import create_parser, main

__all__ = ["create_parser", "main"]
