"""Command-line interface for linkmarker."""

from linkmarker.cli.app import main
from linkmarker.cli.parser import build_parser

__all__ = ["build_parser", "main"]
