"""Argument parser for the linkmarker CLI."""

from __future__ import annotations

import argparse

from linkmarker.version import package_version


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linkmarker",
        description="Check the links in every markdown document under a directory.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {package_version()}")
    parser.add_argument(
        "--root",
        "-r",
        default=".",
        help="The path to the root of the documentation to be checked",
    )
    parser.add_argument("--skip-http", action="store_true", help="Skip validation of HTTP[S] URLs")
    parser.add_argument("--no-images", action="store_true", help="Do not check image destinations")
    parser.add_argument("--timeout", type=float, default=10.0, help="Per-request timeout in seconds")
    parser.add_argument("--max-concurrent", type=int, default=8, help="Maximum in-flight URL checks")
    parser.add_argument("--max-redirects", type=int, default=5, help="Maximum redirects followed per URL")
    parser.add_argument("--progress", action="store_true", help="Show progress bars on stderr")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser
