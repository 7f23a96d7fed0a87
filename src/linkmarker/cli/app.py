"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from linkmarker.cli.parser import build_parser
from linkmarker.cli.progress import RichCheckProgress
from linkmarker.contracts.exceptions import ConfigError, DiscoveryError
from linkmarker.contracts.finding import CheckReport
from linkmarker.engine.progress import CheckProgress
from linkmarker.report import EXIT_UNREADABLE, exit_code_for, render_findings
from linkmarker.sdk import LinkMarker

EXIT_CONFIG = 3


async def _run_check(args: argparse.Namespace, progress: CheckProgress | None = None) -> CheckReport:
    marker = LinkMarker.from_options(
        root=args.root,
        check_http=not args.skip_http,
        check_images=not args.no_images,
        timeout=args.timeout,
        max_concurrent=args.max_concurrent,
        max_redirects=args.max_redirects,
        progress=progress,
    )
    return await marker.check()


def _check(args: argparse.Namespace) -> CheckReport:
    if not args.progress:
        return asyncio.run(_run_check(args))
    with RichCheckProgress() as progress:
        return asyncio.run(_run_check(args, progress))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        report = _check(args)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG
    except DiscoveryError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_UNREADABLE

    for line in render_findings(report.findings):
        print(line)
    return exit_code_for(report)
