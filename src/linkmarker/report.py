"""Render findings and compute the process exit status."""

from __future__ import annotations

from collections.abc import Iterable

from linkmarker.contracts.finding import CheckReport, Finding

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_UNREADABLE = 2


def render_findings(findings: Iterable[Finding]) -> list[str]:
    return [finding.render() for finding in findings]


def exit_code_for(report: CheckReport) -> int:
    if report.unreadable:
        return EXIT_UNREADABLE
    if report.findings:
        return EXIT_FINDINGS
    return EXIT_OK
