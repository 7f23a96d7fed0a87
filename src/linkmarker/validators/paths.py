"""Relative path existence checks."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import unquote

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathCheck:
    exists: bool
    error: str | None = None


def strip_suffixes(destination: str) -> str:
    """Drop the ``#fragment`` and ``?query`` parts and percent-decode the rest."""
    path = destination.split("#", maxsplit=1)[0]
    path = path.split("?", maxsplit=1)[0]
    return unquote(path)


class PathValidator:
    """Resolve relative destinations against the owning document's directory."""

    def check(self, destination: str, directory: Path) -> PathCheck:
        path = strip_suffixes(destination)
        if not path:
            # Anchor-only or empty destinations point at the current document.
            return PathCheck(exists=True)

        target = directory / path
        try:
            target.stat()
        except (FileNotFoundError, NotADirectoryError):
            return PathCheck(exists=False)
        except OSError as exc:
            _LOG.debug("stat failed for %s: %s", target, exc)
            return PathCheck(exists=False, error=exc.strerror or str(exc))
        except ValueError as exc:
            return PathCheck(exists=False, error=str(exc))
        return PathCheck(exists=True)
