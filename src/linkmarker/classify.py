"""String-level classification of link destinations.

Classification never touches the filesystem or the network, so the same
destination always lands in the same :class:`LinkKind`.
"""

from __future__ import annotations

import ipaddress
import re

from linkmarker.contracts.document import LinkOccurrence
from linkmarker.contracts.links import ClassifiedLink, LinkKind

_SCHEME_PATTERN = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")
_DRIVE_PATTERN = re.compile(r"^[A-Za-z]:[\\/]")
_BAD_PERCENT_PATTERN = re.compile(r"%(?![0-9A-Fa-f]{2})")
_AUTHORITY_END_PATTERN = re.compile(r"[/\\?#]")

# Schemes that require a host, following the WHATWG "special scheme" list.
_SPECIAL_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})
_FORBIDDEN_HOST_CHARS = frozenset("\x00\t\n\r #/:<>?@[\\]^|")


def classify_destination(raw: str) -> ClassifiedLink:
    """Return the single :class:`ClassifiedLink` variant for *raw*."""
    if raw.startswith(("/", "\\")) or _DRIVE_PATTERN.match(raw):
        return ClassifiedLink(kind=LinkKind.ABSOLUTE_PATH, target=raw)

    match = _SCHEME_PATTERN.match(raw)
    if match is not None:
        reason = url_syntax_error(match.group(1).lower(), raw[match.end() :])
        if reason is not None:
            return ClassifiedLink(kind=LinkKind.MALFORMED_URL, target=raw, reason=reason)
        return ClassifiedLink(kind=LinkKind.ABSOLUTE_URL, target=raw)

    if "://" in raw:
        return ClassifiedLink(kind=LinkKind.MALFORMED_URL, target=raw, reason="invalid scheme")

    return ClassifiedLink(kind=LinkKind.RELATIVE_PATH, target=raw)


def url_syntax_error(scheme: str, rest: str) -> str | None:
    """Describe why ``scheme:rest`` is not a valid absolute URL, or return ``None``."""
    if _BAD_PERCENT_PATTERN.search(rest):
        return "invalid percent-encoding"
    if scheme not in _SPECIAL_SCHEMES:
        return None

    authority = _AUTHORITY_END_PATTERN.split(rest.lstrip("/\\"), maxsplit=1)[0]
    host_port = authority.rpartition("@")[2]

    if host_port.startswith("["):
        end = host_port.find("]")
        if end == -1:
            return "invalid IPv6 address"
        host, port = host_port[: end + 1], host_port[end + 1 :]
        try:
            ipaddress.IPv6Address(host[1:-1])
        except ValueError:
            return "invalid IPv6 address"
        if port and not port.startswith(":"):
            return "invalid IPv6 address"
        port = port[1:]
    else:
        host, _, port = host_port.partition(":")
        if any(ch in _FORBIDDEN_HOST_CHARS for ch in host):
            return "invalid domain character"

    if not host:
        return "empty host"
    if port and not (port.isascii() and port.isdigit() and int(port) <= 65535):
        return "invalid port number"
    return None


def classify_occurrence(occurrence: LinkOccurrence) -> ClassifiedLink:
    """Tag reference-style occurrences by label, everything else by destination."""
    if occurrence.reference is not None:
        return ClassifiedLink(kind=LinkKind.REFERENCE, target=occurrence.reference)
    return classify_destination(occurrence.destination)
