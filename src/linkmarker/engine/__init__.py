"""Check pipeline: dispatch, URL coordination and progress events."""

from linkmarker.engine.coordinator import UrlCheckCoordinator, url_cache_key
from linkmarker.engine.dispatcher import LinkDispatcher, PendingUrlFinding
from linkmarker.engine.engine import CheckEngine
from linkmarker.engine.progress import CheckProgress, NullCheckProgress

__all__ = [
    "CheckEngine",
    "CheckProgress",
    "LinkDispatcher",
    "NullCheckProgress",
    "PendingUrlFinding",
    "UrlCheckCoordinator",
    "url_cache_key",
]
