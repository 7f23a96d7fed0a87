"""Filesystem and network validators."""

from linkmarker.validators.paths import PathCheck, PathValidator
from linkmarker.validators.urls import UrlValidator, create_http_client

__all__ = ["PathCheck", "PathValidator", "UrlValidator", "create_http_client"]
