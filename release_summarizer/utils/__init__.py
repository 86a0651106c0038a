"""Utility modules for shared functionality."""

from .constants import (
    COMPARE_URL_PATTERN,
    PULL_REQUEST_LINK_PATTERN,
    RELEASE_SUMMARY_IMAGE_NAME,
    RELEASE_TOO_BIG_ERROR,
)
from .files import filter_files

__all__ = [
    "COMPARE_URL_PATTERN",
    "PULL_REQUEST_LINK_PATTERN",
    "RELEASE_SUMMARY_IMAGE_NAME",
    "RELEASE_TOO_BIG_ERROR",
    "filter_files",
]
