"""Detection and replacement of autogenerated summary regions in text blobs.

A summary region is the text between a literal header marker and a literal
footer marker. Its presence means a summary was already generated, which lets
re-runs return the stored summary instead of generating a new one.
"""

import re

import structlog

from release_summarizer.utils.constants import (
    PULL_REQUEST_SUMMARY_FOOTER,
    PULL_REQUEST_SUMMARY_HEADER,
    RELEASE_SUMMARY_FOOTER,
    RELEASE_SUMMARY_HEADER,
)

from .models import MarkerPair, SummaryRegion

logger = structlog.get_logger(__name__)

RELEASE_SUMMARY_MARKERS = MarkerPair(header=RELEASE_SUMMARY_HEADER, footer=RELEASE_SUMMARY_FOOTER)
PULL_REQUEST_SUMMARY_MARKERS = MarkerPair(header=PULL_REQUEST_SUMMARY_HEADER, footer=PULL_REQUEST_SUMMARY_FOOTER)

SUMMARY_PADDING = "\n\n\n"


def compile_region_pattern(markers: MarkerPair) -> re.Pattern[str]:
    """Build the pattern matching the first header up to the first footer after it."""
    return re.compile(re.escape(markers.header) + r"(.*?)" + re.escape(markers.footer), re.DOTALL)


def find_summary_region(text: str | None, markers: MarkerPair) -> SummaryRegion | None:
    """Find the first summary region delimited by ``markers`` in ``text``."""
    if not text:
        return None
    match = compile_region_pattern(markers).search(text)
    if match is None:
        return None
    return SummaryRegion(text=match.group(1), start=match.start(), end=match.end())


def strip_summary_region(text: str, region: SummaryRegion) -> str:
    """Remove a region, markers included, leaving the rest of the text untouched."""
    return text[: region.start] + text[region.end :]


def resolve_base_text(text: str | None, markers: MarkerPair, replace: bool = False) -> tuple[str, SummaryRegion | None]:
    """Work out the text a new summary should be appended to.

    Returns:
        ``(base, existing)``. ``existing`` is set only when a region was found and
        ``replace`` is false; callers must then reuse ``existing.text`` instead of
        generating a new summary. Otherwise ``base`` is the original text, with
        the old region removed when one was found.
    """
    original = text or ""
    region = find_summary_region(original, markers)
    if region is None:
        return original, None
    if not replace:
        logger.info("Text already contains an autogenerated summary", header=markers.header)
        return original, region
    logger.info("Replacing the existing autogenerated summary", header=markers.header)
    return strip_summary_region(original, region), None


def wrap_summary(base: str, summary: str, markers: MarkerPair) -> str:
    """Append ``summary`` to ``base`` inside a marker-delimited region."""
    return f"{base}\n\n{markers.header}{SUMMARY_PADDING}{summary}{SUMMARY_PADDING}{markers.footer}"


def unwrap_summary(region: SummaryRegion) -> str:
    """Return the summary stored in a region without the padding ``wrap_summary`` adds around it."""
    text = region.text
    if text.startswith(SUMMARY_PADDING):
        text = text[len(SUMMARY_PADDING) :]
    if text.endswith(SUMMARY_PADDING):
        text = text[: -len(SUMMARY_PADDING)]
    return text
