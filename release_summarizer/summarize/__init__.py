"""Release and pull request summarization module."""

from .images import generate_image_from_summary
from .markers import (
    PULL_REQUEST_SUMMARY_MARKERS,
    RELEASE_SUMMARY_MARKERS,
    find_summary_region,
    resolve_base_text,
    unwrap_summary,
    wrap_summary,
)
from .models import (
    GeneratedImage,
    MarkerPair,
    PullRequestReference,
    PullRequestSummaryOptions,
    ReleaseSummaryOptions,
    SummaryRegion,
)
from .personas import PERSONALITIES, PersonaSelector, random_persona
from .pull_requests import PullRequestSummarizer, resolve_pull_request_summary
from .release import ReleaseSummarizer

__all__ = [
    "PULL_REQUEST_SUMMARY_MARKERS",
    "RELEASE_SUMMARY_MARKERS",
    "PERSONALITIES",
    "GeneratedImage",
    "MarkerPair",
    "PersonaSelector",
    "PullRequestReference",
    "PullRequestSummaryOptions",
    "ReleaseSummaryOptions",
    "SummaryRegion",
    "PullRequestSummarizer",
    "ReleaseSummarizer",
    "find_summary_region",
    "generate_image_from_summary",
    "random_persona",
    "resolve_base_text",
    "resolve_pull_request_summary",
    "unwrap_summary",
    "wrap_summary",
]
