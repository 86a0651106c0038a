"""Parsing of the changelog-style release notes generated by GitHub."""

import structlog

from release_summarizer.utils.constants import COMPARE_URL_PATTERN, PULL_REQUEST_LINK_PATTERN

from .models import PullRequestReference

logger = structlog.get_logger(__name__)


def parse_previous_tag(notes: str | None) -> str | None:
    """Recover the previous tag from the ``**Full Changelog**`` compare link, if any."""
    if not notes:
        return None
    match = COMPARE_URL_PATTERN.search(notes)
    if match is None or not match.group(1):
        logger.debug("No previous tag found in generated release notes")
        return None
    return match.group(1)


def parse_pull_request_references(notes: str | None) -> list[PullRequestReference]:
    """Extract every changelog line ending in a pull request link, in order.

    Lines without a trailing pull request link are not summarizable and are dropped.
    """
    references: list[PullRequestReference] = []
    for line in (notes or "").split("\n"):
        line = line.rstrip()
        match = PULL_REQUEST_LINK_PATTERN.search(line)
        if match is None:
            continue
        references.append(PullRequestReference(number=int(match.group(1)), line=line))
    logger.debug("Parsed pull request references", count=len(references), numbers=[ref.number for ref in references])
    return references


def format_previous_summary(body: str | None) -> str:
    """Format the body of the previous release as prompt context."""
    return f"THE PREVIOUS SUMMARY: \n```\n{body or ''}\n```\n"


def format_pull_request_summary(reference: PullRequestReference, summary: str) -> str:
    """Format a single pull request summary block for the release prompt."""
    return f"Summary for PR #{reference.number}:\nTitle: {reference.line}\n{summary}"
