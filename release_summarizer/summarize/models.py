"""Data models for release and pull request summarization."""

from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel


@dataclass(frozen=True)
class MarkerPair:
    """Literal header and footer delimiting an autogenerated summary region."""

    header: str
    footer: str


@dataclass(frozen=True)
class SummaryRegion:
    """The first marker-delimited region found in a text blob.

    ``start`` and ``end`` bound the region including both markers; ``text`` is
    what lies strictly between them.
    """

    text: str
    start: int
    end: int


@dataclass(frozen=True)
class PullRequestReference:
    """A pull request number together with the changelog line that mentions it."""

    number: int
    line: str


@dataclass
class PullRequestSummaryOptions:
    """Options passed through to per pull request summarization."""

    ignored_files: str = ""
    src_files: str = ""
    create_file_comments: bool = False
    output_as_comment: bool = False


@dataclass
class ReleaseSummaryOptions:
    """Options controlling a release summary run."""

    update_release: bool = False
    generate_image: bool = False
    replace_generated_notes: bool = False
    pull_requests: PullRequestSummaryOptions = field(default_factory=PullRequestSummaryOptions)


@dataclass
class GeneratedImage:
    """An image generated from a release summary and saved locally."""

    url: str
    content: bytes
    path: Path


class ReleasePromptContext(BaseModel):
    """Values rendered into the release summary prompt."""

    persona: str
    pull_request_summaries: list[str]
    previous_summary: str = ""


class ImageDescriptionPromptContext(BaseModel):
    """Values rendered into the image description prompt."""

    persona: str


class FileSummaryPromptContext(BaseModel):
    """Values rendered into the per-file diff summary prompt."""

    filename: str
    patch: str


class PullRequestPromptContext(BaseModel):
    """Values rendered into the pull request summary prompt."""

    title: str
    file_summaries: list[str]
