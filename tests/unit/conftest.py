"""Fixtures for unit tests."""

from types import SimpleNamespace
from typing import Any, Generator, Sequence
from unittest.mock import AsyncMock, MagicMock

import pytest
import structlog

from release_summarizer.github.abc import GitHubClientBase
from release_summarizer.inference.abc import InferenceClientBase


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


def build_pull_request(number: int, body: str | None = None, title: str = "A change", head_sha: str = "head-sha") -> SimpleNamespace:
    """Build a stand-in for a githubkit pull request."""
    return SimpleNamespace(number=number, body=body, title=title, head=SimpleNamespace(sha=head_sha))


def build_release(
    body: str | None = "",
    tag_name: str = "v1.1",
    release_id: int = 42,
    assets: list[Any] | None = None,
    upload_url: str = "https://uploads.github.com/repos/owner/repo/releases/42/assets{?name,label}",
) -> SimpleNamespace:
    """Build a stand-in for a githubkit release."""
    return SimpleNamespace(id=release_id, tag_name=tag_name, body=body, assets=assets or [], upload_url=upload_url)


@pytest.fixture
def adapter() -> MagicMock:
    """A platform adapter whose operations are all async mocks."""
    mock = MagicMock(spec=GitHubClientBase)
    for name in (
        "get_pull_request",
        "update_pull_request",
        "list_files_in_pull_request",
        "create_issue_comment",
        "create_file_review_comment",
        "generate_release_notes",
        "get_release",
        "update_release",
        "delete_release_asset",
        "upload_release_asset",
    ):
        setattr(mock, name, AsyncMock())
    return mock


@pytest.fixture
def inference() -> MagicMock:
    """An inference client with a generous input limit and async mock operations."""
    mock = MagicMock(spec=InferenceClientBase)
    mock.max_input_length = 100_000
    mock.predict = AsyncMock(return_value="* A summary")
    mock.generate_image = AsyncMock()
    return mock


@pytest.fixture
def make_pull_request() -> Any:
    """Factory for pull request stand-ins."""
    return build_pull_request


@pytest.fixture
def make_release() -> Any:
    """Factory for release stand-ins."""
    return build_release


@pytest.fixture
def choose_yoda() -> Any:
    """A persona selector that always picks Yoda."""

    def select(personas: Sequence[str]) -> str:
        return "Yoda"

    return select
