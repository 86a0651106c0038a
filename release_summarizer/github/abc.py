"""Base ABC for GitHub clients."""

from abc import ABC, abstractmethod
from typing import Any


class GitHubClientBase(ABC):
    """Base ABC for GitHub clients."""

    # Pull Request Operations
    @abstractmethod
    async def get_pull_request(self, pull_request_number: int) -> Any:
        """Get a pull request for a repository."""
        pass

    @abstractmethod
    async def update_pull_request(self, pull_number: int, body: str | None = None, **kwargs: Any) -> Any:
        """Update a pull request for a repository."""
        pass

    @abstractmethod
    async def list_files_in_pull_request(self, pull_number: int) -> list[Any]:
        """List files changed in a pull request."""
        pass

    @abstractmethod
    async def create_issue_comment(self, issue_number: int, body: str) -> Any:
        """Create a comment on an issue or pull request."""
        pass

    @abstractmethod
    async def create_file_review_comment(self, pull_number: int, commit_id: str, path: str, body: str) -> Any:
        """Create a review comment on a whole file of a pull request."""
        pass

    # Release Operations
    @abstractmethod
    async def generate_release_notes(self, tag_name: str) -> Any:
        """Ask the platform to generate release notes for a tag."""
        pass

    @abstractmethod
    async def get_release(self, tag_name: str) -> Any:
        """Get a specific release by tag name."""
        pass

    @abstractmethod
    async def update_release(self, release_id: int, body: str | None = None, **kwargs: Any) -> Any:
        """Update a release."""
        pass

    @abstractmethod
    async def delete_release_asset(self, asset_id: int) -> None:
        """Delete an asset attached to a release."""
        pass

    @abstractmethod
    async def upload_release_asset(self, upload_url: str, name: str, data: bytes, content_type: str, label: str | None = None) -> Any:
        """Upload a binary asset to a release."""
        pass
