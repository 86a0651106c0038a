"""GitHub client adapter for the githubkit library."""

from functools import wraps
from pathlib import Path
from typing import Any, Awaitable, Callable, Self, TypeVar

import structlog
from githubkit import Response
from githubkit.exception import RequestFailed
from githubkit.versions.latest.models import (
    DiffEntry,
    IssueComment,
    PullRequest,
    PullRequestReviewComment,
    Release,
    ReleaseAsset,
    ReleaseNotesContent,
)

from release_summarizer.configuration.models import GitHubAuthenticationType
from release_summarizer.utils.github import expand_upload_url, split_repository_in_configuration

from .abc import GitHubClientBase
from .client import GitHubClient, get_github_client

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def handle_github_422(func: F) -> F:
    """Decorator to handle GitHub 422 Unprocessable Entity errors, logging and raising with details."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except RequestFailed as exc:
            if exc.response.status_code == 422:
                try:
                    error_data = exc.response.json()
                except Exception:
                    error_data = {}
                message = error_data.get("message", "Unprocessable Entity")
                errors = error_data.get("errors", [])
                logger.error(
                    "GitHub 422 Unprocessable Entity",
                    function=func.__name__,
                    message=message,
                    errors=errors,
                    status_code=422,
                )
                raise ValueError(f"GitHub 422 error in {func.__name__}: {message} | errors: {errors}") from exc
            raise

    return wrapper  # type: ignore


class GitHubKitAdapter(GitHubClientBase):
    """GitHub client adapter for the githubkit library."""

    def __init__(self, client: GitHubClient, owner: str, repo_name: str) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name

    def _omit_null_parameters(self, **kwargs: Any) -> dict[str, Any]:
        """Omit parameters that are None."""
        return {k: v for k, v in kwargs.items() if v is not None}

    @classmethod
    async def create(
        cls,
        repo: str,
        github_auth_type: GitHubAuthenticationType,
        github_pat_token: str | None = None,
        github_app_id: int | None = None,
        github_app_private_key_path: Path | None = None,
        github_app_installation_id: int | None = None,
        github_api_url: str = "https://api.github.com",
    ) -> Self:
        """Create a new GitHub client adapter.

        Args:
            repo: Repository in 'owner/repo' format
            github_auth_type: Type of authentication (PAT or APP)
            github_pat_token: Personal access token (required for PAT auth)
            github_app_id: GitHub App ID (required for APP auth)
            github_app_private_key_path: Path to private key file (required for APP auth)
            github_app_installation_id: Installation ID (required for APP auth)
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance
        """
        owner, repo_name = await split_repository_in_configuration(repo=repo)
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=github_api_url,
            owner=owner,
            repo_name=repo_name,
        )
        client = await get_github_client(
            repo=repo,
            github_auth_type=github_auth_type,
            github_pat_token=github_pat_token,
            github_app_id=github_app_id,
            github_app_private_key_path=github_app_private_key_path,
            github_app_installation_id=github_app_installation_id,
            github_api_url=github_api_url,
        )
        return cls(client, owner, repo_name)

    # Pull Request Operations
    async def get_pull_request(self, pull_request_number: int) -> PullRequest:
        """Get a pull request from the repository."""
        response: Response[PullRequest] = await self.client.rest.pulls.async_get(
            owner=self.owner, repo=self.repo_name, pull_number=pull_request_number
        )
        return response.parsed_data

    @handle_github_422
    async def update_pull_request(self, pull_number: int, body: str | None = None, **kwargs: Any) -> PullRequest:
        """Update a pull request for a repository."""
        params = self._omit_null_parameters(body=body, **kwargs)
        response: Response[PullRequest] = await self.client.rest.pulls.async_update(
            owner=self.owner,
            repo=self.repo_name,
            pull_number=pull_number,
            **params,
        )
        logger.info("Updated pull request", pull_number=pull_number)
        return response.parsed_data

    async def list_files_in_pull_request(self, pull_number: int, per_page: int = 100) -> list[DiffEntry]:
        """List files changed in a pull request, handling pagination."""
        all_files: list[DiffEntry] = []
        page: int = 1
        while True:
            response: Response[list[DiffEntry]] = await self.client.rest.pulls.async_list_files(
                owner=self.owner,
                repo=self.repo_name,
                pull_number=pull_number,
                per_page=per_page,
                page=page,
            )
            files: list[DiffEntry] = response.parsed_data
            if not files:
                break
            all_files.extend(files)
            if len(files) < per_page:
                break
            page += 1
        logger.debug("Listed pull request files", pull_number=pull_number, file_count=len(all_files))
        return all_files

    @handle_github_422
    async def create_issue_comment(self, issue_number: int, body: str) -> IssueComment:
        """Create a comment on an issue or pull request."""
        response: Response[IssueComment] = await self.client.rest.issues.async_create_comment(
            owner=self.owner,
            repo=self.repo_name,
            issue_number=issue_number,
            body=body,
        )
        logger.info("Created comment", issue_number=issue_number)
        return response.parsed_data

    @handle_github_422
    async def create_file_review_comment(self, pull_number: int, commit_id: str, path: str, body: str) -> PullRequestReviewComment:
        """Create a review comment on a whole file of a pull request."""
        response: Response[PullRequestReviewComment] = await self.client.rest.pulls.async_create_review_comment(
            owner=self.owner,
            repo=self.repo_name,
            pull_number=pull_number,
            commit_id=commit_id,
            path=path,
            body=body,
            subject_type="file",
        )
        logger.debug("Created file review comment", pull_number=pull_number, path=path)
        return response.parsed_data

    # Release Operations
    @handle_github_422
    async def generate_release_notes(self, tag_name: str) -> ReleaseNotesContent:
        """Generate the platform's changelog-style release notes for a tag."""
        response: Response[ReleaseNotesContent] = await self.client.rest.repos.async_generate_release_notes(
            owner=self.owner,
            repo=self.repo_name,
            tag_name=tag_name,
        )
        return response.parsed_data

    @handle_github_422
    async def get_release(self, tag_name: str) -> Release:
        """Get a specific release by tag name."""
        response: Response[Release] = await self.client.rest.repos.async_get_release_by_tag(
            owner=self.owner,
            repo=self.repo_name,
            tag=tag_name,
        )
        return response.parsed_data

    @handle_github_422
    async def update_release(self, release_id: int, body: str | None = None, **kwargs: Any) -> Release:
        """Update a release for a repository."""
        params = self._omit_null_parameters(body=body, **kwargs)
        response: Response[Release] = await self.client.rest.repos.async_update_release(
            owner=self.owner,
            repo=self.repo_name,
            release_id=release_id,
            **params,
        )
        logger.info("Updated release", release_id=release_id)
        return response.parsed_data

    async def delete_release_asset(self, asset_id: int) -> None:
        """Delete an asset attached to a release."""
        await self.client.rest.repos.async_delete_release_asset(
            owner=self.owner,
            repo=self.repo_name,
            asset_id=asset_id,
        )
        logger.info("Deleted release asset", asset_id=asset_id)

    @handle_github_422
    async def upload_release_asset(self, upload_url: str, name: str, data: bytes, content_type: str, label: str | None = None) -> ReleaseAsset:
        """Upload a binary asset to the release owning ``upload_url``.

        Release uploads go to a separate host (``uploads.github.com`` on github.com),
        so the ``upload_url`` of the release object is used with its template suffix removed.
        """
        response: Response[ReleaseAsset] = await self.client.arequest(
            "POST",
            expand_upload_url(upload_url),
            params=self._omit_null_parameters(name=name, label=label),
            content=data,
            headers={"Content-Type": content_type},
            response_model=ReleaseAsset,
        )
        logger.info("Uploaded release asset", name=name, size=len(data))
        return response.parsed_data
