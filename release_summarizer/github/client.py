"""Sets up the authenticated githubkit client."""

from pathlib import Path
from typing import TypeAlias

import structlog
from githubkit import GitHub
from githubkit.auth import (
    AppAuthStrategy,
    AppInstallationAuthStrategy,
    TokenAuthStrategy,
)
from githubkit.versions.latest.models import Installation

from release_summarizer.configuration.models import GitHubAuthenticationType
from release_summarizer.utils.github import split_repository_in_configuration

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

GitHubClient: TypeAlias = GitHub[AppInstallationAuthStrategy] | GitHub[TokenAuthStrategy]


async def get_github_app_client(
    repo: str,
    github_app_id: int,
    github_app_private_key_path: Path,
    github_api_url: str,
) -> GitHub[AppInstallationAuthStrategy]:
    """Returns a GitHub client authenticated as the App installation for the repository."""
    try:
        private_key = Path(github_app_private_key_path).read_text(encoding="utf-8")
        app_client = GitHub(AppAuthStrategy(app_id=github_app_id, private_key=private_key), base_url=github_api_url, http_cache=False)

        owner, repository = await split_repository_in_configuration(repo=repo)
        resp = await app_client.rest.apps.async_get_repo_installation(owner=owner, repo=repository)
        repo_installation: Installation = resp.parsed_data
        logger.debug("Resolved GitHub App installation", installation_id=repo_installation.id, repo=repo)
        return app_client.with_auth(app_client.auth.as_installation(repo_installation.id))
    except Exception as e:
        raise ValueError(f"Failed to get GitHub App installation: {e}") from e


async def get_github_client(
    repo: str,
    github_auth_type: GitHubAuthenticationType,
    github_pat_token: str | None,
    github_app_id: int | None,
    github_app_private_key_path: Path | None,
    github_app_installation_id: int | None,
    github_api_url: str,
) -> GitHubClient:
    """Returns an authenticated GitHub client using either GitHub App or PAT credentials.

    Supports custom base URL for GitHub Enterprise Server (GHES).
    Raises RuntimeError if the credentials for the chosen authentication type are missing.
    """
    if github_auth_type == GitHubAuthenticationType.APP:
        if not (github_app_id and github_app_private_key_path and github_app_installation_id):
            raise RuntimeError("GitHub App authentication requires app_id, private_key_path, and installation_id in config.")
        return await get_github_app_client(repo, github_app_id, github_app_private_key_path, github_api_url)
    if not github_pat_token:
        raise RuntimeError("GitHub PAT authentication requires github_pat_token in config.")
    # Disable HTTP caching to always read the latest release and pull request bodies
    return GitHub(TokenAuthStrategy(github_pat_token), base_url=github_api_url, http_cache=False)
