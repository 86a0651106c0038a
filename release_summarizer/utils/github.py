"""Contains utility functions for GitHub interactions."""

import re

URI_TEMPLATE_SUFFIX_PATTERN = re.compile(r"\{[^}]*\}$")


async def split_repository_in_configuration(repo: str | None) -> tuple[str, str]:
    """Splits the repository in the configuration into owner and repository."""
    if repo is None:
        raise ValueError("A repository in the format 'owner/repo' is required.")
    repo = repo.strip("/")
    parts = repo.split("/")
    if len(parts) != 2 or not all(parts):
        raise ValueError("Repository must be in the format 'owner/repo' with no leading/trailing slashes or extra parts.")
    owner, repository = parts
    return owner, repository


def expand_upload_url(upload_url: str) -> str:
    """Strip the RFC 6570 query template GitHub appends to release upload URLs.

    For example, ``https://uploads.github.com/repos/o/r/releases/1/assets{?name,label}``
    becomes ``https://uploads.github.com/repos/o/r/releases/1/assets``.
    """
    return URI_TEMPLATE_SUFFIX_PATTERN.sub("", upload_url)
