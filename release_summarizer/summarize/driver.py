"""Orchestrates the summarization workflows run from the CLI."""

import time
from pathlib import Path

import structlog

from release_summarizer.configuration.models import GitHubAuthenticationType
from release_summarizer.github.adapter import GitHubKitAdapter
from release_summarizer.inference.openai_client import OpenAIInferenceClient
from release_summarizer.utils.constants import (
    DEFAULT_MAX_AI_QUERY_LENGTH,
    DEFAULT_OPENAI_IMAGE_MODEL,
    DEFAULT_OPENAI_MODEL,
    RELEASE_SUMMARY_IMAGE_NAME,
)

from .models import PullRequestSummaryOptions, ReleaseSummaryOptions
from .pull_requests import PullRequestSummarizer, resolve_pull_request_summary
from .release import ReleaseSummarizer

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def run_summarize_release_workflow(
    repo: str,
    tag_name: str,
    github_auth_type: GitHubAuthenticationType,
    github_pat_token: str | None,
    github_app_id: int | None,
    github_app_private_key_path: Path | None,
    github_app_installation_id: int | None,
    github_api_url: str,
    openai_api_key: str,
    openai_base_url: str | None = None,
    openai_model: str = DEFAULT_OPENAI_MODEL,
    openai_image_model: str = DEFAULT_OPENAI_IMAGE_MODEL,
    max_ai_query_length: int = DEFAULT_MAX_AI_QUERY_LENGTH,
    options: ReleaseSummaryOptions | None = None,
    image_path: Path = Path(RELEASE_SUMMARY_IMAGE_NAME),
) -> str:
    """Run the summarize-release workflow: fetch the release by tag and summarize it."""
    github_adapter = await GitHubKitAdapter.create(
        repo=repo,
        github_auth_type=github_auth_type,
        github_pat_token=github_pat_token,
        github_app_id=github_app_id,
        github_app_private_key_path=github_app_private_key_path,
        github_app_installation_id=github_app_installation_id,
        github_api_url=github_api_url,
    )
    inference = OpenAIInferenceClient.create(
        api_key=openai_api_key,
        base_url=openai_base_url,
        model=openai_model,
        image_model=openai_image_model,
        max_input_length=max_ai_query_length,
    )
    release = await github_adapter.get_release(tag_name)

    start_time = time.time()
    logger.info("Summarizing release", repo=repo, tag_name=tag_name, release_id=release.id)
    summarizer = ReleaseSummarizer(github_adapter, inference, image_path=image_path)
    summary = await summarizer.summarize(release, options)
    end_time = time.time()
    logger.info(
        "Summarized release",
        repo=repo,
        tag_name=tag_name,
        duration=round(end_time - start_time, 2),
        summary_length=len(summary),
    )
    return summary


async def run_summarize_pull_request_workflow(
    repo: str,
    pull_request_number: int,
    github_auth_type: GitHubAuthenticationType,
    github_pat_token: str | None,
    github_app_id: int | None,
    github_app_private_key_path: Path | None,
    github_app_installation_id: int | None,
    github_api_url: str,
    openai_api_key: str,
    openai_base_url: str | None = None,
    openai_model: str = DEFAULT_OPENAI_MODEL,
    max_ai_query_length: int = DEFAULT_MAX_AI_QUERY_LENGTH,
    options: PullRequestSummaryOptions | None = None,
) -> str:
    """Run the summarize-pr workflow: return the stored summary of a pull request or generate one."""
    github_adapter = await GitHubKitAdapter.create(
        repo=repo,
        github_auth_type=github_auth_type,
        github_pat_token=github_pat_token,
        github_app_id=github_app_id,
        github_app_private_key_path=github_app_private_key_path,
        github_app_installation_id=github_app_installation_id,
        github_api_url=github_api_url,
    )
    inference = OpenAIInferenceClient.create(
        api_key=openai_api_key,
        base_url=openai_base_url,
        model=openai_model,
        max_input_length=max_ai_query_length,
    )
    summarizer = PullRequestSummarizer(github_adapter, inference)
    return await resolve_pull_request_summary(pull_request_number, github_adapter, summarizer, options)
