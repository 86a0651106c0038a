"""Summaries of individual pull requests.

A pull request's summary is read from the marked region of its description
when one exists. Otherwise it is generated from the diffs of the files it
changes and written back to the pull request.
"""

from typing import Any

import structlog

from release_summarizer.github.abc import GitHubClientBase
from release_summarizer.inference.abc import InferenceClientBase
from release_summarizer.inference.exceptions import EmptyInferenceResultError
from release_summarizer.utils.constants import PULL_REQUEST_TOO_BIG_ERROR
from release_summarizer.utils.files import filter_files

from .markers import PULL_REQUEST_SUMMARY_MARKERS, find_summary_region, resolve_base_text, unwrap_summary, wrap_summary
from .models import PullRequestSummaryOptions
from .prompts import build_file_summary_prompt, build_pull_request_prompt

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def get_file_patch(file: Any) -> str | None:
    """Return the unified diff of a changed file, or None for binary or oversized files."""
    patch = getattr(file, "patch", None)
    return patch if isinstance(patch, str) and patch else None


class PullRequestSummarizer:
    """Generates and persists a summary for a pull request from its file diffs."""

    def __init__(self, adapter: GitHubClientBase, inference: InferenceClientBase) -> None:
        """Initialize with the platform adapter and the inference client."""
        self.adapter = adapter
        self.inference = inference

    async def summarize_file(self, filename: str, patch: str) -> str | None:
        """Summarize the diff of one file, or return None when it cannot be summarized."""
        prompt = build_file_summary_prompt(filename, patch)
        if len(prompt) > self.inference.max_input_length:
            logger.warning("File diff too big to summarize, skipping", filename=filename, prompt_length=len(prompt))
            return None
        summary = await self.inference.predict(prompt)
        if not summary:
            logger.warning("Empty summary for file, skipping", filename=filename)
            return None
        return summary

    async def summarize(
        self,
        pull_request_number: int,
        options: PullRequestSummaryOptions | None = None,
        pull_request: Any | None = None,
    ) -> str:
        """Generate a summary for a pull request and persist it.

        Args:
            pull_request_number: Number of the pull request to summarize.
            options: File filters and output options.
            pull_request: The pull request when the caller already fetched it.

        Returns:
            The generated summary text, or a fixed error message when the
            pull request prompt exceeds the inference limit.

        Raises:
            EmptyInferenceResultError: If the service returns no pull request summary.
        """
        options = options or PullRequestSummaryOptions()
        if pull_request is None:
            pull_request = await self.adapter.get_pull_request(pull_request_number)
        changed_files = await self.adapter.list_files_in_pull_request(pull_request_number)
        files_by_name = {file.filename: file for file in changed_files}
        kept_filenames = filter_files(list(files_by_name), options.ignored_files, options.src_files)
        logger.info(
            "Summarizing pull request",
            pull_request_number=pull_request_number,
            changed_file_count=len(changed_files),
            kept_file_count=len(kept_filenames),
        )

        file_summaries: list[str] = []
        for filename in kept_filenames:
            patch = get_file_patch(files_by_name[filename])
            if patch is None:
                logger.debug("No patch available for file, skipping", filename=filename)
                continue
            summary = await self.summarize_file(filename, patch)
            if summary is None:
                continue
            file_summaries.append(f"{filename}:\n{summary}")
            if options.create_file_comments:
                await self.adapter.create_file_review_comment(pull_request_number, pull_request.head.sha, filename, summary)

        prompt = build_pull_request_prompt(pull_request.title, file_summaries)
        logger.debug("AI for pull request summary prompt", pull_request_number=pull_request_number, prompt=prompt)
        if len(prompt) > self.inference.max_input_length:
            logger.error("Pull request prompt too big", pull_request_number=pull_request_number, prompt_length=len(prompt))
            return PULL_REQUEST_TOO_BIG_ERROR

        summary = await self.inference.predict(prompt)
        if not summary:
            raise EmptyInferenceResultError("pull request summary")
        logger.debug("AI for pull request summary result", pull_request_number=pull_request_number, result=summary)

        if options.output_as_comment:
            await self.adapter.create_issue_comment(pull_request_number, wrap_summary("", summary, PULL_REQUEST_SUMMARY_MARKERS).lstrip())
        else:
            base, _ = resolve_base_text(pull_request.body, PULL_REQUEST_SUMMARY_MARKERS, replace=True)
            await self.adapter.update_pull_request(pull_request_number, body=wrap_summary(base, summary, PULL_REQUEST_SUMMARY_MARKERS))
        return summary


async def resolve_pull_request_summary(
    pull_request_number: int,
    adapter: GitHubClientBase,
    summarizer: PullRequestSummarizer,
    options: PullRequestSummaryOptions | None = None,
) -> str:
    """Return the summary stored in a pull request description, generating one when absent."""
    pull_request = await adapter.get_pull_request(pull_request_number)
    region = find_summary_region(pull_request.body, PULL_REQUEST_SUMMARY_MARKERS)
    if region is not None:
        logger.info("Using existing pull request summary", pull_request_number=pull_request_number)
        return unwrap_summary(region)
    logger.info("No existing pull request summary, generating one", pull_request_number=pull_request_number)
    return await summarizer.summarize(pull_request_number, options, pull_request=pull_request)
