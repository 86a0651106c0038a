"""Main release summary orchestration."""

from pathlib import Path
from typing import Any

import structlog

from release_summarizer.github.abc import GitHubClientBase
from release_summarizer.inference.abc import InferenceClientBase
from release_summarizer.inference.exceptions import EmptyInferenceResultError
from release_summarizer.utils.constants import (
    RELEASE_SUMMARY_IMAGE_CONTENT_TYPE,
    RELEASE_SUMMARY_IMAGE_LABEL,
    RELEASE_SUMMARY_IMAGE_NAME,
    RELEASE_TOO_BIG_ERROR,
)

from .changelog import (
    format_previous_summary,
    format_pull_request_summary,
    parse_previous_tag,
    parse_pull_request_references,
)
from .images import generate_image_from_summary
from .markers import RELEASE_SUMMARY_MARKERS, resolve_base_text, unwrap_summary, wrap_summary
from .models import ReleaseSummaryOptions
from .personas import PERSONALITIES, PersonaSelector, random_persona
from .prompts import build_release_prompt
from .pull_requests import PullRequestSummarizer, resolve_pull_request_summary

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class ReleaseSummarizer:
    """Orchestrates release summary generation.

    Collects the summary of every pull request listed in the platform's
    generated release notes, asks the inference service for a brief
    bullet-point summary of the release and optionally writes it back to the
    release inside a marked region. A release that already carries the marked
    region is returned as-is unless replacement is requested.
    """

    def __init__(
        self,
        adapter: GitHubClientBase,
        inference: InferenceClientBase,
        pull_request_summarizer: PullRequestSummarizer | None = None,
        choose_persona: PersonaSelector = random_persona,
        image_path: Path = Path(RELEASE_SUMMARY_IMAGE_NAME),
    ) -> None:
        """Initialize with the platform adapter, the inference client and the persona selector.

        Args:
            adapter: Platform adapter bound to the repository owning the release
            inference: Text and image generation client
            pull_request_summarizer: Generator used for pull requests without a stored summary
            choose_persona: Picks the persona styling each prompt
            image_path: Where the generated image is saved locally
        """
        self.adapter = adapter
        self.inference = inference
        self.pull_request_summarizer = pull_request_summarizer or PullRequestSummarizer(adapter, inference)
        self.choose_persona = choose_persona
        self.image_path = image_path

    async def get_previous_summary(self, notes: str) -> str:
        """Format the body of the release preceding the generated notes as prompt context."""
        previous_tag = parse_previous_tag(notes)
        if previous_tag is None:
            return ""
        logger.info("Fetching previous release", previous_tag=previous_tag)
        previous_release = await self.adapter.get_release(previous_tag)
        return format_previous_summary(previous_release.body)

    async def get_pull_request_summaries(self, notes: str, options: ReleaseSummaryOptions) -> list[str]:
        """Resolve the summary of every pull request in the generated notes, in order."""
        summaries: list[str] = []
        for reference in parse_pull_request_references(notes):
            summary = await resolve_pull_request_summary(reference.number, self.adapter, self.pull_request_summarizer, options.pull_requests)
            summaries.append(format_pull_request_summary(reference, summary))
        return summaries

    async def delete_summary_images(self, release: Any) -> None:
        """Delete summary images attached to the release by earlier runs."""
        for asset in release.assets or []:
            if asset.name == RELEASE_SUMMARY_IMAGE_NAME:
                logger.info("Deleting previous summary image", tag_name=release.tag_name, asset_id=asset.id)
                await self.adapter.delete_release_asset(asset.id)

    async def attach_image(self, release: Any, summary: str, options: ReleaseSummaryOptions) -> str:
        """Generate the summary image and return the URL it should be linked with.

        When the release is updated the image is uploaded as a release asset,
        which expects summary images from earlier runs to be deleted already.
        """
        image = await generate_image_from_summary(summary, self.inference, self.choose_persona, self.image_path)
        if not options.update_release:
            return image.url
        asset = await self.adapter.upload_release_asset(
            release.upload_url,
            name=RELEASE_SUMMARY_IMAGE_NAME,
            data=image.content,
            content_type=RELEASE_SUMMARY_IMAGE_CONTENT_TYPE,
            label=RELEASE_SUMMARY_IMAGE_LABEL,
        )
        return asset.browser_download_url

    async def summarize(self, release: Any, options: ReleaseSummaryOptions | None = None) -> str:
        """Summarize a release.

        Args:
            release: The release to summarize (``id``, ``tag_name``, ``body``, ``assets``, ``upload_url``)
            options: Persistence, image and pull request options

        Returns:
            The release summary text, the existing summary when the release is
            already summarized, or a fixed error message when the release is too
            big to summarize.

        Raises:
            EmptyInferenceResultError: If the inference service returns no summary.
        """
        options = options or ReleaseSummaryOptions()
        base_body, existing = resolve_base_text(release.body, RELEASE_SUMMARY_MARKERS, options.replace_generated_notes)
        if existing is not None:
            logger.info("The release notes already contain an autogenerated summary. Skipping.", tag_name=release.tag_name)
            return unwrap_summary(existing)

        release_notes = await self.adapter.generate_release_notes(release.tag_name)
        notes: str = release_notes.body or ""
        logger.debug("Generated release notes", tag_name=release.tag_name, notes=notes)

        previous_summary = await self.get_previous_summary(notes)
        pull_request_summaries = await self.get_pull_request_summaries(notes, options)
        logger.info("Collected pull request summaries", tag_name=release.tag_name, count=len(pull_request_summaries))

        prompt = build_release_prompt(pull_request_summaries, previous_summary, self.choose_persona(PERSONALITIES))
        logger.debug("AI for release summary prompt", prompt=prompt)
        if len(prompt) > self.inference.max_input_length:
            logger.error(
                "Release prompt too big",
                tag_name=release.tag_name,
                prompt_length=len(prompt),
                max_input_length=self.inference.max_input_length,
            )
            return RELEASE_TOO_BIG_ERROR

        result = await self.inference.predict(prompt)
        if not result:
            raise EmptyInferenceResultError("release summary")
        logger.debug("AI for release summary result", result=result)

        if options.update_release:
            await self.delete_summary_images(release)

        if options.generate_image:
            image_url = await self.attach_image(release, result, options)
            result = f"{result}\n\n![Release Summary]({image_url})"

        if options.update_release:
            await self.adapter.update_release(release.id, body=wrap_summary(base_body, result, RELEASE_SUMMARY_MARKERS))
        return result
