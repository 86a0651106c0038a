"""Generation of an illustrative image from a release summary."""

from pathlib import Path

import httpx
import structlog

from release_summarizer.inference.abc import InferenceClientBase
from release_summarizer.inference.exceptions import EmptyInferenceResultError
from release_summarizer.utils.constants import RELEASE_SUMMARY_IMAGE_NAME

from .models import GeneratedImage
from .personas import PERSONALITIES, PersonaSelector, random_persona
from .prompts import build_image_description_prompt, build_image_generation_prompt

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def download_image(url: str, output_path: Path) -> bytes:
    """Download the image at ``url`` and save it to ``output_path``."""
    async with httpx.AsyncClient() as http_client:
        response = await http_client.get(url)
        response.raise_for_status()
    content = response.content
    output_path.write_bytes(content)
    logger.info("Saved generated image", path=str(output_path), size=len(content))
    return content


async def generate_image_from_summary(
    summary: str,
    inference: InferenceClientBase,
    choose_persona: PersonaSelector = random_persona,
    output_path: Path = Path(RELEASE_SUMMARY_IMAGE_NAME),
) -> GeneratedImage:
    """Generate an image illustrating a release summary.

    The inference service is first asked for a drawable scene describing the
    summary, then an image of that scene is generated, downloaded and saved.

    Raises:
        EmptyInferenceResultError: If the scene description, the image response
            or the image URL is missing.
    """
    logger.info("Generating image from summary")
    description = await inference.predict(*build_image_description_prompt(summary, choose_persona(PERSONALITIES)))
    if not description:
        raise EmptyInferenceResultError("image description")
    logger.debug("AI image prompt", description=description)

    response = await inference.generate_image(build_image_generation_prompt(description, choose_persona(PERSONALITIES)))
    if not response:
        raise EmptyInferenceResultError("image generation")
    url = response.data[0].url if response.data else None
    if not url:
        raise EmptyInferenceResultError("image url")
    logger.info("Generated image", url=url)

    content = await download_image(url, output_path)
    return GeneratedImage(url=url, content=content, path=output_path)
