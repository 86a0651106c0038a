"""Inference client backed by the OpenAI API."""

from typing import Self

import structlog
from openai import AsyncOpenAI
from openai.types import ImagesResponse

from release_summarizer.utils.constants import (
    DEFAULT_MAX_AI_QUERY_LENGTH,
    DEFAULT_OPENAI_IMAGE_MODEL,
    DEFAULT_OPENAI_MODEL,
)

from .abc import InferenceClientBase

logger = structlog.get_logger(__name__)


class OpenAIInferenceClient(InferenceClientBase):
    """Runs text completions and image generation through an ``AsyncOpenAI`` client."""

    def __init__(
        self,
        client: AsyncOpenAI,
        model: str = DEFAULT_OPENAI_MODEL,
        image_model: str = DEFAULT_OPENAI_IMAGE_MODEL,
        max_input_length: int = DEFAULT_MAX_AI_QUERY_LENGTH,
        image_size: str = "1024x1024",
    ) -> None:
        """Initialize the inference client with an already-initialized OpenAI client."""
        self.client = client
        self.model = model
        self.image_model = image_model
        self.max_input_length = max_input_length
        self.image_size = image_size

    @classmethod
    def create(
        cls,
        api_key: str,
        base_url: str | None = None,
        model: str = DEFAULT_OPENAI_MODEL,
        image_model: str = DEFAULT_OPENAI_IMAGE_MODEL,
        max_input_length: int = DEFAULT_MAX_AI_QUERY_LENGTH,
    ) -> Self:
        """Create an inference client from credentials."""
        logger.info("Creating OpenAI inference client", model=model, image_model=image_model, base_url=base_url)
        client = AsyncOpenAI(api_key=api_key, base_url=base_url)
        return cls(client, model=model, image_model=image_model, max_input_length=max_input_length)

    async def predict(self, *segments: str) -> str | None:
        """Complete the prompt formed by concatenating ``segments``.

        Returns the text of the first choice, or None when the service produced nothing.
        """
        prompt = "".join(segments)
        logger.debug("Requesting completion", model=self.model, prompt_length=len(prompt))
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
        )
        if not response.choices:
            return None
        content = response.choices[0].message.content
        logger.debug("Received completion", model=self.model, result_length=len(content or ""))
        return content

    async def generate_image(self, prompt: str) -> ImagesResponse:
        """Generate a single image and return the service response."""
        logger.debug("Requesting image", model=self.image_model, prompt_length=len(prompt))
        return await self.client.images.generate(
            model=self.image_model,
            prompt=prompt,
            n=1,
            size=self.image_size,  # type: ignore[arg-type]
        )
