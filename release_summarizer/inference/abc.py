"""Base ABC for inference clients."""

from abc import ABC, abstractmethod
from typing import Any


class InferenceClientBase(ABC):
    """Base ABC for text and image generation clients."""

    max_input_length: int

    @abstractmethod
    async def predict(self, *segments: str) -> str | None:
        """Complete the prompt formed by concatenating ``segments``."""
        pass

    @abstractmethod
    async def generate_image(self, prompt: str) -> Any:
        """Generate an image; the response exposes ``data[i].url``."""
        pass
