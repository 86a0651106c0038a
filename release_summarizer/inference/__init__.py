"""Text and image generation clients."""

from .abc import InferenceClientBase
from .exceptions import EmptyInferenceResultError, InferenceError
from .openai_client import OpenAIInferenceClient

__all__ = [
    "InferenceClientBase",
    "InferenceError",
    "EmptyInferenceResultError",
    "OpenAIInferenceClient",
]
