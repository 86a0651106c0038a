"""Exceptions raised by inference clients and the flows that use them."""


class InferenceError(Exception):
    """Base class for inference failures."""

    pass


class EmptyInferenceResultError(InferenceError):
    """Raised when the inference service returns an empty or missing result."""

    def __init__(self, stage: str) -> None:
        """Initializes the exception with the stage that produced no result."""
        super().__init__(f"Error: empty result from AI ({stage})")
        self.stage = stage
