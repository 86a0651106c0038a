"""Personas used to flavor the style of generated text."""

import random
from typing import Callable, Sequence

PERSONALITIES: tuple[str, ...] = (
    "Darth Vader",
    "Yoda",
    "A known politician",
    "A known celebrity",
    "A known historical figure",
    "A known fictional character",
    "A known anime character",
)

PersonaSelector = Callable[[Sequence[str]], str]


def random_persona(personas: Sequence[str] = PERSONALITIES) -> str:
    """Pick a persona uniformly at random."""
    return random.choice(personas)
