"""
Slug generation strategies for the Friendly URL Shortener.

Provided strategies:
- RandomSlugStrategy: uniform random choice, with replacement, of L characters
  from the 62-symbol alphabet (26 lower + 26 upper + 10 digits), independently
  per position. Default L is 6.

Generated slugs are not checked against the alphabet space; the registry only
checks them against slugs already stored.
"""

import random
import string
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
DEFAULT_SLUG_LENGTH = 6


class BaseSlugStrategy(ABC):
    """Abstract base for slug generation strategies."""

    @abstractmethod
    def generate(self) -> str:  # pragma: no cover
        raise NotImplementedError


@dataclass(frozen=True)
class RandomSlugStrategy(BaseSlugStrategy):
    """
    Random Base62 slugs.

    `rng` can be a seeded `random.Random` for reproducible runs; the default
    draws from the OS entropy source.
    """

    length: int = DEFAULT_SLUG_LENGTH
    rng: random.Random = field(default_factory=random.SystemRandom, compare=False, repr=False)

    def __post_init__(self):
        if self.length < 1:
            raise ValueError("Slug length must be positive")

    def generate(self) -> str:
        return "".join(self.rng.choice(ALPHABET) for _ in range(self.length))

