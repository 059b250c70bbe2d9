"""Base generator class for synthetic data generators."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker


class BaseGenerator(ABC):
    """Base class for all data generators.

    Provides common initialization: a Faker instance and a private
    ``random.Random`` seeded together for reproducibility.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``es_ES``).
    """

    def __init__(self, seed: int | None = None, locale: str = "es_ES") -> None:
        self.fake = Faker(locale)
        self.rng = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)
