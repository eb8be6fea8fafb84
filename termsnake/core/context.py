# termsnake/core/context.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Optional
import random
import time


@dataclass
class GameContext:
    """Process-wide collaborators: the seeded RNG and the inter-tick sleep.

    Built once at startup and handed to the rules and the session. Tests build
    their own with a fixed seed and a recording sleep.
    """
    rng: random.Random = field(default_factory=random.Random)
    sleep: Callable[[float], None] = time.sleep

    @classmethod
    def create(cls, seed: Optional[int] = None) -> "GameContext":
        return cls(rng=random.Random(seed))
