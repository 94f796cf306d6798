"""Random input generation shared by every selection method."""

from __future__ import annotations

import random
from typing import List, Optional


def generate_numbers(n: int, upper_bound: int, rng: Optional[random.Random] = None) -> List[int]:
    """Draw ``n`` integers uniformly from ``[0, upper_bound)``."""
    rng = rng or random.Random()
    return [rng.randrange(upper_bound) for _ in range(n)]
