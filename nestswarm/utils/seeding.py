# nestswarm/utils/seeding.py

from __future__ import annotations
from typing import Optional

import numpy as np


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Instance-owned generator; the global ``random`` and ``np.random`` states are never touched."""
    return np.random.default_rng(seed)
