"""Pytest configuration for vecmath tests."""
from __future__ import annotations

import random
import sys
from pathlib import Path
from typing import List, Tuple

import pytest

# //1.- Let the suite run from a plain checkout without installing vecmath.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


# //2.- Provide a deterministic batch of vectors for algebraic property checks.
@pytest.fixture
def sample_vectors() -> List[Tuple[float, float, float]]:
    rng = random.Random(1337)
    return [tuple(rng.uniform(-100.0, 100.0) for _ in range(3)) for _ in range(64)]
