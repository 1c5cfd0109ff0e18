from __future__ import annotations

import numpy as np
import pytest

from sheet_packer import SpriteData


@pytest.fixture
def mixed_sizes():
    rng = np.random.default_rng(7)
    return [
        (index, SpriteData(int(rng.integers(1, 40)), int(rng.integers(1, 40))))
        for index in range(60)
    ]
