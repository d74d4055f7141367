"""Shared fixtures: headless pygame, seeded randomness, a small heart."""

import os

# Keep pygame from opening windows or printing its banner
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from dataclasses import replace  # noqa: E402

import numpy as np  # noqa: E402
import pytest  # noqa: E402

from particleheart.config import DEFAULT_CONFIG, HeartConfig  # noqa: E402
from particleheart.heart import Heart  # noqa: E402


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(12345)


@pytest.fixture()
def small_config() -> HeartConfig:
    return replace(DEFAULT_CONFIG, outline_points=5, center_points=40,
                   halo_base_count=30, halo_count_scale=20)


@pytest.fixture()
def small_heart(small_config, rng) -> Heart:
    return Heart(10, config=small_config, rng=rng)
