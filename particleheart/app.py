"""Heart Equation - breathing particle heart with a beating caption."""

import logging
import math
import os
import time

import numpy as np

from particleheart.canvas import Canvas
from particleheart.config import BACKGROUND, CANVAS_HEIGHT, CANVAS_WIDTH, CYCLE_LENGTH, FPS
from particleheart.heart import Heart
from particleheart.log import setup_default_logging
from particleheart.run import run

logger = logging.getLogger(__name__)

TITLE = "BOBBY / HEART EQUATION"
STATUS = "LIVE RENDERING"
LABEL_COLOR = (102, 96, 55)  # pale yellow at 40% over black
DOT_COLOR = (250, 204, 21)
LABEL_SIZE = 11
MARGIN = 24

_heart: Heart | None = None


def make_heart(seed: int | None = None, cycle_length: int = CYCLE_LENGTH) -> Heart:
    global _heart
    start = time.perf_counter()
    _heart = Heart(cycle_length, rng=np.random.default_rng(seed))
    logger.info("Heart ready: %d frames precomputed in %.2fs",
                cycle_length, time.perf_counter() - start)
    return _heart


def seed_from_env() -> int | None:
    """HEART_SEED makes the particle cloud reproducible between runs."""
    raw = os.environ.get("HEART_SEED", "")
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"HEART_SEED must be an integer, got {raw!r}") from None


def draw_overlay(canvas: Canvas, t: float) -> None:
    canvas.text(MARGIN, MARGIN, TITLE, LABEL_COLOR, size=LABEL_SIZE)

    right = canvas.width - MARGIN
    bottom = canvas.height - MARGIN
    canvas.text(right, bottom, STATUS, LABEL_COLOR, size=LABEL_SIZE,
                align="right", baseline="bottom")

    # Status dot fades between full and half brightness every 2 seconds
    level = 0.75 + 0.25 * math.cos(t * math.pi)
    dot = tuple(int(c * level) for c in DOT_COLOR)
    canvas.rect(right - 130, bottom - 8, 3, 3, dot)


def render(canvas: Canvas, t: float, frame: int) -> None:
    heart = _heart if _heart is not None else make_heart()
    canvas.clear(BACKGROUND)
    heart.render(canvas, frame)
    draw_overlay(canvas, t)


def main() -> None:
    setup_default_logging()
    make_heart(seed_from_env())
    run(render, fps=FPS, title="Heart Equation", width=CANVAS_WIDTH, height=CANVAS_HEIGHT)


if __name__ == "__main__":
    main()
