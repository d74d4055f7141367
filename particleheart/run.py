"""Main run loop - ties together Canvas and Simulator."""

import logging
import time
from typing import Callable

from particleheart.canvas import Canvas
from particleheart.config import CANVAS_HEIGHT, CANVAS_WIDTH, FPS
from particleheart.simulator import Simulator

logger = logging.getLogger(__name__)

# Callback type: fn(canvas, time_seconds, frame_number) -> None
RenderFn = Callable[[Canvas, float, int], None]


def run(render: RenderFn, fps: int = FPS, title: str = "Particle Heart",
        scale: int = 1, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT) -> None:
    """Main entry point. Runs the render loop with a simulator window.

    Args:
        render: Callback called each frame with (canvas, elapsed_time, frame_number).
                Draw to the canvas each frame. Canvas is NOT auto-cleared between frames.
        fps: Target frames per second (default 60).
        title: Window title.
        scale: Pixel scale factor for the window (default 1).
        width: Canvas width in pixels.
        height: Canvas height in pixels.
    """
    canvas = Canvas(width, height)
    sim = Simulator(canvas, scale=scale, title=title)

    start = time.monotonic()
    frame = 0

    try:
        while True:
            t = time.monotonic() - start
            render(canvas, t, frame)

            if not sim.update():
                break

            sim.tick(fps)
            frame += 1
    except KeyboardInterrupt:
        pass
    finally:
        logger.info("Stopped after %d frames", frame)
        sim.close()
