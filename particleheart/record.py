"""Record the heart animation to an animated GIF by rendering frames headlessly.

Usage: python -m particleheart.record [output.gif]
Output: media/heart.gif by default
"""

import logging
import os
import sys
from pathlib import Path

# Prevent pygame from opening windows or printing its banner
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from PIL import Image  # noqa: E402

from particleheart import app  # noqa: E402
from particleheart.canvas import Canvas  # noqa: E402
from particleheart.config import CANVAS_HEIGHT, CANVAS_WIDTH, CYCLE_LENGTH  # noqa: E402
from particleheart.log import setup_default_logging  # noqa: E402
from particleheart.run import RenderFn  # noqa: E402

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path("media") / "heart.gif"
GIF_FPS = 30


def canvas_to_image(canvas: Canvas, scale: float = 1) -> Image.Image:
    """Convert a Canvas buffer to a (optionally scaled) PIL Image."""
    img = Image.frombytes("RGB", (canvas.width, canvas.height), canvas.get_buffer())
    if scale != 1:
        img = img.resize(
            (int(canvas.width * scale), int(canvas.height * scale)),
            Image.NEAREST,
        )
    return img


def render_gif(out_path: Path, render_fn: RenderFn, frames: int = CYCLE_LENGTH,
               fps: float = GIF_FPS, width: int = CANVAS_WIDTH,
               height: int = CANVAS_HEIGHT, scale: float = 1) -> Path:
    """Render frames and save as a looping animated GIF."""
    if frames < 1:
        raise ValueError(f"frames must be at least 1, got {frames}")
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    dt = 1.0 / fps

    images = []
    canvas = Canvas(width, height)
    for i in range(frames):
        render_fn(canvas, i * dt, i)
        images.append(canvas_to_image(canvas, scale))

    # Save as GIF (duration in ms per frame)
    images[0].save(
        out_path,
        save_all=True,
        append_images=images[1:],
        duration=int(1000 / fps),
        loop=0,
        optimize=True,
    )
    logger.info("Saved %s (%d frames)", out_path, len(images))
    return out_path


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    out_path = Path(argv[0]) if argv else DEFAULT_OUTPUT

    setup_default_logging()
    heart = app.make_heart(app.seed_from_env())
    # One full cycle loops seamlessly
    render_gif(out_path, app.render, frames=heart.cycle_length)


if __name__ == "__main__":
    main()
