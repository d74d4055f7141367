"""RGB pixel buffer with the drawing primitives the heart needs."""

import logging
import math
from functools import lru_cache

import numpy as np
from PIL import Image, ImageDraw, ImageFilter, ImageFont

from particleheart.config import CANVAS_HEIGHT, CANVAS_WIDTH, Color

logger = logging.getLogger(__name__)

# Tried in order; the first one Pillow can open wins. The CJK faces cover the
# default caption, DejaVu is nearly always present on Linux.
FONT_CANDIDATES = (
    "msyhbd.ttc",
    "msyh.ttc",
    "NotoSansCJK-Bold.ttc",
    "wqy-microhei.ttc",
    "DejaVuSans-Bold.ttf",
)

_ALIGN = {"left": 0.0, "center": 0.5, "right": 1.0}
_BASELINE = {"top": 0.0, "middle": 0.5, "bottom": 1.0}

# Scratch surface for measuring text
_MEASURE = ImageDraw.Draw(Image.new("L", (1, 1)))


@lru_cache(maxsize=64)
def load_font(size: int) -> ImageFont.ImageFont:
    """Bold font at the given pixel size, falling back to Pillow's default."""
    for name in FONT_CANDIDATES:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    logger.debug("No candidate font found, using Pillow default at %dpx", size)
    return ImageFont.load_default(size)


class Canvas:
    """RGB pixel buffer with drawing primitives.

    Pixels are stored as a flat bytearray in RGB order: [R0,G0,B0, R1,G1,B1, ...]
    Row-major: pixel (x, y) is at index (y * width + x) * 3. `pixels` is a
    writable (height, width, 3) NumPy view over the same memory.
    """

    def __init__(self, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT):
        self.width = width
        self.height = height
        self.buffer = bytearray(width * height * 3)
        self.pixels = np.frombuffer(self.buffer, dtype=np.uint8).reshape(height, width, 3)

    def clear(self, color: Color = (0, 0, 0)) -> None:
        """Fill entire canvas with a color (default black)."""
        self.pixels[:] = color

    def set(self, x: int, y: int, color: Color) -> None:
        """Set a single pixel. Out-of-bounds writes are silently ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y, x] = color

    def get(self, x: int, y: int) -> Color:
        """Get a pixel's color. Returns (0,0,0) for out-of-bounds."""
        if 0 <= x < self.width and 0 <= y < self.height:
            r, g, b = self.pixels[y, x]
            return (int(r), int(g), int(b))
        return (0, 0, 0)

    def rect(self, x: float, y: float, w: int, h: int, color: Color, filled: bool = True) -> None:
        """Draw a rectangle, clipped to the canvas. If filled=False, draws outline only."""
        x0, y0 = int(np.floor(x)), int(np.floor(y))
        x1, y1 = x0 + int(w), y0 + int(h)
        if filled:
            cx0, cy0 = max(x0, 0), max(y0, 0)
            cx1, cy1 = min(x1, self.width), min(y1, self.height)
            if cx0 < cx1 and cy0 < cy1:
                self.pixels[cy0:cy1, cx0:cx1] = color
        else:
            self.rect(x0, y0, w, 1, color)
            self.rect(x0, y1 - 1, w, 1, color)
            self.rect(x0, y0, 1, h, color)
            self.rect(x1 - 1, y0, 1, h, color)

    def squares(self, x, y, size, color: Color) -> None:
        """Fill one size-by-size square per particle. Pixels off the canvas are dropped."""
        x = np.floor(np.asarray(x)).astype(np.int64)
        y = np.floor(np.asarray(y)).astype(np.int64)
        size = np.asarray(size)
        if size.size == 0:
            return
        for side in range(1, int(size.max()) + 1):
            sel = size >= side
            xs, ys = x[sel], y[sel]
            # Fill the new L-shaped rim: column side-1 and row side-1
            for offset in range(side):
                self._plot(xs + side - 1, ys + offset, color)
                self._plot(xs + offset, ys + side - 1, color)

    def _plot(self, xs: np.ndarray, ys: np.ndarray, color: Color) -> None:
        inside = (xs >= 0) & (xs < self.width) & (ys >= 0) & (ys < self.height)
        self.pixels[ys[inside], xs[inside]] = color

    def text(self, x: float, y: float, string: str, color: Color, size: float = 16,
             align: str = "left", baseline: str = "top", glow: float = 0) -> None:
        """Draw text anchored at (x, y).

        align is left/center/right, baseline is top/middle/bottom. glow > 0 adds
        a blurred halo of that radius behind the glyphs; it only applies to this
        call.
        """
        if align not in _ALIGN:
            raise ValueError(f"Unknown text align: {align!r}")
        if baseline not in _BASELINE:
            raise ValueError(f"Unknown text baseline: {baseline!r}")

        font = load_font(max(1, int(round(size))))
        left, top, right, bottom = _MEASURE.textbbox((0, 0), string, font=font)
        left, top = math.floor(left), math.floor(top)
        right, bottom = math.ceil(right), math.ceil(bottom)
        if right <= left or bottom <= top:
            return

        # Mask covers only the glyph box plus room for the blur (3 sigma)
        pad = math.ceil(glow * 1.5) if glow > 0 else 0
        ox = int(round(x - left - (right - left) * _ALIGN[align]))
        oy = int(round(y - top - (bottom - top) * _BASELINE[baseline]))
        mask = Image.new("L", (right - left + 2 * pad, bottom - top + 2 * pad), 0)
        ImageDraw.Draw(mask).text((pad - left, pad - top), string, fill=255, font=font)

        alpha = np.asarray(mask, dtype=np.float32) / 255.0
        if glow > 0:
            # Canvas-style shadowBlur is roughly twice the Gaussian sigma
            halo = mask.filter(ImageFilter.GaussianBlur(glow / 2))
            alpha = np.maximum(alpha, np.asarray(halo, dtype=np.float32) / 255.0)
        self._blend(alpha, color, ox + left - pad, oy + top - pad)

    def _blend(self, alpha: np.ndarray, color: Color, x0: int, y0: int) -> None:
        """Composite an alpha mask whose top-left corner sits at (x0, y0)."""
        h, w = alpha.shape
        cx0, cy0 = max(x0, 0), max(y0, 0)
        cx1, cy1 = min(x0 + w, self.width), min(y0 + h, self.height)
        if cx0 >= cx1 or cy0 >= cy1:
            return
        a = alpha[cy0 - y0:cy1 - y0, cx0 - x0:cx1 - x0][..., None]
        src = self.pixels[cy0:cy1, cx0:cx1].astype(np.float32)
        out = src * (1.0 - a) + np.asarray(color, dtype=np.float32) * a
        self.pixels[cy0:cy1, cx0:cx1] = np.clip(np.rint(out), 0, 255).astype(np.uint8)

    def get_buffer(self) -> bytes:
        """Get the entire pixel buffer as bytes."""
        return bytes(self.buffer)
