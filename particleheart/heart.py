"""Particle heart generator.

The skeleton (outline, edge diffusion and center diffusion points) is sampled
once. Each frame of the cycle then displaces every skeleton point by the
breathing force and adds a freshly sampled halo ring, so the body appears to
breathe continuously while the halo sparkles. All frames are computed up front
in the constructor; rendering is a lookup.
"""

import logging
import math
import time
from dataclasses import dataclass
from typing import Iterator, NamedTuple

import numpy as np

from particleheart import geometry
from particleheart.canvas import Canvas
from particleheart.config import CYCLE_LENGTH, DEFAULT_CONFIG, HeartConfig

logger = logging.getLogger(__name__)


class Particle(NamedTuple):
    x: float
    y: float
    size: int


def _readonly(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class FrameSnapshot:
    """Every drawable particle of one frame: halo first, then the skeleton."""

    frame: int
    x: np.ndarray
    y: np.ndarray
    size: np.ndarray
    halo_count: int

    def __len__(self) -> int:
        return len(self.size)

    @property
    def skeleton_count(self) -> int:
        return len(self) - self.halo_count

    def particles(self) -> Iterator[Particle]:
        for x, y, size in zip(self.x.tolist(), self.y.tolist(), self.size.tolist()):
            yield Particle(x, y, size)


def frame_beat(frame: int) -> float:
    """Breathing curve value for a frame number."""
    return geometry.curve(frame / 100 * math.pi)


def halo_radius(beat: float, config: HeartConfig = DEFAULT_CONFIG) -> int:
    return math.floor(config.halo_base_radius + config.halo_radius_scale * (1 + beat))


def halo_count(beat: float, config: HeartConfig = DEFAULT_CONFIG) -> int:
    return math.floor(config.halo_base_count + config.halo_count_scale * abs(beat) ** 2)


class Heart:
    """Precomputed animation cycle of a breathing particle heart.

    Args:
        cycle_length: Number of distinct frames before the animation repeats.
        config: Population sizes, forces and caption settings.
        rng: Random source. Pass a seeded numpy Generator for reproducible clouds.
    """

    def __init__(self, cycle_length: int = CYCLE_LENGTH, config: HeartConfig = DEFAULT_CONFIG,
                 rng: np.random.Generator | None = None):
        if cycle_length < 1:
            raise ValueError(f"cycle_length must be at least 1, got {cycle_length}")
        if config.outline_points < 1:
            raise ValueError(f"outline_points must be at least 1, got {config.outline_points}")
        if config.edge_per_point < 0 or config.center_points < 0:
            raise ValueError("edge_per_point and center_points must not be negative")

        self.cycle_length = cycle_length
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng()
        self.center = config.center

        start = time.perf_counter()
        self._build(config.outline_points)
        self._frames = tuple(self._calc(frame) for frame in range(cycle_length))
        logger.debug("Precomputed %d frames in %.2fs", cycle_length, time.perf_counter() - start)

    @property
    def skeleton_sizes(self) -> tuple[int, int, int]:
        """(outline, edge diffusion, center diffusion) point counts."""
        return (len(self._points), len(self._edge_diffusion_points),
                len(self._center_diffusion_points))

    def _build(self, number: int) -> None:
        cfg = self.config
        rng = self.rng

        # Heart outline
        t = rng.random(number) * 2 * math.pi
        x, y = geometry.heart_curve(t, cfg.enlarge, self.center)
        self._points = _readonly(np.column_stack((x, y)))

        # Edge diffusion: each outline point scattered a few times, tightly
        ex = np.repeat(x, cfg.edge_per_point)
        ey = np.repeat(y, cfg.edge_per_point)
        ex, ey = geometry.scatter_inside(ex, ey, cfg.edge_beta, rng, self.center)
        self._edge_diffusion_points = _readonly(np.column_stack((ex, ey)))

        # Center diffusion: random outline points scattered loosely
        picks = rng.integers(0, number, cfg.center_points)
        cx, cy = geometry.scatter_inside(x[picks], y[picks], cfg.center_beta, rng, self.center)
        self._center_diffusion_points = _readonly(np.column_stack((cx, cy)))

        logger.debug("Built skeleton: %d outline, %d edge, %d center points", *self.skeleton_sizes)

    def _halo(self, beat: float) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        cfg = self.config
        rng = self.rng
        n = halo_count(beat, cfg)

        t = rng.random(n) * 2 * math.pi
        x, y = geometry.heart_curve(t, cfg.enlarge, self.center)
        x, y = geometry.shrink(x, y, halo_radius(beat, cfg), self.center)

        x = x + rng.integers(-cfg.halo_jitter, cfg.halo_jitter + 1, n)
        y = y + rng.integers(-cfg.halo_jitter, cfg.halo_jitter + 1, n)
        size = np.where(rng.random(n) < cfg.halo_small_probability, 1, 2)
        return x, y, size

    def _displace(self, points: np.ndarray, ratio: float, max_size: int):
        x, y = geometry.calc_position(points[:, 0], points[:, 1], ratio, self.rng, self.center)
        size = self.rng.integers(1, max_size + 1, len(points))
        return x, y, size

    def _calc(self, frame: int) -> FrameSnapshot:
        beat = frame_beat(frame)
        ratio = self.config.force_scale * beat

        parts = [
            self._halo(beat),
            self._displace(self._points, ratio, 3),
            self._displace(self._edge_diffusion_points, ratio, 2),
            self._displace(self._center_diffusion_points, ratio, 2),
        ]
        xs, ys, sizes = zip(*parts)
        return FrameSnapshot(
            frame=frame,
            x=_readonly(np.concatenate(xs)),
            y=_readonly(np.concatenate(ys)),
            size=_readonly(np.concatenate(sizes).astype(np.int64)),
            halo_count=len(parts[0][2]),
        )

    def snapshot(self, frame: int) -> FrameSnapshot:
        """Cached snapshot for any frame number; wraps around the cycle (negatives too)."""
        return self._frames[frame % self.cycle_length]

    def render(self, canvas: Canvas, frame: int) -> None:
        """Draw the particles for `frame` and the beating caption above the heart."""
        cfg = self.config
        snap = self.snapshot(frame)
        canvas.squares(snap.x, snap.y, snap.size, cfg.color)

        beat = frame_beat(frame)
        cx, cy = self.center
        canvas.text(
            cx, cy - cfg.caption_offset - cfg.caption_beat * beat, cfg.caption, cfg.color,
            size=cfg.caption_size + cfg.caption_beat * beat,
            align="center", baseline="middle", glow=cfg.caption_glow,
        )
