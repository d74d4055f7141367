"""Breathing particle heart rendered with NumPy, Pillow and pygame.

The pygame driver lives in particleheart.run and is not imported here, so the
headless recorder can configure SDL before pygame loads.
"""

from particleheart.canvas import Canvas
from particleheart.heart import FrameSnapshot, Heart, Particle

__all__ = ["Canvas", "FrameSnapshot", "Heart", "Particle"]
