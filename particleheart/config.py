"""Fixed constants for the particle heart, gathered into a frozen dataclass."""

from dataclasses import dataclass

# Type alias for RGB tuples
Color = tuple[int, int, int]

CANVAS_WIDTH = 840
CANVAS_HEIGHT = 680
CANVAS_CENTER_X = CANVAS_WIDTH / 2
CANVAS_CENTER_Y = CANVAS_HEIGHT / 2
IMAGE_ENLARGE = 11
HEART_COLOR: Color = (255, 215, 0)  # gold
BACKGROUND: Color = (0, 0, 0)

# Particle populations
OUTLINE_POINTS = 1000
EDGE_PER_POINT = 3
EDGE_BETA = 0.05
CENTER_POINTS = 5000
CENTER_BETA = 0.27

# Per-frame forces
FORCE_SCALE = 15
HALO_BASE_RADIUS = 4
HALO_RADIUS_SCALE = 6
HALO_BASE_COUNT = 1500
HALO_COUNT_SCALE = 2000
HALO_JITTER = 60
HALO_SMALL_PROBABILITY = 0.66

# Caption
CAPTION = "新年快乐~"
CAPTION_SIZE = 40
CAPTION_BEAT = 10
CAPTION_OFFSET = 220
CAPTION_GLOW = 15

CYCLE_LENGTH = 200
FPS = 60


@dataclass(frozen=True)
class HeartConfig:
    """Everything the generator and its render step read.

    The defaults reproduce the stock animation. Tests shrink the populations
    with dataclasses.replace().
    """

    width: int = CANVAS_WIDTH
    height: int = CANVAS_HEIGHT
    enlarge: float = IMAGE_ENLARGE
    color: Color = HEART_COLOR
    outline_points: int = OUTLINE_POINTS
    edge_per_point: int = EDGE_PER_POINT
    edge_beta: float = EDGE_BETA
    center_points: int = CENTER_POINTS
    center_beta: float = CENTER_BETA
    force_scale: float = FORCE_SCALE
    halo_base_radius: int = HALO_BASE_RADIUS
    halo_radius_scale: int = HALO_RADIUS_SCALE
    halo_base_count: int = HALO_BASE_COUNT
    halo_count_scale: int = HALO_COUNT_SCALE
    halo_jitter: int = HALO_JITTER
    halo_small_probability: float = HALO_SMALL_PROBABILITY
    caption: str = CAPTION
    caption_size: float = CAPTION_SIZE
    caption_beat: float = CAPTION_BEAT
    caption_offset: float = CAPTION_OFFSET
    caption_glow: float = CAPTION_GLOW

    @property
    def center(self) -> tuple[float, float]:
        return (self.width / 2, self.height / 2)


DEFAULT_CONFIG = HeartConfig()
