"""Pygame window that displays the Canvas contents."""

import pygame

from particleheart.canvas import Canvas


class Simulator:
    """Opens a window that displays the Canvas contents, optionally upscaled."""

    def __init__(self, canvas: Canvas, scale: int = 1, title: str = "Particle Heart"):
        self.canvas = canvas
        self.scale = scale
        self.width = canvas.width * scale
        self.height = canvas.height * scale

        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()

    def update(self) -> bool:
        """Blit canvas to screen. Returns False if window was closed."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False

        # Wrap the pixel buffer without copying, then blit or upscale
        frame = pygame.image.frombuffer(
            self.canvas.buffer, (self.canvas.width, self.canvas.height), "RGB")
        if self.scale == 1:
            self.screen.blit(frame, (0, 0))
        else:
            # frombuffer gives a 24-bit surface; scale into a new one, not into the display
            self.screen.blit(pygame.transform.scale(frame, (self.width, self.height)), (0, 0))
        pygame.display.flip()
        return True

    def tick(self, fps: int = 60) -> None:
        """Limit framerate."""
        self.clock.tick(fps)

    def close(self) -> None:
        pygame.quit()
