"""
canvas.py: A 2D drawing surface with a save/restore transform stack over a pygame.Surface.
"""

import math
from typing import List, Tuple

import pygame


class Canvas:
    """
    Translate and rotate compose like a canvas context: coordinates passed to
    the draw calls are local to the current transform. Rotation is in radians,
    clockwise on screen (y grows downward).
    """

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self._origin: Tuple[float, float] = (0.0, 0.0)
        self._angle = 0.0
        self._stack: List[Tuple[Tuple[float, float], float]] = []
        self._scaled_cache = {}

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def save(self):
        self._stack.append((self._origin, self._angle))

    def restore(self):
        self._origin, self._angle = self._stack.pop()

    def translate(self, dx: float, dy: float):
        self._origin = self._to_surface(dx, dy)

    def rotate(self, radians: float):
        self._angle += radians

    def _to_surface(self, x: float, y: float) -> Tuple[float, float]:
        """Maps a local point to surface coordinates."""
        cos_a, sin_a = math.cos(self._angle), math.sin(self._angle)
        ox, oy = self._origin
        return ox + x * cos_a - y * sin_a, oy + x * sin_a + y * cos_a

    def fill_rect(self, color, x: float, y: float, w: float, h: float):
        """Axis-aligned fill; only the translation of the transform applies."""
        sx, sy = self._to_surface(0, 0)
        self.surface.fill(color, pygame.Rect(round(sx + x), round(sy + y), round(w), round(h)))

    def _scaled(self, image: pygame.Surface, size: Tuple[int, int]) -> pygame.Surface:
        if image.get_size() == size:
            return image
        # The source is kept in the entry so its id cannot be reused.
        key = (id(image), size)
        if key not in self._scaled_cache:
            self._scaled_cache[key] = (image, pygame.transform.scale(image, size))
        return self._scaled_cache[key][1]

    def draw_image(self, image: pygame.Surface, x: float, y: float, w: float, h: float):
        scaled = self._scaled(image, (round(w), round(h)))
        if self._angle % (2 * math.pi) == 0:
            sx, sy = self._to_surface(x, y)
            self.surface.blit(scaled, (round(sx), round(sy)))
            return

        # Rotating the rect about the origin equals rotating the image about
        # its own centre and moving that centre.
        cx, cy = self._to_surface(x + w / 2, y + h / 2)
        rotated = pygame.transform.rotate(scaled, -math.degrees(self._angle))
        self.surface.blit(rotated, rotated.get_rect(center=(round(cx), round(cy))))

    def draw_text(self, font: pygame.font.Font, text: str, color, center: Tuple[float, float],
                  shadow=None):
        sx, sy = self._to_surface(*center)
        if shadow is not None:
            shade = font.render(text, True, shadow)
            self.surface.blit(shade, shade.get_rect(center=(round(sx) + 2, round(sy) + 2)))
        rendered = font.render(text, True, color)
        self.surface.blit(rendered, rendered.get_rect(center=(round(sx), round(sy))))
