"""Window, picture and text drawing on top of pygame."""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple, Union

import pygame

from snakegrid.settings import SCREEN_HEIGHT, SCREEN_WIDTH, WINDOW_TITLE

log = logging.getLogger(__name__)

RectLike = Union[pygame.Rect, Sequence[int]]
PointLike = Sequence[float]
Color = Tuple[int, int, int]


class GraphicsError(RuntimeError):
    """Raised when the window, the screen or a font cannot be set up."""


class Graphics:
    """A game window with helpers for drawing pictures and text."""

    def __init__(
        self,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        title: str = WINDOW_TITLE,
    ):
        self.width = width
        self.height = height
        self.title = title
        self.screen: Optional[pygame.Surface] = None
        self.font_path: Optional[str] = "arial.ttf"
        self.font_size = 28
        self._font: Optional[pygame.font.Font] = None
        self._font_key: Optional[Tuple[Optional[str], int]] = None

    def __enter__(self) -> "Graphics":
        self.init()
        return self

    def __exit__(self, *exc_info) -> None:
        self.quit()

    def init(self) -> pygame.Surface:
        """Start pygame and open the window; return the screen surface."""
        pygame.init()
        if not pygame.display.get_init():
            raise GraphicsError(f"display init: {pygame.get_error()}")
        try:
            self.screen = pygame.display.set_mode((self.width, self.height))
        except pygame.error as exc:
            raise GraphicsError(f"create window: {exc}") from exc
        pygame.display.set_caption(self.title)
        return self.screen

    def _require_screen(self) -> pygame.Surface:
        if self.screen is None:
            raise GraphicsError("graphics not initialised")
        return self.screen

    @staticmethod
    def _scaled(texture: pygame.Surface, size: Tuple[int, int]) -> pygame.Surface:
        if texture.get_size() == size:
            return texture
        try:
            return pygame.transform.smoothscale(texture, size)
        except ValueError:
            return pygame.transform.scale(texture, size)

    def prepare_scene(self, background: Optional[pygame.Surface]) -> None:
        """Clear the screen and stretch the background over all of it."""
        screen = self._require_screen()
        screen.fill((0, 0, 0))
        if background is not None:
            screen.blit(self._scaled(background, screen.get_size()), (0, 0))

    def present_scene(self) -> None:
        """Show everything drawn since the last present."""
        self._require_screen()
        pygame.display.flip()

    def load_texture(self, filename: str) -> Optional[pygame.Surface]:
        """Load a picture; return None and log the error if it cannot be read."""
        log.info("Loading %s", filename)
        try:
            image = pygame.image.load(filename)
        except (pygame.error, OSError) as exc:
            log.error("Load texture %s", exc)
            return None
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        return image

    def render_texture(
        self, texture: Optional[pygame.Surface], x: int, y: int
    ) -> Optional[pygame.Rect]:
        """Draw a picture at its own size with its top-left corner at (x, y)."""
        screen = self._require_screen()
        if texture is None:
            return None
        return screen.blit(texture, (x, y))

    def _dest_size(
        self, texture: pygame.Surface, src: Optional[RectLike]
    ) -> Tuple[int, int]:
        if src is not None:
            rect = pygame.Rect(src)
            return rect.width, rect.height
        return texture.get_size()

    def blit_rect(
        self,
        texture: Optional[pygame.Surface],
        src: Optional[RectLike],
        x: int,
        y: int,
    ) -> Optional[pygame.Rect]:
        """Draw the whole picture at (x, y), stretched to the size of src if given."""
        screen = self._require_screen()
        if texture is None:
            return None
        image = self._scaled(texture, self._dest_size(texture, src))
        return screen.blit(image, (x, y))

    def blit_rotated(
        self,
        texture: Optional[pygame.Surface],
        src: Optional[RectLike],
        x: int,
        y: int,
        angle: float,
        center: Optional[PointLike] = None,
    ) -> Optional[pygame.Rect]:
        """Like blit_rect, turned clockwise by angle degrees about center.

        The center is relative to the drawn rectangle; None means its middle.
        """
        screen = self._require_screen()
        if texture is None:
            return None
        image = self._scaled(texture, self._dest_size(texture, src))
        width, height = image.get_size()
        if center is None:
            cx, cy = width // 2, height // 2
        else:
            cx, cy = center[0], center[1]
        pivot = pygame.math.Vector2(x + cx, y + cy)
        offset = pygame.math.Vector2(x + width / 2, y + height / 2) - pivot
        new_center = pivot + offset.rotate(angle)
        rotated = pygame.transform.rotate(image, -angle)
        rect = rotated.get_rect(center=(round(new_center.x), round(new_center.y)))
        return screen.blit(rotated, rect)

    def _get_font(self) -> pygame.font.Font:
        key = (self.font_path, self.font_size)
        if self._font is None or self._font_key != key:
            if not pygame.font.get_init():
                pygame.font.init()
            try:
                self._font = pygame.font.Font(self.font_path, self.font_size)
            except (OSError, pygame.error) as exc:
                raise GraphicsError(f"Failed to load font: {exc}") from exc
            self._font_key = key
        return self._font

    def draw_text(self, message: str, x: int, y: int, color: Color) -> pygame.Rect:
        """Write a line of text with its top-left corner at (x, y)."""
        screen = self._require_screen()
        surface = self._get_font().render(message, False, color)
        return screen.blit(surface, (x, y))

    def quit(self) -> None:
        """Close the window and shut pygame down."""
        self._font = None
        self._font_key = None
        self.screen = None
        pygame.quit()