"""A clickable text button."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pygame

from quadsim.geometry import Rect

Color = tuple[int, ...]
FontFactory = Callable[[int], Any]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
_DISABLED_SHADE: Color = (0, 0, 0, 150)
_LEFT_MOUSE_BUTTON = 1
_DEFAULT_CHARACTER_SIZE = 30


class Button:
    """A text label inside a border, centred on its position, that runs an action on click.

    ``font`` is a factory taking a pixel size and returning an object with
    ``size(text)`` and ``render(text, antialias, color)``.
    """

    def __init__(
        self,
        font: FontFactory,
        text: str = "Button",
        on_action: Callable[[], None] | None = None,
    ) -> None:
        self._font_factory = font
        self.character_size = _DEFAULT_CHARACTER_SIZE
        self._font = font(self.character_size)
        self.text = ""
        self.size: tuple[float, float] = (0.0, 0.0)
        self.position: tuple[float, float] = (0.0, 0.0)
        self.outline_thickness = 0.0

        self.mouse_over = False
        self.pressed = False
        self.disabled = False

        self._background_color: Color = BLACK
        self.border_color: Color = BLACK
        self.text_color: Color = BLACK
        self.hover_color: Color = BLACK
        self.fill_color: Color | None = None
        self.outline_color: Color = WHITE
        self.text_fill: Color = WHITE

        self.on_action: Callable[[], None] = on_action or (lambda: None)
        self.set_string(text)

    @property
    def background_color(self) -> Color:
        """The fill colour of the border when idle."""
        return self._background_color

    @background_color.setter
    def background_color(self, color: Color) -> None:
        self._background_color = color
        self.fill_color = color

    def handle_input(self, event: pygame.event.Event) -> None:
        """Track presses and run the action when the left button is released over it."""
        if self.disabled:
            return

        if event.type == pygame.MOUSEBUTTONDOWN:
            if getattr(event, "button", None) == _LEFT_MOUSE_BUTTON and self.mouse_over:
                self.pressed = True

        if event.type == pygame.MOUSEBUTTONUP:
            if getattr(event, "button", None) == _LEFT_MOUSE_BUTTON and self.mouse_over:
                self.on_action()
            self.pressed = False

    def update(self, mouse_pos: tuple[float, float]) -> None:
        """Refresh hover state and colours."""
        if self.disabled:
            return

        self.mouse_over = self.bounds().contains(*mouse_pos)

        if self.mouse_over:
            self.outline_color = self.hover_color
            self.fill_color = None
        else:
            self.outline_color = self.border_color
            self.fill_color = self._background_color

        if self.pressed:
            self.text_fill = self._background_color
            self.fill_color = self.text_color
        else:
            self.text_fill = self.text_color
            self.fill_color = self._background_color

    def render(self, surface: pygame.Surface) -> None:
        """Draw the border, the text and, when disabled, a dark shade."""
        bounds = self.bounds()
        outer = pygame.Rect(
            round(bounds.left), round(bounds.top), round(bounds.width), round(bounds.height)
        )
        thickness = round(max(self.outline_thickness, 0.0))
        inner = outer.inflate(-2 * thickness, -2 * thickness)
        if self.fill_color is not None:
            pygame.draw.rect(surface, self.fill_color, inner)
        if thickness > 0:
            pygame.draw.rect(surface, self.outline_color, outer, thickness)

        rendered = self._font.render(self.text, True, self.text_fill)
        center = (round(self.position[0]), round(self.position[1]))
        surface.blit(rendered, rendered.get_rect(center=center))

        if self.disabled:
            shade = pygame.Surface(outer.size, pygame.SRCALPHA)
            shade.fill(_DISABLED_SHADE)
            surface.blit(shade, outer.topleft)

    def set_position(self, position: tuple[float, float]) -> None:
        """Centre the button on ``position``."""
        self.position = (float(position[0]), float(position[1]))

    def set_border(self, color: Color, thickness: float) -> None:
        """Set the outline colour and thickness."""
        self.outline_thickness = thickness
        self.border_color = color
        self.outline_color = color

    def set_font(self, font: FontFactory) -> None:
        """Use another font at the current character size."""
        self._font_factory = font
        self._font = font(self.character_size)

    def set_character_size(self, size: int) -> None:
        """Change the text size and fit the border around it."""
        self.character_size = int(size)
        self._font = self._font_factory(self.character_size)
        width, height = self._font.size(self.text)
        self.size = (width * 1.1, height * 1.2)

    def set_string(self, text: str) -> None:
        """Change the label and fit the border around it."""
        self.text = text
        width, height = self._font.size(text)
        self.size = (width * 1.1, height * 1.35)

    def set_text(self, text: str, color: Color) -> None:
        """Change the label and its colour."""
        self.set_text_color(color)
        self.set_string(text)

    def set_text_color(self, color: Color) -> None:
        """Set the text colour, which is also the hover outline colour."""
        self.text_fill = color
        self.text_color = color
        self.hover_color = color

    def bounds(self) -> Rect:
        """The outer rectangle of the border, outline included."""
        t = max(self.outline_thickness, 0.0)
        width, height = self.size
        x, y = self.position
        return Rect(x - width / 2 - t, y - height / 2 - t, width + 2 * t, height + 2 * t)