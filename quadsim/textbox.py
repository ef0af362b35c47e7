"""A single-line text input box with character filtering and horizontal scrolling."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto
from typing import Any

import pygame

from quadsim.geometry import Rect

Color = tuple[int, ...]
FontFactory = Callable[[int], Any]

WHITE: Color = (255, 255, 255)
GREEN: Color = (0, 255, 0)
RED: Color = (255, 0, 0)

_BACKSPACE = 8
_SPACE = 32
_PERIOD = 46
_ZERO = 48
_NINE = 57
_UPPER_A = 65
_UPPER_Z = 90
_LOWER_A = 97
_LOWER_Z = 122
# Key codes of the numeric keypad digits, compared against entered characters.
_NUMPAD_0 = 75
_NUMPAD_9 = 84

_LEFT_MOUSE_BUTTON = 1
_DEFAULT_CHARACTER_SIZE = 30


class InputMode(Enum):
    """Which characters a text box accepts."""

    NUMBER_ONLY = auto()
    ALPHA_ONLY = auto()
    ALPHA_NUMERIC = auto()


class TextBox:
    """An editable text field.

    ``font`` is a factory taking a pixel size and returning an object with
    ``size(text)`` and ``render(text, antialias, color)``, such as
    ``functools.partial(pygame.font.Font, path)``.
    """

    def __init__(self, font: FontFactory) -> None:
        self._font_factory = font
        self.character_size = _DEFAULT_CHARACTER_SIZE
        self._font = font(self.character_size)
        self.text_color: Color = WHITE
        self.background_color: Color | None = None
        self.outline_thickness = 2.0
        self.size: tuple[float, float] = (100.0, float(self.character_size))
        self.position: tuple[float, float] = (0.0, 0.0)
        self._border_position: tuple[float, float] = (0.0, 0.0)

        self.border_color: Color = WHITE
        self.border_hover_color: Color = GREEN
        self.border_selected_color: Color = RED
        self.outline_color: Color = self.border_color

        self.selected = False
        self.hover = False
        self._valid_text_entered = False
        self.text_limit = 15
        self.subset_counter = 0
        self.max_characters_displayed = 99999
        self.input_mode = InputMode.NUMBER_ONLY

        self._input = ""
        self.displayed_text = ""

    # input handling

    def handle_input(self, event: pygame.event.Event) -> None:
        """React to a mouse click or to entered text."""
        if event.type == pygame.MOUSEBUTTONDOWN:
            if getattr(event, "button", None) == _LEFT_MOUSE_BUTTON:
                self.selected = self.hover
        elif event.type == pygame.TEXTINPUT:
            for char in event.text:
                self._enter_code(ord(char))
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_BACKSPACE:
            self._enter_code(_BACKSPACE)

    def _enter_code(self, code: int) -> None:
        before = self._input

        if not self.selected:
            return

        if code == _BACKSPACE and self._input:
            self._input = self._input[:-1]
            self._valid_text_entered = True

        if len(self._input) >= self.text_limit:
            return

        if self.input_mode in (InputMode.ALPHA_ONLY, InputMode.ALPHA_NUMERIC):
            if not self._valid_text_entered:
                if _UPPER_A <= code <= _UPPER_Z or _LOWER_A <= code <= _LOWER_Z:
                    self._input += chr(code)
                    self._valid_text_entered = True
                if code == _SPACE:
                    self._input += chr(code)

        if self.input_mode in (InputMode.NUMBER_ONLY, InputMode.ALPHA_NUMERIC):
            if not self._valid_text_entered:
                if _NUMPAD_0 <= code <= _NUMPAD_9:
                    self._input += chr(code - _NUMPAD_0 + _ZERO)
                elif _ZERO <= code <= _NINE or code == _PERIOD:
                    self._input += chr(code)

        if before == self._input:
            return

        if len(before) > len(self._input):
            self.subset_counter -= 1
        else:
            self.subset_counter += 1

        self._valid_text_entered = True
        self.displayed_text = self._input

    # per-frame update

    def _text_right(self, text: str) -> float:
        return self.position[0] + self._font.size(text)[0]

    def _scroll_limit(self) -> float:
        bounds = self.bounds()
        return bounds.left + bounds.width * 0.9

    def update(self, mouse_pos: tuple[float, float]) -> None:
        """Scroll the visible text after an edit, or track hover and selection colours."""
        if self.subset_counter < 0:
            self.subset_counter = 0

        if self._valid_text_entered:
            limit = self._scroll_limit()
            if self._text_right(self.displayed_text) >= limit:
                start = self.subset_counter
                self.displayed_text = self._input[start:start + len(self._input) - 1]
                while self.displayed_text and self._text_right(self.displayed_text) >= limit:
                    self.displayed_text = self.displayed_text[1:]
                    self.subset_counter += 1
            elif self.displayed_text == self._input:
                self.subset_counter = 0
            self._valid_text_entered = False
            return

        if self.selected:
            self.outline_color = self.border_selected_color

        if self.is_mouse_over(mouse_pos):
            self.hover = True
            if not self.selected:
                self.outline_color = self.border_hover_color
            return

        self.hover = False
        if not self.selected:
            self.outline_color = self.border_color

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the box and its visible text."""
        x, y = self._border_position
        width, height = self.size
        rect = pygame.Rect(round(x), round(y), round(width), round(height))
        if self.background_color is not None:
            pygame.draw.rect(surface, self.background_color, rect)
        thickness = round(self.outline_thickness)
        if thickness > 0:
            pygame.draw.rect(
                surface, self.outline_color, rect.inflate(2 * thickness, 2 * thickness), thickness
            )
        rendered = self._font.render(self.displayed_text, True, self.text_color)
        surface.blit(rendered, (round(self.position[0]), round(self.position[1])))

    # configuration

    def set_size(self, size: tuple[float, float]) -> None:
        """Resize the box."""
        self.size = (float(size[0]), float(size[1]))
        self._calculate_max_characters_displayed()

    def set_position(self, position: tuple[float, float]) -> None:
        """Place the text at ``position``; the border sits slightly offset from it."""
        x, y = position
        self.position = (float(x), float(y))
        self._border_position = (x - 2, y + self.character_size * 0.1)

    def set_border(
        self, thickness: float, color: Color, hover_color: Color, selected_color: Color
    ) -> None:
        """Set the outline thickness and its normal, hover and selected colours."""
        self.outline_color = color
        self.border_color = color
        self.border_hover_color = hover_color
        self.border_selected_color = selected_color
        self.outline_thickness = thickness

    def set_text_format(self, color: Color, size: float) -> None:
        """Set the text colour and character size."""
        self.text_color = color
        self.character_size = int(size)
        self._font = self._font_factory(self.character_size)
        self._calculate_max_characters_displayed()

    def set_string(self, text: str) -> None:
        """Replace the content of the box."""
        self._input = text
        self.displayed_text = text

    def get_string(self) -> str:
        """The full content of the box."""
        return self._input

    def empty(self) -> bool:
        """Return True if the box holds no text."""
        return not self._input

    def bounds(self) -> Rect:
        """The outer rectangle of the border, outline included."""
        t = max(self.outline_thickness, 0.0)
        x, y = self._border_position
        width, height = self.size
        return Rect(x - t, y - t, width + 2 * t, height + 2 * t)

    def is_mouse_over(self, mouse_pos: tuple[float, float]) -> bool:
        """Return True if the point lies within the box."""
        return self.bounds().contains(*mouse_pos)

    def _character_width(self) -> float:
        return self._font.size("A")[0]

    def _calculate_max_characters_displayed(self) -> int:
        char_width = self._character_width()
        if char_width <= 0:
            raise ValueError("font reports a non-positive character width")
        self.max_characters_displayed = int(self.bounds().width / char_width)
        return self.max_characters_displayed