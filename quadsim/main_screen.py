"""The simulation screen: bouncing particles, collision detection and controls."""

from __future__ import annotations

import functools
import itertools
import random
import re
import time
from dataclasses import dataclass

import pygame

from quadsim.button import Button
from quadsim.collision import particles_collide
from quadsim.game import Game, GameState
from quadsim.geometry import Rect
from quadsim.particle import GREEN, RED, Particle
from quadsim.quadtree import QuadTree
from quadsim.textbox import InputMode, TextBox

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
TEXTBOX_BACKGROUND = (230, 230, 230)
BUTTON_BACKGROUND = (220, 220, 220)
NODE_CAPACITY = 4
FPS_CHARACTER_SIZE = 20
FPS_POSITION = (15, 10)
_LEFT_MOUSE_BUTTON = 1

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group())


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group())


def _mouse_position() -> tuple[float, float]:
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        return pygame.mouse.get_pos()
    return (-1.0, -1.0)


@dataclass
class _Label:
    text: str
    position: tuple[float, float] = (0.0, 0.0)


class MainScreen(GameState):
    """Moves particles inside a boundary and colours the ones that touch."""

    def __init__(self, game: Game, rng: random.Random | None = None) -> None:
        pygame.font.init()
        self.game = game
        self.rng = rng if rng is not None else random.Random()
        self.pause = False
        self.use_quad_tree = False
        self.boundary = Rect(10, 10, game.width * 0.75, game.height - 20)
        self.object_num = 50
        self.radius = 2.0
        self.particle_speed = 100.0
        self.objects: list[Particle] = []
        self.quad_tree = QuadTree()

        self._font = functools.partial(pygame.font.Font, None)
        self._label_size = FPS_CHARACTER_SIZE

        self.textboxes: list[TextBox] = []
        for _ in range(3):
            textbox = TextBox(self._font)
            textbox.set_border(2, BLACK, BLACK, WHITE)
            textbox.input_mode = InputMode.NUMBER_ONLY
            textbox.background_color = TEXTBOX_BACKGROUND
            self.textboxes.append(textbox)
        self.labels = [_Label("OBJECTS:"), _Label("RADIUS:"), _Label("SPEED:")]

        self.textboxes[0].set_string("50")
        self.textboxes[1].set_string("2")
        self.textboxes[2].set_string("100")

        self.buttons = [
            Button(self._font, "APPLY", self.apply_settings),
            Button(self._font, "PAUSE", self.toggle_pause),
            Button(self._font, "MODE: BRUTE", self.toggle_mode),
        ]

        self.fps_text = "FPS: 0"
        self.frame_counter = 0
        self._fps_started = time.monotonic()

        self._layout_ui()
        self.initialize_objects()

    def _layout_ui(self) -> None:
        width, height = self.game.width, self.game.height
        margin_right = width / 100
        char_size = min(50.0, max(25.0, width / 30.0))
        textbox_width = min(100.0, max(50.0, width / 10.0))
        self._label_size = int(char_size)
        label_font = self._font(self._label_size)

        for i, (textbox, label) in enumerate(zip(self.textboxes, self.labels)):
            textbox.set_text_format(BLACK, char_size)
            textbox.set_size((textbox_width, char_size))
            textbox.set_position((width - textbox_width - margin_right, height * 0.075 * i))
            label_width = label_font.size(label.text)[0]
            label.position = (
                textbox.bounds().left - label_width - 10.0,
                textbox.position[1],
            )

        for i, button in enumerate(self.buttons):
            button.set_border(BLACK, 2)
            button.set_font(self._font)
            button.set_character_size(int(char_size))
            button.set_text_color(BLACK)
            button.background_color = BUTTON_BACKGROUND
            button.set_position((
                width - margin_right - button.bounds().width / 2,
                height * 0.35 + height * 0.1 * (i + 1),
            ))

    def initialize_objects(self) -> None:
        """Replace all particles with new ones at random positions and velocities."""
        self.objects.clear()
        self.quad_tree.set_data(self.boundary, NODE_CAPACITY)
        speed = self.particle_speed
        for _ in range(self.object_num):
            particle = Particle(self.radius)
            particle.position = (
                float(self.rng.randrange(int(self.boundary.width))),
                float(self.rng.randrange(int(self.boundary.height))),
            )
            particle.velocity = (
                self.rng.randrange(int(speed)) - speed / 2,
                self.rng.randrange(int(speed)) - speed / 2,
            )
            particle.color = GREEN
            self.objects.append(particle)

    def apply_settings(self) -> None:
        """Read count, radius and speed from the text boxes and restart."""
        count, radius, speed = self.textboxes
        if not count.empty():
            self.object_num = _leading_int(count.get_string())
        if not radius.empty():
            self.radius = _leading_float(radius.get_string())
        if not speed.empty():
            self.particle_speed = _leading_float(speed.get_string())
        self.initialize_objects()

    def toggle_pause(self) -> None:
        """Stop or resume the movement."""
        self.pause = not self.pause
        print("Paused" if self.pause else "Resumed")

    def toggle_mode(self) -> None:
        """Switch between brute-force and quadtree collision detection."""
        self.use_quad_tree = not self.use_quad_tree
        self.buttons[2].set_string("MODE: QUAD" if self.use_quad_tree else "MODE: BRUTE")

    def detect_collisions(self) -> None:
        """Colour every particle that overlaps another one red."""
        if self.use_quad_tree:
            self.quad_tree.reset()
            for particle in self.objects:
                self.quad_tree.insert(particle)
            for particle in self.objects:
                for other in self.quad_tree.query(particle.bounds()):
                    if particle is not other and particles_collide(particle, other):
                        particle.color = RED
                        other.color = RED
        else:
            for a, b in itertools.combinations(self.objects, 2):
                if particles_collide(a, b):
                    a.color = RED
                    b.color = RED

    def handle_input(self) -> None:
        """Dispatch window events to the text boxes and buttons."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.game.close()

            mouse = _mouse_position()
            for textbox in self.textboxes:
                textbox.handle_input(event)

            for button in self.buttons:
                button.handle_input(event)
                button.update(mouse)
                if (
                    button.mouse_over
                    and event.type == pygame.MOUSEBUTTONDOWN
                    and getattr(event, "button", None) == _LEFT_MOUSE_BUTTON
                ):
                    button.on_action()

    def update(self, dt: float) -> None:
        """Move the particles, detect collisions and count frames."""
        mouse = _mouse_position()
        for textbox in self.textboxes:
            textbox.update(mouse)

        if not self.pause:
            for particle in self.objects:
                particle.update(dt, self.boundary)
                particle.color = GREEN
            self.detect_collisions()

        self.frame_counter += 1
        now = time.monotonic()
        if now - self._fps_started >= 1.0:
            self.fps_text = f"FPS: {self.frame_counter}"
            self.frame_counter = 0
            self._fps_started = now

    def draw(self) -> None:
        """Draw particles, controls and the frame counter onto the game window."""
        surface = self.game.window
        if surface is None:
            raise RuntimeError("the game window is not open")

        for particle in self.objects:
            particle.render(surface)

        label_font = self._font(self._label_size)
        for label, textbox in zip(self.labels, self.textboxes):
            rendered = label_font.render(label.text, True, BLACK)
            surface.blit(rendered, (round(label.position[0]), round(label.position[1])))
            textbox.draw(surface)

        for button in self.buttons:
            button.render(surface)

        fps = self._font(FPS_CHARACTER_SIZE).render(self.fps_text, True, BLACK)
        surface.blit(fps, FPS_POSITION)