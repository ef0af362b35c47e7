import pytest

from quadsim.game import Game, GameState


class Recorder(GameState):
    def __init__(self, game, frames):
        self.game = game
        self.frames_left = frames
        self.calls = []
        self.dts = []
        self.window_size = None
        self.corner = None

    def handle_input(self):
        self.calls.append("input")

    def update(self, dt):
        self.calls.append("update")
        self.dts.append(dt)
        self.frames_left -= 1
        if self.frames_left <= 0:
            self.game.close()

    def draw(self):
        self.calls.append("draw")
        self.window_size = self.game.window.get_size()
        self.corner = tuple(self.game.window.get_at((0, 0)))


def test_no_state_initially():
    game = Game(320, 240)
    assert game.current_state() is None
    assert game.is_open is False


def test_change_screen_makes_state_current():
    game = Game(320, 240)
    first = Recorder(game, 1)
    second = Recorder(game, 1)
    game.change_screen(first)
    assert game.current_state() is first
    game.change_screen(second)
    assert game.current_state() is second


def test_previous_screen_returns_to_earlier_state():
    game = Game(320, 240)
    first = Recorder(game, 1)
    second = Recorder(game, 1)
    game.change_screen(first)
    game.change_screen(second)
    game.previous_screen()
    assert game.current_state() is first
    game.previous_screen()
    assert game.current_state() is None


def test_previous_screen_on_empty_stack_raises():
    with pytest.raises(IndexError):
        Game(320, 240).previous_screen()


def test_game_state_is_abstract():
    with pytest.raises(TypeError):
        GameState()


def test_size_is_kept():
    game = Game(320, 240)
    assert (game.width, game.height) == (320.0, 240.0)


def test_game_loop_runs_frames_in_order(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    game = Game(320, 240)
    state = Recorder(game, 3)
    game.change_screen(state)
    game.game_loop()
    assert state.calls == ["input", "update", "draw"] * 3
    assert all(dt >= 0 for dt in state.dts)
    assert state.window_size == (320, 240)
    assert state.corner == (255, 255, 255, 255)
    assert game.is_open is False
    assert game.window is None


def test_game_loop_drives_only_top_state(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    game = Game(200, 100)
    bottom = Recorder(game, 1)
    top = Recorder(game, 2)
    game.change_screen(bottom)
    game.change_screen(top)
    game.game_loop()
    assert bottom.calls == []
    assert len(top.dts) == 2