"""
Tests for the TicTacToe display helpers (status text, config, board renderer).
The renderer is checked headless through Pillow; no window is opened.
"""

import pytest
from PIL import ImageColor

from display.board_renderer import BoardRenderer
from display.config import DisplayConfig
from display.status import cell_label, format_board, status_text
from logic.game_engine import GameEngine
from logic.game_state import GameState, Outcome, Player


def rgb(color):
    return ImageColor.getrgb(color)


# ==================== STATUS TEXT ====================

def test_status_text_follows_the_game():
    engine = GameEngine()
    assert status_text(engine.get_state()) == "X to play"

    engine.apply_move(4)
    assert status_text(engine.get_state()) == "O to play"

    for index in [0, 1, 2, 7]:
        engine.apply_move(index)
    assert status_text(engine.get_state()) == "Winner: X"


def test_status_text_for_tie():
    state = GameState(outcome=Outcome.tie())
    assert status_text(state) == "It's a tie!"


def test_cell_labels():
    assert cell_label(None) == "Empty cell"
    assert cell_label(Player.FIRST) == "Cell X"
    assert cell_label(Player.SECOND) == "Cell O"


def test_format_board():
    state = GameState()
    state.board[0] = Player.FIRST
    state.board[4] = Player.SECOND

    lines = format_board(state).splitlines()
    assert lines == [
        " X |   |  ",
        "---+---+---",
        "   | O |  ",
        "---+---+---",
        "   |   |  ",
    ]


# ==================== CONFIG ====================

def test_config_defaults():
    config = DisplayConfig()
    assert config.PRIMARY_COLOR == "#1976d2"
    assert config.SECONDARY_COLOR == "#424242"
    assert config.ACCENT_COLOR == "#fbc02d"
    assert config.board_size_px == 3 * config.CELL_SIZE_PX + 4 * config.GRID_LINE_WIDTH


def test_config_overrides_stay_on_instance():
    config = DisplayConfig(CELL_SIZE_PX=60, MARK_PADDING_PX=10)
    assert config.CELL_SIZE_PX == 60
    assert DisplayConfig.CELL_SIZE_PX == 110


@pytest.mark.parametrize("overrides", [
    {"CELL_SIZE_PX": 0},
    {"CELL_SIZE_PX": -5},
    {"CELL_SIZE_PX": 40, "MARK_PADDING_PX": 20},
    {"NOT_A_SETTING": 1},
    {"board_size_px": 10},
])
def test_config_rejects_bad_overrides(overrides):
    with pytest.raises(ValueError):
        DisplayConfig(**overrides)


def test_cell_bounds_skip_grid_lines():
    config = DisplayConfig()
    line = config.GRID_LINE_WIDTH
    cell = config.CELL_SIZE_PX

    assert config.cell_bounds(0, 0) == (line, line, line + cell, line + cell)
    left, top, _, _ = config.cell_bounds(1, 2)
    assert left == line + 2 * (cell + line)
    assert top == line + (cell + line)


# ==================== BOARD RENDERER ====================

def test_cell_at_maps_pixels_to_indices():
    renderer = BoardRenderer()
    for index in range(9):
        x, y = renderer.cell_center(index)
        assert renderer.cell_at(x, y) == index


def test_cell_at_ignores_grid_and_outside():
    renderer = BoardRenderer()
    size = renderer.size
    assert renderer.cell_at(0, 0) is None
    assert renderer.cell_at(size // 2, 1) is None
    assert renderer.cell_at(-1, 50) is None
    assert renderer.cell_at(size, size) is None


def test_render_empty_board():
    renderer = BoardRenderer()
    config = renderer.config
    image = renderer.render(GameState())

    assert image.size == (renderer.size, renderer.size)
    assert image.getpixel((0, 0)) == rgb(config.SECONDARY_COLOR)
    for index in range(9):
        assert image.getpixel(renderer.cell_center(index)) == rgb(config.CELL_COLOR)


def test_render_marks():
    renderer = BoardRenderer()
    config = renderer.config
    state = GameState()
    state.board[0] = Player.FIRST
    state.board[8] = Player.SECOND

    image = renderer.render(state)

    # X strokes cross in the middle of the cell, O leaves it empty
    assert image.getpixel(renderer.cell_center(0)) == rgb(config.PRIMARY_COLOR)
    assert image.getpixel(renderer.cell_center(8)) == rgb(config.CELL_COLOR)


def test_render_winning_line():
    engine = GameEngine()
    for index in [0, 3, 1, 4, 2]:
        engine.apply_move(index)

    renderer = BoardRenderer()
    config = renderer.config
    image = renderer.render(engine.get_state(), engine.winning_line)

    for index in engine.winning_line:
        left, top, _, _ = config.cell_bounds(index // 3, index % 3)
        assert image.getpixel((left + 1, top + 1)) == rgb(config.WIN_CELL_COLOR)
        assert image.getpixel(renderer.cell_center(index)) == rgb(config.ACCENT_COLOR)

    left, top, _, _ = config.cell_bounds(1, 0)
    assert image.getpixel((left + 1, top + 1)) == rgb(config.CELL_COLOR)


def test_render_respects_custom_config():
    renderer = BoardRenderer(DisplayConfig(CELL_SIZE_PX=50, MARK_PADDING_PX=8))
    image = renderer.render(GameState())
    assert image.size == (renderer.size, renderer.size)
    assert renderer.size == 3 * 50 + 4 * DisplayConfig.GRID_LINE_WIDTH
