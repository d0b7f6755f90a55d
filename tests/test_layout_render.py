import pytest
from colorama import Fore, Style

from noughts.errors import ResourceLoadFailure
from noughts.game import GameBoard, Mark
from noughts.layout import DEFAULT_LAYOUT, BoardLayout, load_layout, to_visual
from noughts.render import clear_screen, render


def test_coordinate_map():
    assert to_visual(0, 0) == (2, 5)
    assert to_visual(2, 2) == (6, 17)
    assert to_visual(1, 2) == (4, 17)


def test_default_layout_loads(layout):
    assert layout.source == str(DEFAULT_LAYOUT)
    assert len(layout.cell_positions()) == 9
    for row, col in layout.cell_positions():
        assert layout.lines[row][col] == " "


def test_missing_layout_file(tmp_path):
    with pytest.raises(ResourceLoadFailure):
        load_layout(tmp_path / "nope.txt")


def test_truncated_layout(tmp_path):
    path = tmp_path / "short.txt"
    path.write_text("  +---+\n1 |   |\n", encoding="utf-8")
    with pytest.raises(ResourceLoadFailure):
        load_layout(path)


def test_layout_with_filled_placeholder():
    text = DEFAULT_LAYOUT.read_text(encoding="utf-8")
    lines = text.splitlines()
    row, col = to_visual(1, 1)
    lines[row] = lines[row][:col] + "#" + lines[row][col + 1:]
    with pytest.raises(ResourceLoadFailure):
        BoardLayout.from_text("\n".join(lines))


def test_plain_render_places_marks(layout):
    board = GameBoard.from_rows(["X..", ".O.", "..X"])
    lines = render(board, layout, color=False).splitlines()
    assert lines[2][5] == "X"
    assert lines[4][11] == "O"
    assert lines[6][17] == "X"
    assert lines[2][11] == " "
    assert lines[0].split() == ["A", "B", "C"]


def test_empty_board_renders_template(layout):
    expected = "\n".join("".join(line) for line in layout.lines)
    assert render(GameBoard(), layout, color=False) == expected


def test_color_render(layout):
    board = GameBoard()
    board.place(0, 0, Mark.CROSS)
    board.place(1, 1, Mark.NOUGHT)
    out = render(board, layout)
    assert f"{Fore.RED}X{Style.RESET_ALL}" in out
    assert f"{Fore.BLUE}O{Style.RESET_ALL}" in out
    assert f"{Fore.YELLOW}A{Style.RESET_ALL}" in out
    assert f"{Style.BRIGHT}{Fore.WHITE}+{Style.RESET_ALL}" in out


def test_clear_screen_sequence():
    assert clear_screen() == "\x1b[2J\x1b[1;1H"
