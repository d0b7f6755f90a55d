import itertools

import pytest

from noughts import cli
from noughts.config import GameConfig
from noughts.game import Mark

TOKENS = ["1a", "1b", "1c", "2a", "2b", "2c", "3a", "3b", "3c"]


def scripted_input(first_answers, moves):
    """Answer the first-player prompt from `first_answers`, then cycle `moves`."""
    first = iter(first_answers)
    cycle = itertools.cycle(moves)

    def fake_input(prompt=""):
        fake_input.prompts.append(prompt)
        if prompt.startswith("Who moves first"):
            return next(first)
        return next(cycle)

    fake_input.prompts = []
    return fake_input


@pytest.mark.parametrize("answer", ["p", "c"])
def test_full_game_over_stdin(monkeypatch, capsys, plain_config, answer):
    # Cycling through every token re-prompts on taken cells until the game ends
    monkeypatch.setattr("builtins.input", scripted_input(["maybe", answer], ["zz"] + TOKENS))
    assert cli.play(plain_config) == 0

    out = capsys.readouterr().out
    assert "answer 'p' or 'c'" in out
    assert "Invalid move:" in out
    assert "You win!" not in out
    assert ("Draw!" in out) or ("Computer wins!" in out)
    assert "Rounds played: " in out.splitlines()[-1]


def test_computer_first_opens_in_corner(monkeypatch, capsys, plain_config):
    plain_config.human_first = False
    monkeypatch.setattr("builtins.input", scripted_input([], TOKENS))
    assert cli.play(plain_config) == 0
    assert "Computer played 1A" in capsys.readouterr().out


def test_out_of_bounds_token_reprompts(monkeypatch, capsys, plain_config):
    plain_config.human_first = True
    monkeypatch.setattr("builtins.input", scripted_input([], ["4a"] + TOKENS))
    assert cli.play(plain_config) == 0
    assert "outside the 3x3 board" in capsys.readouterr().out


def test_eof_aborts(monkeypatch, capsys, plain_config):
    def eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)
    assert cli.play(plain_config) == 1
    assert "Game aborted." in capsys.readouterr().out


def test_missing_layout_is_fatal(tmp_path, capsys):
    config = GameConfig(layout_path=str(tmp_path / "missing.txt"), color=False, clear_screen=False)
    assert cli.play(config) == 2
    assert "cannot read board layout" in capsys.readouterr().err


def test_main_uses_given_config(monkeypatch, capsys):
    config = GameConfig(human_mark=Mark.NOUGHT, computer_mark=Mark.CROSS, human_first=True, color=False, clear_screen=False)
    fake_input = scripted_input([], TOKENS)
    monkeypatch.setattr("builtins.input", fake_input)
    assert cli.main(config) == 0
    assert fake_input.prompts[0].startswith("Your move (O)")
    assert "Rounds played:" in capsys.readouterr().out


def test_config_rejects_same_marks():
    with pytest.raises(ValueError):
        GameConfig(human_mark=Mark.CROSS, computer_mark=Mark.CROSS)


def test_non_ascii_column_reprompts(monkeypatch, capsys, plain_config):
    plain_config.human_first = True
    monkeypatch.setattr("builtins.input", scripted_input([], ["1ß"] + TOKENS))
    assert cli.play(plain_config) == 0
    assert "column must be a letter" in capsys.readouterr().out


def test_ctrl_c_aborts(monkeypatch, capsys, plain_config):
    def interrupt(prompt=""):
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupt)
    assert cli.play(plain_config) == 1
    assert "Game aborted." in capsys.readouterr().out
