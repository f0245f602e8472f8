import pygame
import pytest

from wireframe.app import key_from_pygame, main, run
from wireframe.parsing import MapError
from wireframe.view import Key


def test_escape_key_translates():
    assert key_from_pygame(pygame.K_ESCAPE) is Key.ESCAPE


@pytest.mark.parametrize(
    "code, expected",
    [
        (pygame.K_UP, Key.UP),
        (pygame.K_LSHIFT, Key.SHIFT_L),
        (pygame.K_KP_PLUS, Key.KP_ADD),
        (pygame.K_KP_MINUS, Key.KP_SUBTRACT),
        (pygame.K_w, Key.W),
        (pygame.K_2, Key.TWO),
    ],
)
def test_known_keys_translate(code, expected):
    assert key_from_pygame(code) is expected


def test_unknown_key_gives_none():
    assert key_from_pygame(pygame.K_F12) is None


def test_every_viewer_key_is_reachable():
    codes = [getattr(pygame, name) for name in dir(pygame) if name.startswith("K_")]
    reached = {key_from_pygame(code) for code in codes} - {None}
    assert reached == set(Key)


def test_main_without_arguments_fails(capsys):
    assert main([]) == 1
    assert "ERROR:Wrong number of arguments!" in capsys.readouterr().out


def test_main_with_two_paths_fails(capsys):
    assert main(["a.fdf", "b.fdf"]) == 1
    assert "ERROR:Wrong number of arguments!" in capsys.readouterr().out


def test_main_rejects_wrong_suffix(capsys):
    assert main(["map.txt"]) == 1
    assert "ERROR:File specified in wrong format!" in capsys.readouterr().out


def test_main_reports_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing.fdf"
    assert main(["--bonus", str(missing)]) == 1
    assert "ERROR:File doesn't exist or couldn't open!" in capsys.readouterr().out


def test_main_reports_ragged_map(tmp_path, capsys):
    path = tmp_path / "ragged.fdf"
    path.write_text("0 0 0\n0 0\n")
    assert main([str(path)]) == 1
    assert "ERROR:Map in wrong format, check the edges!" in capsys.readouterr().out


def test_run_raises_on_empty_file(tmp_path):
    path = tmp_path / "empty.fdf"
    path.write_text("")
    with pytest.raises(MapError):
        run(path, True)