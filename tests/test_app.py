import pytest

from brawldefender.app import HELP_PATH, App, main, wants_help
from brawldefender.game import START_BANK, START_LIVES
from brawldefender.menus import GAME_MUSIC, MENU_MUSIC, Session


@pytest.fixture
def headless(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        (["-h"], True),
        (["other", "-h"], True),
        (["-h", "other"], False),
        ([], False),
        (["-help"], False),
    ],
)
def test_wants_help(argv, expected):
    assert wants_help(argv) is expected


def test_main_prints_help_file(headless, capsys):
    help_file = headless / HELP_PATH
    help_file.parent.mkdir(parents=True)
    help_file.write_text("USAGE\n    ./game")
    assert main(["-h"]) == 0
    assert capsys.readouterr().out == "USAGE\n    ./game\n"


def test_main_without_help_file_fails(headless, capsys):
    assert main(["-h"]) == 84
    assert capsys.readouterr().err != ""


def test_run_on_title_menu_stops_at_frame_limit(headless):
    session = Session()
    frames = App(session, frame_limit=3).run()
    assert frames == 3
    assert session.is_in_game is False
    assert session.menus["game"].is_active is True
    assert session.current_music == MENU_MUSIC


def test_run_with_closed_window_shows_nothing(headless):
    session = Session()
    session.window_open = False
    assert App(session, frame_limit=5).run() == 0


def test_run_in_game_switches_music_and_keeps_state(headless):
    session = Session()
    session.is_in_game = True
    session.menus["game"].is_active = False
    frames = App(session, frame_limit=4).run()
    assert frames == 4
    assert session.current_music == GAME_MUSIC
    assert session.game.bank == START_BANK
    assert session.game.lives == START_LIVES
    assert session.game.mobs == []


def test_run_keeps_mute_setting(headless):
    session = Session()
    session.toggle_mute()
    App(session, frame_limit=2).run()
    assert session.is_muted is True
    assert session.music_playing is False
    assert session.window_open is True