import pygame
import pytest

from defender.app import MusicList, Renderer, translate_event, weapon_files_from_args
from defender.events import Effect, Event, EventKind, Key
from defender.state import Game
from defender.weapons import load_weapons


class FakeSound:
    def __init__(self):
        self.calls = []

    def play(self, loops=0):
        self.calls.append(("play", loops))

    def stop(self):
        self.calls.append(("stop",))


@pytest.fixture
def music():
    return MusicList(FakeSound(), FakeSound(), FakeSound())


@pytest.fixture
def game(tmp_path):
    paths = []
    for name in ("obito", "vent", "gun", "sniper"):
        path = tmp_path / f"{name}.txt"
        path.write_text(f"img/{name}.png\n100\n50\n20\n")
        paths.append(path)
    return Game(weapons=load_weapons(paths))


@pytest.fixture
def renderer():
    return Renderer(pygame.Surface((1920, 1080)))


def test_default_weapon_files():
    assert weapon_files_from_args([]) == ["obito.txt", "vent.txt", "gun.txt", "sniper.txt"]


def test_weapon_files_from_arguments():
    args = ["a.txt", "b.txt", "c.txt", "d.txt"]
    assert weapon_files_from_args(args) == args


def test_translate_quit():
    assert translate_event(pygame.event.Event(pygame.QUIT)) == Event(EventKind.CLOSED)


def test_translate_mouse():
    raw = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(3, 4))
    assert translate_event(raw).kind is EventKind.MOUSE_PRESSED


@pytest.mark.parametrize(
    "code, key",
    [
        (pygame.K_ESCAPE, Key.ESCAPE),
        (pygame.K_q, Key.Q),
        (pygame.K_s, Key.S),
        (pygame.K_c, Key.C),
        (pygame.K_m, Key.M),
        (pygame.K_p, Key.P),
        (pygame.K_z, Key.OTHER),
    ],
)
def test_translate_keys(code, key):
    assert translate_event(pygame.event.Event(pygame.KEYDOWN, key=code)) == Event(
        EventKind.KEY_PRESSED, key
    )


def test_translate_other():
    raw = pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 1))
    assert translate_event(raw).kind is EventKind.OTHER


def test_play_theme_loops(music):
    music.play(Effect.PLAY_THEME)
    assert music.theme.calls == [("stop",), ("play", -1)]
    assert music.task.calls == []


def test_restart_task_and_ratio(music):
    music.play(Effect.RESTART_TASK | Effect.RESTART_RATIO)
    assert music.task.calls == [("stop",), ("play", 0)]
    assert music.ratio.calls == [("stop",), ("play", 0)]
    assert music.theme.calls == []


def test_close_plays_nothing(music):
    music.play(Effect.CLOSE)
    assert music.theme.calls == music.task.calls == music.ratio.calls == []


def test_menu_layers(game, renderer):
    drawn = renderer.draw(game, (0, 0))
    assert drawn[:3] == ["img/bg/black.jpg", "img/bg/sb_3840.png", "img/bg/fb_3840.png"]
    assert drawn[3:] == [
        "img/btn/play.png",
        "img/btn/howtoplay.png",
        "img/btn/quit.png",
        "img/bg/amongus.png",
    ]


def test_how_to_play_layers(game, renderer):
    game.flags.htp = True
    drawn = renderer.draw(game, (0, 0))
    assert drawn[-2:] == ["img/bg/how_to_play.png", "img/shop/cross2.png"]
    assert "img/btn/play.png" not in drawn


def test_end_layers(game, renderer):
    game.flags.menu = False
    game.flags.end = True
    drawn = renderer.draw(game, (0, 0))
    assert drawn[-1] == "img/bg/loose.png"


def test_pause_background_drawn_last(game, renderer):
    game.flags.menu = False
    game.flags.game = True
    game.flags.pause = True
    drawn = renderer.draw(game, (0, 0))
    assert drawn[-1] == "img/bg/pause_screen.png"
    assert "img/bg/map.png" in drawn


def test_shop_replaces_map(game, renderer):
    game.flags.menu = False
    game.flags.game = True
    game.flags.shop = True
    drawn = renderer.draw(game, (0, 0))
    assert "img/bg/shop_2.png" in drawn
    assert "img/bg/map.png" not in drawn
    assert drawn.count("img/btn/buy.png") == 4


def test_active_weapon_drawn(game, renderer):
    game.flags.menu = False
    game.flags.game = True
    game.weapons[2].active = True
    drawn = renderer.draw(game, (0, 0))
    assert "img/gun.png" in drawn
    assert "img/obito.png" not in drawn


def test_spent_vent_hidden(game, renderer):
    game.flags.menu = False
    game.flags.game = True
    game.weapons[1].active = True
    game.weapons[1].hitbox.bullet = 0
    drawn = renderer.draw(game, (0, 0))
    assert "img/vent.png" not in drawn


def test_frame_cleared_to_black(game, renderer):
    renderer.surface.fill((200, 10, 10))
    renderer.draw(game, (0, 0))
    assert tuple(renderer.surface.get_at((5, 1075)))[:3] == (0, 0, 0)