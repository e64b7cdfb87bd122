import pytest

from defender.events import (
    Effect,
    Event,
    EventKind,
    Key,
    end_key,
    game_key,
    game_mouse,
    handle_event,
    menu_key,
    menu_mouse,
    pause_key,
    pause_mouse,
    placing_mouse,
    shop_key,
    shop_mouse,
)
from defender.state import Game

WEAPON_TEXT = "img/weapon.png\n100\n50\n20\n"

CLICK = Event(EventKind.MOUSE_PRESSED)


def key_event(key):
    return Event(EventKind.KEY_PRESSED, key)


@pytest.fixture
def game(tmp_path):
    paths = []
    for index in range(4):
        path = tmp_path / f"weapon{index}.txt"
        path.write_text(WEAPON_TEXT)
        paths.append(path)
    return Game.create(paths)


@pytest.fixture
def playing(game):
    game.flags.menu = False
    game.flags.game = True
    return game


def test_window_close_event(game):
    assert handle_event(game, Event(EventKind.CLOSED), (0, 0)) == Effect.CLOSE


def test_other_event_does_nothing(game):
    assert handle_event(game, Event(EventKind.OTHER), (0, 0)) == Effect.NONE
    assert game.flags.menu is True


def test_menu_escape_closes(game):
    assert handle_event(game, key_event(Key.ESCAPE), (0, 0)) == Effect.CLOSE
    assert menu_key(game, Key.Q) == Effect.NONE


def test_menu_play_starts_game(game):
    effect = handle_event(game, CLICK, (930, 160))
    assert effect == Effect.PLAY_THEME
    assert game.flags.menu is False
    assert game.flags.game is True


def test_menu_quit(game):
    assert menu_mouse(game, (930, 370)) == Effect.CLOSE


def test_how_to_play_round_trip(game):
    menu_mouse(game, (830, 260))
    assert game.flags.htp is True
    assert menu_mouse(game, (930, 160)) == Effect.NONE
    assert game.flags.game is False
    menu_mouse(game, (1810, 20))
    assert game.flags.htp is False


def test_game_escape_pauses(playing):
    effect = handle_event(playing, key_event(Key.ESCAPE), (0, 0))
    assert effect == Effect.RESTART_TASK
    assert playing.flags.pause is True


def test_game_q_closes(playing):
    assert game_key(playing, Key.Q) == Effect.CLOSE


def test_game_s_opens_shop(playing):
    assert game_key(playing, Key.S) == Effect.RESTART_RATIO
    assert playing.flags.shop is True


def test_shop_keys(playing):
    playing.flags.shop = True
    start = playing.golds.amount
    game_key(playing, Key.M)
    assert playing.golds.amount == start + 10000
    shop_key(playing, Key.C)
    assert playing.flags.shop is False


def test_shop_buy(playing):
    playing.flags.shop = True
    item = playing.shop[0]
    start = playing.golds.amount
    game_mouse(playing, (item.buy.pos[0] + 5, item.buy.pos[1] + 5))
    assert playing.golds.amount == start - item.buy_price
    assert playing.weapons[0].placing is True
    assert playing.flags.placing is True
    assert playing.flags.shop is False


def test_shop_buy_too_expensive(playing):
    playing.flags.shop = True
    item = playing.shop[3]
    start = playing.golds.amount
    shop_mouse(playing, (item.buy.pos[0] + 5, item.buy.pos[1] + 5))
    assert playing.golds.amount == start
    assert playing.weapons[3].placing is False
    assert playing.flags.shop is True


def test_shop_upgrade_widens_range(playing):
    playing.flags.shop = True
    item = playing.shop[1]
    weapon = playing.weapons[1]
    width, height = weapon.hitbox.range
    start = playing.golds.amount
    shop_mouse(playing, (item.upgrade.pos[0] + 5, item.upgrade.pos[1] + 5))
    assert weapon.hitbox.range == (width + weapon.hitbox.upgrade_range, height)
    assert playing.golds.amount == start - item.upgrade_price


def test_shop_cross_closes(playing):
    playing.flags.shop = True
    shop_mouse(playing, (1810, 20))
    assert playing.flags.shop is False


def test_place_close_range_weapon_inside(playing):
    playing.flags.placing = True
    weapon = playing.weapons[0]
    weapon.placing = True
    zone = playing.inside[0]
    placing_mouse(playing, (zone.pos[0] + 10, zone.pos[1] + 10))
    assert weapon.placing is False
    assert weapon.active is True


def test_ranged_weapon_refused_inside(playing):
    playing.flags.placing = True
    weapon = playing.weapons[2]
    weapon.placing = True
    zone = playing.inside[0]
    game_mouse(playing, (zone.pos[0] + 10, zone.pos[1] + 10))
    assert weapon.placing is True
    assert weapon.active is False
    assert weapon.button.rect.left == 0


def test_place_ranged_weapon_outside(playing):
    playing.flags.placing = True
    weapon = playing.weapons[3]
    weapon.placing = True
    zone = playing.outside[5]
    game_mouse(playing, (zone.pos[0] + 10, zone.pos[1] + 10))
    assert weapon.active is True


def test_pause_keys(playing):
    playing.flags.pause = True
    assert pause_key(playing, Key.Q) == Effect.CLOSE
    pause_key(playing, Key.P)
    assert playing.flags.pause is False


def test_pause_resume(playing):
    playing.flags.pause = True
    handle_event(playing, CLICK, (890, 430))
    assert playing.flags.pause is False
    assert playing.flags.game is True


def test_pause_back_to_menu(playing):
    playing.flags.pause = True
    pause_mouse(playing, (810, 550))
    assert playing.flags.menu is True
    assert playing.flags.game is False
    assert playing.flags.pause is False


def test_pause_leave(playing):
    playing.flags.pause = True
    assert pause_mouse(playing, (910, 670)) == Effect.CLOSE


def test_end_screen_keys(game):
    game.flags.menu = False
    game.flags.end = True
    assert handle_event(game, key_event(Key.ESCAPE), (0, 0)) == Effect.CLOSE
    assert end_key(game, Key.P) == Effect.NONE
    assert handle_event(game, CLICK, (930, 160)) == Effect.NONE