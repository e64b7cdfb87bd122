"""Reactions to keyboard, mouse and window events on each screen."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, auto

from defender.enemies import WeaponKind
from defender.state import Game
from defender.weapons import placement_hovered
from defender.widgets import ButtonId

Vector = tuple[float, float]

CHEAT_GOLDS = 10000


class EventKind(Enum):
    CLOSED = auto()
    MOUSE_PRESSED = auto()
    KEY_PRESSED = auto()
    OTHER = auto()


class Key(Enum):
    ESCAPE = auto()
    Q = auto()
    S = auto()
    C = auto()
    M = auto()
    P = auto()
    OTHER = auto()


@dataclass(frozen=True)
class Event:
    kind: EventKind
    key: Key | None = None


class Effect(Flag):
    """Side effects outside the game state that a handler asks for."""

    NONE = 0
    CLOSE = auto()
    PLAY_THEME = auto()
    RESTART_TASK = auto()
    RESTART_RATIO = auto()


def handle_event(game: Game, event: Event, mouse: Vector) -> Effect:
    """Dispatch ``event`` to each active screen in turn; return the effects."""
    effect = Effect.NONE
    if game.flags.menu:
        effect |= _dispatch(event, lambda: menu_mouse(game, mouse), lambda: menu_key(game, event.key))
    if game.flags.game:
        effect |= _dispatch(event, lambda: game_mouse(game, mouse), lambda: game_key(game, event.key))
    if game.flags.pause:
        effect |= _dispatch(
            event, lambda: pause_mouse(game, mouse), lambda: pause_key(game, event.key)
        )
    if game.flags.end:
        effect |= _dispatch(event, lambda: Effect.NONE, lambda: end_key(game, event.key))
    return effect


def _dispatch(event: Event, on_mouse, on_key) -> Effect:
    if event.kind is EventKind.CLOSED:
        return Effect.CLOSE
    if event.kind is EventKind.MOUSE_PRESSED:
        return on_mouse()
    if event.kind is EventKind.KEY_PRESSED:
        return on_key()
    return Effect.NONE


def menu_key(game: Game, key: Key | None) -> Effect:
    """Escape quits from the menu."""
    return Effect.CLOSE if key is Key.ESCAPE else Effect.NONE


def menu_mouse(game: Game, mouse: Vector) -> Effect:
    """Play, quit or open the how-to-play page; close that page with its cross."""
    flags = game.flags
    buttons = game.buttons
    effect = Effect.NONE
    if flags.htp:
        if buttons[ButtonId.CROSS_HTP].hover(mouse):
            flags.htp = False
        return effect
    if buttons[ButtonId.PLAY].hover(mouse):
        flags.menu = False
        flags.game = True
        effect |= Effect.PLAY_THEME
    if buttons[ButtonId.QUIT].hover(mouse):
        effect |= Effect.CLOSE
    if buttons[ButtonId.HTP].hover(mouse):
        flags.htp = True
    return effect


def game_key(game: Game, key: Key | None) -> Effect:
    """Escape pauses, Q quits, S opens the shop."""
    effect = Effect.NONE
    if key is Key.ESCAPE:
        game.flags.pause = True
        effect |= Effect.RESTART_TASK
    if key is Key.Q:
        effect |= Effect.CLOSE
    if key is Key.S:
        game.flags.shop = True
        effect |= Effect.RESTART_RATIO
    if game.flags.shop:
        effect |= shop_key(game, key)
    return effect


def shop_key(game: Game, key: Key | None) -> Effect:
    """C closes the shop; M grants a pile of gold."""
    if key is Key.C:
        game.flags.shop = False
    if key is Key.M:
        game.golds.amount += CHEAT_GOLDS
    return Effect.NONE


def game_mouse(game: Game, mouse: Vector) -> Effect:
    """Clicks go to the shop when it is open, else to weapon placement."""
    if game.flags.shop:
        return shop_mouse(game, mouse)
    if game.flags.placing:
        return placing_mouse(game, mouse)
    return Effect.NONE


def shop_mouse(game: Game, mouse: Vector) -> Effect:
    """Buy or upgrade the weapon whose button was clicked, if affordable."""
    for item, weapon in zip(game.shop, game.weapons):
        if game.golds.amount >= item.upgrade_price and item.upgrade.contains(mouse):
            game.golds.amount -= item.upgrade_price
            width, height = weapon.hitbox.range
            weapon.hitbox.range = (width + weapon.hitbox.upgrade_range, height)
        if game.golds.amount >= item.buy_price and item.buy.contains(mouse):
            game.golds.amount -= item.buy_price
            weapon.placing = True
            game.flags.placing = True
            game.flags.shop = False
        if game.buttons[ButtonId.CROSS].contains(mouse):
            game.flags.shop = False
    return Effect.NONE


def placing_mouse(game: Game, mouse: Vector) -> Effect:
    """Drop each weapon being placed if the cursor is over a zone it may use."""
    for weapon in game.weapons:
        if not weapon.placing:
            continue
        ranged = weapon.kind in (WeaponKind.GUN, WeaponKind.SNIPER)
        if placement_hovered(weapon, game.outside, mouse, ranged) or placement_hovered(
            weapon, game.inside, mouse, not ranged
        ):
            weapon.placing = False
            weapon.active = True
    return Effect.NONE


def pause_key(game: Game, key: Key | None) -> Effect:
    """Q quits, P resumes."""
    effect = Effect.NONE
    if key is Key.Q:
        effect |= Effect.CLOSE
    if key is Key.P:
        game.flags.pause = False
    return effect


def pause_mouse(game: Game, mouse: Vector) -> Effect:
    """Resume, go back to the menu, or leave."""
    flags = game.flags
    buttons = game.buttons
    effect = Effect.NONE
    if buttons[ButtonId.RESUME].hover(mouse):
        flags.pause = False
    if buttons[ButtonId.BACKMENU].hover(mouse):
        flags.game = False
        flags.pause = False
        flags.menu = True
    if buttons[ButtonId.LEAVE].hover(mouse):
        effect |= Effect.CLOSE
    return effect


def end_key(game: Game, key: Key | None) -> Effect:
    """Escape quits from the end screen."""
    return Effect.CLOSE if key is Key.ESCAPE else Effect.NONE