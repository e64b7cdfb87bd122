"""Window, sound and drawing around the game state, and the main loop."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

import pygame

from defender.enemies import WeaponKind
from defender.events import Effect, Event, EventKind, Key, handle_event
from defender.state import Game, Score
from defender.textparse import format_number
from defender.widgets import Button, ButtonId, ImageId

Vector = tuple[float, float]
Color = tuple[int, int, int, int]

WINDOW_SIZE = (1920, 1080)
WINDOW_TITLE = "Defender"
FRAME_RATE = 60
FONT_PATH = "img/among.ttf"
HITBOX_COLOR = (255, 242, 0, 40)
PLACEMENT_COLOR = (100, 250, 100, 40)
ENEMY_VISIBLE_FROM = 100

DEFAULT_WEAPON_FILES = ("obito.txt", "vent.txt", "gun.txt", "sniper.txt")

THEME_PATH = "music/theme.wav"
TASK_PATH = "music/task.wav"
RATIO_PATH = "music/ratio.wav"

_KEYS = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_q: Key.Q,
    pygame.K_s: Key.S,
    pygame.K_c: Key.C,
    pygame.K_m: Key.M,
    pygame.K_p: Key.P,
}


class Playable(Protocol):
    def play(self, loops: int = 0) -> object: ...

    def stop(self) -> object: ...


@dataclass
class _Silence:
    """Stands in for a sound that could not be loaded, keeping only its play state."""

    playing: bool = False
    loops: int = 0

    def play(self, loops: int = 0) -> None:
        self.playing = True
        self.loops = loops

    def stop(self) -> None:
        self.playing = False
        self.loops = 0


def _load_sound(path: str) -> Playable:
    try:
        return pygame.mixer.Sound(path)
    except (pygame.error, FileNotFoundError, OSError):
        return _Silence()


@dataclass
class MusicList:
    """The looping theme and the two jingles."""

    theme: Playable
    task: Playable
    ratio: Playable

    @classmethod
    def load(cls) -> MusicList:
        """Load the three tracks; any that cannot be played stay silent."""
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error:
            return cls(_Silence(), _Silence(), _Silence())
        return cls(_load_sound(THEME_PATH), _load_sound(TASK_PATH), _load_sound(RATIO_PATH))

    def play(self, effect: Effect) -> None:
        """Start the tracks that ``effect`` asks for, each from its beginning."""
        if Effect.PLAY_THEME in effect:
            self.theme.stop()
            self.theme.play(loops=-1)
        if Effect.RESTART_TASK in effect:
            self.task.stop()
            self.task.play()
        if Effect.RESTART_RATIO in effect:
            self.ratio.stop()
            self.ratio.play()

    def stop_all(self) -> None:
        for track in (self.theme, self.task, self.ratio):
            track.stop()


@dataclass
class Renderer:
    """Draws the game state onto a surface."""

    surface: pygame.Surface
    _images: dict[str, pygame.Surface | None] = field(default_factory=dict)
    _fonts: dict[int, pygame.font.Font] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not pygame.font.get_init():
            pygame.font.init()

    def draw(self, game: Game, mouse: Vector) -> list[str]:
        """Draw one frame; return the image paths of the layers in drawing order."""
        drawn: list[str] = []
        self.surface.fill((0, 0, 0))
        self._image(game, ImageId.BLACK, (0, 0), drawn)
        for background in game.backgrounds:
            self._blit(background.path, (background.x, background.y), None, drawn)
        if game.flags.menu:
            self._draw_menu(game, drawn)
        if game.flags.game:
            self._draw_game(game, mouse, drawn)
        if game.flags.end:
            self._image(game, ImageId.LOOSE, (0, 0), drawn)
            self._text(game.end_score, game.score.score)
        return drawn

    def _draw_menu(self, game: Game, drawn: list[str]) -> None:
        if game.flags.htp:
            self._image(game, ImageId.HTP_IMG, (0, 0), drawn)
            self._button(game.buttons[ButtonId.CROSS_HTP], drawn)
        else:
            for button_id in (ButtonId.PLAY, ButtonId.HTP, ButtonId.QUIT):
                self._button(game.buttons[button_id], drawn)
            self._image(game, ImageId.MENU_BG, (0, 0), drawn)

    def _draw_game(self, game: Game, mouse: Vector, drawn: list[str]) -> None:
        self._text_value(game.golds.size, game.golds.position, game.golds.color, game.golds.amount)
        if game.flags.shop:
            self._draw_shop(game, drawn)
        else:
            self._image(game, ImageId.MAP, (0, 0), drawn)
            self._text(game.score, game.score.score)
            self._button(game.base.button, drawn)
            self._draw_enemies(game, drawn)
            self._draw_weapons(game, mouse, drawn)
        if game.flags.pause:
            for button_id in (ButtonId.RESUME, ButtonId.BACKMENU, ButtonId.LEAVE):
                self._button(game.buttons[button_id], drawn)
            self._image(game, ImageId.PAUSE_BG, (0, 0), drawn)

    def _draw_shop(self, game: Game, drawn: list[str]) -> None:
        self._image(game, ImageId.SHOP, (0, 0), drawn)
        self._button(game.buttons[ButtonId.INFO], drawn)
        self._button(game.buttons[ButtonId.CROSS], drawn)
        for item, show_tag in zip(game.shop, game.price_tags):
            if show_tag:
                self._image(game, ImageId.UPGRADE_PRICE, item.price_tag_pos, drawn)
            self._button(item.buy, drawn)
            self._button(item.upgrade, drawn)

    def _draw_enemies(self, game: Game, drawn: list[str]) -> None:
        for enemy in game.enemies[1:]:
            if enemy.y > ENEMY_VISIBLE_FROM:
                rect = enemy.frame_rect()
                area = pygame.Rect(rect.left, rect.top, rect.width, rect.height)
                self._blit(enemy.filepath, enemy.sprite_position(), area, drawn)

    def _draw_weapons(self, game: Game, mouse: Vector, drawn: list[str]) -> None:
        for weapon in game.weapons:
            if weapon.placing:
                close_range = weapon.kind in (WeaponKind.OBITO, WeaponKind.VENT)
                for zone in game.inside if close_range else game.outside:
                    self._fill_rect(zone.pos, zone.range, PLACEMENT_COLOR)
                self._fill_rect(mouse, weapon.hitbox.range, HITBOX_COLOR)
                self._button(weapon.button, drawn)
            if weapon.active:
                if weapon.kind is WeaponKind.VENT and weapon.hitbox.bullet != 1:
                    continue
                self._button(weapon.button, drawn)
                if weapon.hitbox.highlighted:
                    self._fill_rect(weapon.hitbox.pos, weapon.hitbox.range, HITBOX_COLOR)

    def _image(self, game: Game, image_id: ImageId, pos: Vector, drawn: list[str]) -> None:
        self._blit(game.images[image_id].path, pos, None, drawn)

    def _button(self, button: Button, drawn: list[str]) -> None:
        rect = button.rect
        area = pygame.Rect(rect.left, rect.top, rect.width, rect.height)
        self._blit(button.filepath, button.pos, area, drawn)

    def _blit(
        self, path: str, pos: Vector, area: pygame.Rect | None, drawn: list[str]
    ) -> None:
        drawn.append(path)
        image = self._load(path)
        if image is not None:
            self.surface.blit(image, (int(pos[0]), int(pos[1])), area)

    def _load(self, path: str) -> pygame.Surface | None:
        if path not in self._images:
            try:
                self._images[path] = pygame.image.load(path)
            except (pygame.error, FileNotFoundError, OSError):
                self._images[path] = None
        return self._images[path]

    def _fill_rect(self, pos: Vector, size: Vector, color: Color) -> None:
        width, height = int(size[0]), int(size[1])
        if width <= 0 or height <= 0:
            return
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill(color)
        self.surface.blit(overlay, (int(pos[0]), int(pos[1])))

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            try:
                self._fonts[size] = pygame.font.Font(FONT_PATH, size)
            except (pygame.error, FileNotFoundError, OSError):
                self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _text(self, score: Score, value: float) -> None:
        self._text_value(score.size, score.position, score.color, value)

    def _text_value(self, size: int, pos: Vector, color: Color, value: float) -> None:
        rendered = self._font(size).render(format_number(value), True, color)
        self.surface.blit(rendered, (int(pos[0]), int(pos[1])))


def translate_event(raw: pygame.event.Event) -> Event:
    """Turn a pygame event into the game's own event."""
    if raw.type == pygame.QUIT:
        return Event(EventKind.CLOSED)
    if raw.type == pygame.MOUSEBUTTONDOWN:
        return Event(EventKind.MOUSE_PRESSED)
    if raw.type == pygame.KEYDOWN:
        return Event(EventKind.KEY_PRESSED, _KEYS.get(getattr(raw, "key", None), Key.OTHER))
    return Event(EventKind.OTHER)


def weapon_files_from_args(argv: Sequence[str]) -> list[str]:
    """The weapon description files named on the command line, or the defaults."""
    if not argv:
        return list(DEFAULT_WEAPON_FILES)
    return list(argv)


def run(weapon_files: Sequence[str | os.PathLike[str]]) -> None:
    """Open the window and play until it is closed."""
    game = Game.create(weapon_files)
    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE, pygame.FULLSCREEN)
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        music = MusicList.load()
        music.play(Effect.PLAY_THEME)
        renderer = Renderer(screen)
        running = True
        while running:
            delta = clock.tick(FRAME_RATE) / 1000.0
            mouse = pygame.mouse.get_pos()
            for raw in pygame.event.get():
                effect = handle_event(game, translate_event(raw), mouse)
                if Effect.CLOSE in effect:
                    running = False
                music.play(effect)
            game.update(delta, mouse)
            renderer.draw(game, mouse)
            pygame.display.flip()
        music.stop_all()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point."""
    args = sys.argv[1:] if argv is None else argv
    run(weapon_files_from_args(args))
    return 0