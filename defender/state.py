"""The whole game state and the per-frame simulation step."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from defender.enemies import Enemy, PathStage, WeaponKind, make_enemies
from defender.shop import Golds, ShopItem, make_shop
from defender.weapons import (
    Placement,
    Weapon,
    load_weapons,
    make_inside_placements,
    make_outside_placements,
    placement_hovered,
)
from defender.widgets import (
    Background,
    Button,
    ButtonId,
    ButtonSpec,
    ImageSpec,
    IntRect,
    make_backgrounds,
    make_buttons,
    make_images,
)

Vector = tuple[float, float]
Color = tuple[int, int, int, int]

SCORE_INTERVAL = 0.65
KILL_REWARD = 10
BASE_HP = 5
GREEN = (0, 255, 0, 255)
WHITE = (255, 255, 255, 255)

BASE_BUTTON = ButtonSpec(
    "img/btn/base_animation.png", IntRect(0, 0, 140, 128), (10, 610), (140, 128)
)


@dataclass
class Flags:
    """Which screens and modes are currently active."""

    menu: bool = True
    htp: bool = False
    option: bool = False
    game: bool = False
    shop: bool = False
    placing: bool = False
    pause: bool = False
    end: bool = False


@dataclass
class Score:
    """A survival score that grows with time."""

    score: int = 0
    best_score: int = 0
    boost: float = 1.0
    timer: float = 0.0
    size: int = 120
    position: Vector = (1300, 30)
    color: Color = GREEN

    def tick(self, delta: float) -> None:
        """Advance the clock; one point per interval, shortened by the boost."""
        self.timer += delta
        if self.timer > SCORE_INTERVAL / self.boost:
            self.score += 1
            self.timer = 0.0


@dataclass
class Base:
    """The player's base; each enemy reaching it costs hit points."""

    hp: int = BASE_HP
    button: Button = field(default_factory=lambda: Button.from_spec(BASE_BUTTON))

    def absorb(self, enemies: Iterable[Enemy]) -> list[Enemy]:
        """Take damage from every enemy that arrived and send it back to spawn."""
        arrived = [enemy for enemy in enemies if enemy.stage is PathStage.ARRIVED]
        for enemy in arrived:
            self.hp = int(self.hp - enemy.damage)
            self.button.rect.left = int(
                self.button.rect.left + self.button.rect.width * enemy.damage
            )
            enemy.reset()
        return arrived


@dataclass
class Game:
    """Everything that changes while the game runs."""

    weapons: list[Weapon]
    flags: Flags = field(default_factory=Flags)
    score: Score = field(default_factory=Score)
    end_score: Score = field(
        default_factory=lambda: Score(position=(920, 520), color=WHITE)
    )
    golds: Golds = field(default_factory=Golds)
    shop: list[ShopItem] = field(default_factory=make_shop)
    enemies: list[Enemy] = field(default_factory=make_enemies)
    inside: list[Placement] = field(default_factory=make_inside_placements)
    outside: list[Placement] = field(default_factory=make_outside_placements)
    base: Base = field(default_factory=Base)
    buttons: list[Button] = field(default_factory=make_buttons)
    backgrounds: list[Background] = field(default_factory=make_backgrounds)
    images: list[ImageSpec] = field(default_factory=make_images)
    delta: float = 0.0
    mouse: Vector = (0.0, 0.0)
    price_tags: list[bool] = field(default_factory=lambda: [False] * 4)

    @classmethod
    def create(cls, weapon_files: Sequence[str | os.PathLike[str]]) -> Game:
        """A fresh game on the main menu, with weapons read from four files."""
        return cls(weapons=load_weapons(weapon_files))

    def update(self, delta: float, mouse: Vector) -> None:
        """Run one frame of simulation with the cursor at ``mouse``."""
        self.delta = delta
        self.mouse = mouse
        if not self.flags.pause:
            for background in self.backgrounds:
                background.move(delta)
        if self.flags.menu:
            self._update_menu(mouse)
        if self.flags.game:
            self._update_game(delta, mouse)

    def _update_menu(self, mouse: Vector) -> None:
        if self.flags.htp:
            self.buttons[ButtonId.CROSS_HTP].hover(mouse)
        else:
            for button_id in (ButtonId.PLAY, ButtonId.HTP, ButtonId.QUIT):
                self.buttons[button_id].hover(mouse)

    def _update_game(self, delta: float, mouse: Vector) -> None:
        if not self.flags.pause:
            self.golds.tick(delta)
        if not self.flags.shop:
            if not self.flags.pause:
                self.score.tick(delta)
            self.update_base()
            self.update_enemies(delta)
            self.update_weapons(mouse)
        else:
            self.buttons[ButtonId.INFO].hover(mouse)
            self.buttons[ButtonId.CROSS].hover(mouse)
            self.price_tags = [item.refresh(self.golds.amount, mouse) for item in self.shop]
        if self.flags.pause:
            for button_id in (ButtonId.RESUME, ButtonId.BACKMENU, ButtonId.LEAVE):
                self.buttons[button_id].hover(mouse)

    def update_enemies(self, delta: float) -> None:
        """Pay for kills, walk the living enemies and play death animations.

        The first enemy of the wave is never brought onto the map.
        """
        for enemy in self.enemies[1:]:
            if enemy.dead:
                self.golds.amount += KILL_REWARD
            if not self.flags.pause:
                enemy.animate_walk(delta)
                enemy.advance(delta)
            enemy.animate_death(delta)

    def update_weapons(self, mouse: Vector) -> None:
        """Move weapons being placed under the cursor; let placed ones fire."""
        for weapon in self.weapons:
            if weapon.placing:
                close_range = weapon.kind in (WeaponKind.OBITO, WeaponKind.VENT)
                zones = self.inside if close_range else self.outside
                placement_hovered(weapon, zones, mouse, True)
                weapon.follow(mouse)
            if weapon.active:
                weapon.arm()
                weapon.fire(self.enemies)

    def update_base(self) -> None:
        """Let arrived enemies hit the base; end the game when it falls."""
        self.base.absorb(self.enemies)
        if self.base.hp <= 0:
            self.flags.game = False
            self.flags.end = True