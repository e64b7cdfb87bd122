"""Towers: their hitboxes, where they may be placed, and how they hit enemies."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from defender.enemies import Enemy, WeaponKind
from defender.textparse import first_line, get_number, line_at, read_file
from defender.widgets import Button, ButtonSpec, IntRect

Vector = tuple[float, float]

HITBOX_COLOR = (255, 242, 0, 40)
PLACEMENT_COLOR = (100, 250, 100, 40)
ENEMY_WIDTH = 32
CENTER_TOLERANCE = 5
WEAPON_COUNT = 4


@dataclass(frozen=True)
class HitboxSpec:
    """Static description of a rectangular area."""

    upgrade_range: int
    pos: Vector
    range: Vector


@dataclass
class Hitbox:
    """The area a weapon covers, with its remaining shot budget."""

    pos: Vector
    range: Vector
    upgrade_range: int = 0
    bullet: int = 1
    highlighted: bool = True

    @classmethod
    def from_spec(cls, spec: HitboxSpec) -> Hitbox:
        return cls(pos=spec.pos, range=spec.range, upgrade_range=spec.upgrade_range)


@dataclass(frozen=True)
class Placement:
    """A zone of the map where a weapon may be dropped."""

    pos: Vector
    range: Vector

    def contains(self, point: Vector) -> bool:
        """Whether ``point`` lies inside the zone, edges included."""
        x, y = point
        left, top = self.pos
        width, height = self.range
        return left <= x <= left + width and top <= y <= top + height


def _half(value: float) -> int:
    """Half of an integer-truncated value, rounding toward zero."""
    return int(int(value) / 2)


def _in_line(hitbox: Hitbox, enemy: Enemy, reach: float) -> bool:
    px, py = hitbox.pos
    horizontal = px + reach >= enemy.x and px <= enemy.x + ENEMY_WIDTH
    hitbox_center = int(py) + _half(hitbox.range[1])
    enemy_center = int(enemy.y) + _half(enemy.walk_rect.height)
    vertical = (
        enemy_center - CENTER_TOLERANCE <= hitbox_center <= enemy_center + CENTER_TOLERANCE
    )
    return horizontal and vertical


def _strike(hitbox: Hitbox, enemy: Enemy, kind: WeaponKind, floor: int, step: int) -> bool:
    if kind in enemy.hits or hitbox.bullet <= floor:
        return False
    enemy.dead = True
    hitbox.bullet += step
    enemy.hits.add(kind)
    return True


def obito_collision(hitbox: Hitbox, enemy: Enemy) -> bool:
    """Hit an enemy standing inside the whole hitbox area."""
    px, py = hitbox.pos
    rx, ry = hitbox.range
    inside = px <= enemy.x <= px + rx and py <= enemy.y <= py + ry
    return inside and _strike(hitbox, enemy, WeaponKind.OBITO, -20, -1)


def vent_collision(hitbox: Hitbox, enemy: Enemy) -> bool:
    """Hit an enemy passing right over the vent, vertically centred on it."""
    return _in_line(hitbox, enemy, 10) and _strike(hitbox, enemy, WeaponKind.VENT, -2, -1)


def gun_collision(hitbox: Hitbox, enemy: Enemy) -> bool:
    """Hit an enemy in the gun's horizontal line of fire."""
    return _in_line(hitbox, enemy, hitbox.range[0]) and _strike(
        hitbox, enemy, WeaponKind.GUN, -5, 1
    )


def sniper_collision(hitbox: Hitbox, enemy: Enemy) -> bool:
    """Hit an enemy in the sniper's horizontal line of fire."""
    return _in_line(hitbox, enemy, hitbox.range[0]) and _strike(
        hitbox, enemy, WeaponKind.SNIPER, -100, -1
    )


_COLLISIONS: dict[WeaponKind, Callable[[Hitbox, Enemy], bool]] = {
    WeaponKind.OBITO: obito_collision,
    WeaponKind.VENT: vent_collision,
    WeaponKind.GUN: gun_collision,
    WeaponKind.SNIPER: sniper_collision,
}


@dataclass
class Weapon:
    """A tower bought in the shop, then placed on the map."""

    kind: WeaponKind
    hitbox: Hitbox
    button: Button
    placing: bool = False
    active: bool = False

    def follow(self, point: Vector) -> None:
        """Move the weapon and its hitbox under the cursor while placing."""
        self.hitbox.pos = point
        self.button.pos = point

    def arm(self) -> bool:
        """Switch to the placed look; return whether the weapon is drawn.

        A vent is only shown while its single charge is unused.
        """
        if self.kind is WeaponKind.VENT and self.hitbox.bullet != 1:
            return False
        self.button.rect.left = self.button.rect.width * 2
        self.hitbox.highlighted = False
        return True

    def collide(self, enemy: Enemy) -> bool:
        """Try to hit one enemy; return whether it was hit."""
        return _COLLISIONS[self.kind](self.hitbox, enemy)

    def fire(self, enemies: Iterable[Enemy]) -> list[Enemy]:
        """Try to hit every enemy in turn; return those that were hit."""
        return [enemy for enemy in enemies if self.collide(enemy)]


INSIDE_SPECS = (
    HitboxSpec(0, (1525, 165), (250, 200)),
    HitboxSpec(0, (1575, 350), (150, 350)),
    HitboxSpec(0, (1040, 535), (125, 370)),
    HitboxSpec(0, (835, 530), (205, 80)),
    HitboxSpec(0, (520, 160), (100, 670)),
    HitboxSpec(0, (1285, 880), (300, 100)),
    HitboxSpec(0, (1285, 735), (300, 100)),
    HitboxSpec(0, (240, 600), (150, 100)),
    HitboxSpec(0, (620, 160), (120, 100)),
    HitboxSpec(0, (225, 725), (300, 100)),
    HitboxSpec(0, (1580, 700), (90, 230)),
    HitboxSpec(0, (1200, 810), (85, 100)),
    HitboxSpec(0, (830, 210), (100, 320)),
    HitboxSpec(0, (830, 30), (100, 100)),
    HitboxSpec(0, (915, 120), (125, 100)),
    HitboxSpec(0, (740, 120), (100, 100)),
    HitboxSpec(0, (1168, 840), (20, 60)),
    HitboxSpec(0, (1528, 835), (60, 45)),
)

OUTSIDE_SPECS = (
    HitboxSpec(0, (390, 65), (100, 600)),
    HitboxSpec(0, (250, 330), (140, 200)),
    HitboxSpec(0, (380, 830), (360, 100)),
    HitboxSpec(0, (1050, 420), (250, 100)),
    HitboxSpec(0, (950, 340), (100, 180)),
    HitboxSpec(0, (1730, 350), (100, 400)),
    HitboxSpec(0, (1470, 350), (100, 330)),
    HitboxSpec(0, (1000, 900), (200, 100)),
    HitboxSpec(0, (640, 260), (100, 600)),
    HitboxSpec(0, (920, 700), (100, 300)),
    HitboxSpec(0, (740, 700), (180, 100)),
    HitboxSpec(0, (1200, 520), (100, 160)),
    HitboxSpec(0, (1300, 580), (200, 100)),
    HitboxSpec(0, (740, 340), (70, 450)),
    HitboxSpec(0, (390, 0), (340, 65)),
    HitboxSpec(0, (250, 940), (130, 130)),
    HitboxSpec(0, (1045, 85), (100, 200)),
    HitboxSpec(0, (1280, 1045), (300, 40)),
    HitboxSpec(0, (1680, 810), (100, 150)),
)

HITBOX_START = (163, 327)

_BUTTON_LAYOUTS = (
    (IntRect(0, 0, 46, 57), (152, 415), (46, 57)),
    (IntRect(0, 0, 50, 39), (152, 415), (50, 38)),
    (IntRect(0, 0, 93, 57), (152, 415), (93, 57)),
    (IntRect(0, 0, 95, 61), (152, 415), (95, 61)),
)


def make_inside_placements() -> list[Placement]:
    """Zones on the path, where close-range weapons go."""
    return [Placement(spec.pos, spec.range) for spec in INSIDE_SPECS]


def make_outside_placements() -> list[Placement]:
    """Zones beside the path, where ranged weapons go."""
    return [Placement(spec.pos, spec.range) for spec in OUTSIDE_SPECS]


def placement_hovered(
    weapon: Weapon, placements: Iterable[Placement], point: Vector, allowed: bool
) -> bool:
    """Whether the weapon may be dropped at ``point``; updates its frame."""
    hovered = allowed and any(zone.contains(point) for zone in placements)
    weapon.button.rect.left = weapon.button.rect.width if hovered else 0
    return hovered


def load_weapon(index: int, text: str) -> Weapon:
    """Build weapon ``index`` from a description.

    The first line is the sprite path, then the hitbox width, height and
    upgrade step, one per line. Raises IndexError when a line is missing.
    """
    kind = WeaponKind(index)
    rect, pos, size = _BUTTON_LAYOUTS[index]
    button = Button.from_spec(ButtonSpec(first_line(text), dataclasses.replace(rect), pos, size))
    hitbox = Hitbox(
        pos=HITBOX_START,
        range=(get_number(line_at(1, text)), get_number(line_at(2, text))),
        upgrade_range=get_number(line_at(3, text)),
    )
    return Weapon(kind=kind, hitbox=hitbox, button=button)


def load_weapons(paths: Sequence[str | os.PathLike[str]]) -> list[Weapon]:
    """Load the four weapons from their description files, in kind order."""
    if len(paths) < WEAPON_COUNT:
        raise ValueError(f"{WEAPON_COUNT} weapon files are needed, got {len(paths)}")
    return [load_weapon(index, read_file(path)) for index, path in enumerate(paths[:WEAPON_COUNT])]