"""Enemies walking along the map path, with their walk and death animations."""

from __future__ import annotations

import dataclasses
import random
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, IntEnum

from defender.widgets import IntRect

Vector = tuple[float, float]
Jitter = Callable[[], float]

NB_ENEMIES = 12


class WeaponKind(IntEnum):
    OBITO = 0
    VENT = 1
    GUN = 2
    SNIPER = 3


class PathStage(Enum):
    """Leg of the path an enemy is walking; ARRIVED means it reached the base."""

    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    ARRIVED = 5


@dataclass(frozen=True)
class EnemySpec:
    filepath: str
    speed: float
    damage: float
    position: Vector


@dataclass(frozen=True)
class _DeathAnimation:
    threshold: float
    attr: str
    step: int
    guard: WeaponKind
    limit: int
    frames: int
    offset: Vector | None


_DEATH_ANIMATIONS = {
    WeaponKind.OBITO: _DeathAnimation(0.7, "left", 31, WeaponKind.OBITO, 310, 9, None),
    WeaponKind.VENT: _DeathAnimation(0.6, "left", 60, WeaponKind.VENT, 300, 4, (-12, -2)),
    WeaponKind.GUN: _DeathAnimation(0.8, "top", 60, WeaponKind.GUN, 225, 4, (0, 0)),
    WeaponKind.SNIPER: _DeathAnimation(0.4, "top", 59, WeaponKind.GUN, 570, 9, (-132, -10)),
}


def _death_rects() -> dict[WeaponKind, IntRect]:
    return {
        WeaponKind.OBITO: IntRect(0, 685, 31, 42),
        WeaponKind.VENT: IntRect(0, 100, 60, 51),
        WeaponKind.GUN: IntRect(310, 0, 80, 45),
        WeaponKind.SNIPER: IntRect(0, 43, 240, 59),
    }


def random_movement(rng: random.Random | None = None) -> float:
    """A random sideways drift in whole units from -10 to 9."""
    source = rng if rng is not None else random
    return float(source.randrange(20) - 10)


@dataclass
class Enemy:
    filepath: str
    speed: float
    damage: float
    spawn: Vector
    x: float
    y: float
    size: Vector = (32, 43)
    golds: int = 1
    frame: int = 0
    timer: float = 0.0
    dead: bool = False
    stage: PathStage = PathStage.FIRST
    hits: set[WeaponKind] = field(default_factory=set)
    walk_rect: IntRect = field(default_factory=lambda: IntRect(0, 0, 32, 43))
    death_rects: dict[WeaponKind, IntRect] = field(default_factory=_death_rects)

    @classmethod
    def from_spec(cls, spec: EnemySpec) -> Enemy:
        x, y = spec.position
        return cls(
            filepath=spec.filepath,
            speed=float(spec.speed),
            damage=float(spec.damage),
            spawn=spec.position,
            x=float(x),
            y=float(y),
        )

    def reset(self) -> None:
        """Send the enemy back to its spawn point, alive and unhit."""
        self.frame = 0
        self.timer = 0.0
        self.dead = False
        self.stage = PathStage.FIRST
        self.x, self.y = (float(v) for v in self.spawn)
        self.hits.clear()

    def advance(self, delta: float, jitter: Jitter | None = None) -> None:
        """Walk along the path; a finished leg hands over to the next at once."""
        drift = jitter if jitter is not None else random_movement
        legs = (
            (PathStage.FIRST, self._leg_one),
            (PathStage.SECOND, self._leg_two),
            (PathStage.THIRD, self._leg_three),
            (PathStage.FOURTH, self._leg_four),
        )
        for stage, leg in legs:
            if self.stage is stage:
                leg(delta, drift)

    def _leg_one(self, delta: float, drift: Jitter) -> None:
        step = self.speed * delta
        if self.y <= 735:
            self.y += step
            self.x += drift() * delta
        elif self.x >= 1500:
            self.x -= step
            self.y += (self.speed / 3) * delta
        elif self.x >= 1300:
            self.x -= step
            self.y += drift() * delta
        else:
            self.stage = PathStage.SECOND

    def _leg_two(self, delta: float, drift: Jitter) -> None:
        step = self.speed * delta
        if self.x >= 1200:
            self.x -= step
            self.y += (self.speed / 2) * delta
        elif self.x >= 1100:
            self.x -= step
            self.y += drift() * delta
        elif self.y >= 560:
            self.y -= step
            self.x += drift() * delta
        else:
            self.stage = PathStage.THIRD

    def _leg_three(self, delta: float, drift: Jitter) -> None:
        step = self.speed * delta
        if self.x >= 855:
            self.x -= step
            self.y += drift() * delta
        elif self.y >= 170:
            self.y -= step
            self.x += drift() * delta
        else:
            self.stage = PathStage.FOURTH

    def _leg_four(self, delta: float, drift: Jitter) -> None:
        step = self.speed * delta
        if self.x >= 545:
            self.x -= step
            self.y -= drift() * delta
        elif self.y <= 760:
            self.y += step
            self.x -= drift() * delta
        elif self.x >= 150:
            self.x -= step
            self.y += drift() * delta
        else:
            self.stage = PathStage.ARRIVED

    def animate_walk(self, delta: float) -> None:
        """Step the walking frame, looping over six frames."""
        self.timer += delta * 10
        if self.timer > 0.68:
            self.walk_rect.left += 32
            self.timer = 0.0
            if self.walk_rect.left >= 192:
                self.walk_rect.left = 0

    def animate_death(self, delta: float) -> None:
        """Play the death animation of each weapon that hit; respawn when done."""
        for kind in WeaponKind:
            if kind not in self.hits:
                continue
            anim = _DEATH_ANIMATIONS[kind]
            if kind is WeaponKind.OBITO:
                self.dead = False
            self.timer += delta * 10
            rect = self.death_rects[kind]
            guard = getattr(self.death_rects[anim.guard], anim.attr)
            if self.timer > anim.threshold and guard <= anim.limit:
                setattr(rect, anim.attr, getattr(rect, anim.attr) + anim.step)
                self.timer = 0.0
                self.frame += 1
            if self.frame >= anim.frames:
                self.reset()

    def frame_rect(self) -> IntRect:
        """The sprite-sheet rectangle currently shown."""
        shown = self.walk_rect
        for kind in WeaponKind:
            if kind in self.hits:
                shown = self.death_rects[kind]
        return dataclasses.replace(shown)

    def sprite_position(self) -> Vector:
        """Where the sprite is drawn, shifted for wider death animations."""
        position = (self.x, self.y)
        for kind in WeaponKind:
            offset = _DEATH_ANIMATIONS[kind].offset
            if kind in self.hits and offset is not None:
                position = (self.x + offset[0], self.y + offset[1])
        return position


ENEMY_SPECS = (
    EnemySpec("img/red.png", 80, 1, (1612, -5500)),
    EnemySpec("img/green.png", 100, 1, (1618, -5000)),
    EnemySpec("img/blue.png", 120, 1, (1618, -4500)),
    EnemySpec("img/red.png", 80, 1, (1612, -4000)),
    EnemySpec("img/red.png", 80, 1, (1618, -3500)),
    EnemySpec("img/blue.png", 120, 1, (1614, -2500)),
    EnemySpec("img/green.png", 100, 1, (1620, -2000)),
    EnemySpec("img/yellow.png", 200, 5, (1618, -1500)),
    EnemySpec("img/red.png", 80, 1, (1614, -1000)),
    EnemySpec("img/blue.png", 120, 1, (1620, -500)),
    EnemySpec("img/green.png", 100, 1, (1620, -100)),
    EnemySpec("img/red.png", 80, 1, (1614, 0)),
)


def make_enemies() -> list[Enemy]:
    """The full wave of enemies, in spawn-table order."""
    return [Enemy.from_spec(spec) for spec in ENEMY_SPECS]