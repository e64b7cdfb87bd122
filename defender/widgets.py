"""Buttons, scrolling backgrounds and still images of the interface."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import IntEnum

Vector = tuple[float, float]

SCROLL_WRAP = -1920


@dataclass
class IntRect:
    """Integer rectangle used to select a frame in a sprite sheet."""

    left: int
    top: int
    width: int
    height: int


@dataclass(frozen=True)
class ButtonSpec:
    """Static description of a button."""

    filepath: str
    rect: IntRect
    pos: Vector
    size: Vector


@dataclass
class Button:
    """A clickable sprite whose frame changes when hovered."""

    filepath: str
    rect: IntRect
    pos: Vector
    size: Vector
    hovered: bool = False

    @classmethod
    def from_spec(cls, spec: ButtonSpec) -> Button:
        return cls(spec.filepath, dataclasses.replace(spec.rect), spec.pos, spec.size)

    def contains(self, point: Vector) -> bool:
        """Whether ``point`` lies inside the button, edges included."""
        x, y = point
        left, top = self.pos
        width, height = self.size
        return left <= x <= left + width and top <= y <= top + height

    def hover(self, point: Vector) -> bool:
        """Update the hover state and frame for ``point``; return the state."""
        self.hovered = self.contains(point)
        self.rect.left = self.rect.width if self.hovered else 0
        return self.hovered


class ButtonId(IntEnum):
    PLAY = 0
    HTP = 1
    QUIT = 2
    RESUME = 3
    BACKMENU = 4
    LEAVE = 5
    INFO = 6
    CROSS = 7
    CROSS_HTP = 8


class ImageId(IntEnum):
    MENU_BG = 0
    SHOP = 1
    PAUSE_BG = 2
    UPGRADE_PRICE = 3
    MAP = 4
    BLACK = 5
    LOOSE = 6
    HTP_IMG = 7


@dataclass(frozen=True)
class ImageSpec:
    """A still image drawn at a fixed position."""

    path: str
    position: Vector = (0.0, 0.0)


@dataclass
class Background:
    """A horizontally scrolling background layer."""

    path: str
    speed: float
    x: float = 0.0
    y: float = field(default=0.0)

    def move(self, delta: float) -> None:
        """Scroll left by ``speed * delta``, wrapping after one screen width."""
        self.x -= self.speed * delta
        if self.x <= SCROLL_WRAP:
            self.x = 0.0


BUTTON_SPECS = (
    ButtonSpec("img/btn/play.png", IntRect(0, 0, 93, 69), (920, 150), (93, 69)),
    ButtonSpec("img/btn/howtoplay.png", IntRect(0, 0, 301, 69), (820, 250), (301, 69)),
    ButtonSpec("img/btn/quit.png", IntRect(0, 0, 92, 78), (920, 360), (92, 78)),
    ButtonSpec("img/btn/resume.png", IntRect(0, 0, 141, 70), (885, 420), (141, 70)),
    ButtonSpec("img/btn/back_menu.png", IntRect(0, 0, 321, 70), (800, 540), (321, 70)),
    ButtonSpec("img/btn/leave.png", IntRect(0, 0, 117, 70), (900, 660), (117, 70)),
    ButtonSpec("img/btn/info.png", IntRect(0, 0, 175, 127), (855, 45), (175, 127)),
    ButtonSpec("img/shop/cross2.png", IntRect(0, 0, 118, 108), (1800, 10), (118, 108)),
    ButtonSpec("img/shop/cross2.png", IntRect(0, 0, 118, 108), (1800, 10), (118, 108)),
)

BACKGROUND_SPECS = (
    ("img/bg/sb_3840.png", 10),
    ("img/bg/fb_3840.png", 40),
)

IMAGE_SPECS = (
    ImageSpec("img/bg/amongus.png"),
    ImageSpec("img/bg/shop_2.png"),
    ImageSpec("img/bg/pause_screen.png"),
    ImageSpec("img/upgrade_price.png"),
    ImageSpec("img/bg/map.png"),
    ImageSpec("img/bg/black.jpg"),
    ImageSpec("img/bg/loose.png"),
    ImageSpec("img/bg/how_to_play.png"),
)


def make_buttons() -> list[Button]:
    """The interface buttons, indexed by ButtonId."""
    return [Button.from_spec(spec) for spec in BUTTON_SPECS]


def make_backgrounds() -> list[Background]:
    """The two scrolling background layers, slowest first."""
    return [Background(path, float(speed)) for path, speed in BACKGROUND_SPECS]


def make_images() -> list[ImageSpec]:
    """The still images, indexed by ImageId."""
    return list(IMAGE_SPECS)