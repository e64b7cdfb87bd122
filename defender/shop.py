"""The shop: items to buy or upgrade, and the gold counter that pays for them."""

from __future__ import annotations

from dataclasses import dataclass

from defender.widgets import Button, ButtonSpec, IntRect

Vector = tuple[float, float]

GOLD_COLOR = (255, 206, 0, 255)
GOLD_INTERVAL = 0.6
STARTING_GOLDS = 1000.0


def can_purchase(golds: float, price: float) -> bool:
    """Whether ``golds`` is enough to pay ``price``."""
    return golds >= price


@dataclass
class Golds:
    """The player's gold, which trickles in over time."""

    amount: float = STARTING_GOLDS
    timer: float = 0.0
    size: int = 120
    position: Vector = (1130, 30)
    color: tuple[int, int, int, int] = GOLD_COLOR

    def tick(self, delta: float) -> None:
        """Advance the clock; one gold is earned per interval that passes."""
        self.timer += delta
        if self.timer > GOLD_INTERVAL:
            self.amount += 1
            self.timer = 0.0


@dataclass
class ShopItem:
    """One weapon on sale: its buy and upgrade buttons and prices."""

    buy: Button
    upgrade: Button
    buy_price: int
    upgrade_price: int
    price_tag_pos: Vector

    def refresh(self, golds: float, point: Vector) -> bool:
        """Update both buttons for the cursor at ``point``.

        Buttons the player cannot afford never light up, though their hover
        state still follows the cursor. Returns whether the upgrade price tag
        is to be shown.
        """
        show_tag = self.upgrade.hover(point) and can_purchase(golds, self.upgrade_price)
        if not can_purchase(golds, self.upgrade_price):
            self.upgrade.rect.left = 0
        self.buy.hover(point)
        if not can_purchase(golds, self.buy_price):
            self.buy.rect.left = 0
        return show_tag


_BUY_POSITIONS = ((163, 327), (715, 317), (151, 667), (704, 677))
_UPGRADE_POSITIONS = ((152, 415), (700, 412), (141, 795), (695, 785))
_BUY_PRICES = (500, 1000, 1500, 3000)
_UPGRADE_PRICE = 300
_PRICE_TAG_POSITIONS = ((333, 270), (880, 303), (310, 555), (865, 620))


def make_shop() -> list[ShopItem]:
    """The four shop items, in weapon-kind order."""
    return [
        ShopItem(
            buy=Button.from_spec(
                ButtonSpec("img/btn/buy.png", IntRect(0, 0, 74, 67), buy_pos, (74, 67))
            ),
            upgrade=Button.from_spec(
                ButtonSpec("img/btn/upgrade.png", IntRect(0, 0, 100, 120), upgrade_pos, (100, 120))
            ),
            buy_price=price,
            upgrade_price=_UPGRADE_PRICE,
            price_tag_pos=tag_pos,
        )
        for buy_pos, upgrade_pos, price, tag_pos in zip(
            _BUY_POSITIONS, _UPGRADE_POSITIONS, _BUY_PRICES, _PRICE_TAG_POSITIONS
        )
    ]