import pytest

from defender.widgets import (
    Background,
    Button,
    ButtonId,
    ButtonSpec,
    ImageId,
    IntRect,
    make_backgrounds,
    make_buttons,
    make_images,
)


@pytest.fixture
def button():
    spec = ButtonSpec("img/btn/play.png", IntRect(0, 0, 93, 69), (920, 150), (93, 69))
    return Button.from_spec(spec)


def test_make_buttons_indexed_by_id():
    buttons = make_buttons()
    assert len(buttons) == len(ButtonId)
    assert buttons[ButtonId.PLAY].filepath == "img/btn/play.png"
    assert buttons[ButtonId.CROSS_HTP].filepath == "img/shop/cross2.png"
    assert buttons[ButtonId.QUIT].pos == (920, 360)


def test_buttons_start_unhovered():
    assert all(not b.hovered and b.rect.left == 0 for b in make_buttons())


def test_from_spec_copies_rect():
    spec = ButtonSpec("img/btn/buy.png", IntRect(0, 0, 74, 67), (163, 327), (74, 67))
    btn = Button.from_spec(spec)
    btn.rect.left = 74
    assert spec.rect.left == 0


def test_hover_inside(button):
    assert button.hover((950, 180)) is True
    assert button.hovered is True
    assert button.rect.left == button.rect.width


def test_hover_outside_resets(button):
    button.hover((950, 180))
    assert button.hover((10, 10)) is False
    assert button.hovered is False
    assert button.rect.left == 0


def test_contains_edges_inclusive(button):
    assert button.contains((920, 150))
    assert button.contains((920 + 93, 150 + 69))
    assert not button.contains((920 + 94, 150))
    assert not button.contains((919, 150))


def test_make_backgrounds_speeds():
    layers = make_backgrounds()
    assert [b.speed for b in layers] == [10, 40]
    assert all(b.x == 0 for b in layers)


def test_background_move():
    bg = Background("img/bg/sb_3840.png", 10)
    bg.move(1.0)
    assert bg.x == -10


def test_background_wraps():
    bg = Background("img/bg/fb_3840.png", 40)
    bg.move(48.0)
    assert bg.x == 0


@pytest.mark.parametrize("delta", [0.016, 0.5, 3.0, 47.9])
def test_background_stays_in_range(delta):
    bg = Background("img/bg/fb_3840.png", 40)
    for _ in range(200):
        bg.move(delta)
        assert -1920 < bg.x <= 0


def test_make_images():
    images = make_images()
    assert len(images) == len(ImageId)
    assert images[ImageId.MAP].path == "img/bg/map.png"
    assert images[ImageId.LOOSE].path == "img/bg/loose.png"