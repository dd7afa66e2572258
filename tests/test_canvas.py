import math

import pygame
import pytest

from flappy.canvas import Canvas

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
BLACK = (0, 0, 0, 255)


@pytest.fixture
def surface():
    return pygame.Surface((320, 480))


def two_tone(width=10, height=20):
    """Red top half, blue bottom half."""
    image = pygame.Surface((width, height))
    image.fill(BLUE)
    image.fill(RED, pygame.Rect(0, 0, width, height // 2))
    return image


def test_fill_rect_honours_translation(surface):
    canvas = Canvas(surface)
    canvas.translate(10, 20)
    canvas.fill_rect((0, 255, 0), 0, 0, 5, 5)
    assert surface.get_at((12, 22)) == (0, 255, 0, 255)
    assert surface.get_at((8, 22)) == BLACK


def test_unrotated_blit_lands_at_position(surface):
    canvas = Canvas(surface)
    canvas.draw_image(two_tone(), 30, 40, 10, 20)
    assert surface.get_at((35, 42)) == RED
    assert surface.get_at((35, 57)) == BLUE


def test_image_is_scaled_to_requested_size(surface):
    canvas = Canvas(surface)
    canvas.draw_image(two_tone(), 0, 0, 20, 40)
    assert surface.get_at((15, 5)) == RED
    assert surface.get_at((15, 35)) == BLUE


def test_half_turn_about_centre_flips_image(surface):
    canvas = Canvas(surface)
    canvas.save()
    canvas.translate(50, 50)
    canvas.rotate(math.pi)
    canvas.draw_image(two_tone(), -5, -10, 10, 20)
    canvas.restore()
    assert surface.get_at((50, 45)) == BLUE
    assert surface.get_at((50, 55)) == RED


def test_restore_pops_transform(surface):
    canvas = Canvas(surface)
    canvas.save()
    canvas.translate(100, 100)
    canvas.rotate(1.0)
    canvas.restore()
    canvas.draw_image(two_tone(), 0, 0, 10, 20)
    assert surface.get_at((5, 2)) == RED


def test_translate_follows_rotation(surface):
    canvas = Canvas(surface)
    canvas.translate(100, 100)
    canvas.rotate(math.pi / 2)
    canvas.translate(10, 0)
    # A quarter turn clockwise maps local +x to screen +y.
    assert canvas._to_surface(0, 0) == pytest.approx((100, 110))


def test_unbalanced_restore_is_an_error(surface):
    with pytest.raises(IndexError):
        Canvas(surface).restore()
