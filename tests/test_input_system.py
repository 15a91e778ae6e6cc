import pygame
import pytest

from systems.input_system import InputHandler


def key(kind, k):
    return pygame.event.Event(kind, key=k)


def mouse(kind, pos, button=1):
    if kind == pygame.MOUSEMOTION:
        return pygame.event.Event(kind, pos=pos, rel=(0, 0), buttons=(1, 0, 0))
    return pygame.event.Event(kind, pos=pos, button=button)


@pytest.fixture
def handler():
    return InputHandler(pygame.Rect(0, 0, 100, 100))


def test_keys_steer(handler):
    assert handler.steering_input() == 0.0

    handler.handle_event(key(pygame.KEYDOWN, pygame.K_LEFT))
    assert handler.steering_input() == -1.0

    handler.handle_event(key(pygame.KEYDOWN, pygame.K_d))
    assert handler.steering_input() == 0.0

    handler.handle_event(key(pygame.KEYUP, pygame.K_LEFT))
    assert handler.steering_input() == 1.0


def test_pedals(handler):
    handler.handle_event(key(pygame.KEYDOWN, pygame.K_s))
    handler.handle_event(key(pygame.KEYDOWN, pygame.K_UP))
    assert handler.brake_active
    assert handler.accelerate_active

    handler.handle_event(key(pygame.KEYUP, pygame.K_DOWN))
    handler.handle_event(key(pygame.KEYUP, pygame.K_w))
    assert not handler.brake_active
    assert not handler.accelerate_active


def test_dragging_the_wheel(handler):
    handler.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (50, 50)))
    assert handler.dragging

    handler.handle_event(mouse(pygame.MOUSEMOTION, (110, 50)))
    assert handler.steering_angle == 30.0
    assert handler.steering_input() == 0.5

    handler.handle_event(mouse(pygame.MOUSEMOTION, (600, 50)))
    assert handler.steering_input() == 1.0

    # dragging overrides the keys
    handler.handle_event(key(pygame.KEYDOWN, pygame.K_LEFT))
    assert handler.steering_input() == 1.0


def test_click_outside_wheel_does_not_drag(handler):
    handler.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (300, 300)))
    assert not handler.dragging
    handler.handle_event(mouse(pygame.MOUSEMOTION, (400, 300)))
    assert handler.steering_angle == 0.0


def test_released_wheel_springs_back(handler):
    handler.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (50, 50)))
    handler.handle_event(mouse(pygame.MOUSEMOTION, (200, 50)))
    handler.handle_event(mouse(pygame.MOUSEBUTTONUP, (200, 50)))
    assert not handler.dragging
    assert handler.steering_input() == 0.0

    handler.update(0.05)
    assert handler.steering_angle == pytest.approx(48.0)

    for _ in range(100):
        handler.update(0.05)
    assert handler.steering_angle == 0.0


def test_display_angle_follows_keys(handler):
    handler.handle_event(key(pygame.KEYDOWN, pygame.K_RIGHT))
    assert handler.display_angle() == 60.0


def test_reset(handler):
    handler.handle_event(key(pygame.KEYDOWN, pygame.K_RIGHT))
    handler.handle_event(key(pygame.KEYDOWN, pygame.K_UP))
    handler.reset()
    assert handler.steering_input() == 0.0
    assert not handler.accelerate_active
