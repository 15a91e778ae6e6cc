from __future__ import annotations
from typing import Optional
import pygame

from settings import (
    MAX_STEERING_ANGLE,
    STEERING_DRAG_RATIO,
    STEERING_RETURN,
    STEERING_RETURN_STEP,
)
from utils.mathutils import clamp

LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
BRAKE_KEYS = (pygame.K_DOWN, pygame.K_s)
ACCEL_KEYS = (pygame.K_UP, pygame.K_w)


class InputHandler:
    """
    Keyboard + dragged steering wheel.

    Exposes a steering scalar in [-1, 1] and the two pedal flags. Dragging the
    wheel overrides the keys; once released the wheel springs back to center.
    """
    def __init__(self, wheel_rect: Optional[pygame.Rect] = None):
        self.wheel_rect = wheel_rect
        self.left = False
        self.right = False
        self.brake_active = False
        self.accelerate_active = False

        self.steering_angle = 0.0
        self.max_steering_angle = MAX_STEERING_ANGLE
        self.dragging = False
        self._drag_start_x = 0
        self._return_timer = 0.0

    def reset(self) -> None:
        self.left = self.right = False
        self.brake_active = self.accelerate_active = False
        self.dragging = False
        self.steering_angle = 0.0
        self._return_timer = 0.0

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            self._set_key(event.key, True)
        elif event.type == pygame.KEYUP:
            self._set_key(event.key, False)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.wheel_rect is not None and self.wheel_rect.collidepoint(event.pos):
                self.dragging = True
                self._drag_start_x = event.pos[0]
        elif event.type == pygame.MOUSEMOTION and self.dragging:
            dx = event.pos[0] - self._drag_start_x
            self.steering_angle = clamp(
                dx * STEERING_DRAG_RATIO,
                -self.max_steering_angle,
                self.max_steering_angle,
            )
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.dragging = False
            self._return_timer = 0.0

    def _set_key(self, key: int, pressed: bool) -> None:
        if key in LEFT_KEYS:
            self.left = pressed
        elif key in RIGHT_KEYS:
            self.right = pressed
        elif key in BRAKE_KEYS:
            self.brake_active = pressed
        elif key in ACCEL_KEYS:
            self.accelerate_active = pressed

    def update(self, dt: float) -> None:
        # spring the released wheel back in fixed steps
        if self.dragging or self.steering_angle == 0.0:
            return

        self._return_timer += dt
        while self._return_timer >= STEERING_RETURN_STEP and self.steering_angle != 0.0:
            self._return_timer -= STEERING_RETURN_STEP
            if abs(self.steering_angle) < 2:
                self.steering_angle = 0.0
            else:
                self.steering_angle *= STEERING_RETURN

    def steering_input(self) -> float:
        steering = 0.0
        if self.left:
            steering -= 1.0
        if self.right:
            steering += 1.0

        if self.dragging:
            steering = self.steering_angle / self.max_steering_angle

        return clamp(steering, -1.0, 1.0)

    def display_angle(self) -> float:
        """Angle for the on-screen wheel, keys included."""
        if self.dragging or self.steering_angle != 0.0:
            return self.steering_angle
        return self.steering_input() * self.max_steering_angle
