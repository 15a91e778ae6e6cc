from __future__ import annotations
from typing import Callable, Optional, Tuple

from settings import (
    CAR_HEIGHT,
    CAR_WIDTH,
    COLLISION_MARGIN,
    PLAYER_COLOR,
    PLAYER_STATS,
)
from utils.mathutils import Bounds, bounds_overlap, clamp, finite_or

ExplosionCallback = Callable[[float, float], None]


class Car:
    """
    Shared state for every vehicle on the road.

    (x, y) is the center of the car in screen space, y grows downward.
    """
    def __init__(
        self,
        x: float,
        y: float,
        *,
        width: float = CAR_WIDTH,
        height: float = CAR_HEIGHT,
        car_type: str = "player",
        color: Tuple[int, int, int] = PLAYER_COLOR,
        speed: float = 0.0,
        max_speed: float = 0.0,
        acceleration: float = 0.0,
        on_explosion: Optional[ExplosionCallback] = None,
    ):
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)
        self.car_type = car_type
        self.color = color

        self.speed = float(speed)
        self.max_speed = float(max_speed)
        self.acceleration = float(acceleration)

        self.collided = False
        self._on_explosion = on_explosion

    @property
    def is_player(self) -> bool:
        return False

    def update(self, dt: float, control: float = 0.0) -> None:
        raise NotImplementedError

    def bounds(self) -> Bounds:
        # slightly smaller than the visual car for fairer hits
        return Bounds(
            self.x - self.width / 2 + COLLISION_MARGIN,
            self.y - self.height / 2 + COLLISION_MARGIN,
            self.width - COLLISION_MARGIN * 2,
            self.height - COLLISION_MARGIN * 2,
        )

    def resolve_collision_with(self, other: "Car") -> bool:
        if self.collided:
            return False

        if not bounds_overlap(self.bounds(), other.bounds()):
            return False

        self.collided = True
        if self._on_explosion is not None:
            self._on_explosion(self.x, self.y)
        return True

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(type={self.car_type!r}, x={self.x:.1f}, "
            f"y={self.y:.1f}, speed={self.speed:.1f}, collided={self.collided})"
        )


class PlayerCar(Car):
    def __init__(
        self,
        x: float,
        y: float,
        *,
        track_width: float,
        on_explosion: Optional[ExplosionCallback] = None,
        max_speed: float = PLAYER_STATS["max_speed"],
        acceleration: float = PLAYER_STATS["acceleration"],
        max_turn_speed: float = PLAYER_STATS["max_turn_speed"],
        turn_acceleration: float = PLAYER_STATS["turn_acceleration"],
        turn_friction: float = PLAYER_STATS["turn_friction"],
        max_wheel_angle: float = PLAYER_STATS["max_wheel_angle"],
    ):
        super().__init__(
            x, y,
            car_type="player",
            color=PLAYER_COLOR,
            max_speed=max_speed,
            acceleration=acceleration,
            on_explosion=on_explosion,
        )
        self.track_width = float(track_width)

        self.turn_speed = 0.0
        self.max_turn_speed = float(max_turn_speed)
        self.turn_acceleration = float(turn_acceleration)
        self.turn_friction = float(turn_friction)

        self.wheel_angle = 0.0
        self.max_wheel_angle = float(max_wheel_angle)

    @property
    def is_player(self) -> bool:
        return True

    def keep_on_track(self) -> None:
        margin = self.width / 2
        self.x = clamp(self.x, margin, max(margin, self.track_width - margin))

    def update(self, dt: float, control: float = 0.0) -> None:
        # a wrecked car no longer steers, the session decays its speed
        if self.collided:
            return

        steering = clamp(finite_or(control), -1.0, 1.0)

        self.speed = min(self.speed + self.acceleration * dt, self.max_speed)

        self.turn_speed += steering * self.turn_acceleration * dt
        self.turn_speed = clamp(self.turn_speed, -self.max_turn_speed, self.max_turn_speed)

        self.wheel_angle = steering * self.max_wheel_angle

        self.x += self.turn_speed * dt
        self.turn_speed *= self.turn_friction ** (dt * 60)

        self.keep_on_track()


class EnemyCar(Car):
    """Traffic car driving down the screen at a fixed speed."""

    def __init__(
        self,
        x: float,
        y: float,
        *,
        speed: float,
        lane: int,
        car_type: str,
        color: Tuple[int, int, int],
        width: float = CAR_WIDTH,
        height: float = CAR_HEIGHT,
    ):
        super().__init__(
            x, y,
            width=width,
            height=height,
            car_type=car_type,
            color=color,
            speed=speed,
            max_speed=speed,
        )
        self.lane = lane

    def update(self, dt: float, control: float = 0.0) -> None:
        self.y += self.speed * dt

    def is_expired(self, view_height: float) -> bool:
        return self.y > view_height + self.height
