from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple
import random

from settings import (
    EXPLOSION_COLOR,
    EXPLOSION_LIFETIME,
    EXPLOSION_PARTICLES,
    EXPLOSION_PARTICLE_SIZE,
    EXPLOSION_SPREAD,
    EXPLOSION_SPRITE_GROWTH,
    EXPLOSION_SPRITE_SIZE,
)


class EffectKind(Enum):
    POINT_PARTICLES = "point_particles"
    GROWING_SPRITE = "growing_sprite"


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    size: float
    lifetime: float
    age: float = 0.0

    @property
    def alive(self) -> bool:
        return self.age < self.lifetime

    @property
    def alpha(self) -> float:
        # 1.0 when fresh, 0.0 at end of life
        if self.lifetime <= 0:
            return 0.0
        return max(0.0, 1.0 - self.age / self.lifetime)


class PointParticles:
    """
    Burst of point particles flying out from (x, y).

    Every particle gets a lifetime in [lifetime / 2, lifetime), so the whole
    burst is guaranteed to be gone once `lifetime` seconds have passed.
    """
    kind = EffectKind.POINT_PARTICLES

    def __init__(
        self,
        x: float,
        y: float,
        rng: random.Random,
        *,
        count: int = EXPLOSION_PARTICLES,
        color: Tuple[int, int, int] = EXPLOSION_COLOR,
        speed: float = EXPLOSION_SPREAD,
        lifetime: float = EXPLOSION_LIFETIME,
        size: float = EXPLOSION_PARTICLE_SIZE,
    ):
        self.x = float(x)
        self.y = float(y)
        self.color = color
        self.lifetime = float(lifetime)
        self.active = True

        self.particles: List[Particle] = []
        for _ in range(count):
            self.particles.append(Particle(
                x=self.x,
                y=self.y,
                vx=(rng.random() - 0.5) * speed,
                vy=(rng.random() - 0.5) * speed,
                size=rng.random() * size + 1.0,
                lifetime=self.lifetime * (0.5 + 0.5 * rng.random()),
            ))

        if not self.particles:
            self.active = False

    def update(self, dt: float) -> None:
        if not self.active:
            return

        any_alive = False
        for p in self.particles:
            p.age += dt
            if p.alive:
                any_alive = True
                p.x += p.vx * dt
                p.y += p.vy * dt
                p.size *= 0.99

        self.active = any_alive

    def live_particles(self) -> List[Particle]:
        return [p for p in self.particles if p.alive]


class GrowingSprite:
    """Single explosion image that grows and fades out."""
    kind = EffectKind.GROWING_SPRITE

    def __init__(
        self,
        x: float,
        y: float,
        *,
        size: float = EXPLOSION_SPRITE_SIZE,
        growth: float = EXPLOSION_SPRITE_GROWTH,
        lifetime: float = EXPLOSION_LIFETIME,
        image_name: str = "explosion",
    ):
        self.x = float(x)
        self.y = float(y)
        self.size = float(size)
        self.growth = float(growth)
        self.lifetime = float(lifetime)
        self.image_name = image_name
        self.age = 0.0
        self.active = self.lifetime > 0

    @property
    def alpha(self) -> float:
        if self.lifetime <= 0:
            return 0.0
        return max(0.0, 1.0 - self.age / self.lifetime)

    def update(self, dt: float) -> None:
        if not self.active:
            return
        self.age += dt
        self.size += self.growth * dt
        self.active = self.age < self.lifetime


def create_effect(kind: EffectKind, x: float, y: float, rng: random.Random):
    if kind is EffectKind.POINT_PARTICLES:
        return PointParticles(x, y, rng)
    if kind is EffectKind.GROWING_SPRITE:
        return GrowingSprite(x, y)
    raise ValueError(f"Unknown effect kind: {kind!r}")


def create_explosion(x: float, y: float, rng: random.Random) -> list:
    return [
        create_effect(EffectKind.POINT_PARTICLES, x, y, rng),
        create_effect(EffectKind.GROWING_SPRITE, x, y, rng),
    ]
