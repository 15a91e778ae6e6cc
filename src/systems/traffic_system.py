from __future__ import annotations
from typing import List, Optional
import logging
import random

from entities.car import Car, EnemyCar
from settings import (
    DIFFICULTY_INTERVAL,
    ENEMY_COLORS,
    ENEMY_SPEED_RANGE,
    ENEMY_TYPES,
    MIN_SPAWN_INTERVAL,
    SPAWN_INTERVAL,
    SPAWN_INTERVAL_FACTOR,
)
from track.road import Road
from utils.mathutils import random_choice, random_int

log = logging.getLogger(__name__)

# summed frame times land a rounding error short of exact deadlines
TIMER_EPSILON = 1e-9


class TrafficSystem:
    """
    Enemy traffic: spawning, culling, collision checks and the difficulty ramp.

    Two accumulators run on simulated time:
      - spawn timer: one car every `spawn_interval` seconds, reset to 0 on spawn
      - difficulty timer: fixed period, leftover time is carried over so only the
        total elapsed time decides how many steps happened
    """
    def __init__(
        self,
        road: Road,
        rng: random.Random,
        *,
        spawn_interval: float = SPAWN_INTERVAL,
        min_spawn_interval: float = MIN_SPAWN_INTERVAL,
        spawn_interval_factor: float = SPAWN_INTERVAL_FACTOR,
        difficulty_interval: float = DIFFICULTY_INTERVAL,
    ):
        self.road = road
        self.rng = rng

        self.min_spawn_interval = float(min_spawn_interval)
        self.spawn_interval = max(self.min_spawn_interval, float(spawn_interval))
        self.spawn_interval_factor = float(spawn_interval_factor)
        self.difficulty_interval = float(difficulty_interval)

        self.spawn_timer = 0.0
        self.difficulty_timer = 0.0
        self.difficulty_level = 0

        self.enemies: List[EnemyCar] = []

    # ---------- spawning ----------

    def spawn_enemy(self, car_type: Optional[str] = None, lane: Optional[int] = None) -> EnemyCar:
        if car_type is None:
            car_type = random_choice(self.rng, list(ENEMY_TYPES.keys()))
        elif car_type not in ENEMY_TYPES:
            raise ValueError(f"Unknown car type: {car_type!r}")
        width, height = ENEMY_TYPES[car_type]
        if lane is None:
            lane = random_int(self.rng, 0, self.road.lanes - 1)
        speed = float(random_int(self.rng, *ENEMY_SPEED_RANGE))

        enemy = EnemyCar(
            self.road.lane_center(lane),
            -height,
            speed=speed,
            lane=lane,
            car_type=car_type,
            color=random_choice(self.rng, ENEMY_COLORS),
            width=width,
            height=height,
        )
        self.enemies.append(enemy)
        log.debug("Spawned %s in lane %d at %.0f px/s", car_type, lane, speed)
        return enemy

    def update_spawning(self, dt: float) -> None:
        self.spawn_timer += dt
        if self.spawn_timer >= self.spawn_interval - TIMER_EPSILON:
            self.spawn_enemy()
            self.spawn_timer = 0.0

    # ---------- difficulty ----------

    def update_difficulty(self, dt: float) -> int:
        """Advance the difficulty clock, return how many steps were taken."""
        self.difficulty_timer += dt
        steps = 0
        while self.difficulty_timer >= self.difficulty_interval - TIMER_EPSILON:
            self.difficulty_timer -= self.difficulty_interval
            self.increase_difficulty()
            steps += 1
        return steps

    def increase_difficulty(self) -> None:
        self.difficulty_level += 1
        self.spawn_interval = max(
            self.min_spawn_interval,
            self.spawn_interval * self.spawn_interval_factor,
        )
        log.info(
            "Difficulty %d: spawning every %.2fs",
            self.difficulty_level, self.spawn_interval,
        )

    # ---------- per-tick ----------

    def update_enemies(self, dt: float) -> None:
        for enemy in self.enemies:
            enemy.update(dt)

    def check_collisions(self, player: Car) -> Optional[EnemyCar]:
        """First enemy the player hits this tick, or None."""
        for enemy in self.enemies:
            if enemy.collided:
                continue
            if player.resolve_collision_with(enemy):
                enemy.collided = True
                return enemy
        return None

    def cull(self) -> int:
        """Drop cars that left the screen or were wrecked. Returns how many went."""
        before = len(self.enemies)
        self.enemies = [
            e for e in self.enemies
            if not e.collided and not e.is_expired(self.road.height)
        ]
        return before - len(self.enemies)
