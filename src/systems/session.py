from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol
import logging
import math
import random

from entities.car import PlayerCar
from settings import (
    BOOST_FACTOR,
    DISTANCE_PER_POINT,
    LANES,
    MAX_SPEED_STEP,
    PLAYER_ANCHOR,
    SESSION_ACCELERATION,
    SPEED_DECAY,
    START_MAX_SPEED,
)
from systems.clock import FrameClock, cap_delta
from systems.effects_system import EffectsSystem
from systems.traffic_system import TrafficSystem
from track.road import Road
from utils.mathutils import clamp, finite_or

log = logging.getLogger(__name__)


# ---------- collaborator interfaces ----------

class InputSource(Protocol):
    brake_active: bool
    accelerate_active: bool

    def steering_input(self) -> float: ...


class PresentationSink(Protocol):
    def draw_road_frame(self, road: Road) -> None: ...

    def draw_vehicle(self, car) -> None: ...

    def draw_particle_effect(self, effect) -> None: ...


class GameEvents:
    """Fire-and-forget notifications. Subclass and override what you need."""

    def on_explosion(self, x: float, y: float) -> None:
        pass

    def on_game_over(self, final_score: int) -> None:
        pass

    def on_score_changed(self, score: int) -> None:
        pass

    def on_speed_changed(self, speed: float, max_speed: float) -> None:
        pass


NullEvents = GameEvents


@dataclass(frozen=True)
class Controls:
    steering: float = 0.0
    brake: bool = False
    accelerate: bool = False

    @classmethod
    def sample(cls, source: Optional[InputSource]) -> "Controls":
        if source is None:
            return cls()
        return cls(
            steering=clamp(finite_or(source.steering_input()), -1.0, 1.0),
            brake=bool(source.brake_active),
            accelerate=bool(source.accelerate_active),
        )


class SessionState(Enum):
    IDLE = "idle"
    ACTIVE = "active"
    PAUSED = "paused"
    OVER = "over"


# ---------- session ----------

class GameSession:
    """
    One run of the game: owns the road, the player, traffic and effects.

    Per tick the update order is fixed (road, player, enemies, collisions,
    spawns, difficulty, particles, score) and drawing only happens after the
    whole update is done.
    """
    def __init__(
        self,
        width: float,
        height: float,
        *,
        rng: Optional[random.Random] = None,
        events: Optional[GameEvents] = None,
        lanes: int = LANES,
    ):
        self.width = float(width)
        self.height = float(height)
        self.lanes = int(lanes)
        self.rng = rng if rng is not None else random.Random()
        self.events = events if events is not None else NullEvents()

        self.clock = FrameClock()
        self.state = SessionState.IDLE

        self._reset()

    # ---------- flags ----------

    @property
    def game_active(self) -> bool:
        return self.state is SessionState.ACTIVE

    @property
    def game_over(self) -> bool:
        return self.state is SessionState.OVER

    @property
    def enemies(self) -> list:
        return self.traffic.enemies

    @property
    def effects(self) -> List:
        return self.effects_system.effects

    @property
    def spawn_interval(self) -> float:
        return self.traffic.spawn_interval

    # ---------- lifecycle ----------

    def _reset(self) -> None:
        self.score = 0
        self.distance = 0.0
        self.speed = 0.0
        self.max_speed = START_MAX_SPEED
        self.acceleration = SESSION_ACCELERATION

        self.road = Road(self.width, self.height, self.rng, lanes=self.lanes)
        self.effects_system = EffectsSystem(self.rng)
        self.traffic = TrafficSystem(self.road, self.rng)
        self.player = PlayerCar(
            self.width / 2,
            self.height * PLAYER_ANCHOR,
            track_width=self.width,
            on_explosion=self._explode,
        )
        self.player.max_speed = self.max_speed
        self.clock.reset()

    def start(self) -> None:
        self._reset()
        self.state = SessionState.ACTIVE
        log.info("Session started (%dx%d, %d lanes)", self.width, self.height, self.lanes)
        self.events.on_score_changed(self.score)

    def restart(self) -> None:
        log.info("Restarting session")
        self.start()

    def pause(self) -> None:
        if self.state is not SessionState.ACTIVE:
            log.debug("pause() ignored in state %s", self.state.value)
            return
        self.state = SessionState.PAUSED

    def resume(self) -> None:
        if self.state is not SessionState.PAUSED:
            log.debug("resume() ignored in state %s", self.state.value)
            return
        self.state = SessionState.ACTIVE
        # the time spent paused is not simulated
        self.clock.reset()

    def resize(self, width: float, height: float) -> None:
        self.road.resize(width, height)
        self.width = float(width)
        self.height = float(height)

        self.player.y = self.height * PLAYER_ANCHOR
        self.player.track_width = self.width
        self.player.keep_on_track()

    # ---------- tick ----------

    def tick(
        self,
        timestamp_ms: float,
        source: Optional[InputSource] = None,
        sink: Optional[PresentationSink] = None,
    ) -> float:
        """Run one frame: sample input, update, then draw. Returns the step used."""
        dt = 0.0
        if self.state in (SessionState.ACTIVE, SessionState.OVER):
            dt = self.clock.tick(timestamp_ms)
            self.update(dt, Controls.sample(source))
        if sink is not None:
            self.draw(sink)
        return dt

    def update(self, dt: float, controls: Optional[Controls] = None) -> None:
        dt = cap_delta(dt)
        controls = controls or Controls()

        if self.state is SessionState.ACTIVE:
            self._update_active(dt, controls)
        elif self.state is SessionState.OVER:
            self._update_aftermath(dt)

    def _update_active(self, dt: float, controls: Controls) -> None:
        self._update_speed(dt, controls)

        self.road.update(dt, self.speed)
        self.player.update(dt, controls.steering)

        self.traffic.update_enemies(dt)
        self.traffic.cull()

        self.check_collisions()

        if self.state is SessionState.ACTIVE:
            self.traffic.update_spawning(dt)
            steps = self.traffic.update_difficulty(dt)
            if steps:
                self.max_speed += MAX_SPEED_STEP * steps
                self.player.max_speed = self.max_speed

        self.effects_system.update(dt)
        self._update_score(dt)

        self.events.on_speed_changed(self.speed, self.max_speed)

    def _update_aftermath(self, dt: float) -> None:
        # crash plays out: no spawns, no difficulty, no score
        self.speed *= SPEED_DECAY
        self.road.update(dt, self.speed)
        self.traffic.update_enemies(dt)
        self.traffic.cull()
        self.effects_system.update(dt)
        self.events.on_speed_changed(self.speed, self.max_speed)

    def _update_speed(self, dt: float, controls: Controls) -> None:
        if self.player.collided:
            self.speed *= SPEED_DECAY
            return

        if controls.brake:
            self.speed *= SPEED_DECAY
        elif controls.accelerate:
            self.speed += self.acceleration * BOOST_FACTOR * dt
        else:
            self.speed += self.acceleration * dt
        self.speed = min(self.speed, self.max_speed)

    def _update_score(self, dt: float) -> None:
        if self.player.collided:
            return

        self.distance += self.speed * dt
        score = math.floor(self.distance / DISTANCE_PER_POINT)
        if score != self.score:
            self.score = score
            self.events.on_score_changed(score)

    def check_collisions(self) -> bool:
        if self.state is not SessionState.ACTIVE:
            return False

        enemy = self.traffic.check_collisions(self.player)
        if enemy is None:
            return False

        self.state = SessionState.OVER
        log.info("Crashed into %s, final score %d", enemy.car_type, self.score)
        self.events.on_game_over(self.score)
        return True

    def _explode(self, x: float, y: float) -> None:
        self.effects_system.spawn_explosion(x, y)
        self.events.on_explosion(x, y)

    # ---------- draw ----------

    def draw(self, sink: PresentationSink) -> None:
        sink.draw_road_frame(self.road)
        for enemy in self.traffic.enemies:
            sink.draw_vehicle(enemy)
        sink.draw_vehicle(self.player)
        for effect in self.effects_system.effects:
            sink.draw_particle_effect(effect)
