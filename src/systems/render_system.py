from __future__ import annotations
from typing import Dict, Tuple
import random
import pygame

from entities.car import Car
from entities.effects import EffectKind
from settings import EDGE_WIDTH, LINE_WIDTH
from track.road import Road
from utils.assets import AssetLibrary

ROAD_COLOR = (51, 51, 51)
LINE_COLOR = (255, 255, 255)
EDGE_COLOR = (255, 0, 0)
WINDOW_COLOR = (255, 255, 153)
WINDSHIELD_COLOR = (51, 51, 51)

CRASH_TILT = 9.0  # degrees


class Renderer:
    """
    pygame presentation of the session.

    Reads asset status from the loading phase; anything not ready is drawn
    with plain shapes instead.
    """
    def __init__(self, screen: pygame.Surface, assets: AssetLibrary):
        self.screen = screen
        self.assets = assets
        self._cache: Dict[Tuple[str, int, int], pygame.Surface] = {}

    def set_screen(self, screen: pygame.Surface) -> None:
        self.screen = screen

    def _scaled(self, name: str, w: int, h: int) -> pygame.Surface:
        key = (name, w, h)
        if key in self._cache:
            return self._cache[key]

        surf = pygame.transform.smoothscale(self.assets.image(name), (w, h))
        self._cache[key] = surf
        return surf

    # ---------- road ----------

    def draw_road_frame(self, road: Road) -> None:
        screen = self.screen
        w, h = int(road.width), int(road.height)

        if road.layers:
            screen.fill(road.layers[0].color)
        for layer in road.layers[1:]:
            y = int(layer.y)
            pygame.draw.rect(screen, layer.color, (0, y, w, h - y))
            pygame.draw.rect(screen, layer.color, (0, y - h, w, h))

        pygame.draw.rect(screen, ROAD_COLOR, (0, 0, w, h))

        for line in road.lines:
            pygame.draw.rect(
                screen, LINE_COLOR,
                (int(line.x - LINE_WIDTH / 2), int(line.y), LINE_WIDTH, int(road.line_height)),
            )

        for b in road.buildings:
            self._draw_building(b)

        pygame.draw.rect(screen, EDGE_COLOR, (0, 0, EDGE_WIDTH, h))
        pygame.draw.rect(screen, EDGE_COLOR, (w - EDGE_WIDTH, 0, EDGE_WIDTH, h))

    def _draw_building(self, b) -> None:
        left = int(b.x - b.width / 2)
        top = int(b.y - b.height)
        pygame.draw.rect(self.screen, b.color, (left, top, int(b.width), int(b.height)))

        window_size = 10
        window_gap = 15
        rows = int(b.height // window_gap) - 1
        cols = int(b.width // window_gap) - 1
        pattern = random.Random(b.window_seed)
        for row in range(rows):
            for col in range(cols):
                if pattern.random() > 0.3:
                    pygame.draw.rect(
                        self.screen, WINDOW_COLOR,
                        (left + col * window_gap + window_gap // 2,
                         top + row * window_gap + window_gap // 2,
                         window_size, window_size),
                    )

    # ---------- cars ----------

    def _car_surface(self, car: Car) -> pygame.Surface:
        w, h = max(1, int(car.width)), max(1, int(car.height))
        if self.assets.is_ready(car.car_type):
            return self._scaled(car.car_type, w, h)

        surf = pygame.Surface((w, h), pygame.SRCALPHA)
        surf.fill(car.color)
        pygame.draw.rect(surf, WINDSHIELD_COLOR, (int(w * 0.15), int(h * 0.3), int(w * 0.7), int(h * 0.4)))
        return surf

    def draw_vehicle(self, car: Car) -> None:
        surf = self._car_surface(car)

        if car.collided and car.is_player:
            surf = surf.copy()
            # darken and tilt the wreck
            surf.fill((90, 90, 90), special_flags=pygame.BLEND_RGB_MULT)
            surf = pygame.transform.rotate(surf, -CRASH_TILT)
        elif car.is_player and car.wheel_angle:
            surf = pygame.transform.rotate(surf, -car.wheel_angle * 0.1)

        rect = surf.get_rect(center=(int(car.x), int(car.y)))
        self.screen.blit(surf, rect)

    # ---------- effects ----------

    def draw_particle_effect(self, effect) -> None:
        if not effect.active:
            return

        if effect.kind is EffectKind.POINT_PARTICLES:
            for p in effect.live_particles():
                r = max(1, int(p.size))
                alpha = int(255 * p.alpha)
                surf_p = pygame.Surface((r * 2, r * 2), pygame.SRCALPHA)
                pygame.draw.circle(surf_p, (*effect.color, alpha), (r, r), r)
                self.screen.blit(surf_p, (int(p.x - r), int(p.y - r)))

        elif effect.kind is EffectKind.GROWING_SPRITE:
            base = self.assets.image(effect.image_name)
            if base is None:
                return
            size = max(1, int(effect.size))
            spr = pygame.transform.smoothscale(base, (size, size))
            spr.set_alpha(int(255 * effect.alpha))
            self.screen.blit(spr, spr.get_rect(center=(int(effect.x), int(effect.y))))
