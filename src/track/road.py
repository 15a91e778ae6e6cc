from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple
import math
import random

from settings import (
    BACKGROUND_LAYERS,
    BUILDING_COLORS,
    BUILDING_COUNT,
    BUILDING_HEIGHT_RANGE,
    BUILDING_SPEED,
    BUILDING_WIDTH_RANGE,
    LANES,
    LINE_GAP,
    LINE_HEIGHT,
)
from utils.mathutils import random_choice, random_int


@dataclass
class LaneLine:
    x: float
    y: float  # top of the dash


@dataclass
class BackgroundLayer:
    y: float
    speed: float
    color: Tuple[int, int, int]


@dataclass
class Building:
    x: float
    y: float  # bottom edge
    width: float
    height: float
    color: Tuple[int, int, int]
    side: str
    window_seed: int


class Road:
    """
    Vertically scrolling road.

    Lane dashes, parallax layers and buildings are single mutable records that
    scroll down with the player speed and get recycled above the viewport once
    they leave it, so the loop never runs out of elements.
    """
    def __init__(
        self,
        width: float,
        height: float,
        rng: random.Random,
        *,
        lanes: int = LANES,
        line_height: float = LINE_HEIGHT,
        line_gap: float = LINE_GAP,
        building_count: int = BUILDING_COUNT,
    ):
        if lanes < 1:
            raise ValueError(f"Road needs at least one lane, got {lanes}")

        self.rng = rng
        self.lanes = int(lanes)
        self.line_height = float(line_height)
        self.line_gap = float(line_gap)
        self.building_count = int(building_count)

        self.width = 0.0
        self.height = 0.0
        self.lane_width = 0.0
        self.line_span = 0.0

        self.lines: List[LaneLine] = []
        self.layers: List[BackgroundLayer] = []
        self.buildings: List[Building] = []

        self.resize(width, height)

    # ---------- geometry ----------

    def resize(self, width: float, height: float) -> None:
        """Rebuild all geometry for a new viewport. Not an incremental rescale."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid viewport size: {width}x{height}")

        self.width = float(width)
        self.height = float(height)
        self.lane_width = self.width / self.lanes

        self._init_lines()
        self._init_layers()
        self._init_buildings()

    def _init_lines(self) -> None:
        period = self.line_height + self.line_gap
        rows = math.ceil(self.height / period) + 1
        self.line_span = rows * period

        self.lines = []
        for i in range(rows):
            for lane in range(1, self.lanes):
                self.lines.append(LaneLine(
                    x=lane * self.lane_width,
                    y=i * period - period,
                ))

    def _init_layers(self) -> None:
        self.layers = [
            BackgroundLayer(
                y=layer["offset"] * self.height,
                speed=layer["speed"],
                color=layer["color"],
            )
            for layer in BACKGROUND_LAYERS
        ]

    def _init_buildings(self) -> None:
        self.buildings = []
        for i in range(self.building_count):
            side = "left" if i % 2 == 0 else "right"
            b = Building(
                x=0.0,
                y=float(random_int(self.rng, 0, int(self.height))),
                width=0.0,
                height=0.0,
                color=BUILDING_COLORS[0],
                side=side,
                window_seed=0,
            )
            self._randomize_building(b)
            self.buildings.append(b)

    def _randomize_building(self, b: Building) -> None:
        b.width = float(random_int(self.rng, *BUILDING_WIDTH_RANGE))
        b.height = float(random_int(self.rng, *BUILDING_HEIGHT_RANGE))
        b.color = random_choice(self.rng, BUILDING_COLORS)
        b.window_seed = self.rng.getrandbits(32)
        # straddle the road edge on its side
        b.x = 0.0 if b.side == "left" else self.width

    def lane_center(self, lane_index: int) -> float:
        if not 0 <= lane_index < self.lanes:
            raise ValueError(f"Invalid lane index: {lane_index} (road has {self.lanes} lanes)")
        return (lane_index + 0.5) * self.lane_width

    # ---------- simulation ----------

    def update(self, dt: float, scroll_speed: float) -> None:
        step = scroll_speed * dt

        for line in self.lines:
            line.y += step
            if line.y > self.height:
                # wrap by the whole loop so dash spacing survives any dt
                line.y -= self.line_span

        for layer in self.layers:
            layer.y += step * layer.speed
            if layer.y > self.height:
                layer.y -= self.height

        for b in self.buildings:
            b.y += step * BUILDING_SPEED
            if b.y > self.height + b.height:
                self._randomize_building(b)
                b.y = -b.height
