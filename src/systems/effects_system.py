from __future__ import annotations
from typing import List
import random

from entities.effects import create_explosion


class EffectsSystem:
    """Owns the live particle effects. Expired effects are dropped, never revived."""

    def __init__(self, rng: random.Random):
        self.rng = rng
        self.effects: List = []

    def spawn_explosion(self, x: float, y: float) -> None:
        self.effects.extend(create_explosion(x, y, self.rng))

    def update(self, dt: float) -> None:
        self.effects = [e for e in self.effects if e.active]
        for effect in self.effects:
            effect.update(dt)

    def clear(self) -> None:
        self.effects = []

    def __len__(self) -> int:
        return len(self.effects)
