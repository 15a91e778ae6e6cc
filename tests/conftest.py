import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from systems.session import GameEvents, GameSession

STEP = 1.0 / 16.0  # exactly representable, keeps timer boundaries exact


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    pygame.display.init()
    pygame.font.init()
    yield
    pygame.quit()


class RecordingEvents(GameEvents):
    def __init__(self):
        self.explosions = []
        self.game_overs = []
        self.scores = []
        self.speeds = []

    def on_explosion(self, x, y):
        self.explosions.append((x, y))

    def on_game_over(self, final_score):
        self.game_overs.append(final_score)

    def on_score_changed(self, score):
        self.scores.append(score)

    def on_speed_changed(self, speed, max_speed):
        self.speeds.append((speed, max_speed))


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def events():
    return RecordingEvents()


@pytest.fixture
def session(rng, events):
    return GameSession(480, 800, rng=rng, events=events)


def advance(session, seconds, controls=None, step=STEP):
    for _ in range(int(round(seconds / step))):
        session.update(step, controls)
