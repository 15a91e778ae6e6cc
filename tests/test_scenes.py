import random

import pygame
import pytest

from scenes.game import GameScene
from scenes.game_over import GameOverScene
from scenes.menu import MenuScene
from scenes.pause import PauseScene
from systems.audio_system import AudioSystem
from systems.session import SessionState
from utils.assets import load_assets


class FakeGame:
    def __init__(self, tmp_path):
        self.screen = pygame.Surface((480, 800))
        self.assets = load_assets(str(tmp_path), load_sounds=False)
        self.audio = AudioSystem(self.assets)
        self.rng = random.Random(5)
        self.clock = pygame.time.Clock()
        self.pending = []
        self.current_scene = None

    def poll_events(self):
        events, self.pending = self.pending, []
        return events

    def quit(self):
        raise SystemExit


@pytest.fixture
def game(tmp_path):
    return FakeGame(tmp_path)


def press(game, k):
    game.pending.append(pygame.event.Event(pygame.KEYDOWN, key=k))
    game.current_scene.handle_events()


def test_menu_starts_a_game(game):
    game.current_scene = MenuScene(game)
    game.current_scene.draw()
    press(game, pygame.K_RETURN)
    assert isinstance(game.current_scene, GameScene)
    assert game.current_scene.session.game_active


def test_pause_and_resume(game):
    scene = GameScene(game)
    game.current_scene = scene
    scene.update()
    scene.draw()

    press(game, pygame.K_ESCAPE)
    assert isinstance(game.current_scene, PauseScene)
    assert scene.session.state is SessionState.PAUSED
    game.current_scene.draw()

    press(game, pygame.K_ESCAPE)
    assert game.current_scene is scene
    assert scene.session.game_active


def test_game_over_and_restart(game):
    scene = GameScene(game)
    game.current_scene = scene

    session = scene.session
    enemy = session.traffic.spawn_enemy()
    enemy.x, enemy.y = session.player.x, session.player.y
    session.check_collisions()

    over = game.current_scene
    assert isinstance(over, GameOverScene)
    over.update()
    over.draw()

    press(game, pygame.K_r)
    assert game.current_scene is scene
    assert scene.session.game_active
    assert scene.session.score == 0


def test_resize_reaches_the_session(game):
    scene = GameScene(game)
    game.current_scene = scene
    game.screen = pygame.Surface((600, 900))
    scene.on_resize(600, 900)
    assert scene.session.road.width == 600
    assert scene.input.wheel_rect.bottomright == (580, 880)
    scene.draw()
