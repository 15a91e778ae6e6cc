import pygame
from settings import *
from systems.input_system import InputHandler
from systems.render_system import Renderer
from systems.session import GameEvents, GameSession
from utils.mathutils import format_number

WHEEL_SIZE = 120


class GameScene(GameEvents):
    def __init__(self, game):
        self.game = game
        w, h = self.game.screen.get_size()

        self.font = pygame.font.SysFont("Arial", 32, bold=True)
        self.small_font = pygame.font.SysFont("Arial", 22, bold=True)

        self.renderer = Renderer(self.game.screen, self.game.assets)
        self.input = InputHandler(self._wheel_rect(w, h))
        self.session = GameSession(w, h, rng=self.game.rng, events=self)

        self.score_text = None
        self.speed = 0.0
        self.max_speed = START_MAX_SPEED

        self.start()

    def _wheel_rect(self, w, h):
        rect = pygame.Rect(0, 0, WHEEL_SIZE, WHEEL_SIZE)
        rect.bottomright = (w - 20, h - 20)
        return rect

    # ---------- session control ----------

    def start(self):
        self.input.reset()
        self.session.start()
        self.game.audio.start_session()

    def restart(self):
        self.input.reset()
        self.session.restart()
        self.game.audio.start_session()
        self.game.current_scene = self

    def on_resize(self, width, height):
        self.session.resize(width, height)
        self.renderer.set_screen(self.game.screen)
        self.input.wheel_rect = self._wheel_rect(width, height)

    # ---------- session events ----------

    def on_score_changed(self, score):
        self.score_text = self.font.render(f"Score: {format_number(score)}", True, HUD_COLOR)

    def on_speed_changed(self, speed, max_speed):
        self.speed = speed
        self.max_speed = max_speed
        self.game.audio.set_engine_speed(speed, max_speed)

    def on_game_over(self, final_score):
        self.game.audio.play_crash()
        from scenes.game_over import GameOverScene
        self.game.current_scene = GameOverScene(self.game, self, final_score)

    # ---------- loop ----------

    def handle_events(self):
        for event in self.game.poll_events():
            self.handle_event(event)

    def handle_event(self, event):
        self.input.handle_event(event)

        if event.type != pygame.KEYDOWN:
            return
        if event.key == pygame.K_ESCAPE:
            from scenes.pause import PauseScene
            self.game.current_scene = PauseScene(self.game, self)
        elif event.key == pygame.K_SPACE and not self.session.game_over:
            self.game.audio.play_horn()
        elif event.key == pygame.K_m:
            self.game.audio.toggle()

    def update(self):
        self.input.update(self.game.clock.get_time() / 1000.0)
        self.session.tick(pygame.time.get_ticks(), self.input)

    def draw(self):
        self.session.draw(self.renderer)
        self.draw_hud()

    def draw_hud(self):
        screen = self.game.screen
        w, h = screen.get_size()

        if self.score_text is not None:
            screen.blit(self.score_text, (20, 16))

        speed_txt = self.small_font.render(f"{int(self.speed)} mph", True, HUD_COLOR)
        screen.blit(speed_txt, (20, 56))

        bar = pygame.Rect(20, 86, 160, 12)
        pygame.draw.rect(screen, (0, 0, 0), bar)
        if self.max_speed > 0:
            fill = int(bar.width * min(1.0, self.speed / self.max_speed))
            pygame.draw.rect(screen, HUD_ACCENT, (bar.x, bar.y, fill, bar.height))
        pygame.draw.rect(screen, HUD_COLOR, bar, 2)

        wheel = self.game.assets.image("steering-wheel")
        if wheel is not None:
            wheel = pygame.transform.smoothscale(wheel, (WHEEL_SIZE, WHEEL_SIZE))
            wheel = pygame.transform.rotate(wheel, -self.input.display_angle())
            screen.blit(wheel, wheel.get_rect(center=self.input.wheel_rect.center))
