import pygame
from settings import *
from utils.mathutils import format_number


class GameOverScene:
    """Crash aftermath keeps animating underneath the final score."""

    def __init__(self, game, game_scene, final_score):
        self.game = game
        self.game_scene = game_scene
        self.final_score = final_score
        self.font = pygame.font.SysFont("Arial", 64, bold=True)
        self.small_font = pygame.font.SysFont("Arial", 36, bold=True)
        self.rebuild_layout()

    def rebuild_layout(self):
        w, h = self.game.screen.get_size()
        self.restart_rect = pygame.Rect(0, 0, 260, 70)
        self.restart_rect.center = (w // 2, int(h * 0.6))

    def on_resize(self, width, height):
        self.game_scene.on_resize(width, height)
        self.rebuild_layout()

    def handle_events(self):
        for event in self.game.poll_events():
            if event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_r, pygame.K_RETURN):
                    self.game_scene.restart()
                    return
                if event.key == pygame.K_ESCAPE:
                    from scenes.menu import MenuScene
                    self.game.audio.stop_all()
                    self.game.current_scene = MenuScene(self.game)
                    return
                if event.key == pygame.K_m:
                    self.game.audio.toggle()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self.restart_rect.collidepoint(event.pos):
                    self.game_scene.restart()
                    return

    def update(self):
        self.game_scene.update()

    def draw(self):
        self.game_scene.draw()
        screen = self.game.screen
        w, h = screen.get_size()

        overlay = pygame.Surface((w, h))
        overlay.set_alpha(140)
        overlay.fill((0, 0, 0))
        screen.blit(overlay, (0, 0))

        title = self.font.render("GAME OVER", True, (231, 76, 60))
        screen.blit(title, title.get_rect(center=(w // 2, int(h * 0.3))))
        score = self.small_font.render(f"Score: {format_number(self.final_score)}", True, HUD_COLOR)
        screen.blit(score, score.get_rect(center=(w // 2, int(h * 0.42))))

        pygame.draw.rect(screen, HUD_ACCENT, self.restart_rect, border_radius=10)
        txt = self.small_font.render("RESTART", True, (0, 0, 0))
        screen.blit(txt, txt.get_rect(center=self.restart_rect.center))
