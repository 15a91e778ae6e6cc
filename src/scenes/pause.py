import pygame
from settings import *


class PauseScene:
    def __init__(self, game, previous_scene):
        self.game = game
        self.previous_scene = previous_scene
        self.font = pygame.font.SysFont("Arial", 72, bold=True)
        self.button_font = pygame.font.SysFont("Arial", 36, bold=True)
        self.rebuild_layout()

        self.previous_scene.session.pause()
        self.game.audio.pause()

    def rebuild_layout(self):
        w, h = self.game.screen.get_size()
        self.resume_rect = pygame.Rect(0, 0, 240, 70)
        self.resume_rect.center = (w // 2, h // 2)
        self.restart_rect = pygame.Rect(0, 0, 240, 70)
        self.restart_rect.center = (w // 2, h // 2 + 100)

    def on_resize(self, width, height):
        self.previous_scene.on_resize(width, height)
        self.rebuild_layout()

    def resume(self):
        self.previous_scene.session.resume()
        self.game.audio.resume()
        self.game.current_scene = self.previous_scene

    def handle_events(self):
        for event in self.game.poll_events():
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.resume()
                return
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                self.previous_scene.restart()
                return
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self.resume_rect.collidepoint(event.pos):
                    self.resume()
                    return
                if self.restart_rect.collidepoint(event.pos):
                    self.previous_scene.restart()
                    return

    def update(self):
        pass

    def _button(self, rect, label):
        pygame.draw.rect(self.game.screen, (255, 255, 255), rect, border_radius=10)
        txt = self.button_font.render(label, True, (0, 0, 0))
        self.game.screen.blit(txt, txt.get_rect(center=rect.center))

    def draw(self):
        self.previous_scene.draw()
        w, h = self.game.screen.get_size()
        overlay = pygame.Surface((w, h))
        overlay.set_alpha(120)
        overlay.fill((0, 0, 0))
        self.game.screen.blit(overlay, (0, 0))
        text = self.font.render("PAUSED", True, (255, 255, 255))
        self.game.screen.blit(text, text.get_rect(center=(w // 2, h // 3)))
        self._button(self.resume_rect, "Resume")
        self._button(self.restart_rect, "Restart")
