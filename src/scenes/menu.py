import pygame
from settings import *


class MenuScene:
    def __init__(self, game):
        self.game = game
        self.rebuild_layout()

    def rebuild_layout(self):
        self.title_font = pygame.font.SysFont("Arial", 64, bold=True)
        self.button_font = pygame.font.SysFont("Arial", 40, bold=True)
        self.hint_font = pygame.font.SysFont("Arial", 20)

        w, h = self.game.screen.get_size()

        self.bg = pygame.Surface((w, h))
        self.bg.fill((51, 51, 51))
        # a few lane dashes so the menu looks like the road
        lane_w = w / LANES
        for lane in range(1, LANES):
            x = int(lane * lane_w) - LINE_WIDTH // 2
            for y in range(0, h, LINE_HEIGHT + LINE_GAP):
                pygame.draw.rect(self.bg, (255, 255, 255), (x, y, LINE_WIDTH, LINE_HEIGHT))

        self.start_button = pygame.Rect(0, 0, 260, 80)
        self.start_button.center = (w // 2, int(h * 0.6))
        self.title_pos = (w // 2, int(h * 0.25))

    def on_resize(self, width, height):
        self.rebuild_layout()

    # ----------- EVENT HANDLING -------------
    def handle_events(self):
        for event in self.game.poll_events():
            if event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_RETURN, pygame.K_SPACE):
                    self.start_game()
                    return
                if event.key == pygame.K_ESCAPE:
                    self.game.quit()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self.start_button.collidepoint(event.pos):
                    self.start_game()
                    return

    def start_game(self):
        from scenes.game import GameScene
        self.game.current_scene = GameScene(self.game)

    def update(self):
        pass

    # ------------------ DRAW ------------------
    def draw(self):
        screen = self.game.screen
        screen.blit(self.bg, (0, 0))

        title = self.title_font.render(GAME_TITLE.upper(), True, HUD_COLOR)
        screen.blit(title, title.get_rect(center=self.title_pos))

        pygame.draw.rect(screen, HUD_ACCENT, self.start_button, border_radius=12)
        pygame.draw.rect(screen, (0, 0, 0), self.start_button, 3, border_radius=12)
        txt = self.button_font.render("START", True, (0, 0, 0))
        screen.blit(txt, txt.get_rect(center=self.start_button.center))

        hint = self.hint_font.render(
            "Arrows / A-D steer   W accelerate   S brake   Space horn   M sound",
            True, HUD_COLOR,
        )
        w, h = screen.get_size()
        screen.blit(hint, hint.get_rect(center=(w // 2, int(h * 0.85))))
