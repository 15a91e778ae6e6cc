import logging
import os
import random
import sys
import pygame
from settings import *
from utils.assets import load_assets
from systems.audio_system import AudioSystem

log = logging.getLogger(__name__)


class Game:
    def __init__(self):
        pygame.init()
        try:
            pygame.mixer.init()
        except pygame.error as e:
            log.warning("No audio device: %s", e)

        pygame.display.set_caption(GAME_TITLE)
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()

        seed = os.environ.get("HIGHWAY_RUSH_SEED")
        self.rng = random.Random(int(seed)) if seed else random.Random()

        # Loading phase: every asset is ready or fallback before any scene runs
        self.assets = load_assets()
        self.audio = AudioSystem(self.assets)

        log.info("Resolution: %dx%d", *self.screen.get_size())

        from scenes.menu import MenuScene
        self.current_scene = MenuScene(self)

    def poll_events(self):
        """Handle window-level events, hand the rest to the scene."""
        events = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit()
            elif event.type == pygame.VIDEORESIZE:
                self.resize(event.w, event.h)
            else:
                events.append(event)
        return events

    def resize(self, width, height):
        width, height = max(1, width), max(1, height)
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        log.info("Resized to %dx%d", width, height)
        on_resize = getattr(self.current_scene, "on_resize", None)
        if on_resize is not None:
            on_resize(width, height)

    def quit(self):
        self.audio.stop_all()
        pygame.quit()
        sys.exit()

    def run(self):
        while True:
            self.clock.tick(FPS)
            self.current_scene.handle_events()
            self.current_scene.update()
            self.current_scene.draw()
            pygame.display.flip()


def main():
    logging.basicConfig(
        level=os.environ.get("HIGHWAY_RUSH_LOG", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    Game().run()


if __name__ == "__main__":
    main()
