from __future__ import annotations
from enum import Enum
from typing import Dict, Optional
import logging
import os
import pygame

from settings import ASSET_DIR, IMAGE_ASSETS, SOUND_ASSETS

log = logging.getLogger(__name__)


class AssetStatus(Enum):
    READY = "ready"
    FALLBACK = "fallback"


class AssetLibrary:
    """
    Result of the loading phase: every asset name maps to a status, plus the
    surface or sound when one is available. Nothing here probes files again
    once the game is running.
    """
    def __init__(self):
        self.images: Dict[str, pygame.Surface] = {}
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        self.status: Dict[str, AssetStatus] = {}

    def is_ready(self, name: str) -> bool:
        return self.status.get(name) is AssetStatus.READY

    def image(self, name: str) -> Optional[pygame.Surface]:
        return self.images.get(name)

    def sound(self, name: str) -> Optional["pygame.mixer.Sound"]:
        return self.sounds.get(name)


def default_asset_dir() -> str:
    base_path = os.path.dirname(os.path.dirname(__file__))  # utils -> src
    return os.path.join(base_path, "..", ASSET_DIR)


def _load_image(path: str) -> pygame.Surface:
    img = pygame.image.load(path)
    # converting needs a display mode, headless runs keep the raw surface
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        img = img.convert_alpha()
    return img


def make_explosion_surface(size: int = 100) -> pygame.Surface:
    surf = pygame.Surface((size, size), pygame.SRCALPHA)
    c = size // 2
    pygame.draw.circle(surf, (255, 85, 0), (c, c), c)
    pygame.draw.circle(surf, (255, 170, 0), (c, c), int(c * 0.65))
    pygame.draw.circle(surf, (255, 240, 120), (c, c), int(c * 0.3))
    return surf


def make_steering_wheel_surface(size: int = 120) -> pygame.Surface:
    surf = pygame.Surface((size, size), pygame.SRCALPHA)
    c = size // 2
    rim = max(4, size // 12)
    pygame.draw.circle(surf, (40, 40, 40), (c, c), c, rim)
    pygame.draw.circle(surf, (70, 70, 70), (c, c), size // 8)
    pygame.draw.line(surf, (40, 40, 40), (rim, c), (size - rim, c), rim)
    pygame.draw.line(surf, (40, 40, 40), (c, c), (c, size - rim), rim)
    # top marker shows the wheel rotation
    pygame.draw.rect(surf, (231, 76, 60), (c - rim // 2, 0, rim, rim * 2))
    return surf


FALLBACK_FACTORIES = {
    "explosion": make_explosion_surface,
    "steering-wheel": make_steering_wheel_surface,
}


def load_assets(
    asset_dir: Optional[str] = None,
    *,
    images: Optional[Dict[str, str]] = None,
    sounds: Optional[Dict[str, str]] = None,
    load_sounds: bool = True,
) -> AssetLibrary:
    """
    Load every image and sound up front.

    Missing or broken files never fail the game: the asset is marked as
    fallback (with a synthesized surface when one exists) and the renderer /
    audio system degrade on their own.
    """
    base = asset_dir or default_asset_dir()
    lib = AssetLibrary()

    for name, rel in (images if images is not None else IMAGE_ASSETS).items():
        path = os.path.join(base, rel)
        surface = None
        if os.path.exists(path):
            try:
                surface = _load_image(path)
            except pygame.error as e:
                log.warning("Could not decode image %s: %s", path, e)

        if surface is not None:
            lib.images[name] = surface
            lib.status[name] = AssetStatus.READY
            continue

        lib.status[name] = AssetStatus.FALLBACK
        factory = FALLBACK_FACTORIES.get(name)
        if factory is not None:
            lib.images[name] = factory()
        log.debug("Image %r missing, using fallback", name)

    sound_map = sounds if sounds is not None else SOUND_ASSETS
    mixer_ready = load_sounds and pygame.mixer.get_init() is not None
    if load_sounds and not mixer_ready and sound_map:
        log.warning("Audio mixer not initialised, running silent")

    for name, rel in sound_map.items():
        path = os.path.join(base, rel)
        snd = None
        if mixer_ready and os.path.exists(path):
            try:
                snd = pygame.mixer.Sound(path)
            except pygame.error as e:
                log.warning("Could not load sound %s: %s", path, e)

        if snd is not None:
            lib.sounds[name] = snd
            lib.status[name] = AssetStatus.READY
        else:
            lib.status[name] = AssetStatus.FALLBACK

    ready = sum(1 for s in lib.status.values() if s is AssetStatus.READY)
    log.info("Assets loaded: %d ready, %d fallback", ready, len(lib.status) - ready)
    return lib
