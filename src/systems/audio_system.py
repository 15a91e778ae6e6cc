from __future__ import annotations
import logging

from utils.assets import AssetLibrary

log = logging.getLogger(__name__)


class AudioSystem:
    """
    Engine loop, music, crash and horn. Every sound is optional: a missing
    file or audio device just means that sound never plays.
    """
    def __init__(self, assets: AssetLibrary, *, enabled: bool = True):
        self.assets = assets
        self.enabled = enabled
        self.engine = assets.sound("engine")
        self.crash = assets.sound("crash")
        self.horn = assets.sound("horn")
        self.music = assets.sound("music")
        self._running = False

    def _loops(self):
        return [s for s in (self.engine, self.music) if s is not None]

    def start_session(self) -> None:
        self.stop_all()
        self._running = True
        if not self.enabled:
            return
        for snd in self._loops():
            snd.play(loops=-1)

    def pause(self) -> None:
        for snd in self._loops():
            snd.stop()

    def resume(self) -> None:
        if self.enabled and self._running:
            for snd in self._loops():
                snd.play(loops=-1)

    def stop_all(self) -> None:
        for snd in (self.engine, self.music, self.horn, self.crash):
            if snd is not None:
                snd.stop()

    def set_engine_speed(self, speed: float, max_speed: float) -> None:
        # pygame can't change playback rate, so louder instead of higher
        if self.engine is None or max_speed <= 0:
            return
        ratio = max(0.0, min(1.0, speed / max_speed))
        self.engine.set_volume(0.3 + 0.7 * ratio)

    def play_crash(self) -> None:
        self._running = False
        for snd in self._loops():
            snd.stop()
        if self.enabled and self.crash is not None:
            self.crash.play()

    def play_horn(self) -> None:
        if self.enabled and self.horn is not None:
            self.horn.stop()
            self.horn.play()

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        if self.enabled:
            self.resume()
        else:
            self.stop_all()
        log.info("Sound %s", "on" if self.enabled else "off")
        return self.enabled
