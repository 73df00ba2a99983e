# deck_snake/viz/audio.py
from __future__ import annotations
import logging
import os
from typing import Dict, Optional
import pygame as pg

logger = logging.getLogger(__name__)

EAT_SOUND = "snake-eats.mp3"
GAME_OVER_SOUND = "gmover-sound.wav"
THEME_MUSIC = "happy-pirate-accordion.wav"

class NullAudio:
    def food_eaten(self) -> None: pass
    def game_over(self) -> None: pass
    def theme_start(self) -> None: pass
    def theme_stop(self) -> None: pass

class PygameAudio:
    """
    pygame.mixer backed sounds. Anything that fails to initialise or load is
    logged once and then skipped; playback is never awaited.
    """
    def __init__(self, asset_dir: str):
        self.asset_dir = asset_dir
        self._sounds: Dict[str, Optional[pg.mixer.Sound]] = {}
        self._theme_loaded = False
        self._ready = self._init_mixer()
        if self._ready:
            self._sounds["eat"] = self._load(EAT_SOUND)
            self._sounds["over"] = self._load(GAME_OVER_SOUND)
            self._theme_loaded = self._load_theme()

    def food_eaten(self) -> None:
        self._play("eat")

    def game_over(self) -> None:
        self._play("over")

    def theme_start(self) -> None:
        if not self._theme_loaded:
            return
        try:
            pg.mixer.music.play(loops=-1)
        except pg.error as e:
            logger.warning("theme playback failed: %s", e)

    def theme_stop(self) -> None:
        if self._theme_loaded and pg.mixer.get_init():
            pg.mixer.music.stop()

    # internals
    def _init_mixer(self) -> bool:
        try:
            if not pg.mixer.get_init():
                pg.mixer.init()
        except pg.error as e:
            logger.warning("audio disabled: %s", e)
            return False
        return True

    def _path(self, name: str) -> Optional[str]:
        path = os.path.join(self.asset_dir, name)
        if not os.path.exists(path):
            logger.info("sound %s not found, skipping", path)
            return None
        return path

    def _load(self, name: str) -> Optional[pg.mixer.Sound]:
        path = self._path(name)
        if path is None:
            return None
        try:
            return pg.mixer.Sound(path)
        except pg.error as e:
            logger.warning("could not load %s: %s", path, e)
            return None

    def _load_theme(self) -> bool:
        path = self._path(THEME_MUSIC)
        if path is None:
            return False
        try:
            pg.mixer.music.load(path)
        except pg.error as e:
            logger.warning("could not load %s: %s", path, e)
            return False
        return True

    def _play(self, key: str) -> None:
        snd = self._sounds.get(key)
        if snd is not None:
            snd.play()
