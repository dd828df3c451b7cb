
"""Background music toggle"""
import logging
from typing import Optional
import pygame

logger = logging.getLogger("tetris.audio")

class MusicToggle:
    def __init__(self, path: Optional[str]):
        self.enabled=False
        self.playing=False
        self.started=False
        if not path:
            return
        try:
            pygame.mixer.init()
            pygame.mixer.music.load(path)
        except (pygame.error, OSError) as exc:
            logger.warning("Music disabled: %s", exc)
            return
        self.enabled=True

    def toggle(self) -> bool:
        """Play or pause the track; returns whether it is now playing."""
        if not self.enabled: return False
        if self.playing:
            pygame.mixer.music.pause()
        elif self.started:
            pygame.mixer.music.unpause()
        else:
            pygame.mixer.music.play(-1); self.started=True
        self.playing=not self.playing
        return self.playing
