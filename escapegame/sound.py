# Sound effects

import os

import pygame

from .constants import LEVEL_MUSIC_PATHS, HIT_SFX_PATH


class SoundEffect:
    """
    pygame mixer implementation of the engine's audio notifier.

    Playback is fire-and-forget: the mixer streams music and one-shot sounds
    on its own, and the engine never waits for either.
    """

    def __init__(self, bgm_volume: float = 0.5, sfx_volume: float = 0.7):
        self.muted = False

        # Volume settings (0.0 to 1.0)
        self.bgm_volume = bgm_volume
        self.sfx_volume = sfx_volume

        self.hitSound = None
        if os.path.exists(HIT_SFX_PATH):
            try:
                self.hitSound = pygame.mixer.Sound(HIT_SFX_PATH)
                self.hitSound.set_volume(self.sfx_volume)
            except pygame.error as e:
                print(f"Failed to load hit sound effect: {e}")
        else:
            print(f"Hit sound effect file not found: {HIT_SFX_PATH}")

    def play_level_music(self, level: int) -> None:
        """Stop the current track, then loop the one for ``level``."""
        path = LEVEL_MUSIC_PATHS[level % len(LEVEL_MUSIC_PATHS)]
        pygame.mixer.music.stop()
        if not os.path.exists(path):
            print(f"Background music file not found: {path}")
            return
        try:
            pygame.mixer.music.load(path)
            pygame.mixer.music.set_volume(self.bgm_volume)
            pygame.mixer.music.play(-1)
            if self.muted:
                pygame.mixer.music.pause()
        except pygame.error as e:
            print(f"Failed to load background music: {e}")

    def play_hit(self) -> None:
        if self.hitSound and not self.muted:
            self.hitSound.play()

    def toggleMute(self):
        self.muted = not self.muted
        if self.muted:
            pygame.mixer.music.pause()
        else:
            pygame.mixer.music.unpause()

    def set_bgm_volume(self, volume):
        """Set background music volume (0.0 to 1.0)"""
        self.bgm_volume = max(0.0, min(1.0, volume))  # Clamp between 0 and 1
        pygame.mixer.music.set_volume(self.bgm_volume)

