"""Background music and sound effects."""

from __future__ import annotations

from pathlib import Path

import pygame


class AudioError(RuntimeError):
    """The mixer could not be opened or a sound could not be loaded."""


class Audio:
    """Opens the mixer, loops the background music and holds the clear sound."""

    def __init__(self, asset_dir: str | Path = "..") -> None:
        audio_dir = Path(asset_dir) / "audio"
        self.music_path = audio_dir / "background.wav"
        self.clear_sound_path = audio_dir / "clear.wav"
        self.clear_sound: pygame.mixer.Sound | None = None
        self.started = False

    def start(self) -> None:
        """Open the mixer, load the sounds and start the music looping."""
        if self.started:
            return
        try:
            pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=2048)
        except pygame.error as exc:
            raise AudioError(f"Ошибка инициализации SDL_mixer: {exc}") from exc
        try:
            try:
                pygame.mixer.music.load(str(self.music_path))
            except (pygame.error, OSError) as exc:
                raise AudioError(f"Ошибка загрузки фоновой музыки: {exc}") from exc
            try:
                self.clear_sound = pygame.mixer.Sound(str(self.clear_sound_path))
            except (pygame.error, OSError) as exc:
                raise AudioError(f"Ошибка загрузки звука очистки: {exc}") from exc
        except AudioError:
            pygame.mixer.quit()
            raise
        pygame.mixer.music.play(-1)
        self.started = True

    def close(self) -> None:
        """Stop the music, release the sounds and close the mixer."""
        if not self.started:
            return
        pygame.mixer.music.stop()
        pygame.mixer.music.unload()
        self.clear_sound = None
        pygame.mixer.quit()
        self.started = False

    def __enter__(self) -> Audio:
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()