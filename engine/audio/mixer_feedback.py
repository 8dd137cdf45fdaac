from __future__ import annotations
import logging
from typing import Dict

import pygame

from engine.api.feedback import Cue, Feedback
from engine.audio.synth import SAMPLE_RATE, render_cue, to_pcm16

log = logging.getLogger(__name__)


class MixerFeedback(Feedback):
    """
    Plays the procedurally generated cue sounds through pygame.mixer.

    If the mixer cannot be initialized (no audio device, headless CI) the
    feedback stays silent and gameplay is unaffected.
    """

    def __init__(self, enabled: bool = True, volume: float = 0.3):
        self.volume = volume
        self.enabled = enabled
        self.sounds: Dict[Cue, pygame.mixer.Sound] = {}
        if self.enabled:
            self._init_audio()

    def _init_audio(self) -> None:
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
            _, _, channels = pygame.mixer.get_init()
            for cue in Cue:
                pcm = to_pcm16(render_cue(cue), self.volume, channels)
                self.sounds[cue] = pygame.sndarray.make_sound(pcm)
        except pygame.error as e:
            log.warning("audio disabled: %s", e)
            self.enabled = False
            self.sounds = {}

    def play(self, cue: Cue) -> None:
        if not self.enabled:
            return
        sound = self.sounds.get(cue)
        if sound is not None:
            sound.play()
