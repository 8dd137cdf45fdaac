"""
Tests for cue synthesis and mixer playback.

Actual playback is hard to test, so we check the waveforms and that the
feedback degrades to silence when the mixer is unavailable.
"""
from unittest.mock import MagicMock, patch

import numpy as np
import pygame
import pytest

from engine.api import Cue
from engine.audio.mixer_feedback import MixerFeedback
from engine.audio.synth import SAMPLE_RATE, render_cue, start_wave, to_pcm16


@pytest.mark.parametrize("cue", list(Cue))
def test_cue_waveform_is_bounded_and_fades_out(cue):
    wave = render_cue(cue)
    assert wave.ndim == 1
    assert 0 < len(wave) <= 2 * SAMPLE_RATE
    assert np.all(np.isfinite(wave))
    assert np.max(np.abs(wave)) <= 1.0
    assert wave[-1] == pytest.approx(0.0, abs=1e-9)


def test_cues_are_distinct():
    lengths = {cue: len(render_cue(cue)) for cue in Cue}
    assert len(set(lengths.values())) == len(Cue)


def test_render_is_cached_and_read_only():
    wave = render_cue(Cue.HIT)
    assert render_cue(Cue.HIT) is wave
    with pytest.raises(ValueError):
        wave[0] = 1.0


def test_start_cue_has_a_rest():
    wave = start_wave()
    n = len(wave) - 1
    rest = slice(4 * n // 7 + 1, 5 * n // 7)
    assert np.all(wave[rest] == 0.0)


def test_pcm16_scaling_and_channels():
    wave = np.array([1.0, -1.0, 0.0, 2.0])
    mono = to_pcm16(wave, volume=1.0)
    assert mono.dtype == np.int16
    assert list(mono) == [32767, -32767, 0, 32767]
    stereo = to_pcm16(wave, volume=0.5, channels=2)
    assert stereo.shape == (4, 2)
    assert stereo[0, 0] == stereo[0, 1] == 16383


def test_disabled_feedback_is_silent():
    fb = MixerFeedback(enabled=False)
    assert fb.sounds == {}
    fb.play(Cue.HIT)


def test_mixer_failure_disables_audio():
    with patch("pygame.mixer.init", side_effect=pygame.error("no audio device")):
        fb = MixerFeedback(enabled=True)
    assert fb.enabled is False
    assert fb.sounds == {}
    fb.play(Cue.OVER)


def test_play_uses_sound_for_cue():
    fb = MixerFeedback(enabled=False)
    fb.enabled = True
    sound = MagicMock()
    fb.sounds = {Cue.MISS: sound}
    fb.play(Cue.MISS)
    sound.play.assert_called_once()
    fb.play(Cue.HIT)
    assert sound.play.call_count == 1
