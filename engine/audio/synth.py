"""
Procedural sound effects.

Each cue is a short waveform computed sample-by-sample from its index with
numpy, in the style of tiny byte-beat synths: square-ish tones whose sign is
chosen by bit patterns of the sample index, shaped by a linear fade.

All generators return float64 arrays in [-1, 1] at SAMPLE_RATE.
"""
from __future__ import annotations
from functools import lru_cache

import numpy as np

from engine.api.feedback import Cue

SAMPLE_RATE = 48000

START_NOTES = [0, 4, 7, 12, None, 7, 12]  # semitones, None is a rest


def _fade(i: np.ndarray, n: float) -> np.ndarray:
    return (n - i) / n


def _bits(values: np.ndarray) -> np.ndarray:
    return values.astype(np.int64)


def shoot_wave() -> np.ndarray:
    n = 16000
    i = np.arange(n + 1, dtype=np.float64)
    q = _fade(i, n) ** 2.1
    attack = _bits(i + np.sin(-i / 900) * 10) & 16
    tail = _bits(i) & 13
    on = np.where(i < n / 7, attack, tail)
    return np.where(on != 0, q, -q)


def miss_wave() -> np.ndarray:
    n = 10000
    i = np.arange(n + 1, dtype=np.float64)
    return np.sin((i / 55) * np.sin(i / 99) + np.sin(i / 100)) * _fade(i, n)


def start_wave() -> np.ndarray:
    n = 35000
    count = len(START_NOTES)
    i = np.arange(n + 1, dtype=np.float64)

    semitones = np.array([np.nan if s is None else s for s in START_NOTES] + [np.nan])
    idx = np.minimum(_bits(count * i / n), count)
    note = semitones[idx]
    rest = np.isnan(note)

    ratio = np.power(2.0, np.where(rest, 0.0, note) / 12) * 0.8
    q = _fade((i * count) % n, n)
    wave = np.where(_bits(i * ratio) & 64, q, -q)
    wave[rest] = 0.0
    return wave


def over_wave() -> np.ndarray:
    n = 50000
    i = np.arange(n + 1, dtype=np.float64)
    sign = np.where(_bits(np.power(i, 0.9)) & 200, 1.0, -1.0)
    return sign * _fade(i, n) ** 3


GENERATORS = {
    Cue.START: start_wave,
    Cue.HIT: shoot_wave,
    Cue.MISS: miss_wave,
    Cue.OVER: over_wave,
}


@lru_cache(maxsize=None)
def render_cue(cue: Cue) -> np.ndarray:
    wave = GENERATORS[cue]()
    wave.setflags(write=False)
    return wave


def to_pcm16(wave: np.ndarray, volume: float = 1.0, channels: int = 1) -> np.ndarray:
    """Scale a [-1, 1] waveform to int16 samples, one column per channel."""
    pcm = (np.clip(wave, -1.0, 1.0) * 32767 * volume).astype(np.int16)
    if channels == 1:
        return pcm
    return np.ascontiguousarray(np.column_stack([pcm] * channels))
