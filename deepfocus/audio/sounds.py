"""Sound synthesis and playback using numpy + QSoundEffect.

Both sounds are generated programmatically as WAV files using sine-wave
synthesis with ADSR envelopes, then cached to disk so later launches
skip the synthesis.

Sound names
-----------
- ``completion``: tri-tone chime played when a countdown reaches zero
- ``select``:     short tick played when a duration step is taken
"""

from __future__ import annotations

import io
import logging
import wave
from pathlib import Path
from typing import Callable

import numpy as np

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QSoundEffect

from ..paths import APP_SUPPORT_DIR
from ..timer.modes import Mode


logger = logging.getLogger(__name__)

# ── paths ────────────────────────────────────────────────────────────────

SOUNDS_DIR = APP_SUPPORT_DIR / "sounds"

SOUND_NAMES = ("completion", "select")

SAMPLE_RATE = 44100


# ═══════════════════════════════════════════════════════════════════════════
#  WAV SYNTHESIS HELPERS
# ═══════════════════════════════════════════════════════════════════════════


def _make_envelope(
    length: int,
    attack: int = 200,
    decay: int = 400,
    sustain_level: float = 0.7,
    release: int = 800,
) -> np.ndarray:
    """ADSR envelope (all durations in samples)."""
    env = np.ones(length, dtype=np.float64)
    a = min(attack, length)
    if a > 0:
        env[:a] = np.linspace(0.0, 1.0, a)
    d_end = min(a + decay, length)
    if d_end > a:
        env[a:d_end] = np.linspace(1.0, sustain_level, d_end - a)
    s_end = max(length - release, d_end)
    if s_end > d_end:
        env[d_end:s_end] = sustain_level
    if s_end < length:
        env[s_end:] = np.linspace(sustain_level, 0.0, length - s_end)
    return env


def _sine(freq: float, duration_s: float) -> np.ndarray:
    t = np.linspace(0, duration_s, int(SAMPLE_RATE * duration_s), endpoint=False)
    return np.sin(2 * np.pi * freq * t)


def _to_wav_bytes(samples: np.ndarray) -> bytes:
    """Convert a float64 numpy array (-1..1) to 16-bit PCM WAV bytes."""
    samples = np.clip(samples, -1.0, 1.0)
    int_samples = (samples * 32767).astype(np.int16)

    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(int_samples.tobytes())
    return buf.getvalue()


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND GENERATORS
# ═══════════════════════════════════════════════════════════════════════════


def _generate_tritone() -> bytes:
    """Completion chime: three rising notes (E5, G#5, B5), last one ringing out."""
    notes = [659.25, 830.61, 987.77]
    parts: list[np.ndarray] = []
    for i, freq in enumerate(notes):
        last = i == len(notes) - 1
        duration = 0.45 if last else 0.13
        tone = _sine(freq, duration) * 0.5 + _sine(freq * 2, duration) * 0.06
        env = _make_envelope(
            len(tone),
            attack=80,
            decay=300 if last else 150,
            sustain_level=0.45 if last else 0.3,
            release=int(SAMPLE_RATE * 0.3) if last else 250,
        )
        parts.append(tone * env)
        if not last:
            parts.append(np.zeros(int(SAMPLE_RATE * 0.025)))
    return _to_wav_bytes(np.concatenate(parts))


def _generate_select() -> bytes:
    """Barely-there selection tick."""
    duration = 0.012
    n_samples = int(SAMPLE_RATE * duration)
    tick = _sine(1500.0, duration) * 0.18
    env = _make_envelope(n_samples, attack=15, decay=40, sustain_level=0.0, release=n_samples - 55)
    # Pad with silence so QSoundEffect doesn't clip
    return _to_wav_bytes(np.concatenate([tick * env, np.zeros(int(SAMPLE_RATE * 0.03))]))


_GENERATORS: dict[str, Callable[[], bytes]] = {
    "completion": _generate_tritone,
    "select": _generate_select,
}


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND MANAGER
# ═══════════════════════════════════════════════════════════════════════════


class SoundManager(QObject):
    """Synthesises, caches and plays the app's sounds.

    Doubles as the timer engine's completion-feedback collaborator.

    Usage::

        mgr = SoundManager(parent=self)
        mgr.set_volume(70)
        engine = TimerEngine(feedback=mgr)
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
    ) -> None:
        super().__init__(parent)
        self._enabled = True
        self._volume = 0.7  # 0.0–1.0
        self._sounds_dir = sounds_dir or SOUNDS_DIR
        self._effects: dict[str, QSoundEffect] = {}

        try:
            self._ensure_wav_files()
        except OSError:
            logger.warning("could not write sounds to %s", self._sounds_dir, exc_info=True)
        self._load_effects()

    # ── public API ────────────────────────────────────────────────────

    def set_volume(self, level: int) -> None:
        """Set volume (0-100).  Updates all loaded effects."""
        self._volume = max(0, min(level, 100)) / 100.0
        for effect in self._effects.values():
            effect.setVolume(self._volume)

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    def play(self, name: str) -> None:
        """Play a sound by name.  No-op if disabled or name unknown."""
        if not self._enabled:
            return
        effect = self._effects.get(name)
        if effect is None:
            logger.debug("sound %r not loaded", name)
            return
        effect.play()

    def on_completion(self, mode: Mode) -> None:
        self.play("completion")

    def on_selection(self) -> None:
        self.play("select")

    @property
    def volume(self) -> int:
        """Current volume as 0-100 integer."""
        return round(self._volume * 100)

    @property
    def enabled(self) -> bool:
        return self._enabled

    # ── internal ──────────────────────────────────────────────────────

    def _ensure_wav_files(self) -> None:
        """Generate any missing WAV files to the cache directory."""
        self._sounds_dir.mkdir(parents=True, exist_ok=True)
        for name, gen_fn in _GENERATORS.items():
            path = self._sounds_dir / f"{name}.wav"
            if not path.exists():
                path.write_bytes(gen_fn())

    def _load_effects(self) -> None:
        for name in SOUND_NAMES:
            path = self._sounds_dir / f"{name}.wav"
            if path.exists():
                effect = QSoundEffect(self)
                effect.setSource(QUrl.fromLocalFile(str(path)))
                effect.setVolume(self._volume)
                self._effects[name] = effect
