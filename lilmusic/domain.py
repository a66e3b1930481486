"""Equalizer domain types and the built-in preset table."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

BAND_COUNT = 10

BAND_FREQUENCIES_HZ: tuple[float, ...] = (
    60.0,
    170.0,
    310.0,
    600.0,
    1000.0,
    3000.0,
    6000.0,
    12000.0,
    14000.0,
    16000.0,
)


class EqualizerPresetId(Enum):
    """Identifier of an equalizer preset; the value is its stored text form."""

    FLAT = "flat"
    BASS_BOOST = "bass_boost"
    TREBLE_BOOST = "treble_boost"
    VOCAL = "vocal"
    POP = "pop"
    ROCK = "rock"
    ELECTRONIC = "electronic"
    HIP_HOP = "hip_hop"
    JAZZ = "jazz"
    CLASSICAL = "classical"
    ACOUSTIC = "acoustic"
    DANCE = "dance"
    PIANO = "piano"
    SPOKEN_PODCAST = "spoken_podcast"
    LOUDNESS = "loudness"
    CUSTOM = "custom"

    def __str__(self) -> str:
        return self.value


class EqualizerStatus(Enum):
    """Availability of the equalizer as a DSP feature."""

    LOADING = "loading"
    READY = "ready"
    AUDIO_ENGINE_UNAVAILABLE = "audio_engine_unavailable"
    UNSUPPORTED_AUDIO_PATH = "unsupported_audio_path"


@dataclass
class EqualizerBand:
    """One equalizer band: a fixed centre frequency and a gain."""

    center_frequency_hz: float
    gain_db: float = 0.0


@dataclass(frozen=True)
class EqualizerPreset:
    """A named set of gains, one per band."""

    id: EqualizerPresetId
    name: str
    gains_db: tuple[float, ...]


def _default_bands() -> list[EqualizerBand]:
    return [EqualizerBand(center_frequency_hz=frequency) for frequency in BAND_FREQUENCIES_HZ]


def _zero_gains() -> list[float]:
    return [0.0] * BAND_COUNT


@dataclass
class EqualizerState:
    """Snapshot of the whole equalizer configuration."""

    enabled: bool = False
    active_preset_id: EqualizerPresetId = EqualizerPresetId.FLAT
    bands: list[EqualizerBand] = field(default_factory=_default_bands)
    last_nonflat_band_gains_db: list[float] = field(default_factory=_zero_gains)
    output_gain_db: float = 0.0
    headroom_compensation_db: float = 0.0
    status: EqualizerStatus = EqualizerStatus.LOADING
    error_message: str = ""
    available_presets: list[EqualizerPreset] = field(default_factory=list)


def preset_id_from_string(text: str) -> EqualizerPresetId | None:
    """Return the preset id stored as ``text``, or None if it is unknown."""
    try:
        return EqualizerPresetId(text)
    except ValueError:
        return None


_PRESET_TABLE: tuple[tuple[EqualizerPresetId, str, tuple[float, ...]], ...] = (
    (EqualizerPresetId.FLAT, "Flat", (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)),
    (EqualizerPresetId.BASS_BOOST, "Bass Boost", (5.0, 4.5, 3.5, 2.0, 1.0, 0.0, -1.0, -1.5, -2.0, -2.5)),
    (EqualizerPresetId.TREBLE_BOOST, "Treble Boost", (-2.0, -1.5, -1.0, -0.5, 0.0, 1.0, 2.0, 3.5, 4.5, 5.0)),
    (EqualizerPresetId.VOCAL, "Vocal", (-2.0, -1.5, -0.5, 1.0, 2.5, 3.5, 3.0, 1.5, 0.5, -1.0)),
    (EqualizerPresetId.POP, "Pop", (-1.0, 1.5, 3.0, 3.5, 2.0, -0.5, -1.0, 1.0, 2.0, 2.5)),
    (EqualizerPresetId.ROCK, "Rock", (4.0, 3.0, 1.0, -1.0, -1.5, 0.5, 2.0, 3.0, 3.5, 4.0)),
    (EqualizerPresetId.ELECTRONIC, "Electronic", (4.0, 3.5, 2.0, 0.5, -1.0, -0.5, 1.5, 3.0, 3.5, 3.0)),
    (EqualizerPresetId.HIP_HOP, "Hip-Hop", (5.0, 4.5, 2.5, 1.0, -0.5, -1.0, 0.5, 1.5, 2.0, 1.0)),
    (EqualizerPresetId.JAZZ, "Jazz", (1.0, 1.5, 1.0, 0.5, 1.5, 2.5, 2.0, 1.5, 1.0, 1.0)),
    (EqualizerPresetId.CLASSICAL, "Classical", (0.0, 0.0, 0.5, 1.5, 2.0, 1.5, 0.5, 0.0, 0.5, 1.0)),
    (EqualizerPresetId.ACOUSTIC, "Acoustic", (-0.5, 0.5, 1.5, 2.5, 2.0, 1.0, 0.5, 1.0, 1.5, 1.0)),
    (EqualizerPresetId.DANCE, "Dance", (4.5, 4.0, 2.5, 0.5, -0.5, 1.0, 2.5, 3.5, 4.0, 3.0)),
    (EqualizerPresetId.PIANO, "Piano", (-1.0, -0.5, 0.5, 1.5, 2.5, 3.0, 2.0, 1.0, 0.5, 0.0)),
    (EqualizerPresetId.SPOKEN_PODCAST, "Spoken / Podcast", (-4.0, -3.0, -1.0, 1.0, 3.0, 4.5, 4.0, 2.5, 0.0, -1.0)),
    (EqualizerPresetId.LOUDNESS, "Loudness", (3.0, 2.5, 2.0, 1.0, 0.0, 0.5, 1.5, 2.5, 3.0, 3.0)),
    (EqualizerPresetId.CUSTOM, "Custom", (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)),
)


def builtin_presets() -> list[EqualizerPreset]:
    """Return the built-in presets, Custom last."""
    return [EqualizerPreset(id=preset_id, name=name, gains_db=gains) for preset_id, name, gains in _PRESET_TABLE]


def default_equalizer_state() -> EqualizerState:
    """Return the start-up state: Flat, disabled, presets available, still loading."""
    return EqualizerState(
        enabled=False,
        active_preset_id=EqualizerPresetId.FLAT,
        bands=_default_bands(),
        last_nonflat_band_gains_db=_zero_gains(),
        output_gain_db=0.0,
        status=EqualizerStatus.LOADING,
        available_presets=builtin_presets(),
    )