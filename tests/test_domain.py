import pytest

from lilmusic.domain import (
    BAND_COUNT,
    BAND_FREQUENCIES_HZ,
    EqualizerPresetId,
    EqualizerState,
    EqualizerStatus,
    builtin_presets,
    default_equalizer_state,
    preset_id_from_string,
)


def test_builtin_presets_cover_every_id_once():
    presets = builtin_presets()
    ids = [preset.id for preset in presets]
    assert len(ids) == len(set(ids))
    assert set(ids) == set(EqualizerPresetId)


def test_custom_preset_is_last_and_flat_is_first():
    presets = builtin_presets()
    assert presets[0].id is EqualizerPresetId.FLAT
    assert presets[-1].id is EqualizerPresetId.CUSTOM


def test_every_preset_has_one_gain_per_band():
    assert all(len(preset.gains_db) == BAND_COUNT for preset in builtin_presets())


def test_bass_boost_values_and_name():
    bass = next(p for p in builtin_presets() if p.id is EqualizerPresetId.BASS_BOOST)
    assert bass.name == "Bass Boost"
    assert bass.gains_db == (5.0, 4.5, 3.5, 2.0, 1.0, 0.0, -1.0, -1.5, -2.0, -2.5)


def test_spoken_podcast_name():
    names = {p.id: p.name for p in builtin_presets()}
    assert names[EqualizerPresetId.SPOKEN_PODCAST] == "Spoken / Podcast"
    assert names[EqualizerPresetId.HIP_HOP] == "Hip-Hop"


@pytest.mark.parametrize("preset_id", list(EqualizerPresetId))
def test_preset_id_string_round_trip(preset_id):
    assert preset_id_from_string(str(preset_id)) is preset_id


def test_unknown_preset_text_gives_none():
    assert preset_id_from_string("no-such-preset") is None
    assert preset_id_from_string("") is None


def test_default_state_is_flat_and_disabled():
    state = default_equalizer_state()
    assert state.enabled is False
    assert state.active_preset_id is EqualizerPresetId.FLAT
    assert state.status is EqualizerStatus.LOADING
    assert [band.gain_db for band in state.bands] == [0.0] * BAND_COUNT
    assert state.last_nonflat_band_gains_db == [0.0] * BAND_COUNT
    assert state.output_gain_db == 0.0


def test_default_state_band_frequencies():
    state = default_equalizer_state()
    assert tuple(band.center_frequency_hz for band in state.bands) == BAND_FREQUENCIES_HZ


def test_default_state_lists_presets():
    assert default_equalizer_state().available_presets == builtin_presets()


def test_states_do_not_share_band_lists():
    first = EqualizerState()
    second = EqualizerState()
    first.bands[0].gain_db = 3.0
    first.last_nonflat_band_gains_db[0] = 3.0
    assert second.bands[0].gain_db == 0.0
    assert second.last_nonflat_band_gains_db[0] == 0.0