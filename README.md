# lilmusic

Building blocks for a small desktop music player, in pure Python with no
runtime dependencies:

- the equalizer domain model and built-in presets (`lilmusic.domain`),
- a linear parameter ramp for click-free changes (`lilmusic.smoother`),
- PCM helpers for an output device (`lilmusic.pcm`),
- a thread-safe playback transport state machine (`lilmusic.transport`),
- SQLite persistence for equalizer settings (`lilmusic.settings_repository`),
- an in-memory favourites store (`lilmusic.library`),
- runtime paths and the web UI entry page (`lilmusic.paths`, `lilmusic.webui`).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Equalizer model and presets

There are ten bands centred on 60, 170, 310, 600, 1000, 3000, 6000, 12000,
14000 and 16000 Hz (`BAND_FREQUENCIES_HZ`). `builtin_presets()` returns
the sixteen built-in presets, Flat first and Custom last.

```python
from lilmusic.domain import (
    EqualizerPresetId,
    builtin_presets,
    default_equalizer_state,
    preset_id_from_string,
)

rock = next(p for p in builtin_presets() if p.id is EqualizerPresetId.ROCK)
print(rock.name, rock.gains_db)

state = default_equalizer_state()   # Flat, disabled, status LOADING
preset_id_from_string("hip_hop")    # EqualizerPresetId.HIP_HOP
preset_id_from_string("nope")       # None
```

`str(preset_id)` gives the stored text form, for example `"bass_boost"`.

## Parameter ramps

```python
from lilmusic.smoother import ParameterSmoother

s = ParameterSmoother()
s.set_target(1.0, 100)   # ramp over 100 samples; 0 jumps at once
s.advance(25)            # 0.25
s.advance(100)           # 1.0, exactly the target
```

## PCM helpers

```python
from lilmusic.pcm import RenderFormat, SampleQueue, float_to_pcm16

fmt = RenderFormat(channel_count=2, sample_rate=48000, bits_per_sample=16, block_align=4)
data = fmt.convert([0.5, -0.5, 2.0, -2.0])   # little-endian int16, clamped to [-1, 1]

queue = SampleQueue()
queue.push([0.1, 0.2, 0.3])
block = queue.take(frame_count=2, channel_count=2)   # [0.1, 0.2, 0.3, 0.0]
```

`RenderFormat.convert` handles float, 16-bit and 32-bit output. Other
integer widths give silence of the right length. `volume_percent_to_linear`
and `ticks_100ns_to_milliseconds` cover the usual unit conversions.

## Playback transport

`PlaybackTransport` records what the user asked for (`load`, `play`,
`pause`, `seek_to`, `set_volume_percent`). A render worker collects that
work with `next_command()`, which returns a `TransportCommand`. The worker
reports back through `source_loaded`, `source_failed`, `seek_performed`,
`rendering_started`, `rendering_paused`, `rendered`, `end_of_stream` and
`device_lost`.

```python
from lilmusic.transport import PlaybackStatus, PlaybackTransport

t = PlaybackTransport()
t.load("https://example.com/track.mp3")
cmd = t.next_command()        # reinitialize_audio_path=True, load_generation=1, should_play=True
t.source_loaded(duration_ms=180_000)
t.rendering_started()
assert t.snapshot().status is PlaybackStatus.PLAYING
t.end_of_stream()             # status IDLE, completion_token incremented
```

`play()` before any `load()` raises `PlaybackError`. So does `seek_to()`
before the source is ready. `load("")` raises `ValueError`. Call
`request_shutdown()` to make the next command a shutdown.

## Persisting equalizer settings

```python
from pathlib import Path
from lilmusic.domain import default_equalizer_state
from lilmusic.settings_repository import SqliteEqualizerSettingsRepository

repo = SqliteEqualizerSettingsRepository(Path("data") / "settings.db")
repo.load()                          # None when nothing has been saved yet
repo.save(default_equalizer_state())
restored = repo.load()
```

The database holds a single settings row. Band gains are stored as
comma-separated text; see `serialize_band_gains` and
`deserialize_band_gains`. Band frequencies are not stored; they are
restored from `BAND_FREQUENCIES_HZ`. The parent directory is created if
needed.

## Favourites, paths and the UI page

- `LibraryRepository` keeps favourite track ids in memory. It has
  `set_favorite(track_id, is_favorite)` and `is_favorite(track_id)`.
- `ApplicationPathsResolver().resolve()` returns `ApplicationPaths`. It
  holds the executable directory and `ui/index.html` beside it. It also
  holds a `LilMusic` data directory and its `settings.db`. The data
  directory is under `LOCALAPPDATA` on Windows and under the temp directory
  elsewhere. The constructor accepts `executable_path`, `environ` and
  `platform` overrides.
- `resolve_entry_page(WindowConfiguration(...))` decides what the window
  should show. It returns an `EntryPage` with a percent-encoded `file://`
  URL (from `to_file_url`) if the entry file exists. Otherwise it holds the
  fallback HTML from `build_missing_asset_html`.

## What this package does not do

- It does not filter audio. There is no equalizer signal chain, and nothing
  computes `EqualizerState.headroom_compensation_db`. The presets and state
  are data only.
- It does not decode streams or play sound on a device. `PlaybackTransport`
  only tracks state for a worker that someone else provides.
- It has no single player object that combines transport and equalizer.
- It opens no window and has no command-line program. `lilmusic.webui` only
  chooses the page to display.