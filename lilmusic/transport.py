"""Playback transport state shared between the control side and the render worker."""

from __future__ import annotations

import copy
import threading
from dataclasses import dataclass
from enum import Enum

NO_STREAM_MESSAGE = "The player has not loaded an audio stream yet."
SEEK_NOT_READY_MESSAGE = "Cannot seek before the player has loaded the audio stream."
DEFAULT_COMMAND_TIMEOUT_S = 0.008


class PlaybackError(RuntimeError):
    """Raised when a transport command cannot be carried out in the current state."""


class PlaybackStatus(Enum):
    """What the transport is doing, as the UI sees it."""

    IDLE = "idle"
    LOADING = "loading"
    PLAYING = "playing"
    PAUSED = "paused"
    ERROR = "error"


@dataclass
class PlaybackState:
    """Snapshot of the transport for the UI."""

    status: PlaybackStatus = PlaybackStatus.IDLE
    stream_url: str = ""
    position_ms: int = 0
    duration_ms: int = 0
    volume_percent: int = 100
    error_message: str = ""
    completion_token: int = 0


@dataclass(frozen=True)
class TransportCommand:
    """Work the render worker has to do on its next tick."""

    shutdown: bool = False
    reinitialize_audio_path: bool = False
    load_generation: int | None = None
    seek_ms: int | None = None
    should_play: bool = False

    @property
    def should_pause(self) -> bool:
        return not self.should_play


class PlaybackTransport:
    """Thread-safe transport state machine.

    Control methods (load, play, pause, seek, volume) record the user's intent
    and wake the worker; the worker reports progress through the event methods
    (source_loaded, rendered, end_of_stream and so on).
    """

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.RLock())
        self._state = PlaybackState()
        self._shutting_down = False
        self._playback_intent_playing = False
        self._source_ready = False
        # The audio path must be brought up once at start.
        self._device_reinitialization_requested = True
        self._requested_generation = 0
        self._active_generation = 0
        self._pending_seek_ms: int | None = None
        self._requested_stream_url = ""
        self._current_stream_url = ""

    @property
    def source_ready(self) -> bool:
        with self._condition:
            return self._source_ready

    @property
    def requested_stream_url(self) -> str:
        with self._condition:
            return self._requested_stream_url

    @property
    def current_stream_url(self) -> str:
        with self._condition:
            return self._current_stream_url

    @property
    def playback_intent_playing(self) -> bool:
        with self._condition:
            return self._playback_intent_playing

    # Control side

    def load(self, stream_url: str) -> None:
        """Request a new source; playback starts as soon as it is ready."""
        if not stream_url:
            raise ValueError("No stream_url given for playback.")
        with self._condition:
            self._requested_stream_url = stream_url
            self._requested_generation += 1
            self._playback_intent_playing = True
            self._pending_seek_ms = None
            self._state.status = PlaybackStatus.LOADING
            self._state.stream_url = stream_url
            self._state.error_message = ""
            self._state.position_ms = 0
            self._state.duration_ms = 0
            self._current_stream_url = ""
            self._source_ready = False
            self._condition.notify_all()

    def play(self) -> None:
        """Ask the transport to play; raises if nothing has been loaded."""
        with self._condition:
            self._playback_intent_playing = True
            if not self._requested_stream_url and not self._current_stream_url:
                self._state.status = PlaybackStatus.ERROR
                self._state.error_message = NO_STREAM_MESSAGE
                raise PlaybackError(NO_STREAM_MESSAGE)
            if not self._source_ready:
                self._state.status = PlaybackStatus.LOADING
            else:
                self._state.status = PlaybackStatus.PLAYING
                self._state.error_message = ""
            self._condition.notify_all()

    def pause(self) -> None:
        """Ask the transport to pause, keeping the source and position."""
        with self._condition:
            self._playback_intent_playing = False
            if self._current_stream_url or self._source_ready:
                self._state.status = PlaybackStatus.PAUSED
                self._state.error_message = ""
            self._condition.notify_all()

    def seek_to(self, position_ms: int) -> None:
        """Queue a seek; only allowed once the source is ready."""
        with self._condition:
            if not self._source_ready:
                raise PlaybackError(SEEK_NOT_READY_MESSAGE)
            self._pending_seek_ms = max(int(position_ms), 0)
            self._state.position_ms = self._pending_seek_ms
            if self._playback_intent_playing:
                self._state.status = PlaybackStatus.LOADING
            self._condition.notify_all()

    def set_volume_percent(self, volume_percent: int) -> None:
        """Set the playback volume, clamped to 0..100."""
        with self._condition:
            self._state.volume_percent = max(0, min(100, int(volume_percent)))
            self._condition.notify_all()

    def snapshot(self) -> PlaybackState:
        """Return an independent copy of the current playback state."""
        with self._condition:
            return copy.copy(self._state)

    def request_shutdown(self) -> None:
        """Tell the worker to leave its loop."""
        with self._condition:
            self._shutting_down = True
            self._condition.notify_all()

    # Worker side

    def next_command(self, timeout: float = DEFAULT_COMMAND_TIMEOUT_S) -> TransportCommand:
        """Wait briefly for work and return it, consuming one-shot requests."""
        with self._condition:
            self._condition.wait_for(self._has_work, timeout)
            if self._shutting_down:
                return TransportCommand(shutdown=True)

            reinitialize = self._device_reinitialization_requested
            self._device_reinitialization_requested = False

            load_generation = (
                self._requested_generation
                if self._requested_generation != self._active_generation
                else None
            )

            seek_ms = self._pending_seek_ms
            self._pending_seek_ms = None

            return TransportCommand(
                reinitialize_audio_path=reinitialize,
                load_generation=load_generation,
                seek_ms=seek_ms,
                should_play=self._playback_intent_playing,
            )

    def source_loaded(self, duration_ms: int) -> None:
        """The requested source is open and ready to decode."""
        with self._condition:
            self._active_generation = self._requested_generation
            self._current_stream_url = self._requested_stream_url
            self._source_ready = True
            self._state.stream_url = self._current_stream_url
            self._state.duration_ms = max(int(duration_ms), 0)
            self._state.position_ms = 0
            self._state.error_message = ""
            self._state.status = (
                PlaybackStatus.LOADING if self._playback_intent_playing else PlaybackStatus.PAUSED
            )
            self._condition.notify_all()

    def source_failed(self, message: str) -> None:
        """Opening the requested source failed."""
        with self._condition:
            self._active_generation = self._requested_generation
            self._source_ready = False
            self._state.status = PlaybackStatus.ERROR
            self._state.error_message = message
            self._current_stream_url = ""
            self._condition.notify_all()

    def seek_performed(self, position_ms: int) -> None:
        """The worker has moved the decoder to ``position_ms``."""
        with self._condition:
            self._state.position_ms = int(position_ms)
            self._state.status = (
                PlaybackStatus.LOADING if self._playback_intent_playing else PlaybackStatus.PAUSED
            )
            self._state.error_message = ""

    def rendering_started(self) -> None:
        """The output device has started consuming audio."""
        with self._condition:
            self._state.status = PlaybackStatus.PLAYING
            self._state.error_message = ""

    def rendering_paused(self) -> None:
        """The output device has been stopped."""
        with self._condition:
            self._state.status = PlaybackStatus.PAUSED
            self._state.error_message = ""

    def rendered(self, position_ms: int, duration_ms: int) -> None:
        """A block of audio was written; update progress."""
        with self._condition:
            self._state.position_ms = int(position_ms)
            self._state.duration_ms = int(duration_ms)
            self._state.status = (
                PlaybackStatus.PLAYING if self._playback_intent_playing else PlaybackStatus.PAUSED
            )
            self._state.error_message = ""

    def end_of_stream(self) -> None:
        """The source has played out; bump the completion token for auto-next."""
        with self._condition:
            self._playback_intent_playing = False
            self._state.status = PlaybackStatus.IDLE
            self._state.position_ms = self._state.duration_ms
            self._state.completion_token += 1

    def device_lost(self) -> None:
        """The output device vanished; ask the worker to rebuild the audio path."""
        with self._condition:
            self._source_ready = False
            self._device_reinitialization_requested = True
            self._state.status = PlaybackStatus.LOADING
            self._condition.notify_all()

    def _has_work(self) -> bool:
        return (
            self._shutting_down
            or self._device_reinitialization_requested
            or self._requested_generation != self._active_generation
            or self._pending_seek_ms is not None
            or self._transport_state_changed()
        )

    def _transport_state_changed(self) -> bool:
        status = self._state.status
        if self._playback_intent_playing:
            return status in (PlaybackStatus.LOADING, PlaybackStatus.PAUSED)
        return status in (PlaybackStatus.PLAYING, PlaybackStatus.LOADING)