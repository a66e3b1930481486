"""Equalizer model and presets, parameter ramps, PCM helpers, playback transport state,
settings persistence, favourites and runtime paths for a desktop music player."""

__version__ = "0.1.0"