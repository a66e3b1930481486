"""SQLite storage for the user's equalizer settings."""

from __future__ import annotations

import os
import sqlite3
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path

from lilmusic.domain import (
    BAND_COUNT,
    BAND_FREQUENCIES_HZ,
    EqualizerBand,
    EqualizerState,
    preset_id_from_string,
)

# The table always holds one logical row with id = 1, so it acts as an app-level settings store.
_CREATE_TABLE_SQL = (
    "CREATE TABLE IF NOT EXISTS equalizer_settings ("
    "id INTEGER PRIMARY KEY CHECK(id = 1),"
    "enabled INTEGER NOT NULL,"
    "active_preset_id TEXT NOT NULL,"
    "custom_band_gains TEXT NOT NULL,"
    "last_nonflat_user_state TEXT NOT NULL,"
    "output_gain_db REAL NOT NULL DEFAULT 0.0,"
    "updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP"
    ");"
)

_ADD_OUTPUT_GAIN_SQL = (
    "ALTER TABLE equalizer_settings ADD COLUMN output_gain_db REAL NOT NULL DEFAULT 0.0;"
)

_SELECT_SQL = (
    "SELECT enabled, active_preset_id, custom_band_gains, last_nonflat_user_state, output_gain_db "
    "FROM equalizer_settings WHERE id = 1;"
)

_UPSERT_SQL = (
    "INSERT INTO equalizer_settings (id, enabled, active_preset_id, custom_band_gains, "
    "last_nonflat_user_state, output_gain_db, updated_at) "
    "VALUES (1, ?, ?, ?, ?, ?, CURRENT_TIMESTAMP) "
    "ON CONFLICT(id) DO UPDATE SET "
    "enabled = excluded.enabled, "
    "active_preset_id = excluded.active_preset_id, "
    "custom_band_gains = excluded.custom_band_gains, "
    "last_nonflat_user_state = excluded.last_nonflat_user_state, "
    "output_gain_db = excluded.output_gain_db, "
    "updated_at = CURRENT_TIMESTAMP;"
)


def serialize_band_gains(gains_db: Iterable[float]) -> str:
    """Join gains into a compact comma-separated string (six significant digits)."""
    return ",".join(format(float(gain), "g") for gain in gains_db)


def deserialize_band_gains(text: str) -> list[float]:
    """Parse up to ten comma-separated gains; missing entries are 0.

    A malformed entry raises ValueError.
    """
    gains = [0.0] * BAND_COUNT
    if not text:
        return gains
    tokens = text.split(",")
    if tokens[-1] == "":
        tokens.pop()
    for index, token in enumerate(tokens[:BAND_COUNT]):
        gains[index] = float(token)
    return gains


def _ensure_schema(connection: sqlite3.Connection) -> None:
    connection.execute(_CREATE_TABLE_SQL)
    # Inline migration for older databases; a duplicate column is expected and fine.
    try:
        connection.execute(_ADD_OUTPUT_GAIN_SQL)
    except sqlite3.OperationalError as error:
        if "duplicate column name" not in str(error):
            raise


class SqliteEqualizerSettingsRepository:
    """Keeps the last equalizer snapshot in a single-row SQLite table."""

    def __init__(self, database_file_path: str | os.PathLike[str]) -> None:
        self._database_file_path = Path(database_file_path)

    @property
    def database_file_path(self) -> Path:
        return self._database_file_path

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        self._database_file_path.parent.mkdir(parents=True, exist_ok=True)
        connection = sqlite3.connect(self._database_file_path)
        try:
            _ensure_schema(connection)
            with connection:
                yield connection
        finally:
            connection.close()

    def load(self) -> EqualizerState | None:
        """Return the stored snapshot, or None if nothing has been saved yet."""
        with self._connect() as connection:
            row = connection.execute(_SELECT_SQL).fetchone()
        if row is None:
            return None

        enabled, preset_text, gains_text, last_nonflat_text, output_gain = row
        state = EqualizerState()
        state.enabled = bool(enabled)
        if preset_text is not None:
            preset_id = preset_id_from_string(str(preset_text))
            if preset_id is not None:
                state.active_preset_id = preset_id
        state.output_gain_db = float(output_gain) if output_gain is not None else 0.0

        gains_db = deserialize_band_gains(gains_text or "")
        last_nonflat_db = deserialize_band_gains(last_nonflat_text or "")
        # Band frequencies are fixed by the DSP and are not stored.
        state.bands = [
            EqualizerBand(center_frequency_hz=frequency, gain_db=gain)
            for frequency, gain in zip(BAND_FREQUENCIES_HZ, gains_db)
        ]
        state.last_nonflat_band_gains_db = last_nonflat_db
        return state

    def save(self, state: EqualizerState) -> None:
        """Overwrite the stored snapshot with ``state``."""
        # The current band gains are stored even for a built-in preset,
        # so UI and DSP restore identically after a restart.
        parameters = (
            1 if state.enabled else 0,
            str(state.active_preset_id),
            serialize_band_gains(band.gain_db for band in state.bands),
            serialize_band_gains(state.last_nonflat_band_gains_db),
            float(state.output_gain_db),
        )
        with self._connect() as connection:
            connection.execute(_UPSERT_SQL, parameters)