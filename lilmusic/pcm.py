"""PCM helpers for the render path: format conversion and the decoded-sample queue."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_INT16_SCALE = 32767.0
_INT32_SCALE = 2147483647.0
_INT32_MAX = 2147483647
_TICKS_PER_MILLISECOND = 10000


def _clamp_unit(value: float) -> float:
    return max(-1.0, min(1.0, value))


def volume_percent_to_linear(volume_percent: int) -> float:
    """Map a 0..100 volume to a 0..1 gain, clamping out-of-range values."""
    return max(0, min(100, int(volume_percent))) / 100.0


def ticks_100ns_to_milliseconds(value_100ns: int) -> int:
    """Convert a 100 ns timestamp to milliseconds; non-positive values give 0."""
    return value_100ns // _TICKS_PER_MILLISECOND if value_100ns > 0 else 0


def float_to_pcm16(samples: Iterable[float]) -> list[int]:
    """Clamp float samples to [-1, 1] and scale them to signed 16-bit integers."""
    return [int(_clamp_unit(sample) * _INT16_SCALE) for sample in samples]


def float_to_pcm32(samples: Iterable[float]) -> list[int]:
    """Clamp float samples to [-1, 1] and scale them to signed 32-bit integers."""
    return [min(_INT32_MAX, int(_clamp_unit(sample) * _INT32_SCALE)) for sample in samples]


@dataclass(frozen=True)
class RenderFormat:
    """Description of the output device's mix format."""

    channel_count: int
    sample_rate: int
    bits_per_sample: int
    block_align: int
    is_float: bool = False

    def convert(self, samples: Sequence[float]) -> bytes:
        """Turn interleaved float samples into little-endian bytes in this format.

        Only whole frames are converted. Integer formats other than 16 and
        32 bits produce silence of the right length.
        """
        if self.channel_count <= 0:
            raise ValueError("render format has no channels")
        frame_count = len(samples) // self.channel_count
        whole = list(samples[: frame_count * self.channel_count])

        if self.is_float:
            return struct.pack(f"<{len(whole)}f", *whole)
        if self.bits_per_sample == 16:
            return struct.pack(f"<{len(whole)}h", *float_to_pcm16(whole))
        if self.bits_per_sample == 32:
            return struct.pack(f"<{len(whole)}i", *float_to_pcm32(whole))
        return bytes(frame_count * self.block_align)


class SampleQueue:
    """FIFO of decoded interleaved float samples waiting to be rendered."""

    def __init__(self) -> None:
        self._samples: list[float] = []
        self._offset = 0

    def __len__(self) -> int:
        return len(self._samples) - self._offset

    @property
    def available_samples(self) -> int:
        return len(self)

    def push(self, samples: Iterable[float]) -> None:
        """Append decoded samples to the end of the queue."""
        self._samples.extend(float(sample) for sample in samples)

    def take(self, frame_count: int, channel_count: int) -> list[float]:
        """Remove and return ``frame_count`` frames, padding with silence if short."""
        if channel_count <= 0:
            raise ValueError("channel_count must be positive")
        if frame_count < 0:
            raise ValueError("frame_count must not be negative")

        requested = frame_count * channel_count
        copied = min(requested, len(self))
        block = self._samples[self._offset : self._offset + copied]
        self._offset += copied

        if self._offset >= len(self._samples):
            self.clear()
        elif self._offset > len(self._samples) // 2:
            del self._samples[: self._offset]
            self._offset = 0

        block.extend([0.0] * (requested - copied))
        return block

    def clear(self) -> None:
        """Drop every queued sample."""
        self._samples = []
        self._offset = 0