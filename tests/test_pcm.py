import struct

import pytest

from lilmusic.pcm import (
    RenderFormat,
    SampleQueue,
    float_to_pcm16,
    float_to_pcm32,
    ticks_100ns_to_milliseconds,
    volume_percent_to_linear,
)


def test_volume_limits_and_clamping():
    assert volume_percent_to_linear(0) == 0.0
    assert volume_percent_to_linear(100) == 1.0
    assert volume_percent_to_linear(150) == 1.0
    assert volume_percent_to_linear(-20) == 0.0


def test_volume_is_monotonic():
    values = [volume_percent_to_linear(p) for p in range(0, 101)]
    assert values == sorted(values)


def test_ticks_conversion():
    assert ticks_100ns_to_milliseconds(10000) == 1
    assert ticks_100ns_to_milliseconds(0) == 0
    assert ticks_100ns_to_milliseconds(-50000) == 0
    assert ticks_100ns_to_milliseconds(9999) == 0


def test_pcm16_full_scale_and_clamp():
    assert float_to_pcm16([1.0, -1.0, 0.0]) == [32767, -32767, 0]
    assert float_to_pcm16([5.0, -5.0]) == [32767, -32767]


def test_pcm32_full_scale_and_clamp():
    assert float_to_pcm32([1.0, 3.0]) == [2147483647, 2147483647]
    assert float_to_pcm32([0.0]) == [0]
    assert float_to_pcm32([-1.0])[0] <= -2147483647


def test_pcm16_sign_preserved():
    out = float_to_pcm16([0.25, -0.25])
    assert out[0] > 0 and out[1] < 0
    assert out[0] == -out[1]


def test_float_format_round_trip():
    fmt = RenderFormat(channel_count=2, sample_rate=48000, bits_per_sample=32, block_align=8, is_float=True)
    samples = [0.5, -0.25, 0.125, 1.0]
    data = fmt.convert(samples)
    assert len(data) == 16
    assert list(struct.unpack("<4f", data)) == samples


def test_pcm16_format_bytes():
    fmt = RenderFormat(channel_count=1, sample_rate=44100, bits_per_sample=16, block_align=2)
    data = fmt.convert([1.0, -1.0])
    assert struct.unpack("<2h", data) == (32767, -32767)


def test_pcm32_format_bytes():
    fmt = RenderFormat(channel_count=1, sample_rate=44100, bits_per_sample=32, block_align=4)
    data = fmt.convert([1.0])
    assert struct.unpack("<i", data) == (2147483647,)


def test_unsupported_integer_depth_gives_silence():
    fmt = RenderFormat(channel_count=2, sample_rate=48000, bits_per_sample=24, block_align=6)
    data = fmt.convert([0.5, 0.5, 0.5, 0.5])
    assert data == bytes(12)


def test_convert_drops_partial_frame():
    fmt = RenderFormat(channel_count=2, sample_rate=48000, bits_per_sample=16, block_align=4)
    assert len(fmt.convert([0.1, 0.2, 0.3])) == 4


def test_convert_without_channels_raises():
    fmt = RenderFormat(channel_count=0, sample_rate=48000, bits_per_sample=16, block_align=0)
    with pytest.raises(ValueError):
        fmt.convert([0.0])


def test_queue_take_in_order_and_pads():
    queue = SampleQueue()
    queue.push([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    assert len(queue) == 6
    assert queue.take(2, 2) == [1.0, 2.0, 3.0, 4.0]
    assert queue.take(2, 2) == [5.0, 6.0, 0.0, 0.0]
    assert len(queue) == 0


def test_queue_empty_take_is_silence():
    queue = SampleQueue()
    assert queue.take(3, 1) == [0.0, 0.0, 0.0]


def test_queue_push_after_partial_take_keeps_order():
    queue = SampleQueue()
    queue.push([1.0, 2.0, 3.0])
    assert queue.take(1, 1) == [1.0]
    queue.push([4.0])
    assert queue.take(3, 1) == [2.0, 3.0, 4.0]
    assert queue.available_samples == 0


def test_queue_clear():
    queue = SampleQueue()
    queue.push([0.1, 0.2])
    queue.clear()
    assert len(queue) == 0
    assert queue.take(1, 2) == [0.0, 0.0]


def test_queue_rejects_bad_arguments():
    queue = SampleQueue()
    with pytest.raises(ValueError):
        queue.take(1, 0)
    with pytest.raises(ValueError):
        queue.take(-1, 2)