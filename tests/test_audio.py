from chip8emu.audio import HALF_PERIOD, PERIOD, square_wave


def test_first_half_high_second_half_low():
    samples, _ = square_wave(PERIOD)
    assert set(samples[:HALF_PERIOD]) == {0xFF}
    assert set(samples[HALF_PERIOD:]) == {0x00}


def test_full_period_returns_to_start_phase():
    _, phase = square_wave(PERIOD, 0)
    assert phase == 0


def test_continuation_matches_single_call():
    whole, end = square_wave(1000)
    first, mid = square_wave(333)
    second, end2 = square_wave(1000 - 333, mid)
    assert first + second == whole
    assert end2 == end


def test_length_and_value_range():
    samples, _ = square_wave(512, 150)
    assert len(samples) == 512
    assert set(samples) <= {0x00, 0xFF}


def test_empty():
    assert square_wave(0, 7) == (b"", 7)