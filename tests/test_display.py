import pytest

from chip8emu.display import HEIGHT, WIDTH, Framebuffer


def test_new_framebuffer_is_blank():
    assert list(Framebuffer().lit_pixels()) == []


def test_xor_pixel_lights_and_reports_no_collision():
    fb = Framebuffer()
    assert fb.xor_pixel(3, 5, 1) is False
    assert list(fb.lit_pixels()) == [(3, 5)]


def test_xor_pixel_twice_erases_and_reports_collision():
    fb = Framebuffer()
    fb.xor_pixel(10, 20, 1)
    assert fb.xor_pixel(10, 20, 1) is True
    assert list(fb.lit_pixels()) == []


def test_xor_zero_leaves_pixel_alone():
    fb = Framebuffer()
    fb.xor_pixel(1, 1, 1)
    assert fb.xor_pixel(1, 1, 0) is False
    assert list(fb.lit_pixels()) == [(1, 1)]


def test_clear_switches_everything_off():
    fb = Framebuffer()
    for x in range(WIDTH):
        fb.xor_pixel(x, HEIGHT - 1, 1)
    assert len(list(fb.lit_pixels())) == WIDTH
    fb.clear()
    assert list(fb.lit_pixels()) == []


def test_lit_pixels_ordered_row_by_row():
    fb = Framebuffer()
    fb.xor_pixel(5, 2, 1)
    fb.xor_pixel(0, 9, 1)
    fb.xor_pixel(1, 2, 1)
    assert list(fb.lit_pixels()) == [(1, 2), (5, 2), (0, 9)]


def test_far_corner_is_addressable():
    fb = Framebuffer()
    assert (WIDTH, HEIGHT) == (64, 32)
    assert fb.xor_pixel(63, 31, 1) is False
    assert list(fb.lit_pixels()) == [(63, 31)]


def test_out_of_range_pixel_raises():
    with pytest.raises(IndexError):
        Framebuffer().xor_pixel(0, HEIGHT, 1)