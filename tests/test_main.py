from chip8emu.cpu import Chip8
from chip8emu.main import main, step_timers


class RecordingBeeper:
    def __init__(self):
        self.calls = []

    def on(self):
        self.calls.append("on")

    def off(self):
        self.calls.append("off")


def test_usage_without_rom(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_usage_with_too_many_arguments(capsys):
    assert main(["a.ch8", "b.ch8"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_delay_timer_counts_down_to_zero():
    chip = Chip8()
    chip.delay_timer = 2
    beeper = RecordingBeeper()
    step_timers(chip, beeper)
    step_timers(chip, beeper)
    step_timers(chip, beeper)
    assert chip.delay_timer == 0


def test_sound_timer_beeps_then_stops():
    chip = Chip8()
    chip.sound_timer = 2
    beeper = RecordingBeeper()
    step_timers(chip, beeper)
    assert beeper.calls == ["on"]
    step_timers(chip, beeper)
    assert beeper.calls == ["on", "on", "off"]
    assert chip.sound_timer == 0


def test_silent_when_sound_timer_zero():
    chip = Chip8()
    beeper = RecordingBeeper()
    step_timers(chip, beeper)
    assert beeper.calls == ["off"]
    assert chip.sound_timer == 0