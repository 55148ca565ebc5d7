"""Tests for fades and pulses."""

import pytest

from hydrakit.effects.mixer import Clock, default_clock, fade_in, fade_out, pulse, pulse_bpm


class TestClock:
    def test_tick(self):
        clock = Clock()
        assert clock.tick(0.5) == 0.5
        assert clock.tick(0.25) == 0.75

    def test_defaults(self):
        assert Clock().bpm == 30.0


class TestFades:
    def test_fade_in(self, clock):
        fader = fade_in(2.0, clock=clock)
        assert fader() == 0.0
        clock.tick(1.0)
        assert fader() == pytest.approx(0.5)
        clock.tick(5.0)
        assert fader() == 1.0

    def test_fade_in_maximum(self, clock):
        fader = fade_in(1.0, maximum=0.6, clock=clock)
        clock.tick(0.5)
        assert fader() == pytest.approx(0.3)
        clock.tick(1.0)
        assert fader() == pytest.approx(0.6)

    def test_fade_out(self, clock):
        fader = fade_out(4.0, clock=clock)
        assert fader() == 1.0
        clock.tick(1.0)
        assert fader() == pytest.approx(0.75)
        clock.tick(10.0)
        assert fader() == 0.0

    def test_fade_out_minimum(self, clock):
        fader = fade_out(2.0, minimum=0.2, clock=clock)
        clock.tick(1.0)
        assert fader() == pytest.approx(0.6)
        clock.tick(5.0)
        assert fader() == pytest.approx(0.2)

    @pytest.mark.parametrize("factory", [fade_in, fade_out])
    def test_non_positive_duration(self, factory, clock):
        with pytest.raises(ValueError):
            factory(0, clock=clock)

    def test_default_clock(self):
        fader = fade_in(1.0)
        start = default_clock.time
        default_clock.tick(0.5)
        try:
            assert fader() == pytest.approx(0.5)
        finally:
            default_clock.time = start


class TestPulse:
    def test_pulse_on_then_off(self):
        clock = Clock(time=0.0)
        pulser = pulse(1000, 100, clock=clock)
        assert pulser() == 1
        clock.time = 0.05
        assert pulser() == 1
        clock.time = 0.5
        assert pulser() == 0
        clock.time = 1.02
        assert pulser() == 1

    def test_pulse_bpm(self):
        # 120 bpm -> 500 ms per beat
        clock = Clock(time=0.0, bpm=120.0)
        pulser = pulse_bpm(clock=clock)
        assert pulser() == 1
        clock.time = 0.3
        assert pulser() == 0
        clock.time = 0.55
        assert pulser() == 1

    def test_pulse_bpm_follows_tempo(self):
        clock = Clock(time=0.55, bpm=120.0)
        pulser = pulse_bpm(clock=clock)
        assert pulser() == 1
        clock.bpm = 60.0
        assert pulser() == 0

    def test_pulse_bpm_speed(self):
        # 60 bpm at double speed -> 500 ms period
        clock = Clock(time=0.52, bpm=60.0)
        assert pulse_bpm(speed=2, clock=clock)() == 1

    def test_invalid(self):
        with pytest.raises(ValueError):
            pulse(0)
        with pytest.raises(ValueError):
            pulse_bpm(speed=0)
