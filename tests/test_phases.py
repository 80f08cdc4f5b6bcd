"""Tests for solar phase classification."""
import ast
import math

import pytest

from sun_events.domain.phases import SolarPhase, classify


_DAWN_FAMILY = {
    SolarPhase.ASTRONOMICAL_DAWN,
    SolarPhase.NAUTICAL_DAWN,
    SolarPhase.CIVIL_DAWN,
    SolarPhase.SUNRISE,
}
_DUSK_FAMILY = {
    SolarPhase.ASTRONOMICAL_DUSK,
    SolarPhase.NAUTICAL_DUSK,
    SolarPhase.CIVIL_DUSK,
    SolarPhase.SUNSET,
}


# ── Wire identifiers ──────────────────────────────────────────────

class TestSolarPhaseWireNames:

    def test_ten_phases(self):
        assert len(SolarPhase) == 10

    def test_wire_names_unique(self):
        names = [p.wire_name for p in SolarPhase]
        assert len(set(names)) == len(names)

    @pytest.mark.parametrize("phase, wire", [
        (SolarPhase.NIGHT, "night"),
        (SolarPhase.ASTRONOMICAL_DAWN, "astronomicalDawn"),
        (SolarPhase.NAUTICAL_DAWN, "nauticalDawn"),
        (SolarPhase.CIVIL_DAWN, "civilDawn"),
        (SolarPhase.SUNRISE, "sunrise"),
        (SolarPhase.SUNSET, "sunset"),
        (SolarPhase.CIVIL_DUSK, "civilDusk"),
        (SolarPhase.NAUTICAL_DUSK, "nauticalDusk"),
        (SolarPhase.ASTRONOMICAL_DUSK, "astronomicalDusk"),
        (SolarPhase.SOLAR_NOON, "solarNoon"),
    ])
    def test_wire_name(self, phase, wire):
        assert phase.wire_name == wire
        assert str(phase) == wire

    def test_from_wire_round_trip(self):
        for phase in SolarPhase:
            assert SolarPhase.from_wire(phase.wire_name) is phase

    def test_from_wire_unknown(self):
        with pytest.raises(ValueError, match="Unknown solar phase"):
            SolarPhase.from_wire("twilight")


# ── Bucketing ─────────────────────────────────────────────────────

class TestClassifyBands:

    @pytest.mark.parametrize("altitude, morning, evening", [
        (-18.0, SolarPhase.ASTRONOMICAL_DAWN, SolarPhase.ASTRONOMICAL_DUSK),
        (-13.0, SolarPhase.ASTRONOMICAL_DAWN, SolarPhase.ASTRONOMICAL_DUSK),
        (-12.0, SolarPhase.NAUTICAL_DAWN, SolarPhase.NAUTICAL_DUSK),
        (-7.0, SolarPhase.NAUTICAL_DAWN, SolarPhase.NAUTICAL_DUSK),
        (-6.0, SolarPhase.CIVIL_DAWN, SolarPhase.CIVIL_DUSK),
        (-1.0, SolarPhase.CIVIL_DAWN, SolarPhase.CIVIL_DUSK),
        (0.0, SolarPhase.SUNRISE, SolarPhase.SUNSET),
        (45.0, SolarPhase.SUNRISE, SolarPhase.SUNSET),
        (90.0, SolarPhase.SUNRISE, SolarPhase.SUNSET),
    ])
    def test_band_edges(self, altitude, morning, evening):
        assert classify(altitude, True) is morning
        assert classify(altitude, False) is evening

    def test_truncates_toward_zero_near_horizon(self):
        """-0.9° truncates to 0 → sunrise/sunset, not civil twilight."""
        assert classify(-0.9, True) is SolarPhase.SUNRISE
        assert classify(-0.9, False) is SolarPhase.SUNSET

    def test_truncation_at_lower_edge(self):
        """-18.9° truncates to -18 (astronomical), -19.0° is night."""
        assert classify(-18.9, True) is SolarPhase.ASTRONOMICAL_DAWN
        assert classify(-19.0, True) is SolarPhase.NIGHT

    def test_truncation_between_bands(self):
        assert classify(-6.99, True) is SolarPhase.CIVIL_DAWN
        assert classify(-7.0, True) is SolarPhase.NAUTICAL_DAWN
        assert classify(-12.99, False) is SolarPhase.NAUTICAL_DUSK
        assert classify(-13.0, False) is SolarPhase.ASTRONOMICAL_DUSK

    def test_fraction_within_degree_is_invariant(self):
        """-5.1° and -5.9° classify identically."""
        for morning in (True, False):
            assert classify(-5.1, morning) is classify(-5.9, morning)
            assert classify(12.01, morning) is classify(12.99, morning)

    def test_never_returns_solar_noon(self):
        for tenth in range(-1000, 1000):
            for morning in (True, False):
                assert classify(tenth / 10.0, morning) is not SolarPhase.SOLAR_NOON


# ── Out-of-range input ────────────────────────────────────────────

class TestClassifyTotal:

    @pytest.mark.parametrize("altitude", [-90.0, -45.0, -19.5, -19.0, 91.0, 120.0, 1e9, -1e9])
    def test_out_of_range_is_night(self, altitude):
        assert classify(altitude, True) is SolarPhase.NIGHT
        assert classify(altitude, False) is SolarPhase.NIGHT

    @pytest.mark.parametrize("altitude", [math.nan, math.inf, -math.inf])
    def test_non_finite_is_night(self, altitude):
        assert classify(altitude, True) is SolarPhase.NIGHT
        assert classify(altitude, False) is SolarPhase.NIGHT

    def test_90_9_truncates_into_daylight(self):
        assert classify(90.9, True) is SolarPhase.SUNRISE


# ── Morning/evening symmetry ──────────────────────────────────────

class TestClassifySymmetry:

    def test_families_differ_only_in_direction(self):
        """Same angle gives a dawn-family phase in the morning and its
        dusk-family counterpart in the evening; night is shared."""
        for degree in range(-100, 101):
            morning = classify(float(degree), True)
            evening = classify(float(degree), False)
            if morning is SolarPhase.NIGHT:
                assert evening is SolarPhase.NIGHT
            else:
                assert morning in _DAWN_FAMILY
                assert evening in _DUSK_FAMILY

    def test_pure(self):
        assert classify(-3.3, True) is classify(-3.3, True)


# ── Domain purity ─────────────────────────────────────────────────

class TestPhasesPurity:

    def test_phases_module_pure(self):
        """phases.py must only import stdlib modules."""
        import sun_events.domain.phases as mod

        allowed = {'math', 'dataclasses', 'typing', 'abc', 'enum', '__future__'}
        with open(mod.__file__) as f:
            tree = ast.parse(f.read())

        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    root = alias.name.split('.')[0]
                    if root not in allowed and root != 'sun_events':
                        assert False, f"Disallowed import '{alias.name}'"
            if isinstance(node, ast.ImportFrom):
                if node.module and node.level == 0:
                    root = node.module.split('.')[0]
                    if root not in allowed and root != 'sun_events':
                        assert False, f"Disallowed import from '{node.module}'"
