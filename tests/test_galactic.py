"""
Tests for the galactic center alignment (yaw/pitch/roll of the skybox).
"""

from datetime import timedelta

import pytest

import cosmic_core as cosmic
from cosmic_core.coordinates import angle_between_points
from cosmic_core.galactic import GALACTIC_ROLL_REFERENCE


def _hourly(instant, hours=24):
    return [instant + timedelta(hours=h) for h in range(hours)]


class TestGalacticAlignment:
    @pytest.mark.unit
    def test_yaw_pitch_are_sagittarius_a(self, dublin, fixed_instant):
        alignment = cosmic.locate_galactic_center_alignment(dublin, fixed_instant)
        sag_a = cosmic.locate(dublin, cosmic.SAGITTARIUS_A_STAR, fixed_instant)
        assert alignment.azimuth_deg == pytest.approx(sag_a.azimuth_deg)
        assert alignment.altitude_deg == pytest.approx(sag_a.altitude_deg)

    @pytest.mark.unit
    def test_as_tuple(self, dublin, fixed_instant):
        alignment = cosmic.galactic_alignment(dublin, fixed_instant)
        yaw, pitch, roll = alignment.as_tuple()
        assert (yaw, pitch, roll) == (
            alignment.azimuth_deg,
            alignment.altitude_deg,
            alignment.roll_deg,
        )

    @pytest.mark.unit
    def test_roll_range(self, test_locations, fixed_instant):
        for name, lat, lon in test_locations:
            observer = cosmic.GeoObserver(lat, lon)
            for instant in _hourly(fixed_instant):
                roll = cosmic.locate_galactic_center_alignment(observer, instant).roll_deg
                assert 0.0 <= roll <= 180.0, name

    @pytest.mark.unit
    def test_roll_uses_pole_on_sagittarius_vertical(self, dublin, fixed_instant):
        """Roll is measured from a pole 90° along Sgr A*'s vertical circle."""
        seen_above = seen_below = False
        for instant in _hourly(fixed_instant):
            alignment = cosmic.locate_galactic_center_alignment(dublin, instant)
            ref = cosmic.locate(dublin, GALACTIC_ROLL_REFERENCE, instant)

            if alignment.altitude_deg < 0:
                seen_below = True
                pole = (alignment.azimuth_deg, 90 + alignment.altitude_deg)
            else:
                seen_above = True
                pole = (alignment.azimuth_deg + 180, 90 - alignment.altitude_deg)

            assert angle_between_points(
                pole[0], pole[1], alignment.azimuth_deg, alignment.altitude_deg
            ) == pytest.approx(90.0, abs=1e-6)
            assert alignment.roll_deg == pytest.approx(
                angle_between_points(pole[0], pole[1], ref.azimuth_deg, ref.altitude_deg)
            )

        # Dublin sees Sgr A* both rise and set over a day
        assert seen_above and seen_below


class TestGalacticNorthPole:
    @pytest.mark.unit
    def test_matches_locate(self, dublin, fixed_instant):
        pole = cosmic.locate_galactic_north_pole(dublin, fixed_instant)
        assert pole == cosmic.locate(dublin, cosmic.GALACTIC_NORTH_POLE, fixed_instant)

    @pytest.mark.unit
    def test_ninety_degrees_from_galactic_center(self, test_locations, fixed_instant):
        """Sgr A* lies on the galactic equator, 90° from the pole."""
        for name, lat, lon in test_locations:
            observer = cosmic.GeoObserver(lat, lon)
            pole = cosmic.locate_galactic_north_pole(observer, fixed_instant)
            sag_a = cosmic.locate(observer, cosmic.SAGITTARIUS_A_STAR, fixed_instant)
            separation = angle_between_points(
                pole.azimuth_deg, pole.altitude_deg, sag_a.azimuth_deg, sag_a.altitude_deg
            )
            assert separation == pytest.approx(90.0, abs=0.1), name
