"""
End-to-end tests for the snapshot API (compute_snapshot, CosmicContext).

Unit tests inject the offline Sun/Moon source from conftest; the default
skyfield source is exercised by the integration tests.
"""

import json
import logging
import math
from datetime import datetime, timedelta, timezone

import pytest

import cosmic_core as cosmic
from cosmic_core import CosmicContext, GeoObserver, ModelKind
from cosmic_core.ephemeris import SkyfieldEphemeris
from cosmic_core.levels import COSMIC_LEVELS, MotionLevel


class TestSnapshot:
    """Properties of a full snapshot for Dublin at a fixed instant."""

    @pytest.mark.unit
    def test_earth_rotation_only(self, offline_context, dublin, fixed_instant):
        snap = offline_context.compute_snapshot(dublin, fixed_instant, max_level=1)
        assert len(snap.active_vectors) == 1
        assert snap.resultant.magnitude_km_s == pytest.approx(0.28, abs=0.05)

    @pytest.mark.unit
    def test_more_levels_larger_resultant(self, offline_context, dublin, fixed_instant):
        one = offline_context.compute_snapshot(dublin, fixed_instant, max_level=1)
        three = offline_context.compute_snapshot(dublin, fixed_instant, max_level=3)
        assert three.resultant.magnitude_km_s > one.resultant.magnitude_km_s

    @pytest.mark.unit
    def test_cmb_never_summed(self, offline_context, dublin, fixed_instant):
        snap = offline_context.compute_snapshot(dublin, fixed_instant, max_level=8)
        assert len(snap.active_vectors) == 7
        assert [v.metadata["level"] for v in snap.active_vectors] == list(range(1, 8))
        assert len(snap.motion_vectors) == 8

    @pytest.mark.unit
    def test_level_seven_equals_level_eight(self, offline_context, dublin, fixed_instant):
        seven = offline_context.compute_snapshot(dublin, fixed_instant, max_level=7)
        eight = offline_context.compute_snapshot(dublin, fixed_instant, max_level=8)
        assert seven.resultant == eight.resultant

    @pytest.mark.unit
    def test_ballpark_resultant(self, offline_context, dublin, fixed_instant):
        snap = offline_context.compute_snapshot(dublin, fixed_instant)
        assert 100.0 < snap.resultant.magnitude_km_s < 900.0

    @pytest.mark.unit
    def test_resultant_stable_over_a_day(self, offline_context, dublin, fixed_instant):
        """Levels 3-7 are fixed on the sky, so the total barely changes."""
        magnitudes = [
            offline_context.compute_snapshot(
                dublin, fixed_instant + timedelta(hours=h)
            ).resultant.magnitude_km_s
            for h in range(0, 24, 4)
        ]
        assert max(magnitudes) - min(magnitudes) < 2 * (29.8 + 0.465)

    @pytest.mark.unit
    def test_equator_scenario(self, offline_context, test_dates):
        """Observer (0, 0), Earth rotation only: 0.465 km/s due East at any time."""
        for instant in test_dates:
            snap = offline_context.compute_snapshot((0.0, 0.0), instant, max_level=1)
            direction = snap.resultant.direction
            assert snap.resultant.magnitude_km_s == pytest.approx(0.465)
            assert direction.azimuth_deg == pytest.approx(90.0)
            assert direction.altitude_deg == pytest.approx(0.0, abs=1e-12)

    @pytest.mark.unit
    def test_active_vectors_match_records(self, offline_context, dublin, fixed_instant):
        snap = offline_context.compute_snapshot(dublin, fixed_instant, max_level=5)
        records = {m.level: m for m in snap.motion_vectors}
        for vector in snap.active_vectors:
            record = records[vector.metadata["level"]]
            assert vector.magnitude_km_s == record.velocity_km_s
            assert vector.direction == record.direction

    @pytest.mark.unit
    def test_active_vector_metadata_read_only(self, offline_context, dublin, fixed_instant):
        snap = offline_context.compute_snapshot(dublin, fixed_instant, max_level=2)
        with pytest.raises(TypeError):
            snap.active_vectors[0].metadata["level"] = 99
        assert len({*snap.active_vectors}) == 2

    @pytest.mark.unit
    def test_input_echo(self, offline_context, fixed_instant):
        snap = offline_context.compute_snapshot((53.35, -6.26), fixed_instant, max_level=4)
        assert snap.observer == GeoObserver(53.35, -6.26)
        assert snap.instant == fixed_instant
        assert snap.max_level == 4

    @pytest.mark.unit
    def test_naive_instant(self, offline_context, dublin):
        naive = offline_context.compute_snapshot(dublin, datetime(2025, 1, 1, 12))
        aware = offline_context.compute_snapshot(
            dublin, datetime(2025, 1, 1, 12, tzinfo=timezone.utc)
        )
        assert naive.resultant == aware.resultant
        assert naive.instant.tzinfo is timezone.utc

    @pytest.mark.unit
    def test_summary(self, offline_context, dublin, fixed_instant):
        snap = offline_context.compute_snapshot(dublin, fixed_instant)
        assert snap.summary["vector_count"] == 7
        assert snap.summary["resultant"]["magnitude"] == round(snap.resultant.magnitude_km_s, 2)

    @pytest.mark.unit
    def test_to_dict_is_json(self, offline_context, dublin, fixed_instant):
        data = offline_context.compute_snapshot(dublin, fixed_instant).to_dict()
        decoded = json.loads(json.dumps(data))
        assert decoded["input"]["latitude"] == 53.35
        assert len(decoded["active_vectors"]) == 7
        assert decoded["active_vectors"][0]["metadata"] == {"level": 1, "id": "earthRotation"}
        assert decoded["motion_vectors"][7]["role"] == "reference_only"
        assert set(decoded["resultant"]["direction"]) == {
            "azimuth_rad", "altitude_rad", "azimuth_deg", "altitude_deg"
        }
        assert len(decoded["celestial"]["galactic_alignment"]) == 3

    @pytest.mark.unit
    def test_debug_log(self, offline_context, dublin, fixed_instant, caplog):
        with caplog.at_level(logging.DEBUG, logger="cosmic_core.context"):
            offline_context.compute_snapshot(dublin, fixed_instant)
        assert any("resultant" in r.getMessage() for r in caplog.records)

    @pytest.mark.unit
    def test_module_function_with_ephemeris(self, static_ephemeris, dublin, fixed_instant):
        snap = cosmic.compute_snapshot(dublin, fixed_instant, ephemeris=static_ephemeris)
        assert len(snap.active_vectors) == 7
        assert [call[0] for call in static_ephemeris.calls] == ["sun", "moon"]


class TestCelestialPositions:
    @pytest.mark.unit
    def test_sun_moon_shifted_to_north_reference(self, offline_context, dublin, fixed_instant):
        snap = offline_context.compute_snapshot(dublin, fixed_instant)
        assert snap.sun_direction.azimuth_deg == pytest.approx(180.0)
        assert snap.sun_direction.altitude_deg == pytest.approx(20.0)
        assert snap.moon_direction.azimuth_deg == pytest.approx(270.0)
        assert snap.moon_direction.altitude_deg == pytest.approx(-5.0)

    @pytest.mark.unit
    def test_ephemeris_receives_utc_and_degrees(self, static_ephemeris, dublin):
        local = datetime(2025, 7, 1, 14, 0, tzinfo=timezone(timedelta(hours=1)))
        cosmic.compute_celestial_positions(dublin, local, ephemeris=static_ephemeris)
        kinds = [call[0] for call in static_ephemeris.calls]
        assert kinds == ["sun", "moon"]
        _, instant, lat, lon = static_ephemeris.calls[0]
        assert instant == datetime(2025, 7, 1, 13, 0, tzinfo=timezone.utc)
        assert (lat, lon) == (53.35, -6.26)

    @pytest.mark.unit
    def test_galactic_fields(self, offline_context, dublin, fixed_instant):
        positions = offline_context.compute_celestial_positions(dublin, fixed_instant)
        assert positions.galactic_alignment == cosmic.locate_galactic_center_alignment(
            dublin, fixed_instant
        )
        assert positions.galactic_north_pole == cosmic.locate_galactic_north_pole(
            dublin, fixed_instant
        )
        assert positions.days_since_j2000 == cosmic.days_since_j2000(fixed_instant)
        assert 0.0 <= positions.local_sidereal_time_deg < 360.0

    @pytest.mark.integration
    def test_winter_noon_sun_low_in_south(self, skyfield_planets, dublin, fixed_instant):
        """Dublin at 12:00 UTC on New Year's Day: Sun low, roughly South."""
        sun = cosmic.compute_celestial_positions(dublin, fixed_instant).sun
        assert 10.0 < sun.altitude_deg < 16.0
        assert 165.0 < sun.azimuth_deg < 195.0

    @pytest.mark.integration
    def test_default_snapshot(self, skyfield_planets, offline_context, dublin, fixed_instant):
        snap = cosmic.compute_snapshot(dublin, fixed_instant)
        offline = offline_context.compute_snapshot(dublin, fixed_instant)
        assert snap.resultant == offline.resultant
        assert snap.moon_direction != offline.moon_direction
        assert 0.0 <= snap.sun_direction.azimuth_rad < 2 * math.pi


class TestFailureIsolation:
    """One bad level never aborts the snapshot."""

    @pytest.mark.unit
    def test_broken_level_recorded_and_skipped(
        self, static_ephemeris, dublin, fixed_instant, caplog
    ):
        broken = MotionLevel(
            number=3,
            id="broken",
            name="Broken",
            velocity_km_s=100.0,
            kind=ModelKind.FIXED_TARGET,
        )
        ctx = CosmicContext(
            ephemeris=static_ephemeris, levels=(COSMIC_LEVELS[0], COSMIC_LEVELS[1], broken)
        )

        with caplog.at_level(logging.WARNING, logger="cosmic_core.context"):
            snap = ctx.compute_snapshot(dublin, fixed_instant, max_level=3)

        assert [m.ok for m in snap.motion_vectors] == [True, True, False]
        failed = snap.failed_levels
        assert len(failed) == 1
        assert failed[0].id == "broken"
        assert failed[0].implemented is False
        assert failed[0].velocity_km_s is None
        assert "ValueError" in failed[0].error
        assert len(snap.active_vectors) == 2
        assert any("broken" in r.getMessage() for r in caplog.records)

    @pytest.mark.unit
    def test_non_finite_velocity_is_error(self, static_ephemeris, dublin, fixed_instant):
        nan_level = MotionLevel(
            number=2,
            id="nanFlow",
            name="NaN Flow",
            velocity_km_s=float("nan"),
            kind=ModelKind.FIXED_TARGET,
            target=cosmic.CelestialTarget(1.0, 1.0),
        )
        ctx = CosmicContext(ephemeris=static_ephemeris, levels=(COSMIC_LEVELS[0], nan_level))
        snap = ctx.compute_snapshot(dublin, fixed_instant, max_level=2)
        assert not snap.motion_vectors[1].ok
        assert len(snap.active_vectors) == 1
        assert math.isfinite(snap.resultant.magnitude_km_s)

    @pytest.mark.unit
    def test_unimplemented_level_skipped_silently(
        self, static_ephemeris, dublin, fixed_instant, caplog
    ):
        pending = MotionLevel(
            number=3,
            id="pending",
            name="Pending",
            velocity_km_s=50.0,
            kind=ModelKind.FIXED_TARGET,
            implemented=False,
        )
        ctx = CosmicContext(ephemeris=static_ephemeris, levels=(COSMIC_LEVELS[0], pending))
        with caplog.at_level(logging.WARNING, logger="cosmic_core.context"):
            snap = ctx.compute_snapshot(dublin, fixed_instant, max_level=3)
        assert [m.id for m in snap.motion_vectors] == [cosmic.ID_EARTH_ROTATION]
        assert snap.failed_levels == ()
        assert not caplog.records

    @pytest.mark.unit
    def test_all_levels_failing_gives_no_resultant(self, static_ephemeris, dublin, fixed_instant):
        broken = MotionLevel(
            number=1, id="broken", name="Broken", velocity_km_s=1.0, kind=ModelKind.FIXED_TARGET
        )
        ctx = CosmicContext(ephemeris=static_ephemeris, levels=(broken,))
        snap = ctx.compute_snapshot(dublin, fixed_instant, max_level=1)
        assert snap.resultant is None
        assert snap.active_vectors == ()
        assert snap.summary == {"vector_count": 0, "resultant": None}
        assert snap.to_dict()["resultant"] is None


class TestInputValidation:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "observer",
        [(91.0, 0.0), (-91.0, 0.0), (0.0, 180.5), (float("nan"), 0.0), ("53", "-6"), (1.0,), None],
    )
    def test_invalid_observer(self, observer, fixed_instant):
        with pytest.raises(ValueError):
            cosmic.compute_snapshot(observer, fixed_instant)

    @pytest.mark.unit
    @pytest.mark.parametrize("max_level", [0, 9, -1, 3.0, True, "8"])
    def test_invalid_max_level(self, dublin, fixed_instant, max_level):
        with pytest.raises(ValueError):
            cosmic.compute_snapshot(dublin, fixed_instant, max_level=max_level)

    @pytest.mark.unit
    def test_invalid_instant(self, dublin):
        with pytest.raises(TypeError):
            cosmic.compute_snapshot(dublin, "2025-01-01T12:00:00Z")

    @pytest.mark.unit
    def test_poles_are_valid(self, offline_context, fixed_instant):
        for lat in (90.0, -90.0):
            snap = offline_context.compute_snapshot((lat, 0.0), fixed_instant)
            assert snap.failed_levels == ()
            assert snap.motion_vectors[0].velocity_km_s == 0.0
            assert 100.0 < snap.resultant.magnitude_km_s < 900.0


class TestContext:
    @pytest.mark.unit
    def test_default_context(self):
        ctx = cosmic.calculations.get_default_context()
        assert isinstance(ctx.ephemeris, SkyfieldEphemeris)
        assert ctx.levels == COSMIC_LEVELS

    @pytest.mark.unit
    def test_vector_sum_reuses_records(self, dublin, fixed_instant):
        ctx = CosmicContext()
        records = ctx.compute_motion_vectors(dublin, fixed_instant)
        vs = ctx.compute_vector_sum(dublin, fixed_instant, 8, motion_vectors=records)
        assert len(vs) == 7
        assert vs.get_resultant() == cosmic.compute_vector_sum(dublin, fixed_instant).get_resultant()

    @pytest.mark.unit
    def test_fresh_vector_sum_per_call(self, dublin, fixed_instant):
        ctx = CosmicContext()
        a = ctx.compute_vector_sum(dublin, fixed_instant, 3)
        b = ctx.compute_vector_sum(dublin, fixed_instant, 3)
        assert a is not b
        assert len(a) == len(b) == 3
