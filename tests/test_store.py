"""Tests for ParameterStore dispatch and derived exposure time."""

import math

import pytest

from core import (
    ParameterSet,
    ParameterStore,
    SensorSize,
    SetFNumber,
    SetFocalLength,
    SetPixelWidth,
    SetSensorSize,
    SetTrailTolerance,
    TrailTolerance,
)
from utils import compute_exposure_time


@pytest.fixture
def store():
    return ParameterStore()


class TestDefaults:
    """Initial state of a new store."""

    def test_default_parameters(self, store):
        assert store.params == ParameterSet(
            sensor_size=SensorSize.FULL,
            pixel_width=6000,
            focal_length=50,
            f_number=1.4,
            trail_tolerance=TrailTolerance.PIN_POINT,
        )

    def test_default_exposure(self, store):
        assert store.exposure_time == pytest.approx(2.217228)
        assert store.display_exposure_time == 2.2

    def test_default_pixel_pitch(self, store):
        assert store.pixel_pitch == pytest.approx(6.0)

    def test_raw_text_seeded_from_defaults(self, store):
        assert store.raw_text('pixel_width') == '6000'
        assert store.raw_text('focal_length') == '50'
        assert store.raw_text('f_number') == '1.4'

    def test_raw_text_unknown_field(self, store):
        with pytest.raises(KeyError):
            store.raw_text('sensor_size')

    def test_custom_initial_parameters(self):
        store = ParameterStore(ParameterSet(focal_length=14, f_number=2.8))
        assert store.exposure_time == pytest.approx(
            compute_exposure_time('full', 6000, 14, 2.8, 'pin-point')
        )
        assert store.raw_text('f_number') == '2.8'


class TestEnumActions:
    """setSensorSize / setTrailTolerance."""

    def test_set_sensor_size_member(self, store):
        assert store.dispatch(SetSensorSize(SensorSize.MICRO_FOUR_THIRDS)) is True
        assert store.sensor_size is SensorSize.MICRO_FOUR_THIRDS
        assert store.pixel_pitch == pytest.approx(17300 / 6000)

    def test_set_sensor_size_string(self, store):
        store.dispatch(SetSensorSize('apsc-canon'))
        assert store.sensor_size is SensorSize.APSC_CANON

    def test_set_trail_tolerance(self, store):
        before = store.exposure_time
        store.dispatch(SetTrailTolerance(TrailTolerance.VISIBLE))
        assert store.trail_tolerance is TrailTolerance.VISIBLE
        assert store.exposure_time == pytest.approx(3 * before)

    def test_trail_tolerance_monotonic(self, store):
        values = []
        for trail in ('pin-point', 'slight', 'visible'):
            store.dispatch(SetTrailTolerance(trail))
            values.append(store.exposure_time)
        assert values[0] < values[1] < values[2]

    def test_unknown_enum_value(self, store):
        with pytest.raises(ValueError):
            store.dispatch(SetSensorSize('medium-format'))


class TestNumericActions:
    """setPixelWidth / setFocalLength / setFNumber."""

    def test_set_focal_length_text(self, store):
        assert store.dispatch(SetFocalLength('24')) is True
        assert store.focal_length == 24
        assert store.raw_text('focal_length') == '24'
        assert store.exposure_time == pytest.approx(
            compute_exposure_time('full', 6000, 24, 1.4, 'pin-point')
        )

    def test_set_pixel_width_slider_value(self, store):
        assert store.dispatch(SetPixelWidth(4000)) is True
        assert store.pixel_width == 4000
        assert store.raw_text('pixel_width') == '4000'

    def test_slider_float_value_for_integer_field(self, store):
        store.dispatch(SetFocalLength(85.0))
        assert store.focal_length == 85
        assert isinstance(store.focal_length, int)
        assert store.raw_text('focal_length') == '85'

    def test_out_of_range_not_clamped(self, store):
        store.dispatch(SetPixelWidth('20000'))
        assert store.pixel_width == 20000

    def test_f_number_quantized(self, store):
        store.dispatch(SetFNumber('1.37'))
        assert store.f_number == pytest.approx(1.4)
        assert store.raw_text('f_number') == '1.37'

    def test_f_number_slider_value_quantized(self, store):
        store.dispatch(SetFNumber(2.8000000000000003))
        assert store.f_number == 2.8
        assert store.raw_text('f_number') == '2.8'

    def test_f_number_monotonic(self, store):
        values = []
        for n in ('1.4', '2', '2.8', '4', '5.6'):
            store.dispatch(SetFNumber(n))
            values.append(store.exposure_time)
        assert all(a < b for a, b in zip(values, values[1:]))

    def test_pixel_width_monotonic(self, store):
        values = []
        for w in ('3000', '4000', '6000', '8000'):
            store.dispatch(SetPixelWidth(w))
            values.append(store.exposure_time)
        assert all(a > b for a, b in zip(values, values[1:]))


class TestInvalidText:
    """Unparsable text is echoed but never changes canonical or derived state."""

    def test_invalid_focal_length_keeps_value(self, store):
        store.dispatch(SetFocalLength('50'))
        before = store.exposure_time

        assert store.dispatch(SetFocalLength('abc')) is False
        assert store.focal_length == 50
        assert store.exposure_time == before
        assert store.raw_text('focal_length') == 'abc'

    def test_empty_text_keeps_value(self, store):
        store.dispatch(SetPixelWidth(''))
        assert store.pixel_width == 6000
        assert store.raw_text('pixel_width') == ''

    def test_invalid_f_number_keeps_value(self, store):
        store.dispatch(SetFNumber('.'))
        assert store.f_number == 1.4
        assert store.raw_text('f_number') == '.'

    def test_typing_sequence(self, store):
        # Clearing the box and typing "135" one key at a time
        seen = []
        for text in ('', '1', '13', '135'):
            store.dispatch(SetFocalLength(text))
            seen.append((store.focal_length, store.exposure_time))
        assert [f for f, _ in seen] == [50, 1, 13, 135]
        assert seen[0][1] == pytest.approx(2.217228)
        assert seen[-1][1] == pytest.approx(
            compute_exposure_time('full', 6000, 135, 1.4, 'pin-point')
        )

    def test_invalid_text_never_yields_nan(self, store):
        for text in ('', '-', 'x', '.', 'e5'):
            store.dispatch(SetFNumber(text))
            assert not math.isnan(store.exposure_time)

    def test_invalid_slider_payload(self, store):
        assert store.dispatch(SetFocalLength(float('nan'))) is False
        assert store.focal_length == 50
        assert store.raw_text('focal_length') == '50'


class TestDivisionByZero:
    """Zero focal length or width gives an infinite exposure, not an error."""

    def test_zero_focal_length(self, store):
        assert store.dispatch(SetFocalLength('0')) is True
        assert store.focal_length == 0
        assert store.exposure_time == math.inf
        assert store.display_exposure_time == math.inf

    def test_zero_pixel_width(self, store):
        store.dispatch(SetPixelWidth('0'))
        assert store.pixel_pitch == math.inf
        assert store.exposure_time == math.inf

    def test_recovers_after_zero(self, store):
        store.dispatch(SetFocalLength('0'))
        store.dispatch(SetFocalLength('50'))
        assert store.exposure_time == pytest.approx(2.217228)


class TestDispatchContract:
    """General dispatch behaviour."""

    def test_unsupported_action(self, store):
        with pytest.raises(TypeError):
            store.dispatch('setFocalLength')

    def test_noop_dispatch_round_trip(self, store):
        store.dispatch(SetSensorSize('apsc-other'))
        store.dispatch(SetPixelWidth('5184'))
        store.dispatch(SetFocalLength('24'))
        store.dispatch(SetFNumber('2.8'))
        store.dispatch(SetTrailTolerance('slight'))
        params, exposure = store.params, store.exposure_time

        store.dispatch(SetSensorSize(store.sensor_size))
        store.dispatch(SetPixelWidth(store.pixel_width))
        store.dispatch(SetFocalLength(store.focal_length))
        store.dispatch(SetFNumber(store.f_number))
        store.dispatch(SetTrailTolerance(store.trail_tolerance))

        assert store.params == params
        assert store.exposure_time == exposure

    def test_params_snapshot_is_immutable(self, store):
        snapshot = store.params
        store.dispatch(SetFocalLength('200'))
        assert snapshot.focal_length == 50
        with pytest.raises(AttributeError):
            snapshot.focal_length = 10

    def test_exposure_matches_fresh_computation(self, store):
        store.dispatch(SetSensorSize('micro-four-thirds'))
        store.dispatch(SetFNumber('4'))
        store.dispatch(SetFocalLength('300'))
        p = store.params
        assert store.exposure_time == compute_exposure_time(
            p.sensor_size.value, p.pixel_width, p.focal_length, p.f_number, p.trail_tolerance.value
        )


class TestOversizedText:
    """Digit strings too long for a float are treated as unparsable text."""

    @pytest.mark.parametrize('action_type, field', [
        (SetPixelWidth, 'pixel_width'),
        (SetFocalLength, 'focal_length'),
        (SetFNumber, 'f_number'),
    ])
    @pytest.mark.parametrize('text', ['9' * 400, '1' * 5000])
    def test_state_unchanged_and_text_echoed(self, store, action_type, field, text):
        params, exposure = store.params, store.exposure_time

        assert store.dispatch(action_type(text)) is False

        assert store.params == params
        assert store.exposure_time == exposure
        assert store.raw_text(field) == text

    def test_oversized_slider_integer(self, store):
        assert store.dispatch(SetFocalLength(10 ** 400)) is False
        assert store.focal_length == 50
        assert store.raw_text('focal_length') == '50'

    def test_large_but_finite_value_accepted(self, store):
        assert store.dispatch(SetPixelWidth('9' * 300)) is True
        assert store.pixel_width == int('9' * 300)
        assert math.isfinite(store.exposure_time)
