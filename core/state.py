"""
core/state.py

Parameter state management and plot configuration.

Contains the canonical parameter set, the actions that mutate it, the
ParameterStore that owns it, and styling configuration for the exposure chart.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Optional, Union

from core.constants import (
    DEFAULT_SENSOR_SIZE,
    DEFAULT_PIXEL_WIDTH,
    DEFAULT_FOCAL_LENGTH,
    DEFAULT_F_NUMBER,
    DEFAULT_TRAIL_TOLERANCE,
    EXPOSURE_DISPLAY_DECIMALS,
)
from core.validation import RawNumber, format_number, parse_integer, parse_tenths
import utils


class SensorSize(str, Enum):
    """Sensor class; the value is the key into SENSOR_PHYSICAL_WIDTH_UM."""
    FULL = 'full'
    APSC_CANON = 'apsc-canon'
    APSC_OTHER = 'apsc-other'
    MICRO_FOUR_THIRDS = 'micro-four-thirds'


class TrailTolerance(str, Enum):
    """Accepted star movement; the value is the key into TRAIL_COEFFICIENT."""
    PIN_POINT = 'pin-point'
    SLIGHT = 'slight'
    VISIBLE = 'visible'


# ============================================================================
# PARAMETER SET
# ============================================================================

@dataclass(frozen=True)
class ParameterSet:
    """
    Canonical photographic parameters.

    Attributes:
        sensor_size: Sensor class
        pixel_width: Horizontal image resolution in pixels
        focal_length: Effective focal length in millimeters
        f_number: Aperture, quantized to tenths
        trail_tolerance: Accepted star movement
    """
    sensor_size: SensorSize = SensorSize(DEFAULT_SENSOR_SIZE)
    pixel_width: int = DEFAULT_PIXEL_WIDTH
    focal_length: int = DEFAULT_FOCAL_LENGTH
    f_number: float = DEFAULT_F_NUMBER
    trail_tolerance: TrailTolerance = TrailTolerance(DEFAULT_TRAIL_TOLERANCE)


# ============================================================================
# ACTIONS
# ============================================================================

@dataclass(frozen=True)
class SetSensorSize:
    value: Union[SensorSize, str]


@dataclass(frozen=True)
class SetPixelWidth:
    raw: RawNumber


@dataclass(frozen=True)
class SetFocalLength:
    raw: RawNumber


@dataclass(frozen=True)
class SetFNumber:
    raw: RawNumber


@dataclass(frozen=True)
class SetTrailTolerance:
    value: Union[TrailTolerance, str]


Action = Union[SetSensorSize, SetPixelWidth, SetFocalLength, SetFNumber, SetTrailTolerance]

# Numeric fields editable as free text, with the parser and target field for each
_TEXT_FIELDS = {
    SetPixelWidth: ('pixel_width', parse_integer),
    SetFocalLength: ('focal_length', parse_integer),
    SetFNumber: ('f_number', parse_tenths),
}


# ============================================================================
# PARAMETER STORE
# ============================================================================

class ParameterStore:
    """
    Owner of the canonical ParameterSet.

    All mutation goes through dispatch(). Each successful dispatch recomputes
    the derived exposure time before returning, so readers never observe a
    value computed from an older parameter set.

    Text entry for numeric fields is shadowed by the last dispatched raw
    string, which is what a text box should echo back. Unparsable text is kept
    in the shadow but leaves the canonical value untouched.
    """

    def __init__(self, params: Optional[ParameterSet] = None):
        self._params = params if params is not None else ParameterSet()
        self._raw_text: Dict[str, str] = {
            field: format_number(getattr(self._params, field))
            for field, _ in _TEXT_FIELDS.values()
        }
        self._exposure_time = self._derive()

    def _derive(self, p: Optional[ParameterSet] = None) -> float:
        p = p if p is not None else self._params
        return utils.compute_exposure_time(
            p.sensor_size.value,
            p.pixel_width,
            p.focal_length,
            p.f_number,
            p.trail_tolerance.value,
        )

    def dispatch(self, action: Action) -> bool:
        """
        Apply an action to the parameter set.

        Args:
            action: One of SetSensorSize, SetPixelWidth, SetFocalLength,
                    SetFNumber, SetTrailTolerance

        Returns:
            True if the canonical state was updated, False if the payload was
            unparsable text (kept for re-display only)

        Raises:
            TypeError: If action is not one of the five action types
        """
        if isinstance(action, SetSensorSize):
            candidate = replace(self._params, sensor_size=SensorSize(action.value))
        elif isinstance(action, SetTrailTolerance):
            candidate = replace(self._params, trail_tolerance=TrailTolerance(action.value))
        elif type(action) in _TEXT_FIELDS:
            field, parse = _TEXT_FIELDS[type(action)]
            parsed = parse(action.raw)
            if isinstance(action.raw, str):
                self._raw_text[field] = action.raw
            elif parsed is not None:
                self._raw_text[field] = format_number(parsed)
            if parsed is None:
                return False
            candidate = replace(self._params, **{field: parsed})
        else:
            raise TypeError(f'Unsupported action: {action!r}')

        # Derive before committing so a failure leaves the previous state intact
        exposure_time = self._derive(candidate)
        self._params = candidate
        self._exposure_time = exposure_time
        return True

    # ------------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------------

    @property
    def params(self) -> ParameterSet:
        return self._params

    @property
    def sensor_size(self) -> SensorSize:
        return self._params.sensor_size

    @property
    def pixel_width(self) -> int:
        return self._params.pixel_width

    @property
    def focal_length(self) -> int:
        return self._params.focal_length

    @property
    def f_number(self) -> float:
        return self._params.f_number

    @property
    def trail_tolerance(self) -> TrailTolerance:
        return self._params.trail_tolerance

    @property
    def pixel_pitch(self) -> float:
        """Pixel pitch in micrometers for the current sensor and resolution."""
        return utils.compute_pixel_pitch(self._params.sensor_size.value, self._params.pixel_width)

    @property
    def exposure_time(self) -> float:
        """Maximum exposure in seconds, full precision (may be inf)."""
        return self._exposure_time

    @property
    def display_exposure_time(self) -> float:
        """Exposure time rounded for display."""
        return round(self._exposure_time, EXPOSURE_DISPLAY_DECIMALS)

    def raw_text(self, field: str) -> str:
        """
        Get the text a free-text control should show for a numeric field.

        Args:
            field: 'pixel_width', 'focal_length' or 'f_number'

        Returns:
            Last dispatched raw string, or the formatted value after a
            numeric (slider) dispatch

        Raises:
            KeyError: If field is not a text-editable field
        """
        return self._raw_text[field]


# ============================================================================
# PLOT CONFIG
# ============================================================================

@dataclass
class PlotConfig:
    """
    Centralized styling for the exposure chart.

    Attributes:
        color_curve: Line color for the exposure curve (blue)
        color_marker: Marker color for the current focal length (orange)
        curve_line_width: Width of the exposure curve
        marker_size: Size of the current-setting marker
        default_margin_l/r/t/b: Plot margins (left/right/top/bottom)
        height: Chart height in pixels
        axis_type_y: Plotly axis type for exposure time ('log' spreads the
            short-focal-length end of the curve)
    """

    color_curve: str = '#56B4E9'  # Blue
    color_marker: str = '#E69F00'  # Orange

    curve_line_width: int = 2
    marker_size: int = 12

    default_margin_l: int = 50
    default_margin_r: int = 20
    default_margin_t: int = 30
    default_margin_b: int = 50
    height: int = 360

    axis_type_y: str = 'log'

    def get_default_margin(self) -> Dict[str, int]:
        """
        Get default margin dictionary for Plotly layouts.

        Returns:
            Dictionary with keys 'l', 'r', 't', 'b' for margins
        """
        return dict(
            l=self.default_margin_l,
            r=self.default_margin_r,
            t=self.default_margin_t,
            b=self.default_margin_b
        )


# Create global plot configuration instance
PLOT_CONFIG = PlotConfig()


@dataclass
class UIState:
    """
    Presentation-side flags.

    Attributes:
        updating: Set while controls are being re-synced from the store so
            their change events do not dispatch again
    """
    updating: bool = False
