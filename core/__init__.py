"""
core package

Core application components including the parameter store, constants, and
input parsing.
"""

from .state import (
    SensorSize,
    TrailTolerance,
    ParameterSet,
    SetSensorSize,
    SetPixelWidth,
    SetFocalLength,
    SetFNumber,
    SetTrailTolerance,
    Action,
    ParameterStore,
    PlotConfig,
    PLOT_CONFIG,
    UIState,
)
from .config import load_config, save_config
from .constants import (
    SENSOR_PHYSICAL_WIDTH_UM,
    TRAIL_COEFFICIENT,
    SENSOR_SIZE_OPTIONS,
    TRAIL_TOLERANCE_OPTIONS,
    PIXEL_WIDTH_MIN,
    PIXEL_WIDTH_MAX,
    FOCAL_LENGTH_MIN,
    FOCAL_LENGTH_MAX,
    F_NUMBER_MIN,
    F_NUMBER_MAX,
    F_NUMBER_STEP,
    EXPOSURE_DISPLAY_DECIMALS,
    PIXEL_PITCH_DISPLAY_DECIMALS,
    CURVE_POINTS,
    RECONNECT_TIMEOUT,
    NPF_THEORY_URL,
)
from .validation import (
    parse_integer,
    parse_decimal,
    parse_tenths,
    round_to_tenth,
    format_number,
)

__all__ = [
    # State
    'SensorSize',
    'TrailTolerance',
    'ParameterSet',
    'SetSensorSize',
    'SetPixelWidth',
    'SetFocalLength',
    'SetFNumber',
    'SetTrailTolerance',
    'Action',
    'ParameterStore',
    'PlotConfig',
    'PLOT_CONFIG',
    'UIState',
    # Config
    'load_config',
    'save_config',
    # Constants
    'SENSOR_PHYSICAL_WIDTH_UM',
    'TRAIL_COEFFICIENT',
    'SENSOR_SIZE_OPTIONS',
    'TRAIL_TOLERANCE_OPTIONS',
    'PIXEL_WIDTH_MIN',
    'PIXEL_WIDTH_MAX',
    'FOCAL_LENGTH_MIN',
    'FOCAL_LENGTH_MAX',
    'F_NUMBER_MIN',
    'F_NUMBER_MAX',
    'F_NUMBER_STEP',
    'EXPOSURE_DISPLAY_DECIMALS',
    'PIXEL_PITCH_DISPLAY_DECIMALS',
    'CURVE_POINTS',
    'RECONNECT_TIMEOUT',
    'NPF_THEORY_URL',
    # Validation
    'parse_integer',
    'parse_decimal',
    'parse_tenths',
    'round_to_tenth',
    'format_number',
]
